"""Pick a single player identifier out of a username query response."""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, List

from .errors import NotFound, Unknown
from .models import SearchMatch

logger = logging.getLogger(__name__)


def search_matches(payload: Any) -> List[SearchMatch]:
    if not isinstance(payload, Mapping):
        raise Unknown("Unexpected search response.", cause=ValueError(repr(payload)[:120]))

    matches = payload.get("matches")
    if matches is None:
        return []
    if not isinstance(matches, Sequence) or isinstance(matches, (str, bytes, bytearray)):
        raise Unknown("Unexpected search response.", cause=ValueError("matches is not a list"))
    return [m for m in matches if isinstance(m, Mapping)]


def select_match(username: str, matches: Sequence[SearchMatch]) -> SearchMatch:
    """Return the candidate whose username equals ``username`` exactly.

    Comparison is case-sensitive. Without an exact hit the first candidate in
    service order is returned, which can be the wrong player for a partial
    query; callers that need certainty should compare ``username`` themselves.
    """
    if not matches:
        raise NotFound()

    for match in matches:
        if match.get("username") == username:
            return match

    fallback = matches[0]
    logger.warning(
        "No exact username match for %r among %d candidates; using %r",
        username,
        len(matches),
        fallback.get("username"),
    )
    return fallback


def resolve(username: str, payload: Any) -> str:
    match = select_match(username, search_matches(payload))
    player_id = match.get("playerId")
    if not isinstance(player_id, str) or not player_id:
        raise Unknown("Search result is missing a player identifier.")
    return player_id
