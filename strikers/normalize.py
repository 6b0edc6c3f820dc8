"""Shape raw service payloads into the stable records in :mod:`strikers.models`."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Dict, List, Optional

from .errors import NoRankedHistory, Unknown
from .models import (
    UNTRACKED_DIVISION,
    LeaderboardPage,
    LevelRecord,
    MasteryRecord,
    RankedRecord,
    Standing,
)
from .utils import as_int

LEVEL_FIELDS = ("currentLevel", "currentLevelXp", "xpToNextLevel", "totalXp")
MASTERY_FIELDS = ("totalXp", "maxTier", "currentTier", "currentTierXp", "xpToNextTier")


def _malformed(what: str, reason: str) -> Unknown:
    return Unknown(f"Malformed {what} response: {reason}", cause=ValueError(reason))


def _entries(payload: Any, key: str, what: str) -> List[Mapping[str, Any]]:
    if isinstance(payload, Mapping):
        payload = payload.get(key, [])
    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes, bytearray)):
        raise _malformed(what, f"expected a list of {key}")
    return [entry for entry in payload if isinstance(entry, Mapping)]


def _require_counts(record: Mapping[str, Any], fields: Sequence[str], what: str) -> None:
    for field in fields:
        value = as_int(record.get(field))
        if value is None:
            raise _malformed(what, f"{field} is missing or not an integer")
        if value < 0:
            raise _malformed(what, f"{field} is negative")


def _require_header(record: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(record, Mapping):
        raise _malformed(what, "expected an object")
    if not isinstance(record.get("playerId"), str):
        raise _malformed(what, "playerId is missing")
    return record


def normalize_leaderboard(payload: Any, page_size: int) -> LeaderboardPage:
    # service order is authoritative; only trim
    return [dict(entry) for entry in _entries(payload, "players", "leaderboard")[:page_size]]


def locate_ranked_entry(
    payload: Any, player_id: str, username: Optional[str] = None
) -> Optional[Mapping[str, Any]]:
    entries = _entries(payload, "players", "ranked")
    for entry in entries:
        if entry.get("playerId") == player_id:
            return entry
    if username:
        for entry in entries:
            if entry.get("username") == username:
                return entry
    return None


def standing_of(entry: Mapping[str, Any]) -> Optional[Standing]:
    rank = as_int(entry.get("rank"))
    if rank is None or rank <= 0:
        return None
    progress = entry.get("progressToNext")
    if isinstance(progress, bool) or not isinstance(progress, (int, float)):
        progress = 0
    return Standing(
        rank=rank,
        division_id=str(entry.get("currentDivisionId") or UNTRACKED_DIVISION),
        progress_to_next=progress,
    )


def apply_standing(entry: Mapping[str, Any], standing: Optional[Standing]) -> RankedRecord:
    record: Dict[str, Any] = dict(entry)
    if standing is None:
        record["rank"] = 0
        record["currentDivisionId"] = UNTRACKED_DIVISION
        record["progressToNext"] = 0
    else:
        record["rank"] = standing.rank
        record["currentDivisionId"] = standing.division_id
        record["progressToNext"] = standing.progress_to_next
    return record  # type: ignore[return-value]


def normalize_ranked(payload: Any, player_id: str, username: Optional[str] = None) -> RankedRecord:
    entry = locate_ranked_entry(payload, player_id, username)
    if entry is None:
        raise NoRankedHistory()
    return apply_standing(entry, standing_of(entry))


def normalize_level(payload: Any) -> LevelRecord:
    record = _require_header(payload, "level")
    _require_counts(record, LEVEL_FIELDS, "level")
    return dict(record)  # type: ignore[return-value]


def normalize_mastery(payload: Any) -> MasteryRecord:
    record = _require_header(payload, "mastery")
    masteries = record.get("characterMasteries")
    if not isinstance(masteries, list):
        raise _malformed("mastery", "characterMasteries is not a list")
    for entry in masteries:
        if not isinstance(entry, Mapping) or not isinstance(entry.get("characterAssetName"), str):
            raise _malformed("mastery", "character entry is missing characterAssetName")
        _require_counts(entry, MASTERY_FIELDS, "mastery")
    return dict(record)  # type: ignore[return-value]
