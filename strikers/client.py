"""Public entry point: the :class:`OmegaStrikers` statistics client."""
from __future__ import annotations

import logging
from typing import Any, Optional

from . import config
from .errors import (
    ErrorKind,
    InvalidCredentials,
    InvalidPageSize,
    InvalidRegion,
    InvalidUsername,
    StrikersError,
    error_for,
)
from .http import StrikersHTTP, TransportError
from .models import LeaderboardPage, LevelRecord, MasteryRecord, RankedRecord
from .normalize import (
    normalize_leaderboard,
    normalize_level,
    normalize_mastery,
    normalize_ranked,
)
from .regions import RegionTable, default_regions
from .resolver import resolve
from .utils import clean_text, format_exception_message, q

logger = logging.getLogger(__name__)


def _translate(err: TransportError, fallback: ErrorKind = ErrorKind.UNKNOWN) -> StrikersError:
    if err.is_unauthorized:
        return error_for(ErrorKind.UNAUTHORIZED, cause=err)
    if fallback is ErrorKind.UNKNOWN:
        return error_for(fallback, f"Unknown error: {format_exception_message(err)}", cause=err)
    return error_for(fallback, cause=err)


class OmegaStrikers:
    """Read-only client for leaderboard, search, ranked, level and mastery data.

    The instance keeps nothing between calls besides its credentials and
    transport, so one client can serve many concurrent operations.

    Usage::

        async with OmegaStrikers(token="...", refresh="...") as client:
            page = await client.leaderboard(10, "eu")
    """

    def __init__(
        self,
        *,
        token: str,
        refresh: str,
        transport: Optional[Any] = None,
        regions: Optional[RegionTable] = None,
        base_url: str = config.BASE_URL,
        timeout: float = config.HTTP_TIMEOUT,
    ):
        if not isinstance(token, str) or not token.strip():
            raise InvalidCredentials()
        if not isinstance(refresh, str) or not refresh.strip():
            raise InvalidCredentials()

        self._token = token
        self._refresh = refresh
        self.regions = regions or default_regions
        self.transport = transport or StrikersHTTP(
            token, refresh, base_url=base_url, timeout=timeout
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> "OmegaStrikers":
        return cls(token=config.STRIKERS_TOKEN, refresh=config.STRIKERS_REFRESH, **kwargs)

    @property
    def token(self) -> str:
        return self._token

    @property
    def refresh(self) -> str:
        return self._refresh

    async def __aenter__(self) -> "OmegaStrikers":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        closer = getattr(self.transport, "close", None)
        if closer is not None:
            await closer()

    # validation

    def _region_fragment(self, region: Optional[str]) -> str:
        if not self.regions.has(region):
            raise InvalidRegion(f"Invalid region defined: {region!r}")
        return self.regions.to_query_fragment(region)

    @staticmethod
    def _username(username: Optional[str]) -> str:
        if not isinstance(username, str) or not clean_text(username):
            raise InvalidUsername()
        return clean_text(username)

    @staticmethod
    def _page_size(players: Any) -> int:
        if isinstance(players, bool) or not isinstance(players, int):
            raise InvalidPageSize(f"Invalid players number: {players!r}")
        if players < config.MIN_PAGE_SIZE or players > config.MAX_PAGE_SIZE:
            raise InvalidPageSize()
        return players

    # operations

    async def leaderboard(self, players: int, region: str) -> LeaderboardPage:
        if not players and not region:
            raise InvalidPageSize("Invalid players number and region.")
        fragment = self._region_fragment(region)
        page_size = self._page_size(players)

        try:
            data = await self.transport.get(
                "/v1/ranked/leaderboard/players",
                f"startRank=0&pageSize={page_size}{fragment}",
            )
        except TransportError as err:
            raise _translate(err) from err
        return normalize_leaderboard(data, page_size)

    async def search(self, username: str) -> str:
        username = self._username(username)
        try:
            data = await self.transport.get("/v1/players", f"usernameQuery={q(username)}")
        except TransportError as err:
            raise _translate(err) from err
        return resolve(username, data)

    async def ranked(self, username: str, region: str) -> RankedRecord:
        username = self._username(username)
        fragment = self._region_fragment(region)
        player_id = await self.search(username)

        try:
            data = await self.transport.get(
                f"/v1/ranked/leaderboard/search/{q(player_id)}",
                f"entriesBefore=1&entriesAfter=1&specificRegion={fragment}",
            )
        except TransportError as err:
            raise _translate(err, ErrorKind.NO_RANKED_HISTORY) from err
        return normalize_ranked(data, player_id, username)

    async def level(self, username: str) -> LevelRecord:
        player_id = await self.search(username)
        try:
            data = await self.transport.get(f"/v1/mastery/{q(player_id)}/player")
        except TransportError as err:
            raise _translate(err) from err
        return normalize_level(data)

    async def mastery(self, username: str) -> MasteryRecord:
        player_id = await self.search(username)
        try:
            data = await self.transport.get(f"/v2/mastery/{q(player_id)}/characters")
        except TransportError as err:
            raise _translate(err) from err
        return normalize_mastery(data)
