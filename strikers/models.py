"""Record shapes returned by the statistics client."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, TypedDict

UNTRACKED_DIVISION = "WORLD"


class Organization(TypedDict, total=False):
    organizationId: str
    name: str
    logoId: str


class CharacterUsage(TypedDict):
    characterId: str
    gamesPlayed: int


class SearchMatch(TypedDict, total=False):
    """One candidate returned by a username query."""

    username: str
    playerId: str
    logoId: str
    title: str
    nameplateId: str
    emoticonId: str
    titleId: str
    tags: List[str]
    platformIds: Any
    masteryLevel: int
    organization: Organization


class SearchResults(TypedDict, total=False):
    matches: List[SearchMatch]
    paging: Dict[str, int]


class RankedRecord(SearchMatch, total=False):
    """Ranked standing plus the identity fields copied from the search entry.

    ``rank`` is ``0`` and ``currentDivisionId`` is ``"WORLD"`` for a player
    the service lists without a tracked placement.
    """

    rank: int
    wins: int
    losses: int
    games: int
    topRole: str
    rating: int
    mostPlayedCharacters: List[CharacterUsage]
    currentDivisionId: str
    progressToNext: float


LeaderboardPage = List[RankedRecord]


class LevelRecord(TypedDict):
    timestamp: str
    playerId: str
    currentLevel: int
    currentLevelXp: int
    xpToNextLevel: int
    totalXp: int


class CharacterMastery(TypedDict):
    characterAssetName: str
    totalXp: int
    maxTier: int
    idxHighestTierCollecter: int
    currentTier: int
    currentTierXp: int
    xpToNextTier: int


class MasteryRecord(TypedDict):
    timestamp: str
    playerId: str
    characterMasteries: List[CharacterMastery]


@dataclass(frozen=True)
class Standing:
    """A tracked ranked placement. Untracked players have no ``Standing``."""

    rank: int
    division_id: str
    progress_to_next: float
