"""Domain error taxonomy raised by :class:`strikers.client.OmegaStrikers`."""
from __future__ import annotations

import enum
from typing import Optional


class ErrorKind(enum.Enum):
    INVALID_CREDENTIALS = "InvalidCredentials"
    INVALID_REGION = "InvalidRegion"
    INVALID_PAGE_SIZE = "InvalidPageSize"
    INVALID_USERNAME = "InvalidUsername"
    NOT_FOUND = "NotFound"
    UNAUTHORIZED = "Unauthorized"
    NO_RANKED_HISTORY = "NoRankedHistory"
    UNKNOWN = "Unknown"


class StrikersError(RuntimeError):
    """Base class; every instance is tagged with exactly one :class:`ErrorKind`."""

    kind: ErrorKind = ErrorKind.UNKNOWN
    default_message = "Unknown error."

    def __init__(self, message: Optional[str] = None, *, cause: Optional[BaseException] = None):
        super().__init__(message or self.default_message)
        self.cause = cause

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value!r}, message={str(self)!r})"


class InvalidCredentials(StrikersError):
    kind = ErrorKind.INVALID_CREDENTIALS
    default_message = "Token or Token Refresh invalid."


class InvalidRegion(StrikersError):
    kind = ErrorKind.INVALID_REGION
    default_message = "Invalid region defined."


class InvalidPageSize(StrikersError):
    kind = ErrorKind.INVALID_PAGE_SIZE
    default_message = "Minimum players is 1 and Max players is 10000."


class InvalidUsername(StrikersError):
    kind = ErrorKind.INVALID_USERNAME
    default_message = "Username must be a non-empty string."


class NotFound(StrikersError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Player not found."


class Unauthorized(StrikersError):
    kind = ErrorKind.UNAUTHORIZED
    default_message = "Token or Token Refresh not authorized."


class NoRankedHistory(StrikersError):
    kind = ErrorKind.NO_RANKED_HISTORY
    default_message = (
        "This player either doesn't have any ranked games or is not among "
        "the top 10,000 players."
    )


class Unknown(StrikersError):
    kind = ErrorKind.UNKNOWN


_BY_KIND = {
    cls.kind: cls
    for cls in (
        InvalidCredentials,
        InvalidRegion,
        InvalidPageSize,
        InvalidUsername,
        NotFound,
        Unauthorized,
        NoRankedHistory,
        Unknown,
    )
}


def error_for(kind: ErrorKind, message: Optional[str] = None, *, cause: Optional[BaseException] = None) -> StrikersError:
    return _BY_KIND[kind](message, cause=cause)
