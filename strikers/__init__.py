"""Async client for the Omega Strikers statistics service."""

from .client import OmegaStrikers
from .errors import (
    ErrorKind,
    InvalidCredentials,
    InvalidPageSize,
    InvalidRegion,
    InvalidUsername,
    NoRankedHistory,
    NotFound,
    StrikersError,
    Unauthorized,
    Unknown,
)
from .http import StrikersHTTP, TransportError
from .regions import RegionTable

__all__ = [
    "OmegaStrikers",
    "StrikersHTTP",
    "TransportError",
    "RegionTable",
    "ErrorKind",
    "StrikersError",
    "InvalidCredentials",
    "InvalidPageSize",
    "InvalidRegion",
    "InvalidUsername",
    "NotFound",
    "Unauthorized",
    "NoRankedHistory",
    "Unknown",
]
