"""Static table of supported servers and their query-string fragments."""
from __future__ import annotations

from typing import Dict, Mapping

from .utils import clean_text

REGIONS: Dict[str, str] = {
    "na": "&specificRegion=NorthAmerica",
    "eu": "&specificRegion=Europe",
    "asia": "&specificRegion=Asia",
    "sa": "&specificRegion=SouthAmerica",
    "oce": "&specificRegion=Oceania",
    "jp": "&specificRegion=JapaneseLanguageText",
}


class RegionTable:
    """Case-insensitive lookup over a closed set of region names."""

    def __init__(self, fragments: Mapping[str, str] | None = None):
        source = REGIONS if fragments is None else fragments
        self._fragments = {clean_text(k).lower(): v for k, v in source.items()}

    @staticmethod
    def normalize(name: str | None) -> str:
        return clean_text(name).lower()

    def has(self, name: str | None) -> bool:
        if not isinstance(name, str):
            return False
        return self.normalize(name) in self._fragments

    def to_query_fragment(self, name: str) -> str:
        return self._fragments[self.normalize(name)]


default_regions = RegionTable()
