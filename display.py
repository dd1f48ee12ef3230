# display.py
# Which input currently owns the result panel: the camera scan or the search
# box. Last writer wins; only the two input events change it.
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class DisplaySource(str, Enum):
    SCAN = "scan"
    SEARCH = "search"


@dataclass(frozen=True)
class DisplayState:
    source: DisplaySource = DisplaySource.SCAN
    scan: dict | None = None
    search: dict | None = None
    query: str = ""

    def on_scan(self, result: dict) -> DisplayState:
        return replace(self, source=DisplaySource.SCAN, scan=result)

    def on_search(self, query: str, result: dict | None) -> DisplayState:
        # a search with no result still takes over, so the "not found" state shows
        return replace(self, source=DisplaySource.SEARCH, search=result, query=query)

    @property
    def current(self) -> dict | None:
        return self.scan if self.source is DisplaySource.SCAN else self.search

    def to_dict(self) -> dict:
        return {
            "source": self.source.value,
            "scan": self.scan,
            "search": self.search,
            "query": self.query,
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> DisplayState:
        if not data:
            return cls()
        try:
            source = DisplaySource(data.get("source", DisplaySource.SCAN.value))
        except ValueError:
            source = DisplaySource.SCAN
        return cls(source=source, scan=data.get("scan"), search=data.get("search"),
                   query=data.get("query") or "")
