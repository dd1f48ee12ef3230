# catalog.py
# Region catalog store: validated, read-only view over catalog_data.CATALOG.
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

from catalog_data import CATALOG
from materials import GENERAL_WASTE_KEYWORDS, MaterialClass, keywords_for

logger = logging.getLogger(__name__)

DEFAULT_REGION = "US"


class CatalogError(ValueError):
    """Raised when region data fails validation at load time."""


@dataclass(frozen=True)
class BinDefinition:
    name: str
    color: str
    description: str = ""
    items: tuple[str, ...] = ()
    notes: str = ""

    def mentions(self, keywords) -> bool:
        """True if any keyword is a case-insensitive substring of name or description."""
        haystack = f"{self.name} {self.description}".lower()
        return any(k.lower() in haystack for k in keywords)

    def lists_item(self, word: str) -> bool:
        w = word.lower()
        return any(w in item.lower() for item in self.items)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "color": self.color,
            "description": self.description,
            "items": list(self.items),
            "notes": self.notes,
        }


@dataclass(frozen=True)
class Region:
    code: str
    name: str
    bins: tuple[BinDefinition, ...]

    def general_waste_bin(self) -> BinDefinition | None:
        for b in self.bins:
            if b.mentions(GENERAL_WASTE_KEYWORDS):
                return b
        return None


def _build_bin(code: str, raw: dict) -> BinDefinition:
    name = (raw.get("name") or "").strip()
    if not name:
        raise CatalogError(f"{code}: bin without a name")
    items = raw.get("items") or []
    if isinstance(items, str) or not all(isinstance(i, str) for i in items):
        raise CatalogError(f"{code}: items of '{name}' must be a list of strings")
    return BinDefinition(
        name=name,
        color=raw.get("color") or "gray",
        description=raw.get("description") or "",
        items=tuple(items),
        notes=raw.get("notes") or "",
    )


def build_region(code: str, raw: dict) -> Region:
    """
    Normalize and validate one region record.
    Rejects duplicate bin names and regions without a general-waste bin,
    since that bin is the classifier's fallback target.
    """
    code = code.strip().upper()
    bins = tuple(_build_bin(code, b) for b in raw.get("bins", []))

    seen = set()
    for b in bins:
        if b.name in seen:
            raise CatalogError(f"{code}: duplicate bin name '{b.name}'")
        seen.add(b.name)

    region = Region(code=code, name=raw.get("name") or code, bins=bins)
    if region.general_waste_bin() is None:
        raise CatalogError(f"{code}: no general waste bin")
    return region


def coverage_gaps(regions: dict[str, Region]) -> list[tuple[str, MaterialClass]]:
    """
    (region, material) pairs that no bin names or lists, so the classifier
    can only answer them with the general-waste fallback. Usually a sign the
    region's descriptions use local terms the keyword list doesn't know.
    """
    gaps = []
    for code, region in regions.items():
        for material in MaterialClass:
            if material is MaterialClass.TRASH:
                continue
            kws = keywords_for(material)
            if any(b.mentions(kws) or b.lists_item(material.value) for b in region.bins):
                continue
            gaps.append((code, material))
    return gaps


class CatalogStore:
    def __init__(self, regions: dict[str, Region], default_region: str = DEFAULT_REGION,
                 preferred_region: str | None = None):
        default_region = default_region.strip().upper()
        if default_region not in regions:
            raise CatalogError(f"default region '{default_region}' is not in the catalog")
        self._regions = dict(regions)
        self._by_name = {r.name.lower(): code for code, r in regions.items()}
        self.default_region = default_region
        self.preferred_region = (preferred_region or default_region).strip().upper()

    def __contains__(self, code) -> bool:
        return self._lookup(code) is not None

    def __len__(self) -> int:
        return len(self._regions)

    def _lookup(self, region: str | None) -> str | None:
        if not region or not isinstance(region, str):
            return None
        key = region.strip()
        if key.upper() in self._regions:
            return key.upper()
        return self._by_name.get(key.lower())

    def resolve_region(self, region: str | None) -> str:
        """Region code actually used for `region`; unknown codes fall back to the default."""
        code = self._lookup(region)
        if code is None:
            if region:
                logger.debug("unknown region %r, using %s", region, self.default_region)
            return self.default_region
        return code

    def get_region(self, region: str | None) -> Region:
        return self._regions[self.resolve_region(region)]

    def get_catalog(self, region: str | None) -> tuple[BinDefinition, ...]:
        return self.get_region(region).bins

    def list_regions(self) -> list[tuple[str, str]]:
        """(code, display name) sorted by display name, preferred region first."""
        rows = sorted(((c, r.name) for c, r in self._regions.items()), key=lambda x: x[1].lower())
        pinned = [r for r in rows if r[0] == self.preferred_region]
        return pinned + [r for r in rows if r[0] != self.preferred_region]


def load_regions(raw: dict) -> dict[str, Region]:
    regions = {}
    for code, record in raw.items():
        region = build_region(code, record)
        regions[region.code] = region
    for code, material in coverage_gaps(regions):
        logger.warning("catalog gap: no %s bin in region %s, falls back to general waste",
                       material.value, code)
    return regions


@lru_cache
def get_store(default_region: str = DEFAULT_REGION) -> CatalogStore:
    """Build the store from the bundled catalog once per default region."""
    return CatalogStore(load_regions(CATALOG), default_region=default_region)
