# classifier.py
# Maps a material label (from the image model) or a typed query to a bin in
# the user's region. Pure functions over the catalog; nothing here raises.
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Sequence

from catalog import BinDefinition, CatalogStore, get_store
from materials import ADVICE, MATERIAL_KEYWORDS, MaterialClass, keywords_for, material_from_label

logger = logging.getLogger(__name__)

TERMINAL_ADVICE = "Check local guidelines."
GENERAL_WASTE = BinDefinition(name="General Waste", color="gray",
                              description="No matching bin found for this region.")


@dataclass(frozen=True)
class ClassificationResult:
    bin: BinDefinition
    material: MaterialClass
    advice: str
    region: str = ""
    fallback: bool = False

    def to_dict(self) -> dict:
        return {
            "bin": self.bin.to_dict(),
            "material": self.material.value,
            "advice": self.advice,
            "region": self.region,
            "fallback": self.fallback,
        }


def match_bin(material: MaterialClass, bins: Sequence[BinDefinition]) -> BinDefinition | None:
    """
    First bin for `material`, in catalog order:
      1) a material keyword in the bin's name or description
      2) the material name in one of the bin's example items
    """
    kws = keywords_for(material)
    for b in bins:
        if b.mentions(kws):
            return b
    for b in bins:
        if b.lists_item(material.value):
            return b
    return None


def classify_bins(label: str | None, bins: Sequence[BinDefinition] | None,
                  region: str = "") -> ClassificationResult:
    """
    Resolve `label` against an explicit bin list.
    Fallback order:
      1) bin matching the label's material
      2) bin matching general waste
      3) hard-coded "General Waste" result
    Unknown labels are treated as general waste.
    """
    bins = bins or ()
    material = material_from_label(label)
    if material is None:
        logger.debug("unmapped label %r, treating as %s", label, MaterialClass.TRASH.value)
        material = MaterialClass.TRASH
    advice = ADVICE.get(material, TERMINAL_ADVICE)

    found = match_bin(material, bins)
    if found is not None:
        return ClassificationResult(found, material, advice, region,
                                    fallback=material is MaterialClass.TRASH)

    found = match_bin(MaterialClass.TRASH, bins)
    if found is not None:
        return ClassificationResult(found, material, advice, region, fallback=True)

    logger.debug("no general waste bin in region %r", region)
    return ClassificationResult(GENERAL_WASTE, material, TERMINAL_ADVICE, region, fallback=True)


def classify_label(label: str | None, region: str | None,
                   store: CatalogStore | None = None) -> ClassificationResult:
    store = store or get_store()
    code = store.resolve_region(region)
    return classify_bins(label, store.get_catalog(code), region=code)


def _mentions_word(text: str, word: str) -> bool:
    return re.search(rf"\b{re.escape(word)}(?:s|es)?\b", text) is not None


def detect_material(query: str | None) -> MaterialClass | None:
    """First material (declaration order) whose name or keyword occurs in the query."""
    q = query.strip().lower() if isinstance(query, str) else ""
    if not q:
        return None
    for material in MaterialClass:
        words = [material.value.lower()] + [k.lower() for k in MATERIAL_KEYWORDS.get(material, [])]
        if any(_mentions_word(q, w) for w in words):
            return material
    return None


def classify_query(query: str | None, region: str | None,
                   store: CatalogStore | None = None) -> ClassificationResult | None:
    """
    Free-text lookup. Returns None when the query names no known material,
    which callers must show as "not found" rather than a general-waste bin.
    """
    material = detect_material(query)
    if material is None:
        return None
    return classify_label(material.value, region, store=store)
