# materials.py
# Material classes the image model (or a search box) can produce, the words
# used to find them in a region's bin catalog, and the advice shown with them.
from enum import Enum


class MaterialClass(str, Enum):
    PAPER = "Paper"
    CARDBOARD = "Cardboard"
    PLASTIC = "Plastic"
    GLASS = "Glass"
    METAL = "Metal"
    ORGANIC = "Organic"
    TRASH = "Trash"
    BATTERY = "Battery"
    EWASTE = "Ewaste"


# Keywords are matched case-insensitively: as substrings against bin
# name/description, and as whole words (plural allowed) against free-text
# queries, so "can" finds "soda cans" but not "scanner".
MATERIAL_KEYWORDS = {
    MaterialClass.PAPER: ["paper", "newspaper", "magazine", "envelope", "leaflet"],
    MaterialClass.CARDBOARD: ["cardboard", "corrugated", "box"],
    MaterialClass.PLASTIC: ["plastic", "styrofoam", "polystyrene"],
    MaterialClass.GLASS: ["glass", "jar"],
    MaterialClass.METAL: ["metal", "can", "tins", "aluminium", "aluminum", "foil"],
    MaterialClass.ORGANIC: [
        "organic", "compost", "food", "kitchen", "garden",
        "banana", "peel", "fruit", "vegetable", "coffee grounds",
    ],
    MaterialClass.TRASH: [
        "general", "residual", "landfill", "garbage", "trash",
        "burnable", "non-recyclable", "restmüll", "rubbish",
    ],
    MaterialClass.BATTERY: ["battery", "batteries", "accumulator"],
    MaterialClass.EWASTE: ["electronic", "e-waste", "appliance", "phone", "laptop", "charger"],
}

# General-waste keywords double as the fallback search and the catalog
# integrity check.
GENERAL_WASTE_KEYWORDS = MATERIAL_KEYWORDS[MaterialClass.TRASH]

ADVICE = {
    MaterialClass.PAPER: "Keep paper clean and dry; wet or greasy paper belongs elsewhere.",
    MaterialClass.CARDBOARD: "Flatten boxes and remove excess tape before disposal.",
    MaterialClass.PLASTIC: "Empty and rinse containers; soft film often needs a drop-off point.",
    MaterialClass.GLASS: "Rinse jars and bottles and remove lids; sort by colour where asked.",
    MaterialClass.METAL: "Empty and rinse cans; clean foil can be balled up.",
    MaterialClass.ORGANIC: "Only food and garden waste; no plastic bags, even 'biodegradable' ones.",
    MaterialClass.TRASH: "If it isn't accepted for recycling, put it in general waste; don't wish-cycle.",
    MaterialClass.BATTERY: "Never bin batteries; tape the terminals and use a collection point.",
    MaterialClass.EWASTE: "Take electronics to a take-back scheme or recycling centre.",
}

# Labels some models emit that are not material names.
LABEL_ALIASES = {
    "compost": MaterialClass.ORGANIC,
    "food": MaterialClass.ORGANIC,
    "biological": MaterialClass.ORGANIC,
    "e-waste": MaterialClass.EWASTE,
    "electronics": MaterialClass.EWASTE,
    "batteries": MaterialClass.BATTERY,
    "landfill": MaterialClass.TRASH,
    "garbage": MaterialClass.TRASH,
}


def material_from_label(label: str | None) -> MaterialClass | None:
    """
    Resolve a model/user label to a MaterialClass.
    Tries the enum value case-insensitively, then the alias table.
    Returns None for anything unrecognised.
    """
    if not label or not isinstance(label, str):
        return None
    key = label.strip().lower()
    if not key:
        return None
    for material in MaterialClass:
        if material.value.lower() == key:
            return material
    return LABEL_ALIASES.get(key)


def keywords_for(material: MaterialClass) -> list[str]:
    return MATERIAL_KEYWORDS.get(material, [])
