"""
Classification of ENTSO-E production-source-type (psrType) codes.

The tables here are fixed configuration: a code maps to its full ENTSO-E
label, and the label is reduced to a simplified display category by the
first matching keyword rule.
"""

from __future__ import annotations

from typing import NamedTuple

PSR_TYPE_LABELS: dict[str, str] = {
    "B01": "Biomass",
    "B02": "Fossil Brown coal/Lignite",
    "B03": "Fossil Coal-derived gas",
    "B04": "Fossil Gas",
    "B05": "Fossil Hard coal",
    "B06": "Fossil Oil",
    "B07": "Fossil Oil shale",
    "B08": "Fossil Peat",
    "B09": "Geothermal",
    "B10": "Hydro Pumped Storage",
    "B11": "Hydro Run-of-river and poundage",
    "B12": "Hydro Water Reservoir",
    "B13": "Marine",
    "B14": "Nuclear",
    "B15": "Other renewable",
    "B16": "Solar",
    "B17": "Waste",
    "B18": "Wind Offshore",
    "B19": "Wind Onshore",
    "B20": "Other",
    "B25": "Energy storage",
}

OTHER = "Other"

# Checked in order, first match wins.
CATEGORY_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Solar", ("solar",)),
    ("Wind", ("wind",)),
    ("Hydro", ("hydro",)),
    ("Nuclear", ("nuclear",)),
    ("Biomass", ("biomass",)),
    ("Geothermal", ("geothermal",)),
    ("Natural Gas", ("gas",)),
    ("Coal", ("coal", "lignite")),
    ("Oil", ("oil",)),
    ("Waste", ("waste",)),
    ("Battery", ("battery", "storage")),
)

RENEWABLE_TYPES: frozenset[str] = frozenset(
    {"Hydro", "Wind", "Solar", "Geothermal", "Biomass"}
)

GENERATION_TYPE_COLORS: dict[str, str] = {
    "Nuclear": "#FF6B6B",
    "Coal": "#2F2F2F",
    "Natural Gas": "#4ECDC4",
    "Oil": "#45B7D1",
    "Hydro": "#96CEB4",
    "Wind": "#FFEAA7",
    "Solar": "#FDCB6E",
    "Geothermal": "#E17055",
    "Biomass": "#74B9FF",
    "Waste": "#A29BFE",
    "Battery": "#00B894",
    "Other": "#DCDDE1",
}

FALLBACK_COLOR = "#DCDDE1"


class Classification(NamedTuple):
    category: str
    is_renewable: bool


def label_for(code: str) -> str:
    """Full ENTSO-E label for a psrType code, or "Other" if the code is unknown."""
    return PSR_TYPE_LABELS.get(code.strip().upper(), OTHER)


def simplify_label(label: str) -> str:
    lowered = label.lower()
    for category, keywords in CATEGORY_RULES:
        if any(keyword in lowered for keyword in keywords):
            return category
    return OTHER


def is_renewable(category: str) -> bool:
    return category in RENEWABLE_TYPES


def color_for(category: str) -> str:
    return GENERATION_TYPE_COLORS.get(category, FALLBACK_COLOR)


def classify(code: str) -> Classification:
    """
    Map a psrType code to its display category and renewability.

    Never fails: unrecognised codes degrade to ("Other", False).
    """
    category = simplify_label(label_for(code))
    return Classification(category=category, is_renewable=is_renewable(category))
