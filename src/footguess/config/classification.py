"""Country and position groupings used for partial-match feedback."""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Tuple


UNKNOWN = "Unknown"

_CONTINENT_COUNTRIES: Dict[str, Tuple[str, ...]] = {
    "Europe": (
        "England",
        "Spain",
        "France",
        "Germany",
        "Italy",
        "Portugal",
        "Netherlands",
        "Belgium",
        "Croatia",
        "Wales",
        "Scotland",
        "Norway",
        "Sweden",
        "Denmark",
        "Switzerland",
        "Austria",
        "Poland",
        "Ukraine",
        "Russia",
        "Serbia",
        "Greece",
    ),
    "South America": (
        "Brazil",
        "Argentina",
        "Uruguay",
        "Colombia",
        "Chile",
        "Peru",
        "Ecuador",
        "Venezuela",
        "Paraguay",
    ),
    "North America": (
        "United States",
        "Mexico",
        "Canada",
        "Jamaica",
        "Costa Rica",
    ),
    "Africa": (
        "Senegal",
        "Egypt",
        "Morocco",
        "Nigeria",
        "Ghana",
        "Cameroon",
        "Ivory Coast",
        "Algeria",
    ),
    # Australia plays in the AFC.
    "Asia": (
        "Japan",
        "South Korea",
        "China",
        "Iran",
        "Saudi Arabia",
        "Qatar",
        "Australia",
    ),
}

_POSITION_CATEGORIES: Dict[str, Tuple[str, ...]] = {
    "Attack": ("Forward", "Striker", "Center-Forward", "Winger"),
    "Midfield": (
        "Midfielder",
        "Central Midfielder",
        "Defensive Midfielder",
        "Attacking Midfielder",
    ),
    "Defense": ("Defender", "Center-Back", "Full-Back", "Left-Back", "Right-Back"),
    "Goalkeeper": ("Goalkeeper",),
}


def _key(value: str) -> str:
    return " ".join(value.split()).casefold()


def _invert(groups: Mapping[str, Iterable[str]]) -> Dict[str, str]:
    lookup: Dict[str, str] = {}
    for group, members in groups.items():
        for member in members:
            lookup.setdefault(_key(member), group)
    return lookup


_CONTINENT_LOOKUP = _invert(_CONTINENT_COUNTRIES)
_POSITION_LOOKUP = _invert(_POSITION_CATEGORIES)


def iter_continents() -> Iterable[str]:
    return _CONTINENT_COUNTRIES.keys()


def get_continent(country: str) -> str:
    """Continent for a country name, or ``"Unknown"``."""

    return _CONTINENT_LOOKUP.get(_key(country or ""), UNKNOWN)


def get_position_category(position: str) -> str:
    """Coarse bucket (Attack, Midfield, Defense, Goalkeeper) for a position label."""

    return _POSITION_LOOKUP.get(_key(position or ""), UNKNOWN)
