"""Helpers to load player catalog CSVs and emit canonical players."""

from __future__ import annotations

import csv
import logging
import re
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from pydantic import BaseModel

from footguess.config import UNKNOWN, get_continent, get_position_category
from footguess.models import Player


logger = logging.getLogger(__name__)

DEFAULT_CATALOG_MAPPING: dict[str, str] = {
    "player_id": "id",
    "name": "name",
    "nationality": "nationality",
    "position": "position",
    "club": "club",
    "league": "league",
    "age": "age",
    "height": "height",
    "dominant_foot": "dominant_foot",
    "career_start": "career_start",
    "career_end": "career_end",
    "image_url": "image_url",
    "club_image_url": "club_image_url",
    "nationality_image_url": "nationality_image_url",
}

# Whole number with an optional trailing unit, e.g. "178 cm".
_INT_WITH_UNIT = re.compile(r"^\s*(-?\d+)\s*[a-zA-Z]*\s*$")

_FOOT_ALIASES = {
    "l": "Left",
    "left": "Left",
    "r": "Right",
    "right": "Right",
}


class CatalogRow(BaseModel):
    """Raw string view of one catalog row, before parsing."""

    raw_id: Optional[str] = None
    raw_name: str
    raw_nationality: str
    raw_position: str
    raw_club: str
    raw_league: str
    raw_age: str
    raw_height: str
    raw_dominant_foot: str
    raw_career_start: str
    raw_career_end: Optional[str] = None
    image_url: Optional[str] = None
    club_image_url: Optional[str] = None
    nationality_image_url: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, str], mapping: Mapping[str, str]) -> "CatalogRow":
        def extract(key: str, *, default: Optional[str] = None) -> Optional[str]:
            spec = mapping.get(key, DEFAULT_CATALOG_MAPPING.get(key))
            if spec is None:
                return default
            if "|" in spec:
                parts = [row.get(col.strip(), "").strip() for col in spec.split("|")]
                parts = [part for part in parts if part]
                return " ".join(parts) if parts else default
            value = row.get(spec)
            return value.strip() if value is not None else default

        return cls(
            raw_id=extract("player_id"),
            raw_name=extract("name", default=""),
            raw_nationality=extract("nationality", default=""),
            raw_position=extract("position", default=""),
            raw_club=extract("club", default=""),
            raw_league=extract("league", default=""),
            raw_age=extract("age", default=""),
            raw_height=extract("height", default=""),
            raw_dominant_foot=extract("dominant_foot", default=""),
            raw_career_start=extract("career_start", default=""),
            raw_career_end=extract("career_end"),
            image_url=extract("image_url"),
            club_image_url=extract("club_image_url"),
            nationality_image_url=extract("nationality_image_url"),
        )


def load_catalog_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[CatalogRow]:
    mapping = mapping or DEFAULT_CATALOG_MAPPING
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        rows = [CatalogRow.from_mapping(row, mapping) for row in reader]
    return rows


def _parse_int(raw: Optional[str], field: str) -> int:
    match = _INT_WITH_UNIT.match(raw or "")
    if match is None:
        raise ValueError(f"{field} '{raw}' is not an integer")
    return int(match.group(1))


def _parse_optional_int(raw: Optional[str], field: str) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    return _parse_int(raw, field)


def _parse_foot(raw: str) -> str:
    foot = _FOOT_ALIASES.get(raw.strip().lower())
    if foot is None:
        raise ValueError(f"dominant foot '{raw}' must be Left or Right")
    return foot


def rows_to_players(rows: Sequence[CatalogRow]) -> List[Player]:
    """Parse catalog rows, classifying continent and position category once."""

    players: List[Player] = []
    seen_ids: set[int] = set()
    next_id = 1
    for index, row in enumerate(rows, start=1):
        try:
            if row.raw_id:
                player_id = _parse_int(row.raw_id, "id")
            else:
                while next_id in seen_ids:
                    next_id += 1
                player_id = next_id
            if player_id in seen_ids:
                raise ValueError(f"duplicate player id {player_id}")

            continent = get_continent(row.raw_nationality)
            if continent == UNKNOWN:
                logger.warning("No continent known for nationality %r (%s)", row.raw_nationality, row.raw_name)
            position_category = get_position_category(row.raw_position)
            if position_category == UNKNOWN:
                logger.warning("No category known for position %r (%s)", row.raw_position, row.raw_name)

            player = Player(
                id=player_id,
                name=row.raw_name,
                nationality=row.raw_nationality,
                continent=continent,
                position=row.raw_position,
                position_category=position_category,
                club=row.raw_club,
                league=row.raw_league,
                age=_parse_int(row.raw_age, "age"),
                height=_parse_int(row.raw_height, "height"),
                dominant_foot=_parse_foot(row.raw_dominant_foot),
                career_start=_parse_int(row.raw_career_start, "career_start"),
                career_end=_parse_optional_int(row.raw_career_end, "career_end"),
                image_url=row.image_url,
                club_image_url=row.club_image_url,
                nationality_image_url=row.nationality_image_url,
            )
        except ValueError as exc:
            raise ValueError(f"catalog row {index} ({row.raw_name or 'unnamed'}): {exc}") from exc

        seen_ids.add(player.id)
        players.append(player)
    return players


def load_players_from_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[Player]:
    rows = load_catalog_csv(path, mapping=mapping)
    return rows_to_players(rows)
