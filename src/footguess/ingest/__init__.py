"""Input adapters that normalize raw catalog data."""

from .catalog import (
    DEFAULT_CATALOG_MAPPING,
    CatalogRow,
    load_catalog_csv,
    load_players_from_csv,
    rows_to_players,
)

__all__ = [
    "DEFAULT_CATALOG_MAPPING",
    "CatalogRow",
    "load_catalog_csv",
    "load_players_from_csv",
    "rows_to_players",
]
