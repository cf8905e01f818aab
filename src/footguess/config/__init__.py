"""Configuration helpers: classification tables and runtime settings."""

from .classification import UNKNOWN, get_continent, get_position_category, iter_continents
from .settings import DEFAULT_CATALOG_PATH, GameSettings

__all__ = [
    "DEFAULT_CATALOG_PATH",
    "GameSettings",
    "UNKNOWN",
    "get_continent",
    "get_position_category",
    "iter_continents",
]
