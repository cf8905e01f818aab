"""Player catalog lookups."""

from .search import SEARCH_FIELDS, PlayerSearchIndex

__all__ = ["SEARCH_FIELDS", "PlayerSearchIndex"]
