"""Persistence layer for the player catalog, daily answers and game sessions."""

from __future__ import annotations

import logging

from footguess.config import GameSettings

from .memory import MemoryGameStore
from .records import GameRecord, GameStore
from .sqlite import SqliteGameStore


logger = logging.getLogger(__name__)


def open_store(settings: GameSettings) -> GameStore:
    """Build the backend named by ``settings.storage``."""

    if settings.storage == "memory":
        logger.info("Using in-memory game storage")
        return MemoryGameStore()
    logger.info("Using SQLite game storage at %s", settings.db_path)
    return SqliteGameStore(settings.db_path)


__all__ = [
    "GameRecord",
    "GameStore",
    "MemoryGameStore",
    "SqliteGameStore",
    "open_store",
]
