"""Runtime settings resolved from ``FOOTGUESS_*`` environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping


logger = logging.getLogger(__name__)

PACKAGE_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CATALOG_PATH = PACKAGE_ROOT / "data" / "players.csv"
DEFAULT_DB_PATH = PACKAGE_ROOT.parent / "footguess.sqlite"

STORAGE_BACKENDS = ("sqlite", "memory")

_STORAGE_ENV = "FOOTGUESS_STORAGE"
_DB_PATH_ENV = "FOOTGUESS_DB_PATH"
_CATALOG_PATH_ENV = "FOOTGUESS_CATALOG_PATH"
_MAX_ATTEMPTS_ENV = "FOOTGUESS_MAX_ATTEMPTS"
_SEARCH_LIMIT_ENV = "FOOTGUESS_SEARCH_LIMIT"
_SEARCH_CUTOFF_ENV = "FOOTGUESS_SEARCH_CUTOFF"
_MIN_QUERY_LENGTH_ENV = "FOOTGUESS_MIN_QUERY_LENGTH"


def _env_float(
    env: Mapping[str, str],
    name: str,
    default: float,
    *,
    clamp_min: float | None = None,
    clamp_max: float | None = None,
) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    if clamp_max is not None:
        value = min(clamp_max, value)
    return value


def _env_int(env: Mapping[str, str], name: str, default: int, *, min_value: int | None = None) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _is_memory_database(raw: str) -> bool:
    # The store opens one connection per operation, so memory databases lose their schema.
    if raw == ":memory:":
        return True
    if not raw.startswith("file:"):
        return False
    path, _, query = raw[len("file:") :].partition("?")
    return path == ":memory:" or "mode=memory" in query.split("&")


@dataclass(frozen=True)
class GameSettings:
    storage: str = "sqlite"
    db_path: Path | str = DEFAULT_DB_PATH
    catalog_path: Path = DEFAULT_CATALOG_PATH
    max_attempts: int = 6
    search_limit: int = 10
    search_score_cutoff: float = 70.0
    min_query_length: int = 3

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "GameSettings":
        env = os.environ if env is None else env

        storage = (env.get(_STORAGE_ENV) or "sqlite").strip().lower()
        if storage not in STORAGE_BACKENDS:
            logger.warning("Unknown storage backend %s=%s; using sqlite", _STORAGE_ENV, storage)
            storage = "sqlite"

        db_raw = (env.get(_DB_PATH_ENV) or "").strip()
        db_path: Path | str
        if not db_raw:
            db_path = DEFAULT_DB_PATH
        elif _is_memory_database(db_raw):
            logger.warning(
                "%s=%s is an in-memory database, which does not outlive a connection; using %s",
                _DB_PATH_ENV,
                db_raw,
                DEFAULT_DB_PATH,
            )
            db_path = DEFAULT_DB_PATH
        elif db_raw.startswith("file:"):
            db_path = db_raw
        else:
            db_path = Path(db_raw)

        catalog_raw = (env.get(_CATALOG_PATH_ENV) or "").strip()
        catalog_path = Path(catalog_raw) if catalog_raw else DEFAULT_CATALOG_PATH

        return cls(
            storage=storage,
            db_path=db_path,
            catalog_path=catalog_path,
            max_attempts=_env_int(env, _MAX_ATTEMPTS_ENV, 6, min_value=1),
            search_limit=_env_int(env, _SEARCH_LIMIT_ENV, 10, min_value=1),
            search_score_cutoff=_env_float(env, _SEARCH_CUTOFF_ENV, 70.0, clamp_min=0.0, clamp_max=100.0),
            min_query_length=_env_int(env, _MIN_QUERY_LENGTH_ENV, 3, min_value=1),
        )
