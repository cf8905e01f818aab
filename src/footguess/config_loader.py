"""Persist and load catalog column mappings for ``footguess seed``."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping

from footguess.ingest import DEFAULT_CATALOG_MAPPING


@dataclass
class CatalogProfile:
    """Column mapping for a catalog CSV, keyed by player field.

    Keys must be fields the catalog loader knows about; values are CSV column
    names, or several joined with ``|`` (e.g. ``First|Last`` for ``name``).
    """

    catalog_mapping: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        unknown = sorted(set(self.catalog_mapping) - set(DEFAULT_CATALOG_MAPPING))
        if unknown:
            raise ValueError(
                f"Unknown catalog field(s): {', '.join(unknown)}; "
                f"expected one of {', '.join(DEFAULT_CATALOG_MAPPING)}"
            )
        empty = sorted(key for key, column in self.catalog_mapping.items() if not column.strip("| "))
        if empty:
            raise ValueError(f"No column given for catalog field(s): {', '.join(empty)}")

    def merged(self, overrides: Mapping[str, str]) -> "CatalogProfile":
        """New profile with ``overrides`` taking precedence."""

        return CatalogProfile({**self.catalog_mapping, **overrides})

    @classmethod
    def load(cls, path: Path) -> "CatalogProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(catalog_mapping=data.get("catalog_mapping", {}))

    def save(self, path: Path) -> None:
        payload = {"catalog_mapping": self.catalog_mapping}
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
