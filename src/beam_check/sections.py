"""Section property table.

Maps beam category -> size label -> SectionProperties.  The table is
read-only once built; the packaged table is loaded from ``data/sections.yaml``
on first use and cached.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .config import DEFAULT_SECTIONS_PATH, load_yaml
from .errors import InvalidInputError, SectionNotFoundError
from .models.inputs import SectionProperties

logger = logging.getLogger(__name__)


_default_table_cache: SectionPropertyTable | None = None


class SectionPropertyTable:
    """Read-only lookup of section properties by category and size label."""

    def __init__(self, data: Mapping[str, Mapping[str, Any]]):
        table: dict[str, dict[str, SectionProperties]] = {}
        for category, sizes in data.items():
            if not isinstance(sizes, Mapping):
                raise InvalidInputError(
                    f"Category {category!r} must map size labels to properties"
                )
            entries = {}
            for size, props in sizes.items():
                entries[str(size)] = _as_properties(category, size, props)
            table[str(category)] = entries
        self._table = table

    @classmethod
    def from_yaml(cls, path: str | Path) -> SectionPropertyTable:
        """Build a table from a YAML file of category -> size -> properties."""
        return cls(load_yaml(path))

    @classmethod
    def default(cls) -> SectionPropertyTable:
        """The packaged table of UK steel sections (cached)."""
        global _default_table_cache
        if _default_table_cache is None:
            _default_table_cache = cls.from_yaml(DEFAULT_SECTIONS_PATH)
        return _default_table_cache

    def lookup(self, category: str, size: str) -> SectionProperties:
        """Properties for ``size`` in ``category``.

        Raises:
            SectionNotFoundError: category or size label is not in the table
        """
        try:
            return self._table[category][size]
        except (KeyError, TypeError):
            raise SectionNotFoundError(category, size) from None

    def categories(self) -> list[str]:
        """Category names in table order."""
        return list(self._table)

    def sizes(self, category: str) -> list[str]:
        """Size labels of ``category`` in table order."""
        try:
            return list(self._table[category])
        except (KeyError, TypeError):
            raise SectionNotFoundError(category) from None

    def __contains__(self, key) -> bool:
        try:
            category, size = key
        except (TypeError, ValueError):
            return False
        return category in self._table and size in self._table[category]

    def __len__(self) -> int:
        return sum(len(sizes) for sizes in self._table.values())


def _as_properties(category, size, props) -> SectionProperties:
    if isinstance(props, SectionProperties):
        return props
    if not isinstance(props, Mapping):
        raise InvalidInputError(f"Section {category} {size}: expected a mapping of properties")
    try:
        return SectionProperties(**props)
    except ValidationError as exc:
        raise InvalidInputError(f"Section {category} {size}: {exc}") from exc


def clear_section_cache() -> None:
    """Reset the cached default table (useful in tests)."""
    global _default_table_cache
    _default_table_cache = None
