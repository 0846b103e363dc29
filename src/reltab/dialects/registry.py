"""
Name-based lookup over the built-in dialects.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .base import BaseSQLDialect, SQLDialect
from .duckdb import DuckDBDialect
from .postgres import PostgresDialect
from .sqlite import SQLiteDialect

_REGISTRY: Mapping[str, type[BaseSQLDialect]] = MappingProxyType(
    {
        DuckDBDialect.dialect_name: DuckDBDialect,
        PostgresDialect.dialect_name: PostgresDialect,
        SQLiteDialect.dialect_name: SQLiteDialect,
    }
)


def get_dialect(name: str) -> SQLDialect:
    key = (name or "").lower()
    if key not in _REGISTRY:
        available = ", ".join(available_dialects())
        raise KeyError(f"Unknown dialect '{name}'. Available: {available}")
    return _REGISTRY[key].get_instance()


def available_dialects() -> list[str]:
    return sorted(_REGISTRY)
