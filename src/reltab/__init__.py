"""
reltab public package initialization.

Exposes the canonical column type model and the built-in SQL dialects.
"""

from .core import ColumnKind, ColumnType, ColumnTypeMap, CoreColumnTypes  # noqa: F401
from .dialects import (  # noqa: F401
    BaseSQLDialect,
    DuckDBDialect,
    PostgresDialect,
    SQLDialect,
    SQLiteDialect,
    available_dialects,
    get_dialect,
    get_duckdb_dialect,
    get_postgres_dialect,
    get_sqlite_dialect,
)
from .utils import configure_logging  # noqa: F401

__all__ = [
    "ColumnKind",
    "ColumnType",
    "ColumnTypeMap",
    "CoreColumnTypes",
    "SQLDialect",
    "BaseSQLDialect",
    "DuckDBDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "available_dialects",
    "get_dialect",
    "get_duckdb_dialect",
    "get_postgres_dialect",
    "get_sqlite_dialect",
    "configure_logging",
]
