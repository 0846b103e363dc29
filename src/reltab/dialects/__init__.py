"""
Dialect registry.
"""

from .base import BaseSQLDialect, SQLDialect
from .duckdb import DuckDBDialect, get_duckdb_dialect
from .postgres import PostgresDialect, get_postgres_dialect
from .registry import available_dialects, get_dialect
from .sqlite import SQLiteDialect, get_sqlite_dialect

__all__ = [
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
]
