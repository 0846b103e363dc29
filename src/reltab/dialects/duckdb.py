"""
DuckDB dialect implementation.
"""

from __future__ import annotations

from typing import Final

from ..core import (
    ColumnKind,
    ColumnType,
    ColumnTypeMap,
    CoreColumnTypes,
    freeze_column_types,
    freeze_core_column_types,
)
from .base import BaseSQLDialect

INTEGER_TYPE = ColumnType("INTEGER", ColumnKind.INTEGER)
REAL_TYPE = ColumnType("DOUBLE", ColumnKind.REAL)
TEXT_TYPE = ColumnType("VARCHAR", ColumnKind.STRING)
BOOL_TYPE = ColumnType("BOOL", ColumnKind.BOOLEAN)
TIMESTAMP_TYPE = ColumnType("TIMESTAMP", ColumnKind.TIMESTAMP)
BLOB_TYPE = ColumnType("BLOB", ColumnKind.BLOB)


class DuckDBDialect(BaseSQLDialect):
    """
    DuckDB dialect quoting column identifiers with single quotes.
    """

    dialect_name: Final[str] = "duckdb"
    require_subquery_alias: Final[bool] = True
    # No timestamp or blob representatives: those columns are only ever
    # reported by DuckDB, never declared by the query engine.
    core_column_types: Final[CoreColumnTypes] = freeze_core_column_types(
        {
            ColumnKind.INTEGER: INTEGER_TYPE,
            ColumnKind.REAL: REAL_TYPE,
            ColumnKind.STRING: TEXT_TYPE,
            ColumnKind.BOOLEAN: BOOL_TYPE,
        }
    )
    column_types: Final[ColumnTypeMap] = freeze_column_types(
        {
            "TINYINT": INTEGER_TYPE,
            "SMALLINT": INTEGER_TYPE,
            "INTEGER": INTEGER_TYPE,
            "BIGINT": INTEGER_TYPE,
            "HUGEINT": INTEGER_TYPE,
            "UTINYINT": INTEGER_TYPE,
            "USMALLINT": INTEGER_TYPE,
            "UINTEGER": INTEGER_TYPE,
            "UBIGINT": INTEGER_TYPE,
            "UHUGEINT": INTEGER_TYPE,
            "DECIMAL": REAL_TYPE,
            "DOUBLE": REAL_TYPE,
            "REAL": REAL_TYPE,
            "FLOAT": REAL_TYPE,
            "TEXT": TEXT_TYPE,
            "VARCHAR": TEXT_TYPE,
            "TIME": TEXT_TYPE,
            "UUID": TEXT_TYPE,
            "INTERVAL": TEXT_TYPE,
            "BOOL": BOOL_TYPE,
            "BOOLEAN": BOOL_TYPE,
            "DATE": TIMESTAMP_TYPE,
            "TIMESTAMP": TIMESTAMP_TYPE,
            "TIMESTAMP_S": TIMESTAMP_TYPE,
            "TIMESTAMP_MS": TIMESTAMP_TYPE,
            "TIMESTAMP_NS": TIMESTAMP_TYPE,
            "TIMESTAMP WITH TIME ZONE": TIMESTAMP_TYPE,
            "BLOB": BLOB_TYPE,
        }
    )

    def quote_col(self, identifier: str) -> str:
        # DuckDB derives column names such as hour("timestamp") without escaping
        # the inner double quotes, so single quotes are the unambiguous choice.
        return f"'{identifier}'"


def get_duckdb_dialect() -> DuckDBDialect:
    return DuckDBDialect.get_instance()
