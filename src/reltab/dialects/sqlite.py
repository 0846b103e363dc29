"""
SQLite dialect implementation.
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
REAL_TYPE = ColumnType("REAL", ColumnKind.REAL)
TEXT_TYPE = ColumnType("TEXT", ColumnKind.STRING)
BOOLEAN_TYPE = ColumnType("BOOLEAN", ColumnKind.BOOLEAN)
TIMESTAMP_TYPE = ColumnType("TIMESTAMP", ColumnKind.TIMESTAMP)
BLOB_TYPE = ColumnType("BLOB", ColumnKind.BLOB)


class SQLiteDialect(BaseSQLDialect):
    """
    SQLite dialect keyed by declared column types.
    """

    dialect_name: Final[str] = "sqlite"
    require_subquery_alias: Final[bool] = False
    core_column_types: Final[CoreColumnTypes] = freeze_core_column_types(
        {
            ColumnKind.INTEGER: INTEGER_TYPE,
            ColumnKind.REAL: REAL_TYPE,
            ColumnKind.STRING: TEXT_TYPE,
            ColumnKind.BOOLEAN: BOOLEAN_TYPE,
        }
    )
    column_types: Final[ColumnTypeMap] = freeze_column_types(
        {
            "INTEGER": INTEGER_TYPE,
            "INT": INTEGER_TYPE,
            "BIGINT": INTEGER_TYPE,
            "REAL": REAL_TYPE,
            "DOUBLE": REAL_TYPE,
            "FLOAT": REAL_TYPE,
            "NUMERIC": REAL_TYPE,
            "TEXT": TEXT_TYPE,
            "VARCHAR": TEXT_TYPE,
            "BOOLEAN": BOOLEAN_TYPE,
            "TIMESTAMP": TIMESTAMP_TYPE,
            "DATETIME": TIMESTAMP_TYPE,
            "BLOB": BLOB_TYPE,
        }
    )


def get_sqlite_dialect() -> SQLiteDialect:
    return SQLiteDialect.get_instance()
