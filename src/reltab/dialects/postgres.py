"""
PostgreSQL dialect implementation.
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

INTEGER_TYPE = ColumnType("integer", ColumnKind.INTEGER)
REAL_TYPE = ColumnType("double precision", ColumnKind.REAL)
TEXT_TYPE = ColumnType("text", ColumnKind.STRING)
BOOLEAN_TYPE = ColumnType("boolean", ColumnKind.BOOLEAN)
TIMESTAMP_TYPE = ColumnType("timestamp with time zone", ColumnKind.TIMESTAMP)
BYTEA_TYPE = ColumnType("bytea", ColumnKind.BLOB)


class PostgresDialect(BaseSQLDialect):
    """
    PostgreSQL dialect keyed by ``format_type()`` names.
    """

    dialect_name: Final[str] = "postgres"
    require_subquery_alias: Final[bool] = True
    core_column_types: Final[CoreColumnTypes] = freeze_core_column_types(
        {
            ColumnKind.INTEGER: INTEGER_TYPE,
            ColumnKind.REAL: REAL_TYPE,
            ColumnKind.STRING: TEXT_TYPE,
            ColumnKind.BOOLEAN: BOOLEAN_TYPE,
            ColumnKind.TIMESTAMP: TIMESTAMP_TYPE,
            ColumnKind.BLOB: BYTEA_TYPE,
        }
    )
    column_types: Final[ColumnTypeMap] = freeze_column_types(
        {
            "smallint": INTEGER_TYPE,
            "integer": INTEGER_TYPE,
            "bigint": INTEGER_TYPE,
            "numeric": REAL_TYPE,
            "real": REAL_TYPE,
            "double precision": REAL_TYPE,
            "text": TEXT_TYPE,
            "character varying": TEXT_TYPE,
            "character": TEXT_TYPE,
            "time without time zone": TEXT_TYPE,
            "time with time zone": TEXT_TYPE,
            "interval": TEXT_TYPE,
            "uuid": TEXT_TYPE,
            "boolean": BOOLEAN_TYPE,
            "date": TIMESTAMP_TYPE,
            "timestamp without time zone": TIMESTAMP_TYPE,
            "timestamp with time zone": TIMESTAMP_TYPE,
            "bytea": BYTEA_TYPE,
        }
    )


def get_postgres_dialect() -> PostgresDialect:
    return PostgresDialect.get_instance()
