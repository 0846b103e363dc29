"""
Canonical column type model.
"""

from .column_type import (
    ColumnType,
    ColumnTypeMap,
    CoreColumnTypes,
    freeze_column_types,
    freeze_core_column_types,
)
from .kinds import ColumnKind
from .rendering import RENDERERS, render_blob, render_boolean, render_default, render_timestamp

__all__ = [
    "ColumnKind",
    "ColumnType",
    "ColumnTypeMap",
    "CoreColumnTypes",
    "RENDERERS",
    "freeze_column_types",
    "freeze_core_column_types",
    "render_blob",
    "render_boolean",
    "render_default",
    "render_timestamp",
]
