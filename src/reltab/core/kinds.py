"""
Canonical column kinds shared by every dialect.
"""

from __future__ import annotations

from enum import Enum


class ColumnKind(str, Enum):
    """
    Engine-independent column category the query engine reasons about.
    """

    INTEGER = "integer"
    REAL = "real"
    STRING = "string"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    BLOB = "blob"

    def __str__(self) -> str:
        return self.value
