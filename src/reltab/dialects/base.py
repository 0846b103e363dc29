"""
Dialect capability interface and the shared base implementation.
"""

from __future__ import annotations

import re
import threading
from typing import Protocol, TypeVar, runtime_checkable

from ..core import ColumnKind, ColumnType, ColumnTypeMap, CoreColumnTypes
from ..utils import get_logger

logger = get_logger("dialects.base")

_INSTANCE_LOCK = threading.Lock()
_TYPE_MODIFIER_RE = re.compile(r"\s*\([^)]*\)")

DialectT = TypeVar("DialectT", bound="BaseSQLDialect")


@runtime_checkable
class SQLDialect(Protocol):
    """
    Capability set consumed by query generation and result display.
    """

    @property
    def dialect_name(self) -> str: ...

    @property
    def require_subquery_alias(self) -> bool: ...

    @property
    def core_column_types(self) -> CoreColumnTypes: ...

    @property
    def column_types(self) -> ColumnTypeMap: ...

    def quote_col(self, identifier: str) -> str: ...


class BaseSQLDialect:
    """
    Defaults shared by the concrete dialects.

    Subclasses declare ``dialect_name``, ``require_subquery_alias``,
    ``core_column_types`` and ``column_types`` as class attributes; nothing is
    stored per instance. The process-wide instance of each subclass is
    obtained through :meth:`get_instance`.
    """

    dialect_name: str
    require_subquery_alias: bool = False
    core_column_types: CoreColumnTypes
    column_types: ColumnTypeMap

    @classmethod
    def get_instance(cls: type[DialectT]) -> DialectT:
        """
        Return the singleton for this dialect class, creating it on first use.
        """
        instance = cls.__dict__.get("_instance")
        if instance is None:
            with _INSTANCE_LOCK:
                instance = cls.__dict__.get("_instance")
                if instance is None:
                    instance = cls()
                    setattr(cls, "_instance", instance)
                    logger.debug(
                        "Initialized %s dialect",
                        instance.dialect_name,
                        extra={"dialect": instance.dialect_name},
                    )
        return instance

    def quote_col(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

    def column_type(self, native_name: str) -> ColumnType:
        """
        Resolve a native type name, ignoring type modifiers such as the ones in
        ``DECIMAL(18,3)`` or ``timestamp(3) without time zone`` when only the
        bare name is mapped.
        """
        column_type = self.column_types.get(native_name)
        if column_type is None:
            base_name = _TYPE_MODIFIER_RE.sub("", native_name).strip()
            if base_name != native_name:
                column_type = self.column_types.get(base_name)
        if column_type is None:
            raise KeyError(native_name)
        return column_type

    def core_column_type(self, kind: ColumnKind | str) -> ColumnType:
        try:
            canonical = ColumnKind(kind)
        except ValueError:
            raise KeyError(kind) from None
        return self.core_column_types[canonical]

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.dialect_name!r}>"
