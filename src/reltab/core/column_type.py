"""
Canonical column type value objects and the lookup tables built from them.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..utils import get_logger
from .kinds import ColumnKind
from .rendering import Renderer, fallback_text, renderer_for

logger = get_logger("core.column_type")


@dataclass(frozen=True, eq=False)
class ColumnType:
    """
    One canonical column type as reported by a database engine.

    Instances compare by identity: every native alias of a kind within a
    dialect resolves to the same object. ``string_render`` overrides the
    renderer registered for ``kind``.
    """

    native_type_name: str
    kind: ColumnKind
    string_render: Optional[Renderer] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", ColumnKind(self.kind))

    def render(self, value: Any) -> str:
        """
        Render a raw column value for display. Never raises.
        """
        renderer = self.string_render or renderer_for(self.kind)
        try:
            return renderer(value)
        except Exception as exc:
            logger.warning(
                "Error rendering %s value %s: %s",
                self.native_type_name,
                fallback_text(value),
                exc,
                extra={"native_type": self.native_type_name, "kind": self.kind.value},
            )
            return fallback_text(value)

    def __repr__(self) -> str:
        return f"ColumnType({self.native_type_name!r}, {self.kind.value!r})"


ColumnTypeMap = Mapping[str, ColumnType]
CoreColumnTypes = Mapping[ColumnKind, ColumnType]


def freeze_column_types(types: Mapping[str, ColumnType]) -> ColumnTypeMap:
    return MappingProxyType(dict(types))


def freeze_core_column_types(types: Mapping[ColumnKind, ColumnType]) -> CoreColumnTypes:
    frozen: dict[ColumnKind, ColumnType] = {}
    for kind, column_type in types.items():
        kind = ColumnKind(kind)
        if column_type.kind is not kind:
            raise ValueError(
                f"Representative type {column_type.native_type_name} has kind "
                f"'{column_type.kind}', expected '{kind}'"
            )
        frozen[kind] = column_type
    return MappingProxyType(frozen)
