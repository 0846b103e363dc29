"""
Kind-specific rendering of raw column values into display strings.

Every canonical kind has exactly one renderer in ``RENDERERS``. Renderers
accept whatever a database driver hands back for a column and degrade to the
raw value's text when conversion is impossible.
"""

from __future__ import annotations

import array
import json
from datetime import date, datetime, timedelta, timezone
from types import MappingProxyType
from typing import Any, Callable, Mapping

from ..utils import get_logger
from .kinds import ColumnKind

Renderer = Callable[[Any], str]

logger = get_logger("core.rendering")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def fallback_text(value: Any) -> str:
    """
    Best-effort text for values whose own ``__str__`` may be broken.
    """
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def render_default(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def render_boolean(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return render_default(value)


# Timestamps ---------------------------------------------------------------
def _to_utc_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # Numeric timestamps are epoch milliseconds.
        return _EPOCH + timedelta(milliseconds=value)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return _to_utc_datetime(datetime.fromisoformat(text))
    raise TypeError(f"Cannot convert {type(value).__name__} to a timestamp")


def format_timestamp(moment: datetime) -> str:
    """
    Format a UTC datetime as ``YYYY-MM-DDTHH:MM:SS.sssZ``.
    """
    return moment.isoformat(timespec="milliseconds")[:-6] + "Z"


def render_timestamp(value: Any) -> str:
    if value is None:
        return ""
    try:
        moment = _to_utc_datetime(value)
    except (ValueError, OverflowError, OSError) as exc:
        logger.info(
            "Invalid time value %r; rendering raw value (%s)",
            value,
            exc,
            extra={"value": value, "kind": ColumnKind.TIMESTAMP.value},
        )
        return fallback_text(value)
    except Exception as exc:
        logger.warning(
            "Error converting timestamp %r: %s",
            value,
            exc,
            extra={"value": value, "kind": ColumnKind.TIMESTAMP.value},
        )
        return fallback_text(value)
    return format_timestamp(moment)


# Blobs --------------------------------------------------------------------
def _is_native_buffer(value: Any) -> bool:
    return isinstance(value, (bytes, memoryview))


def _decode_native_buffer(value: Any) -> str:
    return bytes(value).decode("utf-8", errors="replace")


def _is_byte_array(value: Any) -> bool:
    if isinstance(value, bytearray):
        return True
    return isinstance(value, array.array) and value.typecode == "B"


def _decode_byte_array(value: Any) -> str:
    return bytes(value).decode("utf-8", errors="replace")


def _dump_structured(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), default=str)


# Evaluated in order before falling back to a structured dump.
BLOB_DECODERS: tuple[tuple[Callable[[Any], bool], Renderer], ...] = (
    (_is_native_buffer, _decode_native_buffer),
    (_is_byte_array, _decode_byte_array),
)


def render_blob(value: Any) -> str:
    if value is None:
        return ""
    for matches, decode in BLOB_DECODERS:
        if matches(value):
            return decode(value)
    return _dump_structured(value)


RENDERERS: Mapping[ColumnKind, Renderer] = MappingProxyType(
    {
        ColumnKind.INTEGER: render_default,
        ColumnKind.REAL: render_default,
        ColumnKind.STRING: render_default,
        ColumnKind.BOOLEAN: render_boolean,
        ColumnKind.TIMESTAMP: render_timestamp,
        ColumnKind.BLOB: render_blob,
    }
)


def renderer_for(kind: ColumnKind) -> Renderer:
    return RENDERERS[kind]
