"""Encode offsets and ranges as plain data, and decode them back.

Encoded values are built from ``int``, ``dict`` and ``list`` only, so any
structured format that round-trips those (JSON, YAML, msgpack, ...) can
carry them. Decoding treats its input as untrusted: a range whose start is
after its end is reported as a `TextDecodeError`, never as the
AssertionError that in-process construction raises.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
from typing import Any, Final

from strindex.diagnostics import (
    SERDE_DUPLICATE_FIELD,
    SERDE_INVALID_LENGTH,
    SERDE_INVALID_RANGE,
    SERDE_INVALID_TYPE,
    SERDE_INVALID_VALUE,
    SERDE_MISSING_FIELD,
    SERDE_UNKNOWN_FIELD,
    DiagnosticSpec,
    TextDecodeError,
)
from strindex.serde.options import DEFAULT_OPTIONS, CodecOptions, RangeForm
from strindex.text import U32_MAX, TextRange, TextSize

logger = logging.getLogger(__name__)

TEXT_SIZE_TAG: Final[str] = "TextSize"
"""Key of the single-entry map used for tagged offsets."""

TEXT_RANGE_NAME: Final[str] = "TextRange"
RANGE_FIELDS: Final[tuple[str, str]] = ("start", "end")

EncodedSize = int | dict[str, int]
EncodedRange = dict[str, EncodedSize] | list[EncodedSize]


def encode_size(size: TextSize, options: CodecOptions | None = None) -> EncodedSize:
    options = options or DEFAULT_OPTIONS
    if options.tag_offsets:
        return {TEXT_SIZE_TAG: size.value}
    return size.value


def encode_range(range_: TextRange, options: CodecOptions | None = None) -> EncodedRange:
    """Encode as ``{"start": s, "end": e}`` or, for `RangeForm.SEQ`, ``[s, e]``."""
    options = options or DEFAULT_OPTIONS
    start = encode_size(range_.start, options)
    end = encode_size(range_.end, options)
    if options.range_form == RangeForm.SEQ:
        return [start, end]
    return {"start": start, "end": end}


def decode_size(data: Any, *, field: str | None = None) -> TextSize:
    """Decode a bare integer or a tagged ``{"TextSize": n}`` map."""
    if isinstance(data, Mapping):
        if len(data) != 1 or TEXT_SIZE_TAG not in data:
            raise _error(SERDE_INVALID_TYPE, "invalid type: map, expected u32", field)
        data = data[TEXT_SIZE_TAG]
    if isinstance(data, bool) or not isinstance(data, int):
        raise _error(SERDE_INVALID_TYPE, f"invalid type: {_describe(data)}, expected u32", field)
    if not 0 <= data <= U32_MAX:
        raise _error(SERDE_INVALID_VALUE, f"invalid value: integer `{data}`, expected u32", field)
    return TextSize(data)


def decode_range(data: Any) -> TextRange:
    """Decode a range from its keyed (map) or positional (sequence) form."""
    if isinstance(data, Mapping):
        return decode_range_fields(data.items())
    if isinstance(data, (list, tuple)):
        return _decode_range_seq(data)
    raise _error(SERDE_INVALID_TYPE, f"invalid type: {_describe(data)}, expected struct {TEXT_RANGE_NAME}")


def decode_range_fields(pairs: Iterable[tuple[Any, Any]]) -> TextRange:
    """Decode a range from ``(key, value)`` pairs.

    Takes pairs rather than a dict so that sources which can repeat a key
    (e.g. JSON objects) get duplicate detection.
    """
    start: TextSize | None = None
    end: TextSize | None = None
    for key, value in pairs:
        name = _field_name(key)
        if name == "start":
            if start is not None:
                raise _error(SERDE_DUPLICATE_FIELD, "duplicate field `start`", "start")
            start = decode_size(value, field="start")
        elif name == "end":
            if end is not None:
                raise _error(SERDE_DUPLICATE_FIELD, "duplicate field `end`", "end")
            end = decode_size(value, field="end")
        else:
            raise _error(
                SERDE_UNKNOWN_FIELD,
                f"unknown field `{name}`, expected `start` or `end`",
                name,
            )
    if start is None:
        raise _error(SERDE_MISSING_FIELD, "missing field `start`", "start")
    if end is None:
        raise _error(SERDE_MISSING_FIELD, "missing field `end`", "end")
    return _checked_range(start, end)


def _decode_range_seq(items: list[Any] | tuple[Any, ...]) -> TextRange:
    # For a short sequence the reported length is the first missing index.
    if len(items) != len(RANGE_FIELDS):
        raise _error(
            SERDE_INVALID_LENGTH,
            f"invalid length {len(items)}, expected struct {TEXT_RANGE_NAME} with 2 elements",
        )
    start = decode_size(items[0], field="start")
    end = decode_size(items[1], field="end")
    return _checked_range(start, end)


def _checked_range(start: TextSize, end: TextSize) -> TextRange:
    # skip the AssertionError check; a reversed range is reported as a decode error below
    range_ = TextRange._unchecked(start, end)
    if start > end:
        raise _error(SERDE_INVALID_RANGE, f"invalid string range {range_}")
    return range_


def _field_name(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, (bytes, bytearray)):
        return bytes(key).decode("utf-8", errors="replace")
    raise _error(SERDE_INVALID_TYPE, f"invalid type: {_describe(key)}, expected a field name")


def _describe(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return f"boolean `{str(value).lower()}`"
    if isinstance(value, float):
        return f"floating point `{value}`"
    if isinstance(value, str):
        return f'string "{value}"'
    if isinstance(value, Mapping):
        return "map"
    if isinstance(value, (list, tuple)):
        return "sequence"
    return type(value).__name__


def _error(spec: DiagnosticSpec, message: str, field: str | None = None) -> TextDecodeError:
    logger.debug("decode rejected (%s): %s", spec.code, message)
    return TextDecodeError(spec=spec, message=message, field=field)
