"""JSON text helpers on top of the plain-data codec."""

from __future__ import annotations

import json
import logging
from typing import Any

from strindex.diagnostics import SERDE_DUPLICATE_FIELD, SERDE_INVALID_JSON, TextDecodeError
from strindex.serde.codec import decode_range, decode_size, encode_range, encode_size
from strindex.serde.options import CodecOptions
from strindex.text import TextRange, TextSize

logger = logging.getLogger(__name__)


def dumps_size(size: TextSize, options: CodecOptions | None = None) -> str:
    return json.dumps(encode_size(size, options), separators=(",", ":"))


def dumps_range(range_: TextRange, options: CodecOptions | None = None) -> str:
    return json.dumps(encode_range(range_, options), separators=(",", ":"))


def loads_size(text: str | bytes) -> TextSize:
    return decode_size(_loads(text))


def loads_range(text: str | bytes) -> TextRange:
    """Parse JSON text into a TextRange.

    Objects with a repeated key are rejected instead of keeping the last value.
    """
    return decode_range(_loads(text))


def _loads(text: str | bytes) -> Any:
    try:
        return json.loads(text, object_pairs_hook=_unique_keys)
    except TextDecodeError:
        raise
    # JSONDecodeError, UnicodeDecodeError on non-UTF-8 bytes, and the int digit limit
    except ValueError as exc:
        logger.debug("decode rejected (%s): %s", SERDE_INVALID_JSON.code, exc)
        raise TextDecodeError(spec=SERDE_INVALID_JSON, message=f"invalid JSON: {exc}") from exc


def _unique_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    obj: dict[str, Any] = {}
    for key, value in pairs:
        if key in obj:
            logger.debug("decode rejected (%s): duplicate field `%s`", SERDE_DUPLICATE_FIELD.code, key)
            raise TextDecodeError(spec=SERDE_DUPLICATE_FIELD, message=f"duplicate field `{key}`", field=key)
        obj[key] = value
    return obj
