"""Byte offsets and non-decreasing ranges for addressing substrings of UTF-8 text."""

from strindex.diagnostics import DiagnosticSpec, TextDecodeError
from strindex.serde import (
    CodecOptions,
    RangeForm,
    decode_range,
    decode_size,
    dumps_range,
    dumps_size,
    encode_range,
    encode_size,
    loads_range,
    loads_size,
)
from strindex.text import MAX, ZERO, TextRange, TextSize, slice_text_range

__all__ = [
    "MAX",
    "ZERO",
    "CodecOptions",
    "DiagnosticSpec",
    "RangeForm",
    "TextDecodeError",
    "TextRange",
    "TextSize",
    "decode_range",
    "decode_size",
    "dumps_range",
    "dumps_size",
    "encode_range",
    "encode_size",
    "loads_range",
    "loads_size",
    "slice_text_range",
]
