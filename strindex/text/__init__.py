"""Byte offsets and ranges into UTF-8 text."""

from strindex.text.range import TextRange, slice_text_range
from strindex.text.size import MAX, U32_MAX, ZERO, SizeLike, TextSize, to_text_size

__all__ = [
    "MAX",
    "U32_MAX",
    "ZERO",
    "SizeLike",
    "TextRange",
    "TextSize",
    "slice_text_range",
    "to_text_size",
]
