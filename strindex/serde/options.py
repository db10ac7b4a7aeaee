"""Encoding layouts and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class RangeForm(StrEnum):
    """Shape used when encoding a TextRange."""

    MAP = "map"
    SEQ = "seq"


@dataclass(frozen=True, slots=True)
class CodecOptions:
    """Flags controlling the shape of encoded offsets and ranges.

    Decoding ignores these and accepts every supported shape.
    """

    range_form: RangeForm = RangeForm.MAP
    tag_offsets: bool = False

    @staticmethod
    def for_form(form: RangeForm, *, tag_offsets: bool = False) -> "CodecOptions":
        return CodecOptions(range_form=RangeForm(form), tag_offsets=tag_offsets)


DEFAULT_OPTIONS = CodecOptions()
