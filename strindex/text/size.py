from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Union

if TYPE_CHECKING:
    from strindex.text.range import TextRange

U32_MAX: Final[int] = 0xFFFF_FFFF
"""Largest raw value a TextSize can hold."""

_U32_MOD: Final[int] = U32_MAX + 1


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Opaque byte offset into UTF-8 text, bounded to 32 bits.

    Offsets count UTF-8 bytes, not code points. Texts are assumed to be
    shorter than 4 GiB.

    ``+`` and ``-`` wrap at the 32-bit boundary. Use ``checked_add`` and
    ``checked_sub`` where overflow is possible.
    """

    value: int = 0

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"TextSize value must be an int, got {type(self.value).__name__}")
        if not 0 <= self.value <= U32_MAX:
            raise ValueError(f"TextSize value out of range: {self.value}")

    @staticmethod
    def from_int(value: int) -> "TextSize":
        """Create a TextSize from an integer, raising ValueError outside the u32 domain."""
        return TextSize(value)

    @staticmethod
    def try_from_int(value: int) -> "TextSize | None":
        """Like `from_int`, but returns None when the value does not fit."""
        if 0 <= value <= U32_MAX:
            return TextSize(value)
        return None

    @staticmethod
    def of_char(c: str) -> "TextSize":
        """UTF-8 length of a single character (1 to 4 bytes)."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return TextSize(len(c.encode("utf-8")))

    @staticmethod
    def of(text: str) -> "TextSize":
        """UTF-8 length of a string.

        Texts of 4 GiB or more are a caller bug, not a recoverable condition,
        so this raises AssertionError instead of ValueError.
        """
        length = len(text.encode("utf-8"))
        if length >= U32_MAX:
            raise AssertionError("string index too large")
        return TextSize(length)

    def to_int(self) -> int:
        """Convert the TextSize to an integer."""
        return self.value

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def checked_add(self, rhs: "TextSize | int") -> "TextSize | None":
        """Addition that returns None instead of wrapping.

        `rhs` must itself be a valid offset; an int outside the u32 domain
        raises ValueError.
        """
        result = self.value + _raw(rhs)
        if result > U32_MAX:
            return None
        return TextSize(result)

    def checked_sub(self, rhs: "TextSize | int") -> "TextSize | None":
        """Subtraction that returns None instead of wrapping. `rhs` must be a valid offset."""
        result = self.value - _raw(rhs)
        if result < 0:
            return None
        return TextSize(result)

    def add(self, rhs: "TextSize | int") -> "TextSize":
        """Wrapping addition, same as ``self + rhs``."""
        return TextSize((self.value + _raw(rhs)) % _U32_MOD)

    def sub(self, rhs: "TextSize | int") -> "TextSize":
        """Wrapping subtraction, same as ``self - rhs``."""
        return TextSize((self.value - _raw(rhs)) % _U32_MOD)

    def __add__(self, other: "TextSize | int") -> "TextSize":
        if not isinstance(other, (TextSize, int)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: int) -> "TextSize":
        if not isinstance(other, int):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "TextSize | int") -> "TextSize":
        if not isinstance(other, (TextSize, int)):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: int) -> "TextSize":
        if not isinstance(other, int):
            return NotImplemented
        return TextSize.from_int(other).sub(self)

    def range_for(self, length: "TextSize | int") -> "TextRange":
        """The range of `length` bytes starting here."""
        from strindex.text.range import TextRange

        return TextRange(self, self + length)

    def range_to(self, end: "TextSize | int") -> "TextRange":
        """The range from here to `end`. Raises AssertionError if `end < self`."""
        from strindex.text.range import TextRange

        return TextRange(self, end)

    def as_unit_range(self) -> "TextRange":
        """The empty range at this offset."""
        from strindex.text.range import TextRange

        return TextRange.empty(self)

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return str(self.value)


SizeLike = Union[TextSize, int]


def _raw(value: SizeLike) -> int:
    if isinstance(value, TextSize):
        return value.value
    return TextSize(value).value


def to_text_size(value: SizeLike) -> TextSize:
    """Coerce an int (or TextSize) into a TextSize."""
    if isinstance(value, TextSize):
        return value
    return TextSize(value)


ZERO: Final[TextSize] = TextSize(0)
"""Constant representing a TextSize of zero."""

MAX: Final[TextSize] = TextSize(U32_MAX)
"""Largest representable TextSize."""
