from dataclasses import dataclass, field
from typing import Union

from strindex.text.size import ZERO, SizeLike, TextSize, to_text_size


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in text, represented by TextSize offsets.

    Invariant:
    - start <= end

    Every public constructor checks the invariant and raises AssertionError
    when it does not hold. Decoders reading untrusted data go through
    `_unchecked` and report their own errors.
    """

    start: TextSize = field(default=ZERO)
    end: TextSize = field(default=ZERO)

    def __post_init__(self):
        start = to_text_size(self.start)
        end = to_text_size(self.end)
        if end < start:
            raise AssertionError(f"invalid text range {start}..{end}")
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    @staticmethod
    def new(start: SizeLike, end: SizeLike) -> "TextRange":
        """Create a TextRange from start and end offsets."""
        return TextRange(start, end)

    @staticmethod
    def at(offset: SizeLike, length: SizeLike) -> "TextRange":
        # offset...offset+length
        """Create a TextRange at offset with given length."""
        offset = to_text_size(offset)
        return TextRange(offset, offset + length)

    @staticmethod
    def empty(offset: SizeLike) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        offset = to_text_size(offset)
        return TextRange(offset, offset)

    @staticmethod
    def up_to(end: SizeLike) -> "TextRange":
        """Create a TextRange from 0 up to the given end offset."""
        return TextRange(ZERO, end)

    @staticmethod
    def from_tuple(bounds: "tuple[SizeLike, SizeLike] | range") -> "TextRange":
        """Create a TextRange from a ``(start, end)`` pair or a step-1 ``range``."""
        if isinstance(bounds, range):
            if bounds.step != 1:
                raise ValueError("TextRange requires a range with step 1")
            return TextRange(bounds.start, bounds.stop)
        start, end = bounds
        return TextRange(start, end)

    @classmethod
    def _unchecked(cls, start: TextSize, end: TextSize) -> "TextRange":
        """Build a range without checking ``start <= end``.

        Only for callers that validate the result themselves and need to
        report a violation as something other than AssertionError.
        """
        obj = object.__new__(cls)
        object.__setattr__(obj, "start", start)
        object.__setattr__(obj, "end", end)
        return obj

    def len(self) -> TextSize:
        """Get the length of the range as a TextSize."""
        return self.end - self.start

    def is_empty(self) -> bool:
        """Check if the range is empty."""
        return self.start == self.end

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self.start.value, self.end.value)

    def contains_exclusive(self, offset: SizeLike) -> bool:
        """Check if the offset is in the range. The end offset is not."""
        offset = to_text_size(offset)
        return self.start <= offset < self.end

    def contains_inclusive(self, offset: SizeLike) -> bool:
        """Check if the range contains the given offset, inclusive of end."""
        offset = to_text_size(offset)
        return self.start <= offset <= self.end

    def contains(self, other: "TextRange") -> bool:
        """Check if the range fully contains another range. Endpoints may coincide."""
        return self.start <= other.start and other.end <= self.end

    def __contains__(self, item: Union["TextRange", SizeLike]) -> bool:
        if isinstance(item, TextRange):
            return self.contains(item)
        return self.contains_exclusive(item)

    def is_disjoint(self, other: "TextRange") -> bool:
        """Check if no offset lies in both ranges. Ranges that only touch are disjoint."""
        return self.end <= other.start or other.end <= self.start

    def with_start(self, start: SizeLike) -> "TextRange":
        """A range with an adjusted start. Raises AssertionError if `start > self.end`."""
        return TextRange(start, self.end)

    def with_end(self, end: SizeLike) -> "TextRange":
        """A range with an adjusted end. Raises AssertionError if `end < self.start`."""
        return TextRange(self.start, end)

    def intersection(self, other: "TextRange") -> "TextRange | None":
        """The overlap of two ranges, or None if there is a gap between them.

        Touching ranges intersect in an empty range.
        """
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        if end < start:
            return None
        return TextRange(start, end)

    def nonempty_intersection(self, other: "TextRange") -> "TextRange | None":
        """The overlap of two ranges, or None unless it has a positive length."""
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        if end <= start:
            return None
        return TextRange(start, end)

    def merge(self, other: "TextRange") -> "TextRange":
        """The smallest range covering both ranges, including any gap between them."""
        start = min(self.start, other.start)
        end = max(self.end, other.end)
        return TextRange(start, end)

    def shift(self, delta: SizeLike) -> "TextRange":
        """Shift the range by the given delta. Wraps like TextSize addition."""
        return TextRange(self.start + delta, self.end + delta)

    def unshift(self, delta: SizeLike) -> "TextRange":
        """Unshift the range by the given delta."""
        start = self.start.checked_sub(delta)
        if start is None:
            raise ValueError("Resulting TextRange positions cannot be negative")
        return TextRange(start, self.end - delta)

    def checked_shift(self, delta: SizeLike) -> "TextRange | None":
        end = self.end.checked_add(delta)
        if end is None:
            return None
        return TextRange(self.start + delta, end)

    def checked_unshift(self, delta: SizeLike) -> "TextRange | None":
        start = self.start.checked_sub(delta)
        if start is None:
            return None
        return TextRange(start, self.end - delta)

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"

    def __repr__(self) -> str:
        return f"TextRange({self.start}..{self.end})"


def slice_text_range(source: "str | bytes | bytearray | memoryview", range: TextRange) -> "str | memoryview":
    """Get the part of `source` covered by the given TextRange.

    Offsets are UTF-8 byte offsets. Byte buffers are sliced without copying.
    Strings are encoded first, and a range that splits a character raises
    UnicodeDecodeError.
    """
    start, end = range.as_tuple()
    if isinstance(source, str):
        data = source.encode("utf-8")
        if end > len(data):
            raise IndexError(f"text range {range} out of bounds for text of length {len(data)}")
        return data[start:end].decode("utf-8")
    view = memoryview(source)
    if end > view.nbytes:
        raise IndexError(f"text range {range} out of bounds for buffer of length {view.nbytes}")
    return view.cast("B")[start:end]
