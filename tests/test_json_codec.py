import pytest

from strindex.diagnostics import SERDE_DUPLICATE_FIELD, SERDE_INVALID_JSON, TextDecodeError
from strindex.serde import CodecOptions, RangeForm, dumps_range, dumps_size, loads_range, loads_size
from strindex.text import TextRange, TextSize

RANGE = TextRange(TextSize(0), TextSize(10))


def test_dumps() -> None:
    assert dumps_size(TextSize(3)) == "3"
    assert dumps_size(TextSize(3), CodecOptions(tag_offsets=True)) == '{"TextSize":3}'
    assert dumps_range(RANGE) == '{"start":0,"end":10}'
    assert dumps_range(RANGE, CodecOptions(range_form=RangeForm.SEQ)) == "[0,10]"


def test_loads_both_forms() -> None:
    assert loads_range('{"start": 0, "end": 10}') == RANGE
    assert loads_range('{"end": 10, "start": 0}') == RANGE
    assert loads_range("[0, 10]") == RANGE
    assert loads_range(b"[0, 10]") == RANGE
    assert loads_size('{"TextSize": 7}') == TextSize(7)
    assert loads_size("7") == TextSize(7)


def test_loads_reversed_range() -> None:
    with pytest.raises(TextDecodeError) as e:
        loads_range("[10, 0]")
    assert str(e.value) == "invalid string range 10..0"


def test_loads_duplicate_key() -> None:
    with pytest.raises(TextDecodeError) as e:
        loads_range('{"start": 0, "start": 1, "end": 2}')
    assert e.value.spec is SERDE_DUPLICATE_FIELD
    assert str(e.value) == "duplicate field `start`"


def test_loads_invalid_json() -> None:
    with pytest.raises(TextDecodeError) as e:
        loads_range("[0, 10")
    assert e.value.spec is SERDE_INVALID_JSON
    assert str(e.value).startswith("invalid JSON:")


def test_loads_float_is_rejected() -> None:
    with pytest.raises(TextDecodeError, match="floating point"):
        loads_range("[0, 1.5]")


def test_loads_non_utf8_bytes() -> None:
    with pytest.raises(TextDecodeError) as e:
        loads_range(b'{"start": 0, "end": "\xff"}')
    assert e.value.spec is SERDE_INVALID_JSON


def test_loads_oversized_integer_literal() -> None:
    with pytest.raises(TextDecodeError) as e:
        loads_size("9" * 5000)
    assert e.value.spec is SERDE_INVALID_JSON
