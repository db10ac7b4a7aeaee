import pytest

from strindex.text import MAX, U32_MAX, ZERO, TextRange, TextSize


def test_default_is_zero() -> None:
    assert TextSize() == ZERO
    assert TextSize().to_int() == 0


def test_of_char_measures_utf8_bytes() -> None:
    assert TextSize.of_char("a") == TextSize(1)
    assert TextSize.of_char("é") == TextSize(2)
    assert TextSize.of_char("€") == TextSize(3)
    assert TextSize.of_char("😂") == TextSize(4)


def test_of_char_requires_single_character() -> None:
    with pytest.raises(ValueError):
        TextSize.of_char("ab")
    with pytest.raises(ValueError):
        TextSize.of_char("")


def test_of_measures_utf8_bytes_not_code_points() -> None:
    assert TextSize.of("メカジキ") == TextSize(12)
    assert TextSize.of("abc") == TextSize(3)
    assert TextSize.of("") == ZERO


def test_from_int_rejects_values_outside_u32() -> None:
    assert TextSize.from_int(U32_MAX) == MAX
    with pytest.raises(ValueError, match="out of range"):
        TextSize.from_int(U32_MAX + 1)
    with pytest.raises(ValueError, match="out of range"):
        TextSize.from_int(-1)


def test_try_from_int() -> None:
    assert TextSize.try_from_int(42) == TextSize(42)
    assert TextSize.try_from_int(U32_MAX + 1) is None
    assert TextSize.try_from_int(-1) is None


def test_rejects_non_integer_values() -> None:
    with pytest.raises(TypeError):
        TextSize("1")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        TextSize(1.0)  # type: ignore[arg-type]


def test_int_conversions() -> None:
    size = TextSize(7)
    assert int(size) == 7
    assert size.to_int() == 7
    # usable as a slice bound
    assert "abcdef"[TextSize(1) : TextSize(3)] == "bc"


def test_checked_arithmetic() -> None:
    assert TextSize(1).checked_add(TextSize(2)) == TextSize(3)
    assert MAX.checked_add(TextSize(1)) is None
    assert MAX.checked_add(0) == MAX
    assert TextSize(5).checked_sub(TextSize(5)) == ZERO
    assert ZERO.checked_sub(TextSize(1)) is None


def test_plain_arithmetic_wraps_at_u32() -> None:
    assert TextSize(1) + TextSize(2) == TextSize(3)
    assert TextSize(5) - 2 == TextSize(3)
    assert MAX + TextSize(1) == ZERO
    assert ZERO - TextSize(1) == MAX
    assert MAX.add(2) == TextSize(1)
    assert ZERO.sub(2) == TextSize(U32_MAX - 1)


def test_int_on_the_left() -> None:
    assert 1 + TextSize(2) == TextSize(3)
    assert 10 - TextSize(3) == TextSize(7)


def test_augmented_assignment_rebinds() -> None:
    a = TextSize(1)
    b = a
    a += 2
    assert a == TextSize(3)
    assert b == TextSize(1)
    a -= TextSize(3)
    assert a == ZERO


def test_unsupported_operand() -> None:
    with pytest.raises(TypeError):
        TextSize(1) + "x"  # type: ignore[operator]


def test_ordering_and_hashing() -> None:
    sizes = [TextSize(3), TextSize(1), TextSize(2)]
    assert sorted(sizes) == [TextSize(1), TextSize(2), TextSize(3)]
    assert TextSize(1) < TextSize(2) <= TextSize(2)
    assert len({TextSize(1), TextSize(1), TextSize(2)}) == 2


def test_rendering_is_the_decimal_value() -> None:
    assert str(TextSize(10)) == "10"
    assert repr(TextSize(10)) == "10"
    assert f"{TextSize(5):>3}" == "  5"


def test_range_builders() -> None:
    point = TextSize(5)
    assert point.range_for(TextSize(10)) == TextRange(TextSize(5), TextSize(15))
    assert point.range_to(TextSize(10)) == TextRange(TextSize(5), TextSize(10))
    assert point.as_unit_range() == point.range_to(point)
    assert point.as_unit_range().is_empty()


def test_range_to_backwards_is_fatal() -> None:
    with pytest.raises(AssertionError):
        TextSize(10).range_to(TextSize(0))


def test_range_for_wrapping_past_u32_is_fatal() -> None:
    # MAX + 1 wraps to 0, which is before the start
    with pytest.raises(AssertionError):
        MAX.range_for(TextSize(1))


def test_rejects_bools() -> None:
    with pytest.raises(TypeError):
        TextSize(True)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        TextSize(1) + False  # type: ignore[operator]


def test_checked_arithmetic_requires_valid_int_operand() -> None:
    with pytest.raises(ValueError, match="out of range"):
        TextSize(1).checked_add(U32_MAX + 1)
    with pytest.raises(ValueError, match="out of range"):
        TextSize(1).checked_sub(-1)
