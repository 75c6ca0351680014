from decimal import Decimal

import pytest

from moneta.domain.values import DecimalValue


def d(value) -> DecimalValue:
    return DecimalValue.parse(value)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("123.450", "123.450"),
        ("-0.00", "0.00"),
        ("0007.5", "7.5"),
        (Decimal("1E+2"), "100"),
        (0.1, "0.1"),
        (-42, "-42"),
        (" 3.14 ", "3.14"),
    ],
)
def test_parse_and_str(raw, expected):
    assert str(d(raw)) == expected


def test_parse_keeps_scale_and_sign():
    v = d("-12.340")

    assert v.negative
    assert v.scale == 3
    assert v.integer_digits == (1, 2)
    assert v.fraction_digits == (3, 4, 0)


def test_zero_is_never_negative():
    assert not d("-0").negative
    assert not (d("5") - d("5")).negative
    assert DecimalValue.zero().is_zero


@pytest.mark.parametrize("raw", ["abc", "", "1.2.3", "NaN", "Infinity"])
def test_parse_rejects_non_numbers(raw):
    with pytest.raises(ValueError):
        d(raw)


@pytest.mark.parametrize("raw", [True, None, [1], object()])
def test_parse_rejects_unsupported_types(raw):
    with pytest.raises(TypeError):
        d(raw)


def test_constructor_validates_digits_and_scale():
    with pytest.raises(ValueError):
        DecimalValue((1, 10))

    with pytest.raises(ValueError):
        DecimalValue((1,), scale=-1)


def test_add_carries_into_new_integer_digit():
    result = d("9.99") + d("0.01")

    assert str(result) == "10.00"


def test_add_uses_finer_scale():
    assert str(d("1.5") + d("2.25")) == "3.75"
    assert str(d("1") + d("0.001")) == "1.001"


def test_add_mixed_signs():
    assert str(d("-5") + d("3")) == "-2"
    assert str(d("5") + d("-3.5")) == "1.5"
    assert (d("5") + d("-5")).is_zero


def test_sub_borrows():
    assert str(d("10.00") - d("0.01")) == "9.99"
    assert str(d("1") - d("2.5")) == "-1.5"
    assert str(d("-1") - d("-1")) == "0"


def test_multiply_adds_scales():
    result = d("1.5") * d("1.25")

    assert str(result) == "1.875"
    assert result.scale == 3
    assert str(d("-2") * d("0.5")) == "-1.0"
    assert str(d("0.1") * d("0.1")) == "0.01"
    assert str(d("-3") * d("-4")) == "12"


def test_multiply_large_numbers_exactly():
    assert d("123456789") * d("987654321") == d("121932631112635269")


@pytest.mark.parametrize(
    "a, b, scale, expected",
    [
        ("10", "3", 2, "3.33"),
        ("2", "3", 4, "0.6666"),
        ("-10", "4", 1, "-2.5"),
        ("1", "8", 2, "0.12"),
        ("7.5", "0.25", 0, "30"),
        ("100", "7", 0, "14"),
        ("0.001", "3", 2, "0.00"),
        ("10.03", "0.05", 1, "200.6"),
        ("-1", "-3", 3, "0.333"),
    ],
)
def test_divide_truncates_at_scale(a, b, scale, expected):
    assert str(d(a).divide(d(b), scale)) == expected


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        d("1").divide(d("0.00"), 2)


@pytest.mark.parametrize(
    "raw, digits, expected",
    [
        ("2.005", 2, "2.01"),
        ("2.004", 2, "2.00"),
        ("2.0049", 2, "2.00"),
        ("9.995", 2, "10.00"),
        ("9.996", 2, "10.00"),
        ("99.95", 1, "100.0"),
        ("0.5", 0, "1"),
        ("1.45", 1, "1.5"),
        ("-2.005", 2, "-2.01"),
        ("-0.004", 2, "0.00"),
        ("1.2", 2, "1.2"),
    ],
)
def test_round_half_up(raw, digits, expected):
    assert str(d(raw).round_half_up(digits)) == expected


def test_round_half_up_rejects_negative_digits():
    with pytest.raises(ValueError):
        d("1.5").round_half_up(-1)


def test_truncate_rescale_and_shift():
    assert str(d("1.239").truncate(2)) == "1.23"
    assert str(d("-1.239").truncate(0)) == "-1"
    assert str(d("1.2").rescale(3)) == "1.200"
    assert str(d("1.2345").rescale(2)) == "1.23"
    assert str(d("1.234").shift(2)) == "123.4"
    assert str(d("5").shift(3)) == "5000"
    assert str(d("5").shift(-3)) == "0.005"


def test_equality_ignores_trailing_zeros():
    assert d("1.50") == d("1.5")
    assert hash(d("1.50")) == hash(d("1.5"))
    assert len({d("1.50"), d("1.5"), d("1.500")}) == 1
    assert d("2.00") == 2
    assert d("2.00") == Decimal("2")
    assert d("2.00") != d("-2")
    assert d("1") != Decimal("NaN")


def test_ordering():
    values = [d("0.5"), d("-1"), d("0"), d("-0.25"), d("10")]

    assert sorted(values) == [d("-1"), d("-0.25"), d("0"), d("0.5"), d("10")]
    assert d("-2") < d("-1.5")
    assert d("1.01") > d("1.009")
    assert d("3") >= d("3.000")


@pytest.mark.parametrize(
    "raw, count",
    [("0.5", 0), ("9", 1), ("999.99", 3), ("1000", 4), ("-12345.6", 5)],
)
def test_integer_digit_count(raw, count):
    assert d(raw).integer_digit_count == count


def test_to_decimal_round_trip():
    assert d("-12.340").to_decimal() == Decimal("-12.340")
    assert str(d("-12.340").to_decimal()) == "-12.340"
    assert repr(d("1.5")) == "DecimalValue('1.5')"


@pytest.mark.parametrize(
    "raw, other",
    [
        ("1", 1),
        ("-3.000", -3),
        ("0.00", 0),
        ("1.50", Decimal("1.5")),
        ("12.340", Decimal("12.34")),
    ],
)
def test_hash_agrees_with_equal_numbers(raw, other):
    value = d(raw)

    assert value == other
    assert hash(value) == hash(other)
    assert len({value, other}) == 1
    assert {other: "found"}[value] == "found"
