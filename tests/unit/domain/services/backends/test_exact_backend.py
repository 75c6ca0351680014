from decimal import Decimal

import pytest

from moneta.domain.exceptions import DivisionByZeroError, InvalidAmountError
from moneta.domain.services.backends import ExactBackend
from moneta.domain.values import DecimalValue


@pytest.fixture
def backend():
    return ExactBackend()


def test_parse_returns_decimal_value(backend):
    v = backend.parse("2.50")

    assert isinstance(v, DecimalValue)
    assert backend.scale(v) == 2
    assert backend.parse(v) is v


@pytest.mark.parametrize("raw", ["abc", None, True, "NaN", float("inf")])
def test_parse_rejects_invalid_amounts(backend, raw):
    with pytest.raises(InvalidAmountError):
        backend.parse(raw)


def test_add_sub_exact(backend):
    a, b = backend.parse("0.1"), backend.parse("0.2")

    assert backend.add(a, b) == backend.parse("0.3")
    assert str(backend.sub(a, b)) == "-0.1"


def test_multiply_scale_is_sum_of_scales(backend):
    product = backend.multiply(backend.parse("19.99"), "0.075")

    assert str(product) == "1.49925"
    assert backend.scale(product) == 5


def test_multiply_rejects_non_numeric_scalar(backend):
    with pytest.raises(InvalidAmountError):
        backend.multiply(backend.parse("1"), "ten")


def test_divide_truncates_to_requested_scale(backend):
    assert str(backend.divide(backend.parse("10.00"), 3, scale=2)) == "3.33"
    assert str(backend.divide(backend.parse("-10.00"), 3, scale=2)) == "-3.33"
    assert str(backend.divide(backend.parse("2"), "3", scale=5)) == "0.66666"


def test_divide_defaults_to_dividend_scale(backend):
    assert str(backend.divide(backend.parse("1.000"), 8)) == "0.125"


@pytest.mark.parametrize("zero", [0, "0", "0.00", Decimal("-0")])
def test_divide_by_zero(backend, zero):
    with pytest.raises(DivisionByZeroError):
        backend.divide(backend.parse("1.00"), zero)


def test_percentage_keeps_full_precision(backend):
    share = backend.percentage(backend.parse("10.00"), "33.3333")

    assert str(share) == "3.33333000"


def test_abs_inv_and_signs(backend):
    v = backend.parse("-4.20")

    assert str(backend.abs(v)) == "4.20"
    assert str(backend.inv(v)) == "4.20"
    assert backend.is_negative(v)
    assert not backend.is_negative(backend.abs(v))
    assert backend.is_zero(backend.parse("0.000"))


def test_round_half_up_delegates_to_digit_rounding(backend):
    assert str(backend.round_half_up(backend.parse("2.005"), 2)) == "2.01"
    assert str(backend.round_half_up(backend.parse("-9.995"), 2)) == "-10.00"


def test_sum_and_compare(backend):
    total = backend.sum(backend.parse(p) for p in ["33.3", "33.3", "33.4"])

    assert backend.compare(total, backend.parse(100)) == 0
    assert backend.compare(backend.parse("1"), backend.parse("2")) == -1


def test_integer_digit_count_and_shift(backend):
    assert backend.integer_digit_count(backend.parse("1000.00")) == 4
    assert backend.integer_digit_count(backend.parse("0.99")) == 0
    assert str(backend.shift(backend.parse("3321"), -3)) == "3.321"


def test_to_decimal(backend):
    assert backend.to_decimal(backend.parse("1.10")) == Decimal("1.10")
