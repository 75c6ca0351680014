from decimal import Decimal
from typing import Any

from moneta.domain.exceptions import InvalidAmountError
from moneta.domain.values import DecimalValue

from .base import ArithmeticBackend

_HUNDRED_PLACES = 2


class ExactBackend(ArithmeticBackend):
    """Digit-by-digit decimal arithmetic on DecimalValue. Never loses precision."""

    name = "exact"

    def parse(self, value: Any) -> DecimalValue:
        if isinstance(value, DecimalValue):
            return value

        try:
            return DecimalValue.parse(value)
        except (ValueError, TypeError) as e:
            raise InvalidAmountError(value, str(e)) from e

    def add(self, a: DecimalValue, b: DecimalValue) -> DecimalValue:
        return a + b

    def sub(self, a: DecimalValue, b: DecimalValue) -> DecimalValue:
        return a - b

    def multiply(self, a: DecimalValue, scalar: Any) -> DecimalValue:
        return a * self.parse(scalar)

    def _divide(self, a: DecimalValue, divisor: DecimalValue, scale: int) -> DecimalValue:
        return a.divide(divisor, scale)

    def percentage(self, a: DecimalValue, percentage: Any) -> DecimalValue:
        return self.multiply(a, percentage).shift(-_HUNDRED_PLACES)

    def shift(self, a: DecimalValue, places: int) -> DecimalValue:
        return a.shift(places)

    def abs(self, a: DecimalValue) -> DecimalValue:
        return abs(a)

    def inv(self, a: DecimalValue) -> DecimalValue:
        return -a

    def compare(self, a: DecimalValue, b: DecimalValue) -> int:
        return a.compare(b)

    def is_zero(self, a: DecimalValue) -> bool:
        return a.is_zero

    def is_negative(self, a: DecimalValue) -> bool:
        return a.negative

    def round_half_up(self, a: DecimalValue, digits: int) -> DecimalValue:
        return a.round_half_up(digits)

    def integer_digit_count(self, a: DecimalValue) -> int:
        return a.integer_digit_count

    def scale(self, a: DecimalValue) -> int:
        return a.scale

    def to_decimal(self, a: DecimalValue) -> Decimal:
        return a.to_decimal()
