import math
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable

from moneta.domain.exceptions import InvalidAmountError
from moneta.domain.values import DecimalValue

from .base import ArithmeticBackend

# Every float at or above 2**52 is a whole number
_INTEGRAL_FLOAT = 2.0**52


class ApproximateBackend(ArithmeticBackend):
    """
    Native float arithmetic.

    Carries ordinary binary floating-point error, so results may differ from the
    exact backend near rounding boundaries: 1.005 * 100 is 100.49999999999999,
    so 1.005 rounds to 1.00 here, while the exact backend gives 1.01.
    """

    name = "approximate"

    def parse(self, value: Any) -> float:
        if isinstance(value, bool) or value is None:
            raise InvalidAmountError(value)

        if isinstance(value, DecimalValue):
            value = value.to_decimal()

        try:
            number = float(Decimal(str(value)))
        except (InvalidOperation, ValueError) as e:
            raise InvalidAmountError(value, str(e)) from e

        if not math.isfinite(number):
            raise InvalidAmountError(value, "not finite")

        return number

    def add(self, a: float, b: float) -> float:
        return a + b

    def sub(self, a: float, b: float) -> float:
        return a - b

    def multiply(self, a: float, scalar: Any) -> float:
        return a * self.parse(scalar)

    def _divide(self, a: float, divisor: float, scale: int) -> float:
        return a / divisor

    def percentage(self, a: float, percentage: Any) -> float:
        return a * self.parse(percentage) / 100

    def shift(self, a: float, places: int) -> float:
        if places < 0:
            return a / 10**-places
        return a * 10**places

    def abs(self, a: float) -> float:
        return abs(a)

    def inv(self, a: float) -> float:
        return -a if a else 0.0

    def compare(self, a: float, b: float) -> int:
        return (a > b) - (a < b)

    def sum(self, values: Iterable[float]) -> float:
        return math.fsum(values)

    def round_half_up(self, a: float, digits: int) -> float:
        factor = 10**digits
        scaled = abs(a) * factor

        # no fraction bits left to round, or scaling overflowed
        if abs(a) >= _INTEGRAL_FLOAT or not math.isfinite(scaled):
            return a

        magnitude = math.floor(scaled + 0.5) / factor
        if not magnitude:
            return 0.0
        return math.copysign(magnitude, a)

    def integer_digit_count(self, a: float) -> int:
        magnitude = abs(a)
        if magnitude < 1:
            return 0

        # log10 can land on the wrong side of a power of ten, fix it up exactly
        power = math.floor(math.log10(magnitude))
        if 10**power > magnitude:
            power -= 1
        elif 10 ** (power + 1) <= magnitude:
            power += 1

        return power + 1

    def scale(self, a: float) -> int:
        exponent = Decimal(str(a)).as_tuple().exponent
        return max(0, -exponent)

    def to_decimal(self, a: float) -> Decimal:
        return Decimal(str(a))
