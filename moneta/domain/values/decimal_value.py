from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import total_ordering
from typing import Any, Union


def _strip(digits: list[int]) -> list[int]:
    """Drop leading zeros. Zero becomes an empty list."""
    index = 0
    while index < len(digits) and digits[index] == 0:
        index += 1
    return digits[index:]


def _pad(digits: list[int], length: int) -> list[int]:
    return [0] * (length - len(digits)) + digits


def _add_digits(x: list[int], y: list[int]) -> list[int]:
    """
    Add two equal-length digit sequences, carrying leftwards.
    The result is one digit longer when the carry leaves the leading position.
    """
    result = [0] * len(x)
    carry = 0

    for i in range(len(x) - 1, -1, -1):
        total = x[i] + y[i] + carry
        result[i] = total % 10
        carry = total // 10

    if carry:
        result.insert(0, carry)

    return result


def _sub_digits(x: list[int], y: list[int]) -> list[int]:
    """Subtract two equal-length digit sequences, x >= y, borrowing leftwards."""
    result = [0] * len(x)
    borrow = 0

    for i in range(len(x) - 1, -1, -1):
        diff = x[i] - y[i] - borrow
        if diff < 0:
            diff += 10
            borrow = 1
        else:
            borrow = 0
        result[i] = diff

    return result


def _compare_magnitudes(x: list[int], y: list[int]) -> int:
    x, y = _strip(x), _strip(y)

    if len(x) != len(y):
        return 1 if len(x) > len(y) else -1
    if x == y:
        return 0
    return 1 if x > y else -1


def _long_divide(dividend: list[int], divisor: list[int]) -> list[int]:
    """Schoolbook long division of magnitudes. Returns the truncated quotient."""
    divisor = _strip(divisor)
    quotient: list[int] = []
    remainder: list[int] = []

    for digit in dividend:
        remainder = _strip(remainder + [digit])
        count = 0

        while _compare_magnitudes(remainder, divisor) >= 0:
            width = max(len(remainder), len(divisor))
            remainder = _strip(
                _sub_digits(_pad(remainder, width), _pad(divisor, width))
            )
            count += 1

        quotient.append(count)

    return quotient or [0]


@total_ordering
@dataclass(frozen=True, eq=False)
class DecimalValue:
    """
    Exact fixed-point decimal number.

    The value is the coefficient `digits` (most significant digit first) with the
    decimal point `scale` positions from the right, negated when `negative` is set.
    All arithmetic is done digit by digit; no binary floating point is involved.

    The coefficient always carries at least `scale + 1` digits, so the integer
    part is never empty, and zero is never negative.
    """

    digits: tuple[int, ...]
    scale: int = 0
    negative: bool = False

    def __post_init__(self) -> None:
        if self.scale < 0:
            raise ValueError(f"Scale cannot be negative: {self.scale}")
        if any(not isinstance(d, int) or not 0 <= d <= 9 for d in self.digits):
            raise ValueError(f"Digits must be integers in 0..9: {self.digits}")

        digits = _strip(list(self.digits))
        digits = _pad(digits, self.scale + 1)

        object.__setattr__(self, "digits", tuple(digits))
        object.__setattr__(self, "negative", bool(self.negative) and any(digits))

    @classmethod
    def zero(cls) -> "DecimalValue":
        return cls((0,))

    @classmethod
    def from_decimal(cls, value: Decimal) -> "DecimalValue":
        if not value.is_finite():
            raise ValueError(f"Value must be finite: {value}")

        sign, digits, exponent = value.as_tuple()

        if exponent >= 0:
            return cls(tuple(digits) + (0,) * exponent, 0, bool(sign))

        return cls(tuple(digits), -exponent, bool(sign))

    @classmethod
    def parse(cls, value: Union["DecimalValue", Decimal, int, str, float]) -> "DecimalValue":
        """
        Build a DecimalValue from a Decimal-like scalar.

        Floats are converted through their shortest string form so that 0.1 becomes
        exactly 0.1 rather than its binary expansion.

        :raises ValueError: if the value is not a finite number
        :raises TypeError: if the value type is not supported
        """
        if isinstance(value, DecimalValue):
            return value

        if isinstance(value, bool):
            raise TypeError(f"Booleans are not amounts: {value}")

        if isinstance(value, Decimal):
            return cls.from_decimal(value)

        if not isinstance(value, (int, float, str)):
            raise TypeError(f"Unsupported amount type: {type(value).__name__}")

        try:
            return cls.from_decimal(Decimal(str(value)))
        except InvalidOperation as e:
            raise ValueError(f"Not a number: {value!r}") from e

    @property
    def is_zero(self) -> bool:
        return not any(self.digits)

    @property
    def integer_digits(self) -> tuple[int, ...]:
        return self.digits[: len(self.digits) - self.scale]

    @property
    def fraction_digits(self) -> tuple[int, ...]:
        return self.digits[len(self.digits) - self.scale :]

    @property
    def integer_digit_count(self) -> int:
        """Number of significant digits before the decimal point, 0 when |self| < 1."""
        return len(_strip(list(self.integer_digits)))

    def _align(self, other: "DecimalValue") -> tuple[list[int], list[int], int]:
        scale = max(self.scale, other.scale)
        x = list(self.digits) + [0] * (scale - self.scale)
        y = list(other.digits) + [0] * (scale - other.scale)
        width = max(len(x), len(y))

        return _pad(x, width), _pad(y, width), scale

    def __add__(self, other: "DecimalValue") -> "DecimalValue":
        if not isinstance(other, DecimalValue):
            return NotImplemented

        x, y, scale = self._align(other)

        if self.negative == other.negative:
            return DecimalValue(tuple(_add_digits(x, y)), scale, self.negative)

        if x >= y:
            return DecimalValue(tuple(_sub_digits(x, y)), scale, self.negative)

        return DecimalValue(tuple(_sub_digits(y, x)), scale, other.negative)

    def __sub__(self, other: "DecimalValue") -> "DecimalValue":
        if not isinstance(other, DecimalValue):
            return NotImplemented

        return self + (-other)

    def __mul__(self, other: "DecimalValue") -> "DecimalValue":
        if not isinstance(other, DecimalValue):
            return NotImplemented

        a, b = self.digits, other.digits
        product = [0] * (len(a) + len(b))

        for i in range(len(a) - 1, -1, -1):
            carry = 0
            for j in range(len(b) - 1, -1, -1):
                total = product[i + j + 1] + a[i] * b[j] + carry
                product[i + j + 1] = total % 10
                carry = total // 10
            product[i] += carry

        return DecimalValue(
            tuple(product), self.scale + other.scale, self.negative != other.negative
        )

    def divide(self, other: "DecimalValue", scale: int) -> "DecimalValue":
        """
        Divide by `other`, keeping `scale` fraction digits.
        Digits beyond `scale` are truncated, never rounded.

        :raises ZeroDivisionError: if `other` is zero
        """
        if other.is_zero:
            raise ZeroDivisionError("DecimalValue division by zero")
        if scale < 0:
            raise ValueError(f"Scale cannot be negative: {scale}")

        # |self| / |other| * 10**scale, expressed on integer coefficients
        shift = scale - self.scale + other.scale
        dividend = list(self.digits)
        divisor = list(other.digits)

        if shift >= 0:
            dividend += [0] * shift
        else:
            divisor += [0] * -shift

        quotient = _long_divide(dividend, divisor)

        return DecimalValue(tuple(quotient), scale, self.negative != other.negative)

    def round_half_up(self, digits: int) -> "DecimalValue":
        """
        Round half away from zero to `digits` fraction digits.

        Only the first dropped digit decides. The increment ripples left through
        runs of 9s, and past the leading digit the integer part grows (9.996 -> 10.00).
        The magnitude is rounded and the sign put back, so -2.005 -> -2.01.
        """
        if digits < 0:
            raise ValueError(f"Digits cannot be negative: {digits}")
        if self.scale <= digits:
            return self

        cut = len(self.digits) - (self.scale - digits)
        kept = list(self.digits[:cut])

        if self.digits[cut] >= 5:
            one = [0] * (len(kept) - 1) + [1]
            kept = _add_digits(kept, one)

        return DecimalValue(tuple(kept), digits, self.negative)

    def truncate(self, digits: int) -> "DecimalValue":
        if digits < 0:
            raise ValueError(f"Digits cannot be negative: {digits}")
        if self.scale <= digits:
            return self

        cut = len(self.digits) - (self.scale - digits)

        return DecimalValue(self.digits[:cut], digits, self.negative)

    def rescale(self, scale: int) -> "DecimalValue":
        """Pad with trailing zeros (or truncate) to exactly `scale` fraction digits."""
        if scale <= self.scale:
            return self.truncate(scale)

        return DecimalValue(
            self.digits + (0,) * (scale - self.scale), scale, self.negative
        )

    def shift(self, places: int) -> "DecimalValue":
        """Multiply by 10**places without touching the digits."""
        if places <= self.scale:
            return DecimalValue(self.digits, self.scale - places, self.negative)

        return DecimalValue(
            self.digits + (0,) * (places - self.scale), 0, self.negative
        )

    def compare(self, other: "DecimalValue") -> int:
        if self.negative != other.negative:
            return -1 if self.negative else 1

        x, y, _ = self._align(other)

        if x == y:
            return 0

        result = 1 if x > y else -1

        return -result if self.negative else result

    def __neg__(self) -> "DecimalValue":
        return DecimalValue(self.digits, self.scale, not self.negative)

    def __abs__(self) -> "DecimalValue":
        return DecimalValue(self.digits, self.scale, False)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Decimal) and not other.is_finite():
            return False
        if isinstance(other, (int, Decimal)) and not isinstance(other, bool):
            other = DecimalValue.parse(other)
        if not isinstance(other, DecimalValue):
            return NotImplemented

        return self.compare(other) == 0

    def __lt__(self, other: "DecimalValue") -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented

        return self.compare(other) < 0

    def __hash__(self) -> int:
        # equal to int and Decimal values, so it must hash like them
        return hash(self.to_decimal())

    def __bool__(self) -> bool:
        return not self.is_zero

    def to_decimal(self) -> Decimal:
        return Decimal((int(self.negative), self.digits, -self.scale))

    def __str__(self) -> str:
        sign = "-" if self.negative else ""
        integer = "".join(str(d) for d in self.integer_digits)

        if not self.scale:
            return f"{sign}{integer}"

        fraction = "".join(str(d) for d in self.fraction_digits)

        return f"{sign}{integer}.{fraction}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self}')"
