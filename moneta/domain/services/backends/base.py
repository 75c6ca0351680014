from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Iterable, Optional

from moneta.domain.exceptions import DivisionByZeroError
from moneta.shared.logging import get_logger

logger = get_logger(__name__)


class ArithmeticBackend(ABC):
    """
    Capability interface over a numeric representation.

    A backend is picked once, when the money context is built, and every Money
    created in that context stores its amount in the backend's native type.
    """

    name: str = "abstract"

    @abstractmethod
    def parse(self, value: Any) -> Any:
        """
        Convert a Decimal-like scalar into the native representation.

        :raises InvalidAmountError: if the value is not a finite number
        """
        raise NotImplementedError()

    @abstractmethod
    def add(self, a: Any, b: Any) -> Any:
        raise NotImplementedError()

    @abstractmethod
    def sub(self, a: Any, b: Any) -> Any:
        raise NotImplementedError()

    @abstractmethod
    def multiply(self, a: Any, scalar: Any) -> Any:
        raise NotImplementedError()

    @abstractmethod
    def _divide(self, a: Any, divisor: Any, scale: int) -> Any:
        raise NotImplementedError()

    @abstractmethod
    def percentage(self, a: Any, percentage: Any) -> Any:
        """a * percentage / 100, without intermediate rounding."""
        raise NotImplementedError()

    @abstractmethod
    def shift(self, a: Any, places: int) -> Any:
        """a * 10**places."""
        raise NotImplementedError()

    @abstractmethod
    def abs(self, a: Any) -> Any:
        raise NotImplementedError()

    @abstractmethod
    def inv(self, a: Any) -> Any:
        raise NotImplementedError()

    @abstractmethod
    def compare(self, a: Any, b: Any) -> int:
        raise NotImplementedError()

    @abstractmethod
    def round_half_up(self, a: Any, digits: int) -> Any:
        raise NotImplementedError()

    @abstractmethod
    def integer_digit_count(self, a: Any) -> int:
        """Number of digits before the decimal point of |a|, 0 when |a| < 1."""
        raise NotImplementedError()

    @abstractmethod
    def scale(self, a: Any) -> int:
        raise NotImplementedError()

    @abstractmethod
    def to_decimal(self, a: Any) -> Decimal:
        raise NotImplementedError()

    def divide(self, a: Any, scalar: Any, scale: Optional[int] = None) -> Any:
        """
        Divide by a scalar.

        :param scale: Fraction digits kept by backends that truncate the quotient
        :raises DivisionByZeroError: if the scalar equals zero
        """
        divisor = self.parse(scalar)

        if self.is_zero(divisor):
            logger.warning("division_by_zero_rejected", dividend=str(a))
            raise DivisionByZeroError(a)

        return self._divide(a, divisor, self.scale(a) if scale is None else scale)

    def sum(self, values: Iterable[Any]) -> Any:
        total = self.parse(0)
        for value in values:
            total = self.add(total, value)
        return total

    def is_zero(self, a: Any) -> bool:
        return self.compare(a, self.parse(0)) == 0

    def is_negative(self, a: Any) -> bool:
        return self.compare(a, self.parse(0)) < 0
