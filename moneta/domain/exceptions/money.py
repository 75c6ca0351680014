from typing import Any, Optional, Sequence

from .base import DomainException


class MoneyError(DomainException):
    """Base exception for money-related errors."""

    pass


class InvalidAmountError(MoneyError, ValueError):
    """Raised when an amount (or a scalar operand) is not a well-formed number."""

    def __init__(self, amount: Any, reason: Optional[str] = None):
        self.amount = amount

        message = f"Money only accepts numeric amounts, got: {amount!r}"

        if reason:
            message += f" ({reason})"

        super().__init__(message)


class UnsupportedCurrencyError(MoneyError, ValueError):
    """Raised when a currency code is unknown to the currency provider."""

    def __init__(self, currency: Any):
        self.currency = currency

        super().__init__(f"{currency} is not a supported currency")


class CurrencyMismatchError(MoneyError):
    """Raised when a binary operation mixes two currencies."""

    def __init__(self, left: str, right: str):
        self.left = left
        self.right = right

        super().__init__(f"Currencies must match: {left} and {right}")


class DivisionByZeroError(MoneyError, ZeroDivisionError):
    def __init__(self, dividend: Any):
        self.dividend = dividend

        super().__init__(f"Cannot divide {dividend} by zero")


class OverAllocationError(MoneyError, ValueError):
    """Raised when split percentages add up to more than 100."""

    def __init__(self, percentages: Sequence[Any], total: Any):
        self.percentages = list(percentages)
        self.total = total

        super().__init__(f"Only 100% can be allocated, got {total}%")
