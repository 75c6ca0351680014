from .base import DomainException
from .money import (
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidAmountError,
    MoneyError,
    OverAllocationError,
    UnsupportedCurrencyError,
)

__all__ = [
    "DomainException",
    "MoneyError",
    "InvalidAmountError",
    "UnsupportedCurrencyError",
    "CurrencyMismatchError",
    "DivisionByZeroError",
    "OverAllocationError",
]
