from moneta.domain.exceptions import (
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidAmountError,
    MoneyError,
    OverAllocationError,
    UnsupportedCurrencyError,
)
from moneta.domain.models import Money
from moneta.domain.services.factory import MoneyFactory
from moneta.domain.values import CurrencyMetadata, DecimalValue, Err, Ok, Result
from moneta.shared.di import get_money_context

__all__ = [
    "Money",
    "MoneyFactory",
    "CurrencyMetadata",
    "DecimalValue",
    "Ok",
    "Err",
    "Result",
    "get_money_context",
    "MoneyError",
    "InvalidAmountError",
    "UnsupportedCurrencyError",
    "CurrencyMismatchError",
    "DivisionByZeroError",
    "OverAllocationError",
]
