from .currency import CurrencyMetadata
from .decimal_value import DecimalValue
from .result import Err, Ok, Result

__all__ = [
    "CurrencyMetadata",
    "DecimalValue",
    "Ok",
    "Err",
    "Result",
]
