from .allocation_service import AllocationService
from .backends import ApproximateBackend, ArithmeticBackend, ExactBackend
from .formatting_service import FormattingService
from .magnitude_service import MagnitudeService
from .money_context import MoneyContext
from .rounding_service import RoundingService

__all__ = [
    "AllocationService",
    "ArithmeticBackend",
    "ExactBackend",
    "ApproximateBackend",
    "FormattingService",
    "MagnitudeService",
    "MoneyContext",
    "RoundingService",
]
