from dataclasses import dataclass

from moneta.app.ports.outbound.currency_provider import CurrencyMetadataProvider

from .allocation_service import AllocationService
from .backends import ArithmeticBackend
from .formatting_service import FormattingService
from .magnitude_service import MagnitudeService
from .rounding_service import RoundingService


@dataclass(frozen=True)
class MoneyContext:
    """
    Everything a Money value delegates to: one backend, one currency table and
    the services built on them. Built once and shared, never mutated.
    """

    backend: ArithmeticBackend
    currency_provider: CurrencyMetadataProvider
    rounding: RoundingService
    allocation: AllocationService
    magnitude: MagnitudeService
    formatting: FormattingService
    default_locale: str = "en"
