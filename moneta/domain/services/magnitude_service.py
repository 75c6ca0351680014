from typing import Any

from moneta.app.ports.outbound.currency_provider import CurrencyMetadataProvider

from .backends import ArithmeticBackend
from .rounding_service import RoundingService

UNITS = ("", "k", "m", "bn", "tn")

_UNIT_STEP = 3


class MagnitudeService:
    """
    Compact rendering of amounts with magnitude suffixes, e.g. $3k for 3321.12.
    """

    def __init__(
        self,
        backend: ArithmeticBackend,
        rounding_service: RoundingService,
        currency_provider: CurrencyMetadataProvider,
    ):
        self._backend = backend
        self._rounding = rounding_service
        self._currencies = currency_provider

    def unit_index(self, value: Any) -> int:
        """
        Index into UNITS for a value, based on its rounded integer magnitude.

        The power of ten is the digit count of |value| rounded half-up to an
        integer, minus one, brought down to a multiple of 3 and capped at "tn".
        A value that rounds to 1000 of a unit is promoted to the next unit.
        """
        backend = self._backend
        magnitude = self._rounding.round_half_up(backend.abs(value), 0)

        if backend.is_zero(magnitude):
            return 0

        power = backend.integer_digit_count(magnitude) - 1
        index = min(power // _UNIT_STEP, len(UNITS) - 1)

        if index < len(UNITS) - 1:
            scaled = self._scaled(magnitude, index)
            if backend.integer_digit_count(scaled) > _UNIT_STEP:
                index += 1

        return index

    def shorthand(self, value: Any, currency: str, locale: str = "en") -> str:
        """
        Render <symbol><sign><scaled integer><unit>, e.g. "$3k" or "$-2m".

        :param value: Backend-native amount
        :param currency: Currency code, used for the symbol
        :param locale: Locale used to pick the symbol
        """
        backend = self._backend
        index = self.unit_index(value)
        magnitude = self._rounding.round_half_up(backend.abs(value), 0)
        scaled = self._scaled(magnitude, index)

        sign = "-" if backend.is_negative(value) and not backend.is_zero(scaled) else ""
        symbol = self._currencies.symbol(currency, locale)
        number = int(backend.to_decimal(scaled))

        return f"{symbol}{sign}{number}{UNITS[index]}"

    def _scaled(self, magnitude: Any, index: int) -> Any:
        shifted = self._backend.shift(magnitude, -_UNIT_STEP * index)
        return self._rounding.round_half_up(shifted, 0)
