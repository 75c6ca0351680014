from typing import Any

from moneta.app.ports.outbound.currency_provider import CurrencyMetadataProvider

from .backends import ArithmeticBackend

# One guard digit is all round-half-up needs to decide
_GUARD_DIGITS = 1


class RoundingService:
    """
    Domain service for currency rounding.
    """

    def __init__(
        self, backend: ArithmeticBackend, currency_provider: CurrencyMetadataProvider
    ):
        self._backend = backend
        self._currencies = currency_provider

    def round_half_up(self, value: Any, digits: int) -> Any:
        """
        Round half away from zero to a fixed number of fraction digits.

        :param value: Backend-native value
        :param digits: Fraction digits to keep
        :return: Rounded backend-native value
        """
        return self._backend.round_half_up(value, digits)

    def round_to_currency(self, value: Any, currency: str) -> Any:
        """
        Round a value the way a currency is settled.

        The value is first rounded to the currency's fraction digits. Currencies
        with a rounding increment (CHF settles in 0.05 steps) are then snapped to
        the nearest multiple of that increment.

        :param value: Backend-native value
        :param currency: Currency code known to the currency provider
        :return: Rounded backend-native value
        """
        metadata = self._currencies.get(currency)
        value = self.round_half_up(value, metadata.fraction_digits)

        if not metadata.uses_swiss_rounding:
            return value

        factor = self._backend.shift(
            self._backend.parse(metadata.rounding_increment),
            -metadata.fraction_digits,
        )
        steps = self._backend.divide(value, factor, scale=_GUARD_DIGITS)
        steps = self.round_half_up(steps, 0)

        return self._backend.multiply(steps, factor)
