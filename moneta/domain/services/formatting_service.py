from typing import Any

from moneta.app.ports.outbound.currency_provider import CurrencyMetadataProvider

from .backends import ArithmeticBackend
from .rounding_service import RoundingService

_US_PREFIX = "US"


class FormattingService:
    """
    Presentation helpers on top of currency rounding: symbols, grouping and
    accounting-style negatives.
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

    def format(
        self,
        value: Any,
        currency: str,
        display_country_for_us: bool = False,
        locale: str = "en",
    ) -> str:
        """
        Rounded amount with the currency symbol, e.g. "$1,234.57" or "-€0.50".

        :param display_country_for_us: Render US dollars as "US$" instead of "$"
        """
        rounded = self._rounding.round_to_currency(value, currency)
        symbol = self._currencies.symbol(currency, locale)

        if display_country_for_us and self._currencies.get(currency).code == "USD":
            symbol = _US_PREFIX + symbol.removeprefix(_US_PREFIX)

        sign = "-" if self._backend.is_negative(rounded) else ""

        return f"{sign}{symbol}{self._group(rounded, currency)}"

    def format_with_sign(
        self,
        value: Any,
        currency: str,
        display_country_for_us: bool = False,
        locale: str = "en",
    ) -> str:
        """Same as format(), with a leading "+" for positive amounts."""
        formatted = self.format(value, currency, display_country_for_us, locale)

        if self._backend.compare(value, self._backend.parse(0)) > 0:
            return "+" + formatted

        return formatted

    def format_for_accounting(self, value: Any, currency: str) -> str:
        """Rounded amount without symbol, negatives in parentheses: "(1,234.57)"."""
        rounded = self._rounding.round_to_currency(value, currency)
        body = self._group(rounded, currency)

        if self._backend.is_negative(rounded):
            return f"({body})"

        return body

    def _group(self, value: Any, currency: str) -> str:
        digits = self._currencies.fraction_digits(currency)
        magnitude = self._backend.to_decimal(self._backend.abs(value))
        return f"{magnitude:,.{digits}f}"
