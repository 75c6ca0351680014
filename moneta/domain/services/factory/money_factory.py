from typing import Any

from moneta.domain.exceptions import InvalidAmountError, MoneyError
from moneta.domain.models import Money
from moneta.domain.services.money_context import MoneyContext
from moneta.domain.values import Err, Ok, Result


class MoneyFactory:
    def __init__(self, context: MoneyContext):
        self._context = context

    def create(self, amount: Any, currency: str) -> Money:
        return Money(amount, currency, self._context)

    def zero(self, currency: str) -> Money:
        return self.create(0, currency)

    def from_string(self, value: str) -> Money:
        """
        Parse Money from a string like '1000.50 USD'.

        :raises InvalidAmountError: if the string is not '<amount> <currency>'
        :raises UnsupportedCurrencyError: if the currency is unknown
        """
        parts = value.split() if isinstance(value, str) else []

        if len(parts) != 2:
            raise InvalidAmountError(value, "expected '<amount> <currency>'")

        amount, currency = parts

        return self.create(amount, currency)

    def try_create(self, amount: Any, currency: str) -> Result[Money]:
        return Money.try_create(amount, currency, self._context)

    def try_from_string(self, value: str) -> Result[Money]:
        try:
            return Ok(self.from_string(value))
        except MoneyError as e:
            return Err(e)
