from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional, Sequence

from moneta.domain.exceptions import (
    CurrencyMismatchError,
    MoneyError,
    UnsupportedCurrencyError,
)
from moneta.domain.services.money_context import MoneyContext
from moneta.domain.values import Err, Ok, Result


def _default_context() -> MoneyContext:
    from moneta.shared.di import get_money_context

    return get_money_context()


@dataclass(frozen=True)
class Money:
    """
    The Money model.

    An immutable amount in one currency. The amount is stored in the native type
    of the context's arithmetic backend; every operation returns a new Money in
    the same currency and context.

    :raises UnsupportedCurrencyError: if the currency is unknown to the context
    :raises InvalidAmountError: if the amount is not a number
    """

    amount: Any
    currency: str
    context: Optional[MoneyContext] = field(
        default=None, compare=False, repr=False, hash=False
    )

    def __post_init__(self) -> None:
        context = self.context or _default_context()

        if not context.currency_provider.is_supported(self.currency):
            raise UnsupportedCurrencyError(self.currency)

        object.__setattr__(self, "context", context)
        object.__setattr__(
            self, "currency", context.currency_provider.get(self.currency).code
        )
        object.__setattr__(self, "amount", context.backend.parse(self.amount))

    @classmethod
    def try_create(
        cls, amount: Any, currency: str, context: Optional[MoneyContext] = None
    ) -> Result["Money"]:
        """Build a Money, returning Err instead of raising on invalid input."""
        try:
            return Ok(cls(amount, currency, context))
        except MoneyError as e:
            return Err(e)

    def _new(self, amount: Any) -> "Money":
        return Money(amount, self.currency, self.context)

    def _check_same_currency(self, other: "Money") -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Expected Money, got: {type(other).__name__}")
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)

    def _operand(self, other: "Money") -> Any:
        self._check_same_currency(other)
        return self.context.backend.parse(other.amount)

    def get_amount(self) -> Decimal:
        return self.context.backend.to_decimal(self.amount)

    def get_currency(self) -> str:
        return self.currency

    def is_zero(self) -> bool:
        return self.context.backend.is_zero(self.amount)

    def is_negative(self) -> bool:
        return self.context.backend.is_negative(self.amount)

    # Arithmetic

    def add(self, other: "Money") -> "Money":
        return self._new(self.context.backend.add(self.amount, self._operand(other)))

    def sub(self, other: "Money") -> "Money":
        return self._new(self.context.backend.sub(self.amount, self._operand(other)))

    def multiply(self, operator: Any) -> "Money":
        return self._new(self.context.backend.multiply(self.amount, operator))

    def divide(self, operator: Any, scale: Optional[int] = None) -> "Money":
        """
        Divide by a scalar.

        On the exact backend the quotient keeps `scale` fraction digits (the
        currency's fraction digits by default) and the rest is truncated.

        :raises DivisionByZeroError: if the operator equals zero
        """
        if scale is None:
            scale = self.context.currency_provider.fraction_digits(self.currency)

        return self._new(self.context.backend.divide(self.amount, operator, scale))

    def percentage(self, percentage: Any) -> "Money":
        """A share of this amount, percentage between 0 and 100."""
        return self._new(self.context.backend.percentage(self.amount, percentage))

    def abs(self) -> "Money":
        return self._new(self.context.backend.abs(self.amount))

    def inv(self) -> "Money":
        return self._new(self.context.backend.inv(self.amount))

    def try_add(self, other: "Money") -> Result["Money"]:
        try:
            return Ok(self.add(other))
        except MoneyError as e:
            return Err(e)

    def try_sub(self, other: "Money") -> Result["Money"]:
        try:
            return Ok(self.sub(other))
        except MoneyError as e:
            return Err(e)

    def try_divide(self, operator: Any, scale: Optional[int] = None) -> Result["Money"]:
        try:
            return Ok(self.divide(operator, scale))
        except MoneyError as e:
            return Err(e)

    # Rounding and allocation

    def get_rounded_amount(self) -> Decimal:
        """The amount rounded the way the currency is settled."""
        return self.context.backend.to_decimal(
            self.context.rounding.round_to_currency(self.amount, self.currency)
        )

    def round(self) -> "Money":
        return self._new(
            self.context.rounding.round_to_currency(self.amount, self.currency)
        )

    def split(self, percentages: Sequence[Any], round: bool = True) -> list["Money"]:
        """
        Allocate this amount in shares by percentage.

        The final entry gets any remaining units. If the percentages total less
        than 100, the rest is allocated to an extra, final share. Shares are
        rounded to the currency's precision unless `round` is False.

        :raises OverAllocationError: if the percentages total more than 100
        """
        shares = self.context.allocation.split(
            self.amount, self.currency, percentages, rounded=round
        )
        return [self._new(share) for share in shares]

    def try_split(
        self, percentages: Sequence[Any], round: bool = True
    ) -> Result[list["Money"]]:
        try:
            return Ok(self.split(percentages, round))
        except MoneyError as e:
            return Err(e)

    # Formatting

    def format(
        self, display_country_for_us: bool = False, locale: Optional[str] = None
    ) -> str:
        return self.context.formatting.format(
            self.amount,
            self.currency,
            display_country_for_us,
            locale or self.context.default_locale,
        )

    def format_with_sign(
        self, display_country_for_us: bool = False, locale: Optional[str] = None
    ) -> str:
        return self.context.formatting.format_with_sign(
            self.amount,
            self.currency,
            display_country_for_us,
            locale or self.context.default_locale,
        )

    def format_for_accounting(self) -> str:
        return self.context.formatting.format_for_accounting(self.amount, self.currency)

    def format_shorthand(self, locale: Optional[str] = None) -> str:
        return self.context.magnitude.shorthand(
            self.amount, self.currency, locale or self.context.default_locale
        )

    # Comparison (ordering requires the same currency)

    def _compare(self, other: "Money") -> int:
        return self.context.backend.compare(self.amount, self._operand(other))

    def __lt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._compare(other) >= 0

    # Operators

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: Any) -> "Money":
        if isinstance(other, Money):
            return NotImplemented  # Money * Money doesn't make sense
        return self.multiply(other)

    def __rmul__(self, other: Any) -> "Money":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "Money":
        if isinstance(other, Money):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> "Money":
        return self.inv()

    def __abs__(self) -> "Money":
        return self.abs()

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.amount}', '{self.currency}')"
