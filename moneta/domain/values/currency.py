from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class CurrencyMetadata:
    """
    Read-only reference data for one currency.

    `rounding_increment` is expressed in minor units: 0 means plain rounding to
    `fraction_digits`, 5 with two fraction digits means rounding to the nearest 0.05.
    `symbols` holds locale-specific symbol overrides, `symbol` is the fallback.
    """

    code: str
    fraction_digits: int
    rounding_increment: int = 0
    symbol: Optional[str] = None
    display_name: Optional[str] = None
    symbols: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code.strip():
            raise ValueError("Currency code cannot be empty")
        if not self.code.strip().isalnum():
            raise ValueError(
                f"Currency code must only contain letters and numbers: {self.code}"
            )
        if self.fraction_digits < 0:
            raise ValueError(
                f"Fraction digits cannot be negative: {self.fraction_digits}"
            )
        if self.rounding_increment < 0:
            raise ValueError(
                f"Rounding increment cannot be negative: {self.rounding_increment}"
            )

        code = self.code.strip().upper()

        object.__setattr__(self, "code", code)
        object.__setattr__(self, "symbol", self.symbol or code)
        object.__setattr__(self, "display_name", self.display_name or code)
        object.__setattr__(self, "symbols", MappingProxyType(dict(self.symbols)))

    @property
    def uses_swiss_rounding(self) -> bool:
        return self.rounding_increment > 0 and self.fraction_digits > 0

    def symbol_for(self, locale: str) -> str:
        return self.symbols.get(locale, self.symbol)

    def __str__(self) -> str:
        return self.code

    def __hash__(self) -> int:
        return hash(self.code)
