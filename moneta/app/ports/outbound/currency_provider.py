from abc import ABC, abstractmethod

from moneta.domain.values import CurrencyMetadata


class CurrencyMetadataProvider(ABC):
    """
    Read-only source of per-currency reference data.
    Implementations are loaded once and never mutated afterwards.
    """

    @abstractmethod
    def get(self, code: str) -> CurrencyMetadata:
        """
        Get the metadata of a currency.

        :raises UnsupportedCurrencyError: if the code is unknown
        """
        raise NotImplementedError()

    @abstractmethod
    def is_supported(self, code: str) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def codes(self) -> frozenset[str]:
        raise NotImplementedError()

    def fraction_digits(self, code: str) -> int:
        return self.get(code).fraction_digits

    def rounding_increment(self, code: str) -> int:
        return self.get(code).rounding_increment

    def symbol(self, code: str, locale: str = "en") -> str:
        return self.get(code).symbol_for(locale)

    def display_name(self, code: str) -> str:
        return self.get(code).display_name
