from types import MappingProxyType
from typing import Iterable, Optional

from moneta.app.ports.outbound.currency_provider import CurrencyMetadataProvider
from moneta.domain.exceptions import UnsupportedCurrencyError
from moneta.domain.values import CurrencyMetadata
from moneta.shared.logging import get_logger

from .iso4217 import load_currencies

logger = get_logger(__name__)


class InMemoryCurrencyProvider(CurrencyMetadataProvider):
    """
    Currency provider backed by the bundled ISO 4217 table.

    Extra entries replace bundled ones with the same code. The table is frozen
    once built, so a single instance can be shared by every caller.
    """

    def __init__(
        self,
        extra: Optional[Iterable[CurrencyMetadata]] = None,
        include_defaults: bool = True,
    ):
        table: dict[str, CurrencyMetadata] = {}

        if include_defaults:
            table.update((c.code, c) for c in load_currencies())

        for currency in extra or ():
            table[currency.code] = currency

        self._table = MappingProxyType(table)

        logger.info("currency_provider_loaded", currencies=len(self._table))

    @staticmethod
    def _normalize(code: str) -> str:
        return code.strip().upper()

    def get(self, code: str) -> CurrencyMetadata:
        if not isinstance(code, str):
            raise UnsupportedCurrencyError(code)

        try:
            return self._table[self._normalize(code)]
        except KeyError:
            raise UnsupportedCurrencyError(code) from None

    def is_supported(self, code: str) -> bool:
        return isinstance(code, str) and self._normalize(code) in self._table

    def codes(self) -> frozenset[str]:
        return frozenset(self._table)
