from typing import Any, Sequence

from moneta.domain.exceptions import InvalidAmountError, OverAllocationError
from moneta.shared.logging import get_logger

from .backends import ArithmeticBackend
from .rounding_service import RoundingService

logger = get_logger(__name__)

_WHOLE = 100


class AllocationService:
    """
    Splits an amount into percentage shares without losing or creating money.
    """

    def __init__(self, backend: ArithmeticBackend, rounding_service: RoundingService):
        self._backend = backend
        self._rounding = rounding_service

    def split(
        self,
        value: Any,
        currency: str,
        percentages: Sequence[Any],
        rounded: bool = True,
    ) -> list[Any]:
        """
        Allocate `value` by percentages.

        When the percentages add up to less than 100, the unallocated rest becomes
        an extra, final share. With `rounded`, every share but the final one is
        rounded for the currency and the final share takes whatever is left, so
        the shares always add up to `value` exactly.

        :param value: Backend-native amount to split
        :param currency: Currency code used for rounding
        :param percentages: Percentages in 0..100, totalling 100 or less
        :param rounded: Round shares to the currency's precision

        :return: Backend-native shares, in input order, remainder last
        :raises OverAllocationError: if the percentages total more than 100
        :raises InvalidAmountError: if a percentage is negative or not a number
        """
        backend = self._backend
        parsed = [backend.parse(p) for p in percentages]

        for original, percentage in zip(percentages, parsed):
            if backend.is_negative(percentage):
                raise InvalidAmountError(original, "percentage cannot be negative")

        hundred = backend.parse(_WHOLE)
        total_percentage = backend.sum(parsed)
        overflow = backend.compare(total_percentage, hundred)

        if overflow > 0:
            logger.warning(
                "split_over_allocated",
                currency=currency,
                total_percentage=str(total_percentage),
            )
            raise OverAllocationError(percentages, total_percentage)

        if rounded:
            shares = self._split_rounded(value, currency, parsed, overflow != 0)
        else:
            shares = self._split_exact(value, parsed, overflow != 0)

        logger.debug(
            "split_computed",
            currency=currency,
            shares=len(shares),
            rounded=rounded,
        )

        return shares

    def _split_exact(
        self, value: Any, percentages: list[Any], has_remainder: bool
    ) -> list[Any]:
        backend = self._backend
        shares = []
        allocated = backend.parse(0)

        for percentage in percentages:
            share = backend.percentage(value, percentage)
            allocated = backend.add(allocated, share)
            shares.append(share)

        if has_remainder:
            shares.append(backend.sub(value, allocated))

        return shares

    def _split_rounded(
        self, value: Any, currency: str, percentages: list[Any], has_remainder: bool
    ) -> list[Any]:
        backend = self._backend

        if has_remainder:
            # placeholder entry, its share is whatever is left over
            percentages = percentages + [backend.parse(0)]

        shares = []
        allocated = backend.parse(0)

        for percentage in percentages[:-1]:
            share = self._rounding.round_to_currency(
                backend.percentage(value, percentage), currency
            )
            allocated = backend.add(allocated, share)
            shares.append(share)

        shares.append(backend.sub(value, allocated))

        return shares
