from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation

from financial_system.utils.numeric_tools import DecimalLike, as_decimal


class StaticExchangeRateProvider:
    """Exchange rate provider serving a fixed, in-memory rate table.

    Useful for tests and for applications that load rates on their own.
    """

    # region Init

    def __init__(self, rates: Mapping[str, DecimalLike]) -> None:
        """Create a provider from $rates (currency code -> units per base).

        Raises:
            ValueError: If a rate cannot be converted to Decimal.
        """
        self._rates: dict[str, Decimal] = {}
        for code, rate in rates.items():
            try:
                self._rates[code.upper().strip()] = as_decimal(rate)
            except (ValueError, TypeError, InvalidOperation) as e:
                raise ValueError(f"Cannot init `{self.__class__.__name__}` because rate for '{code}' ({rate}) cannot be converted to Decimal") from e

    # endregion

    # region Protocol ExchangeRateProvider

    def get_rates(self) -> Mapping[str, Decimal]:
        """Implements: ExchangeRateProvider.get_rates

        Return a copy of the rate table.
        """
        return dict(self._rates)

    # endregion

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rates={len(self._rates)})"
