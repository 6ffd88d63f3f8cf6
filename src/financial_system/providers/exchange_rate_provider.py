from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Protocol


class ExchangeRateProvider(Protocol):
    """Protocol for sources of exchange rates.

    A rate table maps currency codes to the number of units of that currency
    worth one unit of a common base currency (the base itself maps to 1).
    """

    # region Interface

    def get_rates(self) -> Mapping[str, Decimal]: ...

    # endregion
