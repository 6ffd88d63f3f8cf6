from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Protocol

from financial_system.domain.monetary.currency import Currency, currency_code_of
from financial_system.domain.monetary.currency_registry import PREDEFINED_CURRENCIES
from financial_system.errors import InvalidCurrencyCode

logger = logging.getLogger(__name__)


class CurrencyCatalog(Protocol):
    """Protocol for resolving currency codes to `Currency` records.

    The embedding application decides where currency data comes from; money
    construction only needs these two lookups.
    """

    # region Interface

    def get(self, code: str) -> Currency: ...

    def __contains__(self, code: object) -> bool: ...

    # endregion


class InMemoryCurrencyCatalog:
    """Currency catalog backed by a dictionary keyed by currency code."""

    # region Init

    def __init__(self, currencies: Iterable[Currency]) -> None:
        """Create a catalog from $currencies.

        Raises:
            TypeError: If an element is not a `Currency`.
            ValueError: If two currencies share the same code.
        """
        self._currencies_by_code: dict[str, Currency] = {}
        for currency in currencies:
            if not isinstance(currency, Currency):
                raise TypeError(f"$currencies must contain only Currency instances, but provided value is: {currency}")
            if currency.code in self._currencies_by_code:
                raise ValueError(f"Cannot init `{self.__class__.__name__}` because currency code '{currency.code}' is duplicated")
            self._currencies_by_code[currency.code] = currency

    # endregion

    # region Protocol CurrencyCatalog

    def get(self, code: str) -> Currency:
        """Implements: CurrencyCatalog.get

        Return the currency registered under $code (case-insensitive).

        Raises:
            InvalidCurrencyCode: If the catalog has no entry for $code.
        """
        normalized_code = code.upper().strip() if isinstance(code, str) else code
        currency = self._currencies_by_code.get(normalized_code)
        if currency is None:
            raise InvalidCurrencyCode(f"Currency code '{code}' is not in compliance with ISO 4217 or is not in the catalog")
        return currency

    def __contains__(self, code: object) -> bool:
        """Implements: CurrencyCatalog.__contains__"""
        if isinstance(code, (str, Currency)):
            return currency_code_of(code) in self._currencies_by_code
        return False

    # endregion

    # region Main

    def list_codes(self) -> list[str]:
        """Return all known currency codes, sorted."""
        return sorted(self._currencies_by_code.keys())

    # endregion

    # region Magic

    def __len__(self) -> int:
        return len(self._currencies_by_code)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(currencies={len(self._currencies_by_code)})"

    # endregion


class JsonCurrencyCatalog(InMemoryCurrencyCatalog):
    """Currency catalog loaded from an ISO-4217 JSON list.

    Expected format (extra keys are ignored):

        {
            "BRL": {"name": "Brazilian Real", "fractionSize": 2, "symbol": {"grapheme": "R$"}},
            "JPY": {"name": "Japanese Yen", "fractionSize": 0, "symbol": {"grapheme": "¥"}}
        }
    """

    def __init__(self, path: str | Path) -> None:
        """Load the catalog from the JSON file at $path.

        Raises:
            OSError: If the file cannot be read.
            ValueError: If the file is not valid JSON or an entry is malformed.
        """
        self._path = Path(path)
        with self._path.open("r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Cannot load currency catalog because file '{self._path}' is not valid JSON") from e

        super().__init__(currencies_from_iso_mapping(data))
        logger.info(f"Loaded {len(self)} currencies from '{self._path}'")

    @property
    def path(self) -> Path:
        """Get the source file path."""
        return self._path


def currencies_from_iso_mapping(data: Mapping[str, Any]) -> list[Currency]:
    """Build `Currency` objects from an ISO-4217 mapping of code -> record.

    Raises:
        ValueError: If $data is not a mapping or a record lacks a valid `fractionSize`.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Currency list must be a JSON object keyed by code, but provided value is: {type(data).__name__}")

    result: list[Currency] = []
    for code, record in data.items():
        if not isinstance(record, Mapping) or "fractionSize" not in record:
            raise ValueError(f"Currency record for '{code}' must contain `fractionSize`")

        symbol = record.get("symbol")
        grapheme = symbol.get("grapheme") if isinstance(symbol, Mapping) else None
        result.append(Currency(code, record["fractionSize"], grapheme or None, record.get("name") or None))
    return result


def default_catalog() -> InMemoryCurrencyCatalog:
    """Return a catalog with all predefined ISO-4217 currencies."""
    return InMemoryCurrencyCatalog(PREDEFINED_CURRENCIES)
