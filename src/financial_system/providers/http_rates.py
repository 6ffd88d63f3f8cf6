from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any
from urllib.parse import urlparse

import requests

from financial_system.errors import RateProviderError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class HttpExchangeRateProvider:
    """Fetches the rate table from an HTTP endpoint on every call.

    The endpoint must answer with a JSON body like:

        {"base": "EUR", "rates": {"BRL": 4.3, "USD": 1.13, "JPY": 127.4}}

    If the base currency is not listed among the rates, it is added with rate 1.
    Rates are not cached and failed requests are not retried.
    """

    # region Init

    def __init__(self, url: str, *, timeout: float = DEFAULT_TIMEOUT, session: requests.Session | None = None) -> None:
        """Create a provider for $url.

        Args:
            url: Full URL of the rates endpoint (including any API key query parameter).
            timeout: Seconds to wait for the connection and for the response.
            session: Optional `requests.Session` to reuse connections.

        Raises:
            ValueError: If $url is empty or $timeout is not positive.
        """
        if not isinstance(url, str) or not url.strip():
            raise ValueError(f"$url must be a non-empty string, but provided value is: '{url}'")
        if timeout <= 0:
            raise ValueError(f"$timeout must be positive, but provided value is: {timeout}")

        self._url = url.strip()
        # Logged form of the URL, without the query string
        parsed = urlparse(self._url)
        self._display_url = f"{parsed.netloc}{parsed.path}" or self._url
        self._timeout = timeout
        self._session = session if session is not None else requests.Session()

    # endregion

    # region Protocol ExchangeRateProvider

    def get_rates(self) -> Mapping[str, Decimal]:
        """Implements: ExchangeRateProvider.get_rates

        Raises:
            RateProviderError: If the request fails, times out, returns a non-2xx
                status or the body is not a valid rate table.
        """
        logger.info(f"Fetching exchange rates from '{self._display_url}'")
        try:
            response = self._session.get(self._url, timeout=self._timeout)
            response.raise_for_status()
            body = response.json()
        except requests.exceptions.Timeout as e:
            logger.error(f"Timeout fetching exchange rates from '{self._display_url}' after {self._timeout}s")
            raise RateProviderError(f"Timeout fetching exchange rates from '{self._display_url}'") from e
        except requests.exceptions.HTTPError as e:
            logger.error(f"HTTP error fetching exchange rates from '{self._display_url}': {e}")
            raise RateProviderError(f"HTTP error fetching exchange rates from '{self._display_url}': {e}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Error fetching exchange rates from '{self._display_url}': {e}")
            raise RateProviderError(f"Error fetching exchange rates from '{self._display_url}': {e}") from e
        except ValueError as e:
            logger.error(f"Invalid JSON in exchange rates response from '{self._display_url}': {e}")
            raise RateProviderError(f"Invalid JSON in exchange rates response from '{self._display_url}'") from e

        rates = parse_rates_payload(body)
        logger.debug(f"Fetched {len(rates)} exchange rate(s) from '{self._display_url}'")
        return rates

    # endregion

    @property
    def url(self) -> str:
        return self._url

    @property
    def timeout(self) -> float:
        return self._timeout

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(url='{self._display_url}', timeout={self._timeout})"


def parse_rates_payload(body: Any) -> dict[str, Decimal]:
    """Extract the rate table from a decoded `{"base": ..., "rates": {...}}` body.

    Raises:
        RateProviderError: If $body has no `rates` object or a rate is not numeric.
    """
    if not isinstance(body, Mapping) or not isinstance(body.get("rates"), Mapping):
        raise RateProviderError("Exchange rates response must be an object containing a `rates` object")

    rates: dict[str, Decimal] = {}
    for code, raw_rate in body["rates"].items():
        # bool is a JSON literal, never a rate
        if isinstance(raw_rate, bool) or not isinstance(raw_rate, (int, float, str)):
            raise RateProviderError(f"Exchange rate for '{code}' must be a number, but provided value is: {raw_rate}")
        try:
            rates[str(code).upper()] = Decimal(str(raw_rate))
        except InvalidOperation as e:
            raise RateProviderError(f"Exchange rate for '{code}' must be a number, but provided value is: {raw_rate}") from e

    base = body.get("base")
    if isinstance(base, str) and base.strip() and base.upper().strip() not in rates:
        rates[base.upper().strip()] = Decimal("1")

    return rates
