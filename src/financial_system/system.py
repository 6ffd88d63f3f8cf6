from __future__ import annotations

import logging
from collections.abc import Sequence

from financial_system.config import Settings, load_settings
from financial_system.domain.account import Account
from financial_system.domain.monetary.currency import Currency
from financial_system.domain.monetary.currency_catalog import CurrencyCatalog, JsonCurrencyCatalog, default_catalog
from financial_system.domain.monetary.money import DivisionResult, Money
from financial_system.errors import RateUnavailable
from financial_system.ledger import account_operations, distribution
from financial_system.ledger import exchange as exchange_operations
from financial_system.ledger.account_operations import TransferResult
from financial_system.ledger.balance_display import format_balance
from financial_system.ledger.distribution import AccountOperation, SplitTransferResult
from financial_system.providers.exchange_rate_provider import ExchangeRateProvider
from financial_system.providers.http_rates import HttpExchangeRateProvider
from financial_system.utils.numeric_tools import DecimalLike

logger = logging.getLogger(__name__)


class FinancialSystem:
    """Entry point wiring the currency catalog and the exchange rate provider
    into money and account operations.

    Every operation is a pure transformation: accounts and money passed in are
    never modified, new values are returned instead. Errors are raised as
    `FinancialSystemError` subclasses and nothing is partially applied.

    Example:
        ```python
        fs = FinancialSystem()
        sender = fs.deposit(fs.create_account(1, "Fidalgo", "BRL"), 10, "BRL")
        receiver = fs.create_account(2, "Amigo", "BRL")
        sender, receiver = fs.transfer(sender, receiver, 5)
        fs.format_balance(receiver)  # "R$5.00"
        ```
    """

    # region Init

    def __init__(
        self,
        catalog: CurrencyCatalog | None = None,
        rate_provider: ExchangeRateProvider | None = None,
    ) -> None:
        """Create a FinancialSystem.

        Args:
            catalog: Currency catalog. If None, the predefined ISO-4217 currencies are used.
            rate_provider: Exchange rate provider. If None, exchange operations raise `RateUnavailable`.
        """
        self._catalog = catalog if catalog is not None else default_catalog()
        self._rate_provider = rate_provider

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> FinancialSystem:
        """Create a FinancialSystem configured from $settings (or from the environment)."""
        if settings is None:
            settings = load_settings()

        catalog = JsonCurrencyCatalog(settings.currencies_file) if settings.currencies_file is not None else default_catalog()

        rate_provider = None
        if settings.exchange_api_url is not None:
            rate_provider = HttpExchangeRateProvider(settings.exchange_api_url, timeout=settings.exchange_api_timeout)
        else:
            logger.info("No exchange API configured; international transfers are disabled")

        return cls(catalog=catalog, rate_provider=rate_provider)

    # endregion

    # region Money

    def money(self, amount: DecimalLike, currency_code: str, precision: int | None = None) -> Money:
        """Construct Money, resolving $currency_code through the catalog."""
        return Money.of(amount, currency_code, self._catalog, precision)

    def currency(self, currency_code: str) -> Currency:
        """Return the catalog entry for $currency_code."""
        return self._catalog.get(currency_code)

    def add(self, a: Money, b: Money) -> Money:
        return a.add(b)

    def subtract(self, a: Money, b: Money) -> Money:
        return a.subtract(b)

    def scale(self, money: Money, factor: DecimalLike) -> Money:
        return money.scale(factor)

    def divide_with_remainder(self, money: Money, divisor: DecimalLike) -> DivisionResult:
        return money.divide_with_remainder(divisor)

    def exchange(self, money: Money, to_currency_code: str) -> Money:
        """Convert $money into the currency named by $to_currency_code."""
        to_currency = self._catalog.get(to_currency_code)
        return exchange_operations.exchange(money, to_currency, self._require_rate_provider())

    # endregion

    # region Accounts

    def create_account(self, account_id: object, owner: str, currency_code: str) -> Account:
        """Create an account with zero balance.

        Raises:
            InvalidCurrencyCode: If $currency_code is not in the catalog.
        """
        return account_operations.create_account(account_id, owner, self._catalog.get(currency_code))

    def deposit(self, account: Account, value: DecimalLike, currency_code: str) -> Account:
        return account_operations.deposit(account, value, currency_code)

    def withdraw(self, account: Account, value: DecimalLike, currency_code: str) -> Account:
        return account_operations.withdraw(account, value, currency_code)

    def transfer(self, sender: Account, receiver: Account, value: DecimalLike) -> TransferResult:
        return account_operations.transfer(sender, receiver, value)

    def transfer_international(self, sender: Account, receiver: Account, to_currency_code: str, value: DecimalLike) -> TransferResult:
        """Send $value of $to_currency_code to $receiver, paid in the sender currency."""
        to_currency = self._catalog.get(to_currency_code)
        return exchange_operations.transfer_international(sender, receiver, to_currency, value, self._require_rate_provider())

    def split_transfer(
        self,
        sender: Account,
        receivers: Sequence[Account],
        value: DecimalLike,
        weights: Sequence[DecimalLike],
    ) -> SplitTransferResult:
        return distribution.split_transfer(sender, receivers, value, weights)

    def undistributed_amount(self, value: DecimalLike, weights: Sequence[DecimalLike], currency_code: str) -> Money:
        """Return the part of $value that a split by $weights loses to rounding."""
        return distribution.undistributed_amount(value, weights, self._catalog.get(currency_code))

    def split_value(
        self,
        accounts: Sequence[Account],
        value: DecimalLike,
        weights: Sequence[DecimalLike],
        operation: AccountOperation,
    ) -> list[Account]:
        return distribution.split_value(accounts, value, weights, operation)

    def format_balance(self, account: Account) -> str:
        return format_balance(account)

    # endregion

    # region Properties

    @property
    def catalog(self) -> CurrencyCatalog:
        return self._catalog

    @property
    def rate_provider(self) -> ExchangeRateProvider | None:
        return self._rate_provider

    # endregion

    def _require_rate_provider(self) -> ExchangeRateProvider:
        if self._rate_provider is None:
            raise RateUnavailable("Cannot exchange currencies because no exchange rate provider is configured")
        return self._rate_provider
