from __future__ import annotations

import logging
from decimal import Decimal
from typing import NamedTuple

from financial_system.domain.account import Account
from financial_system.domain.monetary.currency import Currency, currency_code_of
from financial_system.domain.monetary.money import Money, parse_amount
from financial_system.errors import CurrencyMismatch, InsufficientFunds, UnsupportedCurrency, ValueTooLow
from financial_system.utils.numeric_tools import DecimalLike

logger = logging.getLogger(__name__)


class TransferResult(NamedTuple):
    """Container for (sender + receiver) accounts after a transfer."""

    sender: Account
    receiver: Account


def create_account(account_id: object, owner: str, currency: Currency) -> Account:
    """Create an account holding a zero balance of $currency."""
    account = Account(account_id, owner, currency)
    logger.debug(f"Created account {account_id} for '{owner}' in {currency}")
    return account


def deposit(account: Account, value: DecimalLike, currency: Currency | str) -> Account:
    """Return $account with $value added to its balance.

    Args:
        account: Account receiving the money.
        value: Amount to add, rounded down to the account precision.
        currency: Currency of $value; must be the account currency.

    Raises:
        InvalidAmount: If $value is negative or not a number.
        UnsupportedCurrency: If $currency is not the account currency.
        ValueTooLow: If $value is below the atomic unit of the account currency.
    """
    amount = parse_amount(value)
    _check_account_currency(account, currency, "deposit")
    _check_operable_amount(account, amount, "deposit")

    deposited = Money(amount, account.currency, account.balance.precision)
    new_balance = deposited.add(account.balance)

    logger.debug(f"Deposited {deposited} into account {account.id}; balance is now {new_balance}")
    return account.with_balance(new_balance)


def withdraw(account: Account, value: DecimalLike, currency: Currency | str) -> Account:
    """Return $account with $value removed from its balance.

    Raises:
        InvalidAmount: If $value is negative or not a number.
        UnsupportedCurrency: If $currency is not the account currency.
        ValueTooLow: If $value is below the atomic unit of the account currency.
        InsufficientFunds: If the balance is lower than $value.
    """
    amount = parse_amount(value)
    _check_account_currency(account, currency, "withdraw")
    _check_operable_amount(account, amount, "withdraw")

    # Raise: balance must cover the withdrawal
    if account.balance.amount < amount:
        raise InsufficientFunds(f"Cannot call `withdraw` because account {account.id} has no funds for $value ({amount} {account.currency}); balance is {account.balance}")

    withdrawn = Money(amount, account.currency, account.balance.precision)
    new_balance = account.balance.subtract(withdrawn)

    logger.debug(f"Withdrew {withdrawn} from account {account.id}; balance is now {new_balance}")
    return account.with_balance(new_balance)


def transfer(sender: Account, receiver: Account, value: DecimalLike) -> TransferResult:
    """Move $value between two accounts that hold the same currency.

    Both resulting accounts are computed before anything is returned, so a
    failure never leaves a half-applied transfer.

    Raises:
        CurrencyMismatch: If sender and receiver hold different currencies.
        InvalidAmount | ValueTooLow | InsufficientFunds: Propagated from withdraw/deposit.
    """
    # Raise: ordinary transfers stay within one currency
    if sender.currency != receiver.currency:
        raise CurrencyMismatch(f"Cannot call `transfer` between {sender.currency} and {receiver.currency}; use `transfer_international` instead")

    new_sender = withdraw(sender, value, sender.currency)
    new_receiver = deposit(receiver, value, sender.currency)

    logger.debug(f"Transferred {value} {sender.currency} from account {sender.id} to account {receiver.id}")
    return TransferResult(sender=new_sender, receiver=new_receiver)


# region Checks


def _check_account_currency(account: Account, currency: Currency | str, operation: str) -> None:
    if currency_code_of(currency) != account.currency.code:
        raise UnsupportedCurrency(f"Cannot call `{operation}` because account {account.id} doesn't support {currency_code_of(currency)}, only {account.currency}")


def _check_operable_amount(account: Account, amount: Decimal, operation: str) -> None:
    if amount < account.balance.atomic_unit:
        raise ValueTooLow(f"Cannot call `{operation}` because $value ({amount}) is too low to be operated in {account.currency}")


# endregion
