from __future__ import annotations

from financial_system.domain.account import Account
from financial_system.domain.monetary.money import Money


def format_money(money: Money) -> str:
    """Return $money as currency symbol followed by the amount, e.g. "R$10.00" or "¥10"."""
    return f"{money.currency.symbol}{money.amount:f}"


def format_balance(account: Account) -> str:
    """Return the balance of $account formatted with `format_money`."""
    return format_money(account.balance)
