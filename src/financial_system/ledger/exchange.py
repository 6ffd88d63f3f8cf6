from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation

from financial_system.domain.account import Account
from financial_system.domain.monetary.currency import Currency
from financial_system.domain.monetary.money import Money, parse_amount
from financial_system.errors import RateUnavailable, ValueTooLow
from financial_system.ledger.account_operations import TransferResult, deposit, withdraw
from financial_system.providers.exchange_rate_provider import ExchangeRateProvider
from financial_system.utils.numeric_tools import DecimalLike, as_decimal

logger = logging.getLogger(__name__)


def exchange(money: Money, to_currency: Currency, rate_provider: ExchangeRateProvider) -> Money:
    """Convert $money into $to_currency using the rates from $rate_provider.

    Both rates are relative to the common base of the rate table, so the hop
    through the base reduces to the cross rate `rate[to] / rate[from]`. The
    amount is multiplied by it exactly and rounded down once, to the precision
    of $to_currency.

    Raises:
        RateUnavailable: If the rate table lacks a positive rate for either currency.
        RateProviderError: Propagated from $rate_provider.
        ValueTooLow: If a nonzero amount becomes too small to represent in $to_currency.
    """
    if money.currency == to_currency:
        return money

    rates = rate_provider.get_rates()
    from_rate = _get_rate(rates, money.currency)
    to_rate = _get_rate(rates, to_currency)

    exact = money.amount * to_rate / from_rate
    converted = Money(exact, to_currency)

    # Raise: a nonzero amount must not round away in the target currency
    if not exact.is_zero() and converted.is_zero:
        raise ValueTooLow(f"Cannot call `exchange` because {money} converts to {exact}, which is too low to be represented in {to_currency}")

    logger.debug(f"Exchanged {money} into {converted} (rates {money.currency}={from_rate}, {to_currency}={to_rate})")
    return converted


def transfer_international(
    sender: Account,
    receiver: Account,
    to_currency: Currency,
    value: DecimalLike,
    rate_provider: ExchangeRateProvider,
) -> TransferResult:
    """Send $value of $to_currency to $receiver, paying for it in the sender's currency.

    $value is converted into the sender currency, that converted amount is
    withdrawn from $sender and the original $value is deposited into $receiver.

    Raises:
        Any error of `exchange`, `withdraw` or `deposit`, unchanged.
    """
    sent = Money(parse_amount(value), to_currency)
    cost = exchange(sent, sender.currency, rate_provider)

    new_sender = withdraw(sender, cost.amount, sender.currency)
    new_receiver = deposit(receiver, sent.amount, to_currency)

    logger.debug(f"Transferred {sent} to account {receiver.id} for {cost} from account {sender.id}")
    return TransferResult(sender=new_sender, receiver=new_receiver)


def _get_rate(rates: Mapping[str, DecimalLike], currency: Currency) -> Decimal:
    raw_rate = rates.get(currency.code)
    if raw_rate is None:
        raise RateUnavailable(f"Exchange rate for {currency} is not available")
    try:
        rate = as_decimal(raw_rate)
    except (ValueError, TypeError, InvalidOperation) as e:
        raise RateUnavailable(f"Exchange rate for {currency} must be a number, but provided value is: {raw_rate}") from e
    if not rate.is_finite() or rate <= 0:
        raise RateUnavailable(f"Exchange rate for {currency} must be positive, but provided value is: {rate}")
    return rate
