from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from decimal import Decimal, InvalidOperation
from typing import NamedTuple

from financial_system.domain.account import Account
from financial_system.domain.monetary.currency import Currency
from financial_system.domain.monetary.money import Money, parse_amount
from financial_system.errors import InvalidDistribution
from financial_system.ledger.account_operations import deposit, withdraw
from financial_system.utils.numeric_tools import DecimalLike, as_decimal

logger = logging.getLogger(__name__)

# Signature shared by `deposit` and `withdraw`
AccountOperation = Callable[[Account, DecimalLike, Currency], Account]


class SplitTransferResult(NamedTuple):
    """Container for (sender + receivers) accounts after a split transfer.

    Attributes:
        sender: Sender after the single withdrawal of the full value.
        receivers: Receivers after their weighted deposits, in input order.
    """

    sender: Account
    receivers: list[Account]


def validate_weights(weights: Sequence[DecimalLike], expected_count: int) -> list[Decimal]:
    """Return $weights as Decimals after checking they form a valid distribution.

    Floats are converted via string, so `[0.6, 0.4]` sums to exactly 1.

    Raises:
        InvalidDistribution: If a weight is not a number or negative, the weights
            do not sum to exactly 1, or their count differs from $expected_count.
    """
    if len(weights) != expected_count:
        raise InvalidDistribution(f"Number of $weights ({len(weights)}) must match number of accounts ({expected_count})")

    result: list[Decimal] = []
    for weight in weights:
        try:
            decimal_weight = as_decimal(weight)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise InvalidDistribution(f"Weight ({weight}) cannot be converted to Decimal") from e

        # Raise: weights are fractions in [0, 1]
        if not decimal_weight.is_finite() or decimal_weight < 0:
            raise InvalidDistribution(f"Weights must be non-negative numbers, but provided value is: {weight}")
        result.append(decimal_weight)

    # Raise: weights must cover exactly the whole value
    total = sum(result, Decimal("0"))
    if total != 1:
        raise InvalidDistribution(f"Weights must sum to 1, but they sum to {total}")

    return result


def split_transfer(
    sender: Account,
    receivers: Sequence[Account],
    value: DecimalLike,
    weights: Sequence[DecimalLike],
) -> SplitTransferResult:
    """Withdraw $value from $sender once and deposit `weights[i] * value` into `receivers[i]`.

    Receivers with a zero weight are returned unchanged. Every receiver must
    hold the sender currency. A rounding leftover is logged as a warning and
    can be computed upfront with `undistributed_amount`.

    Raises:
        InvalidDistribution: If $weights are not a valid distribution for $receivers.
        InvalidAmount | ValueTooLow | InsufficientFunds | UnsupportedCurrency:
            Propagated from the withdrawal or from the first failing deposit.
    """
    decimal_weights = validate_weights(weights, len(receivers))
    amount = parse_amount(value)
    currency = sender.currency

    new_sender = withdraw(sender, amount, currency)

    new_receivers: list[Account] = []
    for receiver, weight in zip(receivers, decimal_weights):
        if weight.is_zero():
            new_receivers.append(receiver)
            continue
        new_receivers.append(deposit(receiver, weight * amount, currency))

    undistributed = undistributed_amount(amount, decimal_weights, currency, sender.balance.precision)
    if not undistributed.is_zero:
        logger.warning(f"Split transfer from account {sender.id} left {undistributed} undistributed due to rounding")

    logger.debug(f"Split {amount} {currency} from account {sender.id} across {len(receivers)} account(s)")
    return SplitTransferResult(sender=new_sender, receivers=new_receivers)


def undistributed_amount(
    value: DecimalLike,
    weights: Sequence[DecimalLike],
    currency: Currency,
    precision: int | None = None,
) -> Money:
    """Return the part of $value that splitting it by $weights loses to rounding.

    Each share `weights[i] * value` is rounded down to $precision (by default
    the precision of $currency), so the shares may add up to less than $value.
    `split_transfer` withdraws the whole $value, so this leftover stays with
    nobody.

    Raises:
        InvalidAmount: If $value is negative or not a number.
        InvalidDistribution: If $weights are not a valid distribution.
    """
    amount = parse_amount(value)
    decimal_weights = validate_weights(weights, len(weights))

    credited = Money.zero(currency, precision)
    for weight in decimal_weights:
        credited = credited.add(Money(weight * amount, currency, precision))

    return Money(amount, currency, precision).subtract(credited)


def split_value(
    accounts: Sequence[Account],
    value: DecimalLike,
    weights: Sequence[DecimalLike],
    operation: AccountOperation,
) -> list[Account]:
    """Apply $operation with `weights[i] * value` to each of $accounts.

    $operation is typically `deposit` (share a credit) or `withdraw` (share a
    cost). The currency of the first account is used for every call. Accounts
    with a zero weight are returned unchanged.

    Raises:
        InvalidDistribution: If $accounts is empty or $weights are not a valid distribution.
        Any error raised by $operation for the first failing account.
    """
    if not accounts:
        raise InvalidDistribution("Cannot call `split_value` because $accounts is empty")

    decimal_weights = validate_weights(weights, len(accounts))
    amount = parse_amount(value)
    currency = accounts[0].currency

    result: list[Account] = []
    for account, weight in zip(accounts, decimal_weights):
        if weight.is_zero():
            result.append(account)
            continue
        result.append(operation(account, weight * amount, currency))

    logger.debug(f"Split {amount} {currency} across {len(accounts)} account(s) with `{getattr(operation, '__name__', operation)}`")
    return result
