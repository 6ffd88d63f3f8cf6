"""Errors raised by money arithmetic and ledger operations.

Every fallible operation either returns its result or raises exactly one of
the classes below. All of them derive from `FinancialSystemError`, which itself
is a `ValueError`, so callers can catch the whole family at once or a single
`kind`.
"""


class FinancialSystemError(ValueError):
    """Base class for all domain errors.

    Attributes:
        kind: Stable, machine-readable name of the error category.
    """

    kind: str = "FinancialSystemError"


class InvalidAmount(FinancialSystemError):
    """Amount is negative or is not a finite decimal number."""

    kind = "InvalidAmount"


class InvalidCurrencyCode(FinancialSystemError):
    """Currency code has no entry in the currency catalog."""

    kind = "InvalidCurrencyCode"


class InvalidPrecision(FinancialSystemError):
    """Explicit precision override is negative."""

    kind = "InvalidPrecision"


class CurrencyMismatch(FinancialSystemError):
    """Operands are denominated in different currencies."""

    kind = "CurrencyMismatch"


class NegativeResult(FinancialSystemError):
    """Subtraction would produce a negative amount."""

    kind = "NegativeResult"


class InvalidMultiplier(FinancialSystemError):
    """Scale factor is negative or not a number."""

    kind = "InvalidMultiplier"


class InvalidDivisor(FinancialSystemError):
    """Divisor is lower than 1 or not a number."""

    kind = "InvalidDivisor"


class ValueTooLow(FinancialSystemError):
    """Nonzero value is below the atomic unit of its currency."""

    kind = "ValueTooLow"


class InsufficientFunds(FinancialSystemError):
    """Withdrawal exceeds the account balance."""

    kind = "InsufficientFunds"


class UnsupportedCurrency(FinancialSystemError):
    """Operation currency differs from the account currency."""

    kind = "UnsupportedCurrency"


class InvalidDistribution(FinancialSystemError):
    """Split weights are negative, do not sum to 1 or do not match the accounts."""

    kind = "InvalidDistribution"


class RateUnavailable(FinancialSystemError):
    """Exchange rate table has no usable rate for a requested currency."""

    kind = "RateUnavailable"


class RateProviderError(FinancialSystemError):
    """Exchange rate source could not be reached or returned an unusable payload."""

    kind = "RateProviderError"
