from __future__ import annotations

from decimal import Decimal, getcontext, InvalidOperation
from typing import NamedTuple, TYPE_CHECKING

from financial_system.domain.monetary.currency import Currency
from financial_system.errors import (
    CurrencyMismatch,
    InvalidAmount,
    InvalidDivisor,
    InvalidMultiplier,
    InvalidPrecision,
    NegativeResult,
    ValueTooLow,
)
from financial_system.utils.numeric_tools import DecimalLike, as_decimal, atomic_unit, round_floor

if TYPE_CHECKING:
    from financial_system.domain.monetary.currency_catalog import CurrencyCatalog

# Headroom for exact products of large amounts before floor rounding
getcontext().prec = 60


def parse_amount(value: DecimalLike) -> Decimal:
    """Convert $value into a non-negative, finite `Decimal` amount.

    Raises:
        InvalidAmount: If $value is not a finite number or is negative.
    """
    try:
        decimal_value = as_decimal(value)
    except (ValueError, TypeError, InvalidOperation) as e:
        raise InvalidAmount(f"$amount ({value}) cannot be converted to Decimal") from e

    if not decimal_value.is_finite():
        raise InvalidAmount(f"$amount must be a finite number, but provided value is: {value}")

    if decimal_value < 0:
        raise InvalidAmount(f"$amount must be a positive number, but provided value is: {value}")

    return decimal_value


class DivisionResult(NamedTuple):
    """Container for (quotient + remainder) of a floor division.

    `quotient * divisor + remainder` always equals the divided amount.
    """

    quotient: Money
    remainder: Money


class Money:
    """Represents a non-negative monetary amount with currency.

    Uses Python's Decimal for precision arithmetic. The amount is always
    rounded down (floor) to $precision fraction digits, both at construction
    and after every operation. Money is immutable; every operation returns a
    new instance or raises a `FinancialSystemError`. Amounts have no upper bound.
    """

    def __init__(self, amount: DecimalLike, currency: Currency, precision: int | None = None):
        """Initialize Money with amount and currency.

        Args:
            amount: Numeric amount (Decimal-like scalar), must be >= 0.
            currency (Currency): Currency object.
            precision (int | None): Fraction digits to keep. If None, $currency.precision is used.

        Raises:
            InvalidAmount: If $amount is negative or not a finite number.
            InvalidPrecision: If $precision is negative.
            TypeError: If currency is not Currency instance.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        decimal_amount = parse_amount(amount)

        if precision is None:
            precision = currency.precision
        elif isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise InvalidPrecision(f"$precision must be a non-negative integer, but provided value is: {precision}")

        self._amount = round_floor(decimal_amount, precision)
        self._currency = currency
        self._precision = precision

    @classmethod
    def of(cls, amount: DecimalLike, currency_code: str, catalog: CurrencyCatalog, precision: int | None = None) -> Money:
        """Construct Money by resolving $currency_code through $catalog.

        The amount is validated before the currency code is looked up.

        Raises:
            InvalidAmount: If $amount is negative or not a finite number.
            InvalidCurrencyCode: If $catalog has no entry for $currency_code.
            InvalidPrecision: If $precision is negative.
        """
        decimal_amount = parse_amount(amount)
        currency = catalog.get(currency_code)
        return cls(decimal_amount, currency, precision)

    @classmethod
    def zero(cls, currency: Currency, precision: int | None = None) -> Money:
        """Return a zero amount of $currency."""
        return cls(Decimal("0"), currency, precision)

    @property
    def amount(self) -> Decimal:
        """Get the decimal amount."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    @property
    def precision(self) -> int:
        """Get the number of fraction digits kept."""
        return self._precision

    @property
    def atomic_unit(self) -> Decimal:
        """Get the smallest representable amount, `10^-precision`."""
        return atomic_unit(self._precision)

    @property
    def is_zero(self) -> bool:
        """Return True if the amount is zero."""
        return self._amount.is_zero()

    # region Arithmetic

    def add(self, other: Money) -> Money:
        """Return a new Money with the amounts of $self and $other summed up.

        Raises:
            CurrencyMismatch: If currencies differ.
        """
        self._check_same_currency(other, "add")
        return self._with_amount(self._amount + other.amount)

    def subtract(self, other: Money) -> Money:
        """Return a new Money with $other.amount subtracted from $self.amount.

        Raises:
            CurrencyMismatch: If currencies differ.
            NegativeResult: If $other.amount is greater than $self.amount.
        """
        self._check_same_currency(other, "subtract")

        # Raise: Money never goes negative
        if self._amount < other.amount:
            raise NegativeResult(f"Cannot call `subtract` because the result would be negative ({self._amount} - {other.amount} {self._currency})")

        return self._with_amount(self._amount - other.amount)

    def scale(self, factor: DecimalLike) -> Money:
        """Return a new Money with the amount multiplied by $factor and rounded down.

        Raises:
            InvalidMultiplier: If $factor is negative or not a number.
            ValueTooLow: If the exact product is nonzero but rounds down below the atomic unit.
        """
        try:
            factor_value = as_decimal(factor)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise InvalidMultiplier(f"$factor ({factor}) cannot be converted to Decimal") from e

        # Raise: factor must be a non-negative finite number
        if not factor_value.is_finite() or factor_value < 0:
            raise InvalidMultiplier(f"$factor must be a positive number, but provided value is: {factor}")

        exact = self._amount * factor_value
        result = round_floor(exact, self._precision)
        self._check_representable(exact, result, "scale")
        return self._with_amount(result)

    def divide_with_remainder(self, divisor: DecimalLike) -> DivisionResult:
        """Divide the amount by $divisor, rounding down, and keep the leftover as remainder.

        Returns:
            DivisionResult: $quotient rounded down to this currency precision and the
            $remainder equal to `self - quotient * divisor`.

        Raises:
            InvalidDivisor: If $divisor is lower than 1 or not a number.
            ValueTooLow: If the exact quotient is nonzero but rounds down below the atomic unit.
        """
        try:
            divisor_value = as_decimal(divisor)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise InvalidDivisor(f"$divisor ({divisor}) cannot be converted to Decimal") from e

        # Raise: divisor must be a finite number >= 1
        if not divisor_value.is_finite() or divisor_value < 1:
            raise InvalidDivisor(f"$divisor must be a number greater than or equal to 1, but provided value is: {divisor}")

        exact = self._amount / divisor_value
        quotient_amount = round_floor(exact, self._precision)
        self._check_representable(exact, quotient_amount, "divide_with_remainder")

        quotient = self._with_amount(quotient_amount)
        remainder = self.subtract(quotient.scale(divisor_value))
        return DivisionResult(quotient=quotient, remainder=remainder)

    # endregion

    # region Internal

    def _with_amount(self, amount: Decimal) -> Money:
        return self.__class__(amount, self._currency, self._precision)

    def _check_same_currency(self, other: Money, operation: str) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            TypeError: If $other is not Money.
            CurrencyMismatch: If currencies don't match.
        """
        if not isinstance(other, Money):
            raise TypeError(f"$other must be a Money instance, but provided value is: {other}")
        if self._currency != other.currency:
            raise CurrencyMismatch(f"Cannot call `{operation}` on different currencies: {self._currency} and {other.currency}")

    def _check_representable(self, exact: Decimal, rounded: Decimal, operation: str) -> None:
        # Raise: a nonzero result must not vanish below the atomic unit
        if not exact.is_zero() and rounded < self.atomic_unit:
            raise ValueTooLow(f"Cannot call `{operation}` because result ({exact}) is too low to be represented in {self._currency} with precision {self._precision}")

    # endregion

    # region Magic

    # Comparison operators (same currency required)
    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        if not isinstance(other, Money):
            return False
        if self.currency != other.currency:
            return False
        return self.amount == other.amount

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "compare")
        return self.amount < other.amount

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "compare")
        return self.amount <= other.amount

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "compare")
        return self.amount > other.amount

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "compare")
        return self.amount >= other.amount

    def __add__(self, other):
        """Add two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        """Subtract two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        """Multiply Money by number (returns Money)."""
        if isinstance(other, Money):
            return NotImplemented  # Money * Money doesn't make sense
        return self.scale(other)

    def __rmul__(self, other):
        """Right multiplication: number * Money."""
        return self.__mul__(other)

    def __divmod__(self, other):
        """Floor division with remainder: `divmod(money, 3)`."""
        if isinstance(other, Money):
            return NotImplemented
        return self.divide_with_remainder(other)

    # String representations
    def __str__(self) -> str:
        """Return string like '1000.50 BRL'."""
        return f"{self.amount:f} {self.currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, BRL)'."""
        return f"{self.__class__.__name__}({self.amount:f}, {self.currency.code})"

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self.amount, self.currency.code))

    # endregion
