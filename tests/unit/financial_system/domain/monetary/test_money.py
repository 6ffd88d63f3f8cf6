from decimal import Decimal

import pytest

from financial_system.domain.monetary.currency_catalog import default_catalog
from financial_system.domain.monetary.currency_registry import BRL, JPY, KWD, USD
from financial_system.domain.monetary.money import DivisionResult, Money, parse_amount
from financial_system.errors import (
    CurrencyMismatch,
    FinancialSystemError,
    InvalidAmount,
    InvalidCurrencyCode,
    InvalidDivisor,
    InvalidMultiplier,
    InvalidPrecision,
    NegativeResult,
    ValueTooLow,
)

catalog = default_catalog()


# region Construction


def test_construct_rounds_to_currency_precision() -> None:
    money = Money.of(10, "BRL", catalog)
    assert money.amount == Decimal("10.00")
    assert str(money.amount) == "10.00"
    assert money.currency == BRL
    assert money.precision == 2
    assert money.atomic_unit == Decimal("0.01")


def test_construct_uses_floor_rounding() -> None:
    assert Money.of(20.892932737, "JPY", catalog).amount == Decimal("20")
    assert Money.of("10.999", "BRL", catalog).amount == Decimal("10.99")
    assert Money.of("1.2349", "KWD", catalog).amount == Decimal("1.234")


def test_construct_converts_floats_through_str() -> None:
    assert Money.of(10.50, "BRL", catalog).amount == Decimal("10.50")
    assert Money.of(0.1, "USD", catalog).amount == Decimal("0.10")


def test_construct_with_explicit_precision() -> None:
    money = Money.of(20, "JPY", catalog, precision=0)
    assert money.amount == Decimal("20")
    assert money.atomic_unit == Decimal("1")

    finer = Money.of("1.23456", "BRL", catalog, precision=4)
    assert finer.amount == Decimal("1.2345")
    assert finer.atomic_unit == Decimal("0.0001")


def test_construct_negative_amount_fails() -> None:
    with pytest.raises(InvalidAmount):
        Money.of(-1, "BRL", catalog)


def test_construct_negative_amount_is_checked_before_currency_code() -> None:
    with pytest.raises(InvalidAmount):
        Money.of(-1, "TEMERS", catalog)


def test_construct_unknown_currency_fails() -> None:
    with pytest.raises(InvalidCurrencyCode):
        Money.of(10, "TEMERS", catalog)


def test_construct_negative_precision_fails() -> None:
    with pytest.raises(InvalidPrecision):
        Money.of(10, "BRL", catalog, precision=-1)


@pytest.mark.parametrize("amount", ["abc", "NaN", "Infinity", None, True])
def test_construct_non_numeric_amount_fails(amount) -> None:
    with pytest.raises(InvalidAmount):
        Money(amount, BRL)


def test_large_amounts_have_no_upper_bound() -> None:
    large = Money(Decimal("999999999999999999999999.99"), BRL)

    assert large.add(Money(1, BRL)).amount == Decimal("1000000000000000000000000.99")
    assert large.scale(2).amount == Decimal("1999999999999999999999999.98")


def test_construct_requires_currency_instance() -> None:
    with pytest.raises(TypeError):
        Money(10, "BRL")


def test_errors_share_one_hierarchy() -> None:
    with pytest.raises(FinancialSystemError) as exc_info:
        Money.of(10, "TEMERS", catalog)
    assert exc_info.value.kind == "InvalidCurrencyCode"
    assert isinstance(exc_info.value, ValueError)


def test_parse_amount() -> None:
    assert parse_amount("0.00001") == Decimal("0.00001")
    with pytest.raises(InvalidAmount):
        parse_amount(-0.5)


# endregion

# region Add / Subtract


def test_add_same_currency() -> None:
    result = Money(10, BRL).add(Money(10.50, BRL))
    assert result == Money("20.50", BRL)
    assert result.precision == 2


def test_add_different_currencies_fails() -> None:
    with pytest.raises(CurrencyMismatch):
        Money(10, BRL).add(Money(10, USD))


def test_subtract_same_currency() -> None:
    assert Money(20.70, BRL).subtract(Money(10.50, BRL)).amount == Decimal("10.20")


def test_subtract_to_zero() -> None:
    result = Money(10, BRL).subtract(Money(10, BRL))
    assert result.is_zero
    assert str(result.amount) == "0.00"


def test_subtract_negative_result_fails() -> None:
    with pytest.raises(NegativeResult):
        Money(10, BRL).subtract(Money(20, BRL))


def test_subtract_different_currencies_fails() -> None:
    with pytest.raises(CurrencyMismatch):
        Money(10, BRL).subtract(Money(10, USD))


@pytest.mark.parametrize(
    "x, y",
    [
        ("0", "0"),
        ("10.00", "0.01"),
        ("123456.78", "987654.32"),
        ("999999999.99", "0.01"),
    ],
)
def test_subtract_undoes_add(x: str, y: str) -> None:
    a = Money(x, BRL)
    b = Money(y, BRL)
    assert a.add(b).subtract(b) == a


# endregion

# region Scale


def test_scale() -> None:
    assert Money(10.50, BRL).scale(2).amount == Decimal("21.00")


def test_scale_rounds_down() -> None:
    assert Money("10.00", BRL).scale("0.333").amount == Decimal("3.33")
    assert Money(10, JPY).scale("0.99").amount == Decimal("9")


def test_scale_negative_factor_fails() -> None:
    with pytest.raises(InvalidMultiplier):
        Money(10, BRL).scale(-1)


def test_scale_non_numeric_factor_fails() -> None:
    with pytest.raises(InvalidMultiplier):
        Money(10, BRL).scale("x")


def test_scale_below_atomic_unit_fails() -> None:
    with pytest.raises(ValueTooLow):
        Money("0.01", BRL).scale("0.5")


def test_scale_genuine_zero_is_accepted() -> None:
    assert Money(10, BRL).scale(0).is_zero
    assert Money(0, BRL).scale(3).is_zero


# endregion

# region Divide with remainder


def test_divide_non_exact() -> None:
    result = Money(10, JPY, precision=0).divide_with_remainder(3)
    assert isinstance(result, DivisionResult)
    assert result.quotient.amount == Decimal("3")
    assert result.remainder.amount == Decimal("1")


def test_divide_exact() -> None:
    quotient, remainder = Money(10, JPY, precision=0).divide_with_remainder(2)
    assert quotient.amount == Decimal("5")
    assert remainder.amount == Decimal("0")


def test_divide_keeps_currency_precision() -> None:
    quotient, remainder = Money(30, BRL).divide_with_remainder(2)
    assert str(quotient.amount) == "15.00"
    assert str(remainder.amount) == "0.00"


def test_divide_negative_divisor_fails() -> None:
    with pytest.raises(InvalidDivisor):
        Money(10, BRL).divide_with_remainder(-1)


def test_divide_by_less_than_one_fails() -> None:
    with pytest.raises(InvalidDivisor):
        Money(10, BRL).divide_with_remainder("0.5")


def test_divide_quotient_below_atomic_unit_fails() -> None:
    with pytest.raises(ValueTooLow):
        Money("0.02", BRL).divide_with_remainder(3)


def test_divide_zero() -> None:
    quotient, remainder = Money(0, BRL).divide_with_remainder(4)
    assert quotient.is_zero
    assert remainder.is_zero


@pytest.mark.parametrize(
    "amount, currency, divisor",
    [
        ("10", JPY, 3),
        ("100.00", BRL, 7),
        ("0.05", BRL, 2),
        ("1.000", KWD, 6),
        ("999999.99", USD, 13),
    ],
)
def test_divide_reconstitutes_original(amount: str, currency, divisor: int) -> None:
    money = Money(amount, currency)
    quotient, remainder = money.divide_with_remainder(divisor)
    assert quotient.amount * divisor + remainder.amount == money.amount
    assert remainder.amount < money.atomic_unit * divisor


# endregion

# region Operators


def test_operators_delegate_to_named_operations() -> None:
    a = Money(10, BRL)
    b = Money("2.50", BRL)
    assert a + b == Money("12.50", BRL)
    assert a - b == Money("7.50", BRL)
    assert a * 2 == Money(20, BRL)
    assert 2 * a == Money(20, BRL)
    assert divmod(Money(10, JPY), 3) == DivisionResult(Money(3, JPY), Money(1, JPY))


def test_operators_keep_invariants() -> None:
    with pytest.raises(NegativeResult):
        Money(1, BRL) - Money(2, BRL)
    with pytest.raises(CurrencyMismatch):
        Money(1, BRL) + Money(1, USD)


def test_comparisons() -> None:
    assert Money(1, BRL) < Money(2, BRL)
    assert Money(2, BRL) >= Money(2, BRL)
    assert Money(1, BRL) != Money(1, USD)
    with pytest.raises(CurrencyMismatch):
        Money(1, BRL) < Money(2, USD)


def test_hash_matches_equality() -> None:
    assert hash(Money("10", BRL)) == hash(Money("10.00", BRL))
    assert len({Money(1, BRL), Money("1.00", BRL), Money(1, USD)}) == 2


def test_str_and_repr() -> None:
    assert str(Money(1000.5, BRL)) == "1000.50 BRL"
    assert repr(Money(10, JPY)) == "Money(10, JPY)"


# endregion
