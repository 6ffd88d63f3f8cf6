from __future__ import annotations

from decimal import Decimal, ROUND_FLOOR, localcontext
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        TypeError: If $value is a bool.
        decimal.InvalidOperation: If $value cannot be parsed as a number.
    """
    if isinstance(value, Decimal):
        return value

    # bool is an int subclass, but True/False are never meant as amounts
    if isinstance(value, bool):
        raise TypeError(f"$value must be a number, but provided value is: {value}")

    return Decimal(str(value))


def atomic_unit(precision: int) -> Decimal:
    """Return the smallest amount representable with $precision fraction digits.

    Example: precision 2 -> Decimal("0.01"), precision 0 -> Decimal("1").
    """
    return Decimal(1).scaleb(-precision)


def round_floor(value: Decimal, precision: int) -> Decimal:
    """Round $value to $precision fraction digits towards negative infinity.

    Works for amounts of any size. A negative zero result is normalized to
    positive zero.
    """
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus $precision fraction digits
        ctx.prec = max(ctx.prec, value.adjusted() + precision + 2)
        result = value.quantize(atomic_unit(precision), rounding=ROUND_FLOOR)
    if result.is_zero():
        result = result.copy_abs()
    return result
