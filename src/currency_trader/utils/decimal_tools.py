from __future__ import annotations

from decimal import Context, Decimal, DivisionByZero, InvalidOperation, Overflow, ROUND_HALF_EVEN, ROUND_HALF_UP, localcontext
from typing import TypeAlias

from currency_trader.config import get_settings

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Rounding rule for user-visible rounding (half away from zero)
MONETARY_ROUNDING = ROUND_HALF_UP


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to a finite `Decimal`.

    Floats are converted via string to avoid binary precision noise, so `0.8`
    becomes `Decimal("0.8")` and not `Decimal("0.8000000000000000444...")`.
    Strings must be plain decimal literals; Python digit separators ("1_000")
    are rejected.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        TypeError: If $value is a bool or not a supported scalar type.
        InvalidOperation: If $value is a string that is not a decimal number.
        ValueError: If $value is NaN, infinite or contains digit separators.
    """
    # Raise: bool is a subclass of int, but it is never a monetary value
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, str, float)):
        raise TypeError(f"Cannot call `as_decimal` because $value has unsupported type '{type(value).__name__}'")

    # Raise: digit separators are Python syntax, not part of a decimal literal
    if isinstance(value, str) and "_" in value:
        raise ValueError(f"Cannot call `as_decimal` because $value ('{value}') contains digit separators")

    result = value if isinstance(value, Decimal) else Decimal(str(value).strip())

    # Raise: NaN and infinities cannot represent money
    if not result.is_finite():
        raise ValueError(f"Cannot call `as_decimal` because $value ({value}) is not a finite number")

    return result


def monetary_context(prec: int = 0) -> Context:
    """Return a fresh `decimal.Context` for monetary arithmetic.

    Precision is $prec, but never less than `Settings.decimal_precision`.
    Invalid operations, division by zero and overflow are trapped, so they
    raise instead of producing special values.
    """
    return Context(
        prec=max(prec, get_settings().decimal_precision),
        rounding=ROUND_HALF_EVEN,
        traps=[InvalidOperation, DivisionByZero, Overflow],
    )


def _digit_count(value: Decimal) -> int:
    return len(value.as_tuple().digits)


def _exponent(value: Decimal) -> int:
    return value.as_tuple().exponent


def add(left: Decimal, right: Decimal) -> Decimal:
    """Return the exact sum of $left and $right."""
    # Digits from the largest magnitude down to the smallest exponent, plus a carry
    prec = max(left.adjusted(), right.adjusted()) - min(_exponent(left), _exponent(right)) + 2
    with localcontext(monetary_context(prec)):
        return left + right


def subtract(left: Decimal, right: Decimal) -> Decimal:
    """Return the exact difference of $left and $right."""
    prec = max(left.adjusted(), right.adjusted()) - min(_exponent(left), _exponent(right)) + 2
    with localcontext(monetary_context(prec)):
        return left - right


def multiply(left: Decimal, right: Decimal) -> Decimal:
    """Return the exact product of $left and $right."""
    with localcontext(monetary_context(_digit_count(left) + _digit_count(right))):
        return left * right


def divide(dividend: Decimal, divisor: Decimal) -> Decimal:
    """Divide with a bounded number of fractional digits.

    The quotient keeps `Settings.division_precision` fractional digits (16 by
    default), rounded half away from zero, whatever the magnitude of the
    operands. Non-terminating quotients are therefore reproducible across
    conversion chains.

    Args:
        dividend: Value to divide.
        divisor: Value to divide by.

    Returns:
        Decimal: Quotient with exactly `division_precision` fractional digits.

    Raises:
        ZeroDivisionError: If $divisor is zero.
    """
    # Raise: division by zero has no monetary meaning
    if divisor == 0:
        raise ZeroDivisionError(f"Cannot call `divide` because $divisor is zero ($dividend = {dividend})")

    places = get_settings().division_precision
    scaled = dividend.scaleb(places, context=monetary_context(_digit_count(dividend)))

    # Enough digits for the integer quotient and the remainder of the scaled division
    quotient_digits = scaled.adjusted() - divisor.adjusted() + 2
    prec = max(quotient_digits, 1) + _digit_count(divisor) + abs(_exponent(scaled)) + abs(_exponent(divisor))

    with localcontext(monetary_context(prec)):
        quotient, remainder = divmod(scaled, divisor)
        if 2 * abs(remainder) >= abs(divisor):
            quotient += 1 if (dividend < 0) == (divisor < 0) else -1
        return quotient.scaleb(-places)


def round_places(value: Decimal, places: int) -> Decimal:
    """Round $value to $places fractional digits, half away from zero.

    Negative $places round the integer part, e.g. `places=-1` rounds to tens.

    Examples:
        >>> round_places(Decimal("2.345"), 2)
        Decimal('2.35')
        >>> round_places(Decimal("-2.5"), 0)
        Decimal('-3')
    """
    # Digits of the rounded coefficient, plus a carry
    prec = value.adjusted() + places + 2
    with localcontext(monetary_context(prec)):
        return value.quantize(Decimal(1).scaleb(-places), rounding=MONETARY_ROUNDING)


def to_fixed_string(value: Decimal, places: int) -> str:
    """Format $value with exactly $places fractional digits (zero padded).

    Examples:
        >>> to_fixed_string(Decimal("4.2"), 3)
        '4.200'
        >>> to_fixed_string(Decimal("0.71875"), 6)
        '0.718750'
    """
    rounded = round_places(value, places)
    # Normalize negative zero ("-0.00") produced by rounding tiny negative values
    if rounded.is_zero():
        rounded = rounded.copy_abs()
    return format(rounded, "f")
