"""
Decimal context and rounding helpers shared by the money modules.
"""

from __future__ import annotations

import functools
from decimal import (
    MAX_PREC,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import Any, Callable, TypeVar, cast

from exact_money.error import MoneyError

# Significant digits kept by division beyond the integer part of the quotient.
# 34 is the precision of an IEEE 754 decimal128. Addition, subtraction,
# multiplication and remainder are always exact.
DECIMAL_PRECISION = 34

# Decimal places of the canonical amount
CANONICAL_DECIMAL_PLACES = 2

# Decimal places kept when turning a percentage into a multiplier
PERCENT_DECIMAL_PLACES = 8

# Absolute maximum number of decimal places supported (like types Decimal128)
ABSOLUTE_MAX_DECIMAL_PLACES = 34

# Values for quantizing Decimals, keyed by number of decimal places
DECIMAL_PLACE_QUANTIZING_DECIMALS = {
    i: Decimal(1).scaleb(-i) for i in range(ABSOLUTE_MAX_DECIMAL_PLACES + 1)
}

T = TypeVar("T", bound=Callable)


def decimal_context(fn: T) -> T:
    """
    A decorator that runs the decorated function inside a local decimal context.

    The context uses DECIMAL_PRECISION significant digits and ROUND_HALF_EVEN, so
    results never depend on whatever the caller configured as the thread's
    current decimal context, and the caller's context is left untouched.

    Example:
        @decimal_context
        def calculate_interest(principal: Decimal, rate: Decimal, time: int) -> Decimal:
            return principal * (1 + rate) ** time
    """

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        with localcontext() as ctx:
            ctx.prec = DECIMAL_PRECISION
            ctx.rounding = ROUND_HALF_EVEN
            return fn(*args, **kwargs)

    return cast(T, wrapper)


@decimal_context
def quantize_decimal(
    value: Decimal,
    decimal_places: int = CANONICAL_DECIMAL_PLACES,
    rounding: str = ROUND_HALF_EVEN,
) -> Decimal:
    """
    Quantize a Decimal value to a specified number of decimal places.

    Args:
        value (Decimal): The Decimal value to quantize.
        decimal_places (int, optional): The desired number of decimal places.
            Defaults to CANONICAL_DECIMAL_PLACES.
        rounding (str, optional): One of the rounding modes defined in the
            `decimal` module. Defaults to ROUND_HALF_EVEN (banker's rounding).

    Returns:
        Decimal: A new Decimal with exactly `decimal_places` fractional digits.

    Raises:
        MoneyError: If `decimal_places` is out of range, or the quantization is
            not a valid decimal operation.

    Examples:
        >>> quantize_decimal(Decimal('10.125'))
        Decimal('10.12')
        >>> quantize_decimal(Decimal('10.135'))
        Decimal('10.14')
        >>> quantize_decimal(Decimal('2.5'), 0)
        Decimal('2')
    """
    if decimal_places < 0 or decimal_places > ABSOLUTE_MAX_DECIMAL_PLACES:
        raise MoneyError(
            f"decimal_places must be between 0 and {ABSOLUTE_MAX_DECIMAL_PLACES}",
            MoneyError.DECIMAL_PLACES_OUT_OF_RANGE,
        )

    try:
        with localcontext() as ctx:
            # room for every integer digit plus the requested places
            ctx.prec = max(DECIMAL_PRECISION, value.adjusted() + decimal_places + 2)
            return value.quantize(
                DECIMAL_PLACE_QUANTIZING_DECIMALS[decimal_places], rounding=rounding
            )
    except InvalidOperation as e:
        raise MoneyError(
            f"Invalid quantization operation: {e!r}",
            MoneyError.INVALID_QUANTIZATION,
        ) from e


def format_plain(value: Decimal) -> str:
    """
    Render a quantized Decimal in plain notation, folding negative zero into zero.

        >>> format_plain(Decimal('-0.00'))
        '0.00'
    """
    if value.is_zero():
        value = value.copy_abs()
    return f"{value:f}"


def exact_context() -> Context:
    """
    A context for addition, subtraction, multiplication and remainder.

    The precision is unbounded and Inexact is trapped, so these operations either
    return the exact result or raise. Results beyond the exponent limits raise
    Overflow.
    """
    return Context(
        prec=MAX_PREC,
        rounding=ROUND_HALF_EVEN,
        traps=[InvalidOperation, DivisionByZero, Overflow, Inexact],
    )


def division_context(dividend: Decimal, divisor: Decimal) -> Context:
    """
    A context for dividing `dividend` by `divisor`.

    The precision covers every integer digit of the quotient plus
    DECIMAL_PRECISION further digits, so large amounts never lose cents.
    """
    integer_digits = max(0, dividend.adjusted() - divisor.adjusted() + 1)
    return Context(
        prec=DECIMAL_PRECISION + integer_digits,
        rounding=ROUND_HALF_EVEN,
        traps=[InvalidOperation, DivisionByZero, Overflow],
    )
