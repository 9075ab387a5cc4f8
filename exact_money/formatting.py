"""
Currency formatting for display strings.

`Money.to_display_string()` delegates to a `CurrencyFormatter`. The default
implementation formats for the en_US locale; pass any object implementing the
protocol to format differently, or to test without locale data.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Optional, Protocol

from exact_money.arithmetic import decimal_context, quantize_decimal
from exact_money.currency import CURRENCY_SYMBOLS

DEFAULT_LOCALE = "en_US"

NO_BREAK_SPACE = "\u00a0"


class CurrencyFormatter(Protocol):
    def format(
        self,
        number: Decimal,
        currency_code: str,
        min_fraction_digits: int,
        max_fraction_digits: int,
    ) -> str: ...


class LocaleCurrencyFormatter:
    """
    Format amounts the way the en_US locale prints currency values.

    The currency symbol is placed before the digits, the minus sign before the
    symbol, and the integer part is grouped by thousands with commas:

        >>> LocaleCurrencyFormatter().format(Decimal("-1234.5"), "USD", 2, 2)
        '-$1,234.50'

    Currencies without a symbol of their own in this locale are written using the
    currency code followed by a no-break space, e.g. ``'SEK\\xa012.34'``.
    """

    locale = DEFAULT_LOCALE

    def __init__(self, symbols: Optional[Dict[str, str]] = None):
        self.symbols = CURRENCY_SYMBOLS if symbols is None else symbols

    def prefix(self, currency_code: str) -> str:
        try:
            return self.symbols[currency_code]
        except KeyError:
            return f"{currency_code}{NO_BREAK_SPACE}"

    @decimal_context
    def format(
        self,
        number: Decimal,
        currency_code: str,
        min_fraction_digits: int = 2,
        max_fraction_digits: int = 2,
    ) -> str:
        rounded = quantize_decimal(number, max_fraction_digits)
        digits = f"{rounded.copy_abs():,f}"
        if "." in digits and max_fraction_digits > min_fraction_digits:
            whole, fraction = digits.split(".")
            fraction = fraction.rstrip("0").ljust(min_fraction_digits, "0")
            digits = f"{whole}.{fraction}" if fraction else whole
        sign = "-" if rounded < 0 else ""
        return f"{sign}{self.prefix(currency_code)}{digits}"


default_formatter = LocaleCurrencyFormatter()
