"""
Immutable, exact monetary values backed by decimal arithmetic.
"""

from exact_money.currency import DEFAULT_CURRENCY, Currency
from exact_money.error import (
    BaseError,
    DivisionByZeroError,
    InvalidInputError,
    MoneyError,
    NonIntegerModulusError,
    NotANumberError,
)
from exact_money.formatting import CurrencyFormatter, LocaleCurrencyFormatter
from exact_money.inputs import MoneyInput, MoneyJSON
from exact_money.money import ComparisonResult, Money, Operation

__all__ = [
    "BaseError",
    "ComparisonResult",
    "Currency",
    "CurrencyFormatter",
    "DEFAULT_CURRENCY",
    "DivisionByZeroError",
    "InvalidInputError",
    "LocaleCurrencyFormatter",
    "Money",
    "MoneyError",
    "MoneyInput",
    "MoneyJSON",
    "NonIntegerModulusError",
    "NotANumberError",
    "Operation",
]
