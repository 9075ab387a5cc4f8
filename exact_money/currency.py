"""
A module for holding currency-related information.
"""

import re
from enum import Enum

from exact_money.error import MoneyError

# Currency used when neither an explicit code nor a source value supplies one
DEFAULT_CURRENCY = "USD"

CURRENCY_CODE_PATTERN = re.compile(r"[A-Z]{3}")


class Currency(str, Enum):
    """
    Three-letter codes of the currencies that account for at least 0.1% of daily
    trading volume. Any other ISO 4217 code is accepted as a plain string; members
    compare equal to their code, so ``Currency.USD == "USD"``.
    """

    USD = "USD"  # U.S. dollar
    EUR = "EUR"  # Euro
    JPY = "JPY"  # Japanese yen
    GBP = "GBP"  # Pound sterling
    CNY = "CNY"  # Renminbi
    CHF = "CHF"  # Swiss franc
    AUD = "AUD"  # Australian dollar
    CAD = "CAD"  # Canadian dollar
    HKD = "HKD"  # Hong Kong dollar
    SGD = "SGD"  # Singapore dollar
    INR = "INR"  # Indian rupee
    KRW = "KRW"  # South Korean won
    SEK = "SEK"  # Swedish krona
    MXN = "MXN"  # Mexican peso
    NZD = "NZD"  # New Zealand dollar
    NOK = "NOK"  # Norwegian krone
    TWD = "TWD"  # New Taiwan dollar
    BRL = "BRL"  # Brazilian real
    ZAR = "ZAR"  # South African rand
    PLN = "PLN"  # Polish zloty
    DKK = "DKK"  # Danish krone
    IDR = "IDR"  # Indonesian rupiah
    TRY = "TRY"  # Turkish lira
    THB = "THB"  # Thai baht
    ILS = "ILS"  # Israeli new shekel
    HUF = "HUF"  # Hungarian forint
    CZK = "CZK"  # Czech koruna
    CLP = "CLP"  # Chilean peso
    PHP = "PHP"  # Philippine peso
    COP = "COP"  # Colombian peso
    MYR = "MYR"  # Malaysian ringgit
    AED = "AED"  # UAE dirham
    SAR = "SAR"  # Saudi riyal
    RON = "RON"  # Romanian leu
    PEN = "PEN"  # Peruvian sol

    def __str__(self) -> str:
        return self.value


# Currency symbols as printed for the en_US locale. Codes missing here are
# displayed using the code itself.
CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "JPY": "¥",
    "GBP": "£",
    "CNY": "CN¥",
    "AUD": "A$",
    "CAD": "CA$",
    "HKD": "HK$",
    "INR": "₹",
    "KRW": "₩",
    "MXN": "MX$",
    "NZD": "NZ$",
    "TWD": "NT$",
    "BRL": "R$",
    "ILS": "₪",
    "PHP": "₱",
    "VND": "₫",
    "XAF": "FCFA",
    "XCD": "EC$",
}


def validate_currency_code(currency_code: str) -> str:
    """Validate and return the uppercase currency code."""
    if not isinstance(currency_code, str):
        raise MoneyError(
            f"Invalid currency code: {currency_code!r}",
            MoneyError.INVALID_CURRENCY_CODE,
        )
    upper_code = currency_code.upper()
    if not CURRENCY_CODE_PATTERN.fullmatch(upper_code):
        raise MoneyError(
            f"Invalid currency code: {currency_code}",
            MoneyError.INVALID_CURRENCY_CODE,
        )
    return upper_code


def get_currency_symbol(currency_code: str) -> str:
    return CURRENCY_SYMBOLS.get(currency_code.upper(), currency_code)
