"""
Normalization of the accepted money input shapes into an unrounded Decimal.

A money input is one of:

* A string in the format ``1234.56`` (optionally signed). Two decimal places are
  the canonical form, but any string that parses as a finite decimal is accepted.
* The exact string ``"0"``, as a shortcut for ``"0.00"``.
* A ``decimal.Decimal``.
* Another ``Money`` instance. Its unrounded value is copied, so precision carries
  over between chained constructions.
* The mapping returned by ``Money.to_json()``: ``{"amount": "12.34", "currency": "USD"}``.
  Only the rounded amount is available here.
* A ``bson.decimal128.Decimal128``, the type MongoDB stores as ``NumberDecimal``.

Anything else, including ``int``, ``float`` and ``None``, is rejected.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any, Optional, Union

from bson.decimal128 import Decimal128

from exact_money.error import InvalidInputError

if TYPE_CHECKING:
    from exact_money.money import Money

logger = logging.getLogger(__name__)

MoneyJSON = Mapping[str, str]

MoneyInput = Union["Money", str, Decimal, MoneyJSON, Decimal128]


def _parse_decimal(value: str) -> Decimal:
    try:
        parsed = Decimal(value)
    except InvalidOperation:
        logger.debug("Rejected unparsable money input %r", value)
        raise InvalidInputError(f"Parameter is not a number: {value}") from None
    if not parsed.is_finite():
        logger.debug("Rejected non-finite money input %r", value)
        raise InvalidInputError(f"Parameter is not a number: {value}")
    return parsed


def _is_money_json(value: Any) -> bool:
    return isinstance(value, Mapping) and isinstance(value.get("amount"), str)


def is_money_input(value: Any) -> bool:
    """
    Return True if `value` has one of the accepted input shapes.

    This only inspects the shape: a string that does not parse still counts as a
    money input, and fails later in `to_decimal`.
    """
    from exact_money.money import Money

    if isinstance(value, (str, Decimal, Money, Decimal128)):
        return True
    return _is_money_json(value)


def to_decimal(value: MoneyInput) -> Decimal:
    """
    Convert a money input into an unrounded Decimal.

    Raises:
        InvalidInputError: If the input shape is not recognized, or the value does
            not parse as a finite decimal.

    Examples:
        >>> to_decimal("12.34")
        Decimal('12.34')
        >>> to_decimal({"amount": "56.78", "currency": "EUR"})
        Decimal('56.78')
    """
    from exact_money.money import Money

    if isinstance(value, str):
        return _parse_decimal(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            logger.debug("Rejected non-finite Decimal input %r", value)
            raise InvalidInputError(f"Parameter is not a number: {value}")
        return Decimal(value)
    if isinstance(value, Money):
        return Decimal(value.value)
    if _is_money_json(value):
        return _parse_decimal(value["amount"])
    if isinstance(value, Decimal128):
        return _parse_decimal(str(value))

    logger.debug("Rejected money input of type %s", type(value).__name__)
    raise InvalidInputError(f"Invalid MoneyInput type: {type(value).__name__}")


def currency_of(value: MoneyInput) -> Optional[str]:
    """Return the currency carried by a Money or JSON-shaped input, if any."""
    from exact_money.money import Money

    if isinstance(value, Money):
        return value.currency
    if _is_money_json(value):
        return value.get("currency")
    return None
