from __future__ import annotations

# Standard library imports
import functools
import logging
import operator
from decimal import Decimal, DecimalException, InvalidOperation, localcontext
from enum import Enum, IntEnum
from typing import Any, Callable, Dict, Iterable, Optional

# Library we need to support custom serializations
from pydantic_core import core_schema

# Local application imports
from exact_money.arithmetic import (
    CANONICAL_DECIMAL_PLACES,
    PERCENT_DECIMAL_PLACES,
    decimal_context,
    division_context,
    exact_context,
    format_plain,
    quantize_decimal,
)
from exact_money.currency import DEFAULT_CURRENCY, validate_currency_code
from exact_money.error import (
    DivisionByZeroError,
    MoneyError,
    NonIntegerModulusError,
    NotANumberError,
)
from exact_money.formatting import CurrencyFormatter, default_formatter
from exact_money.inputs import MoneyInput, currency_of, is_money_input, to_decimal

logger = logging.getLogger(__name__)


class ComparisonResult(IntEnum):
    """Possible outcomes of comparing two amounts."""

    # The first amount is less than the second
    ASCENDING = -1
    # The two amounts are equal
    SAME = 0
    # The first amount is greater than the second
    DESCENDING = 1


class Operation(Enum):
    """The arithmetic operations that can be folded over a sequence of amounts."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    MODULUS = "modulus"

    def apply(self, left: Decimal, right: Decimal) -> Decimal:
        """
        Apply the operation to two unrounded values.

        Modulus only accepts whole amounts and rounds both sides to 0 places first.
        Division keeps DECIMAL_PRECISION digits beyond the integer part of the
        quotient; every other operation is exact.

        Raises:
            NonIntegerModulusError: If a modulus operand has a fractional part.
            DivisionByZeroError: If dividing by zero.
            MoneyError: If the result is beyond the decimal exponent limits.
        """
        if self is Operation.MODULUS:
            left, right = _whole_amount(left), _whole_amount(right)
        if self in (Operation.DIVIDE, Operation.MODULUS) and right.is_zero():
            logger.debug("Refused to %s %s by zero", self.value, left)
            raise DivisionByZeroError()
        if self is Operation.DIVIDE:
            context = division_context(left, right)
        else:
            context = exact_context()
        try:
            with localcontext(context):
                return _OPERATORS[self](left, right)
        except DecimalException as e:
            logger.debug("Unable to %s %s and %s: %r", self.value, left, right, e)
            raise MoneyError(
                f"Unable to {self.value} {left} and {right}: {e!r}",
                MoneyError.INVALID_OPERATION,
            ) from e


def _whole_amount(value: Decimal) -> Decimal:
    """Round a modulus operand to 0 places, refusing values with cents."""
    cents = format_plain(quantize_decimal(value, CANONICAL_DECIMAL_PLACES))
    if not cents.endswith(".00"):
        logger.debug("Refused modulus of non-integer %s", value)
        raise NonIntegerModulusError()
    return quantize_decimal(value, 0)


# Decimal's % keeps the sign of the dividend: Decimal(-3) % Decimal(2) == Decimal(-1)
_OPERATORS: Dict[Operation, Callable[[Decimal, Decimal], Decimal]] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: operator.truediv,
    Operation.MODULUS: operator.mod,
}


class Money:
    """
    An immutable monetary amount in a specific currency.

    Money keeps its value as an unrounded `Decimal` and only rounds (half to even,
    two decimal places) when the canonical `amount` is read. Every operation returns
    a new instance, so operations can be chained without losing precision between
    steps:

    Example:
        >>> Money("12.34").add("56.78").amount
        '69.12'
        >>> Money("100.00", "EUR").percent("12.5").mul("3").to_json()
        {'amount': '37.50', 'currency': 'EUR'}

    Amounts are accepted in any of the shapes described in `exact_money.inputs`:
    strings, `Decimal`, another `Money`, the `to_json()` mapping, or a MongoDB
    `Decimal128`. Floats are never accepted.

    The currency of operands is not checked. Arithmetic between amounts in
    different currencies is the caller's responsibility; the result always keeps
    the currency of the instance the operation was called on.
    """

    __slots__ = ("_value", "_currency")

    def __init__(self, amount: MoneyInput, currency: Optional[str] = None):
        """
        Initialise a new Money instance with the supplied input.

        If a currency is not specified, it is taken from `amount` when that is a
        Money instance or a JSON mapping, and falls back to USD otherwise.

        Raises:
            InvalidInputError: If the amount is not a valid money input.
            MoneyError: If the currency is not a three-letter code.
        """
        value = to_decimal(amount)
        if currency is None:
            currency = currency_of(amount) or DEFAULT_CURRENCY
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_currency", validate_currency_code(currency))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} objects are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} objects are immutable")

    def __reduce__(self):
        return (self.__class__, (self._value, self._currency))

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def value(self) -> Decimal:
        """The unrounded value, at full precision."""
        return self._value

    @property
    def amount(self) -> str:
        """
        The string value that can be stored in a database or serialized into a payload.

        The value is rounded to 2 decimal places using banker's rounding, has an
        optional leading minus sign, and never contains digit separators or a
        currency symbol. For a human-readable string, use `to_display_string()`.
        """
        return format_plain(quantize_decimal(self._value, CANONICAL_DECIMAL_PLACES))

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> Money:
        return cls("0", currency)

    @classmethod
    def sum(cls, amounts: Iterable[MoneyInput], currency: str = DEFAULT_CURRENCY) -> Money:
        """
        Add up an iterable of amounts, starting from zero in `currency`.

        Python's built-in `sum()` starts from the integer 0, which is not a money
        input, so use this instead:

            >>> Money.sum(["10.00", "20.00", Money("30.00")]).amount
            '60.00'
        """
        return cls.zero(currency).add(*amounts)

    def _new(self, value: Decimal) -> Money:
        return self.__class__(value, self._currency)

    @decimal_context
    def perform_operation(self, operation: Operation, *amounts: MoneyInput) -> Money:
        """
        Fold `operation` over `amounts` from left to right, starting from this value.

        Each amount is normalized to an unrounded Decimal before it is applied, and
        no rounding happens between steps. Modulus steps are the exception: both
        sides must be whole amounts and are rounded to 0 places.

        Args:
            operation (Operation): The operation to apply.
            *amounts (MoneyInput): The right-hand operands, in order.

        Returns:
            Money: A new instance in this instance's currency.

        Raises:
            InvalidInputError: If any amount is not a valid money input.
            DivisionByZeroError: If dividing by an amount equal to zero.
            NonIntegerModulusError: If a modulus step involves an amount with cents.
        """
        value = functools.reduce(
            lambda acc, amount: operation.apply(acc, to_decimal(amount)),
            amounts,
            self._value,
        )
        return self._new(value)

    def add(self, *amounts: MoneyInput) -> Money:
        """Returns the result of adding the supplied amounts in sequence."""
        return self.perform_operation(Operation.ADD, *amounts)

    def subtract(self, *amounts: MoneyInput) -> Money:
        """Returns the result of subtracting the supplied amounts in sequence."""
        return self.perform_operation(Operation.SUBTRACT, *amounts)

    def mul(self, *amounts: MoneyInput) -> Money:
        """Returns the result of multiplying by the supplied amounts in sequence."""
        return self.perform_operation(Operation.MULTIPLY, *amounts)

    def div(self, *amounts: MoneyInput) -> Money:
        """
        Returns the result of dividing by the supplied amounts in sequence.

        Raises:
            DivisionByZeroError: If any of the amounts is zero.
        """
        return self.perform_operation(Operation.DIVIDE, *amounts)

    def mod(self, amount: MoneyInput) -> Money:
        """
        Returns the remainder of dividing by `amount`.

        Only whole amounts are supported: both this amount and `amount` must round
        to a value ending in ".00". The result has the sign of the dividend, as with
        a truncating division.

        Example:
            >>> Money("-3.00").mod("2.00").amount
            '-1.00'
            >>> Money("3.00").mod("-2.00").amount
            '1.00'

        Raises:
            NonIntegerModulusError: If either amount has a fractional part.
            DivisionByZeroError: If `amount` is zero.
        """
        return self.perform_operation(Operation.MODULUS, amount)

    @decimal_context
    def percent(self, amount: MoneyInput) -> Money:
        """
        Returns the result of multiplying by a percentage, e.g. "12.50" for 12.5%.

        The percentage is divided by 100 and rounded to 8 decimal places before it
        is multiplied in. For a plain fraction such as "0.125", use `mul()`.
        """
        multiplier = quantize_decimal(
            Operation.DIVIDE.apply(to_decimal(amount), Decimal(100)),
            PERCENT_DECIMAL_PLACES,
        )
        return self.perform_operation(Operation.MULTIPLY, multiplier)

    def negate(self) -> Money:
        """Returns the amount with its sign flipped."""
        return self._new(self._value.copy_negate())

    def cmp(self, amount: MoneyInput) -> ComparisonResult:
        """
        Compare the unrounded value with another amount.

        Returns:
            ComparisonResult: ASCENDING if this amount is less than `amount`, SAME
            if they are equal, DESCENDING if it is greater.
        """
        other = to_decimal(amount)
        if self._value < other:
            return ComparisonResult.ASCENDING
        if self._value > other:
            return ComparisonResult.DESCENDING
        return ComparisonResult.SAME

    @property
    def is_zero(self) -> bool:
        return self._value.is_zero()

    @property
    def is_negative(self) -> bool:
        return self._value < 0

    @property
    def is_positive(self) -> bool:
        return self._value > 0

    def to_json(self) -> Dict[str, str]:
        """
        Returns a mapping that represents the Money in a JSON payload.

        Passing it back to `Money()` restores the amount rounded to 2 decimal places
        and the currency.
        """
        return {"amount": self.amount, "currency": self._currency}

    def to_display_string(self, formatter: Optional[CurrencyFormatter] = None) -> str:
        """
        Format the amount for display in a user interface.

        Includes the currency symbol and thousands separators, e.g. "$1,234.56".
        For a machine-readable string, use `amount`.

        Args:
            formatter (CurrencyFormatter, optional): Formats the number. Defaults to
                the en_US formatter in `exact_money.formatting`.

        Raises:
            NotANumberError: If the amount does not convert to a finite number.
        """
        amount = self.amount
        try:
            number = Decimal(amount)
        except (InvalidOperation, TypeError, ValueError):
            raise NotANumberError() from None
        if not number.is_finite():
            raise NotANumberError()
        if formatter is None:
            formatter = default_formatter
        return formatter.format(
            number,
            self._currency,
            CANONICAL_DECIMAL_PLACES,
            CANONICAL_DECIMAL_PLACES,
        )

    def __repr__(self) -> str:
        return f"<Money {self._currency}: {self.amount}>"

    def __str__(self) -> str:
        return self.to_display_string()

    def __eq__(self, other: object) -> bool:
        """
        Two Money objects are equal if they have the same currency and unrounded value.
        """
        if not isinstance(other, Money):
            return NotImplemented
        return self._currency == other._currency and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._currency, self._value))

    def __lt__(self, other: Any) -> bool:
        if not is_money_input(other):
            return NotImplemented
        return self.cmp(other) is ComparisonResult.ASCENDING

    def __le__(self, other: Any) -> bool:
        if not is_money_input(other):
            return NotImplemented
        return self.cmp(other) is not ComparisonResult.DESCENDING

    def __gt__(self, other: Any) -> bool:
        if not is_money_input(other):
            return NotImplemented
        return self.cmp(other) is ComparisonResult.DESCENDING

    def __ge__(self, other: Any) -> bool:
        if not is_money_input(other):
            return NotImplemented
        return self.cmp(other) is not ComparisonResult.ASCENDING

    def __add__(self, other: Any) -> Money:
        if not is_money_input(other):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Money:
        if not is_money_input(other):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> Money:
        if not is_money_input(other):
            return NotImplemented
        return self.mul(other)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Money:
        if not is_money_input(other):
            return NotImplemented
        return self.div(other)

    def __mod__(self, other: Any) -> Money:
        if not is_money_input(other):
            return NotImplemented
        return self.mod(other)

    def __neg__(self) -> Money:
        return self.negate()

    def __abs__(self) -> Money:
        if self.is_negative:
            return self.negate()
        return self

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: Any
    ) -> core_schema.CoreSchema:
        """
        The new (version > 2) way to support custom serialization and validation with Pydantic.
        https://docs.pydantic.dev/latest/concepts/types/#customizing-validation-with-__get_pydantic_core_schema__
        """
        return core_schema.with_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_json
            ),
        )

    @classmethod
    def _validate(cls, value: Any, info: Any) -> Money:
        """
        Validator method for Pydantic model integration.

        Accepts any money input, so a model field can be populated from a Money
        instance, a canonical amount string, or the mapping produced by `to_json()`.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except MoneyError as e:
            raise ValueError(e.message) from e
