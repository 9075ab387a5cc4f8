"""
A module for holding error classes.
"""


class BaseError(Exception):
    def __init__(self, message: str, error_key: str):
        self.message = message
        self.error_key = error_key
        super().__init__(self.message)


class MoneyError(BaseError):
    INVALID_INPUT = "INVALID_INPUT"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    NON_INTEGER_MODULUS = "NON_INTEGER_MODULUS"
    NOT_A_NUMBER = "NOT_A_NUMBER"
    INVALID_QUANTIZATION = "INVALID_QUANTIZATION"
    INVALID_OPERATION = "INVALID_OPERATION"
    DECIMAL_PLACES_OUT_OF_RANGE = "DECIMAL_PLACES_OUT_OF_RANGE"
    INVALID_CURRENCY_CODE = "INVALID_CURRENCY_CODE"


class InvalidInputError(MoneyError, ValueError):
    """The input is not an accepted money shape, or does not parse as a finite decimal."""

    def __init__(self, message: str):
        super().__init__(message, MoneyError.INVALID_INPUT)


class DivisionByZeroError(MoneyError, ZeroDivisionError):
    def __init__(self, message: str = "Cannot divide by 0"):
        super().__init__(message, MoneyError.DIVISION_BY_ZERO)


class NonIntegerModulusError(MoneyError, ValueError):
    def __init__(self, message: str = "Modulus of non-integers not supported"):
        super().__init__(message, MoneyError.NON_INTEGER_MODULUS)


class NotANumberError(MoneyError, ValueError):
    def __init__(self, message: str = "Money amount is not a number"):
        super().__init__(message, MoneyError.NOT_A_NUMBER)
