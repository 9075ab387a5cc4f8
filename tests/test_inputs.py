# Standard library imports
import unittest
from decimal import Decimal

from bson.decimal128 import Decimal128

# Local application imports
from exact_money import InvalidInputError, Money
from exact_money.inputs import currency_of, is_money_input, to_decimal


class TestToDecimal(unittest.TestCase):
    def test_strings(self):
        self.assertEqual(to_decimal("12.34"), Decimal("12.34"))
        self.assertEqual(to_decimal("-12.34"), Decimal("-12.34"))
        self.assertEqual(to_decimal("0"), Decimal("0"))
        # digit count is not enforced
        self.assertEqual(to_decimal("12.3456"), Decimal("12.3456"))

    def test_decimal(self):
        self.assertEqual(to_decimal(Decimal("1.005")), Decimal("1.005"))

    def test_money_uses_unrounded_value(self):
        self.assertEqual(to_decimal(Money("1.005")), Decimal("1.005"))

    def test_money_json_uses_amount(self):
        self.assertEqual(
            to_decimal({"amount": "56.78", "currency": "EUR"}), Decimal("56.78")
        )

    def test_decimal128(self):
        self.assertEqual(to_decimal(Decimal128("-0.10")), Decimal("-0.10"))

    def test_decimal128_nan(self):
        with self.assertRaises(InvalidInputError):
            to_decimal(Decimal128("NaN"))

    def test_rejected_shapes(self):
        for value in (None, 1, 1.5, True, [], object(), {"amount": 12.34}, {"value": "1"}):
            with self.subTest(value=value):
                with self.assertRaisesRegex(InvalidInputError, "Invalid MoneyInput type"):
                    to_decimal(value)

    def test_message_names_the_type(self):
        with self.assertRaisesRegex(InvalidInputError, "NoneType"):
            to_decimal(None)

    def test_unparsable_strings(self):
        for value in ("", "abc", "12.34 USD", "$12.34", "1,234.56", "NaN"):
            with self.subTest(value=value):
                with self.assertRaisesRegex(InvalidInputError, "Parameter is not a number"):
                    to_decimal(value)

    def test_unparsable_json_amount(self):
        with self.assertRaisesRegex(InvalidInputError, "Parameter is not a number: x"):
            to_decimal({"amount": "x", "currency": "USD"})


class TestCurrencyOf(unittest.TestCase):
    def test_currency_of(self):
        self.assertEqual(currency_of(Money("1.00", "EUR")), "EUR")
        self.assertEqual(currency_of({"amount": "1.00", "currency": "GBP"}), "GBP")
        self.assertIsNone(currency_of({"amount": "1.00"}))
        self.assertIsNone(currency_of("1.00"))
        self.assertIsNone(currency_of(Decimal("1.00")))


class TestIsMoneyInput(unittest.TestCase):
    def test_is_money_input(self):
        for value in ("1.00", "garbage", Decimal("1"), Money("1.00"), Decimal128("1"),
                      {"amount": "1.00"}):
            with self.subTest(value=value):
                self.assertTrue(is_money_input(value))
        for value in (None, 1, 1.0, {"amount": 1}, ["1.00"]):
            with self.subTest(value=value):
                self.assertFalse(is_money_input(value))


if __name__ == "__main__":
    unittest.main()
