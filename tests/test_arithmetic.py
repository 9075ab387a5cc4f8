# Standard library imports
import unittest
from decimal import (
    ROUND_DOWN,
    ROUND_HALF_UP,
    Decimal,
    Inexact,
    getcontext,
    localcontext,
)

# Local application imports
from exact_money.arithmetic import (
    DECIMAL_PRECISION,
    decimal_context,
    division_context,
    exact_context,
    format_plain,
    quantize_decimal,
)
from exact_money.error import MoneyError


class TestQuantize(unittest.TestCase):
    def test_rounds_half_to_even(self):
        self.assertEqual(quantize_decimal(Decimal("10.125")), Decimal("10.12"))
        self.assertEqual(quantize_decimal(Decimal("10.135")), Decimal("10.14"))
        self.assertEqual(quantize_decimal(Decimal("-10.125")), Decimal("-10.12"))
        self.assertEqual(quantize_decimal(Decimal("2.5"), 0), Decimal("2"))
        self.assertEqual(quantize_decimal(Decimal("3.5"), 0), Decimal("4"))

    def test_other_rounding_modes(self):
        self.assertEqual(
            quantize_decimal(Decimal("10.125"), 2, ROUND_HALF_UP), Decimal("10.13")
        )
        self.assertEqual(
            quantize_decimal(Decimal("12.3456"), 2, ROUND_DOWN), Decimal("12.34")
        )

    def test_pads_to_decimal_places(self):
        self.assertEqual(str(quantize_decimal(Decimal("5"))), "5.00")
        self.assertEqual(str(quantize_decimal(Decimal("0.1"), 8)), "0.10000000")

    def test_large_values_keep_their_places(self):
        value = Decimal("9" * 50 + ".995")
        self.assertEqual(str(quantize_decimal(value)), "1" + "0" * 50 + ".00")

    def test_decimal_places_out_of_range(self):
        for places in (-1, 35):
            with self.assertRaises(MoneyError) as ctx:
                quantize_decimal(Decimal("1"), places)
            self.assertEqual(
                ctx.exception.error_key, MoneyError.DECIMAL_PLACES_OUT_OF_RANGE
            )


class TestOperationContexts(unittest.TestCase):
    def test_exact_context_keeps_every_digit(self):
        with localcontext(exact_context()):
            total = Decimal("1" + "0" * 40) + Decimal("0.01")
        self.assertEqual(str(total), "1" + "0" * 40 + ".01")
        self.assertTrue(exact_context().traps[Inexact])

    def test_division_context_covers_integer_digits(self):
        dividend = Decimal("1" + "0" * 40)
        context = division_context(dividend, Decimal("3"))
        self.assertEqual(context.prec, DECIMAL_PRECISION + 41)
        context = division_context(Decimal("1"), Decimal("300"))
        self.assertEqual(context.prec, DECIMAL_PRECISION)


class TestDecimalContext(unittest.TestCase):
    def test_context_is_local(self):
        outer_precision = getcontext().prec

        @decimal_context
        def precision():
            return getcontext().prec

        self.assertEqual(precision(), DECIMAL_PRECISION)
        self.assertEqual(getcontext().prec, outer_precision)


class TestFormatPlain(unittest.TestCase):
    def test_format_plain(self):
        self.assertEqual(format_plain(Decimal("-0.00")), "0.00")
        self.assertEqual(format_plain(Decimal("-12.30")), "-12.30")
        self.assertEqual(format_plain(Decimal("1E+3").quantize(Decimal("0.01"))), "1000.00")


if __name__ == "__main__":
    unittest.main()
