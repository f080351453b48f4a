"""Unit tests for presentation formatting."""

import unittest

from linecalc_pkg.formatter import format_display, format_number


class TestFormatDisplay(unittest.TestCase):
    def test_trailing_zeros_and_grouping(self):
        self.assertEqual(format_display("1234567.00"), "1,234,567")
        self.assertEqual(format_display("1234.5600"), "1,234.56")

    def test_small_integers(self):
        self.assertEqual(format_display("0"), "0")
        self.assertEqual(format_display("100"), "100")
        self.assertEqual(format_display("1000"), "1,000")

    def test_integer_zeros_are_kept(self):
        self.assertEqual(format_display("1000000"), "1,000,000")

    def test_negative(self):
        self.assertEqual(format_display("-1234567.5"), "-1,234,567.5")

    def test_fraction_not_grouped(self):
        self.assertEqual(format_display("0.0001234567"), "0.0001234567")
        self.assertEqual(format_display("12345678.123456"), "12,345,678.123456")

    def test_scientific_notation(self):
        self.assertEqual(format_display("1.50000e+25"), "1.5e+25")
        self.assertEqual(format_display("1.23456789012e+21"), "1.23456789012e+21")
        self.assertEqual(format_display("1.5e+1000"), "1.5e+1000")
        self.assertEqual(format_display("12345e+3"), "12345e+3")

    def test_infinity(self):
        self.assertEqual(format_display("Infinity"), "Infinity")
        self.assertEqual(format_display("-Infinity"), "-Infinity")

    def test_custom_separator(self):
        self.assertEqual(format_display("1234567", separator=" "), "1 234 567")

    def test_idempotent(self):
        for raw in (
            "1234567.00",
            "0.5",
            "-98765.4321",
            "1.50000e+25",
            "1e-21",
            "Infinity",
            "100",
        ):
            once = format_display(raw)
            self.assertEqual(format_display(once), once)

    def test_public_alias(self):
        self.assertEqual(format_number("1234567.00"), "1,234,567")


if __name__ == "__main__":
    unittest.main()
