import unittest

from polyfinder.formula import Token, format_coefficient, format_formula, formula_terms


class TestFormatFormula(unittest.TestCase):
    def test_unit_square(self):
        self.assertEqual(format_formula([0, 0, 1]), "f(x) = x^2")

    def test_line(self):
        self.assertEqual(format_formula([2, -3]), "f(x) = -3x + 2")

    def test_empty(self):
        self.assertEqual(format_formula([]), "f(x) = 0")

    def test_all_zero(self):
        self.assertEqual(format_formula([0.0, 1e-12, -5e-10]), "f(x) = 0")

    def test_mixed(self):
        self.assertEqual(format_formula([1, -2, 3.5]), "f(x) = 3.5x^2 - 2x + 1")

    def test_negative_unit_leading(self):
        self.assertEqual(format_formula([-1, 0, 0, -1]), "f(x) = -x^3 - 1")

    def test_constant_one_is_shown(self):
        self.assertEqual(format_formula([1, 1]), "f(x) = x + 1")
        self.assertEqual(format_formula([-1]), "f(x) = -1")

    def test_near_one_is_hidden(self):
        self.assertEqual(format_formula([0, 1 + 1e-12]), "f(x) = x")

    def test_rounding(self):
        self.assertEqual(format_formula([0.12345, 2 / 3]), "f(x) = 0.667x + 0.123")

    def test_scientific(self):
        self.assertEqual(format_formula([-12345.6]), "f(x) = -1.23e+4")


class TestFormatCoefficient(unittest.TestCase):
    def test_significant_digits(self):
        self.assertEqual(format_coefficient(3.14159), "3.14")
        self.assertEqual(format_coefficient(123.456), "123")
        self.assertEqual(format_coefficient(2.0), "2")
        self.assertEqual(format_coefficient(999.7), "1000")
        self.assertEqual(format_coefficient(0.000123456), "0.000123")

    def test_small_positional(self):
        self.assertEqual(format_coefficient(0.0000123456), "0.0000123")
        self.assertEqual(format_coefficient(-0.00000123456), "0.00000123")
        self.assertEqual(format_coefficient(0.0000999), "0.0000999")

    def test_tiny_scientific(self):
        self.assertEqual(format_coefficient(1.23456e-7), "1.23e-7")

    def test_sign_dropped(self):
        self.assertEqual(format_coefficient(-2.5), "2.5")

    def test_scientific(self):
        self.assertEqual(format_coefficient(1000), "1000")
        self.assertEqual(format_coefficient(1000.5), "1.00e+3")
        self.assertEqual(format_coefficient(2.5e7), "2.50e+7")


class TestFormulaTerms(unittest.TestCase):
    def test_tokens(self):
        tokens = formula_terms([2, 0, -1])
        self.assertListEqual(
            tokens,
            [
                Token("sign", "-"),
                Token("variable", "x"),
                Token("exponent", "2"),
                Token("sign", "+"),
                Token("coefficient", "2"),
            ],
        )

    def test_no_tokens(self):
        self.assertListEqual(formula_terms([0, 0]), [])


if __name__ == "__main__":
    unittest.main()
