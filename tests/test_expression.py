import math
import unittest

from mcda.expression import ExpressionError, Formula, evaluate_expression, is_valid_expression


class TestExpression(unittest.TestCase):
    def test_evaluates_formula(self) -> None:
        self.assertEqual(evaluate_expression("100 - x/1000", 50000), 50.0)
        self.assertEqual(evaluate_expression("100 * (400000 - x) / (400000 - 300000)", 350000), 50.0)

    def test_operator_precedence(self) -> None:
        self.assertEqual(evaluate_expression("2 + 3 * x", 2), 8.0)
        self.assertEqual(evaluate_expression("(2 + 3) * x", 2), 10.0)
        self.assertEqual(evaluate_expression("10 - 4 - 3", 0), 3.0)
        self.assertEqual(evaluate_expression("100 / 10 / 2", 0), 5.0)

    def test_unary_signs_and_decimals(self) -> None:
        self.assertEqual(evaluate_expression("-x + 10", 4), 6.0)
        self.assertEqual(evaluate_expression("+x * -2", 3), -6.0)
        self.assertEqual(evaluate_expression(".5 * x", 4), 2.0)
        self.assertEqual(evaluate_expression("  x  ", 7), 7.0)

    def test_rejects_malformed_formulas(self) -> None:
        for text in ("x*", "", "   ", "(x", "x)", "2x", "x x", "1.2.3", "()", "*x"):
            with self.subTest(text=text):
                with self.assertRaises(ExpressionError):
                    evaluate_expression(text, 1)
                self.assertFalse(is_valid_expression(text))

    def test_rejects_disallowed_characters(self) -> None:
        for text in ("x; alert(1)", "__import__('os')", "x ** 2", "abs(x)", "y + 1", "1e3", "٣ + x"):
            with self.subTest(text=text):
                with self.assertRaises(ExpressionError):
                    evaluate_expression(text, 1)

    def test_rejects_non_string(self) -> None:
        with self.assertRaises(ExpressionError):
            Formula.parse(None)

    def test_division_by_zero(self) -> None:
        self.assertEqual(evaluate_expression("x / 0", 1), math.inf)
        self.assertEqual(evaluate_expression("x / 0", -1), -math.inf)
        with self.assertRaises(ExpressionError):
            evaluate_expression("x / 0", 0)
        with self.assertRaises(ExpressionError):
            evaluate_expression("(x - x) / (x - x)", 3)

    def test_deep_nesting_is_rejected(self) -> None:
        text = "(" * 5000 + "x" + ")" * 5000
        with self.assertRaises(ExpressionError):
            evaluate_expression(text, 1)

    def test_parsed_formula_is_reusable(self) -> None:
        formula = Formula.parse("x * 2")
        self.assertEqual(formula(1), 2.0)
        self.assertEqual(formula(3.5), 7.0)
        self.assertTrue(is_valid_expression("x * 2"))
