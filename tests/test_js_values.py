import math
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../')))

from jsxparser.js_values import (
    INFINITY,
    UNDEFINED,
    binary_operation,
    loose_equals,
    strict_equals,
    to_js_string,
    to_number,
    to_property_key,
    truthy,
    unary_operation,
)


class TestCoercions(unittest.TestCase):

    def test_undefined_singleton(self):
        self.assertIs(type(UNDEFINED)(), UNDEFINED)
        self.assertFalse(UNDEFINED)
        self.assertEqual(repr(UNDEFINED), "undefined")

    def test_truthiness(self):
        for value in (0, 0.0, "", None, UNDEFINED, False, float("nan")):
            self.assertFalse(truthy(value), value)
        # empty containers are objects, and objects are truthy
        for value in ([], {}, "0", -1, True, object()):
            self.assertTrue(truthy(value), value)

    def test_to_number(self):
        self.assertEqual(to_number("42"), 42)
        self.assertEqual(to_number("  1.5  "), 1.5)
        self.assertEqual(to_number(""), 0)
        self.assertEqual(to_number("0x1f"), 31)
        self.assertEqual(to_number(True), 1)
        self.assertEqual(to_number(None), 0)
        self.assertTrue(math.isnan(to_number(UNDEFINED)))
        self.assertTrue(math.isnan(to_number("abc")))
        # Python-only numeric spellings are not numbers here
        self.assertTrue(math.isnan(to_number("1_000")))
        self.assertTrue(math.isnan(to_number("inf")))
        self.assertEqual(to_number("-Infinity"), -INFINITY)

    def test_to_js_string(self):
        self.assertEqual(to_js_string(1.0), "1")
        self.assertEqual(to_js_string(1.5), "1.5")
        self.assertEqual(to_js_string(1e-7), "1e-7")
        self.assertEqual(to_js_string(1e21), "1e+21")
        self.assertEqual(to_js_string(float("nan")), "NaN")
        self.assertEqual(to_js_string(-INFINITY), "-Infinity")
        self.assertEqual(to_js_string(True), "true")
        self.assertEqual(to_js_string(None), "null")
        self.assertEqual(to_js_string(UNDEFINED), "undefined")
        self.assertEqual(to_js_string([1, None, "a"]), "1,,a")
        self.assertEqual(to_js_string({"a": 1}), "[object Object]")

    def test_property_keys(self):
        self.assertEqual(to_property_key(2.0), 2)
        self.assertEqual(to_property_key(1.5), "1.5")
        self.assertEqual(to_property_key(True), "true")
        self.assertEqual(to_property_key("name"), "name")


class TestOperators(unittest.TestCase):

    def test_arithmetic(self):
        self.assertEqual(binary_operation("+", 1, 2), 3)
        self.assertEqual(binary_operation("-", 5, 7), -2)
        self.assertEqual(binary_operation("*", "5", "2"), 10)
        self.assertEqual(binary_operation("/", 10, 4), 2.5)
        self.assertEqual(binary_operation("/", 8, 8), 1)
        self.assertIsInstance(binary_operation("/", 8, 8), int)
        self.assertEqual(binary_operation("**", 2, 4), 16)
        self.assertEqual(binary_operation("%", 27, 14), 13)

    def test_remainder_keeps_sign_of_dividend(self):
        self.assertEqual(binary_operation("%", -7, 3), -1)
        self.assertEqual(binary_operation("%", 7, -3), 1)
        self.assertEqual(binary_operation("%", 5.5, 2), 1.5)

    def test_division_by_zero(self):
        self.assertEqual(binary_operation("/", 1, 0), INFINITY)
        self.assertEqual(binary_operation("/", -1, 0), -INFINITY)
        self.assertTrue(math.isnan(binary_operation("/", 0, 0)))
        self.assertTrue(math.isnan(binary_operation("%", 1, 0)))

    def test_addition_concatenates_strings(self):
        self.assertEqual(binary_operation("+", "5", 2), "52")
        self.assertEqual(binary_operation("+", 1, "px"), "1px")
        self.assertEqual(binary_operation("+", [1, 2], 3), "1,23")
        self.assertEqual(binary_operation("+", "a", None), "anull")

    def test_relational(self):
        self.assertTrue(binary_operation("<", 1, 2))
        self.assertTrue(binary_operation(">=", "10", 9))
        self.assertTrue(binary_operation("<", "a", "b"))
        # "10" < "9" compares as strings
        self.assertTrue(binary_operation("<", "10", "9"))
        self.assertFalse(binary_operation("<", 1, UNDEFINED))
        self.assertFalse(binary_operation(">=", 1, UNDEFINED))

    def test_equality(self):
        self.assertTrue(loose_equals(1, "1"))
        self.assertTrue(loose_equals(0, False))
        self.assertTrue(loose_equals(None, UNDEFINED))
        self.assertFalse(loose_equals(None, 0))
        self.assertFalse(strict_equals(1, "1"))
        self.assertFalse(strict_equals(None, UNDEFINED))
        self.assertTrue(strict_equals("a", "a"))
        items = [1]
        self.assertTrue(strict_equals(items, items))
        self.assertFalse(strict_equals(items, [1]))
        self.assertFalse(binary_operation("!==", 2, 2))
        self.assertTrue(binary_operation("!=", 2, "3"))

    def test_unknown_operator_yields_undefined(self):
        self.assertIs(binary_operation("&", 1, 1), UNDEFINED)
        self.assertIs(unary_operation("~", 1), UNDEFINED)

    def test_unary(self):
        self.assertTrue(unary_operation("!", 0))
        self.assertFalse(unary_operation("!", "x"))
        self.assertEqual(unary_operation("-", "3"), -3)
        self.assertEqual(unary_operation("+", True), 1)


if __name__ == "__main__":
    unittest.main()
