"""
Test suite for the prefix and postfix parsers.

Tests cover:
- Tree shape for valid input
- Operand order
- Error kinds for malformed input

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from arithparse.lexer import tokenize_string
from arithparse.parser import (
    PrefixParser, PostfixParser, OperandStack, ParseError, ParseErrorKind,
    BinaryOp, Value
)

from parser_test_case import ParserTestCase


class TestPrefixParser(ParserTestCase):
    """Test cases for E -> N | O E E."""

    parser_class = PrefixParser

    def test_single_number(self):
        self.assertEqual(self._parse("7"), "7")

    def test_simple_operation(self):
        tree = self.parser.parse("+ 1 2")
        self.assertIsInstance(tree, BinaryOp)
        self.assertEqual(tree.operator, "+")
        self.assertEqual(tree.left.value, 1)
        self.assertEqual(tree.right.value, 2)

    def test_nested_right(self):
        self.assertEqual(self._parse("+ 1 * 2 3"), "(+ 1 (* 2 3))")

    def test_nested_left(self):
        self.assertEqual(self._parse("- * 1 2 3"), "(- (* 1 2) 3)")

    def test_all_operators(self):
        self.assertEqual(self._parse("= ^ 1 2 / 3 4"), "(= (^ 1 2) (/ 3 4))")

    def test_no_spaces_needed_around_operators(self):
        self.assertEqual(self._parse("+1 2"), "(+ 1 2)")

    def test_leaf_count(self):
        self._assert_leaf_count("+ * 1 2 - 3 / 4 5")

    def test_missing_tokens(self):
        self._assert_error("+ 1", ParseErrorKind.MISSING_TOKENS)
        self._assert_error("", ParseErrorKind.MISSING_TOKENS)

    def test_extra_tokens(self):
        error = self._assert_error("1 2", ParseErrorKind.EXTRA_TOKENS)
        self.assertEqual(error.token.lexeme, "2")

    def test_parens_are_invalid(self):
        self._assert_error("( + 1 2 )", ParseErrorKind.INVALID_TOKEN)

    def test_non_numeric_word(self):
        error = self._assert_error("+ 1 x", ParseErrorKind.INVALID_TOKEN)
        self.assertEqual(error.diagnostic.code, "L001")
        self.assertEqual(error.diagnostic.category, "Invalid numeric literal")

    def test_error_code_category(self):
        error = self._assert_error("+ 1", ParseErrorKind.MISSING_TOKENS)
        self.assertEqual(error.diagnostic.code, "P002")
        self.assertEqual(error.diagnostic.category, "Unexpected end of input")
        self.assertIn("code: P002 (Unexpected end of input)", str(error))

    def test_no_unary_minus(self):
        """Prefix operators always take two operands."""
        self._assert_error("- 1", ParseErrorKind.MISSING_TOKENS)


class TestPostfixParser(ParserTestCase):
    """Test cases for the postfix stack automaton."""

    parser_class = PostfixParser

    def test_single_number(self):
        self.assertEqual(self._parse("7"), "7")

    def test_simple_operation(self):
        self.assertEqual(self._parse("1 2 +"), "(+ 1 2)")

    def test_operand_order(self):
        """The second-from-top operand is the left child."""
        self.assertEqual(self._parse("5 3 -"), "(- 5 3)")

    def test_nested(self):
        self.assertEqual(self._parse("1 2 3 * +"), "(+ 1 (* 2 3))")
        self.assertEqual(self._parse("1 2 + 3 *"), "(* (+ 1 2) 3)")

    def test_leaf_count(self):
        self._assert_leaf_count("1 2 * 3 4 / 5 ^ -")

    def test_missing_arguments(self):
        error = self._assert_error("1 +", ParseErrorKind.MISSING_ARGUMENTS)
        self.assertEqual(error.token.lexeme, "+")
        self._assert_error("+", ParseErrorKind.MISSING_ARGUMENTS)

    def test_missing_tokens_on_empty_input(self):
        self._assert_error("", ParseErrorKind.MISSING_TOKENS)

    def test_extra_tokens(self):
        self._assert_error("1 2", ParseErrorKind.EXTRA_TOKENS)
        self._assert_error("1 2 + 3", ParseErrorKind.EXTRA_TOKENS)

    def test_parens_are_invalid(self):
        self._assert_error("1 2 ( +", ParseErrorKind.INVALID_TOKEN)


class TestOperandStack(unittest.TestCase):

    def test_pop_pair_order(self):
        one, two, plus = tokenize_string("1 2 +")
        stack = OperandStack()
        stack.push(Value(one))
        stack.push(Value(two))
        left, right = stack.pop_pair(plus)
        self.assertEqual((left.value, right.value), (1, 2))
        self.assertEqual(len(stack), 0)

    def test_underflow(self):
        one, plus = tokenize_string("1 +")
        stack = OperandStack()
        stack.push(Value(one))
        with self.assertRaises(ParseError) as ctx:
            stack.pop_pair(plus)
        self.assertEqual(ctx.exception.kind, ParseErrorKind.MISSING_ARGUMENTS)


if __name__ == '__main__':
    unittest.main()
