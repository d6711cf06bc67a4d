"""
Tests for the command-line front end.

Author: xwest
"""

import io
import unittest
import sys
import os
from contextlib import redirect_stdout, redirect_stderr

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from arithparse.cli import main, EXIT_PARSE_ERROR, EXIT_USAGE
from arithparse.parser import PARSERS, get_parser, parse_string, PrefixParser


class TestCLI(unittest.TestCase):
    """Test cases for arithparse.cli.main."""

    def _run(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_prefix(self):
        code, out, _ = self._run("prefix", "+ 1 * 2 3")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "(+ 1 (* 2 3))")

    def test_selector_aliases_case_insensitive(self):
        for grammar in ("post", "POSTFIX", "Post"):
            with self.subTest(grammar=grammar):
                code, out, _ = self._run(grammar, "1 2 +")
                self.assertEqual(code, 0)
                self.assertEqual(out.strip(), "(+ 1 2)")

    def test_infix_is_precedence_climbing(self):
        code, out, _ = self._run("in", "1^2^3")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "(^ 1 (^ 2 3))")

    def test_parse_error_exit_code(self):
        code, out, err = self._run("pre", "+ 1")
        self.assertEqual(code, EXIT_PARSE_ERROR)
        self.assertEqual(out, "")
        self.assertIn("error: MissingTokens:", err)

    def test_invalid_word(self):
        code, _, err = self._run("infix", "1 + x")
        self.assertEqual(code, EXIT_PARSE_ERROR)
        self.assertIn("InvalidToken", err)

    def test_unknown_grammar(self):
        code, _, err = self._run("sideways", "1")
        self.assertEqual(code, EXIT_USAGE)
        self.assertIn("unknown grammar", err)

    def test_wrong_argument_count(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["prefix"])
        self.assertEqual(ctx.exception.code, EXIT_USAGE)

    def test_expression_starting_with_minus(self):
        code, out, _ = self._run("in", "-2^2")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "(^ (- 2) 2)")

    def test_expression_words_are_joined(self):
        code, out, _ = self._run("post", "1", "2", "3", "*", "+")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "(+ 1 (* 2 3))")

    def test_double_dash_separator(self):
        code, out, _ = self._run("in", "--", "-1 - -2")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "(- (- 1) (- 2))")

    def test_blank_expression_is_usage_error(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["prefix", "  "])
        self.assertEqual(ctx.exception.code, EXIT_USAGE)

    def test_tokens_flag(self):
        code, out, _ = self._run("--tokens", "post", "1 2 +")
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(lines[0], "Tokens:")
        self.assertEqual(lines[-1], "(+ 1 2)")

    def test_tokens_flag_with_invalid_word(self):
        code, _, err = self._run("--tokens", "post", "1 y +")
        self.assertEqual(code, EXIT_PARSE_ERROR)
        self.assertIn("InvalidToken", err)


class TestRegistry(unittest.TestCase):

    def test_every_variant_registered(self):
        names = {cls.name for cls in PARSERS.values()}
        self.assertEqual(names, {
            "prefix", "postfix", "infix-right", "infix-precedence",
            "infix-reversed", "climbing",
        })

    def test_get_parser(self):
        self.assertIs(get_parser(" PRE "), PrefixParser)
        with self.assertRaises(KeyError):
            get_parser("nope")

    def test_parse_string_default_grammar(self):
        self.assertEqual(parse_string("1 + 2 * 3").to_sexpr(), "(+ 1 (* 2 3))")

    def test_parse_string_filename_in_errors(self):
        from arithparse.parser import ParseError
        with self.assertRaises(ParseError) as ctx:
            parse_string("(1", "climbing", filename="input.expr")
        self.assertEqual(ctx.exception.location.filename, "input.expr")


if __name__ == '__main__':
    unittest.main()
