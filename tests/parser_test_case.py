"""
Shared helpers for parser tests.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from arithparse.lexer import tokenize_string, TokenType
from arithparse.parser import ParseError, ParseErrorKind, count_leaves


class ParserTestCase(unittest.TestCase):
    """Base class; subclasses set ``parser_class``."""

    parser_class = None

    def setUp(self):
        self.parser = self.parser_class()

    def _parse(self, source: str) -> str:
        return self.parser.parse(source).to_sexpr()

    def _assert_error(self, source: str, kind: ParseErrorKind) -> ParseError:
        with self.assertRaises(ParseError) as ctx:
            self.parser.parse(source)
        self.assertEqual(ctx.exception.kind, kind, str(ctx.exception))
        return ctx.exception

    def _assert_leaf_count(self, source: str):
        """Every NUMBER token ends up as exactly one leaf."""
        numbers = [t for t in tokenize_string(source) if t.type == TokenType.NUMBER]
        self.assertEqual(count_leaves(self.parser.parse(source)), len(numbers))
