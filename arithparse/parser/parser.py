"""
arithparse parser base class and variant registry

Every variant tokenizes the whole input first, walks the tokens once
with a fresh TokenCursor, and insists that the stream is consumed
exactly. Parsing methods receive the cursor as an argument, so a
Parser instance holds no per-parse state and can be shared.

Author: xwest
"""

import logging
from typing import Callable, Dict, FrozenSet, List, Optional, Type

from ..lexer import tokenize_string, LexerError
from ..lexer.tokens import Token, TokenType
from .ast_nodes import ASTNode, BinaryOp, Value
from .cursor import TokenCursor
from .errors import (
    ParseError, create_lexer_failure_error, create_unexpected_eof_error,
    create_invalid_token_error, create_extra_tokens_error, create_nesting_too_deep_error
)

logger = logging.getLogger(__name__)

# name -> parser class, aliases included
PARSERS: Dict[str, Type['Parser']] = {}


def register_parser(cls: Type['Parser']) -> Type['Parser']:
    """Class decorator adding a variant under its name and aliases."""
    for key in (cls.name,) + tuple(cls.aliases):
        if key in PARSERS:
            raise ValueError(f"parser name {key!r} already registered by {PARSERS[key].__name__}")
        PARSERS[key] = cls
    return cls


class Parser:
    """
    Base class for the expression parsers.

    Subclasses set ``name``/``aliases`` and implement ``_parse_tokens``.
    """

    name = "base"
    aliases: tuple = ()
    description = ""
    reverse_tokens = False

    def __init__(self, filename: str = "<string>"):
        """
        Args:
            filename: Name used in error locations
        """
        self.filename = filename

    def parse(self, source: str) -> ASTNode:
        """
        Parse an expression string into an AST.

        Raises:
            ParseError: If the input is not a valid expression for this grammar,
                or nests deeper than the interpreter recursion limit allows
                (kind NESTING_TOO_DEEP)
        """
        tokens = self.tokenize(source)
        cursor = TokenCursor(tokens, reverse=self.reverse_tokens, filename=self.filename)
        logger.debug("parsing %d tokens with %s", len(tokens), self.name)

        try:
            ast = self._parse_tokens(cursor)
        except RecursionError as e:
            raise create_nesting_too_deep_error(cursor.peek()) from e

        logger.debug("%s parsed %r as %s", self.name, source, ast)
        return ast

    def tokenize(self, source: str) -> List[Token]:
        """Tokenize eagerly, reporting lexer failures as INVALID_TOKEN."""
        try:
            return tokenize_string(source, self.filename)
        except LexerError as e:
            raise create_lexer_failure_error(e) from e

    def _parse_tokens(self, cursor: TokenCursor) -> ASTNode:
        raise NotImplementedError

    # Utility methods shared by the variants

    def _parse_number(self, cursor: TokenCursor, expected: str = "a number") -> Value:
        """Consume a NUMBER token as a Value leaf."""
        token = cursor.peek()
        if token.is_number:
            return Value(cursor.consume())
        raise self._unexpected(token, expected)

    def _parse_right_chain(self, cursor: TokenCursor, parse_operand: Callable[[TokenCursor], ASTNode],
                           operators: Optional[FrozenSet[str]] = None) -> ASTNode:
        """
        Parse ``operand {op operand}`` and nest the chain to the right.

        The chain is collected with a loop, so its length is not bounded by
        the recursion limit. ``operators`` restricts which symbols continue
        the chain; None accepts every operator.
        """
        operands: List[ASTNode] = [parse_operand(cursor)]
        chain_operators: List[Token] = []

        while cursor.peek().is_operator and (operators is None or cursor.peek().value in operators):
            chain_operators.append(cursor.consume())
            operands.append(parse_operand(cursor))

        node = operands.pop()
        while chain_operators:
            node = BinaryOp(chain_operators.pop(), operands.pop(), node)
        return node

    def _unexpected(self, token: Token, expected: str) -> ParseError:
        """Error for a token that cannot appear where ``expected`` is needed."""
        if token.type == TokenType.END:
            return create_unexpected_eof_error(expected, token)
        return create_invalid_token_error(expected, token)

    def _expect_end(self, cursor: TokenCursor):
        """Require that the whole stream was consumed."""
        if not cursor.matches_type(TokenType.END):
            raise create_extra_tokens_error(cursor.peek())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


def get_parser(name: str) -> Type[Parser]:
    """
    Look up a parser class by name or alias, case-insensitively.

    Raises:
        KeyError: If no variant is registered under the name
    """
    key = name.strip().lower()
    if key not in PARSERS:
        raise KeyError(f"unknown grammar {name!r}; choose from: {', '.join(sorted(PARSERS))}")
    return PARSERS[key]


def parse_string(source: str, grammar: str = "climbing", filename: str = "<string>") -> ASTNode:
    """
    Convenience function to parse a source string with a named variant.

    Args:
        source: Expression string
        grammar: Variant name or alias
        filename: Filename for error reporting

    Returns:
        AST root node

    Raises:
        KeyError: If the grammar name is unknown
        ParseError: If parsing fails
    """
    parser = get_parser(grammar)(filename)
    return parser.parse(source)
