"""
Precedence climbing parser.

Grammar:
    EXPR -> E(0)
    E(p) -> P {B E(q)}
    P    -> U E(q) | "(" EXPR ")" | NUM
    U    -> "-"
    B    -> "=" | "+" | "-" | "*" | "/" | "^"

The loop ``{B E(q)}`` continues while the next operator is binary with
precedence >= p. For a unary operator q is its own precedence; for a
binary operator q is p + 1 when left-associative and p when
right-associative.

Unary minus binds tighter than ``^``, so ``-2^2`` is ``(-2)^2``.

Author: xwest
"""

from ..lexer.tokens import TokenType
from .ast_nodes import ASTNode, BinaryOp, UnaryOp
from .cursor import TokenCursor
from .errors import create_unbalanced_paren_error
from .parser import Parser, register_parser
from .precedence import binary_info, unary_info

LOWEST_PRECEDENCE = 0


@register_parser
class PrecedenceClimbingParser(Parser):
    """Unary minus, right-associative ^, left-associative = + - * /."""

    name = "climbing"
    aliases = ("infix", "in")
    description = "infix via precedence climbing, with unary minus and ^"

    def _parse_tokens(self, cursor: TokenCursor) -> ASTNode:
        ast = self._climb(cursor, LOWEST_PRECEDENCE)
        if cursor.matches_type(TokenType.PAREN_CLOSE):
            raise create_unbalanced_paren_error("unexpected close parenthesis", cursor.peek())
        self._expect_end(cursor)
        return ast

    def _climb(self, cursor: TokenCursor, min_precedence: int) -> ASTNode:
        left = self._parse_primary(cursor)

        while True:
            info = binary_info(cursor.peek())
            if info is None or info.precedence < min_precedence:
                break
            operator = cursor.consume()
            right = self._climb(cursor, info.next_min_precedence())
            left = BinaryOp(operator, left, right)

        return left

    def _parse_primary(self, cursor: TokenCursor) -> ASTNode:
        token = cursor.peek()

        info = unary_info(token)
        if info is not None:
            operator = cursor.consume()
            return UnaryOp(operator, self._climb(cursor, info.precedence))

        if token.type == TokenType.PAREN_OPEN:
            cursor.consume()
            inner = self._climb(cursor, LOWEST_PRECEDENCE)
            if not cursor.matches_type(TokenType.PAREN_CLOSE):
                raise create_unbalanced_paren_error("missing close parenthesis", cursor.peek())
            cursor.consume()
            return inner

        return self._parse_number(cursor, "a number, '-' or '('")
