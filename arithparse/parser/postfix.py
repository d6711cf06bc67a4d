"""
Postfix (reverse Polish) notation parser.

Grammar:
    E -> N | E E O

Parsed with a stack automaton rather than recursion: numbers push a
leaf, operators pop two operands and push the combined node.

Author: xwest
"""

from typing import List

from ..lexer.tokens import Token, TokenType
from .ast_nodes import ASTNode, BinaryOp, Value
from .cursor import TokenCursor
from .errors import (
    create_missing_arguments_error, create_unexpected_eof_error,
    create_extra_tokens_error, create_invalid_token_error
)
from .parser import Parser, register_parser


class OperandStack:
    """Sequence-backed stack of completed subtrees."""

    def __init__(self):
        self._items: List[ASTNode] = []

    def push(self, node: ASTNode):
        self._items.append(node)

    def pop(self) -> ASTNode:
        return self._items.pop()

    def pop_pair(self, operator: Token):
        """Pop (left, right); the top of the stack is the right operand."""
        if len(self._items) < 2:
            raise create_missing_arguments_error(operator, len(self._items))
        right = self._items.pop()
        left = self._items.pop()
        return left, right

    def __len__(self) -> int:
        return len(self._items)


@register_parser
class PostfixParser(Parser):
    """Stack automaton over postfix notation; operators are binary only."""

    name = "postfix"
    aliases = ("post",)
    description = "postfix notation, E -> N | E E O"

    def _parse_tokens(self, cursor: TokenCursor) -> ASTNode:
        stack = OperandStack()

        while not cursor.matches_type(TokenType.END):
            token = cursor.consume()
            if token.type == TokenType.NUMBER:
                stack.push(Value(token))
            elif token.type == TokenType.OPERATOR:
                left, right = stack.pop_pair(token)
                stack.push(BinaryOp(token, left, right))
            else:
                raise create_invalid_token_error("a number or an operator", token)

        if len(stack) == 0:
            raise create_unexpected_eof_error("an expression", cursor.peek())
        if len(stack) > 1:
            raise create_extra_tokens_error(stack.pop().token)
        return stack.pop()
