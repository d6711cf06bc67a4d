"""
Prefix (Polish) notation parser.

Grammar:
    E -> N | O E E

Author: xwest
"""

from typing import List, Tuple

from ..lexer.tokens import Token, TokenType
from .ast_nodes import ASTNode, BinaryOp
from .cursor import TokenCursor
from .parser import Parser, register_parser


@register_parser
class PrefixParser(Parser):
    """
    Top-down parser for prefix notation; operators are binary only.

    Each operator waits on a stack until both of its operands are complete,
    which is the rule ``O E E`` applied without call recursion.
    """

    name = "prefix"
    aliases = ("pre",)
    description = "prefix notation, E -> N | O E E"

    def _parse_tokens(self, cursor: TokenCursor) -> ASTNode:
        ast = self._parse_expression(cursor)
        self._expect_end(cursor)
        return ast

    def _parse_expression(self, cursor: TokenCursor) -> ASTNode:
        # (operator, operands parsed so far)
        pending: List[Tuple[Token, List[ASTNode]]] = []

        while True:
            token = cursor.peek()

            if token.type == TokenType.OPERATOR:
                pending.append((cursor.consume(), []))
                continue

            if token.type != TokenType.NUMBER:
                raise self._unexpected(token, "a number or an operator")

            node = self._parse_number(cursor)
            while pending:
                operator, operands = pending[-1]
                operands.append(node)
                if len(operands) < 2:
                    break
                pending.pop()
                node = BinaryOp(operator, operands[0], operands[1])
            else:
                return node
