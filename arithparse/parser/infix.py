"""
Recursive descent parsers for infix notation.

Three fixed grammars, each a step up from the last:

- RightInfixParser: no precedence, everything right-associates.
- PrecedenceInfixParser: * / bind tighter than + -, still right-associative,
  no parentheses.
- ReversedInfixParser: left-associative with precedence and parentheses,
  obtained by parsing the token stream back to front and mirroring the tree.

Author: xwest
"""

from ..lexer.tokens import TokenType
from .ast_nodes import ASTNode, mirror
from .cursor import TokenCursor
from .errors import create_unbalanced_paren_error
from .parser import Parser, register_parser
from .precedence import ADDITIVE_OPERATORS, MULTIPLICATIVE_OPERATORS


@register_parser
class RightInfixParser(Parser):
    """
    Infix without precedence.

    Grammar:
        E -> N R
        R -> ε | O E

    The right operand of every operator absorbs the rest of the input,
    so ``1 + 2 * 3 - 4`` is ``1 + (2 * (3 - 4))``.
    """

    name = "infix-right"
    aliases = ("right",)
    description = "infix, right-associative, no precedence"

    def _parse_tokens(self, cursor: TokenCursor) -> ASTNode:
        ast = self._parse_expression(cursor)
        self._expect_end(cursor)
        return ast

    def _parse_expression(self, cursor: TokenCursor) -> ASTNode:
        return self._parse_right_chain(cursor, self._parse_number)


@register_parser
class PrecedenceInfixParser(Parser):
    """
    Infix with two precedence levels and no parentheses.

    Grammar:
        EXPR -> TERM ([+-] EXPR)?
        TERM -> FACT ([*/] TERM)?
        FACT -> NUM
    """

    name = "infix-precedence"
    aliases = ("precedence",)
    description = "infix, right-associative, * / above + -, no parentheses"

    def _parse_tokens(self, cursor: TokenCursor) -> ASTNode:
        ast = self._parse_expr(cursor)
        self._expect_end(cursor)
        return ast

    def _parse_expr(self, cursor: TokenCursor) -> ASTNode:
        return self._parse_right_chain(cursor, self._parse_term, ADDITIVE_OPERATORS)

    def _parse_term(self, cursor: TokenCursor) -> ASTNode:
        return self._parse_right_chain(cursor, self._parse_number, MULTIPLICATIVE_OPERATORS)


@register_parser
class ReversedInfixParser(Parser):
    """
    Left-associative infix with precedence and parentheses.

    Left recursion (``EXPR -> EXPR [+-] TERM``) cannot be descended
    directly, so the tokens are read back to front, where it becomes right
    recursion. Grammar over the reversed stream:

        EXPR -> TERM EL         EL -> {[+-] TERM}
        TERM -> FACT TL         TL -> {[*/] FACT}
        FACT -> NUM | ")" EXPR "("

    The EL/TL loops collect each operator chain and nest it to the right,
    which in reading order is a left-leaning chain. Mirroring the finished
    tree puts operands back in reading order. In the reversed stream ``)``
    opens a group and ``(`` closes it.
    """

    name = "infix-reversed"
    aliases = ("reversed", "infix-left", "left")
    description = "infix, left-associative with precedence and parentheses"
    reverse_tokens = True

    def _parse_tokens(self, cursor: TokenCursor) -> ASTNode:
        reversed_ast = self._parse_expr(cursor)
        if cursor.matches_type(TokenType.PAREN_OPEN):
            raise create_unbalanced_paren_error("unexpected open parenthesis", cursor.peek())
        self._expect_end(cursor)
        return mirror(reversed_ast)

    def _parse_expr(self, cursor: TokenCursor) -> ASTNode:
        return self._parse_right_chain(cursor, self._parse_term, ADDITIVE_OPERATORS)

    def _parse_term(self, cursor: TokenCursor) -> ASTNode:
        return self._parse_right_chain(cursor, self._parse_fact, MULTIPLICATIVE_OPERATORS)

    def _parse_fact(self, cursor: TokenCursor) -> ASTNode:
        token = cursor.peek()

        if token.type == TokenType.PAREN_CLOSE:
            cursor.consume()
            inner = self._parse_expr(cursor)
            if not cursor.matches_type(TokenType.PAREN_OPEN):
                raise create_unbalanced_paren_error("missing open parenthesis", cursor.peek())
            cursor.consume()
            return inner

        if token.type == TokenType.PAREN_OPEN:
            raise create_unbalanced_paren_error("unexpected open parenthesis", token)

        return self._parse_number(cursor, "a number or a parenthesized expression")

