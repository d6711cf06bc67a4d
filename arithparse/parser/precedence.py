"""
Static operator precedence and associativity tables.

Author: xwest
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from ..lexer.tokens import Token


class Associativity(Enum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class OperatorInfo:
    symbol: str
    precedence: int
    associativity: Associativity

    def next_min_precedence(self) -> int:
        """Minimum precedence for the right operand of this binary operator."""
        if self.associativity == Associativity.LEFT:
            return self.precedence + 1
        return self.precedence


# Higher binds tighter
BINARY_OPERATORS: Mapping[str, OperatorInfo] = MappingProxyType({
    "=": OperatorInfo("=", 0, Associativity.LEFT),
    "+": OperatorInfo("+", 1, Associativity.LEFT),
    "-": OperatorInfo("-", 1, Associativity.LEFT),
    "*": OperatorInfo("*", 2, Associativity.LEFT),
    "/": OperatorInfo("/", 2, Associativity.LEFT),
    "^": OperatorInfo("^", 3, Associativity.RIGHT),
})

UNARY_OPERATORS: Mapping[str, OperatorInfo] = MappingProxyType({
    "-": OperatorInfo("-", 4, Associativity.NONE),
})

# Operator classes used by the fixed-grammar recursive descent parsers
ADDITIVE_OPERATORS = frozenset({"+", "-"})
MULTIPLICATIVE_OPERATORS = frozenset({"*", "/"})


def binary_info(token: Token) -> Optional[OperatorInfo]:
    if not token.is_operator:
        return None
    return BINARY_OPERATORS.get(token.lexeme)


def unary_info(token: Token) -> Optional[OperatorInfo]:
    if not token.is_operator:
        return None
    return UNARY_OPERATORS.get(token.lexeme)
