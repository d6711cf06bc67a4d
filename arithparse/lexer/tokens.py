"""
Token definitions for the arithparse lexer.

This module defines the token types produced when tokenizing an arithmetic
expression:
- Numeric literals (integers and floats)
- Operators (= + - * / ^)
- Parentheses
- The end-of-input marker

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict


class TokenType(Enum):
    """
    Enumeration of all token types in an arithmetic expression.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    END = auto()                    # End of input (synthesized, never stored)

    # ========================================================================
    # Literals
    # ========================================================================
    NUMBER = auto()                 # 42, 3.14, 1e-3

    # ========================================================================
    # Operators and Delimiters
    # ========================================================================
    OPERATOR = auto()               # = + - * / ^
    PAREN_OPEN = auto()             # (
    PAREN_CLOSE = auto()            # )


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source expression.

    Used for error reporting.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token of an arithmetic expression.

    Contains the token type, lexeme (raw text), semantic value and source
    location. NUMBER tokens carry the converted number as their value,
    OPERATOR tokens carry the operator symbol, structural tokens carry None.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # int/float for NUMBER, symbol for OPERATOR
    location: SourceLocation        # Source location

    def __str__(self) -> str:
        if self.value is not None and self.value != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_number(self) -> bool:
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.type == TokenType.OPERATOR


# Single-character operators and delimiters, in lookup-table form for the lexer
OPERATORS: Dict[str, TokenType] = {
    "=": TokenType.OPERATOR,
    "+": TokenType.OPERATOR,
    "-": TokenType.OPERATOR,
    "*": TokenType.OPERATOR,
    "/": TokenType.OPERATOR,
    "^": TokenType.OPERATOR,
    "(": TokenType.PAREN_OPEN,
    ")": TokenType.PAREN_CLOSE,
}

OPERATOR_CHARS = frozenset(OPERATORS)


def end_token(location: SourceLocation) -> Token:
    """Build the end-of-input sentinel at the given location."""
    return Token(TokenType.END, "", None, location)
