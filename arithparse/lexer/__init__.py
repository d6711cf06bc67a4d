"""
arithparse Lexer Package

Implements the tokenizer shared by every parser variant.

Key Features:
- Single-character operators: = + - * / ^
- Parentheses as structural tokens
- Numeric literals read with the host's int()/float() conversion
- Source location tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, OPERATORS
from .lexer import Lexer, tokenize_string, format_tokens
from .errors import LexerError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "OPERATORS",
    "LexerError",
    "tokenize_string",
    "format_tokens",
]
