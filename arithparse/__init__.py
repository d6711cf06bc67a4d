"""
arithparse Package

A small family of arithmetic expression parsers sharing one tokenizer,
one token cursor and one AST type.

Architecture:
    arithparse/
    ├── lexer/           # Tokenization
    ├── parser/          # Cursor, AST and the parser variants
    └── cli.py           # Command-line front end

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@arithparse.org"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, LexerError, tokenize_string
from .parser import (
    ASTNode, Value, UnaryOp, BinaryOp, Parser, PARSERS,
    ParseError, ParseErrorKind, get_parser, parse_string
)

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "Parser",
    "ASTNode",
    "Value",
    "UnaryOp",
    "BinaryOp",
    "PARSERS",

    # Functions
    "tokenize_string",
    "parse_string",
    "get_parser",

    # Errors
    "LexerError",
    "ParseError",
    "ParseErrorKind",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
