"""
arithparse Parser Package

Implements a family of arithmetic expression parsers over one shared
lexer, cursor and AST.

Variants:
- prefix:            E -> N | O E E (recursive descent)
- postfix:           E -> N | E E O (stack automaton)
- infix-right:       E -> N R, R -> ε | O E
- infix-precedence:  EXPR -> TERM ([+-] EXPR)?, TERM -> FACT ([*/] TERM)?
- infix-reversed:    left-associative with parentheses, parsed back to front
- climbing:          precedence climbing with unary minus and ^

Author: xwest
"""

from .ast_nodes import (
    ASTNode, ASTNodeType, ASTVisitor, Value, UnaryOp, BinaryOp,
    SexprPrinter, SourceSpan, count_leaves, fold, mirror, walk
)
from .cursor import TokenCursor
from .errors import ParseError, ParseErrorKind, UnexpectedTokenError
from .parser import Parser, PARSERS, get_parser, parse_string, register_parser
from .precedence import Associativity, OperatorInfo, BINARY_OPERATORS, UNARY_OPERATORS
from .prefix import PrefixParser
from .postfix import PostfixParser, OperandStack
from .infix import RightInfixParser, PrecedenceInfixParser, ReversedInfixParser
from .climbing import PrecedenceClimbingParser

__all__ = [
    # Core parser
    "Parser", "PARSERS", "get_parser", "parse_string", "register_parser",
    "TokenCursor",

    # Variants
    "PrefixParser", "PostfixParser", "OperandStack",
    "RightInfixParser", "PrecedenceInfixParser", "ReversedInfixParser",
    "PrecedenceClimbingParser",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "Value", "UnaryOp", "BinaryOp",
    "SexprPrinter", "SourceSpan", "count_leaves", "fold", "mirror", "walk",

    # Precedence tables
    "Associativity", "OperatorInfo", "BINARY_OPERATORS", "UNARY_OPERATORS",

    # Error handling
    "ParseError", "ParseErrorKind", "UnexpectedTokenError",
]
