"""
Error handling for the arithparse parsers.

Every failure a parser variant can report is a ParseError tagged with a
ParseErrorKind, so callers can tell the kinds apart without parsing
messages.

Author: xwest
"""

from enum import Enum
from typing import Optional, List

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic, LexerError, ERROR_CODES


class ParseErrorKind(Enum):
    """Categories of parse failure."""
    MISSING_TOKENS = "MissingTokens"
    EXTRA_TOKENS = "ExtraTokens"
    INVALID_TOKEN = "InvalidToken"
    MISSING_ARGUMENTS = "MissingArguments"
    UNBALANCED_PARENS = "UnbalancedParens"
    UNEXPECTED_TOKEN = "UnexpectedToken"
    NESTING_TOO_DEEP = "NestingTooDeep"


class ParseError(Exception):
    """
    Exception raised when a parser encounters a fatal syntax error.

    Attributes:
        kind: The ParseErrorKind of the failure
        detail: Human readable description
        token: The offending token, if there is one
        diagnostic: Location-aware diagnostic for reporting
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.kind = kind
        self.detail = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions,
            category=PARSER_ERROR_CODES.get(code, ERROR_CODES.get(code))
        )
        self.token = token

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnexpectedTokenError(ParseError):
    """Raised by TokenCursor.expect when the lookahead has the wrong type."""

    def __init__(self, expected: TokenType, actual: Token):
        super().__init__(
            ParseErrorKind.UNEXPECTED_TOKEN,
            f"Expected {expected.name}, found {actual.type.name}",
            actual.location,
            token=actual,
            code="P001",
            help_text=f"The parser expected to see {expected.name} at this position, "
                      f"but found {describe_token(actual)} instead."
        )
        self.expected = expected
        self.actual = actual


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P002": "Unexpected end of input",
    "P003": "Extra tokens after expression",
    "P004": "Invalid token",
    "P005": "Missing operator arguments",
    "P006": "Unbalanced parentheses",
    "P007": "Expression nested too deeply",
}


def describe_token(token: Token) -> str:
    """Short human readable description of a token."""
    if token.type == TokenType.END:
        return "end of input"
    return f"'{token.lexeme}'"


# Helper functions for creating common parser errors

def create_unexpected_eof_error(expected: str, token: Token) -> ParseError:
    """Create an error for running out of tokens mid-rule."""
    return ParseError(
        ParseErrorKind.MISSING_TOKENS,
        f"Unexpected end of input, expected {expected}",
        token.location,
        token=token,
        code="P002",
        help_text=f"The parser reached the end of the input while expecting {expected}.",
        suggestions=[f"Add the missing {expected}"]
    )


def create_extra_tokens_error(token: Token) -> ParseError:
    """Create an error for input left over after a complete expression."""
    return ParseError(
        ParseErrorKind.EXTRA_TOKENS,
        f"Unexpected {describe_token(token)} after complete expression",
        token.location,
        token=token,
        code="P003",
        help_text="The expression was complete but more input remained.",
        suggestions=["Remove the trailing input", "Check for a missing operator"]
    )


def create_invalid_token_error(expected: str, token: Token) -> ParseError:
    """Create an error for a token that cannot start the current rule."""
    return ParseError(
        ParseErrorKind.INVALID_TOKEN,
        f"Invalid token {describe_token(token)}, expected {expected}",
        token.location,
        token=token,
        code="P004",
        help_text=f"{describe_token(token)} is not allowed here in this grammar."
    )


def create_lexer_failure_error(error: LexerError) -> ParseError:
    """Wrap a lexer error as an INVALID_TOKEN parse error."""
    diagnostic = error.diagnostic
    return ParseError(
        ParseErrorKind.INVALID_TOKEN,
        diagnostic.message,
        diagnostic.location,
        code=diagnostic.code,
        help_text=diagnostic.help_text,
        suggestions=diagnostic.suggestions
    )


def create_missing_arguments_error(token: Token, available: int) -> ParseError:
    """Create an error for an operator with too few operands on the stack."""
    return ParseError(
        ParseErrorKind.MISSING_ARGUMENTS,
        f"Operator '{token.lexeme}' needs 2 operands, found {available}",
        token.location,
        token=token,
        code="P005",
        help_text="In postfix notation both operands must precede their operator.",
        suggestions=["Add the missing operand before the operator"]
    )


def create_unbalanced_paren_error(reason: str, token: Token) -> ParseError:
    """Create an error for a missing or unexpected parenthesis."""
    return ParseError(
        ParseErrorKind.UNBALANCED_PARENS,
        f"Unbalanced parentheses: {reason}",
        token.location,
        token=token,
        code="P006",
        help_text="Every '(' must be closed by a matching ')'.",
        suggestions=["Check for missing delimiters"]
    )


def create_nesting_too_deep_error(token: Token) -> ParseError:
    """Create an error for input nested beyond the interpreter recursion limit."""
    return ParseError(
        ParseErrorKind.NESTING_TOO_DEEP,
        f"Expression nested too deeply near {describe_token(token)}",
        token.location,
        token=token,
        code="P007",
        help_text="Parenthesized groups, unary operators and right-associative "
                  "'^' chains each add a level of nesting.",
        suggestions=["Split the expression into smaller parts"]
    )
