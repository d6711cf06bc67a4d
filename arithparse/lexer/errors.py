"""
Error handling for the arithparse lexer.

Provides error reporting with source location information and
diagnostics for words that cannot be read as numbers.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation, OPERATOR_CHARS


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None
    category: Optional[str] = None  # Title of the error code

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.code:
            category = f" ({self.category})" if self.category else ""
            result += f"  code: {self.code}{category}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a word it cannot tokenize.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        lexeme: str = "",
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.lexeme = lexeme
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions,
            category=ERROR_CODES.get(code)
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid numeric literal",
}


def suggest_operator_split(word: str) -> List[str]:
    """Suggest spacing fixes for words that glue digits to unknown symbols."""
    stripped = word.rstrip("0123456789.")
    if stripped and stripped != word:
        return [f"Separate '{stripped}' from the number that follows it"]
    if any(ch.isalpha() for ch in word):
        return ["Variables are not supported; only numeric operands are allowed",
                f"Valid operators are: {' '.join(sorted(OPERATOR_CHARS - {'(', ')'}))}"]
    return []


def create_invalid_number_error(lexeme: str, location: SourceLocation) -> LexerError:
    """Create an error for a word that is not a numeric literal."""
    return LexerError(
        message=f"Invalid numeric literal: '{lexeme}'",
        location=location,
        lexeme=lexeme,
        code="L001",
        help_text="Operands must be integer or floating-point literals.",
        suggestions=suggest_operator_split(lexeme)
    )
