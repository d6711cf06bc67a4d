"""
arithparse Lexer - turns an expression string into tokens

Classification is by character membership only: operator and paren
characters become single-character tokens, every other run of
non-space characters is a value word that must read as a number.

xwest
"""

import logging
from typing import List

from .tokens import Token, TokenType, SourceLocation, OPERATORS, OPERATOR_CHARS
from .errors import LexerError, create_invalid_number_error

logger = logging.getLogger(__name__)


class Lexer:
    """
    Arithmetic expression lexical analyzer.

    Converts source text into a list of tokens. The end-of-input marker
    is not stored; the token cursor synthesizes it on demand.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the lexer with source text.

        Args:
            source: Expression string
            filename: Name used in error locations
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.

        Invalid words are recorded in ``errors`` and skipped so that every
        bad word in the input is reported.

        Returns:
            List of tokens, without an END token
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens.clear()
        self.errors.clear()

        while self.pos < len(self.source):
            self._skip_whitespace()

            if self.pos >= len(self.source):
                break

            try:
                self.tokens.append(self._next_token())
            except LexerError as e:
                self.errors.append(e)

        logger.debug("tokenized %r into %d tokens", self.source, len(self.tokens))
        return self.tokens

    def _next_token(self) -> Token:
        """Get the next token from the source."""
        location = self._location()
        current_char = self.source[self.pos]

        if current_char in OPERATOR_CHARS:
            self._advance()
            token_type = OPERATORS[current_char]
            value = current_char if token_type == TokenType.OPERATOR else None
            return Token(token_type, current_char, value, location)

        return self._tokenize_word(location)

    def _tokenize_word(self, location: SourceLocation) -> Token:
        """Consume a maximal value word and read it as a number."""
        start = self.pos
        while (self.pos < len(self.source)
               and not self.source[self.pos].isspace()
               and self.source[self.pos] not in OPERATOR_CHARS):
            self._advance()

        lexeme = self.source[start:self.pos]
        return Token(TokenType.NUMBER, lexeme, self._convert_number(lexeme, location), location)

    def _convert_number(self, lexeme: str, location: SourceLocation):
        """Convert a word with int(), falling back to float()."""
        try:
            return int(lexeme)
        except ValueError:
            pass
        try:
            return float(lexeme)
        except ValueError:
            raise create_invalid_number_error(lexeme, location)

    def _skip_whitespace(self):
        while self.pos < len(self.source) and self.source[self.pos].isspace():
            self._advance()

    def _advance(self):
        """Advance position by one character, tracking lines and columns."""
        if self.source[self.pos] == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Expression string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If a value word is not a number
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise lexer.errors[0]

    return tokens


def format_tokens(tokens: List[Token]) -> str:
    """Render a token listing, one token per line."""
    lines = ["Tokens:"]
    for token in tokens:
        lines.append(f"  type = {token.type.name}, word = {token.lexeme}")
    return "\n".join(lines)
