"""
Single-lookahead cursor over a token list.

Each parse call builds its own cursor, so no cursor state is shared
between parses.

Author: xwest
"""

from typing import Any, List, Sequence

from ..lexer.tokens import Token, TokenType, SourceLocation, end_token
from .errors import UnexpectedTokenError


class TokenCursor:
    """
    Stateful cursor over a token sequence with one token of lookahead.

    The END token is synthesized once the underlying list is exhausted;
    consuming at END keeps yielding END.
    """

    def __init__(self, tokens: Sequence[Token], reverse: bool = False, filename: str = "<string>"):
        """
        Args:
            tokens: Tokens from the lexer, without an END token
            reverse: Walk the sequence back to front
            filename: Used for the END token location when there are no tokens
        """
        self.tokens: List[Token] = list(reversed(tokens)) if reverse else list(tokens)
        self.reverse = reverse
        self.position = 0
        self._end = end_token(self._end_location(filename))

    def _end_location(self, filename: str) -> SourceLocation:
        if not self.tokens:
            return SourceLocation(filename, 1, 1, 0)
        last = self.tokens[-1].location
        if self.reverse:
            return last
        width = len(self.tokens[-1].lexeme)
        return SourceLocation(last.filename, last.line, last.column + width, last.offset + width)

    @property
    def current(self) -> Token:
        return self.peek()

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    @property
    def remaining(self) -> List[Token]:
        return self.tokens[self.position:]

    def peek(self) -> Token:
        """Return the first unconsumed token, or END."""
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return self._end

    def consume(self) -> Token:
        """Consume and return the current token."""
        token = self.peek()
        if not self.at_end:
            self.position += 1
        return token

    def expect(self, token_type: TokenType) -> Token:
        """
        Consume a token of the expected type or raise UnexpectedTokenError.

        This is the generic cursor check for callers driving a TokenCursor
        directly. The bundled grammars test with matches_type and report
        UNBALANCED_PARENS or MISSING_TOKENS themselves.
        """
        if self.peek().type != token_type:
            raise UnexpectedTokenError(token_type, self.peek())
        return self.consume()

    def matches_type(self, token_type: TokenType) -> bool:
        return self.peek().type == token_type

    def matches_value(self, value: Any) -> bool:
        token = self.peek()
        return token.value is not None and token.value == value

    def __repr__(self) -> str:
        return f"TokenCursor(position={self.position}, remaining={len(self.remaining)}, reverse={self.reverse})"
