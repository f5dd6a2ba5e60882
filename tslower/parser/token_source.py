"""Cursor over a lexed token list."""

from collections.abc import Sequence

from tslower.lexer import Token, TokenKind
from tslower.text import Span


class TokenSource:
    """Read-only cursor over a token stream that must end with EOF."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise ValueError("Token stream must be terminated by an EOF token")
        self._tokens = tuple(tokens)
        self._position = 0

    @property
    def current(self) -> Token:
        return self._tokens[self._position]

    @property
    def kind(self) -> TokenKind:
        return self.current.kind

    @property
    def position(self) -> int:
        return self._position

    @property
    def last_real_span(self) -> Span:
        """Span of the last non-EOF token (the EOF span for an empty stream)."""
        if len(self._tokens) == 1:
            return self._tokens[0].span
        return self._tokens[-2].span

    @property
    def previous_span(self) -> Span:
        """Span of the most recently consumed token."""
        if self._position == 0:
            return self.current.span
        return self._tokens[self._position - 1].span

    def nth(self, n: int) -> Token:
        index = min(self._position + n, len(self._tokens) - 1)
        return self._tokens[index]

    def bump(self) -> Token:
        token = self.current
        if token.kind != TokenKind.EOF:
            self._position += 1
        return token
