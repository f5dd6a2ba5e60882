"""Recursive-descent parser core."""

from typing import NoReturn

from tslower.diagnostics import ErrorKind, ParseError
from tslower.lexer import Token, TokenKind
from tslower.parser.options import ParserOptions
from tslower.parser.token_source import TokenSource
from tslower.text import Span


class Parser:
    """Token cursor plus the shared error-locating policy of the grammar routines."""

    def __init__(self, source: TokenSource, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def current(self) -> TokenKind:
        return self._source.kind

    @property
    def current_token(self) -> Token:
        return self._source.current

    @property
    def current_span(self) -> Span:
        return self._source.current.span

    @property
    def error_span(self) -> Span:
        """Where a mismatch at the current token is reported.

        There is nothing to point at past end of input, so at EOF the last
        real token's span is reused.
        """
        if self.current == TokenKind.EOF:
            return self._source.last_real_span
        return self.current_span

    def at(self, kind: TokenKind) -> bool:
        return self.current == kind

    def at_set(self, kinds: frozenset[TokenKind] | set[TokenKind]) -> bool:
        return self.current in kinds

    def nth(self, n: int) -> TokenKind:
        return self._source.nth(n).kind

    def bump(self) -> Token:
        return self._source.bump()

    def eat(self, kind: TokenKind) -> bool:
        if self.current == kind:
            self.bump()
            return True
        return False

    def expect(self, kind: TokenKind, error: ErrorKind, message: str | None = None) -> Token:
        if self.current != kind:
            self.error(error, message)
        return self.bump()

    def error(self, kind: ErrorKind, message: str | None = None) -> NoReturn:
        raise ParseError(kind, self.error_span, message)

    def error_at(self, kind: ErrorKind, span: Span, message: str | None = None) -> NoReturn:
        raise ParseError(kind, span, message)

    def span_from(self, start: Span) -> Span:
        """Span covering `start` through the last consumed token."""
        return start.cover(self._source.previous_span)
