"""Lexer."""

from dataclasses import dataclass
from typing import Final

from tslower.diagnostics import ErrorKind, LexError
from tslower.lexer.tokens import KEYWORDS, Token, TokenKind
from tslower.text import Span

I32_MAX: Final[int] = 2**31 - 1

_ESCAPES: Final[dict[str, str]] = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "t": "\t",
    "r": "\r",
}

_SINGLE_CHAR_TOKENS: Final[dict[str, TokenKind]] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    ":": TokenKind.COLON,
    ".": TokenKind.DOT,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "%": TokenKind.PERCENT,
    "=": TokenKind.EQUAL,
    "!": TokenKind.BANG,
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,
}


@dataclass(frozen=True, slots=True)
class LexerCheckpoint:
    """Scanner position: char index, UTF-8 byte offset and 1-based line/col."""

    position: int
    offset: int
    line: int
    col: int


class Lexer:
    """Lexer that drops whitespace and comments and stops at the first error."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._offset = 0
        self._line = 1
        self._col = 1
        self._value: int | str | None = None

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def checkpoint(self) -> LexerCheckpoint:
        return LexerCheckpoint(
            position=self._position,
            offset=self._offset,
            line=self._line,
            col=self._col,
        )

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def next_token(self) -> Token:
        self._skip_whitespace_and_comments()
        start = self.checkpoint

        if self.is_eof:
            return Token(TokenKind.EOF, "", self._span_from(start))

        self._value = None
        kind = self._lex_token(start)
        lexeme = self._source[start.position : self._position]
        return Token(kind, lexeme, self._span_from(start), self._value)

    def _lex_token(self, start: LexerCheckpoint) -> TokenKind:
        ch = self._current_char()

        if ch == '"':
            return self._lex_string(start)

        if _is_digit(ch):
            return self._lex_number(start)

        if _is_ident_start(ch):
            return self._lex_identifier()

        # Two-character operators
        if ch == "=" and self._peek_char() == "=":
            self._advance(2)
            return TokenKind.EQUAL_EQUAL
        if ch == "!" and self._peek_char() == "=":
            self._advance(2)
            return TokenKind.NOT_EQUAL
        if ch == "<" and self._peek_char() == "=":
            self._advance(2)
            return TokenKind.LESS_THAN_OR_EQUAL
        if ch == ">" and self._peek_char() == "=":
            self._advance(2)
            return TokenKind.GREATER_THAN_OR_EQUAL
        if ch == "&" and self._peek_char() == "&":
            self._advance(2)
            return TokenKind.AMP_AMP
        if ch == "|" and self._peek_char() == "|":
            self._advance(2)
            return TokenKind.PIPE_PIPE

        kind = _SINGLE_CHAR_TOKENS.get(ch)
        if kind is not None:
            self._advance(1)
            return kind

        # Lone `&`/`|` and anything outside the subset.
        raise LexError(ErrorKind.UNEXPECTED_CHAR, self._point(start), f"Unexpected character {ch!r}.")

    def _skip_whitespace_and_comments(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch in " \t\r\n":
                self._advance(1)
                continue
            if ch == "/" and self._peek_char() == "/":
                while not self.is_eof and self._current_char() != "\n":
                    self._advance(1)
                continue
            if ch == "/" and self._peek_char() == "*":
                self._skip_block_comment()
                continue
            break

    def _skip_block_comment(self) -> None:
        start = self.checkpoint
        self._advance(2)
        while not self.is_eof:
            if self._current_char() == "*" and self._peek_char() == "/":
                self._advance(2)
                return
            self._advance(1)
        raise LexError(ErrorKind.UNTERMINATED_BLOCK_COMMENT, self._point(start))

    def _lex_string(self, start: LexerCheckpoint) -> TokenKind:
        # Consume opening quote
        self._advance(1)
        chars: list[str] = []

        while not self.is_eof:
            ch = self._current_char()
            if ch == '"':
                self._advance(1)
                self._value = "".join(chars)
                return TokenKind.STRING
            if ch == "\n":
                break
            if ch == "\\":
                self._advance(1)
                if self.is_eof:
                    break
                escaped = self._current_char()
                chars.append(_ESCAPES.get(escaped, escaped))
                self._advance(1)
                continue
            chars.append(ch)
            self._advance(1)

        raise LexError(ErrorKind.UNTERMINATED_STRING, self._point(start))

    def _lex_number(self, start: LexerCheckpoint) -> TokenKind:
        while not self.is_eof and _is_digit(self._current_char()):
            self._advance(1)

        value = int(self._source[start.position : self._position])
        if value > I32_MAX:
            raise LexError(ErrorKind.INVALID_NUMBER, self._point(start))
        self._value = value
        return TokenKind.NUMBER

    def _lex_identifier(self) -> TokenKind:
        start = self._position
        self._advance(1)
        while not self.is_eof and _is_ident_continue(self._current_char()):
            self._advance(1)
        return KEYWORDS.get(self._source[start : self._position], TokenKind.IDENTIFIER)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        for _ in range(steps):
            ch = self._source[self._position]
            self._position += 1
            self._offset += len(ch.encode("utf-8"))
            if ch == "\n":
                self._line += 1
                self._col = 1
            else:
                self._col += 1

    def _span_from(self, start: LexerCheckpoint) -> Span:
        return Span(start.offset, self._offset, start.line, start.col, self._line, self._col)

    @staticmethod
    def _point(at: LexerCheckpoint) -> Span:
        return Span.point(at.offset, at.line, at.col)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_ident_start(ch: str) -> bool:
    return ch == "_" or ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def _is_ident_continue(ch: str) -> bool:
    return _is_ident_start(ch) or _is_digit(ch)


def lex(source: str) -> list[Token]:
    """Tokenize `source`, ending with a single EOF token."""
    return Lexer(source).lex()


def dump_tokens(tokens: list[Token]) -> str:
    """Render a token list with kind, byte range, position and lexeme for debugging."""
    lines: list[str] = []
    for i, tok in enumerate(tokens):
        lines.append(
            f"{i:03d} {tok.kind.name:<22} range={tok.span.as_tuple()} at={tok.span.location} text={tok.lexeme!r}"
        )
    return "\n".join(lines)
