"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from tslower.text import Span


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 20
    STRING = 21
    NUMBER = 22

    # -------------------------
    # Keywords
    # -------------------------
    LET = 30
    CONST = 31
    FUNCTION = 32
    IF = 33
    ELSE = 34
    WHILE = 35
    RETURN = 36
    TRUE = 37
    FALSE = 38

    # -------------------------
    # Operators (multi-char included)
    # -------------------------
    EQUAL = 40  # =
    EQUAL_EQUAL = 41  # ==
    NOT_EQUAL = 42  # !=
    LESS_THAN = 43  # <
    LESS_THAN_OR_EQUAL = 44  # <=
    GREATER_THAN = 45  # >
    GREATER_THAN_OR_EQUAL = 46  # >=
    PLUS = 47  # +
    MINUS = 48  # -
    STAR = 49  # *
    SLASH = 50  # /
    PERCENT = 51  # %
    BANG = 52  # !
    AMP_AMP = 53  # &&
    PIPE_PIPE = 54  # ||

    # -------------------------
    # Punctuation / separators
    # -------------------------
    LPAREN = 60  # (
    RPAREN = 61  # )
    LBRACE = 62  # {
    RBRACE = 63  # }
    COMMA = 64  # ,
    SEMICOLON = 65  # ;
    COLON = 66  # :
    DOT = 67  # .

    @property
    def is_keyword(self) -> bool:
        return TokenKind.LET <= self <= TokenKind.FALSE

    @property
    def is_literal(self) -> bool:
        return self in (TokenKind.NUMBER, TokenKind.STRING, TokenKind.TRUE, TokenKind.FALSE)


KEYWORDS: Final[dict[str, TokenKind]] = {
    "let": TokenKind.LET,
    "const": TokenKind.CONST,
    "function": TokenKind.FUNCTION,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "while": TokenKind.WHILE,
    "return": TokenKind.RETURN,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `lexeme` is the raw source slice; `value` holds the decoded literal for
    NUMBER (int) and STRING (unescaped text) tokens.
    """

    kind: TokenKind
    lexeme: str
    span: Span
    value: int | str | None = None
