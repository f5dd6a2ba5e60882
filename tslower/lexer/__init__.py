"""Lexer."""

from tslower.lexer.lexer import Lexer, LexerCheckpoint, dump_tokens, lex
from tslower.lexer.tokens import KEYWORDS, Token, TokenKind

__all__ = [
    "KEYWORDS",
    "Lexer",
    "LexerCheckpoint",
    "Token",
    "TokenKind",
    "dump_tokens",
    "lex",
]
