"""High-level parse entrypoints."""

from __future__ import annotations

from collections.abc import Sequence

from tslower.ast import Program
from tslower.lexer import Token, lex
from tslower.parser.grammar import parse_source_file
from tslower.parser.options import GrammarRevision, ParserOptions
from tslower.parser.parser import Parser
from tslower.parser.token_source import TokenSource


def resolve_options(
    options: ParserOptions | None,
    revision: GrammarRevision | None,
) -> ParserOptions:
    if revision is not None and options is not None:
        raise ValueError("Pass either options or revision, not both")

    if options is not None:
        return options

    if revision is not None:
        return ParserOptions.for_revision(revision)

    return ParserOptions()


def parse(
    tokens: Sequence[Token],
    options: ParserOptions | None = None,
    *,
    revision: GrammarRevision | None = None,
) -> Program:
    """Build a Program from a token stream, raising ParseError on the first mismatch."""
    resolved_options = resolve_options(options=options, revision=revision)
    parser = Parser(TokenSource(tokens), options=resolved_options)
    return parse_source_file(parser)


def parse_program(
    text: str,
    options: ParserOptions | None = None,
    *,
    revision: GrammarRevision | None = None,
) -> Program:
    """Lex and parse source text."""
    return parse(lex(text), options=options, revision=revision)
