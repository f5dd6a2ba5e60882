"""Parser infrastructure (token source + recursive-descent grammar)."""

from tslower.parser.expressions import parse_expression
from tslower.parser.grammar import parse_block, parse_source_file, parse_statement
from tslower.parser.options import GrammarRevision, ParserOptions
from tslower.parser.parse import parse, parse_program, resolve_options
from tslower.parser.parser import Parser
from tslower.parser.token_source import TokenSource

__all__ = [
    "GrammarRevision",
    "Parser",
    "ParserOptions",
    "TokenSource",
    "parse",
    "parse_block",
    "parse_expression",
    "parse_program",
    "parse_source_file",
    "parse_statement",
    "resolve_options",
]
