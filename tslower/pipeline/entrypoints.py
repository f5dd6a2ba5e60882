"""Source-to-target entrypoints running lex, parse and generate in one pass."""

from __future__ import annotations

import logging

from tslower.ast import Program
from tslower.codegen import GeneratorOptions, generate
from tslower.diagnostics import CompileError
from tslower.lexer import lex
from tslower.parser import GrammarRevision, ParserOptions, parse, resolve_options
from tslower.pipeline.result import CompileResult

logger = logging.getLogger(__name__)


def compile_source(
    text: str,
    parser_options: ParserOptions | None = None,
    generator_options: GeneratorOptions | None = None,
    *,
    revision: GrammarRevision | None = None,
) -> str:
    """Translate `text`, raising the first CompileError unchanged."""
    _, output = _compile(text, parser_options, generator_options, revision)
    return output


def run_compile(
    text: str,
    parser_options: ParserOptions | None = None,
    generator_options: GeneratorOptions | None = None,
    *,
    revision: GrammarRevision | None = None,
) -> CompileResult:
    """Translate `text`, capturing a failure as a diagnostic instead of raising."""
    # Option conflicts are caller bugs, not source errors.
    resolved = resolve_options(parser_options, revision)
    try:
        program, output = _compile(text, resolved, generator_options, None)
    except CompileError as error:
        logger.debug("compilation failed: %s", error)
        return CompileResult(
            source_text=text,
            program=None,
            output=None,
            diagnostics=[error.to_diagnostic()],
        )
    return CompileResult(source_text=text, program=program, output=output, diagnostics=[])


def _compile(
    text: str,
    parser_options: ParserOptions | None,
    generator_options: GeneratorOptions | None,
    revision: GrammarRevision | None,
) -> tuple[Program, str]:
    tokens = lex(text)
    logger.debug("lexed %d token(s)", len(tokens))
    program = parse(tokens, parser_options, revision=revision)
    logger.debug(
        "parsed %d function(s) and %d top-level statement(s)",
        len(program.functions),
        len(program.statements),
    )
    return program, generate(program, generator_options)
