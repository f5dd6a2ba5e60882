"""Command line driver: translate one source file into one target file."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from tslower.codegen import GeneratorOptions
from tslower.diagnostics import CompileError, render_diagnostic
from tslower.lexer import dump_tokens, lex
from tslower.parser import GrammarRevision
from tslower.pipeline import run_compile

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "output.rs"

EXIT_OK = 0
EXIT_COMPILE_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tslower",
        description="Translate a small TypeScript subset into Rust source.",
    )
    parser.add_argument("input", type=Path, help="source file to translate")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path(DEFAULT_OUTPUT),
        help=f"where to write the translation (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--revision",
        choices=[revision.value for revision in GrammarRevision],
        default=GrammarRevision.FUNCTIONS.value,
        help="grammar revision to accept (default: %(default)s)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=4,
        metavar="N",
        help="spaces per indentation level (default: %(default)s)",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="print the token stream to stdout instead of translating",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.indent < 0:
        parser.error("--indent cannot be negative")

    try:
        text = args.input.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"tslower: cannot read {args.input}: {exc}", file=sys.stderr)
        return EXIT_USAGE

    if args.tokens:
        return _print_tokens(text, args.input)

    result = run_compile(
        text,
        generator_options=GeneratorOptions.with_indent_width(args.indent),
        revision=GrammarRevision(args.revision),
    )
    if result.output is None:
        for diagnostic in result.diagnostics:
            print(render_diagnostic(diagnostic, source=text, path=str(args.input)), file=sys.stderr)
        return EXIT_COMPILE_ERROR

    try:
        args.output.write_text(result.output, encoding="utf-8")
    except OSError as exc:
        print(f"tslower: cannot write {args.output}: {exc}", file=sys.stderr)
        return EXIT_USAGE

    logger.info("wrote %s (%d bytes)", args.output, len(result.output.encode("utf-8")))
    return EXIT_OK


def _print_tokens(text: str, path: Path) -> int:
    try:
        tokens = lex(text)
    except CompileError as error:
        print(render_diagnostic(error.to_diagnostic(), source=text, path=str(path)), file=sys.stderr)
        return EXIT_COMPILE_ERROR
    print(dump_tokens(tokens))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
