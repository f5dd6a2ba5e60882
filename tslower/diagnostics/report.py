"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from tslower.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def render_diagnostic(
    diagnostic: Diagnostic,
    source: str | None = None,
    path: str | None = None,
) -> str:
    """Format a diagnostic as `path:line:col: severity[code]: message`.

    With `source`, the offending line is echoed with a caret underline.
    """
    span = diagnostic.span
    prefix = f"{path}:" if path else ""
    lines = [f"{prefix}{span.location}: {diagnostic.severity}[{diagnostic.code}]: {diagnostic.message}"]

    if source is not None:
        source_lines = source.splitlines()
        if 0 < span.start_line <= len(source_lines):
            line_text = source_lines[span.start_line - 1]
            if span.end_line == span.start_line:
                width = max(span.end_col - span.start_col, 1)
            else:
                width = max(len(line_text) - span.start_col + 1, 1)
            gutter = f"{span.start_line} | "
            lines.append(f"{gutter}{line_text}")
            lines.append(" " * (len(gutter) + span.start_col - 1) + "^" * width)

    if diagnostic.hint:
        lines.append(f"hint: {diagnostic.hint}")

    return "\n".join(lines)
