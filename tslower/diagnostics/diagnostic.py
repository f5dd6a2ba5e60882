"""Diagnostics core types."""

from dataclasses import dataclass

from tslower.diagnostics.codes import Severity
from tslower.text import Span


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer, parser or code generator."""

    code: str
    message: str
    span: Span
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
