"""Error values raised by the compilation stages."""

from __future__ import annotations

from tslower.diagnostics.codes import ErrorKind, spec_for
from tslower.diagnostics.diagnostic import Diagnostic
from tslower.text import Span


class CompileError(Exception):
    """First error of a compilation, located by the span it was detected at."""

    def __init__(self, kind: ErrorKind, span: Span, message: str | None = None) -> None:
        self.kind = kind
        self.span = span
        self.message = message if message is not None else spec_for(kind).message
        super().__init__(f"{kind} at {span.location}: {self.message}")

    def to_diagnostic(self) -> Diagnostic:
        spec = spec_for(self.kind)
        return Diagnostic(
            code=spec.code,
            message=self.message,
            span=self.span,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompileError):
            return NotImplemented
        return type(self) is type(other) and (self.kind, self.span) == (other.kind, other.span)

    def __hash__(self) -> int:
        return hash((type(self), self.kind, self.span))


class LexError(CompileError):
    pass


class ParseError(CompileError):
    pass


class GenError(CompileError):
    pass
