"""Compile result carrier."""

from __future__ import annotations

from dataclasses import dataclass

from tslower.ast import Program
from tslower.diagnostics import Diagnostic, has_errors


@dataclass(frozen=True, slots=True)
class CompileResult:
    """Result of one compilation; `output` is None when any stage failed."""

    source_text: str
    program: Program | None
    output: str | None
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def ok(self) -> bool:
        return self.output is not None and not self.has_errors
