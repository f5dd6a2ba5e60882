"""Diagnostics."""

from tslower.diagnostics.codes import (
    SPEC_BY_KIND,
    DiagnosticSpec,
    ErrorKind,
    spec_for,
)
from tslower.diagnostics.diagnostic import Diagnostic, Severity
from tslower.diagnostics.errors import CompileError, GenError, LexError, ParseError
from tslower.diagnostics.report import collect_diagnostics, has_errors, render_diagnostic

__all__ = [
    "SPEC_BY_KIND",
    "CompileError",
    "Diagnostic",
    "DiagnosticSpec",
    "ErrorKind",
    "GenError",
    "LexError",
    "ParseError",
    "Severity",
    "collect_diagnostics",
    "has_errors",
    "render_diagnostic",
    "spec_for",
]
