"""Compile carriers and entrypoints."""

from tslower.pipeline.entrypoints import compile_source, run_compile
from tslower.pipeline.result import CompileResult

__all__ = [
    "CompileResult",
    "compile_source",
    "run_compile",
]
