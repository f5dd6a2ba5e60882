"""Target-language code generation."""

from tslower.codegen.generator import ENTRY_NAME, CodeGenerator, escape_string, generate
from tslower.codegen.names import rust_identifier
from tslower.codegen.options import GeneratorOptions
from tslower.codegen.types import (
    DEFAULT_TYPE,
    TARGET_TYPES,
    contains_value_return,
    param_type,
    return_type,
    target_type,
)

__all__ = [
    "DEFAULT_TYPE",
    "ENTRY_NAME",
    "TARGET_TYPES",
    "CodeGenerator",
    "GeneratorOptions",
    "contains_value_return",
    "escape_string",
    "generate",
    "param_type",
    "return_type",
    "rust_identifier",
    "target_type",
]
