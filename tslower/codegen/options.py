"""Code generator configuration options."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeneratorOptions:
    """Output layout knobs."""

    indent: str = "    "

    def __post_init__(self):
        if self.indent.strip(" \t"):
            raise ValueError("Indent must consist of spaces or tabs only")

    @staticmethod
    def with_indent_width(width: int) -> "GeneratorOptions":
        if width < 0:
            raise ValueError("Indent width cannot be negative")
        return GeneratorOptions(indent=" " * width)
