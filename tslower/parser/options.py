"""Grammar revisions and parser configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class GrammarRevision(StrEnum):
    """Grammar profile. Each revision is a superset of the previous one."""

    LITERALS = "literals"
    EXPRESSIONS = "expressions"
    CONTROL_FLOW = "control-flow"
    FUNCTIONS = "functions"

    @property
    def rank(self) -> int:
        return list(GrammarRevision).index(self)


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling which grammar constructs are accepted."""

    revision: GrammarRevision = GrammarRevision.FUNCTIONS
    allow_expressions: bool = True
    allow_control_flow: bool = True
    allow_functions: bool = True

    @staticmethod
    def for_revision(revision: GrammarRevision) -> "ParserOptions":
        return ParserOptions(
            revision=revision,
            allow_expressions=revision.rank >= GrammarRevision.EXPRESSIONS.rank,
            allow_control_flow=revision.rank >= GrammarRevision.CONTROL_FLOW.rank,
            allow_functions=revision.rank >= GrammarRevision.FUNCTIONS.rank,
        )
