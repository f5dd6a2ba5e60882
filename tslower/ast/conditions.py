"""Boolean-admissibility of `if`/`while` conditions.

The target language only branches on a native boolean and the source subset
has no type system, so conditions are classified syntactically. Only forms
that are unambiguously non-boolean are rejected:

- a literal other than `true`/`false`
- a unary arithmetic negation
- an arithmetic binary operation (`+ - * / %`)

Everything else (comparisons, equalities, `&&`, `||`, `!`, identifiers and
calls) is admitted, since its type is unknown without inference. An
identifier bound to a number therefore passes here and is only rejected by
the target compiler.
"""

from __future__ import annotations

from tslower.ast.model import Binary, BoolLit, Call, Expr, Grouping, Identifier, Literal, Unary, UnaryOp


def is_condition_admissible(expr: Expr) -> bool:
    match expr:
        case Grouping(inner=inner):
            return is_condition_admissible(inner)
        case Literal(value=value):
            return isinstance(value, BoolLit)
        case Unary(op=op):
            return op != UnaryOp.NEG
        case Binary(op=op):
            return not op.is_arithmetic
        case Identifier() | Call():
            return True
        case _:
            raise TypeError(f"Not an expression node: {expr!r}")
