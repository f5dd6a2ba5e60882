"""AST data model for the TypeScript subset."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypeAlias

from tslower.text import Span

LOG_PATH: tuple[str, ...] = ("console", "log")


class TypeAnn(StrEnum):
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    VOID = "void"


class UnaryOp(StrEnum):
    NOT = "!"
    NEG = "-"


class BinaryOp(StrEnum):
    OR = "||"
    AND = "&&"
    EQ = "=="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"

    @property
    def is_arithmetic(self) -> bool:
        return self in (BinaryOp.ADD, BinaryOp.SUB, BinaryOp.MUL, BinaryOp.DIV, BinaryOp.MOD)


# -------------------------
# Literals
# -------------------------


@dataclass(frozen=True, slots=True)
class IntLit:
    value: int


@dataclass(frozen=True, slots=True)
class StrLit:
    value: str


@dataclass(frozen=True, slots=True)
class BoolLit:
    value: bool


LiteralValue: TypeAlias = IntLit | StrLit | BoolLit


# -------------------------
# Expressions
# -------------------------


@dataclass(frozen=True, slots=True)
class Literal:
    value: LiteralValue
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Identifier:
    name: str
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Unary:
    op: UnaryOp
    operand: Expr
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Binary:
    op: BinaryOp
    left: Expr
    right: Expr
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class CalleePath:
    """Named call target: a plain function name or the qualified logging path."""

    segments: tuple[str, ...]
    span: Span | None = field(default=None, compare=False, repr=False)

    @property
    def is_log(self) -> bool:
        return self.segments == LOG_PATH

    @property
    def dotted(self) -> str:
        return ".".join(self.segments)


@dataclass(frozen=True, slots=True)
class Call:
    """Call expression; a chained call such as `f(1)(2)` has an expression callee."""

    callee: CalleePath | Expr
    args: tuple[Expr, ...]
    span: Span | None = field(default=None, compare=False, repr=False)

    @property
    def is_log(self) -> bool:
        return isinstance(self.callee, CalleePath) and self.callee.is_log


@dataclass(frozen=True, slots=True)
class Grouping:
    inner: Expr
    span: Span | None = field(default=None, compare=False, repr=False)


Expr: TypeAlias = Literal | Identifier | Unary | Binary | Call | Grouping


# -------------------------
# Statements
# -------------------------


@dataclass(frozen=True, slots=True)
class VarDecl:
    mutable: bool
    name: str
    init: Expr
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Assign:
    target: str
    value: Expr
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class ExprStmt:
    expr: Expr
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Return:
    value: Expr | None
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Block:
    statements: tuple[Stmt, ...]
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class If:
    condition: Expr
    then_branch: Stmt
    else_branch: Stmt | None
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class While:
    condition: Expr
    body: Stmt
    span: Span | None = field(default=None, compare=False, repr=False)


Stmt: TypeAlias = VarDecl | Assign | ExprStmt | Return | Block | If | While


# -------------------------
# Declarations
# -------------------------


@dataclass(frozen=True, slots=True)
class Param:
    name: str
    type: TypeAnn | None = None
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class FunctionDecl:
    name: str
    params: tuple[Param, ...]
    return_type: TypeAnn | None
    body: Block
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Program:
    """Root node: top-level functions and entry statements, in source order."""

    functions: tuple[FunctionDecl, ...] = ()
    statements: tuple[Stmt, ...] = ()


__all__ = [
    "LOG_PATH",
    "Assign",
    "Binary",
    "BinaryOp",
    "Block",
    "BoolLit",
    "Call",
    "CalleePath",
    "Expr",
    "ExprStmt",
    "FunctionDecl",
    "Grouping",
    "Identifier",
    "If",
    "IntLit",
    "Literal",
    "LiteralValue",
    "Param",
    "Program",
    "Return",
    "Stmt",
    "StrLit",
    "TypeAnn",
    "Unary",
    "UnaryOp",
    "VarDecl",
    "While",
]
