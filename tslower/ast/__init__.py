"""Typed AST for the TypeScript subset."""

from tslower.ast.conditions import is_condition_admissible
from tslower.ast.model import (
    LOG_PATH,
    Assign,
    Binary,
    BinaryOp,
    Block,
    BoolLit,
    Call,
    CalleePath,
    Expr,
    ExprStmt,
    FunctionDecl,
    Grouping,
    Identifier,
    If,
    IntLit,
    Literal,
    LiteralValue,
    Param,
    Program,
    Return,
    Stmt,
    StrLit,
    TypeAnn,
    Unary,
    UnaryOp,
    VarDecl,
    While,
)

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
    "is_condition_admissible",
]
