"""Type defaulting for parameters and return types.

The output language needs every parameter and return type spelled out, while
the source may omit them. Defaults are fixed text chosen from the AST shape
alone, never inferred from call sites or returned expressions:

- a parameter without an annotation is a 32-bit integer
- a function without a return annotation returns a 32-bit integer when its
  body holds at least one `return <value>;`, and nothing otherwise
"""

from __future__ import annotations

from typing import Final

from tslower.ast import Assign, Block, ExprStmt, FunctionDecl, If, Param, Return, Stmt, TypeAnn, VarDecl, While

DEFAULT_TYPE: Final[TypeAnn] = TypeAnn.NUMBER

TARGET_TYPES: Final[dict[TypeAnn, str]] = {
    TypeAnn.NUMBER: "i32",
    TypeAnn.STRING: "String",
    TypeAnn.BOOLEAN: "bool",
    TypeAnn.VOID: "()",
}


def param_type(param: Param) -> TypeAnn:
    return param.type if param.type is not None else DEFAULT_TYPE


def return_type(function: FunctionDecl) -> TypeAnn:
    if function.return_type is not None:
        return function.return_type
    if contains_value_return(function.body):
        return DEFAULT_TYPE
    return TypeAnn.VOID


def contains_value_return(stmt: Stmt) -> bool:
    """Whether `stmt` holds a `return <value>;` anywhere in its nested statements."""
    match stmt:
        case Return(value=value):
            return value is not None
        case Block(statements=statements):
            return any(contains_value_return(child) for child in statements)
        case If(then_branch=then_branch, else_branch=else_branch):
            return contains_value_return(then_branch) or (
                else_branch is not None and contains_value_return(else_branch)
            )
        case While(body=body):
            return contains_value_return(body)
        case VarDecl() | Assign() | ExprStmt():
            return False
        case _:
            raise TypeError(f"Not a statement node: {stmt!r}")


def target_type(ann: TypeAnn) -> str:
    return TARGET_TYPES[ann]
