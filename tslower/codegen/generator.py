"""Lower a Program into target-language (Rust) source text."""

from __future__ import annotations

import logging
from typing import Final

from tslower.ast import (
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
    Program,
    Return,
    Stmt,
    StrLit,
    TypeAnn,
    Unary,
    VarDecl,
    While,
)
from tslower.codegen.names import rust_identifier
from tslower.codegen.options import GeneratorOptions
from tslower.codegen.types import param_type, return_type, target_type
from tslower.codegen.writer import LineWriter
from tslower.diagnostics import ErrorKind, GenError
from tslower.text import Span

logger = logging.getLogger(__name__)

ENTRY_NAME: Final[str] = "main"

# Binding strength of each operator in the output, loosest first. Comparisons
# and equalities share one non-associative level there.
_BINARY_STRENGTH: Final[dict[BinaryOp, int]] = {
    BinaryOp.OR: 1,
    BinaryOp.AND: 2,
    BinaryOp.EQ: 3,
    BinaryOp.NE: 3,
    BinaryOp.LT: 3,
    BinaryOp.LE: 3,
    BinaryOp.GT: 3,
    BinaryOp.GE: 3,
    BinaryOp.ADD: 4,
    BinaryOp.SUB: 4,
    BinaryOp.MUL: 5,
    BinaryOp.DIV: 5,
    BinaryOp.MOD: 5,
}
_COMPARISON_STRENGTH: Final[int] = 3
_UNARY_STRENGTH: Final[int] = 6
_ATOM_STRENGTH: Final[int] = 7

_STRING_ESCAPES: Final[dict[str, str]] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def generate(program: Program, options: GeneratorOptions | None = None) -> str:
    """Render `program`: every function in declaration order, then the entry procedure."""
    return CodeGenerator(options).generate(program)


class CodeGenerator:
    """Single-use emitter; the AST is only read."""

    def __init__(self, options: GeneratorOptions | None = None) -> None:
        self._options = options or GeneratorOptions()
        # None while lowering the entry procedure.
        self._return_type: TypeAnn | None = None

    def generate(self, program: Program) -> str:
        _check_function_names(program.functions)
        sections = [self._generate_function(function) for function in program.functions]
        sections.append(self._generate_entry(program.statements))
        output = "\n".join(sections)
        logger.debug(
            "generated %d function(s) and entry with %d statement(s), %d bytes",
            len(program.functions),
            len(program.statements),
            len(output),
        )
        return output

    def _generate_function(self, function: FunctionDecl) -> str:
        writer = LineWriter(self._options.indent)
        params = ", ".join(
            f"{rust_identifier(param.name)}: {target_type(param_type(param))}" for param in function.params
        )
        resolved = return_type(function)
        signature = f"fn {rust_identifier(function.name)}({params})"
        if resolved != TypeAnn.VOID:
            signature += f" -> {target_type(resolved)}"

        self._return_type = resolved
        try:
            writer.line(f"{signature} {{")
            with writer.indented():
                self._emit_statements(writer, function.body.statements)
            writer.line("}")
        finally:
            self._return_type = None
        return writer.finish()

    def _generate_entry(self, statements: tuple[Stmt, ...]) -> str:
        writer = LineWriter(self._options.indent)
        writer.line(f"fn {ENTRY_NAME}() {{")
        with writer.indented():
            self._emit_statements(writer, statements)
        writer.line("}")
        return writer.finish()

    # -------------------------
    # Statements
    # -------------------------

    def _emit_statements(self, writer: LineWriter, statements: tuple[Stmt, ...]) -> None:
        for stmt in statements:
            self._emit_statement(writer, stmt)

    def _emit_statement(self, writer: LineWriter, stmt: Stmt) -> None:
        match stmt:
            case VarDecl(mutable=mutable, name=name, init=init):
                marker = "mut " if mutable else ""
                writer.line(f"let {marker}{rust_identifier(name)} = {self._format_expr(init)};")
            case Assign(target=target, value=value):
                writer.line(f"{rust_identifier(target)} = {self._format_expr(value)};")
            case ExprStmt(expr=expr):
                writer.line(f"{self._format_expr(expr)};")
            case Return():
                self._emit_return(writer, stmt)
            case Block(statements=statements):
                writer.line("{")
                with writer.indented():
                    self._emit_statements(writer, statements)
                writer.line("}")
            case If(condition=condition, then_branch=then_branch, else_branch=else_branch):
                writer.line(f"if {self._format_expr(condition)} {{")
                self._emit_branch(writer, then_branch)
                if else_branch is not None:
                    writer.line("} else {")
                    self._emit_branch(writer, else_branch)
                writer.line("}")
            case While(condition=condition, body=body):
                writer.line(f"while {self._format_expr(condition)} {{")
                self._emit_branch(writer, body)
                writer.line("}")
            case _:
                raise TypeError(f"Not a statement node: {stmt!r}")

    def _emit_branch(self, writer: LineWriter, branch: Stmt) -> None:
        """Emit a branch body inside braces the caller already opened."""
        with writer.indented():
            if isinstance(branch, Block):
                self._emit_statements(writer, branch.statements)
            else:
                self._emit_statement(writer, branch)

    def _emit_return(self, writer: LineWriter, stmt: Return) -> None:
        if self._return_type is None:
            # Entry procedure: keep the value's side effects, return nothing.
            if stmt.value is not None:
                writer.line(f"let _ = {self._format_expr(stmt.value)};")
            writer.line("return;")
            return

        if self._return_type == TypeAnn.VOID:
            if stmt.value is not None:
                raise GenError(
                    ErrorKind.RETURN_VALUE_REQUIRED,
                    _span_of(stmt),
                    "Cannot return a value from a function declared `void`.",
                )
            writer.line("return;")
            return

        if stmt.value is None:
            raise GenError(
                ErrorKind.RETURN_VALUE_REQUIRED,
                _span_of(stmt),
                f"Function returning `{self._return_type}` must return a value.",
            )
        writer.line(f"return {self._format_expr(stmt.value)};")

    # -------------------------
    # Expressions
    # -------------------------

    def _format_expr(self, expr: Expr) -> str:
        match expr:
            case Literal(value=IntLit(value=value)):
                return f"{value}i32"
            case Literal(value=StrLit(value=value)):
                return f'String::from("{escape_string(value)}")'
            case Literal(value=BoolLit(value=value)):
                return "true" if value else "false"
            case Identifier(name=name):
                return rust_identifier(name)
            case Unary(op=op, operand=operand):
                return f"{op}{self._format_operand(operand, _UNARY_STRENGTH)}"
            case Binary(op=op, left=left, right=right):
                strength = _BINARY_STRENGTH[op]
                lhs = self._format_operand(left, strength)
                rhs = self._format_operand(right, strength, right_side=True)
                return f"{lhs} {op} {rhs}"
            case Grouping(inner=inner):
                return f"({self._format_expr(inner)})"
            case Call():
                return self._format_call(expr)
            case _:
                raise TypeError(f"Not an expression node: {expr!r}")

    def _format_call(self, call: Call) -> str:
        args = [self._format_expr(arg) for arg in call.args]
        if call.is_log:
            if not args:
                return "println!()"
            placeholders = " ".join("{:?}" for _ in args)
            return f'println!("{placeholders}", {", ".join(args)})'

        if isinstance(call.callee, CalleePath):
            callee = "::".join(rust_identifier(segment) for segment in call.callee.segments)
        else:
            callee = self._format_operand(call.callee, _ATOM_STRENGTH)
        return f"{callee}({', '.join(args)})"

    def _format_operand(self, expr: Expr, parent_strength: int, *, right_side: bool = False) -> str:
        """Format `expr` as an operand, parenthesized where the output would regroup it."""
        text = self._format_expr(expr)
        strength = _strength(expr)
        if (
            strength < parent_strength
            or (right_side and strength == parent_strength)
            or strength == parent_strength == _COMPARISON_STRENGTH
        ):
            return f"({text})"
        return text


def escape_string(value: str) -> str:
    return "".join(_STRING_ESCAPES.get(ch, ch) for ch in value)


def _strength(expr: Expr) -> int:
    match expr:
        case Binary(op=op):
            return _BINARY_STRENGTH[op]
        case Unary():
            return _UNARY_STRENGTH
        case _:
            return _ATOM_STRENGTH


def _check_function_names(functions: tuple[FunctionDecl, ...]) -> None:
    seen = {ENTRY_NAME}
    for function in functions:
        name = rust_identifier(function.name)
        if name in seen:
            reason = "the entry procedure" if name == ENTRY_NAME else "another function"
            raise GenError(
                ErrorKind.DUPLICATE_FUNCTION,
                _span_of(function),
                f"Function `{function.name}` clashes with {reason}.",
            )
        seen.add(name)


def _span_of(node: Stmt | FunctionDecl) -> Span:
    if node.span is None:
        raise ValueError(f"Node has no source span: {node!r}")
    return node.span
