import pytest

from tests._shared_cases import GEN_ERROR_CASES, GOLDEN_CASES, ErrorCase, GoldenCase, case_id
from tslower.ast import (
    Binary,
    BinaryOp,
    Block,
    Call,
    CalleePath,
    Expr,
    ExprStmt,
    FunctionDecl,
    Identifier,
    If,
    IntLit,
    Literal,
    Param,
    Program,
    Return,
    TypeAnn,
    Unary,
    UnaryOp,
    VarDecl,
    While,
)
from tslower.codegen import (
    GeneratorOptions,
    contains_value_return,
    escape_string,
    generate,
    param_type,
    return_type,
    rust_identifier,
    target_type,
)
from tslower.diagnostics import ErrorKind, GenError
from tslower.parser import parse_program


@pytest.mark.parametrize("case", GOLDEN_CASES, ids=case_id)
def test_golden_output(case: GoldenCase):
    assert generate(parse_program(case.source)) == case.expected


@pytest.mark.parametrize("case", GEN_ERROR_CASES, ids=case_id)
def test_return_consistency_errors(case: ErrorCase):
    program = parse_program(case.source)

    with pytest.raises(GenError) as exc_info:
        generate(program)

    assert exc_info.value.kind == case.kind
    assert exc_info.value.span.location == case.location


def test_void_function_with_value_return_parses_but_fails_generation():
    program = parse_program("function f(): void { return 1; }")

    assert program.functions[0].return_type == TypeAnn.VOID
    with pytest.raises(GenError) as exc_info:
        generate(program)
    assert exc_info.value.kind == ErrorKind.RETURN_VALUE_REQUIRED


def test_generation_is_deterministic():
    source = "function f(a) { return a * 2; }\nlet x = f(3);\nwhile (x > 0) { x = x - 1; }"
    program = parse_program(source)

    assert generate(program) == generate(program)
    assert generate(parse_program(source)) == generate(program)


def test_generation_does_not_mutate_program():
    program = parse_program("function f() { return 1; }\nreturn 2;")
    snapshot = parse_program("function f() { return 1; }\nreturn 2;")

    generate(program)

    assert program == snapshot


def test_custom_indent():
    program = parse_program("if (a) { x = 1; }")

    output = generate(program, GeneratorOptions(indent="\t"))

    assert output == "fn main() {\n\tif a {\n\t\tx = 1i32;\n\t}\n}\n"
    assert generate(program, GeneratorOptions.with_indent_width(2)).startswith("fn main() {\n  if a {\n")


def test_generator_options_validation():
    with pytest.raises(ValueError):
        GeneratorOptions(indent="--")
    with pytest.raises(ValueError):
        GeneratorOptions.with_indent_width(-1)


def test_mutability_marker_follows_declaration_keyword():
    output = generate(parse_program("let a = 1;\nconst b = 2;"))

    assert "let mut a = 1i32;" in output
    assert "let b = 2i32;" in output
    assert "let mut b" not in output


def test_escape_string():
    assert escape_string('a"b\\c\nd\te\rf') == 'a\\"b\\\\c\\nd\\te\\rf'
    assert escape_string("plain") == "plain"


def test_type_defaults():
    assert param_type(Param("a")) == TypeAnn.NUMBER
    assert param_type(Param("a", TypeAnn.BOOLEAN)) == TypeAnn.BOOLEAN
    assert target_type(TypeAnn.NUMBER) == "i32"
    assert target_type(TypeAnn.STRING) == "String"
    assert target_type(TypeAnn.BOOLEAN) == "bool"
    assert target_type(TypeAnn.VOID) == "()"


def test_return_type_defaulting_searches_nested_statements():
    nested = FunctionDecl(
        name="f",
        params=(),
        return_type=None,
        body=Block((While(Identifier("ok"), If(Identifier("ok"), Block((Return(Literal(IntLit(1))),)), None)),)),
    )
    bare = FunctionDecl(name="g", params=(), return_type=None, body=Block((Return(None),)))
    declared = FunctionDecl(name="h", params=(), return_type=TypeAnn.STRING, body=Block(()))

    assert return_type(nested) == TypeAnn.NUMBER
    assert return_type(bare) == TypeAnn.VOID
    assert return_type(declared) == TypeAnn.STRING


def test_contains_value_return_ignores_plain_statements():
    assert not contains_value_return(VarDecl(True, "x", Literal(IntLit(1))))
    assert contains_value_return(If(Identifier("c"), Block(()), Return(Identifier("c"))))


def test_return_without_span_is_rejected_when_reporting():
    function = FunctionDecl(name="f", params=(), return_type=TypeAnn.VOID, body=Block((Return(Identifier("x")),)))

    with pytest.raises(ValueError, match="no source span"):
        generate(Program(functions=(function,)))


A, B, C = Identifier("a"), Identifier("b"), Identifier("c")


@pytest.mark.parametrize(
    ("expr", "expected"),
    [
        (Binary(BinaryOp.MUL, Binary(BinaryOp.ADD, A, B), C), "(a + b) * c"),
        (Binary(BinaryOp.ADD, A, Binary(BinaryOp.MUL, B, C)), "a + b * c"),
        (Binary(BinaryOp.SUB, Binary(BinaryOp.SUB, A, B), C), "a - b - c"),
        (Binary(BinaryOp.SUB, A, Binary(BinaryOp.SUB, B, C)), "a - (b - c)"),
        (Binary(BinaryOp.AND, Binary(BinaryOp.OR, A, B), C), "(a || b) && c"),
        (Binary(BinaryOp.LT, A, Binary(BinaryOp.EQ, B, C)), "a < (b == c)"),
        (Binary(BinaryOp.EQ, Binary(BinaryOp.LT, A, B), C), "(a < b) == c"),
        (Binary(BinaryOp.AND, Binary(BinaryOp.LT, A, B), C), "a < b && c"),
        (Unary(UnaryOp.NEG, Binary(BinaryOp.ADD, A, B)), "-(a + b)"),
        (Unary(UnaryOp.NOT, Unary(UnaryOp.NOT, A)), "!!a"),
        (Binary(BinaryOp.MUL, Unary(UnaryOp.NEG, A), B), "-a * b"),
        (Call(Binary(BinaryOp.ADD, A, B), ()), "(a + b)()"),
        (Call(CalleePath(("f",)), (Binary(BinaryOp.ADD, A, B),)), "f(a + b)"),
    ],
)
def test_operands_are_parenthesized_where_grouping_would_change(expr: Expr, expected: str):
    program = Program(statements=(ExprStmt(expr),))

    assert generate(program) == f"fn main() {{\n    {expected};\n}}\n"


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("match", "r#match"),
        ("type", "r#type"),
        ("yield", "r#yield"),
        ("self", "self_"),
        ("Self", "Self_"),
        ("crate", "crate_"),
        ("value", "value"),
        ("main", "main"),
    ],
)
def test_rust_identifier(name: str, expected: str):
    assert rust_identifier(name) == expected


def test_user_function_cannot_replace_entry_procedure():
    program = parse_program("function main() { }\nmain();")

    with pytest.raises(GenError) as exc_info:
        generate(program)

    assert exc_info.value.kind == ErrorKind.DUPLICATE_FUNCTION
    assert exc_info.value.span.location == "1:1"
    assert "entry procedure" in exc_info.value.message


def test_functions_clashing_after_renaming_are_rejected():
    program = parse_program("function self() { }\nfunction self_() { }")

    with pytest.raises(GenError) as exc_info:
        generate(program)

    assert exc_info.value.kind == ErrorKind.DUPLICATE_FUNCTION
    assert exc_info.value.span.location == "2:1"
