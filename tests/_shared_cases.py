"""Centralized source cases used across parser/codegen/pipeline tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap

from tslower.diagnostics import ErrorKind
from tslower.parser import GrammarRevision


@dataclass(frozen=True, slots=True)
class GoldenCase:
    name: str
    source: str
    expected: str


@dataclass(frozen=True, slots=True)
class ErrorCase:
    name: str
    source: str
    kind: ErrorKind
    location: str
    revision: GrammarRevision | None = None


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


def case_id(case: GoldenCase | ErrorCase) -> str:
    return case.name


GOLDEN_CASES: tuple[GoldenCase, ...] = (
    GoldenCase(
        name="let_binding_is_mutable_i32",
        source="let x = 1;",
        expected="fn main() {\n    let mut x = 1i32;\n}\n",
    ),
    GoldenCase(
        name="const_string_is_owned_text",
        source='const s = "hi";',
        expected='fn main() {\n    let s = String::from("hi");\n}\n',
    ),
    GoldenCase(
        name="empty_program_still_has_entry",
        source="",
        expected="fn main() {\n}\n",
    ),
    GoldenCase(
        name="comments_are_dropped",
        source="// leading\nlet a = true; /* trailing */\n",
        expected="fn main() {\n    let mut a = true;\n}\n",
    ),
    GoldenCase(
        name="log_call_single_argument",
        source="console.log(1);",
        expected='fn main() {\n    println!("{:?}", 1i32);\n}\n',
    ),
    GoldenCase(
        name="log_call_many_arguments",
        source='console.log(1, "a", false);',
        expected='fn main() {\n    println!("{:?} {:?} {:?}", 1i32, String::from("a"), false);\n}\n',
    ),
    GoldenCase(
        name="log_call_without_arguments",
        source="console.log();",
        expected="fn main() {\n    println!();\n}\n",
    ),
    GoldenCase(
        name="string_escapes_are_reencoded",
        source=r'console.log("say \"hi\"\n\tok\\");',
        expected='fn main() {\n    println!("{:?}", String::from("say \\"hi\\"\\n\\tok\\\\"));\n}\n',
    ),
    GoldenCase(
        name="grouping_keeps_parentheses",
        source="let y = (1 + 2) * 3;",
        expected="fn main() {\n    let mut y = (1i32 + 2i32) * 3i32;\n}\n",
    ),
    GoldenCase(
        name="logical_and_comparison_operators",
        source="const ok = !false && 1 < 2 || a == b;",
        expected="fn main() {\n    let ok = !false && 1i32 < 2i32 || a == b;\n}\n",
    ),
    GoldenCase(
        name="unary_negation_and_modulo",
        source="let r = -7 % 3 - 1;",
        expected="fn main() {\n    let mut r = -7i32 % 3i32 - 1i32;\n}\n",
    ),
    GoldenCase(
        name="assignment_and_expression_statement",
        source="let x = 1;\nx = x + 1;\nf(x);",
        expected="fn main() {\n    let mut x = 1i32;\n    x = x + 1i32;\n    f(x);\n}\n",
    ),
    GoldenCase(
        name="nested_block_is_mirrored",
        source="{ let a = 1; }",
        expected="fn main() {\n    {\n        let mut a = 1i32;\n    }\n}\n",
    ),
    GoldenCase(
        name="if_else_with_blocks",
        source=_dedent(
            """
            let x = 0;
            if (true) { x = 1; } else { x = 2; }
            """
        ),
        expected=_dedent(
            """
            fn main() {
                let mut x = 0i32;
                if true {
                    x = 1i32;
                } else {
                    x = 2i32;
                }
            }
            """
        ),
    ),
    GoldenCase(
        name="if_without_else_wraps_single_statement",
        source="if (a >= 1) console.log(a);",
        expected=_dedent(
            """
            fn main() {
                if a >= 1i32 {
                    println!("{:?}", a);
                }
            }
            """
        ),
    ),
    GoldenCase(
        name="else_if_nests_inside_else_block",
        source="if (a) x = 1; else if (b) x = 2; else x = 3;",
        expected=_dedent(
            """
            fn main() {
                if a {
                    x = 1i32;
                } else {
                    if b {
                        x = 2i32;
                    } else {
                        x = 3i32;
                    }
                }
            }
            """
        ),
    ),
    GoldenCase(
        name="while_with_empty_body",
        source="while (false) { }",
        expected="fn main() {\n    while false {\n    }\n}\n",
    ),
    GoldenCase(
        name="while_with_grouped_condition",
        source="let i = 0;\nwhile ((i < 3)) { i = i + 1; }",
        expected=_dedent(
            """
            fn main() {
                let mut i = 0i32;
                while (i < 3i32) {
                    i = i + 1i32;
                }
            }
            """
        ),
    ),
    GoldenCase(
        name="entry_return_with_value_discards_it",
        source="return 1;",
        expected="fn main() {\n    let _ = 1i32;\n    return;\n}\n",
    ),
    GoldenCase(
        name="entry_bare_return",
        source="return;",
        expected="fn main() {\n    return;\n}\n",
    ),
    GoldenCase(
        name="typed_function_before_entry",
        source=_dedent(
            """
            function id(a: number): number { return a; }
            console.log(id(1));
            """
        ),
        expected=_dedent(
            """
            fn id(a: i32) -> i32 {
                return a;
            }

            fn main() {
                println!("{:?}", id(1i32));
            }
            """
        ),
    ),
    GoldenCase(
        name="untyped_params_and_return_default_to_i32",
        source="function f(a, b) { return a; }",
        expected="fn f(a: i32, b: i32) -> i32 {\n    return a;\n}\n\nfn main() {\n}\n",
    ),
    GoldenCase(
        name="function_without_value_return_is_void",
        source='function hello() { console.log("hi"); }',
        expected='fn hello() {\n    println!("{:?}", String::from("hi"));\n}\n\nfn main() {\n}\n',
    ),
    GoldenCase(
        name="void_function_with_bare_return",
        source="function say(msg: string, loud: boolean): void { console.log(msg); return; }",
        expected=_dedent(
            """
            fn say(msg: String, loud: bool) {
                println!("{:?}", msg);
                return;
            }

            fn main() {
            }
            """
        ),
    ),
    GoldenCase(
        name="nested_value_return_defaults_to_i32",
        source="function g(x) { if (x > 0) { return 1; } return 0; }",
        expected=_dedent(
            """
            fn g(x: i32) -> i32 {
                if x > 0i32 {
                    return 1i32;
                }
                return 0i32;
            }

            fn main() {
            }
            """
        ),
    ),
    GoldenCase(
        name="void_parameter_lowers_to_unit",
        source="function h(u: void) { }",
        expected="fn h(u: ()) {\n}\n\nfn main() {\n}\n",
    ),
    GoldenCase(
        name="functions_keep_declaration_order_around_statements",
        source="let a = 1;\nfunction first() { }\nlet b = 2;\nfunction second() { }",
        expected=_dedent(
            """
            fn first() {
            }

            fn second() {
            }

            fn main() {
                let mut a = 1i32;
                let mut b = 2i32;
            }
            """
        ),
    ),
    GoldenCase(
        name="chained_call",
        source="make(1)(2);",
        expected="fn main() {\n    make(1i32)(2i32);\n}\n",
    ),
    GoldenCase(
        name="keyword_names_become_raw_identifiers",
        source="let match = 1;\nmatch = match + 1;",
        expected="fn main() {\n    let mut r#match = 1i32;\n    r#match = r#match + 1i32;\n}\n",
    ),
    GoldenCase(
        name="keyword_function_and_parameter_names",
        source="function loop(type, self) { return type; }\nconst fn = loop(1, 2);",
        expected=_dedent(
            """
            fn r#loop(r#type: i32, self_: i32) -> i32 {
                return r#type;
            }

            fn main() {
                let r#fn = r#loop(1i32, 2i32);
            }
            """
        ),
    ),
    GoldenCase(
        name="chained_comparison_is_parenthesized",
        source="const c = 1 < 2 == true;",
        expected="fn main() {\n    let c = (1i32 < 2i32) == true;\n}\n",
    ),
    GoldenCase(
        name="chained_equality_in_condition",
        source="if (a == b != c) { }",
        expected="fn main() {\n    if (a == b) != c {\n    }\n}\n",
    ),
)


ERROR_CASES: tuple[ErrorCase, ...] = (
    ErrorCase("numeric_condition", "if (1) { }", ErrorKind.CONDITION_MUST_BE_BOOL, "1:5"),
    ErrorCase("string_condition", 'if ("s") { }', ErrorKind.CONDITION_MUST_BE_BOOL, "1:5"),
    ErrorCase("negated_condition", "if (-x) { }", ErrorKind.CONDITION_MUST_BE_BOOL, "1:5"),
    ErrorCase("arithmetic_while_condition", "while (1 + 1) { }", ErrorKind.CONDITION_MUST_BE_BOOL, "1:8"),
    ErrorCase("grouped_arithmetic_condition", "if ((a * 2)) { }", ErrorKind.CONDITION_MUST_BE_BOOL, "1:5"),
    ErrorCase("missing_semicolon_at_eof", "let x = 1", ErrorKind.MISSING_SEMICOLON, "1:9"),
    ErrorCase("missing_semicolon_second_line", "let a = 1;\nlet b = 2", ErrorKind.MISSING_SEMICOLON, "2:9"),
    ErrorCase("missing_semicolon_before_token", "let a = 1 let b = 2;", ErrorKind.MISSING_SEMICOLON, "1:11"),
    ErrorCase("bare_return_at_eof", "return", ErrorKind.MISSING_SEMICOLON, "1:1"),
    ErrorCase("unclosed_grouping", "(1+2;", ErrorKind.MISSING_RPAREN, "1:5"),
    ErrorCase("unclosed_call", "f(1, 2;", ErrorKind.MISSING_RPAREN, "1:7"),
    ErrorCase("dangling_operator", "1+;", ErrorKind.EXPECTED_EXPR, "1:3"),
    ErrorCase("unclosed_block", "{ let a = 1;", ErrorKind.MISSING_RBRACE, "1:12"),
    ErrorCase("else_without_branch", "if (x) y = 1; else", ErrorKind.MISSING_ELSE, "1:15"),
    ErrorCase("else_followed_by_brace", "{ if (x) y = 1; else }", ErrorKind.MISSING_ELSE, "1:22"),
    ErrorCase("let_without_name", "let = 1;", ErrorKind.EXPECTED_IDENT, "1:5"),
    ErrorCase("let_without_initializer", "let x 1;", ErrorKind.UNEXPECTED_TOKEN, "1:7"),
    ErrorCase("condition_without_paren", "if x { }", ErrorKind.UNEXPECTED_TOKEN, "1:4"),
    ErrorCase("unknown_param_type", "function f(a: float) { }", ErrorKind.UNKNOWN_TYPE, "1:15"),
    ErrorCase("function_without_body", "function f() return 1;", ErrorKind.EXPECTED_BLOCK, "1:14"),
    ErrorCase("function_without_name", "function (a) { }", ErrorKind.EXPECTED_IDENT, "1:10"),
    ErrorCase("nested_function", "function f() { function g() { } }", ErrorKind.UNKNOWN_STRUCTURE, "1:16"),
    ErrorCase("unsupported_member_path", "console.warn(1);", ErrorKind.UNKNOWN_STRUCTURE, "1:1"),
    ErrorCase("log_path_not_called", "console.log;", ErrorKind.UNKNOWN_STRUCTURE, "1:1"),
    ErrorCase("stray_keyword", "else;", ErrorKind.UNKNOWN_STRUCTURE, "1:1"),
    ErrorCase("unterminated_string", 'let s = "abc', ErrorKind.UNTERMINATED_STRING, "1:9"),
    ErrorCase("unexpected_character", "let x = 1 # 2;", ErrorKind.UNEXPECTED_CHAR, "1:11"),
    ErrorCase("single_ampersand", "a & b;", ErrorKind.UNEXPECTED_CHAR, "1:3"),
    ErrorCase("unterminated_block_comment", "/* open", ErrorKind.UNTERMINATED_BLOCK_COMMENT, "1:1"),
    ErrorCase("number_out_of_range", "let n = 2147483648;", ErrorKind.INVALID_NUMBER, "1:9"),
    ErrorCase(
        "literal_revision_rejects_plain_call",
        "foo(1);",
        ErrorKind.UNKNOWN_STRUCTURE,
        "1:1",
        GrammarRevision.LITERALS,
    ),
    ErrorCase(
        "literal_revision_rejects_identifier_initializer",
        "let x = y;",
        ErrorKind.EXPECTED_LITERAL,
        "1:9",
        GrammarRevision.LITERALS,
    ),
    ErrorCase(
        "literal_revision_rejects_log_expression",
        "console.log(x);",
        ErrorKind.EXPECTED_LITERAL,
        "1:13",
        GrammarRevision.LITERALS,
    ),
    ErrorCase(
        "literal_revision_rejects_operators",
        "let x = 1 + 2;",
        ErrorKind.MISSING_SEMICOLON,
        "1:11",
        GrammarRevision.LITERALS,
    ),
    ErrorCase(
        "expression_revision_rejects_if",
        "if (true) { }",
        ErrorKind.UNKNOWN_STRUCTURE,
        "1:1",
        GrammarRevision.EXPRESSIONS,
    ),
    ErrorCase(
        "expression_revision_rejects_return",
        "return 1;",
        ErrorKind.UNKNOWN_STRUCTURE,
        "1:1",
        GrammarRevision.EXPRESSIONS,
    ),
    ErrorCase(
        "control_flow_revision_rejects_functions",
        "function f() { }",
        ErrorKind.UNKNOWN_STRUCTURE,
        "1:1",
        GrammarRevision.CONTROL_FLOW,
    ),
)


GEN_ERROR_CASES: tuple[ErrorCase, ...] = (
    ErrorCase(
        "value_return_in_void_function",
        "function f(): void { return 1; }",
        ErrorKind.RETURN_VALUE_REQUIRED,
        "1:22",
    ),
    ErrorCase(
        "bare_return_in_number_function",
        "function f(): number { return; }",
        ErrorKind.RETURN_VALUE_REQUIRED,
        "1:24",
    ),
    ErrorCase(
        "bare_return_in_defaulted_function",
        "function f(x) { if (x) { return; } return x; }",
        ErrorKind.RETURN_VALUE_REQUIRED,
        "1:26",
    ),
    ErrorCase(
        "function_named_like_entry",
        "function main() { }",
        ErrorKind.DUPLICATE_FUNCTION,
        "1:1",
    ),
    ErrorCase(
        "function_declared_twice",
        "function f() { }\nfunction f(a) { }",
        ErrorKind.DUPLICATE_FUNCTION,
        "2:1",
    ),
)
