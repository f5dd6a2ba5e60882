"""Diagnostic codes and messages."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final, Literal

Severity = Literal["error", "warning"]


class ErrorKind(StrEnum):
    # lexer
    UNEXPECTED_CHAR = "UnexpectedChar"
    UNTERMINATED_STRING = "UnterminatedString"
    UNTERMINATED_BLOCK_COMMENT = "UnterminatedBlockComment"
    INVALID_NUMBER = "InvalidNumber"

    # parser: structural
    MISSING_SEMICOLON = "MissingSemicolon"
    MISSING_RPAREN = "MissingRParen"
    MISSING_RBRACE = "MissingRBrace"
    MISSING_ELSE = "MissingElse"
    UNKNOWN_STRUCTURE = "UnknownStructure"
    EXPECTED_LITERAL = "ExpectedLiteral"
    EXPECTED_EXPR = "ExpectedExpr"
    EXPECTED_IDENT = "ExpectedIdent"
    UNEXPECTED_TOKEN = "UnexpectedToken"

    # parser: policy
    CONDITION_MUST_BE_BOOL = "ConditionMustBeBool"
    UNKNOWN_TYPE = "UnknownType"
    EXPECTED_BLOCK = "ExpectedBlock"

    # codegen
    RETURN_VALUE_REQUIRED = "ReturnValueRequired"
    DUPLICATE_FUNCTION = "DuplicateFunction"


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNEXPECTED_CHAR: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorKind.UNEXPECTED_CHAR,
    message="Unexpected character.",
    hint="Only ASCII identifiers, integers, double-quoted strings and the subset's operators are supported.",
    category="lexer",
)

LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorKind.UNTERMINATED_STRING,
    message="Unterminated string literal.",
    hint="Close the string with a double quote on the same line.",
    category="lexer",
)

LEXER_UNTERMINATED_BLOCK_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorKind.UNTERMINATED_BLOCK_COMMENT,
    message="Unterminated block comment.",
    hint="Close the comment with `*/`.",
    category="lexer",
)

LEXER_INVALID_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorKind.INVALID_NUMBER,
    message="Integer literal does not fit in a 32-bit signed integer.",
    category="lexer",
)

PARSER_MISSING_SEMICOLON: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorKind.MISSING_SEMICOLON,
    message="Expected `;` after statement.",
    category="parser",
)

PARSER_MISSING_RPAREN: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorKind.MISSING_RPAREN,
    message="Expected `)`.",
    category="parser",
)

PARSER_MISSING_RBRACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorKind.MISSING_RBRACE,
    message="Expected `}` before end of input.",
    category="parser",
)

PARSER_MISSING_ELSE: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorKind.MISSING_ELSE,
    message="Expected a statement after `else`.",
    category="parser",
)

PARSER_UNKNOWN_STRUCTURE: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorKind.UNKNOWN_STRUCTURE,
    message="Unrecognized statement structure.",
    category="parser",
)

PARSER_EXPECTED_LITERAL: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorKind.EXPECTED_LITERAL,
    message="Expected a literal value.",
    hint="This grammar revision only accepts number, string or boolean literals here.",
    category="parser",
)

PARSER_EXPECTED_EXPR: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorKind.EXPECTED_EXPR,
    message="Expected an expression.",
    category="parser",
)

PARSER_EXPECTED_IDENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorKind.EXPECTED_IDENT,
    message="Expected an identifier.",
    category="parser",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorKind.UNEXPECTED_TOKEN,
    message="Unexpected token.",
    category="parser",
)

PARSER_CONDITION_MUST_BE_BOOL: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorKind.CONDITION_MUST_BE_BOOL,
    message="Condition must be a boolean expression.",
    hint="Use a comparison such as `x != 0` instead of relying on truthiness.",
    category="parser",
)

PARSER_UNKNOWN_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorKind.UNKNOWN_TYPE,
    message="Unknown type name.",
    hint="Supported types are `number`, `string`, `boolean` and `void`.",
    category="parser",
)

PARSER_EXPECTED_BLOCK: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorKind.EXPECTED_BLOCK,
    message="Expected `{` to start the function body.",
    category="parser",
)

CODEGEN_RETURN_VALUE_REQUIRED: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorKind.RETURN_VALUE_REQUIRED,
    message="Return statement does not match the function's return type.",
    hint="Return a value from non-void functions and no value from void functions.",
    category="codegen",
)

CODEGEN_DUPLICATE_FUNCTION: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorKind.DUPLICATE_FUNCTION,
    message="Function name is already defined.",
    hint="`main` is reserved for the entry procedure and every function name must be unique.",
    category="codegen",
)

SPEC_BY_KIND: Final[dict[ErrorKind, DiagnosticSpec]] = {
    ErrorKind.UNEXPECTED_CHAR: LEXER_UNEXPECTED_CHAR,
    ErrorKind.UNTERMINATED_STRING: LEXER_UNTERMINATED_STRING,
    ErrorKind.UNTERMINATED_BLOCK_COMMENT: LEXER_UNTERMINATED_BLOCK_COMMENT,
    ErrorKind.INVALID_NUMBER: LEXER_INVALID_NUMBER,
    ErrorKind.MISSING_SEMICOLON: PARSER_MISSING_SEMICOLON,
    ErrorKind.MISSING_RPAREN: PARSER_MISSING_RPAREN,
    ErrorKind.MISSING_RBRACE: PARSER_MISSING_RBRACE,
    ErrorKind.MISSING_ELSE: PARSER_MISSING_ELSE,
    ErrorKind.UNKNOWN_STRUCTURE: PARSER_UNKNOWN_STRUCTURE,
    ErrorKind.EXPECTED_LITERAL: PARSER_EXPECTED_LITERAL,
    ErrorKind.EXPECTED_EXPR: PARSER_EXPECTED_EXPR,
    ErrorKind.EXPECTED_IDENT: PARSER_EXPECTED_IDENT,
    ErrorKind.UNEXPECTED_TOKEN: PARSER_UNEXPECTED_TOKEN,
    ErrorKind.CONDITION_MUST_BE_BOOL: PARSER_CONDITION_MUST_BE_BOOL,
    ErrorKind.UNKNOWN_TYPE: PARSER_UNKNOWN_TYPE,
    ErrorKind.EXPECTED_BLOCK: PARSER_EXPECTED_BLOCK,
    ErrorKind.RETURN_VALUE_REQUIRED: CODEGEN_RETURN_VALUE_REQUIRED,
    ErrorKind.DUPLICATE_FUNCTION: CODEGEN_DUPLICATE_FUNCTION,
}


def spec_for(kind: ErrorKind) -> DiagnosticSpec:
    return SPEC_BY_KIND[kind]
