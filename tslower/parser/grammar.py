"""Program, declaration and statement grammar routines."""

from collections.abc import Callable
from typing import Final

from tslower.ast import (
    Assign,
    Block,
    Call,
    Expr,
    ExprStmt,
    FunctionDecl,
    If,
    Param,
    Program,
    Return,
    Stmt,
    TypeAnn,
    VarDecl,
    While,
    is_condition_admissible,
)
from tslower.diagnostics import ErrorKind
from tslower.lexer import TokenKind
from tslower.parser.expressions import (
    EXPRESSION_START,
    at_path,
    parse_expression,
    parse_literal,
    parse_path,
)
from tslower.parser.parser import Parser
from tslower.text import Span

TYPE_NAMES: Final[dict[str, TypeAnn]] = {ann.value: ann for ann in TypeAnn}

CONTROL_FLOW_STARTS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.LBRACE,
        TokenKind.IF,
        TokenKind.WHILE,
        TokenKind.RETURN,
    }
)

# Tokens that can never begin a statement; seeing one right after `else`
# means the branch is missing.
STATEMENT_ENDERS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.EOF,
        TokenKind.RBRACE,
        TokenKind.RPAREN,
        TokenKind.SEMICOLON,
        TokenKind.ELSE,
    }
)


def parse_source_file(parser: Parser) -> Program:
    functions: list[FunctionDecl] = []
    statements: list[Stmt] = []

    while not parser.at(TokenKind.EOF):
        if parser.at(TokenKind.FUNCTION) and parser.options.allow_functions:
            functions.append(parse_function(parser))
        else:
            statements.append(parse_statement(parser))

    return Program(functions=tuple(functions), statements=tuple(statements))


# -------------------------
# Declarations
# -------------------------


def parse_function(parser: Parser) -> FunctionDecl:
    start = parser.expect(TokenKind.FUNCTION, ErrorKind.UNKNOWN_STRUCTURE).span
    name = parser.expect(TokenKind.IDENTIFIER, ErrorKind.EXPECTED_IDENT).lexeme

    parser.expect(TokenKind.LPAREN, ErrorKind.UNEXPECTED_TOKEN, "Expected `(` after function name.")
    params: list[Param] = []
    if not parser.at(TokenKind.RPAREN):
        params.append(_parse_param(parser))
        while parser.eat(TokenKind.COMMA):
            params.append(_parse_param(parser))
    parser.expect(TokenKind.RPAREN, ErrorKind.MISSING_RPAREN)

    return_type = _parse_type_annotation(parser)

    if not parser.at(TokenKind.LBRACE):
        parser.error(ErrorKind.EXPECTED_BLOCK)
    body = parse_block(parser)

    return FunctionDecl(
        name=name,
        params=tuple(params),
        return_type=return_type,
        body=body,
        span=parser.span_from(start),
    )


def _parse_param(parser: Parser) -> Param:
    token = parser.expect(TokenKind.IDENTIFIER, ErrorKind.EXPECTED_IDENT)
    param_type = _parse_type_annotation(parser)
    return Param(token.lexeme, param_type, span=parser.span_from(token.span))


def _parse_type_annotation(parser: Parser) -> TypeAnn | None:
    if not parser.eat(TokenKind.COLON):
        return None

    token = parser.current_token
    # `void` is lexed as a plain identifier; none of the type names are keywords.
    if token.kind != TokenKind.IDENTIFIER:
        parser.error(ErrorKind.UNKNOWN_TYPE)
    ann = TYPE_NAMES.get(token.lexeme)
    if ann is None:
        parser.error(ErrorKind.UNKNOWN_TYPE, f"Unknown type `{token.lexeme}`.")
    parser.bump()
    return ann


# -------------------------
# Statements
# -------------------------


def parse_statement(parser: Parser) -> Stmt:
    if not parser.options.allow_expressions:
        return _parse_literal_statement(parser)

    if parser.at_set(CONTROL_FLOW_STARTS):
        if not parser.options.allow_control_flow:
            keyword = parser.current_token.lexeme
            parser.error(ErrorKind.UNKNOWN_STRUCTURE, f"`{keyword}` is not available in this grammar revision")
        return _parse_control_flow(parser)

    match parser.current:
        case TokenKind.LET | TokenKind.CONST:
            stmt = _parse_var_decl(parser, init_parser=parse_expression)
        case TokenKind.IDENTIFIER if parser.nth(1) == TokenKind.EQUAL:
            stmt = _parse_assign(parser)
        case kind if kind in EXPRESSION_START:
            start = parser.current_span
            expr = parse_expression(parser)
            stmt = ExprStmt(expr, span=parser.span_from(start))
        case TokenKind.FUNCTION if not parser.options.allow_functions:
            parser.error(ErrorKind.UNKNOWN_STRUCTURE, "`function` is not available in this grammar revision")
        case TokenKind.FUNCTION:
            parser.error(ErrorKind.UNKNOWN_STRUCTURE, "`function` is only allowed at the top level")
        case _:
            parser.error(ErrorKind.UNKNOWN_STRUCTURE)

    _expect_semicolon(parser)
    return stmt


def _parse_control_flow(parser: Parser) -> Stmt:
    match parser.current:
        case TokenKind.LBRACE:
            return parse_block(parser)
        case TokenKind.IF:
            return _parse_if(parser)
        case TokenKind.WHILE:
            return _parse_while(parser)
        case TokenKind.RETURN:
            return _parse_return(parser)
        case _:
            parser.error(ErrorKind.UNKNOWN_STRUCTURE)


def parse_block(parser: Parser) -> Block:
    start = parser.expect(TokenKind.LBRACE, ErrorKind.EXPECTED_BLOCK).span
    statements: list[Stmt] = []
    while not parser.at(TokenKind.RBRACE):
        if parser.at(TokenKind.EOF):
            parser.error(ErrorKind.MISSING_RBRACE)
        statements.append(parse_statement(parser))
    parser.bump()
    return Block(tuple(statements), span=parser.span_from(start))


def _parse_if(parser: Parser) -> If:
    start = parser.bump().span
    condition = _parse_condition(parser)
    then_branch = parse_statement(parser)

    else_branch: Stmt | None = None
    if parser.eat(TokenKind.ELSE):
        if parser.at_set(STATEMENT_ENDERS):
            parser.error(ErrorKind.MISSING_ELSE)
        else_branch = parse_statement(parser)

    return If(condition, then_branch, else_branch, span=parser.span_from(start))


def _parse_while(parser: Parser) -> While:
    start = parser.bump().span
    condition = _parse_condition(parser)
    body = parse_statement(parser)
    return While(condition, body, span=parser.span_from(start))


def _parse_condition(parser: Parser) -> Expr:
    parser.expect(TokenKind.LPAREN, ErrorKind.UNEXPECTED_TOKEN, "Expected `(` before condition.")
    condition = parse_expression(parser)
    parser.expect(TokenKind.RPAREN, ErrorKind.MISSING_RPAREN)
    if not is_condition_admissible(condition):
        parser.error_at(ErrorKind.CONDITION_MUST_BE_BOOL, condition.span)
    return condition


def _parse_return(parser: Parser) -> Return:
    start = parser.bump().span
    value: Expr | None = None
    if not parser.at(TokenKind.SEMICOLON):
        if not parser.at_set(EXPRESSION_START):
            parser.error(ErrorKind.MISSING_SEMICOLON)
        value = parse_expression(parser)
    _expect_semicolon(parser)
    return Return(value, span=parser.span_from(start))


def _parse_var_decl(parser: Parser, init_parser: Callable[[Parser], Expr]) -> VarDecl:
    keyword = parser.bump()
    name = parser.expect(TokenKind.IDENTIFIER, ErrorKind.EXPECTED_IDENT).lexeme
    parser.expect(TokenKind.EQUAL, ErrorKind.UNEXPECTED_TOKEN, "Expected `=` and an initializer.")
    init = init_parser(parser)
    return VarDecl(
        mutable=keyword.kind == TokenKind.LET,
        name=name,
        init=init,
        span=parser.span_from(keyword.span),
    )


def _parse_assign(parser: Parser) -> Assign:
    target = parser.bump()
    parser.bump()
    value = parse_expression(parser)
    return Assign(target.lexeme, value, span=parser.span_from(target.span))


def _parse_literal_statement(parser: Parser) -> Stmt:
    """Statements of the literal-only revision: declarations and logging calls."""
    if parser.at_set(frozenset({TokenKind.LET, TokenKind.CONST})):
        stmt: Stmt = _parse_var_decl(parser, init_parser=parse_literal)
    elif at_path(parser):
        stmt = _parse_literal_log_call(parser)
    else:
        parser.error(ErrorKind.UNKNOWN_STRUCTURE)

    _expect_semicolon(parser)
    return stmt


def _parse_literal_log_call(parser: Parser) -> ExprStmt:
    start = parser.current_span
    path = parse_path(parser)
    parser.expect(TokenKind.LPAREN, ErrorKind.UNKNOWN_STRUCTURE, f"`{path.dotted}` must be called")
    arg = parse_literal(parser)
    parser.expect(TokenKind.RPAREN, ErrorKind.MISSING_RPAREN)
    call = Call(path, (arg,), span=parser.span_from(start))
    return ExprStmt(call, span=call.span)


def _expect_semicolon(parser: Parser) -> Span:
    return parser.expect(TokenKind.SEMICOLON, ErrorKind.MISSING_SEMICOLON).span
