"""Expression grammar: layered precedence climbing.

Binding strength, lowest first:

    ||  &&  == !=  < <= > >=  + -  * / %  prefix ! -  call  primary

Every binary layer is left associative.
"""

from typing import Final

from tslower.ast import (
    LOG_PATH,
    Binary,
    BinaryOp,
    BoolLit,
    Call,
    CalleePath,
    Expr,
    Grouping,
    Identifier,
    IntLit,
    Literal,
    StrLit,
    Unary,
    UnaryOp,
)
from tslower.diagnostics import ErrorKind
from tslower.lexer import TokenKind
from tslower.parser.parser import Parser

BINARY_LAYERS: Final[tuple[dict[TokenKind, BinaryOp], ...]] = (
    {TokenKind.PIPE_PIPE: BinaryOp.OR},
    {TokenKind.AMP_AMP: BinaryOp.AND},
    {
        TokenKind.EQUAL_EQUAL: BinaryOp.EQ,
        TokenKind.NOT_EQUAL: BinaryOp.NE,
    },
    {
        TokenKind.LESS_THAN: BinaryOp.LT,
        TokenKind.LESS_THAN_OR_EQUAL: BinaryOp.LE,
        TokenKind.GREATER_THAN: BinaryOp.GT,
        TokenKind.GREATER_THAN_OR_EQUAL: BinaryOp.GE,
    },
    {
        TokenKind.PLUS: BinaryOp.ADD,
        TokenKind.MINUS: BinaryOp.SUB,
    },
    {
        TokenKind.STAR: BinaryOp.MUL,
        TokenKind.SLASH: BinaryOp.DIV,
        TokenKind.PERCENT: BinaryOp.MOD,
    },
)

UNARY_OPERATORS: Final[dict[TokenKind, UnaryOp]] = {
    TokenKind.BANG: UnaryOp.NOT,
    TokenKind.MINUS: UnaryOp.NEG,
}

EXPRESSION_START: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.NUMBER,
        TokenKind.STRING,
        TokenKind.TRUE,
        TokenKind.FALSE,
        TokenKind.IDENTIFIER,
        TokenKind.LPAREN,
        *UNARY_OPERATORS,
    }
)


def parse_expression(parser: Parser) -> Expr:
    return _parse_binary(parser, 0)


def _parse_binary(parser: Parser, level: int) -> Expr:
    if level == len(BINARY_LAYERS):
        return parse_unary(parser)

    operators = BINARY_LAYERS[level]
    left = _parse_binary(parser, level + 1)
    while parser.current in operators:
        op = operators[parser.bump().kind]
        right = _parse_binary(parser, level + 1)
        left = Binary(op, left, right, span=parser.span_from(left.span))
    return left


def parse_unary(parser: Parser) -> Expr:
    op = UNARY_OPERATORS.get(parser.current)
    if op is None:
        return parse_call(parser)

    start = parser.bump().span
    operand = parse_unary(parser)
    return Unary(op, operand, span=parser.span_from(start))


def parse_call(parser: Parser) -> Expr:
    start = parser.current_span
    callee = _parse_primary_or_path(parser)

    while parser.at(TokenKind.LPAREN):
        if isinstance(callee, Identifier):
            callee = CalleePath((callee.name,), span=callee.span)
        args = parse_arguments(parser)
        callee = Call(callee, args, span=parser.span_from(start))

    if isinstance(callee, CalleePath):
        # `console.log` is only meaningful as a call target.
        parser.error_at(ErrorKind.UNKNOWN_STRUCTURE, callee.span, f"`{callee.dotted}` must be called")
    return callee


def parse_arguments(parser: Parser) -> tuple[Expr, ...]:
    parser.expect(TokenKind.LPAREN, ErrorKind.UNEXPECTED_TOKEN, "Expected `(`.")
    args: list[Expr] = []
    if not parser.at(TokenKind.RPAREN):
        args.append(parse_expression(parser))
        while parser.eat(TokenKind.COMMA):
            args.append(parse_expression(parser))
    parser.expect(TokenKind.RPAREN, ErrorKind.MISSING_RPAREN)
    return tuple(args)


def parse_primary(parser: Parser) -> Expr:
    token = parser.current_token
    match token.kind:
        case kind if kind.is_literal:
            return parse_literal(parser)
        case TokenKind.IDENTIFIER:
            parser.bump()
            return Identifier(token.lexeme, span=token.span)
        case TokenKind.LPAREN:
            parser.bump()
            inner = parse_expression(parser)
            parser.expect(TokenKind.RPAREN, ErrorKind.MISSING_RPAREN)
            return Grouping(inner, span=parser.span_from(token.span))
        case _:
            parser.error(ErrorKind.EXPECTED_EXPR)


def parse_literal(parser: Parser) -> Literal:
    token = parser.current_token
    match token.kind:
        case TokenKind.NUMBER:
            value = IntLit(int(token.value))
        case TokenKind.STRING:
            value = StrLit(str(token.value))
        case TokenKind.TRUE:
            value = BoolLit(True)
        case TokenKind.FALSE:
            value = BoolLit(False)
        case _:
            parser.error(ErrorKind.EXPECTED_LITERAL)
    parser.bump()
    return Literal(value, span=token.span)


def at_path(parser: Parser) -> bool:
    return parser.at(TokenKind.IDENTIFIER) and parser.nth(1) == TokenKind.DOT


def parse_path(parser: Parser) -> CalleePath:
    """Parse a dotted name; only the reserved logging path is part of the subset."""
    start = parser.current_span
    segments = [parser.bump().lexeme]
    while parser.eat(TokenKind.DOT):
        if not parser.at(TokenKind.IDENTIFIER):
            parser.error(ErrorKind.EXPECTED_IDENT)
        segments.append(parser.bump().lexeme)

    path = CalleePath(tuple(segments), span=parser.span_from(start))
    if path.segments != LOG_PATH:
        parser.error_at(ErrorKind.UNKNOWN_STRUCTURE, path.span, f"Unsupported member access `{path.dotted}`")
    return path


def _parse_primary_or_path(parser: Parser) -> Expr | CalleePath:
    if at_path(parser):
        return parse_path(parser)
    return parse_primary(parser)
