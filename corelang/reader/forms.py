"""Boundary conversion from raw nested data into the Expression tree.

Input arrives already structured: numbers, booleans, `str` (string literals),
`Symbol` (identifiers) and lists (forms). This is the only place that inspects
raw shapes; everything downstream matches on Expression node types.

Recognised forms::

    (define <symbol> <expr>)
    (letrec ((<symbol> <lambda-expr>)) <body-expr>)
    (quote <datum>)
    (<op> <expr> <expr>)            ; op in + - * / > < =
    (if <expr> <expr> <expr>)
    (begin <expr> ...)              ; one or more
    (lambda (<symbol>) <body-expr>)
    (for (<symbol> <start>) <cond> (<symbol> <update>) <body>)
    (<callee-expr> <arg-expr>)
"""

from __future__ import annotations

from fractions import Fraction

from corelang import RawForm
from corelang.errors import InvalidSyntax
from corelang.types.symbol import Symbol
from corelang.types.expressions import (
    BINARY_OPERATORS,
    Apply,
    Begin,
    BinaryOp,
    BoolLiteral,
    Define,
    Expression,
    For,
    Identifier,
    If,
    Lambda,
    LetRec,
    NumberLiteral,
    Quote,
    StringLiteral,
)

TRUE = Symbol("#t")
FALSE = Symbol("#f")


def _expect_symbol(value: RawForm, what: str) -> Symbol:
    if not isinstance(value, Symbol):
        raise InvalidSyntax(f"{what} must be a symbol, got {value!r}")
    return value


def _expect_arity(form: list, n: int, usage: str) -> None:
    if len(form) != n:
        raise InvalidSyntax(f"invalid syntax: expected {usage}")


def _read_define(form: list) -> Expression:
    _expect_arity(form, 3, "(define <symbol> <expr>)")
    return Define(_expect_symbol(form[1], "define name"), read_form(form[2]))


def _read_letrec(form: list) -> Expression:
    _expect_arity(form, 3, "(letrec ((<symbol> <lambda-expr>)) <body>)")
    bindings = form[1]
    if not isinstance(bindings, list) or len(bindings) != 1:
        raise InvalidSyntax("letrec requires exactly one binding")
    binding = bindings[0]
    if not isinstance(binding, list) or len(binding) != 2:
        raise InvalidSyntax("letrec binding must be (<symbol> <expr>)")
    name = _expect_symbol(binding[0], "letrec name")
    return LetRec(name, read_form(binding[1]), read_form(form[2]))


def _read_quote(form: list) -> Expression:
    _expect_arity(form, 2, "(quote <datum>)")
    return Quote(form[1])


def _read_binary_op(form: list) -> Expression:
    op = form[0].id
    _expect_arity(form, 3, f"({op} <expr> <expr>)")
    return BinaryOp(op, read_form(form[1]), read_form(form[2]))


def _read_if(form: list) -> Expression:
    _expect_arity(form, 4, "(if <cond> <then> <else>)")
    return If(read_form(form[1]), read_form(form[2]), read_form(form[3]))


def _read_begin(form: list) -> Expression:
    if len(form) < 2:
        raise InvalidSyntax("begin requires at least one expression")
    return Begin(tuple(read_form(e) for e in form[1:]))


def _read_lambda(form: list) -> Expression:
    _expect_arity(form, 3, "(lambda (<symbol>) <body>)")
    params = form[1]
    if not isinstance(params, list) or len(params) != 1:
        raise InvalidSyntax("lambda takes exactly one parameter")
    return Lambda(_expect_symbol(params[0], "lambda parameter"), read_form(form[2]))


def _read_clause(clause: RawForm, what: str) -> tuple[Symbol, Expression]:
    if not isinstance(clause, list) or len(clause) != 2:
        raise InvalidSyntax(f"for {what} clause must be (<symbol> <expr>)")
    return _expect_symbol(clause[0], f"for {what} variable"), read_form(clause[1])


def _read_for(form: list) -> Expression:
    _expect_arity(form, 5, "(for (<symbol> <start>) <cond> (<symbol> <update>) <body>)")
    loop_var, start = _read_clause(form[1], "init")
    update_var, update = _read_clause(form[3], "update")
    return For(loop_var, start, read_form(form[2]), update_var, update, read_form(form[4]))


FORM_READERS = {
    Symbol("define"): _read_define,
    Symbol("letrec"): _read_letrec,
    Symbol("quote"): _read_quote,
    Symbol("if"): _read_if,
    Symbol("begin"): _read_begin,
    Symbol("lambda"): _read_lambda,
    Symbol("for"): _read_for,
}
FORM_READERS.update({Symbol(op): _read_binary_op for op in BINARY_OPERATORS})


def read_form(data: RawForm) -> Expression:
    """Convert raw nested data into an Expression, validating every shape."""
    # bool is an int subclass, so test it first
    if isinstance(data, bool):
        return BoolLiteral(data)
    if isinstance(data, (int, float, Fraction)):
        return NumberLiteral(data)
    if isinstance(data, str):
        return StringLiteral(data)
    if isinstance(data, Symbol):
        if data == TRUE:
            return BoolLiteral(True)
        if data == FALSE:
            return BoolLiteral(False)
        return Identifier(data)
    if isinstance(data, list):
        if not data:
            raise InvalidSyntax("invalid syntax: empty form")
        head = data[0]
        if isinstance(head, Symbol) and head in FORM_READERS:
            return FORM_READERS[head](data)
        if len(data) != 2:
            raise InvalidSyntax(
                f"invalid syntax: application takes exactly one argument, got {len(data) - 1}"
            )
        return Apply(read_form(head), read_form(data[1]))
    raise InvalidSyntax(f"invalid syntax: {data!r}")
