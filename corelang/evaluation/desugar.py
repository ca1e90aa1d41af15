"""Desugaring pass: rewrite surface sugar into core expressions.

`for` is the only sugar form. It becomes a self-applying `letrec` loop::

    (for (i start) cond (i update) body)
      =>
    (letrec ((loop (lambda (i) (if cond (begin body (loop update)) 'done))))
      (loop start))

The recursive call sits in tail position of the lambda body, so the evaluator's
trampoline runs the loop in constant stack depth.
"""

from __future__ import annotations

import logging
from itertools import count
from typing import Iterable, Iterator

from corelang.errors import InvalidSyntax
from corelang.types.symbol import Symbol
from corelang.types.expressions import (
    LITERAL_TYPES,
    Apply,
    Begin,
    BinaryOp,
    Define,
    Expression,
    For,
    Identifier,
    If,
    Lambda,
    LetRec,
    Quote,
)

logger = logging.getLogger(__name__)

DONE = Symbol("done")


class NameAllocator:
    """Hands out fresh symbols that avoid every reserved name.

    Generated names contain a '%' and are also checked against the reserved
    set, so they cannot collide with identifiers written in the program.
    """

    def __init__(self, reserved: Iterable[Symbol] = (), prefix: str = "loop"):
        self.reserved: set[Symbol] = set(reserved)
        self.prefix = prefix
        self._counter = count(1)

    def gen_sym(self) -> Symbol:
        while True:
            sym = Symbol(f"{self.prefix}%{next(self._counter)}")
            if sym not in self.reserved:
                self.reserved.add(sym)
                return sym


def symbols_in(expr: Expression) -> Iterator[Symbol]:
    """Yield every binding or reference name appearing in `expr`."""
    match expr:
        case Identifier(name):
            yield name
        case Define(name, value):
            yield name
            yield from symbols_in(value)
        case LetRec(name, binding, body):
            yield name
            yield from symbols_in(binding)
            yield from symbols_in(body)
        case Lambda(param, body):
            yield param
            yield from symbols_in(body)
        case For(loop_var, start, cond, update_var, update, body):
            yield loop_var
            yield update_var
            for sub in (start, cond, update, body):
                yield from symbols_in(sub)
        case BinaryOp(_, lhs, rhs):
            yield from symbols_in(lhs)
            yield from symbols_in(rhs)
        case If(cond, then, orelse):
            for sub in (cond, then, orelse):
                yield from symbols_in(sub)
        case Begin(body):
            for sub in body:
                yield from symbols_in(sub)
        case Apply(callee, arg):
            yield from symbols_in(callee)
            yield from symbols_in(arg)


def desugar(expr: Expression, names: NameAllocator | None = None) -> Expression:
    """Return `expr` with every `for` form expanded into core constructs.

    Fresh loop names come from `names`; when omitted a new allocator is made
    for this call. Every name already used in `expr` is reserved in either case.
    """
    if names is None:
        names = NameAllocator()
    names.reserved.update(symbols_in(expr))
    return _desugar(expr, names)


def _expand_for(node: For, names: NameAllocator) -> Expression:
    if node.update_var != node.loop_var:
        raise InvalidSyntax(
            f"for update clause must assign the loop variable {node.loop_var}, got {node.update_var}"
        )
    loop = names.gen_sym()
    logger.debug("expanding for loop over %s as %s", node.loop_var, loop)
    step = Apply(Identifier(loop), _desugar(node.update, names))
    body = If(
        _desugar(node.cond, names),
        Begin((_desugar(node.body, names), step)),
        Quote(DONE),
    )
    return LetRec(
        loop,
        Lambda(node.loop_var, body),
        Apply(Identifier(loop), _desugar(node.start, names)),
    )


def _desugar(expr: Expression, names: NameAllocator) -> Expression:
    match expr:
        case For():
            return _expand_for(expr, names)
        case Define(name, value):
            return Define(name, _desugar(value, names))
        case LetRec(name, binding, body):
            return LetRec(name, _desugar(binding, names), _desugar(body, names))
        case BinaryOp(op, lhs, rhs):
            return BinaryOp(op, _desugar(lhs, names), _desugar(rhs, names))
        case If(cond, then, orelse):
            return If(_desugar(cond, names), _desugar(then, names), _desugar(orelse, names))
        case Begin(body):
            return Begin(tuple(_desugar(e, names) for e in body))
        case Lambda(param, body):
            return Lambda(param, _desugar(body, names))
        case Apply(callee, arg):
            return Apply(_desugar(callee, names), _desugar(arg, names))
        case Quote() | Identifier():
            return expr

    if isinstance(expr, LITERAL_TYPES):
        return expr
    raise InvalidSyntax(f"invalid syntax: {expr!r}")
