"""Binary arithmetic and comparison operators.

Numbers are Python `int`, `float` and `Fraction`; `bool` is never numeric.
Integer division is exact: an even quotient stays an `int`, otherwise the
result is a `Fraction`. Division by zero raises CoreArithmeticError.
"""

from __future__ import annotations

import operator
from fractions import Fraction
from typing import Callable

from corelang import LispValue
from corelang.errors import CoreArithmeticError, InvalidSyntax


def is_number(x: LispValue) -> bool:
    return isinstance(x, (int, float, Fraction)) and not isinstance(x, bool)


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Value equality: numbers compare numerically, everything else by type and structure."""
    if a is b:
        return True
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if type(a) != type(b):
        return False
    return a == b


def divide(a, b):
    if b == 0:
        raise CoreArithmeticError("Division by zero")
    if isinstance(a, int) and isinstance(b, int):
        q = Fraction(a, b)
        return q.numerator if q.denominator == 1 else q
    return a / b


NUMERIC_OPERATORS: dict[str, Callable[[LispValue, LispValue], LispValue]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": divide,
    ">": operator.gt,
    "<": operator.lt,
}


def apply_operator(op: str, lhs: LispValue, rhs: LispValue) -> LispValue:
    """Apply binary operator `op` to two already-evaluated operands."""
    if op == "=":
        return is_equal(lhs, rhs)
    fn = NUMERIC_OPERATORS.get(op)
    if fn is None:
        raise InvalidSyntax(f"invalid syntax: unknown operator {op!r}")
    if not (is_number(lhs) and is_number(rhs)):
        raise CoreArithmeticError(f"Operands to {op} must be numbers, got {lhs!r} and {rhs!r}")
    try:
        return fn(lhs, rhs)
    except OverflowError as e:
        raise CoreArithmeticError(f"Numeric overflow in {op}") from e
