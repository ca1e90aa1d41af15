"""Expression tree for corelang.

Every node is a frozen dataclass, so trees are immutable values: two trees built
from the same shape compare equal. `For` is surface sugar only; the desugarer
removes it before evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Union

from corelang import RawForm
from corelang.types.symbol import Symbol

Number = Union[int, float, Fraction]

BINARY_OPERATORS = ("+", "-", "*", "/", ">", "<", "=")


@dataclass(frozen=True)
class NumberLiteral:
    value: Number


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class BoolLiteral:
    value: bool


@dataclass(frozen=True)
class Identifier:
    name: Symbol


@dataclass(frozen=True)
class Define:
    name: Symbol
    value: Expression


@dataclass(frozen=True)
class LetRec:
    name: Symbol
    binding: Expression
    body: Expression


@dataclass(frozen=True)
class Quote:
    # Raw nested data, never converted and never evaluated
    datum: RawForm


@dataclass(frozen=True)
class BinaryOp:
    op: str
    lhs: Expression
    rhs: Expression


@dataclass(frozen=True)
class If:
    cond: Expression
    then: Expression
    orelse: Expression


@dataclass(frozen=True)
class Begin:
    body: tuple[Expression, ...]


@dataclass(frozen=True)
class Lambda:
    param: Symbol
    body: Expression


@dataclass(frozen=True)
class Apply:
    callee: Expression
    arg: Expression


@dataclass(frozen=True)
class For:
    loop_var: Symbol
    start: Expression
    cond: Expression
    update_var: Symbol
    update: Expression
    body: Expression


Literal = Union[NumberLiteral, StringLiteral, BoolLiteral]

Expression = Union[
    NumberLiteral,
    StringLiteral,
    BoolLiteral,
    Identifier,
    Define,
    LetRec,
    Quote,
    BinaryOp,
    If,
    Begin,
    Lambda,
    Apply,
    For,
]

LITERAL_TYPES = (NumberLiteral, StringLiteral, BoolLiteral)
EXPRESSION_TYPES = LITERAL_TYPES + (
    Identifier,
    Define,
    LetRec,
    Quote,
    BinaryOp,
    If,
    Begin,
    Lambda,
    Apply,
    For,
)
