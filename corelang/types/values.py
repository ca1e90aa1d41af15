"""Runtime values that are not plain Python objects.

Numbers, text and booleans evaluate to `int`/`float`/`Fraction`, `str` and `bool`.
Quoted data is returned as-is. The wrappers here cover procedures and the
unit result of side-effecting natives.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Callable

from corelang import LispValue
from corelang.types.symbol import Symbol

if TYPE_CHECKING:
    from corelang.types.environment import Environment
    from corelang.types.expressions import Expression


class UnitType:
    """Result of a native call made only for its side effect."""

    def __repr__(self): return "#<unit>"

    def __eq__(self, other):
        return isinstance(other, UnitType)

    def __hash__(self):
        return hash(UnitType)


Unit = UnitType()


class UnassignedType:
    """Placeholder held by a letrec frame until its binding is evaluated."""

    def __repr__(self): return "#<unassigned>"


Unassigned = UnassignedType()


class Closure:
    """A first-class single-parameter procedure with its defining environment."""

    __slots__ = ("param", "body", "env")

    def __init__(self, param: Symbol, body: Expression, env: Environment):
        self.param: Symbol = param
        self.body: Expression = body
        # Shared reference to the chain at creation time, never a copy
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<closure (")
            buffer.write(str(self.param))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def bind(self, arg: LispValue) -> Environment:
        """Return a new frame extending the captured environment with `param` bound."""
        frame = self.env.extend()
        frame.define(self.param, arg)
        return frame


class NativeFunction:
    """A host procedure taking exactly one value."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[LispValue], LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, arg: LispValue) -> LispValue:
        return self.fn(arg)

    def __repr__(self) -> str:
        return f"<native {self.name}>"


def is_procedure(value: LispValue) -> bool:
    return isinstance(value, (Closure, NativeFunction))
