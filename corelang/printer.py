"""External representation of runtime values, as written by `print`."""

from __future__ import annotations

from corelang import LispValue
from corelang.types.symbol import Symbol


def _quote_string(s: str) -> str:
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"') + '"'


def to_str(x: LispValue, nested: bool = False) -> str:
    """Convert a value to its printable form (#t/#f for booleans, (a b c) for lists).

    A top-level string prints as its raw text; inside a list it is double-quoted
    so it stays distinct from a symbol of the same name.
    """
    if x is True:
        return "#t"
    if x is False:
        return "#f"
    if isinstance(x, Symbol):
        return x.id
    if isinstance(x, str):
        return _quote_string(x) if nested else x
    if isinstance(x, (list, tuple)):
        return "(" + " ".join(to_str(e, nested=True) for e in x) + ")"
    return str(x)
