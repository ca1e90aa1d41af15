"""Built-in procedures for the corelang root environment.

There is exactly one: `print`, which writes the external representation of
its argument to an injected output channel and returns Unit.
"""
from __future__ import annotations

import sys
from typing import TextIO

from corelang import LispValue
from corelang.printer import to_str
from corelang.types.environment import Environment
from corelang.types.symbol import Symbol
from corelang.types.values import NativeFunction, Unit


def make_print(output: TextIO | None = None) -> NativeFunction:
    """Build a `print` native bound to `output` (sys.stdout at call time when None)."""

    def print_builtin(arg: LispValue) -> LispValue:
        stream = output if output is not None else sys.stdout
        stream.write(to_str(arg))
        stream.write("\n")
        return Unit

    return NativeFunction("print", print_builtin)


def register(env: Environment, output: TextIO | None = None) -> None:
    env.define(Symbol("print"), make_print(output))
