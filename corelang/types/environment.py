"""Runtime environment for corelang.

An Environment is one frame of bindings from Symbols to values plus an `outer`
link to the enclosing frame. Lookups walk the chain innermost first; `define`
only ever touches the innermost frame, so inner bindings shadow outer ones
without mutating them.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from corelang import LispValue
from corelang.errors import InvalidSyntax, UnboundIdentifier
from corelang.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to runtime values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        # Back-reference only: frames are kept alive by closures and call sites
        self.outer: Environment | None = outer

    @classmethod
    def create_root(cls) -> Environment:
        return cls()

    def extend(self) -> Environment:
        """Push a new empty frame in front of this one."""
        return Environment(outer=self)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, overwriting any existing binding.

        Always succeeds for a Symbol; the reader only produces Symbol names for
        define, letrec and lambda. Any other name raises InvalidSyntax.
        """
        if not isinstance(name, Symbol):
            raise InvalidSyntax(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises UnboundIdentifier if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundIdentifier(name)
        return env.vars[name]

    def depth(self) -> int:
        n = 0
        env: Optional[Environment] = self
        while env is not None:
            n += 1
            env = env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for the parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging, innermost frame first."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
