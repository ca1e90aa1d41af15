from corelang.types.environment import Environment
from corelang.types.values import Closure


class TailCall:
    """Pending application of `fn`, returned from tail position to the trampoline."""

    __slots__ = ("fn", "env")

    def __init__(self, fn: Closure, env: Environment):
        self.fn = fn
        self.env = env
