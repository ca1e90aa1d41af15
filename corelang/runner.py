"""Top-level composition: read, desugar, build a root environment, evaluate."""

from __future__ import annotations

import logging
from typing import TextIO

from corelang import LispValue, RawForm
from corelang.builtin.env_builtin import register
from corelang.errors import CoreRecursionError
from corelang.evaluation.desugar import NameAllocator, desugar
from corelang.evaluation.evaluator import evaluate
from corelang.reader.forms import read_form
from corelang.types.environment import Environment
from corelang.types.expressions import EXPRESSION_TYPES, Expression

logger = logging.getLogger(__name__)


class Runner:
    """
    Runs whole programs. Each call to `run` gets a fresh root environment and
    a fresh name allocator, so separate runs never share bindings or generated
    names.
    """

    def __init__(self, output: TextIO | None = None, loop_prefix: str = "loop"):
        self.output = output
        self.loop_prefix = loop_prefix

    def root_environment(self) -> Environment:
        env = Environment.create_root()
        register(env, self.output)
        return env

    def run(self, program: Expression | RawForm) -> LispValue:
        """Evaluate `program`, which may be an Expression or raw nested form data."""
        try:
            expr = program if isinstance(program, EXPRESSION_TYPES) else read_form(program)
            desugared = desugar(expr, NameAllocator(prefix=self.loop_prefix))
            logger.debug("running %r", desugared)
            result = evaluate(desugared, self.root_environment())
        except RecursionError as e:
            raise CoreRecursionError("Maximum recursion depth exceeded") from e
        logger.debug("run finished with %r", result)
        return result


def run(program: Expression | RawForm, output: TextIO | None = None) -> LispValue:
    return Runner(output).run(program)
