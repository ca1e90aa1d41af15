"""Core evaluator and trampoline for the corelang interpreter.

`evaluate` is the entry point; `evaluate0` performs one step of evaluation and
may hand back a TailCall when an application sits in tail position. The
trampoline in `corelang.evaluation.apply` resumes those until a value results.
"""

from __future__ import annotations

from corelang import LispValue
from corelang.errors import InvalidSyntax, UnboundIdentifier
from corelang.evaluation.apply import run_tail_calls
from corelang.evaluation.special_forms import SPECIAL_FORMS
from corelang.types.environment import Environment
from corelang.types.expressions import LITERAL_TYPES, Expression, Identifier
from corelang.types.tail_call import TailCall
from corelang.types.values import Unassigned


def evaluate(expr: Expression, env: Environment) -> LispValue:
    """
    Trampoline evaluator: tail-call aware evaluation.
    """
    return run_tail_calls(evaluate0(expr, env, True), evaluate0)


def evaluate0(
    expr: Expression,
    env: Environment,
    is_tail_call: bool = False,
) -> LispValue | TailCall:
    """
    Core evaluator: single-step evaluation with tail-call awareness.
    Returns either a value or, only when `is_tail_call` is set, a TailCall.
    """
    if isinstance(expr, LITERAL_TYPES):
        return expr.value

    if isinstance(expr, Identifier):
        value = env.lookup(expr.name)
        if value is Unassigned:
            raise UnboundIdentifier(
                expr.name, f"Identifier {expr.name} used before its letrec binding was initialised"
            )
        return value

    handler = SPECIAL_FORMS.get(type(expr))
    if handler is None:
        # Also catches For nodes that skipped desugaring
        raise InvalidSyntax(f"invalid syntax: {expr!r}")
    return handler(expr, env, evaluate0, is_tail_call)
