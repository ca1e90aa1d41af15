"""Application engine for corelang.

Centralizes procedure application and the tail-call trampoline:
- A closure applied in tail position returns a TailCall instead of recursing;
  the trampoline in `run_tail_calls` resumes it in a loop.
- A closure applied outside tail position runs its own trampoline to completion,
  so callers always receive a plain value.
- Native functions are invoked directly on the argument.
"""

from __future__ import annotations

from corelang import LispValue, EvaluatorFn
from corelang.errors import InvalidSyntax
from corelang.types.tail_call import TailCall
from corelang.types.values import Closure, NativeFunction


def run_tail_calls(result: LispValue | TailCall, evaluate_fn: EvaluatorFn) -> LispValue:
    """Resume pending TailCalls until a plain value is produced."""
    while isinstance(result, TailCall):
        result = evaluate_fn(result.fn.body, result.env, True)
    return result


def apply(
    head: LispValue,
    arg: LispValue,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue | TailCall:
    """Apply a closure or native function to one argument value.

    Raises InvalidSyntax if `head` is not a procedure.
    """
    if isinstance(head, Closure):
        frame = head.bind(arg)
        if is_tail_call:
            return TailCall(head, frame)
        return run_tail_calls(evaluate_fn(head.body, frame, True), evaluate_fn)
    if isinstance(head, NativeFunction):
        return head(arg)
    raise InvalidSyntax(f"not a procedure: {head!r}")
