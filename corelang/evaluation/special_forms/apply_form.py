from corelang import EvaluatorFn, LispValue
from corelang.evaluation.apply import apply
from corelang.types.environment import Environment
from corelang.types.expressions import Apply


def apply_form(
    node: Apply,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """(callee arg): callee is evaluated before the argument."""
    head = evaluate_fn(node.callee, env)
    arg = evaluate_fn(node.arg, env)
    return apply(head, arg, evaluate_fn, is_tail_call)
