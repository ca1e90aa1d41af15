from corelang import EvaluatorFn, LispValue
from corelang.types.environment import Environment
from corelang.types.expressions import If


def if_form(
    node: If,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    cond = evaluate_fn(node.cond, env)
    # Only the boolean false is falsey; 0, "" and '() are all true
    if cond is not False:
        return evaluate_fn(node.then, env, is_tail_call)
    return evaluate_fn(node.orelse, env, is_tail_call)
