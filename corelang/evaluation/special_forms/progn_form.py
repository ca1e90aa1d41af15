from corelang import EvaluatorFn, LispValue
from corelang.errors import InvalidSyntax
from corelang.types.environment import Environment
from corelang.types.expressions import Begin


def progn_form(
    node: Begin,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    if not node.body:
        raise InvalidSyntax("begin requires at least one expression")
    for e in node.body[:-1]:
        evaluate_fn(e, env)
    return evaluate_fn(node.body[-1], env, is_tail_call)
