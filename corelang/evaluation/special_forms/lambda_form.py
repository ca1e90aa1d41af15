from corelang import EvaluatorFn, LispValue
from corelang.types.environment import Environment
from corelang.types.expressions import Lambda
from corelang.types.values import Closure


def lambda_form(
    node: Lambda,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    # Capture the defining chain, not the caller's
    return Closure(node.param, node.body, env)
