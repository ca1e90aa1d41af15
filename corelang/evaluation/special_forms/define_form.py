from corelang import EvaluatorFn, LispValue
from corelang.types.environment import Environment
from corelang.types.expressions import Define


def define_form(
    node: Define,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    """
    (define name value)
    Binds in the innermost frame only and yields the bound value.
    """
    value = evaluate_fn(node.value, env)
    env.define(node.name, value)
    return value
