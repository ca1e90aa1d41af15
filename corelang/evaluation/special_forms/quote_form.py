from corelang import EvaluatorFn, LispValue
from corelang.types.environment import Environment
from corelang.types.expressions import Quote


def quote_form(node: Quote, env: Environment, evaluate_fn: EvaluatorFn, _: bool) -> LispValue:
    return node.datum
