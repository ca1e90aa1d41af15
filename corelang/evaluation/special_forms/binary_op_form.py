from corelang import EvaluatorFn, LispValue
from corelang.evaluation.operators import apply_operator
from corelang.types.environment import Environment
from corelang.types.expressions import BinaryOp


def binary_op_form(
    node: BinaryOp,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    # Left operand strictly before right
    lhs = evaluate_fn(node.lhs, env)
    rhs = evaluate_fn(node.rhs, env)
    return apply_operator(node.op, lhs, rhs)
