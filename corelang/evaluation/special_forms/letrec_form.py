from corelang import EvaluatorFn, LispValue
from corelang.errors import InvalidSyntax
from corelang.types.environment import Environment
from corelang.types.expressions import LetRec
from corelang.types.values import Unassigned, is_procedure


def letrec_form(
    node: LetRec,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """
    (letrec ((name binding)) body)

    The binding is evaluated in a fresh frame that already holds `name`, so a
    lambda created there captures the frame it will be stored in. The placeholder
    is overwritten before the body runs.
    """
    frame = env.extend()
    frame.define(node.name, Unassigned)
    value = evaluate_fn(node.binding, frame)
    if not is_procedure(value):
        raise InvalidSyntax(f"letrec binding for {node.name} must be a procedure, got {value!r}")
    frame.define(node.name, value)
    return evaluate_fn(node.body, frame, is_tail_call)
