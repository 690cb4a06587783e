from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.evaluation.arity import check_num_args_range
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil


def if_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(if test then [else]) -- Nil is the only false value."""
    check_num_args_range(tail, 2, 3)

    cond = evaluate_fn(tail[0], env)
    if cond is not Nil:
        return evaluate_fn(tail[1], env)
    if len(tail) > 2:
        return evaluate_fn(tail[2], env)
    return Nil
