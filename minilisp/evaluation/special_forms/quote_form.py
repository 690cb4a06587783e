from minilisp import SExpression, LispValue, EvaluatorFn
from minilisp.evaluation.arity import check_num_args
from minilisp.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    check_num_args(tail, 1)
    return tail[0]
