from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import MismatchType
from minilisp.evaluation.arity import check_num_args
from minilisp.types.environment import Environment
from minilisp.types.kinds import ObjectKind
from minilisp.types.symbol import Symbol


def define_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """
    (define name value)
    Binds in the current scope only; an existing local binding is replaced.
    Returns the value.
    """
    check_num_args(tail, 2)

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MismatchType(name, ObjectKind.Symbol)
    value = evaluate_fn(val_expr, env)
    return env.define(name, value)
