from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import MismatchType
from minilisp.evaluation.arity import check_num_args
from minilisp.types.environment import Environment
from minilisp.types.kinds import ObjectKind
from minilisp.types.symbol import Symbol


def set_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    check_num_args(tail, 2)
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise MismatchType(var_sym, ObjectKind.Symbol)
    value = evaluate_fn(val_expr, env)
    # Raises UnboundVariable when no enclosing scope binds var_sym
    return env.set(var_sym, value)
