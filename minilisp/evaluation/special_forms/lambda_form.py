import logging

from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import MismatchType, TooFewArguments
from minilisp.types.closure import Closure
from minilisp.types.environment import Environment
from minilisp.types.kinds import ObjectKind
from minilisp.types.nil import Nil
from minilisp.types.pair import Pair, list_elements
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def lambda_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    # (lambda (params...) body...) allows zero or more body forms.
    # The body is stored unevaluated; calling a closure with no body yields nil.
    # A dotted parameter list binds its proper prefix only: (x . y) is (x).
    if not tail:
        raise TooFewArguments(0, 1)

    params, *body = tail
    if params is not Nil and not isinstance(params, Pair):
        raise MismatchType(params, ObjectKind.List)

    parameters: list[Symbol] = []
    for param in list_elements(params):
        if not isinstance(param, Symbol):
            raise MismatchType(param, ObjectKind.Symbol)
        parameters.append(param)

    closure = Closure(parameters, body, env)
    logger.debug("Closure created: %s", closure)
    return closure
