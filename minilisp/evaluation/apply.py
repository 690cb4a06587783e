"""Application engine for minilisp.

Both kinds of procedure go through `apply`, so the evaluator never needs to know
whether a callee was written in Python or in Lisp:
- Procedure: called directly with the evaluated arguments; it checks its own
  arity and argument kinds.
- Closure: arguments are bound positionally in a fresh child of the captured
  environment and the body forms are evaluated in order.
"""

import logging
from typing import Sequence

from minilisp import LispValue, EvaluatorFn
from minilisp.errors import MismatchType
from minilisp.types.closure import Closure
from minilisp.types.kinds import ObjectKind
from minilisp.types.nil import Nil
from minilisp.types.procedure import Procedure

logger = logging.getLogger(__name__)


def apply_closure(
    fn: Closure, args: Sequence[LispValue], evaluate_fn: EvaluatorFn
) -> LispValue:
    """Apply a Closure to already-evaluated arguments.

    Raises WrongNumArgs when the argument count differs from the parameter
    count. An empty body evaluates to Nil; otherwise the value of the last
    body form is returned.
    """
    new_env = fn.extend_env(args)
    logger.debug("Applying %s to %s", fn, list(args))
    result: LispValue = Nil
    for form in fn.body:
        result = evaluate_fn(form, new_env)
    return result


def apply(
    head: LispValue, args: Sequence[LispValue], evaluate_fn: EvaluatorFn
) -> LispValue:
    """Apply either a Closure or a native Procedure.

    Anything else raises MismatchType(head, Function).
    """
    if isinstance(head, Procedure):
        return head(args)
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    raise MismatchType(head, ObjectKind.Function)
