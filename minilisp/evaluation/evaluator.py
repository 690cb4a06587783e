"""Core evaluator for the minilisp interpreter.

Special forms are recognised by the symbol at the head of a list before any
variable lookup happens, so a user binding named `if` never changes how
`(if ...)` is evaluated. Every other list is a procedure call: the head and
then each argument are evaluated left to right and handed to `apply`.
"""

from __future__ import annotations

import logging

from minilisp import SExpression, LispValue
from minilisp.types.environment import Environment
from minilisp.types.pair import Pair, list_elements
from minilisp.types.symbol import Symbol
from minilisp.evaluation.apply import apply
from minilisp.evaluation.special_forms import SPECIAL_FORMS

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Evaluate `expr` in `env` and return its value.

    Raises a LispRuntimeError subclass on the first error; nothing is caught here.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)

        case Pair(first=Symbol() as head, rest=rest) if head in SPECIAL_FORMS:
            logger.debug("Special form %s", head)
            return SPECIAL_FORMS[head](list(list_elements(rest)), env, evaluate)

        case Pair(first=head, rest=rest):
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in list_elements(rest)]
            return apply(fn, args, evaluate)

    # --- Nil, integers, procedures and closures evaluate to themselves ---
    return expr
