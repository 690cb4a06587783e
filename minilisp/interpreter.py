from __future__ import annotations
from typing import Callable, Iterator

from minilisp import SExpression, LispValue
from minilisp.builtins import new_global_environment
from minilisp.reader.parser import read_all
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil


class Interpreter:
    """
    One interpreter session: reads and evaluates minilisp code against a
    global Environment that persists across calls.
    """

    def __init__(
        self,
        eval_fn: Callable[[SExpression, Environment], LispValue] | None = None,
    ):
        if eval_fn is None:
            from minilisp.evaluation.evaluator import evaluate
            eval_fn = evaluate
        self.eval_fn = eval_fn
        self.env: Environment = new_global_environment()

    def eval_forms(self, code: str) -> Iterator[LispValue]:
        """Evaluate each datum in `code` in turn, yielding each result."""
        for expr in read_all(code):
            yield self.eval_fn(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every datum in `code`; return the last result (Nil if none)."""
        result: LispValue = Nil
        for result in self.eval_forms(code):
            pass
        return result
