# Every minilisp value, code included, is one of Nil, int, Symbol, Pair,
# Procedure or Closure (see minilisp.types). The aliases below are all `Any`;
# SExpression marks unevaluated forms, LispValue marks results.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator handed to special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
