from __future__ import annotations

from typing import Callable, Sequence

from minilisp import LispValue

NativeFn = Callable[[Sequence[LispValue]], LispValue]


class Procedure:
    """A procedure implemented in Python.

    ``fn`` takes the already-evaluated argument list and returns a value; it
    raises a LispRuntimeError for bad arity or argument kinds. Procedures hold
    no environment and compare by identity only.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: Sequence[LispValue]) -> LispValue:
        return self.fn(args)

    def __str__(self) -> str:
        return f"<Procedure {self.name}>"

    def __repr__(self) -> str:
        return str(self)
