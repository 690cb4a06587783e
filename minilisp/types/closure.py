"""Closure representation and argument binding for minilisp."""

from __future__ import annotations

from io import StringIO
from typing import Sequence

from minilisp import SExpression, LispValue
from minilisp.errors import WrongNumArgs
from minilisp.types.environment import Environment
from minilisp.types.symbol import Symbol


class Closure:
    """A first-class procedure: parameters, body forms and the defining env."""

    __slots__ = ("parameters", "body", "env")

    def __init__(
        self, parameters: Sequence[Symbol], body: Sequence[SExpression], env: Environment
    ):
        object.__setattr__(self, "parameters", tuple(parameters))
        object.__setattr__(self, "body", tuple(body))
        # Captured by reference: later define/set! in env are visible here
        object.__setattr__(self, "env", env)

    def __setattr__(self, name, value):
        raise AttributeError(f"Closure is immutable; cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Closure is immutable; cannot delete {name!r}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Closure (")
            buffer.write(" ".join(str(p) for p in self.parameters))
            buffer.write(")")
            for form in self.body:
                buffer.write(" ")
                buffer.write(str(form))
            buffer.write(">")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: Sequence[LispValue]) -> Environment:
        """
        Bind ``args`` positionally to the parameters in a fresh child of the
        captured environment and return it.

        Raises WrongNumArgs unless exactly one argument is supplied per parameter.
        """
        if len(args) != len(self.parameters):
            raise WrongNumArgs(len(args), len(self.parameters))
        new_env = Environment(outer=self.env)
        for param, arg in zip(self.parameters, args):
            new_env.define(param, arg)
        return new_env
