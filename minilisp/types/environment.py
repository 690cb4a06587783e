"""Runtime environment for minilisp.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. A closure call creates a child scope whose
`outer` is the closure's captured environment.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Mapping, Optional

from minilisp import LispValue
from minilisp.errors import MismatchType, UnboundVariable
from minilisp.types.kinds import ObjectKind
from minilisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> LispValue:
        """Bind `name` to `value` in this scope only, replacing any local binding.

        Raises MismatchType if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise MismatchType(name, ObjectKind.Symbol)
        self.vars[name] = value
        return value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> LispValue:
        """Update an existing binding for `name` in the environment chain.

        Raises UnboundVariable if the symbol is not found.
        """
        env = self.find(name)
        if env is None:
            raise UnboundVariable(name)
        env.vars[name] = value
        return value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost scope first.

        Raises UnboundVariable if not found.
        """
        env = self.find(name)
        if env is None:
            raise UnboundVariable(name)
        return env.vars[name]

    def update(self, mapping: Mapping[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def chain(self) -> Iterator[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            frames = []
            for env in self.chain():
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    frames.append(env_buf.getvalue())
            buffer.write(" -> ".join(frames))
            buffer.write(">")
            return buffer.getvalue()
