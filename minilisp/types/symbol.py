"""
Symbols are names compared by their text. Case matters: `Foo` and `foo` are
different symbols.

The reader never produces a Symbol spelled `nil`; that text means the empty
list (see `values.make_symbol`). `t` is an ordinary symbol that predicates
return for true.
"""

from __future__ import annotations

import sys


class Symbol:
    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = sys.intern(name)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.name is other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"

    def __str__(self) -> str:
        return self.name


T = Symbol("t")
