"""Cons cells and the list helpers built on top of them."""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator

from minilisp import LispValue
from minilisp.types.nil import Nil


class Pair:
    """A cons cell. Pairs are never modified after construction."""

    __slots__ = ("first", "rest")

    def __init__(self, first: LispValue, rest: LispValue):
        object.__setattr__(self, "first", first)
        object.__setattr__(self, "rest", rest)

    def __setattr__(self, name, value):
        raise AttributeError(f"Pair is immutable; cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Pair is immutable; cannot delete {name!r}")

    def __iter__(self) -> Iterator[LispValue]:
        return iterate_list(self)

    def __eq__(self, other) -> bool:
        from minilisp.equal import equal
        return equal(self, other)

    def __hash__(self) -> int:
        # Fold along rest so long lists hash without deep recursion
        h = hash(Pair)
        cur: LispValue = self
        while isinstance(cur, Pair):
            h = hash((h, cur.first))
            cur = cur.rest
        return hash((h, cur))

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(")
            cur = self
            while True:
                buffer.write(str(cur.first))
                if isinstance(cur.rest, Pair):
                    buffer.write(" ")
                    cur = cur.rest
                elif cur.rest is Nil:
                    break
                else:
                    buffer.write(" . ")
                    buffer.write(str(cur.rest))
                    break
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


def iterate_list(value: LispValue) -> Iterator[LispValue]:
    """Yield the elements of a list.

    A dotted tail is yielded as the final element, so ``(a b . c)`` produces
    ``a``, ``b`` and ``c``. Nil yields nothing; any other atom yields itself.
    """
    while isinstance(value, Pair):
        yield value.first
        value = value.rest
    if value is not Nil:
        yield value


def list_elements(value: LispValue) -> Iterator[LispValue]:
    """Yield the ``first`` of each Pair in a chain, ignoring any dotted tail.

    This is how forms are taken apart for evaluation: ``(+ 1 . 2)`` has the
    single argument ``1``. A non-Pair value has no elements.
    """
    while isinstance(value, Pair):
        yield value.first
        value = value.rest


def list_to_pair(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a chain of Pairs from ``items`` ending in ``tail``."""
    head = tail
    for item in reversed(list(items)):
        head = Pair(item, head)
    return head
