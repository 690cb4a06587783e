"""Structural equality for minilisp values."""

from __future__ import annotations

from minilisp import LispValue
from minilisp.types.nil import NilType
from minilisp.types.pair import Pair
from minilisp.types.symbol import Symbol
from minilisp.types.values import is_integer


def equal(a: LispValue, b: LispValue) -> bool:
    """Compare two values the way the `equal` builtin does.

    Integers and Symbols compare by value, Pairs element by element (first,
    then rest), Nil only to Nil, and procedures and closures by identity.
    """
    # Walk the rest chain iteratively so long lists do not recurse deeply.
    while isinstance(a, Pair):
        if not isinstance(b, Pair):
            return False
        if not equal(a.first, b.first):
            return False
        a, b = a.rest, b.rest
    if isinstance(a, NilType):
        return isinstance(b, NilType)
    if is_integer(a):
        return is_integer(b) and a == b
    if isinstance(a, Symbol):
        return isinstance(b, Symbol) and a.name == b.name
    return a is b
