"""Constructors for every kind of minilisp value."""

from __future__ import annotations

from typing import Sequence

from minilisp import LispValue, SExpression
from minilisp.types.closure import Closure
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil, NilType
from minilisp.types.pair import Pair
from minilisp.types.symbol import Symbol

# Integers are fixed width: results wrap to the signed 64-bit range.
INTEGER_BITS = 64
_MODULUS = 1 << INTEGER_BITS
_HALF = 1 << (INTEGER_BITS - 1)


def make_nil() -> NilType:
    return Nil


def make_integer(n: int) -> int:
    return ((n + _HALF) % _MODULUS) - _HALF


def make_symbol(name: str) -> Symbol | NilType:
    # `nil` is the empty list, never a variable
    if name == "nil":
        return Nil
    return Symbol(name)


def make_pair(first: LispValue, rest: LispValue) -> Pair:
    return Pair(first, rest)


def make_closure(
    parameters: Sequence[Symbol], body: Sequence[SExpression], env: Environment
) -> Closure:
    return Closure(parameters, body, env)


def is_integer(value: LispValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
