"""Built-in procedures for the minilisp runtime environment.

Every builtin takes the list of already-evaluated arguments, checks its own
arity and argument kinds, and returns a value. `new_global_environment` builds
the top-level scope every session starts from.
"""
from __future__ import annotations

from typing import Callable, Sequence

from minilisp import LispValue
from minilisp.equal import equal as structural_equal
from minilisp.errors import MismatchType
from minilisp.evaluation.arity import check_num_args
from minilisp.types.environment import Environment
from minilisp.types.kinds import ObjectKind
from minilisp.types.nil import Nil
from minilisp.types.pair import Pair
from minilisp.types.procedure import Procedure
from minilisp.types.symbol import Symbol, T
from minilisp.types.values import is_integer, make_integer


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: Sequence[LispValue]) -> int:
    """Sum integer arguments left to right; (+) is 0."""
    acc = 0
    for arg in args:
        if not is_integer(arg):
            raise MismatchType(arg, ObjectKind.Number)
        acc = make_integer(acc + arg)
    return acc


# -------------------------------
# Predicates
# -------------------------------
def is_atom(args: Sequence[LispValue]) -> LispValue:
    check_num_args(args, 1)
    return Nil if isinstance(args[0], Pair) else T


def equal(args: Sequence[LispValue]) -> LispValue:
    check_num_args(args, 2)
    return T if structural_equal(args[0], args[1]) else Nil


# -------------------------------
# List operations
# -------------------------------
def cons(args: Sequence[LispValue]) -> Pair:
    check_num_args(args, 2)
    return Pair(args[0], args[1])


def _cxr(args: Sequence[LispValue], accessor: Callable[[Pair], LispValue]) -> LispValue:
    check_num_args(args, 1)
    if not isinstance(args[0], Pair):
        raise MismatchType(args[0], ObjectKind.Cons)
    return accessor(args[0])


def car(args: Sequence[LispValue]) -> LispValue:
    return _cxr(args, lambda pair: pair.first)


def cdr(args: Sequence[LispValue]) -> LispValue:
    return _cxr(args, lambda pair: pair.rest)


# -------------------------------
# Registration
# -------------------------------
BUILTINS = {
    "+": add,
    "atom?": is_atom,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "equal": equal,
}


def register(env: Environment) -> None:
    env.update({Symbol(name): Procedure(name, fn) for name, fn in BUILTINS.items()})


def new_global_environment() -> Environment:
    env = Environment()
    register(env)
    return env
