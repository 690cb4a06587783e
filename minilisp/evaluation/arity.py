"""Argument-count checks shared by special forms and builtins."""

from __future__ import annotations

from typing import Optional, Sized

from minilisp.errors import TooFewArguments, TooManyArguments, WrongNumArgs


def check_num_args(args: Sized, expected: int) -> None:
    if len(args) != expected:
        raise WrongNumArgs(len(args), expected)


def check_num_args_range(args: Sized, minimum: int, maximum: Optional[int] = None) -> None:
    if len(args) < minimum:
        raise TooFewArguments(len(args), minimum)
    if maximum is not None and len(args) > maximum:
        raise TooManyArguments(len(args), maximum)
