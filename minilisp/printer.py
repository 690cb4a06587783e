"""Textual rendering of minilisp values.

Lists print as ``(a b c)``, dotted lists as ``(a b . c)``, the empty list as
``nil``. Procedures and closures print as ``<...>`` placeholders, which the
reader does not turn back into the same value.
"""

from __future__ import annotations

from minilisp import LispValue
from minilisp.types.closure import Closure
from minilisp.types.nil import NilType
from minilisp.types.pair import Pair
from minilisp.types.procedure import Procedure
from minilisp.types.symbol import Symbol
from minilisp.types.values import is_integer


def to_lisp_string(value: LispValue) -> str:
    """Render `value` as minilisp source text (or a placeholder)."""
    if isinstance(value, NilType):
        return "nil"
    if is_integer(value):
        return str(value)
    if isinstance(value, (Symbol, Pair, Procedure, Closure)):
        return str(value)
    raise TypeError(f"Not a minilisp value: {value!r}")
