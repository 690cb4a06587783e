"""The minilisp value model: Nil, integers, Symbol, Pair, Procedure, Closure."""

from minilisp.types.nil import Nil, NilType
from minilisp.types.symbol import Symbol, T
from minilisp.types.kinds import ObjectKind
from minilisp.types.pair import (
    Pair,
    iterate_list,
    list_elements,
    list_to_pair,
)
from minilisp.types.procedure import Procedure
from minilisp.types.environment import Environment
from minilisp.types.closure import Closure
from minilisp.types.values import (
    make_nil,
    make_integer,
    make_symbol,
    make_pair,
    make_closure,
    is_integer,
)
