from enum import Enum


class ObjectKind(Enum):
    """Kinds of object a form or procedure can require (see MismatchType)."""

    Number = "Number"
    Function = "Function"
    Cons = "Cons"
    Symbol = "Symbol"
    List = "List"

    def __str__(self):
        return self.value
