"""Error hierarchy for minilisp.

Evaluation errors carry their payload as attributes so callers (and tests) can
inspect what went wrong; ``str()`` renders the message shown by the REPL.
"""

from __future__ import annotations


class LispError(Exception):
    """ Base class for all minilisp errors"""

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class LispRuntimeError(LispError):
    """ Base class for errors raised while evaluating a form"""


class UnboundVariable(LispRuntimeError):
    """ Raised when a symbol is looked up (or set!) before it is bound"""

    def __init__(self, name: str):
        super().__init__(str(name))
        self.name = str(name)

    def __str__(self):
        return f"Unbound variable: {self.name}"


class MismatchType(LispRuntimeError):
    """ Raised when a value is used where another kind of object is required"""

    def __init__(self, value, expected):
        super().__init__(value, expected)
        self.value = value
        self.expected = expected

    def __str__(self):
        from minilisp.printer import to_lisp_string
        return f"The value {to_lisp_string(self.value)} is not of type {self.expected}"


class WrongNumArgs(LispRuntimeError):
    """ Raised when an exact-arity procedure gets the wrong number of arguments"""

    def __init__(self, actual: int, expected: int):
        super().__init__(actual, expected)
        self.actual = actual
        self.expected = expected

    def __str__(self):
        return (
            f"Wrong number of arguments: expected = {self.expected}, "
            f"actual = {self.actual}"
        )


class TooFewArguments(LispRuntimeError):
    """ Raised when a variable-arity form gets fewer arguments than it needs"""

    def __init__(self, actual: int, minimum: int):
        super().__init__(actual, minimum)
        self.actual = actual
        self.minimum = minimum

    def __str__(self):
        return (
            f"Too few arguments ({self.actual} arguments provided, "
            f"at least {self.minimum} required)"
        )


class TooManyArguments(LispRuntimeError):
    """ Raised when a variable-arity form gets more arguments than it accepts"""

    def __init__(self, actual: int, maximum: int):
        super().__init__(actual, maximum)
        self.actual = actual
        self.maximum = maximum

    def __str__(self):
        return (
            f"Too many arguments ({self.actual} arguments provided, "
            f"at most {self.maximum} required)"
        )


class LispReadError(LispError):
    """ Base class for reader errors"""


class EndOfFile(LispReadError):
    """ Raised when the input ends before a complete datum was read"""

    def __str__(self):
        return "End of file"


class UnmatchedClosedParen(LispReadError):
    """ Raised when ')' appears where a datum was expected"""

    def __str__(self):
        return "Unmatched closed parenthesis"


class UnexpectedChar(LispReadError):
    """ Raised when the reader finds a character other than the one it needs"""

    def __init__(self, actual: str, expected: str):
        super().__init__(actual, expected)
        self.actual = actual
        self.expected = expected

    def __str__(self):
        return f"Expecting character {self.expected!r}, but it's character {self.actual!r}"

