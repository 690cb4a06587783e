import pytest

from minilisp.errors import (
    EndOfFile,
    MismatchType,
    TooFewArguments,
    TooManyArguments,
    UnboundVariable,
    UnexpectedChar,
    UnmatchedClosedParen,
    WrongNumArgs,
)
from minilisp.printer import to_lisp_string
from minilisp.reader.parser import parse
from minilisp.types import Nil, Pair, Symbol, list_to_pair
from minilisp.types.kinds import ObjectKind


@pytest.mark.parametrize(
    "value, expected",
    [
        (123, "123"),
        (-5, "-5"),
        (Symbol("car"), "car"),
        (Nil, "nil"),
        (Pair(1, 2), "(1 . 2)"),
        (Pair(1, Pair(2, 3)), "(1 2 . 3)"),
        (Pair(Pair(1, 2), Pair(3, 4)), "((1 . 2) 3 . 4)"),
        (list_to_pair([Symbol("+"), 123, 456]), "(+ 123 456)"),
        (list_to_pair([Nil, list_to_pair([Nil])]), "(nil (nil))"),
    ],
)
def test_display(value, expected):
    assert to_lisp_string(value) == expected


@pytest.mark.parametrize("source", ["(a b c)", "(a (b c) . d)", "((1 . 2) 3 . 4)", "foo", "-12"])
def test_printed_data_reads_back(source):
    assert to_lisp_string(parse(source)) == source
    assert parse(to_lisp_string(parse(source))) == parse(source)


def test_procedures_print_as_placeholders(run):
    assert to_lisp_string(run("car")) == "<Procedure car>"
    assert to_lisp_string(run("(lambda (x y) (+ x y) x)")) == "<Closure (x y) (+ x y) x>"
    assert to_lisp_string(run("(lambda ())")) == "<Closure ()>"


def test_non_lisp_values_are_rejected():
    with pytest.raises(TypeError):
        to_lisp_string(1.5)


@pytest.mark.parametrize(
    "error, message",
    [
        (UnboundVariable("x"), "Unbound variable: x"),
        (MismatchType(Symbol("a"), ObjectKind.Cons), "The value a is not of type Cons"),
        (MismatchType(Pair(1, 2), ObjectKind.Number), "The value (1 . 2) is not of type Number"),
        (WrongNumArgs(0, 1), "Wrong number of arguments: expected = 1, actual = 0"),
        (TooFewArguments(1, 2), "Too few arguments (1 arguments provided, at least 2 required)"),
        (TooManyArguments(4, 3), "Too many arguments (4 arguments provided, at most 3 required)"),
        (EndOfFile(), "End of file"),
        (UnmatchedClosedParen(), "Unmatched closed parenthesis"),
        (UnexpectedChar("c", ")"), "Expecting character ')', but it's character 'c'"),
    ],
)
def test_error_messages(error, message):
    assert str(error) == message


def test_errors_compare_by_payload():
    assert WrongNumArgs(0, 1) == WrongNumArgs(0, 1)
    assert WrongNumArgs(0, 1) != WrongNumArgs(1, 0)
    assert TooFewArguments(1, 2) != TooManyArguments(1, 2)
    assert MismatchType(Pair(1, 2), ObjectKind.Cons) == MismatchType(Pair(1, 2), ObjectKind.Cons)
