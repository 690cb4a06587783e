import pytest

from minilisp.errors import (
    MismatchType,
    TooFewArguments,
    TooManyArguments,
    UnboundVariable,
    WrongNumArgs,
)
from minilisp.evaluation.evaluator import evaluate
from minilisp.reader.parser import parse
from minilisp.types import Closure, Nil, Pair, Procedure, Symbol, list_to_pair
from minilisp.types.kinds import ObjectKind
from minilisp.types.symbol import T


# -----------------------------------------------------
# Atoms
# -----------------------------------------------------

def test_self_evaluating_values(env):
    assert evaluate(1, env) == 1
    assert evaluate(-7, env) == -7
    assert evaluate(Nil, env) is Nil
    plus = env.lookup(Symbol("+"))
    assert evaluate(plus, env) is plus


def test_symbol_lookup(run, env):
    env.define(Symbol("x"), 42)
    assert run("x") == 42
    assert isinstance(run("car"), Procedure)
    with pytest.raises(UnboundVariable) as excinfo:
        run("z")
    assert excinfo.value == UnboundVariable("z")


def test_nil_literal_is_never_a_variable(run):
    assert run("nil") is Nil
    with pytest.raises(MismatchType):
        run("(define nil 1)")


# -----------------------------------------------------
# quote
# -----------------------------------------------------

def test_quote(run):
    assert run("'a") == Symbol("a")
    assert run("(quote (a b c))") == list_to_pair([Symbol("a"), Symbol("b"), Symbol("c")])
    assert run("'(1 . 2)") == Pair(1, 2)


def test_quote_arity(run):
    with pytest.raises(WrongNumArgs) as excinfo:
        run("(quote)")
    assert excinfo.value == WrongNumArgs(0, 1)
    with pytest.raises(WrongNumArgs):
        run("(quote a b)")


# -----------------------------------------------------
# if
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source, expected",
    [
        ("(if (equal 1 1) 'true 'false)", Symbol("true")),
        ("(if (equal 1 2) 'true 'false)", Symbol("false")),
        ("(if (equal 1 2) 'true)", Nil),
        ("(if nil 'true)", Nil),
        ("(if 0 'yes 'no)", Symbol("yes")),
        ("(if '() 'yes 'no)", Symbol("no")),
    ],
)
def test_if(run, source, expected):
    assert run(source) == expected


def test_if_only_evaluates_the_chosen_branch(run):
    assert run("(if 't 1 undefined-name)") == 1
    assert run("(if nil undefined-name 2)") == 2


@pytest.mark.parametrize(
    "source, error",
    [
        ("(if)", TooFewArguments(0, 2)),
        ("(if x)", TooFewArguments(1, 2)),
        ("(if test then else extra)", TooManyArguments(4, 3)),
        ("(if a b c d)", TooManyArguments(4, 3)),
    ],
)
def test_if_arity(run, source, error):
    with pytest.raises(type(error)) as excinfo:
        run(source)
    assert excinfo.value == error


# -----------------------------------------------------
# define / set!
# -----------------------------------------------------

def test_define(run):
    assert run("(define x 1)") == 1
    assert run("(define x (+ x 1))") == 2
    assert run("x") == 2


def test_define_errors(run):
    with pytest.raises(WrongNumArgs) as excinfo:
        run("(define x)")
    assert excinfo.value == WrongNumArgs(1, 2)
    with pytest.raises(MismatchType) as excinfo:
        run("(define 1 2)")
    assert excinfo.value.expected is ObjectKind.Symbol


def test_define_checks_the_name_before_evaluating(run):
    with pytest.raises(MismatchType):
        run("(define (f) undefined-name)")


def test_set(run):
    with pytest.raises(UnboundVariable) as excinfo:
        run("(set! x 0)")
    assert excinfo.value.name == "x"
    run("(define foo nil)")
    assert run("(set! foo 10)") == 10
    assert run("foo") == 10


def test_set_undefined(run):
    with pytest.raises(UnboundVariable) as excinfo:
        run("(set! undefined-name 0)")
    assert excinfo.value == UnboundVariable("undefined-name")


def test_set_errors(run):
    with pytest.raises(WrongNumArgs):
        run("(set! x)")
    with pytest.raises(MismatchType) as excinfo:
        run("(set! 1 2)")
    assert excinfo.value.expected is ObjectKind.Symbol


# -----------------------------------------------------
# lambda
# -----------------------------------------------------

def test_lambda_builds_a_closure(run, env):
    c = run("(lambda (a b) (+ a b))")
    assert isinstance(c, Closure)
    assert c.parameters == (Symbol("a"), Symbol("b"))
    assert c.body == (parse("(+ a b)"),)
    assert c.env is env


def test_lambda_body_is_not_evaluated(run):
    assert isinstance(run("(lambda () undefined-name)"), Closure)


def test_lambda_errors(run):
    with pytest.raises(TooFewArguments) as excinfo:
        run("(lambda)")
    assert excinfo.value == TooFewArguments(0, 1)
    with pytest.raises(MismatchType) as excinfo:
        run("(lambda x x)")
    assert excinfo.value.expected is ObjectKind.List
    with pytest.raises(MismatchType) as excinfo:
        run("(lambda (a 1) a)")
    assert excinfo.value.expected is ObjectKind.Symbol
    assert excinfo.value.value == 1


def test_lambda_with_dotted_parameters_binds_the_proper_prefix(run):
    closure = run("(lambda (a . b) a)")
    assert closure.parameters == (Symbol("a"),)
    assert run("((lambda (x . y) x) 1)") == 1
    with pytest.raises(WrongNumArgs):
        run("((lambda (x . y) x) 1 2)")


# -----------------------------------------------------
# Application
# -----------------------------------------------------

def test_application(run):
    run("(define 1+ (lambda (x) (+ x 1)))")
    assert run("(1+ 0)") == 1
    assert run("((lambda (x) (+ x 1)) 0)") == 1


def test_calling_a_non_procedure(run):
    with pytest.raises(MismatchType) as excinfo:
        run("(1 2)")
    assert excinfo.value == MismatchType(1, ObjectKind.Function)
    with pytest.raises(MismatchType):
        run("('car '(1))")


def test_arguments_are_evaluated_left_to_right(run):
    run("(define log nil)")
    run("(define note (lambda (x) (set! log (cons x log)) x))")
    assert run("(+ (note 1) (note 2) (note 3))") == 6
    assert run("log") == list_to_pair([3, 2, 1])


def test_first_error_short_circuits(run):
    run("(define x 0)")
    with pytest.raises(UnboundVariable):
        run("(+ (set! x 1) undefined-name (set! x 2))")
    assert run("x") == 1


def test_special_forms_cannot_be_overridden(run):
    run("(define quote (lambda (x) 'shadowed))")
    assert run("(quote a)") == Symbol("a")
    assert isinstance(run("quote"), Closure)


def test_dotted_tail_of_a_form_is_ignored(run):
    assert run("(+ 1 . 2)") == 1
    assert run("(quote a . b)") == Symbol("a")
    assert run("(if nil 1 . 2)") is Nil
    with pytest.raises(WrongNumArgs) as excinfo:
        run("(quote . x)")
    assert excinfo.value == WrongNumArgs(0, 1)


def test_predicate_truthy_value_is_t(run):
    assert run("(atom? 1)") is not Nil
    assert run("(atom? 1)") == T
