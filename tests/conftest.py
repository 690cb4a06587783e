import pytest

from minilisp.builtins import new_global_environment
from minilisp.evaluation.evaluator import evaluate
from minilisp.interpreter import Interpreter
from minilisp.reader.parser import parse


@pytest.fixture
def env():
    """Fresh global environment with the builtins installed."""
    return new_global_environment()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Read one datum from source text and evaluate it in the shared `env`."""
    def _run(source):
        return evaluate(parse(source), env)
    return _run
