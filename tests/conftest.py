import pytest

from clrs.builtin.env_builtin import register
from clrs.interpreter import Interpreter
from clrs.reader.parser import read
from clrs.evaluation.evaluator import evaluate
from clrs.types.environment import Environment


# Most tests either build expression trees by hand and evaluate them against
# `env`, or feed source text through `run`, which reads and evaluates every
# form against the same environment and returns the last result.


@pytest.fixture
def env():
    """Fresh global environment with the host functions registered."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(env):
    def _run(source: str):
        result = None
        for expr in read(source):
            result = evaluate(expr, env)
        return result
    return _run


@pytest.fixture
def itp():
    """Interpreter with the packaged bootstrap script loaded."""
    return Interpreter()
