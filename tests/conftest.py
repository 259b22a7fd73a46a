import pytest

from fundot.evaluation.evaluator import Evaluator
from fundot.interpreter import Interpreter


# Tests must not pick up configuration from the invoking shell.
@pytest.fixture(autouse=True)
def _clean_fundot_env(monkeypatch):
    for var in ("FUNDOT_STRICT", "FUNDOT_MAX_DEPTH", "FUNDOT_PROMPT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def evaluator():
    return Evaluator(strict=False)


@pytest.fixture
def strict_evaluator():
    return Evaluator(strict=True)


@pytest.fixture
def interp():
    return Interpreter(strict=False)


@pytest.fixture
def strict_interp():
    return Interpreter(strict=True)
