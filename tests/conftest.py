import pytest

from kflisp.interpreter import Interpreter


@pytest.fixture
def interp():
    """Fresh interpreter; kflisp keeps no state between lines."""
    return Interpreter()


@pytest.fixture
def rep(interp):
    """Read-eval-print one line to its displayed text."""
    return interp.rep
