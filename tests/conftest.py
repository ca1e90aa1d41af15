import io

import pytest

from corelang.builtin.env_builtin import register
from corelang.runner import Runner
from corelang.types.environment import Environment


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def env(output):
    """Return a fresh root environment with `print` writing to `output`."""
    e = Environment.create_root()
    register(e, output)
    return e


@pytest.fixture
def runner(output):
    return Runner(output)
