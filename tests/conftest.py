import pytest

from verboten.app_types.turtle import make_turtle


@pytest.fixture
def sink():
    """Collects everything a turtle writes from debug()."""
    return []


@pytest.fixture
def origin(sink):
    return make_turtle(0, 0, 0.0, sink=sink.append)
