import pytest
from unittest.mock import MagicMock

from istyle.trampoline import CallbackInvoker


class FakeSource:
    """ Event source test double.

    `actors` maps display positions to the actor shown there.
    """

    def __init__(self):
        self.position = (0, 0)
        self.key = None
        self.actors = {}
        self.renders = 0
        self.picks = []

    def event_position(self):
        return self.position

    def key_sym(self):
        return self.key

    def render(self):
        self.renders += 1

    def pick(self, x, y):
        self.picks.append((x, y))
        return self.actors.get((x, y))


@pytest.fixture
def source():
    return FakeSource()


@pytest.fixture
def defaults():
    return MagicMock()


@pytest.fixture
def invoker():
    invoker = MagicMock(spec=CallbackInvoker)
    invoker.on_key_press.return_value = 0
    return invoker
