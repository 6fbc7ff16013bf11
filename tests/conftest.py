import pytest

from awfocus.core.config import ConfigManager
from awfocus.core.notifier import Notifier


class RecordingTransport:
    def __init__(self):
        self.calls = []

    def call(self, target, args):
        self.calls.append((target, args))

    @property
    def args(self):
        return [args for _target, args in self.calls]


@pytest.fixture
def config():
    return ConfigManager().get_default()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def router(transport, config):
    from awfocus.core.router import FocusEventRouter

    return FocusEventRouter(Notifier(transport, config.target))
