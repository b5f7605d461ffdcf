import pytest

from morsedial.player import Pacer


class FakeLamp:
    def __init__(self):
        self.calls = []

    def set_active(self, active):
        self.calls.append(active)


class RecordingSleep:
    """Records requested pauses (seconds) and runs a hook after each one."""

    def __init__(self, hook=None):
        self.pauses = []
        self.hook = hook

    async def __call__(self, seconds):
        self.pauses.append(round(seconds, 6))
        if self.hook:
            self.hook(self)


@pytest.fixture
def lamp():
    return FakeLamp()


@pytest.fixture
def make_pacer():
    def factory(hook=None):
        sleep = RecordingSleep(hook)
        return Pacer(sleep=sleep), sleep
    return factory
