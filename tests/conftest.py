import io

import pytest
from rich.console import Console


class FakeClock:
    """Monotonic clock that only moves when `sleep` is called."""

    def __init__(self, start: float = 1000.0):
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class FakeOutput:
    """Stands in for sounddevice's module-level `play`."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls: list[tuple] = []

    def play(self, data, samplerate, blocking=False):
        if self.error:
            raise self.error
        self.calls.append((data, samplerate, blocking))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_output():
    return FakeOutput()


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120)
