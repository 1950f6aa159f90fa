"""Shared fixtures for the performer test suite."""

from io import StringIO

import pytest

from performer.bench import Performer
from performer.utils.logger import Logger


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


class FakeMemory:
    """Manually adjusted byte counter."""

    def __init__(self, used: int = 50_000_000) -> None:
        self.used = used

    def __call__(self) -> int:
        return self.used


@pytest.fixture(autouse=True)
def log_output():
    """Route performer logs into a buffer for every test."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)
    yield output


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory():
    return FakeMemory()


@pytest.fixture
def fake_performer(clock, memory):
    """Performer driven by the fake clock and memory readers."""
    performer = Performer(timer=clock, memory_reader=memory)
    yield performer
    performer.clear()


@pytest.fixture
def performer():
    """Performer using the real clock and psutil memory reader."""
    performer = Performer()
    yield performer
    performer.clear()
