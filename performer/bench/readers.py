"""Clock and memory readers used to instrument trials.

Both readers are plain zero-argument callables so tests (or callers with
special needs) can hand the engine their own.
"""

from __future__ import annotations

import time
from collections.abc import Callable

import psutil

from performer.bench.errors import EnvironmentUnsupportedError

Timer = Callable[[], float]
MemoryReader = Callable[[], int]

_PROCESS: psutil.Process | None = None


def default_timer() -> float:
    """High resolution monotonic clock in milliseconds."""
    return time.perf_counter_ns() / 1_000_000


def default_memory_reader() -> int:
    """Resident set size of the current process in bytes."""
    global _PROCESS

    if _PROCESS is None:
        _PROCESS = psutil.Process()
    return int(_PROCESS.memory_info().rss)


def check_timer(timer: Timer) -> None:
    """Make sure ``timer`` can be read and yields a number.

    Raises:
        EnvironmentUnsupportedError: If the clock is missing or broken.
    """
    _check_reader("High resolution timer", timer)


def check_memory_reader(memory_reader: MemoryReader) -> None:
    """Make sure ``memory_reader`` can be read and yields a number.

    Raises:
        EnvironmentUnsupportedError: If process memory cannot be read.
    """
    _check_reader("Process memory usage", memory_reader)


def _check_reader(capability: str, reader: Callable[[], float | int]) -> None:
    if not callable(reader):
        raise EnvironmentUnsupportedError(capability, "reader is not callable")

    try:
        value = reader()
    except Exception as e:
        raise EnvironmentUnsupportedError(capability, str(e)) from e

    if isinstance(value, bool) or not isinstance(value, int | float):
        raise EnvironmentUnsupportedError(
            capability, f"reader returned {type(value).__name__}, expected a number"
        )
