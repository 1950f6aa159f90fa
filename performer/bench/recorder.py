"""Per-trial measurement of wall time and memory."""

import math

from performer.bench.readers import MemoryReader, Timer


def six_digits_rounded_abs(value: float) -> float:
    """Round ``abs(value)`` to six decimal places.

    The sign is discarded, so negative memory deltas (memory released during
    a trial) are reported as positive magnitudes.
    """
    if math.isinf(value):
        return math.inf
    return round(abs(value), 6)


class MetricsRecorder:
    """Timing and memory readings of a single trial.

    Readings start when the recorder is created and stop on ``end()``.
    After ``end()`` the recorder is frozen.
    """

    def __init__(self, timer: Timer, memory_reader: MemoryReader) -> None:
        self._timer = timer
        self._memory_reader = memory_reader
        self.time_start: float = timer()
        self.time_end: float = 0.0
        self.memory_start: int = memory_reader()
        self.memory_end: int = 0
        self._ended = False

    def end(self) -> None:
        """Capture end readings.

        Raises:
            RuntimeError: If the recorder was already ended.
        """
        if self._ended:
            raise RuntimeError("MetricsRecorder.end() called twice")
        self.time_end = self._timer()
        self.memory_end = self._memory_reader()
        self._ended = True

    @property
    def ended(self) -> bool:
        return self._ended

    def get_execution_time_ms(self) -> float:
        return six_digits_rounded_abs(self.time_end - self.time_start)

    def get_operations_per_second(self) -> float:
        """Throughput of this single trial; ``inf`` for a zero-length trial."""
        execution_time_ms = self.get_execution_time_ms()
        if execution_time_ms == 0:
            return math.inf
        return six_digits_rounded_abs(1_000 / execution_time_ms)

    def get_used_memory_mb(self) -> float:
        return six_digits_rounded_abs(self.memory_end - self.memory_start) / 1_000_000

    def __repr__(self) -> str:
        return (
            f"MetricsRecorder(time_ms={self.get_execution_time_ms()}, "
            f"memory_mb={self.get_used_memory_mb()}, ended={self._ended})"
        )
