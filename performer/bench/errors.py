"""Exceptions raised by the benchmarking engine.

Errors raised by the measured callable itself are never wrapped: they are
collected verbatim into ``BenchmarkResults.errors``.
"""


class PerformerError(Exception):
    """Base exception for performer errors."""

    pass


class EnvironmentUnsupportedError(PerformerError):
    """Raised at construction when the timer or memory reader is unusable."""

    def __init__(self, capability: str, reason: str) -> None:
        self.capability = capability
        super().__init__(f"{capability} is not available: {reason}")


class InvalidArgumentError(PerformerError, TypeError):
    """Raised when a value that must be callable is not."""

    pass


class AsyncMismatchError(PerformerError):
    """Raised when an asynchronous callable reaches the synchronous entry point."""

    def __init__(self) -> None:
        super().__init__(
            "Function is asynchronous. Use `benchmark_async_function` instead"
        )


class ReferenceNotFoundError(PerformerError, KeyError):
    """Raised when an instrumented function is not registered with the engine."""

    def __init__(self) -> None:
        super().__init__("Function reference not found")

    def __str__(self) -> str:
        return str(self.args[0])
