"""Instrumentation engine: wraps callables, runs trial loops, reports stats.

Usage:
    from performer import Performer

    performer = Performer()

    loop = performer.benchmark_function(build_with_loop, max_iterations=50)
    comp = performer.benchmark_function(build_with_comprehension, max_iterations=50)

    loop.get_execution_time_stats().avg < comp.get_execution_time_stats().avg

    results = await performer.benchmark_async_function(fetch_page, 10, 5_000)
"""

from __future__ import annotations

import functools
import inspect
import logging
import uuid
from collections.abc import Callable
from typing import Any

from performer.bench import arrays
from performer.bench.errors import (
    AsyncMismatchError,
    InvalidArgumentError,
    ReferenceNotFoundError,
)
from performer.bench.history import MetricsHandler
from performer.bench.readers import (
    MemoryReader,
    Timer,
    check_memory_reader,
    check_timer,
    default_memory_reader,
    default_timer,
)
from performer.bench.recorder import MetricsRecorder
from performer.bench.results import BenchmarkResults
from performer.models.benchmark_models import PerformerConfig
from performer.utils.logger import Logger

# Marks every instrumented function with the reference it was minted with.
_REFERENCE_ATTR = "__performer_reference__"


class Performer:
    """Benchmarks synchronous and asynchronous callables.

    Every callable handed to ``benchmark_function`` (or
    ``benchmark_async_function``) is wrapped into an instrumented variant
    bound to a fresh reference; each call of that variant stores one
    ``MetricsRecorder`` under the reference. Passing the instrumented variant
    again (see ``instrument``) accumulates into the same history, so its
    statistics grow across calls. Passing the raw callable again always
    starts a new history.

    Errors raised by the callable are collected per call and do not stop the
    trial loop. All other failures propagate.

    A Performer is meant for one logical thread. Overlapping async benchmarks
    of the same instrumented function interleave their recordings and must be
    serialized by the caller.
    """

    DEFAULT_RANDOM_ARRAY_SIZE = arrays.DEFAULT_ARRAY_SIZE

    def __init__(
        self,
        timer: Timer | None = None,
        memory_reader: MemoryReader | None = None,
        config: PerformerConfig | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            timer: Zero-argument clock returning milliseconds. Defaults to a
                ``perf_counter_ns`` based clock.
            memory_reader: Zero-argument reader returning process memory in
                bytes. Defaults to psutil's RSS of the current process.
            config: Default loop bounds for calls that don't pass their own.

        Raises:
            EnvironmentUnsupportedError: If either reader is unusable.
        """
        self._timer = timer if timer is not None else default_timer
        self._memory_reader = (
            memory_reader if memory_reader is not None else default_memory_reader
        )
        check_timer(self._timer)
        check_memory_reader(self._memory_reader)

        self.config = config or PerformerConfig()
        # id(instrumented) -> (instrumented, reference)
        self._functions_references: dict[int, tuple[Callable[..., Any], str]] = {}
        self._metrics_handler = MetricsHandler()

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def benchmark_function(
        self,
        func: Callable[..., Any],
        max_iterations: int | None = None,
        max_total_duration_ms: float | None = None,
    ) -> BenchmarkResults:
        """Benchmark a synchronous function.

        The function runs at least once, then again while fewer than
        ``max_iterations`` trials ran and less than ``max_total_duration_ms``
        elapsed since the loop started.

        Args:
            func: The function to benchmark, called without arguments.
            max_iterations: Max number of trials.
            max_total_duration_ms: Time budget of the whole loop.

        Returns:
            BenchmarkResults for the function's reference.

        Raises:
            InvalidArgumentError: If func is not callable.
            AsyncMismatchError: If func is a coroutine function or returns
                an awaitable.
            ReferenceNotFoundError: If func is an instrumented function this
                engine no longer knows about.
        """
        max_iterations, max_total_duration_ms = self._resolve_bounds(
            max_iterations, max_total_duration_ms
        )
        if inspect.iscoroutinefunction(func):
            raise AsyncMismatchError()

        instrumented = self._resolve_instrumented(func, is_async=False)

        errors: list[Any] = []
        i = 0
        start = self._timer()

        while True:
            try:
                result = instrumented()
            except Exception as error:
                errors.append(error)
            else:
                if inspect.isawaitable(result):
                    _discard_awaitable(result)
                    raise AsyncMismatchError()

            i += 1
            elapsed_ms = self._timer() - start
            if i >= max_iterations or elapsed_ms >= max_total_duration_ms:
                break

        self._log_loop_end(instrumented, i, elapsed_ms, errors)
        return self._prepare_benchmark_results(instrumented, errors)

    async def benchmark_async_function(
        self,
        func: Callable[..., Any],
        max_iterations: int | None = None,
        max_total_duration_ms: float | None = None,
    ) -> BenchmarkResults:
        """Benchmark an asynchronous function.

        Each trial is awaited before the next one starts. Plain functions
        are accepted too; their results are used as-is.

        If a trial never settles this call never returns: the time budget
        is only checked between trials.

        Raises:
            InvalidArgumentError: If func is not callable.
            ReferenceNotFoundError: If func is an instrumented function this
                engine no longer knows about.
        """
        max_iterations, max_total_duration_ms = self._resolve_bounds(
            max_iterations, max_total_duration_ms
        )
        instrumented = self._resolve_instrumented(func, is_async=True)

        errors: list[Any] = []
        i = 0
        start = self._timer()

        while True:
            try:
                result = instrumented()
                if inspect.isawaitable(result):
                    await result
            except Exception as error:
                errors.append(error)

            i += 1
            elapsed_ms = self._timer() - start
            if i >= max_iterations or elapsed_ms >= max_total_duration_ms:
                break

        self._log_loop_end(instrumented, i, elapsed_ms, errors)
        return self._prepare_benchmark_results(instrumented, errors)

    benchmark = benchmark_function
    benchmark_async = benchmark_async_function

    def instrument(
        self, func: Callable[..., Any], is_async: bool = False
    ) -> Callable[..., Any]:
        """Return the instrumented variant of ``func``.

        Instrumented variants produced by this engine are returned unchanged.
        Anything else gets a new reference. Coroutine functions are always
        wrapped asynchronously so each trial covers the awaited work.
        Handing the returned variant to the benchmark methods accumulates
        trials into one history.

        Raises:
            InvalidArgumentError: If func is not callable.
            ReferenceNotFoundError: If func is an instrumented function this
                engine no longer knows about.
        """
        return self._resolve_instrumented(func, is_async=is_async)

    def clear(self) -> None:
        """Clear all references and metrics recorded."""
        count = len(self._functions_references)
        self._functions_references.clear()
        self._metrics_handler.clear()

        log = self._logger()
        if log is not None:
            log.debug(f"Cleared {count} reference(s)")

    def get_function_reference(self, instrumented: Callable[..., Any]) -> str:
        """Return the reference of an instrumented function.

        Raises:
            ReferenceNotFoundError: If it isn't registered with this engine.
        """
        entry = self._functions_references.get(id(instrumented))
        if entry is None or entry[0] is not instrumented:
            raise ReferenceNotFoundError()
        return entry[1]

    def get_function_benchmark_results(
        self, instrumented: Callable[..., Any]
    ) -> BenchmarkResults:
        """Current statistics of an instrumented function, without errors."""
        reference = self.get_function_reference(instrumented)
        results = self._metrics_handler.get_benchmark_results_for_reference(reference)
        results.name = _callable_name(instrumented)
        return results

    def get_results_for_reference(self, reference: str) -> BenchmarkResults:
        """Current statistics stored under ``reference``.

        Unknown (or cleared) references report zero samples.
        """
        return self._metrics_handler.get_benchmark_results_for_reference(reference)

    @property
    def reference_count(self) -> int:
        """Number of instrumented functions currently registered."""
        return len(self._functions_references)

    # -------------------------------------------------------------------------
    # Array helpers
    # -------------------------------------------------------------------------

    create_custom_array = staticmethod(arrays.create_custom_array)
    create_random_number_array = staticmethod(arrays.create_random_number_array)
    create_random_string_array = staticmethod(arrays.create_random_string_array)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _resolve_bounds(
        self, max_iterations: int | None, max_total_duration_ms: float | None
    ) -> tuple[int, float]:
        if max_iterations is None:
            max_iterations = self.config.max_iterations
        if max_total_duration_ms is None:
            max_total_duration_ms = self.config.max_total_duration_ms
        return max_iterations, max_total_duration_ms

    def _resolve_instrumented(
        self, func: Callable[..., Any], is_async: bool
    ) -> Callable[..., Any]:
        entry = self._functions_references.get(id(func))
        if entry is not None and entry[0] is func:
            return func

        if getattr(func, _REFERENCE_ATTR, None) is not None:
            raise ReferenceNotFoundError()

        # Coroutine functions always get the awaiting wrapper
        is_async = is_async or inspect.iscoroutinefunction(func)
        return self._get_instrumented_and_referenced_function(func, is_async)

    def _get_instrumented_and_referenced_function(
        self, func: Callable[..., Any], is_async: bool
    ) -> Callable[..., Any]:
        if not callable(func):
            raise InvalidArgumentError("Entity must be a function")

        reference = str(uuid.uuid4())

        if is_async:
            instrumented = self._make_instrumented_async_function(reference, func)
        else:
            instrumented = self._make_instrumented_function(reference, func)

        setattr(instrumented, _REFERENCE_ATTR, reference)
        self._functions_references[id(instrumented)] = (instrumented, reference)

        log = self._logger()
        if log is not None:
            kind = "async" if is_async else "sync"
            log.debug(f"Instrumented {kind} {_callable_name(func)} as {reference}")

        return instrumented

    def _make_instrumented_function(
        self, reference: str, func: Callable[..., Any]
    ) -> Callable[..., Any]:
        @functools.wraps(func)
        def instrumented(*args: Any, **kwargs: Any) -> Any:
            metrics = MetricsRecorder(self._timer, self._memory_reader)
            try:
                return func(*args, **kwargs)
            finally:
                metrics.end()
                self._metrics_handler.save_metrics(reference, metrics)

        return instrumented

    def _make_instrumented_async_function(
        self, reference: str, func: Callable[..., Any]
    ) -> Callable[..., Any]:
        @functools.wraps(func)
        async def instrumented(*args: Any, **kwargs: Any) -> Any:
            metrics = MetricsRecorder(self._timer, self._memory_reader)
            try:
                result = func(*args, **kwargs)
                if inspect.isawaitable(result):
                    result = await result
                return result
            finally:
                metrics.end()
                self._metrics_handler.save_metrics(reference, metrics)

        return instrumented

    def _prepare_benchmark_results(
        self, instrumented: Callable[..., Any], errors: list[Any]
    ) -> BenchmarkResults:
        results = self.get_function_benchmark_results(instrumented)

        if errors:
            results.add_errors(errors)

        return results

    def _log_loop_end(
        self,
        instrumented: Callable[..., Any],
        iterations: int,
        elapsed_ms: float,
        errors: list[Any],
    ) -> None:
        log = self._logger()
        if log is None:
            return
        log.debug(
            f"{_callable_name(instrumented)}: {iterations} trial(s) "
            f"in {elapsed_ms:.3f} ms, {len(errors)} error(s)"
        )

    @staticmethod
    def _logger() -> logging.Logger | None:
        return Logger.get_if_configured("bench.performer")


def _callable_name(func: Callable[..., Any]) -> str:
    name = getattr(func, "__qualname__", None) or getattr(func, "__name__", None)
    return name if name else repr(func)


def _discard_awaitable(awaitable: Any) -> None:
    """Close a never-awaited coroutine so it doesn't warn on collection."""
    if inspect.iscoroutine(awaitable):
        awaitable.close()
