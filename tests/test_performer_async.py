"""Tests for the asynchronous benchmarking path."""

import asyncio
import inspect

import pytest

from performer.bench import InvalidArgumentError, ReferenceNotFoundError


async def add_async(a, b):
    return a + b


def test_benchmark_async_function(performer):
    """Test a clean async benchmark."""
    results = asyncio.run(
        performer.benchmark_async_function(lambda: add_async(1, 2), 10, 60_000)
    )

    assert results.get_errors() == []
    assert results.get_execution_time_stats().samples == 10


def test_benchmark_async_coroutine_function(fake_performer, clock):
    """Test that coroutine functions are awaited per trial."""

    async def work():
        await asyncio.sleep(0)
        clock.advance(2.0)

    results = asyncio.run(fake_performer.benchmark_async_function(work, 4))

    assert results.samples == 4
    assert results.execution_time_stats.avg == 2.0


def test_rejections_are_collected(fake_performer):
    """Test that every rejection is kept with its message."""

    async def rejecting():
        raise RuntimeError("boom")

    results = asyncio.run(fake_performer.benchmark_async_function(rejecting, 2))

    assert len(results.get_errors()) == 2
    assert all(isinstance(e, RuntimeError) for e in results.get_errors())
    assert all(str(e) == "boom" for e in results.get_errors())
    assert results.samples == 2


def test_trials_run_sequentially(fake_performer):
    """Test that no two trials overlap."""
    in_flight = []
    overlaps = []

    async def work():
        if in_flight:
            overlaps.append(True)
        in_flight.append(True)
        await asyncio.sleep(0)
        in_flight.pop()

    asyncio.run(fake_performer.benchmark_async_function(work, 5))

    assert overlaps == []


def test_time_budget_cap(fake_performer, clock):
    """Test that the time budget stops the async loop."""

    async def slow():
        clock.advance(600.0)

    results = asyncio.run(fake_performer.benchmark_async_function(slow, 10, 1_000))

    assert results.samples == 2


def test_sync_function_on_async_path(fake_performer):
    """Test that plain functions are accepted by the async entry point."""
    results = asyncio.run(fake_performer.benchmark_async_function(lambda: 42, 3))

    assert results.samples == 3
    assert results.errors == []


def test_async_instrumented_function_accumulates(fake_performer):
    """Test that an async instrumented variant accumulates its history."""
    instrumented = fake_performer.instrument(add_async, is_async=True)

    async def scenario():
        assert await instrumented(2, 3) == 5
        return await fake_performer.benchmark_async_function(
            lambda: instrumented(1, 1), 2
        )

    results = asyncio.run(scenario())

    assert results.errors == []
    assert fake_performer.get_function_benchmark_results(instrumented).samples == 3


def test_async_non_callable_rejected(fake_performer):
    """Test that non-callables are refused by the async path."""
    with pytest.raises(InvalidArgumentError):
        asyncio.run(fake_performer.benchmark_async_function(None))


def test_async_after_clear(fake_performer):
    """Test that a cleared async variant cannot be benchmarked."""
    instrumented = fake_performer.instrument(add_async, is_async=True)
    fake_performer.clear()

    with pytest.raises(ReferenceNotFoundError):
        asyncio.run(fake_performer.benchmark_async_function(instrumented))


def test_instrument_detects_coroutine_function(fake_performer, clock):
    """Test that instrumenting a coroutine function measures the awaited work."""

    async def work():
        await asyncio.sleep(0)
        clock.advance(5.0)

    instrumented = fake_performer.instrument(work)
    results = asyncio.run(fake_performer.benchmark_async_function(instrumented, 3))

    assert inspect.iscoroutinefunction(instrumented)
    assert results.samples == 3
    assert results.execution_time_stats.avg == 5.0
