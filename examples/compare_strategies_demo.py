#!/usr/bin/env python3
"""Demo script comparing two strategies with a shared Performer."""

import asyncio
import json

from performer import Performer


def build_with_loop(values):
    res = {}
    for i, value in enumerate(values):
        res[str(i)] = value
    return res


def build_with_rebuild(values):
    res = {}
    for i, value in enumerate(values):
        res = {**res, str(i): value}
    return res


async def fetch(delay):
    await asyncio.sleep(delay)


def main():
    """Benchmark two dict builders, then an async function."""
    performer = Performer()
    values = Performer.create_random_string_array(500)

    print("=" * 60)
    print("Loop vs. rebuild")
    print("=" * 60)

    loop = performer.benchmark_function(lambda: build_with_loop(values), 20)
    rebuild = performer.benchmark_function(lambda: build_with_rebuild(values), 20)

    for name, results in (("loop", loop), ("rebuild", rebuild)):
        time_stats = results.get_execution_time_stats()
        ops_stats = results.get_operations_per_second_stats()
        print(
            f"  {name:<8} {time_stats.avg:10.4f} ms  "
            f"{ops_stats.avg:12.1f} ops/s  ({time_stats.samples} trials)"
        )

    # Reusing the instrumented variant accumulates history across calls
    instrumented = performer.instrument(lambda: build_with_loop(values))
    performer.benchmark_function(instrumented, 5)
    accumulated = performer.benchmark_function(instrumented, 5)
    print(f"\n  accumulated trials: {accumulated.samples}")

    print()
    print("=" * 60)
    print("Async function (JSON export)")
    print("=" * 60)
    results = asyncio.run(performer.benchmark_async_function(lambda: fetch(0.001), 5))
    print(json.dumps(results.to_dict(), indent=2, default=str))

    performer.clear()


if __name__ == "__main__":
    main()
