"""Run and compare commands - benchmark importable callables from the shell.

CLI Examples:
    performer run mymod:build_index                  # 10 trials, 1s budget
    performer run mymod:build_index -n 100 -t 5000   # custom bounds
    performer run mymod:fetch_page --async           # await each trial
    performer run mymod:build_index -o results.json  # Save to JSON
    performer compare mymod:with_loop mymod:with_comprehension
"""

import asyncio
import importlib
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from performer.bench import BenchmarkResults, OutputFormat, Performer, PerformerError
from performer.models.benchmark_models import PerformerConfig
from performer.utils.logger import Logger


def load_target(target: str, app_dir: str | None = None) -> Callable[..., Any]:
    """Import ``module:attribute`` and return the attribute.

    Dotted attributes (``module:Class.method``) are resolved step by step.

    Raises:
        click.BadParameter: If the target cannot be imported or resolved.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise click.BadParameter(
            f"'{target}' is not in module:attribute form", param_hint="TARGET"
        )

    if app_dir is not None:
        resolved = str(Path(app_dir).resolve())
        if resolved not in sys.path:
            sys.path.insert(0, resolved)

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(
            f"Cannot import module '{module_name}': {e}", param_hint="TARGET"
        ) from e

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise click.BadParameter(
                f"'{module_name}' has no attribute '{attr_path}'", param_hint="TARGET"
            ) from e

    return obj


def get_output_format(output: str | None, fmt: str | None) -> OutputFormat:
    """Determine output format from filename or explicit format."""
    if fmt:
        return OutputFormat(fmt.lower())

    if output:
        suffix = Path(output).suffix.lower()
        if suffix == ".json":
            return OutputFormat.JSON
        elif suffix in (".yaml", ".yml"):
            return OutputFormat.YAML

    return OutputFormat.TEXT


def _benchmark(
    performer: Performer,
    func: Callable[..., Any],
    use_async: bool,
    iterations: int | None,
    max_duration_ms: float | None,
) -> BenchmarkResults:
    try:
        if use_async:
            return asyncio.run(
                performer.benchmark_async_function(func, iterations, max_duration_ms)
            )
        return performer.benchmark_function(func, iterations, max_duration_ms)
    except PerformerError as e:
        raise click.ClickException(str(e)) from e


def run_benchmark(
    target: str,
    iterations: int | None,
    max_duration_ms: float | None,
    use_async: bool,
    outputs: tuple[str, ...],
    fmt: str | None,
    app_dir: str | None = None,
) -> BenchmarkResults:
    """Benchmark one target and emit its results."""
    log = Logger.get("cli")
    func = load_target(target, app_dir)
    performer = Performer(config=PerformerConfig.from_env())

    log.info(f"Benchmarking {target}")
    results = _benchmark(performer, func, use_async, iterations, max_duration_ms)
    results.name = target

    if outputs:
        for out_path in outputs:
            results.emit(out_path, get_output_format(out_path, None))
            click.echo(f"✓ Results saved to: {out_path}")

    if not outputs or fmt:
        out_format = OutputFormat(fmt) if fmt else OutputFormat.TEXT
        results.emit(sys.stdout, out_format)

    if results.errors:
        click.echo(f"\n⚠️  {len(results.errors)} trial(s) raised errors")

    return results


def run_compare(
    target_a: str,
    target_b: str,
    iterations: int | None,
    max_duration_ms: float | None,
    use_async: bool,
    app_dir: str | None = None,
) -> tuple[BenchmarkResults, BenchmarkResults]:
    """Benchmark two targets in one process and print them side by side."""
    log = Logger.get("cli")
    func_a = load_target(target_a, app_dir)
    func_b = load_target(target_b, app_dir)
    performer = Performer(config=PerformerConfig.from_env())

    log.info(f"Comparing {target_a} against {target_b}")
    results_a = _benchmark(performer, func_a, use_async, iterations, max_duration_ms)
    results_b = _benchmark(performer, func_b, use_async, iterations, max_duration_ms)

    rows = [
        ("samples", results_a.samples, results_b.samples),
        (
            "avg time (ms)",
            results_a.execution_time_stats.avg,
            results_b.execution_time_stats.avg,
        ),
        (
            "avg ops/s",
            results_a.operations_per_second_stats.avg,
            results_b.operations_per_second_stats.avg,
        ),
        (
            "avg memory (MB)",
            results_a.used_memory_stats.avg,
            results_b.used_memory_stats.avg,
        ),
        ("errors", len(results_a.errors), len(results_b.errors)),
    ]

    width = max(len(target_a), len(target_b), 12)
    click.echo("\n" + "=" * (20 + 2 * width))
    click.echo(f"{'':<18}  {target_a:>{width}}{target_b:>{width}}")
    click.echo("-" * (20 + 2 * width))
    for label, value_a, value_b in rows:
        if isinstance(value_a, float):
            click.echo(f"{label:<18}  {value_a:>{width}.6f}{value_b:>{width}.6f}")
        else:
            click.echo(f"{label:<18}  {value_a:>{width}}{value_b:>{width}}")
    click.echo("=" * (20 + 2 * width))

    avg_a = results_a.execution_time_stats.avg
    avg_b = results_b.execution_time_stats.avg
    if avg_a < avg_b:
        click.echo(f"\n{target_a} is faster")
    elif avg_b < avg_a:
        click.echo(f"\n{target_b} is faster")
    else:
        click.echo("\nNo difference in average execution time")

    return results_a, results_b
