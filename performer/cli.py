#!/usr/bin/env python3
"""Performer CLI - benchmark Python callables from the command line."""

import click

from performer.models.benchmark_models import PerformerConfig
from performer.utils.logger import Logger


def _bounds_options(command):
    """Attach the trial loop options shared by run and compare."""
    command = click.option(
        "--async",
        "use_async",
        is_flag=True,
        help="Await each trial (for coroutine functions)",
    )(command)
    command = click.option(
        "--max-duration-ms",
        "-t",
        type=click.FloatRange(min=0, min_open=True),
        default=None,
        help="Time budget of the trial loop in ms "
        "(default: PERFORMER_MAX_TOTAL_DURATION_MS or 1000)",
    )(command)
    command = click.option(
        "--iterations",
        "-n",
        type=click.IntRange(min=1),
        default=None,
        help="Maximum number of trials (default: PERFORMER_MAX_ITERATIONS or 10)",
    )(command)
    command = click.option(
        "--app-dir",
        default=".",
        show_default=True,
        help="Directory added to the import path before loading targets",
    )(command)
    return command


@click.group()
def performer():
    """Performer command-line tool for in-process micro-benchmarks."""
    if not Logger.is_configured():
        Logger.configure(
            level=PerformerConfig.from_env().log_level,
            output="stderr",
            timestamps=True,
        )


@performer.command()
@click.argument("target")
@_bounds_options
@click.option(
    "--output",
    "-o",
    "outputs",
    multiple=True,
    help="Output file(s) - format auto-detected (.json/.yaml). Repeatable.",
)
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(["json", "yaml", "text"], case_sensitive=False),
    default=None,
    help="Stdout format when no --output specified",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def run(target, app_dir, iterations, max_duration_ms, use_async, outputs, fmt, verbose):
    r"""Benchmark TARGET, given as module:attribute.

    \b
    Examples:
      performer run mymod:build_index
      performer run mymod:build_index -n 100 -t 5000
      performer run mymod:fetch_page --async
      performer run mymod:build_index -o results.json -o results.yaml
      performer run mymod:build_index -f json
    """
    from performer.commands.run_cmd import run_benchmark

    if verbose:
        Logger.set_level("DEBUG")

    run_benchmark(
        target=target,
        iterations=iterations,
        max_duration_ms=max_duration_ms,
        use_async=use_async,
        outputs=outputs,
        fmt=fmt.lower() if fmt else None,
        app_dir=app_dir,
    )


@performer.command()
@click.argument("target_a")
@click.argument("target_b")
@_bounds_options
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def compare(target_a, target_b, app_dir, iterations, max_duration_ms, use_async, verbose):
    r"""Benchmark TARGET_A and TARGET_B and compare them.

    \b
    Examples:
      performer compare mymod:with_loop mymod:with_comprehension
      performer compare mymod:fetch_v1 mymod:fetch_v2 --async -n 20
    """
    from performer.commands.run_cmd import run_compare

    if verbose:
        Logger.set_level("DEBUG")

    run_compare(
        target_a=target_a,
        target_b=target_b,
        iterations=iterations,
        max_duration_ms=max_duration_ms,
        use_async=use_async,
        app_dir=app_dir,
    )


@performer.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display performer version information."""
    from performer.commands.version_cmd import run_version

    run_version(verbose=verbose)


if __name__ == "__main__":
    performer()
