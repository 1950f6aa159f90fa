"""Benchmark results container and emission.

Supports multiple output formats: JSON, YAML, and stdout.

Usage:
    from performer import Performer
    from performer.bench.results import OutputFormat

    results = Performer().benchmark_function(lambda: sorted(data))

    results.get_execution_time_stats().avg
    results.emit("results.json", OutputFormat.JSON)
    results.emit(sys.stdout, OutputFormat.TEXT)
"""

import sys
from datetime import UTC, datetime
from enum import Enum
from io import StringIO
from pathlib import Path
from typing import Any, TextIO

import yaml

from performer.models.benchmark_models import BenchmarkExport, Stats


class OutputFormat(Enum):
    """Supported output formats for benchmark results."""

    JSON = "json"
    YAML = "yaml"
    TEXT = "text"  # Human-readable text for stdout


def format_error(error: BaseException | Any) -> str:
    """Render a collected error as ``Type: message``."""
    if isinstance(error, BaseException):
        message = str(error)
        name = type(error).__name__
        return f"{name}: {message}" if message else name
    return repr(error)


class BenchmarkResults:
    """Snapshot of the statistics recorded under one reference.

    Operations per second are aggregated from each trial's own throughput,
    not derived from the mean execution time. ``errors`` holds the exact
    exception objects raised by the benchmarked callable during the call
    that produced this snapshot, in order.
    """

    def __init__(
        self,
        execution_time_stats: Stats,
        operations_per_second_stats: Stats,
        used_memory_stats: Stats,
        reference: str | None = None,
    ) -> None:
        self._execution_time_stats = execution_time_stats
        self._operations_per_second_stats = operations_per_second_stats
        self._used_memory_stats = used_memory_stats
        self._errors: list[Any] = []
        self.reference = reference
        self.name: str | None = None
        self.created_at = datetime.now(UTC).isoformat()

    def add_errors(self, errors: list[Any]) -> None:
        self._errors.extend(errors)

    def get_errors(self) -> list[Any]:
        return self._errors

    def get_execution_time_stats(self) -> Stats:
        return self._execution_time_stats

    def get_operations_per_second_stats(self) -> Stats:
        return self._operations_per_second_stats

    def get_used_memory_stats(self) -> Stats:
        return self._used_memory_stats

    @property
    def errors(self) -> list[Any]:
        return self.get_errors()

    @property
    def execution_time_stats(self) -> Stats:
        return self._execution_time_stats

    @property
    def operations_per_second_stats(self) -> Stats:
        return self._operations_per_second_stats

    @property
    def used_memory_stats(self) -> Stats:
        return self._used_memory_stats

    @property
    def samples(self) -> int:
        """Number of trials the statistics were computed over."""
        return self._execution_time_stats.samples

    def to_export(self) -> BenchmarkExport:
        """Convert to the serializable pydantic model."""
        return BenchmarkExport(
            reference=self.reference or "",
            name=self.name,
            execution_time_ms=self._execution_time_stats,
            operations_per_second=self._operations_per_second_stats,
            used_memory_mb=self._used_memory_stats,
            errors=[format_error(error) for error in self._errors],
            metadata={
                "created_at": self.created_at,
                "performer_version": self._get_version(),
            },
        )

    def to_dict(self) -> dict[str, Any]:
        return self.to_export().model_dump()

    def _get_version(self) -> str:
        from performer.version import PERFORMER_VERSION

        return str(PERFORMER_VERSION)

    # -------------------------------------------------------------------------
    # Emission Methods
    # -------------------------------------------------------------------------

    def emit(
        self,
        output: str | Path | TextIO,
        format: OutputFormat = OutputFormat.JSON,
        indent: int = 2,
    ) -> None:
        """Emit results to a file or stream.

        Args:
            output: File path or file-like object (e.g., sys.stdout).
            format: Output format (JSON, YAML, TEXT).
            indent: Indentation level for JSON/YAML.
        """
        if format == OutputFormat.JSON:
            # NaN and infinite statistics serialize as null
            content = self.to_export().model_dump_json(indent=indent)
        elif format == OutputFormat.YAML:
            content = yaml.safe_dump(
                self.to_dict(), indent=indent, default_flow_style=False, sort_keys=False
            )
        elif format == OutputFormat.TEXT:
            content = self._to_text()
        else:
            raise ValueError(f"Unknown format: {format}")

        self._write_output(output, content)

    def _to_text(self) -> str:
        output = StringIO()

        output.write("\n" + "=" * 60 + "\n")
        output.write(f"  BENCHMARK {self.name or self.reference}\n")
        output.write("=" * 60 + "\n\n")

        sections = [
            ("Execution time (ms)", self._execution_time_stats),
            ("Operations per second", self._operations_per_second_stats),
            ("Used memory (MB)", self._used_memory_stats),
        ]
        for title, stats in sections:
            output.write(f"{title}\n")
            output.write("-" * 40 + "\n")
            output.write(f"  samples: {stats.samples}\n")
            for key in ("min", "max", "sum", "avg", "std_dev"):
                output.write(f"  {key}: {getattr(stats, key):.6f}\n")
            output.write("\n")

        if self._errors:
            output.write(f"ERRORS ({len(self._errors)})\n")
            output.write("-" * 40 + "\n")
            for error in self._errors:
                output.write(f"  {format_error(error)}\n")
            output.write("\n")

        output.write("=" * 60 + "\n")
        return output.getvalue()

    def _write_output(self, output: str | Path | TextIO, content: str) -> None:
        if isinstance(output, str | Path):
            Path(output).write_text(content)
        else:
            output.write(content)
            if output is not sys.stdout and output is not sys.stderr:
                output.flush()

    def emit_json(self, path: str | Path) -> None:
        self.emit(path, OutputFormat.JSON)

    def emit_yaml(self, path: str | Path) -> None:
        self.emit(path, OutputFormat.YAML)

    def emit_stdout(self) -> None:
        """Emit human-readable results to stdout."""
        self.emit(sys.stdout, OutputFormat.TEXT)

    def __repr__(self) -> str:
        return (
            f"BenchmarkResults(reference={self.reference!r}, "
            f"samples={self.samples}, errors={len(self._errors)})"
        )
