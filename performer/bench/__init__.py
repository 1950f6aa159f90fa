"""Benchmarking engine: trial recording, history storage and aggregation."""

from performer.bench.errors import (
    AsyncMismatchError,
    EnvironmentUnsupportedError,
    InvalidArgumentError,
    PerformerError,
    ReferenceNotFoundError,
)
from performer.bench.history import MetricsHandler
from performer.bench.performer import Performer
from performer.bench.recorder import MetricsRecorder
from performer.bench.results import BenchmarkResults, OutputFormat
from performer.bench.stats import get_metric_stats

__all__ = [
    "AsyncMismatchError",
    "BenchmarkResults",
    "EnvironmentUnsupportedError",
    "InvalidArgumentError",
    "MetricsHandler",
    "MetricsRecorder",
    "OutputFormat",
    "Performer",
    "PerformerError",
    "ReferenceNotFoundError",
    "get_metric_stats",
]
