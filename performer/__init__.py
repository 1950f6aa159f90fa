"""Performer - in-process micro-benchmarking of sync and async callables."""

from performer.bench import (
    AsyncMismatchError,
    BenchmarkResults,
    EnvironmentUnsupportedError,
    InvalidArgumentError,
    OutputFormat,
    Performer,
    PerformerError,
    ReferenceNotFoundError,
)
from performer.models import PerformerConfig, Stats
from performer.version import PERFORMER_VERSION, Version

__version__ = str(PERFORMER_VERSION)
__version_info__ = PERFORMER_VERSION

__all__ = [
    "PERFORMER_VERSION",
    "AsyncMismatchError",
    "BenchmarkResults",
    "EnvironmentUnsupportedError",
    "InvalidArgumentError",
    "OutputFormat",
    "Performer",
    "PerformerConfig",
    "PerformerError",
    "ReferenceNotFoundError",
    "Stats",
    "Version",
    "__version__",
    "__version_info__",
]
