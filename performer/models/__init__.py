"""Pydantic models for structured output."""

from performer.models.benchmark_models import (
    BenchmarkExport,
    PerformerConfig,
    Stats,
)

__all__ = [
    "BenchmarkExport",
    "PerformerConfig",
    "Stats",
]
