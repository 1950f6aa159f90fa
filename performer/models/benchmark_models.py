"""Models for benchmark configuration and results."""

from typing import Any

from pydantic import BaseModel, Field

from performer.utils.env import get_env

DEFAULT_MAX_ITERATIONS = 10
DEFAULT_MAX_TOTAL_DURATION_MS = 1_000


class Stats(BaseModel):
    """Aggregate statistics over one metric of a benchmark history.

    ``std_dev`` is the sample (N-1) deviation and is NaN for a single sample.
    """

    samples: int = Field(..., ge=0, description="Number of trials aggregated")
    min: float = Field(..., description="Smallest value")
    max: float = Field(..., description="Largest value")
    sum: float = Field(..., description="Sum of all values")
    avg: float = Field(..., description="Arithmetic mean")
    std_dev: float = Field(..., description="Sample standard deviation")


class BenchmarkExport(BaseModel):
    """Serializable snapshot of a benchmark result."""

    reference: str = Field(..., description="Reference of the instrumented callable")
    name: str | None = Field(None, description="Qualified name of the callable")
    execution_time_ms: Stats = Field(..., description="Per-trial wall time (ms)")
    operations_per_second: Stats = Field(
        ..., description="Per-trial throughput (1000 / execution time)"
    )
    used_memory_mb: Stats = Field(..., description="Per-trial memory delta (MB)")
    errors: list[str] = Field(
        default_factory=list, description="Errors raised during the trials, in order"
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict, description="Run metadata (timestamps, version)"
    )


class PerformerConfig(BaseModel):
    """Default loop bounds and logging for benchmark runs."""

    max_iterations: int = Field(
        DEFAULT_MAX_ITERATIONS, ge=1, description="Maximum number of trials"
    )
    max_total_duration_ms: float = Field(
        DEFAULT_MAX_TOTAL_DURATION_MS,
        gt=0,
        description="Time budget for the whole trial loop in milliseconds",
    )
    log_level: str = Field("INFO", description="Log level used by the CLI")

    @classmethod
    def from_env(cls) -> "PerformerConfig":
        """Build a config from PERFORMER_* environment variables."""
        return cls(
            max_iterations=get_env(
                "PERFORMER_MAX_ITERATIONS", default=DEFAULT_MAX_ITERATIONS, as_type=int
            ),
            max_total_duration_ms=get_env(
                "PERFORMER_MAX_TOTAL_DURATION_MS",
                default=float(DEFAULT_MAX_TOTAL_DURATION_MS),
                as_type=float,
            ),
            log_level=get_env("PERFORMER_LOG_LEVEL", default="INFO"),
        )
