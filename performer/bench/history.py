"""Per-reference storage of trial recordings."""

from performer.bench.recorder import MetricsRecorder
from performer.bench.results import BenchmarkResults
from performer.bench.stats import get_metric_stats


class MetricsHandler:
    """Maps each reference to the ordered recordings made under it.

    Histories only grow; nothing is evicted until ``clear()``. Results are
    recomputed from the stored recordings on every query.
    """

    def __init__(self) -> None:
        self._reference_metrics: dict[str, list[MetricsRecorder]] = {}

    def clear(self) -> None:
        self._reference_metrics.clear()

    def save_metrics(self, reference: str, metrics: MetricsRecorder) -> None:
        """Append a recording to the history of ``reference``."""
        self._reference_metrics.setdefault(reference, []).append(metrics)

    def get_metrics_for_reference(self, reference: str) -> list[MetricsRecorder]:
        return list(self._reference_metrics.get(reference, []))

    def get_benchmark_results_for_reference(self, reference: str) -> BenchmarkResults:
        """Aggregate every recording stored under ``reference``.

        An unknown reference produces zero-sample statistics.
        """
        execution_times: list[float] = []
        operations_per_second: list[float] = []
        used_memory: list[float] = []

        for metrics in self._reference_metrics.get(reference, []):
            execution_times.append(metrics.get_execution_time_ms())
            operations_per_second.append(metrics.get_operations_per_second())
            used_memory.append(metrics.get_used_memory_mb())

        return BenchmarkResults(
            get_metric_stats(execution_times),
            get_metric_stats(operations_per_second),
            get_metric_stats(used_memory),
            reference=reference,
        )

    def __len__(self) -> int:
        return len(self._reference_metrics)

    def __contains__(self, reference: str) -> bool:
        return reference in self._reference_metrics
