"""Aggregate statistics over per-trial metric values."""

from __future__ import annotations

import math
from typing import Sequence

from performer.models.benchmark_models import Stats


def get_metric_stats(values: Sequence[float]) -> Stats:
    """Compute count, min, max, sum, mean and sample standard deviation.

    Uses Bessel's correction (N-1), so a single value yields a NaN
    standard deviation. An empty sequence yields ``samples=0`` with
    ``min=inf``, ``max=-inf``, ``sum=0`` and NaN mean and deviation.
    """
    samples = len(values)
    minimum = math.inf
    maximum = -math.inf
    total = 0.0

    for value in values:
        minimum = min(minimum, value)
        maximum = max(maximum, value)
        total += value

    avg = total / samples if samples else math.nan

    squared_deviations = 0.0
    for value in values:
        squared_deviations += (value - avg) ** 2

    if samples > 1:
        std_dev = math.sqrt(squared_deviations / (samples - 1))
    else:
        std_dev = math.nan

    return Stats(
        samples=samples,
        min=minimum,
        max=maximum,
        sum=total,
        avg=avg,
        std_dev=std_dev,
    )
