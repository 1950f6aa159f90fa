"""Tests for per-trial metric recording."""

import math

import pytest

from performer.bench.recorder import MetricsRecorder, six_digits_rounded_abs


def test_six_digits_rounded_abs():
    """Test rounding to six decimals with the sign discarded."""
    assert six_digits_rounded_abs(1.23456789) == 1.234568
    assert six_digits_rounded_abs(-1.23456789) == 1.234568
    assert six_digits_rounded_abs(0.0) == 0.0
    assert six_digits_rounded_abs(-math.inf) == math.inf


def test_recorder_derived_metrics(clock, memory):
    """Test execution time, throughput and memory derivations."""
    clock.now = 100.0
    memory.used = 10_000_000
    recorder = MetricsRecorder(clock, memory)

    clock.advance(4.0)
    memory.used += 2_500_000
    recorder.end()

    assert recorder.get_execution_time_ms() == 4.0
    assert recorder.get_operations_per_second() == 250.0
    assert recorder.get_used_memory_mb() == 2.5


def test_recorder_negative_memory_delta_is_reported_as_magnitude(clock, memory):
    """Test that memory released during a trial is reported as positive."""
    recorder = MetricsRecorder(clock, memory)
    memory.used -= 1_000_000
    clock.advance(1.0)
    recorder.end()

    assert recorder.get_used_memory_mb() == 1.0


def test_recorder_zero_time_throughput_is_infinite(clock, memory):
    """Test that a zero-length trial has infinite throughput."""
    recorder = MetricsRecorder(clock, memory)
    recorder.end()

    assert recorder.get_execution_time_ms() == 0.0
    assert recorder.get_operations_per_second() == math.inf


def test_recorder_is_frozen_after_end(clock, memory):
    """Test that a recorder cannot be ended twice."""
    recorder = MetricsRecorder(clock, memory)
    clock.advance(2.0)
    recorder.end()
    assert recorder.ended

    clock.advance(5.0)
    with pytest.raises(RuntimeError):
        recorder.end()
    assert recorder.get_execution_time_ms() == 2.0
