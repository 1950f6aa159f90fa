"""Tests for benchmark Pydantic models."""

import pytest
from pydantic import ValidationError

from performer.models.benchmark_models import PerformerConfig, Stats


def test_stats_validation():
    """Test that sample counts cannot be negative."""
    with pytest.raises(ValidationError):
        Stats(samples=-1, min=0, max=0, sum=0, avg=0, std_dev=0)


def test_config_defaults():
    """Test default loop bounds."""
    config = PerformerConfig()
    assert config.max_iterations == 10
    assert config.max_total_duration_ms == 1_000


def test_config_bounds_validation():
    """Test that loop bounds must be positive."""
    with pytest.raises(ValidationError):
        PerformerConfig(max_iterations=0)
    with pytest.raises(ValidationError):
        PerformerConfig(max_total_duration_ms=0)


def test_config_from_env(monkeypatch):
    """Test reading the config from PERFORMER_* variables."""
    monkeypatch.setenv("PERFORMER_MAX_ITERATIONS", "25")
    monkeypatch.setenv("PERFORMER_MAX_TOTAL_DURATION_MS", "2500.5")
    monkeypatch.setenv("PERFORMER_LOG_LEVEL", "DEBUG")

    config = PerformerConfig.from_env()

    assert config.max_iterations == 25
    assert config.max_total_duration_ms == 2500.5
    assert config.log_level == "DEBUG"


def test_config_from_env_defaults(monkeypatch):
    """Test that unset variables fall back to defaults."""
    monkeypatch.delenv("PERFORMER_MAX_ITERATIONS", raising=False)
    monkeypatch.delenv("PERFORMER_MAX_TOTAL_DURATION_MS", raising=False)

    config = PerformerConfig.from_env()

    assert config.max_iterations == 10
    assert config.max_total_duration_ms == 1_000
