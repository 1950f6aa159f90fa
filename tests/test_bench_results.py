"""Tests for benchmark results emission."""

import json
import math
from io import StringIO

import yaml

from performer.bench.results import BenchmarkResults, OutputFormat, format_error
from performer.bench.stats import get_metric_stats


def _results():
    results = BenchmarkResults(
        get_metric_stats([2.0, 4.0]),
        get_metric_stats([500.0, 250.0]),
        get_metric_stats([0.5]),
        reference="ref-1",
    )
    results.name = "mymod:work"
    return results


def test_add_errors_preserves_order_and_duplicates():
    """Test that errors are appended verbatim."""
    results = _results()
    error = ValueError("same")
    results.add_errors([error, error])
    results.add_errors([KeyError("other")])

    assert results.get_errors()[0] is error
    assert results.get_errors()[1] is error
    assert isinstance(results.errors[2], KeyError)


def test_format_error():
    """Test error rendering for exports."""
    assert format_error(ValueError("bad")) == "ValueError: bad"
    assert format_error(RuntimeError()) == "RuntimeError"
    assert format_error("plain") == "'plain'"


def test_to_export():
    """Test conversion to the pydantic export model."""
    results = _results()
    results.add_errors([ValueError("bad")])
    export = results.to_export()

    assert export.reference == "ref-1"
    assert export.name == "mymod:work"
    assert export.execution_time_ms.avg == 3.0
    assert export.operations_per_second.max == 500.0
    assert math.isnan(export.used_memory_mb.std_dev)
    assert export.errors == ["ValueError: bad"]
    assert "performer_version" in export.metadata


def test_emit_json():
    """Test JSON emission."""
    output = StringIO()
    _results().emit(output, format=OutputFormat.JSON)

    data = json.loads(output.getvalue())
    assert data["reference"] == "ref-1"
    assert data["execution_time_ms"]["samples"] == 2
    assert data["errors"] == []


def test_emit_json_is_strict():
    """Test that NaN and infinite statistics are written as null."""
    results = BenchmarkResults(
        get_metric_stats([0.0]),
        get_metric_stats([math.inf]),
        get_metric_stats([0.5]),
        reference="ref-2",
    )
    output = StringIO()
    results.emit(output, format=OutputFormat.JSON)

    def reject(constant):
        raise ValueError(f"non-standard JSON constant: {constant}")

    data = json.loads(output.getvalue(), parse_constant=reject)
    assert data["operations_per_second"]["max"] is None
    assert data["used_memory_mb"]["std_dev"] is None
    assert data["used_memory_mb"]["avg"] == 0.5


def test_emit_yaml(tmp_path):
    """Test YAML emission to a file."""
    path = tmp_path / "results.yaml"
    _results().emit_yaml(path)

    data = yaml.safe_load(path.read_text())
    assert data["operations_per_second"]["avg"] == 375.0
    assert math.isnan(data["used_memory_mb"]["std_dev"])


def test_emit_text():
    """Test human-readable emission."""
    results = _results()
    results.add_errors([RuntimeError("boom")])
    output = StringIO()
    results.emit(output, format=OutputFormat.TEXT)

    content = output.getvalue()
    assert "BENCHMARK mymod:work" in content
    assert "Execution time (ms)" in content
    assert "samples: 2" in content
    assert "ERRORS (1)" in content
    assert "RuntimeError: boom" in content
