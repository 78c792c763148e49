"""Tests for benchmark results collection and emission."""

import json
from io import StringIO

import yaml

from benchtimer.registry import BenchTimer
from benchtimer.results import BenchResults, OutputFormat
from benchtimer.units import DurationUnit


def _registry(clock) -> BenchTimer:
    bench = BenchTimer(DurationUnit.MILLISECONDS, clock)
    bench.add("fast").start()
    bench.add("slow").start()
    clock.advance(2_000_000)
    bench.stop("fast")
    clock.advance(6_000_000)
    bench.stop("slow")
    bench.add("unused")
    return bench


def test_add_registry_and_finalize(clock):
    """Every registry title becomes a snapshot; finalize stamps the end."""
    results = BenchResults(unit=DurationUnit.MILLISECONDS)
    results.add_registry(_registry(clock))
    results.add_error("broken", "Failed")

    assert len(results) == 3
    assert "fast" in results
    assert results.timers["slow"].latest_duration == 8
    assert results.timers["unused"].latest_duration is None
    assert "broken" in results.errors

    results.finalize()
    assert results.to_dict()["metadata"]["timestamp_end"] is not None


def test_generate_summary(clock):
    """Summary counts timers and samples and names the slowest title."""
    results = BenchResults()
    results.add_registry(_registry(clock))

    summary = results.to_dict()["summary"]
    assert summary["timer_count"] == 3
    assert summary["error_count"] == 0
    assert summary["total_samples"] == 4
    assert summary["slowest"] == "slow"
    assert summary["slowest_duration"] == 8


def test_metadata_includes_unit_and_host(clock):
    """Metadata records the unit symbol and host CPU counts."""
    results = BenchResults(unit=DurationUnit.MICROSECONDS)

    meta = results.to_dict()["metadata"]
    assert meta["unit"] == "us"
    assert meta["host"]["logical_cpus"] >= 1
    assert meta["benchtimer_version"] != "unknown"


def test_emit_json(clock):
    """JSON emission contains one entry per title, sorted by title."""
    results = BenchResults()
    results.add_registry(_registry(clock))

    output = StringIO()
    results.emit(output, format=OutputFormat.JSON)

    data = json.loads(output.getvalue())
    assert [t["title"] for t in data["timers"]] == ["fast", "slow", "unused"]
    assert data["timers"][0]["samples"] == [0, 2]
    assert data["errors"] is None


def test_emit_yaml_to_file(clock, tmp_path):
    """YAML files round-trip through yaml.safe_load."""
    results = BenchResults()
    results.add_registry(_registry(clock))

    path = tmp_path / "timings.yaml"
    results.emit_yaml(path)

    data = yaml.safe_load(path.read_text())
    assert data["summary"]["slowest"] == "slow"


def test_emit_text(clock):
    """Text output shows each title with unit-suffixed statistics."""
    results = BenchResults(unit=DurationUnit.MILLISECONDS)
    results.add_registry(_registry(clock))
    results.add_error("broken", "Failed")

    output = StringIO()
    results.emit(output, format=OutputFormat.TEXT)

    text = output.getvalue()
    assert "BENCHTIMER RESULTS" in text
    assert "latest_duration: 8ms" in text
    assert "mean_interval:   n/a" in text
    assert "broken: Failed" in text
    assert "Slowest: slow (8ms)" in text
