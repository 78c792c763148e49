"""Benchmark results collection and emission.

Supports multiple output formats: JSON, YAML, and stdout.

Usage:
    from benchtimer.results import BenchResults, OutputFormat

    results = BenchResults(unit=bench.unit)
    results.add_registry(bench)

    results.emit("timings.json", OutputFormat.JSON)
    results.emit("timings.yaml", OutputFormat.YAML)
    results.emit(sys.stdout, OutputFormat.TEXT)
"""

import json
import platform
import sys
from datetime import UTC, datetime
from enum import Enum
from io import StringIO
from pathlib import Path
from typing import Any, TextIO

import psutil
import yaml  # type: ignore[import-untyped, unused-ignore]

from benchtimer.models.timer_models import BenchReport, TimerSnapshot
from benchtimer.registry import BenchTimer
from benchtimer.timer import Timer
from benchtimer.units import DurationUnit


class OutputFormat(Enum):
    """Supported output formats for benchmark results."""

    JSON = "json"
    YAML = "yaml"
    TEXT = "text"  # Human-readable text for stdout


class BenchResults:
    """Collection of timer snapshots with flexible emission.

    Example:
        >>> results = BenchResults(unit=DurationUnit.MILLISECONDS)
        >>> results.add_timer("parse", timer)
        >>> results.emit(sys.stdout, OutputFormat.TEXT)
    """

    def __init__(self, unit: DurationUnit = DurationUnit.MILLISECONDS) -> None:
        """Initialize an empty collection.

        Args:
            unit: Unit the collected timers render in, recorded in metadata.
        """
        self._unit = unit
        self._timers: dict[str, TimerSnapshot] = {}
        self._metadata: dict[str, Any] = {
            "timestamp_start": datetime.now(UTC).isoformat(),
            "timestamp_end": None,
            "benchtimer_version": self._get_version(),
            "unit": unit.symbol,
            "host": self._host_info(),
        }
        self._errors: dict[str, str] = {}

    def _get_version(self) -> str:
        """Get benchtimer version string."""
        try:
            from benchtimer import __version__

            return str(__version__)
        except (ImportError, AttributeError):
            return "unknown"

    @staticmethod
    def _host_info() -> dict[str, Any]:
        return {
            "python": platform.python_version(),
            "platform": platform.platform(),
            "logical_cpus": psutil.cpu_count(logical=True),
            "physical_cpus": psutil.cpu_count(logical=False),
        }

    def add_timer(self, title: str, timer: Timer) -> None:
        """Snapshot ``timer`` under ``title``, replacing any earlier entry."""
        self._timers[title] = TimerSnapshot.from_timer(title, timer)

    def add_registry(self, registry: BenchTimer) -> None:
        """Snapshot every timer currently held by ``registry``."""
        for title, timer in registry.get_all().items():
            self.add_timer(title, timer)

    def add_error(self, title: str, error: str) -> None:
        """Record an error for a title.

        Args:
            title: Timer title the error belongs to.
            error: Error message.
        """
        self._errors[title] = error

    def finalize(self) -> None:
        """Mark results as complete, setting end timestamp."""
        self._metadata["timestamp_end"] = datetime.now(UTC).isoformat()

    @property
    def timers(self) -> dict[str, TimerSnapshot]:
        """Get snapshots keyed by title."""
        return self._timers.copy()

    @property
    def errors(self) -> dict[str, str]:
        """Get error dictionary."""
        return self._errors.copy()

    def to_report(self) -> BenchReport:
        return BenchReport(
            metadata=self._metadata,
            timers=sorted(self._timers.values(), key=lambda snap: snap.title),
            errors=self._errors if self._errors else None,
            summary=self._generate_summary(),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert results to a dictionary for serialization."""
        return self.to_report().model_dump(mode="json")

    def _generate_summary(self) -> dict[str, Any]:
        measured = [
            snap for snap in self._timers.values() if snap.latest_duration is not None
        ]
        slowest = max(measured, key=lambda snap: snap.latest_duration or 0, default=None)

        return {
            "timer_count": len(self._timers),
            "error_count": len(self._errors),
            "total_samples": sum(snap.sample_count for snap in self._timers.values()),
            "slowest": slowest.title if slowest else None,
            "slowest_duration": slowest.latest_duration if slowest else None,
        }

    # -------------------------------------------------------------------------
    # Emission Methods
    # -------------------------------------------------------------------------

    def emit(
        self,
        output: str | Path | TextIO,
        format: OutputFormat = OutputFormat.JSON,
        indent: int = 2,
    ) -> None:
        """Emit results to a file or stream.

        Args:
            output: File path or file-like object (e.g., sys.stdout).
            format: Output format (JSON, YAML, TEXT).
            indent: Indentation level for JSON/YAML.
        """
        self.finalize()

        if format == OutputFormat.JSON:
            content = json.dumps(self.to_dict(), indent=indent)
        elif format == OutputFormat.YAML:
            content = yaml.safe_dump(
                self.to_dict(), indent=indent, default_flow_style=False, sort_keys=False
            )
        elif format == OutputFormat.TEXT:
            content = self._to_text()
        else:
            raise ValueError(f"Unknown format: {format}")

        self._write_output(output, content)

    def _to_text(self) -> str:
        """Render results as a human-readable table per title."""
        output = StringIO()
        data = self.to_dict()
        unit = self._unit

        output.write("\n" + "=" * 60 + "\n")
        output.write("  BENCHTIMER RESULTS\n")
        output.write("=" * 60 + "\n\n")

        meta = data["metadata"]
        output.write(f"Started:  {meta['timestamp_start']}\n")
        output.write(f"Finished: {meta['timestamp_end']}\n")
        output.write(f"Version:  {meta['benchtimer_version']}\n")
        output.write(f"Unit:     {meta['unit']}\n\n")

        for snap in data["timers"]:
            output.write(f"{snap['title']}\n")
            output.write("-" * 40 + "\n")
            output.write(f"  samples:         {snap['sample_count']}\n")
            for key in ("latest_duration", "average_time", "mean_interval"):
                value = snap[key]
                shown = "n/a" if value is None else unit.format(value)
                output.write(f"  {key + ':':<17}{shown}\n")
            if snap["running"]:
                output.write("  (still running)\n")
            output.write("\n")

        if data["errors"]:
            output.write("ERRORS\n")
            output.write("-" * 40 + "\n")
            for title, error in data["errors"].items():
                output.write(f"  {title}: {error}\n")
            output.write("\n")

        summary = data["summary"]
        output.write("-" * 40 + "\n")
        output.write(f"Timers:  {summary['timer_count']}\n")
        output.write(f"Samples: {summary['total_samples']}\n")
        if summary["slowest"] is not None:
            slowest = unit.format(summary["slowest_duration"])
            output.write(f"Slowest: {summary['slowest']} ({slowest})\n")
        output.write("=" * 60 + "\n")
        return output.getvalue()

    def _write_output(self, output: str | Path | TextIO, content: str) -> None:
        if isinstance(output, str | Path):
            Path(output).write_text(content)
        else:
            output.write(content)
            if output is not sys.stdout and output is not sys.stderr:
                output.flush()

    # -------------------------------------------------------------------------
    # Convenience Methods
    # -------------------------------------------------------------------------

    def emit_json(self, path: str | Path) -> None:
        self.emit(path, OutputFormat.JSON)

    def emit_yaml(self, path: str | Path) -> None:
        self.emit(path, OutputFormat.YAML)

    def emit_stdout(self) -> None:
        """Emit human-readable results to stdout."""
        self.emit(sys.stdout, OutputFormat.TEXT)

    def __len__(self) -> int:
        """Return number of collected timers."""
        return len(self._timers)

    def __contains__(self, title: str) -> bool:
        """Check if a title has a snapshot."""
        return title in self._timers
