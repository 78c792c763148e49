"""Pydantic models for exporting timer measurements."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from benchtimer.timer import EmptyTimerError, Timer


class TimerSnapshot(BaseModel):
    """Frozen view of one titled timer at export time."""

    title: str = Field(..., description="Registry title of the timer")
    unit: str = Field(..., description="Duration unit symbol (e.g. 'ms')")
    running: bool = Field(..., description="Whether the timer was still running")
    samples: list[int] = Field(
        default_factory=list, description="Elapsed-time samples since start"
    )
    sample_count: int = Field(..., ge=0, description="Number of recorded samples")
    start_timestamp: int = Field(
        0, ge=0, description="Monotonic start instant in nanoseconds (0 if unset)"
    )
    stop_timestamp: int = Field(
        0, ge=0, description="Monotonic stop instant in nanoseconds (0 if unset)"
    )

    # Derived statistics, None when the timer holds too few samples
    latest_duration: int | None = Field(
        None, ge=0, description="Most recent sample (total elapsed)"
    )
    average_time: float | None = Field(
        None, ge=0, description="Latest sample divided by sample count"
    )
    mean_interval: float | None = Field(
        None, ge=0, description="Mean gap between consecutive samples"
    )

    @classmethod
    def from_timer(cls, title: str, timer: Timer) -> TimerSnapshot:
        samples = list(timer.all_samples())
        latest: int | None = None
        average: float | None = None
        interval: float | None = None
        try:
            latest = timer.latest_duration()
            average = timer.average_time()
            interval = timer.mean_interval()
        except EmptyTimerError:
            pass

        return cls(
            title=title,
            unit=timer.unit.symbol,
            running=timer.running,
            samples=samples,
            sample_count=len(samples),
            start_timestamp=timer.start_timestamp(),
            stop_timestamp=timer.stop_timestamp(),
            latest_duration=latest,
            average_time=average,
            mean_interval=interval,
        )


class BenchReport(BaseModel):
    """Root export document for a benchmark session."""

    metadata: dict[str, Any] = Field(
        default_factory=dict, description="Session timestamps, version, host info"
    )
    timers: list[TimerSnapshot] = Field(
        default_factory=list, description="One snapshot per registered title"
    )
    errors: dict[str, str] | None = Field(
        None, description="Per-title error messages, if any"
    )
    summary: dict[str, Any] = Field(
        default_factory=dict, description="Aggregate figures over all timers"
    )
