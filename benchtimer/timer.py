"""Stopwatch that accumulates elapsed-time samples against one start point.

Usage:
    from benchtimer.timer import Timer
    from benchtimer.units import DurationUnit

    timer = Timer(DurationUnit.MICROSECONDS)
    timer.start()
    for item in work:
        process(item)
        timer.timestamp()
    timer.stop()

    timer.all_samples()      # (0, 12, 25, ..., 1203)
    timer.latest_duration()  # 1203
"""

from __future__ import annotations

import time
from collections.abc import Callable

from benchtimer.units import DurationUnit

Clock = Callable[[], int]


class BenchTimerError(Exception):
    """Base exception for benchtimer errors."""

    pass


class EmptyTimerError(BenchTimerError):
    """Raised when statistics are requested from a timer with too few samples."""

    def __init__(self, operation: str, required: int = 1) -> None:
        self.operation = operation
        self.required = required
        plural = "sample" if required == 1 else "samples"
        super().__init__(
            f"{operation}() needs at least {required} {plural}; "
            "call start() before reading statistics"
        )


class Timer:
    """Monotonic stopwatch recording samples in a fixed DurationUnit.

    States are Idle and Running. ``start()`` always performs a full reset
    first, so calling it on a running timer restarts the session.
    ``timestamp()`` and ``stop()`` on an idle timer are no-ops.

    Start and stop instants are raw clock readings in nanoseconds (0 when
    unset); samples are elapsed times since the start instant, cast into
    ``unit``.
    """

    def __init__(
        self,
        unit: DurationUnit = DurationUnit.MILLISECONDS,
        clock: Clock | None = None,
    ) -> None:
        self._unit = unit
        self._clock: Clock = clock or time.perf_counter_ns
        self._start: int = 0
        self._stop: int = 0
        self._samples: list[int] = []
        self._running: bool = False

    @property
    def unit(self) -> DurationUnit:
        return self._unit

    @property
    def running(self) -> bool:
        return self._running

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def reset(self) -> None:
        """Return to Idle, discarding instants and samples."""
        self._start = self._stop = 0
        self._samples.clear()
        self._running = False

    def start(self) -> None:
        """Begin a new session with a single zero sample."""
        self.reset()
        self._samples.append(0)
        self._start = self._clock()
        self._running = True

    def timestamp(self) -> int | None:
        """Record time since start as a new sample.

        Returns:
            The captured clock instant, or None if the timer is not running.
        """
        if not self._running:
            return None
        now = self._clock()
        self._samples.append(self._unit.from_nanoseconds(now - self._start))
        return now

    def stop(self) -> None:
        """Record a final sample and return to Idle."""
        if not self._running:
            return
        self._stop = self.timestamp()  # type: ignore[assignment]
        self._running = False

    # -------------------------------------------------------------------------
    # Readings
    # -------------------------------------------------------------------------

    def all_samples(self) -> tuple[int, ...]:
        return tuple(self._samples)

    def start_timestamp(self) -> int:
        return self._start

    def stop_timestamp(self) -> int:
        return self._stop

    def latest_duration(self) -> int:
        """Most recent sample, i.e. total elapsed time recorded so far.

        Raises:
            EmptyTimerError: If the timer has never been started.
        """
        if not self._samples:
            raise EmptyTimerError("latest_duration")
        return self._samples[-1]

    def average_time(self) -> float:
        """Latest cumulative sample divided by the number of samples.

        This is elapsed-per-sample over the session, not the mean gap between
        consecutive samples (see ``mean_interval`` for that). The leading zero
        sample counts toward the divisor.

        Raises:
            EmptyTimerError: If the timer has never been started.
        """
        if not self._samples:
            raise EmptyTimerError("average_time")
        return self._samples[-1] / len(self._samples)

    def mean_interval(self) -> float:
        """Mean gap between consecutive samples.

        Raises:
            EmptyTimerError: If fewer than two samples exist.
        """
        if len(self._samples) < 2:
            raise EmptyTimerError("mean_interval", required=2)
        return (self._samples[-1] - self._samples[0]) / (len(self._samples) - 1)

    def copy(self) -> Timer:
        """Independent copy sharing only the unit and clock."""
        clone = Timer(self._unit, self._clock)
        clone._start = self._start
        clone._stop = self._stop
        clone._samples = list(self._samples)
        clone._running = self._running
        return clone

    def __len__(self) -> int:
        return len(self._samples)

    def __repr__(self) -> str:
        state = "running" if self._running else "idle"
        return f"Timer(unit={self._unit.value}, {state}, samples={len(self._samples)})"
