"""Registry of independently named timers with bulk start/stop.

Usage:
    from benchtimer.registry import BenchTimer, ExecutionMode
    from benchtimer.units import DurationUnit

    bench = BenchTimer(DurationUnit.MILLISECONDS)
    bench.add("parse").start()
    bench.add("render")

    bench.start_all(ExecutionMode.SEQUENTIAL)
    ...
    bench.stop_all()

    for title, timer in bench.get_all().items():
        print(title, timer.latest_duration())

Lookups by title are best-effort: operations on a title that is not
registered do nothing. The mapping itself must not be mutated (``add``,
``remove``) while ``start_all``/``stop_all`` is in flight on another thread.
"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from enum import Enum

from benchtimer.timer import Clock, Timer
from benchtimer.units import DurationUnit
from benchtimer.utils.logger import Logger


class ExecutionMode(Enum):
    """How bulk operations visit the registered timers."""

    SEQUENTIAL = "sequential"  # Plain loop on the calling thread
    CONCURRENT = "concurrent"  # Thread pool fan-out, joined before returning


class BenchTimer:
    """Owns a title -> Timer mapping; every timer shares one DurationUnit.

    Example:
        >>> bench = BenchTimer(DurationUnit.MICROSECONDS)
        >>> bench.add("a")
        >>> bench.add("b")
        >>> bench.start_all()
        >>> bench.timestamp("a")
        >>> bench.stop_all(ExecutionMode.SEQUENTIAL)
    """

    def __init__(
        self,
        unit: DurationUnit = DurationUnit.MILLISECONDS,
        clock: Clock | None = None,
        max_workers: int | None = None,
    ) -> None:
        """Initialize an empty registry.

        Args:
            unit: Unit in which every contained timer renders samples.
            clock: Nanosecond clock handed to each timer (default perf_counter_ns).
            max_workers: Thread pool size for concurrent bulk operations.
                None lets ThreadPoolExecutor pick its default.
        """
        self._unit = unit
        self._clock = clock
        self._max_workers = max_workers
        self._timers: dict[str, Timer] = {}

    @property
    def unit(self) -> DurationUnit:
        return self._unit

    # -------------------------------------------------------------------------
    # Per-title operations
    # -------------------------------------------------------------------------

    def add(self, title: str) -> Timer:
        """Register a fresh timer under ``title``, replacing any previous one.

        Returns:
            The new timer, for chaining (``bench.add("x").start()``).
        """
        if title in self._timers:
            Logger.debug_if_configured("registry", f"Replacing timer '{title}'")
        timer = Timer(self._unit, self._clock)
        self._timers[title] = timer
        return timer

    def find(self, title: str) -> Timer | None:
        """Return the timer registered under ``title``, or None."""
        return self._timers.get(title)

    def _lookup(self, title: str, action: str) -> Timer | None:
        timer = self._timers.get(title)
        if timer is None:
            Logger.debug_if_configured(
                "registry", f"{action}('{title}') ignored: no such timer"
            )
        return timer

    def start(self, title: str) -> None:
        timer = self._lookup(title, "start")
        if timer is not None:
            timer.start()

    def stop(self, title: str) -> None:
        timer = self._lookup(title, "stop")
        if timer is not None:
            timer.stop()

    def timestamp(self, title: str) -> None:
        timer = self._lookup(title, "timestamp")
        if timer is not None:
            timer.timestamp()

    # -------------------------------------------------------------------------
    # Bulk operations
    # -------------------------------------------------------------------------

    def _apply_to_all(
        self, func: Callable[[Timer], None], mode: ExecutionMode
    ) -> None:
        """Run ``func`` on every timer and return once all calls finished.

        Raises:
            Exception: The first exception raised by ``func`` in any worker.
        """
        timers = list(self._timers.values())
        Logger.debug_if_configured(
            "registry", f"{func.__name__} over {len(timers)} timers ({mode.value})"
        )

        if mode == ExecutionMode.SEQUENTIAL or len(timers) < 2:
            for timer in timers:
                func(timer)
            return

        with ThreadPoolExecutor(
            max_workers=self._max_workers, thread_name_prefix="benchtimer"
        ) as pool:
            futures = [pool.submit(func, timer) for timer in timers]
            for future in futures:
                future.result()

    def start_all(self, mode: ExecutionMode = ExecutionMode.CONCURRENT) -> None:
        """Start (or restart) every registered timer."""
        self._apply_to_all(Timer.start, mode)

    def stop_all(self, mode: ExecutionMode = ExecutionMode.CONCURRENT) -> None:
        """Stop every running timer; idle timers are left untouched."""
        self._apply_to_all(Timer.stop, mode)

    # -------------------------------------------------------------------------
    # Snapshot & removal
    # -------------------------------------------------------------------------

    def get_all(self) -> dict[str, Timer]:
        """Snapshot of the registry; later mutations do not affect it."""
        return {title: timer.copy() for title, timer in self._timers.items()}

    def titles(self) -> list[str]:
        return list(self._timers)

    def remove(self, title: str) -> None:
        self._timers.pop(title, None)

    def remove_all(self) -> None:
        self._timers.clear()

    def __len__(self) -> int:
        """Return number of registered timers."""
        return len(self._timers)

    def __contains__(self, title: str) -> bool:
        """Check if a timer is registered under ``title``."""
        return title in self._timers
