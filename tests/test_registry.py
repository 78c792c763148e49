"""Tests for the BenchTimer registry."""

import time
from io import StringIO

import pytest

from benchtimer.registry import BenchTimer, ExecutionMode
from benchtimer.timer import Timer
from benchtimer.units import DurationUnit
from benchtimer.utils.logger import Logger


def test_add_returns_chainable_timer(clock):
    """add() returns the stored timer so it can be started directly."""
    bench = BenchTimer(DurationUnit.MILLISECONDS, clock)
    timer = bench.add("x")
    timer.start()

    assert isinstance(timer, Timer)
    assert bench.find("x") is timer
    assert "x" in bench
    assert len(bench) == 1


def test_add_replaces_existing_timer(clock):
    """Re-adding a title discards the previous timer and its samples."""
    bench = BenchTimer(DurationUnit.MILLISECONDS, clock)
    first = bench.add("x")
    first.start()
    clock.advance(1_000_000)
    first.timestamp()

    second = bench.add("x")

    assert second is not first
    assert bench.find("x") is second
    assert bench.get_all()["x"].all_samples() == ()


def test_round_trip_start_stop(clock):
    """Start via the handle, stop via the title, read back through get_all."""
    bench = BenchTimer(DurationUnit.MILLISECONDS, clock)
    bench.add("x").start()
    clock.advance(7_000_000)
    bench.timestamp("x")
    clock.advance(3_000_000)
    bench.stop("x")

    samples = bench.get_all()["x"].all_samples()
    assert len(samples) >= 2
    assert samples[0] == 0
    assert samples[-1] == 10


def test_missing_title_is_noop(clock):
    """Per-title operations on unknown titles do nothing and never raise."""
    bench = BenchTimer(DurationUnit.MILLISECONDS, clock)
    bench.add("x")

    bench.start("typo")
    bench.timestamp("typo")
    bench.stop("typo")
    bench.remove("typo")

    assert bench.find("typo") is None
    assert bench.titles() == ["x"]


def test_missing_title_logged_when_configured(clock):
    """With logging configured, ignored lookups leave a debug record."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)

    bench = BenchTimer(DurationUnit.MILLISECONDS, clock)
    bench.stop("ghost")

    assert "stop('ghost') ignored" in output.getvalue()
    assert "[benchtimer.registry]" in output.getvalue()


def test_start_registered_but_never_started_timer(clock):
    """A fresh timer is found even though it holds no samples yet."""
    bench = BenchTimer(DurationUnit.MILLISECONDS, clock)
    bench.add("x")
    bench.start("x")

    assert bench.find("x").running


def test_get_all_is_a_snapshot(clock):
    """Mutating the registry after get_all leaves the snapshot intact."""
    bench = BenchTimer(DurationUnit.MILLISECONDS, clock)
    bench.add("x").start()

    snapshot = bench.get_all()
    clock.advance(2_000_000)
    bench.stop("x")
    bench.remove_all()

    assert list(snapshot) == ["x"]
    assert snapshot["x"].running
    assert snapshot["x"].all_samples() == (0,)


def test_remove_and_remove_all(clock):
    """remove() drops one title; remove_all() empties the registry."""
    bench = BenchTimer(DurationUnit.MILLISECONDS, clock)
    for title in ("x", "y", "z"):
        bench.add(title)

    bench.remove("x")
    assert "x" not in bench.get_all()
    assert len(bench) == 2

    bench.remove_all()
    assert bench.get_all() == {}
    assert len(bench) == 0


@pytest.mark.parametrize("mode", [ExecutionMode.SEQUENTIAL, ExecutionMode.CONCURRENT])
@pytest.mark.parametrize("count", [0, 1, 5, 64])
def test_start_all_starts_every_timer(clock, mode, count):
    """Every timer ends up running with exactly one zero sample."""
    bench = BenchTimer(DurationUnit.MILLISECONDS, clock, max_workers=8)
    for index in range(count):
        bench.add(f"t{index}")

    bench.start_all(mode)

    timers = bench.get_all()
    assert len(timers) == count
    for timer in timers.values():
        assert timer.running
        assert timer.all_samples() == (0,)


@pytest.mark.parametrize("mode", [ExecutionMode.SEQUENTIAL, ExecutionMode.CONCURRENT])
def test_stop_all_stops_running_and_skips_idle(clock, mode):
    """stop_all appends a final sample to running timers only."""
    bench = BenchTimer(DurationUnit.MILLISECONDS, clock)
    bench.add("running").start()
    bench.add("idle")
    clock.advance(5_000_000)

    bench.stop_all(mode)

    timers = bench.get_all()
    assert timers["running"].all_samples() == (0, 5)
    assert not timers["running"].running
    assert timers["idle"].all_samples() == ()


def test_concurrent_start_all_restarts_running_timers(clock):
    """start_all on running timers discards their previous session."""
    bench = BenchTimer(DurationUnit.MILLISECONDS, clock)
    for title in ("a", "b", "c"):
        bench.add(title).start()
    clock.advance(3_000_000)
    bench.timestamp("a")

    bench.start_all(ExecutionMode.CONCURRENT)

    assert all(t.all_samples() == (0,) for t in bench.get_all().values())


def test_concurrent_bulk_propagates_worker_errors():
    """An exception raised by a timer's clock surfaces from start_all."""

    def broken_clock() -> int:
        raise RuntimeError("clock failure")

    bench = BenchTimer(DurationUnit.MILLISECONDS, broken_clock)
    bench.add("a")
    bench.add("b")

    with pytest.raises(RuntimeError, match="clock failure"):
        bench.start_all(ExecutionMode.CONCURRENT)


def test_sequential_end_to_end_with_real_clock():
    """Timers started and stopped together measure at least the sleep."""
    bench = BenchTimer(DurationUnit.MILLISECONDS)
    for title in ("a", "b", "c"):
        bench.add(title)

    bench.start_all(ExecutionMode.SEQUENTIAL)
    time.sleep(0.05)
    bench.stop_all(ExecutionMode.SEQUENTIAL)

    durations = [timer.latest_duration() for timer in bench.get_all().values()]
    assert all(duration >= 50 for duration in durations)
    assert max(durations) - min(durations) <= 20
