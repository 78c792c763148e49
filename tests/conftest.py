"""Shared fixtures for benchtimer tests."""

import threading

import pytest


class FakeClock:
    """Manually advanced nanosecond clock."""

    def __init__(self, start: int = 1_000_000_000) -> None:
        self.now = start
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            return self.now

    def advance(self, ns: int) -> None:
        with self._lock:
            self.now += ns


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
