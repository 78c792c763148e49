"""Benchtimer - named stopwatches for micro-benchmarking."""

from benchtimer.registry import BenchTimer, ExecutionMode
from benchtimer.timer import BenchTimerError, EmptyTimerError, Timer
from benchtimer.units import DurationUnit, UnknownUnitError
from benchtimer.version.benchtimer_version import BENCHTIMER_VERSION, Version

__version__ = str(BENCHTIMER_VERSION)
__version_info__ = BENCHTIMER_VERSION

__all__ = [
    "BENCHTIMER_VERSION",
    "BenchTimer",
    "BenchTimerError",
    "DurationUnit",
    "EmptyTimerError",
    "ExecutionMode",
    "Timer",
    "UnknownUnitError",
    "Version",
    "__version__",
    "__version_info__",
]
