"""Export models for benchtimer results."""

from benchtimer.models.timer_models import BenchReport, TimerSnapshot

__all__ = [
    "BenchReport",
    "TimerSnapshot",
]
