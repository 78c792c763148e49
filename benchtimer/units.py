"""Duration units used to render timer samples.

A unit is fixed per Timer or BenchTimer at construction. Raw clock readings
are integer nanoseconds; casting into a coarser unit truncates toward zero.

Usage:
    from benchtimer.units import DurationUnit

    DurationUnit.MILLISECONDS.from_nanoseconds(2_600_000)  # -> 2
    DurationUnit.parse("us")                               # -> MICROSECONDS
"""

from enum import Enum

_NS_PER_TICK = {
    "ns": 1,
    "us": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "min": 60 * 1_000_000_000,
    "h": 3_600 * 1_000_000_000,
    "d": 86_400 * 1_000_000_000,
    "w": 7 * 86_400 * 1_000_000_000,
}

_ALIASES = {
    "nanosecond": "ns",
    "nanoseconds": "ns",
    "nanos": "ns",
    "microsecond": "us",
    "microseconds": "us",
    "micros": "us",
    "µs": "us",
    "millisecond": "ms",
    "milliseconds": "ms",
    "millis": "ms",
    "second": "s",
    "seconds": "s",
    "sec": "s",
    "secs": "s",
    "minute": "min",
    "minutes": "min",
    "m": "min",
    "hour": "h",
    "hours": "h",
    "day": "d",
    "days": "d",
    "week": "w",
    "weeks": "w",
}


class UnknownUnitError(ValueError):
    """Raised when a string does not name a supported duration unit."""

    def __init__(self, name: str) -> None:
        self.name = name
        valid = ", ".join(unit.value for unit in DurationUnit)
        super().__init__(f"Unknown duration unit: '{name}'. Valid: {valid}")


class DurationUnit(Enum):
    """Fixed-ratio time unit; the value is the display symbol."""

    NANOSECONDS = "ns"
    MICROSECONDS = "us"
    MILLISECONDS = "ms"
    SECONDS = "s"
    MINUTES = "min"
    HOURS = "h"
    DAYS = "d"
    WEEKS = "w"

    @classmethod
    def _missing_(cls, value: object) -> "DurationUnit | None":
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        key = _ALIASES.get(key, key)
        for member in cls:
            if member.value == key or member.name.lower() == key:
                return member
        return None

    @classmethod
    def parse(cls, name: "str | DurationUnit") -> "DurationUnit":
        """Resolve a symbol, member name, or alias to a unit.

        Raises:
            UnknownUnitError: If the name matches no unit.
        """
        if isinstance(name, DurationUnit):
            return name
        try:
            return cls(name)
        except ValueError:
            raise UnknownUnitError(str(name)) from None

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def nanoseconds(self) -> int:
        """Length of one tick of this unit in nanoseconds."""
        return _NS_PER_TICK[self.value]

    def from_nanoseconds(self, ns: int) -> int:
        """Cast a nanosecond count into this unit, truncating toward zero."""
        tick = self.nanoseconds
        if ns < 0:
            return -(-ns // tick)
        return ns // tick

    def to_nanoseconds(self, value: int) -> int:
        return value * self.nanoseconds

    def convert(self, value: int, target: "DurationUnit") -> int:
        """Cast ``value`` expressed in this unit into ``target``."""
        return target.from_nanoseconds(self.to_nanoseconds(value))

    def format(self, value: float) -> str:
        if isinstance(value, float):
            return f"{value:.2f}{self.value}"
        return f"{value}{self.value}"
