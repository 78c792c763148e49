"""Environment variable helpers with type coercion.

Usage:
    from benchtimer.utils.env import get_env, require_env

    workers = get_env("BENCHTIMER_MAX_WORKERS", as_type=int)
    unit = get_env("BENCHTIMER_UNIT", default=DurationUnit.MILLISECONDS,
                   as_type=DurationUnit)
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Any, TypeVar, cast

T = TypeVar("T")


class EnvVarError(Exception):
    """Base exception for environment variable errors."""

    pass


class EnvVarNotSetError(EnvVarError):
    """Raised when a required environment variable is not set."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Required environment variable not set: {name}")


class EnvVarTypeError(EnvVarError):
    """Raised when an environment variable cannot be converted to the expected type."""

    def __init__(self, name: str, value: str, expected_type: type) -> None:
        self.name = name
        self.value = value
        self.expected_type = expected_type
        super().__init__(f"Cannot convert {name}='{value}' to {expected_type.__name__}")


def _coerce_type(name: str, value: str, as_type: type) -> Any:
    """Convert a raw environment string to ``as_type``.

    Enums are looked up by value after stripping and lower-casing, so
    ``BENCHTIMER_MODE=Concurrent`` resolves to ``ExecutionMode.CONCURRENT``.

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    try:
        if as_type is bool:
            return value.lower() not in ("false", "0", "", "no", "off")
        if isinstance(as_type, type) and issubclass(as_type, Enum):
            return as_type(value.strip().lower())
        return as_type(value)
    except (ValueError, TypeError) as e:
        raise EnvVarTypeError(name, value, as_type) from e


def get_env(
    name: str,
    *,
    default: T | None = None,
    as_type: type[T] | None = None,
) -> T | str | None:
    """Get an environment variable with optional type coercion.

    Args:
        name: Environment variable name.
        default: Returned when the variable is unset or empty.
        as_type: bool, int, float, str or an Enum subclass.

    Returns:
        The converted value, or default.

    Raises:
        EnvVarTypeError: If as_type is given and conversion fails.
    """
    value = os.environ.get(name)
    if value is None or value == "":
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))
    return value


def require_env(name: str, *, as_type: type[T] | None = None) -> T | str:
    """Get a required environment variable.

    Raises:
        EnvVarNotSetError: If the variable is not set.
        EnvVarTypeError: If as_type is given and conversion fails.
    """
    value = os.environ.get(name)
    if value is None:
        raise EnvVarNotSetError(name)

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))
    return value


def env_is_set(name: str) -> bool:
    """Check if an environment variable is set and non-empty."""
    value = os.environ.get(name)
    return value is not None and value != ""
