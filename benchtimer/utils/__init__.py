"""Benchtimer utilities - logging and environment helpers."""

from benchtimer.utils.env import (
    EnvVarError,
    EnvVarNotSetError,
    EnvVarTypeError,
    env_is_set,
    get_env,
    require_env,
)
from benchtimer.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarNotSetError",
    "EnvVarTypeError",
    "LogLevel",
    # Logger
    "Logger",
    "LoggerNotConfiguredError",
    "env_is_set",
    "get_env",
    "require_env",
]
