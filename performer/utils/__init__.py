"""Performer utilities - logging and environment helpers."""

from performer.utils.env import (
    EnvVarError,
    EnvVarTypeError,
    get_env,
)
from performer.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarTypeError",
    "get_env",
    # Logger
    "LogLevel",
    "Logger",
    "LoggerNotConfiguredError",
]
