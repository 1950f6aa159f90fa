"""Environment variable helpers with type coercion.

Benchmark defaults can be tuned without code changes:

    PERFORMER_MAX_ITERATIONS=50 PERFORMER_MAX_TOTAL_DURATION_MS=5000 \\
        performer run mymod:build_index

Usage:
    from performer.utils.env import get_env

    iterations = get_env("PERFORMER_MAX_ITERATIONS", default=10, as_type=int)
    log_level = get_env("PERFORMER_LOG_LEVEL", default="INFO")
"""

from __future__ import annotations

import os
from typing import Any, TypeVar, cast, overload

T = TypeVar("T")


class EnvVarError(Exception):
    """Base exception for environment variable errors."""

    pass


class EnvVarTypeError(EnvVarError):
    """Raised when an environment variable cannot be converted to the expected type."""

    def __init__(self, name: str, value: str, expected_type: type) -> None:
        self.name = name
        self.value = value
        self.expected_type = expected_type
        super().__init__(f"Cannot convert {name}='{value}' to {expected_type.__name__}")


def _coerce_type(name: str, value: str, as_type: type) -> Any:
    """Convert a string value to the specified type.

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    try:
        # "false", "0", "" and friends are False
        if as_type is bool:
            return value.lower() not in ("false", "0", "", "no", "off")
        if as_type is int:
            return int(value)
        if as_type is float:
            return float(value)
        if as_type is str:
            return value
        return as_type(value)

    except (ValueError, TypeError) as e:
        raise EnvVarTypeError(name, value, as_type) from e


def _log_access(name: str, value: str | None) -> None:
    """Log environment variable reads once the logger is configured."""
    from performer.utils.logger import Logger

    log = Logger.get_if_configured("env")
    if log is not None:
        log.debug(f"ENV GET {name}={value}")


@overload
def get_env(name: str, *, default: T, as_type: type[T], log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, default: T, log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, as_type: type[T], log: bool = ...) -> T | None:
    ...


@overload
def get_env(name: str, *, log: bool = ...) -> str | None:
    ...


def get_env(
    name: str,
    *,
    default: T | None = None,
    as_type: type[T] | None = None,
    log: bool = False,
) -> T | str | None:
    """Get an environment variable with optional type coercion.

    Args:
        name: Environment variable name.
        default: Returned when the variable is not set.
        as_type: bool, int, float, str or any type constructible from a string.
        log: If True, log the access (only when Logger is configured).

    Returns:
        The converted value, or default if not set.

    Raises:
        EnvVarTypeError: If as_type is specified and conversion fails.

    Examples:
        >>> get_env("PERFORMER_MAX_ITERATIONS", default=10, as_type=int)
        10
    """
    value = os.environ.get(name)

    if log:
        _log_access(name, value)

    if value is None:
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value
