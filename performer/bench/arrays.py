"""Helpers to build input data for benchmarked functions."""

import random
import uuid
from collections.abc import Callable
from typing import Any

from performer.bench.errors import InvalidArgumentError

DEFAULT_ARRAY_SIZE = 1_000


def create_custom_array(
    generator_function: Callable[[], Any], size: int = DEFAULT_ARRAY_SIZE
) -> list[Any]:
    """Create a list of ``size`` values produced by ``generator_function``.

    Raises:
        InvalidArgumentError: If generator_function is not callable.
    """
    if not callable(generator_function):
        raise InvalidArgumentError("generator_function must be a function")

    return _create_array_using_generator_function(generator_function, size)


def create_random_number_array(size: int = DEFAULT_ARRAY_SIZE) -> list[float]:
    """Create a list of random floats in [0, 1)."""
    return _create_array_using_generator_function(random.random, size)


def create_random_string_array(size: int = DEFAULT_ARRAY_SIZE) -> list[str]:
    """Create a list of random UUID4 strings (36 characters each)."""
    return _create_array_using_generator_function(lambda: str(uuid.uuid4()), size)


def _create_array_using_generator_function(
    generator_function: Callable[[], Any], size: int
) -> list[Any]:
    return [generator_function() for _ in range(size)]
