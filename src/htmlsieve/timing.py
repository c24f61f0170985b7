"""Timing helpers for the filtering pipeline."""

import logging
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import wraps
from typing import ParamSpec, TypeVar

from htmlsieve.logger import logger

__all__ = ["timeit", "timer"]

P = ParamSpec("P")
R = TypeVar("R")


@contextmanager
def timer(name: str = "Operation", log_level: int = logging.DEBUG) -> Iterator[None]:
    """Log how long the wrapped block took.

    Example:
        >>> with timer("Tokenizing page"):
        ...     tokens = tokenize(body)

    """
    start_time = time.perf_counter()
    try:
        yield
    finally:
        elapsed_time = time.perf_counter() - start_time
        logger.log(log_level, "%s took %.4f seconds", name, elapsed_time)


def timeit(
    name: str | None = None, log_level: int = logging.DEBUG
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Log the run time of every call to the decorated function.

    Args:
        name: Operation name (default: module-qualified function name)
        log_level: Logging level to use (default: DEBUG)

    """
    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        operation_name = name or f"{func.__module__}.{func.__name__}"

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with timer(operation_name, log_level):
                return func(*args, **kwargs)

        return wrapper
    return decorator
