"""Decorator that measures how long a function takes.

Usage::

    from fib_report.timing import timed

    @timed
    def my_function():
        ...

The elapsed time is logged at INFO level on the ``fib_report.timing``
logger rather than printed, so decorated code never adds output of its own.
"""

import functools
import logging
import time
from typing import Any, Callable, TypeVar

T = TypeVar("T", bound=Callable[..., Any])

logger = logging.getLogger(__name__)


def timed(func: T) -> T:
    """Measure execution time of *func*.

    The decorated function returns its original result. The measurement is
    logged even when *func* raises.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed = time.perf_counter() - start
            logger.info({"event": "timed", "function": func.__name__, "elapsed": round(elapsed, 6)})

    return wrapper  # type: ignore[return-value]
