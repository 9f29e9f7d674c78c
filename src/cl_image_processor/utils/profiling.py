"""Timing helpers for image processing calls."""

import time
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


def timed(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator logging how long the wrapped call took, at INFO level.

    The elapsed time is logged even when the call raises, so aborted
    requests show up in the profile too.

    Usage:
        @timed
        def process(self, source, request):
            ...
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_time = time.perf_counter() - start_time
            logger.info(f"[PROFILE] {func.__qualname__} took {elapsed_time:.3f}s")

    return wrapper
