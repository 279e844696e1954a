"""Performance monitoring utilities."""

import time
from functools import wraps
from typing import Callable, Any
from loguru import logger


def timed(operation: str = None, threshold_ms: float = 0):
    """Decorator for timing function execution.

    Timing is logged even when the wrapped call raises; the exception
    itself propagates untouched.

    Args:
        operation: Description of the operation (defaults to function name)
        threshold_ms: Only log if operation takes longer than this (in milliseconds)

    Example:
        >>> @timed("Ranking", threshold_ms=50)
        ... def rank(query, candidates):
        ...     ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            op_name = operation or f"{func.__module__}.{func.__qualname__}"

            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                elapsed_ms = (time.perf_counter() - start) * 1000

                if elapsed_ms >= threshold_ms:
                    if elapsed_ms > 1000:
                        logger.info(f"{op_name} took {elapsed_ms/1000:.2f}s")
                    else:
                        logger.debug(f"{op_name} took {elapsed_ms:.2f}ms")

        return wrapper
    return decorator
