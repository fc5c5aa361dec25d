"""
Retry with exponential backoff for fetching postal data over HTTP.
"""

import time
import functools
from typing import Callable, Iterator, Optional, Tuple, Type


class RetryError(Exception):
    """Raised when all retry attempts are exhausted."""
    pass


def backoff_delays(max_retries: int, base_delay: float) -> Iterator[float]:
    """Sleep before each retry: base_delay, then doubling."""
    for attempt in range(max_retries):
        yield base_delay * 2 ** attempt


def exponential_backoff(
    max_retries: int = 3,
    base_delay: float = 1.0,
    exceptions: Tuple[Type[Exception], ...] = (Exception,),
    on_retry: Optional[Callable] = None,
):
    """
    Retry the decorated call on `exceptions`, doubling the pause each time.

    `on_retry(attempt, error, delay, *args, **kwargs)` is told about each
    retry before the pause and receives the call's own arguments, so a
    fetch can report which URL it is retrying. After the last attempt the
    failure surfaces as RetryError chained to the original error.

    Example:
        @exponential_backoff(max_retries=3, exceptions=(requests.exceptions.Timeout,))
        def get_document(url):
            return requests.get(url, timeout=15)
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            attempt = 0
            for delay in backoff_delays(max_retries, base_delay):
                try:
                    return func(*args, **kwargs)
                except exceptions as e:
                    attempt += 1
                    if on_retry:
                        on_retry(attempt, e, delay, *args, **kwargs)
                    time.sleep(delay)
            try:
                return func(*args, **kwargs)
            except exceptions as e:
                raise RetryError(f"Failed after {max_retries + 1} attempts: {e}") from e

        return wrapper
    return decorator
