"""Exponential backoff for flaky collaborator calls."""

from __future__ import annotations

import asyncio
import functools
import random
from typing import Any, Callable, TypeVar

from netnav.utils.logging import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def backoff_delay(attempt: int, base_delay: float, max_delay: float) -> float:
    """Capped exponential delay for ``attempt`` (1-based) plus up to 50% jitter."""
    delay = min(base_delay * 2 ** (attempt - 1), max_delay)
    return delay + random.uniform(0, delay / 2)


def async_retry(
    max_attempts: int = 3,
    base_delay: float = 0.5,
    max_delay: float = 10.0,
    retryable_exceptions: tuple[type[Exception], ...] = (Exception,),
) -> Callable[[F], F]:
    """Retry an async callable on ``retryable_exceptions``; anything else propagates at once."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            attempt = 1
            while True:
                try:
                    return await func(*args, **kwargs)
                except retryable_exceptions as exc:
                    if attempt >= max_attempts:
                        logger.error("retries_exhausted", func=func.__name__, attempts=attempt)
                        raise
                    pause = backoff_delay(attempt, base_delay, max_delay)
                    logger.warning(
                        "retry_attempt",
                        func=func.__name__,
                        attempt=attempt,
                        delay=round(pause, 2),
                        error=str(exc),
                    )
                    await asyncio.sleep(pause)
                    attempt += 1

        return wrapper  # type: ignore[return-value]

    return decorator
