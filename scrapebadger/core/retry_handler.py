"""Retry handler with exponential backoff for failed requests."""

import asyncio
import time
from typing import Any, Awaitable, Callable, TypeVar

from loguru import logger

from scrapebadger.core.exceptions import ErrorKind, RateLimitError, ScrapeBadgerError

T = TypeVar("T")

# Server-provided rate limit waits at or above this are ignored
MAX_RATE_LIMIT_WAIT = 60.0


class RetryHandler:
    """
    Handles retrying failed requests with exponential backoff.

    Only transient errors (rate limits, server errors, timeouts and
    unclassified failures) are retried. The delay before retry ``n``
    (zero-indexed) is ``base_delay * 2 ** n``; rate limit errors that carry
    a reset timestamp less than a minute away wait until that reset instead.
    """

    def __init__(
        self,
        max_retries: int = 3,
        base_delay: float = 1.0,
        exponential_base: float = 2.0,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        clock: Callable[[], float] = time.time,
    ):
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.exponential_base = exponential_base
        self._sleep = sleep
        self._clock = clock

    async def execute(self, func: Callable[[], Awaitable[T]]) -> T:
        """
        Execute a coroutine function with retry logic.

        Args:
            func: Zero-argument async callable performing one attempt

        Returns:
            The result of the first successful attempt

        Raises:
            ScrapeBadgerError: The fatal error, or the last transient error
                once all retries are exhausted
        """
        last_exception: ScrapeBadgerError | None = None

        for attempt in range(self.max_retries + 1):
            try:
                return await func()
            except ScrapeBadgerError as e:
                last_exception = e

                if not e.retryable:
                    logger.debug(f"Not retrying {e.kind.value} error: {e}")
                    raise

                if attempt >= self.max_retries:
                    logger.error(
                        f"Giving up after {attempt + 1} attempt(s): {e.__class__.__name__}: {e}"
                    )
                    raise

                delay = self.get_delay(attempt, e)
                logger.warning(
                    f"Attempt {attempt + 1}/{self.max_retries + 1} failed: {e}. "
                    f"Retrying in {delay:.2f}s..."
                )
                await self._sleep(delay)

        raise last_exception or ScrapeBadgerError("Request failed after retries")

    def get_delay(self, attempt: int, error: ScrapeBadgerError) -> float:
        """Delay before the retry following ``attempt``."""
        if error.kind is ErrorKind.RATE_LIMIT:
            server_delay = self._rate_limit_delay(error)
            if server_delay is not None:
                return server_delay
        return self._calculate_delay(attempt)

    def _calculate_delay(self, attempt: int) -> float:
        """Calculate the delay for a retry attempt using exponential backoff."""
        return self.base_delay * (self.exponential_base ** attempt)

    def _rate_limit_delay(self, error: ScrapeBadgerError) -> float | None:
        if not isinstance(error, RateLimitError) or not error.retry_after:
            return None

        try:
            reset_at = float(error.retry_after)
        except (TypeError, ValueError):
            logger.debug(f"Ignoring non-numeric rate limit reset: {error.retry_after!r}")
            return None

        server_delay = reset_at - self._clock()
        if 0 < server_delay < MAX_RATE_LIMIT_WAIT:
            return server_delay
        return None
