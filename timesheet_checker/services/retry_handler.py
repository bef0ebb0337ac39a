"""
Retry handler with exponential backoff and jitter for HTTP calls.
"""

import logging
import random
import time
from typing import Any, Callable, Optional

import requests

logger = logging.getLogger(__name__)


class RetryExhaustedException(Exception):
    """Raised when all retry attempts have been exhausted."""

    pass


def is_transient_error(exception: Exception) -> bool:
    """
    Default retry condition - retry on transient HTTP errors.

    Args:
        exception: The exception that occurred

    Returns:
        True for connection errors, timeouts, HTTP 429 and 5xx responses
    """
    if isinstance(exception, requests.exceptions.HTTPError):
        response = exception.response
        if response is None:
            return False
        return response.status_code == 429 or 500 <= response.status_code < 600

    return isinstance(
        exception,
        (requests.exceptions.ConnectionError, requests.exceptions.Timeout),
    )


class RetryHandler:
    """
    Handles retries with exponential backoff and jitter.

    Example:
        >>> handler = RetryHandler(max_retries=2, base_delay=0.5)
        >>> response = handler.execute_with_retry(session.post, url, data=form)
    """

    def __init__(
        self,
        max_retries: int = 3,
        base_delay: float = 1.0,
        max_delay: float = 30.0,
        exponential_base: float = 2,
        jitter_factor: float = 0.1,
        retry_condition: Optional[Callable[[Exception], bool]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize retry handler.

        Args:
            max_retries: Maximum number of retry attempts
            base_delay: Base delay for exponential backoff (seconds)
            max_delay: Maximum delay between retries (seconds)
            exponential_base: Base for exponential backoff calculation
            jitter_factor: Factor for random jitter (0.0 to 1.0)
            retry_condition: Function deciding whether an error is retryable
            sleep: Function used to wait between attempts
        """
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.exponential_base = exponential_base
        self.jitter_factor = jitter_factor
        self.retry_condition = retry_condition or is_transient_error
        self._sleep = sleep

        self.total_retries = 0

    def _calculate_delay(self, attempt: int) -> float:
        """
        Calculate delay for exponential backoff with jitter.

        Args:
            attempt: Current attempt number (0-based)

        Returns:
            Delay in seconds
        """
        delay = min(self.base_delay * (self.exponential_base**attempt), self.max_delay)
        jitter = random.uniform(-self.jitter_factor, self.jitter_factor) * delay
        return max(0, delay + jitter)

    def execute_with_retry(self, func: Callable, *args, **kwargs) -> Any:
        """
        Execute function with retry logic.

        Args:
            func: Function to execute
            *args: Positional arguments for function
            **kwargs: Keyword arguments for function

        Returns:
            Result of function execution

        Raises:
            RetryExhaustedException: If all retries are exhausted
            Exception: Original exception if not retryable
        """
        func_name = getattr(func, "__name__", repr(func))

        for attempt in range(self.max_retries + 1):  # +1 for initial attempt
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                if not self.retry_condition(e):
                    logger.debug(f"Not retrying - condition not met: {type(e).__name__}")
                    raise

                if attempt >= self.max_retries:
                    logger.warning(
                        f"Max retries ({self.max_retries}) exceeded for {func_name}"
                    )
                    raise RetryExhaustedException(
                        f"Max retries ({self.max_retries}) exceeded. "
                        f"Last error: {type(e).__name__}: {e}"
                    ) from e

                delay = self._calculate_delay(attempt)
                logger.debug(
                    f"Retrying {func_name} in {delay:.2f}s "
                    f"(attempt {attempt + 1}/{self.max_retries + 1}). "
                    f"Error: {type(e).__name__}: {e}"
                )
                self.total_retries += 1
                self._sleep(delay)
                continue

            if attempt > 0:
                logger.info(f"Function {func_name} succeeded after {attempt} retries")
            return result

        raise RetryExhaustedException(f"No attempts made for {func_name}")
