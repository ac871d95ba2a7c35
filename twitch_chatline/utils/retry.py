"""Retry utilities for asynchronous operations using Tenacity."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..errors import NetworkError

T = TypeVar("T")


class RetryableException(Exception):
    """Exception raised to indicate an operation should be retried."""


class RetryExhaustedError(Exception):
    """Exception raised when all retry attempts have been exhausted."""

    def __init__(self, message: str, attempts: int, final_exception: BaseException | None = None) -> None:
        super().__init__(message)
        self.attempts = attempts
        self.final_exception = final_exception


async def retry_async(
    operation: Callable[[int], Awaitable[tuple[T | None, bool]]],
    max_attempts: int = 5,
    max_wait: float = 30,
) -> T:
    """Retry an asynchronous operation with exponential backoff using Tenacity.

    Args:
        operation: Async callable that takes the attempt number (1-based) and
            returns ``(result, should_retry)``.
        max_attempts: Maximum number of attempts.
        max_wait: Upper bound for a single backoff delay in seconds.

    Returns:
        The result from operation if successful.

    Raises:
        RetryExhaustedError: If all attempts are exhausted.
    """

    async def wrapped_operation(attempt: int) -> T | None:
        try:
            result, should_retry = await operation(attempt)
        except (OSError, asyncio.TimeoutError, NetworkError) as e:
            raise RetryableException("Exception occurred, retrying") from e
        if should_retry:
            raise RetryableException("Operation indicated retry is needed")
        return result

    retrying = AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=1, max=max_wait),
        retry=retry_if_exception_type(RetryableException),
        reraise=True,
    )

    try:
        async for attempt in retrying:
            with attempt:
                return await wrapped_operation(attempt.retry_state.attempt_number)
    except RetryableException as e:
        raise RetryExhaustedError(
            f"Operation failed after {max_attempts} attempts",
            attempts=max_attempts,
            final_exception=e.__cause__ or e,
        ) from e
    raise RetryExhaustedError(  # pragma: no cover - loop always returns or raises
        f"Operation failed after {max_attempts} attempts", attempts=max_attempts
    )
