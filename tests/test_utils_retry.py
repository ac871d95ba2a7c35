"""
Unit tests for retry utilities.
"""

import asyncio

import pytest

from twitch_chatline.errors import NetworkError
from twitch_chatline.utils.retry import RetryExhaustedError, retry_async


class TestRetryAsync:
    """Test class for retry_async functionality."""

    @pytest.mark.asyncio
    async def test_retry_async_success_first_attempt(self) -> None:
        async def operation(attempt: int) -> tuple[str, bool]:
            return "success", False

        assert await retry_async(operation, max_attempts=3, max_wait=0) == "success"

    @pytest.mark.asyncio
    async def test_retry_async_success_after_retry(self) -> None:
        seen: list[int] = []

        async def operation(attempt: int) -> tuple[str | None, bool]:
            seen.append(attempt)
            if attempt == 1:
                return None, True
            return "success", False

        result = await retry_async(operation, max_attempts=3, max_wait=0)
        assert result == "success"
        assert seen == [1, 2]

    @pytest.mark.asyncio
    async def test_retry_async_exhaust_attempts(self) -> None:
        async def operation(attempt: int) -> tuple[str | None, bool]:
            return None, True

        with pytest.raises(RetryExhaustedError) as exc_info:
            await retry_async(operation, max_attempts=2, max_wait=0)

        assert exc_info.value.attempts == 2
        assert "after 2 attempts" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_retry_async_retries_network_errors(self) -> None:
        attempts = 0

        async def operation(attempt: int) -> tuple[str, bool]:
            nonlocal attempts
            attempts += 1
            if attempts < 3:
                raise NetworkError("connection reset")
            return "ok", False

        assert await retry_async(operation, max_attempts=3, max_wait=0) == "ok"
        assert attempts == 3

    @pytest.mark.asyncio
    async def test_retry_async_keeps_final_exception(self) -> None:
        async def operation(attempt: int) -> tuple[str, bool]:
            raise OSError("refused")

        with pytest.raises(RetryExhaustedError) as exc_info:
            await retry_async(operation, max_attempts=2, max_wait=0)
        assert isinstance(exc_info.value.final_exception, OSError)

    @pytest.mark.asyncio
    async def test_retry_async_does_not_retry_other_errors(self) -> None:
        attempts = 0

        async def operation(attempt: int) -> tuple[str, bool]:
            nonlocal attempts
            attempts += 1
            raise KeyError("bug")

        with pytest.raises(KeyError):
            await retry_async(operation, max_attempts=3, max_wait=0)
        assert attempts == 1

    @pytest.mark.asyncio
    async def test_retry_async_retries_asyncio_timeouts(self) -> None:
        attempts = 0

        async def operation(attempt: int) -> tuple[str, bool]:
            nonlocal attempts
            attempts += 1
            if attempts == 1:
                raise asyncio.TimeoutError()
            return "ok", False

        assert await retry_async(operation, max_attempts=2, max_wait=0) == "ok"
        assert attempts == 2
