"""Retry service with a fixed backoff ladder for upstream calls."""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, Sequence, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
    wait_chain,
    wait_fixed,
)

from designengine.models.errors import ErrorCode, GenerationEngineError, RetriesExhausted, is_retryable
from designengine.utils.timing import BACKOFF_SCHEDULE_MS, MAX_ATTEMPTS, Sleeper, sleep

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryableError(GenerationEngineError):
    """Transient failure (HTTP 500/503, network error, timeout) worth another attempt."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        original_exception: Exception | None = None,
        status_code: int | None = None,
        body: str | None = None,
    ):
        super().__init__(error_code, message)
        self.original_exception = original_exception
        self.status_code = status_code
        self.body = body


def fixed_backoff(schedule_ms: Sequence[float]) -> wait_chain:
    """Wait ``schedule_ms[n - 1]`` after the n-th failed attempt (last entry repeats)."""
    if not schedule_ms:
        raise ValueError("backoff schedule must not be empty")
    return wait_chain(*[wait_fixed(ms / 1000.0) for ms in schedule_ms])


def _log_retry(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    delay_ms = int((retry_state.next_action.sleep if retry_state.next_action else 0) * 1000)
    logger.warning(
        f"🔁 [RetryService] Attempt {retry_state.attempt_number} failed ({error}), retrying in {delay_ms}ms..."
    )


async def retry_with_backoff(
    func: Callable[..., Awaitable[T]],
    *args: Any,
    sleep: Sleeper = sleep,
    max_attempts: int = MAX_ATTEMPTS,
    backoff_schedule_ms: Sequence[float] = BACKOFF_SCHEDULE_MS,
    timeout_seconds: Optional[float] = None,
    **kwargs: Any,
) -> T:
    """
    Execute an async function with a bounded retry loop and fixed backoff.

    Args:
        func: Async function to execute
        *args: Positional arguments for func
        sleep: Millisecond sleeper used between attempts
        max_attempts: Total attempts, including the first
        backoff_schedule_ms: Delay after each failed attempt, indexed by attempt
        timeout_seconds: Optional timeout per attempt. If None, no timeout is applied.
        **kwargs: Keyword arguments for func

    Returns:
        Result from func

    Raises:
        RetriesExhausted: If every attempt failed with a RetryableError
        Exception: Non-retryable exceptions are re-raised immediately
    """

    async def _sleep_seconds(seconds: float) -> None:
        await sleep(seconds * 1000.0)

    async def _execute_with_timeout() -> T:
        """Execute func with optional timeout."""
        if timeout_seconds is not None:
            try:
                return await asyncio.wait_for(func(*args, **kwargs), timeout=timeout_seconds)
            except asyncio.TimeoutError as e:
                raise RetryableError(
                    ErrorCode.PROVIDER_TIMEOUT,
                    f"Request timed out after {timeout_seconds}s",
                    original_exception=e,
                )
        return await func(*args, **kwargs)

    retrying = AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=fixed_backoff(backoff_schedule_ms),
        retry=retry_if_exception_type(RetryableError),
        before_sleep=_log_retry,
        sleep=_sleep_seconds,
        reraise=False,
    )

    try:
        async for attempt in retrying:
            with attempt:
                return await _execute_with_timeout()
    except RetryError as e:
        last_error = e.last_attempt.exception()
        raise RetriesExhausted(e.last_attempt.attempt_number, last_error) from last_error

    # Unreachable: AsyncRetrying either returns, raises or raises RetryError
    raise RetriesExhausted(max_attempts)


def should_retry(error_code: ErrorCode) -> bool:
    """Check if an error code belongs to the automatic retry ladder."""
    return is_retryable(error_code)
