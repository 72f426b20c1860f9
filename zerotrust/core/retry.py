"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

Retry logic utilities for Zerotrust SDK.

This module provides async retry helpers for handling transient failures
at the transport layer (network errors, rate limiting, server errors).
Operation bindings never retry; only transports call into this module.
"""

import asyncio
from typing import Awaitable, Callable, Optional, Tuple, Type, TypeVar

from zerotrust.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


def backoff_delay(
    attempt: int,
    base_delay: float,
    max_delay: float,
    backoff_factor: float = 2.0,
) -> float:
    """
    Compute the delay before a retry.

    Args:
        attempt: Zero-based index of the retry (0 for the first retry)
        base_delay: Delay before the first retry, in seconds
        max_delay: Upper bound for any delay, in seconds
        backoff_factor: Multiplier applied per retry

    Returns:
        Delay in seconds
    """
    return min(base_delay * (backoff_factor ** attempt), max_delay)


async def retry_async(
    operation: Callable[[], Awaitable[T]],
    operation_name: str,
    max_retries: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 30.0,
    backoff_factor: float = 2.0,
    transient_exceptions: Tuple[Type[BaseException], ...] = (OSError,),
    should_retry: Optional[Callable[[T], Optional[str]]] = None,
    on_retry: Optional[Callable[[int, float, str], None]] = None,
) -> T:
    """
    Await an operation, retrying transient failures with exponential backoff.

    A result can also be classified as transient: ``should_retry`` receives
    each result and returns a reason string to retry it, or None to accept
    it. When retries run out, the last result is returned or the last
    exception is re-raised.

    Args:
        operation: Zero-argument coroutine factory to execute
        operation_name: Name of the operation for logging
        max_retries: Maximum number of retry attempts (default: 3)
        base_delay: Delay in seconds before the first retry (default: 1.0)
        max_delay: Maximum delay between attempts (default: 30.0)
        backoff_factor: Multiplier for delay between retries (default: 2.0)
        transient_exceptions: Exception types that trigger a retry
        should_retry: Optional result classifier
        on_retry: Optional callback ``(next_attempt, delay, reason)``

    Returns:
        Result of the operation

    Raises:
        Exception: The last transient exception if all retries fail

    Example:
        response = await retry_async(
            lambda: client.request("GET", "/accounts/a/gateway"),
            "GET /accounts/a/gateway",
            should_retry=lambda r: "rate limited" if r.status_code == 429 else None,
        )
    """
    for attempt in range(max_retries + 1):  # +1 for initial attempt
        is_last = attempt >= max_retries
        try:
            result = await operation()
        except transient_exceptions as e:
            if is_last:
                logger.error(
                    f"Permanent failure in {operation_name} after {max_retries + 1} attempts: {e}"
                )
                raise
            reason = f"{type(e).__name__}: {e}"
        else:
            reason = should_retry(result) if should_retry is not None else None
            if reason is None or is_last:
                return result

        delay = backoff_delay(attempt, base_delay, max_delay, backoff_factor)
        if on_retry is not None:
            on_retry(attempt + 2, delay, reason)
        await asyncio.sleep(delay)

    raise AssertionError("unreachable")  # pragma: no cover
