"""Retry with exponential backoff and jitter for NetSuite requests.

The retry engine wraps an arbitrary coroutine factory. Every attempt calls the
factory again, so work done inside it (such as OAuth signing) is redone per
attempt and never reused from a previous one.

## Backoff

| Attempt index | Base delay (defaults) |
|---------------|-----------------------|
| 0 | 1s |
| 1 | 2s |
| 2 | 4s |
| n | min(initial_delay * backoff_factor ** n, max_delay) |

Each delay gets ±25% uniform jitter, clamped to ``[0, max_delay * 1.25]``.

## What is retried

By default: `NetSuiteError` instances whose `is_retryable` is true (5xx,
TIMEOUT, NETWORK_ERROR), and any other exception, which is presumed
transient. Client errors (4xx, including 401/403) are never retried.

## Example

```python
from netsuite_sdk.transport.retry import with_retry

result = await with_retry(lambda: fetch_page(offset), max_retries=5, initial_delay=0.5)
```
"""

import asyncio
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, replace
from typing import Any, TypeVar

from netsuite_sdk.errors.exceptions import NetSuiteError

T = TypeVar("T")

JITTER_RATIO = 0.25

ShouldRetry = Callable[[Exception, int], bool]
OnRetry = Callable[[Exception, int], None]


def default_should_retry(error: Exception, attempt: int) -> bool:
    """Retry retryable NetSuite errors and anything outside the known taxonomy."""
    if isinstance(error, NetSuiteError):
        return error.is_retryable
    return True


@dataclass
class RetryConfig:
    """Retry policy for one logical request.

    Attributes:
        max_retries: Retries after the initial attempt (total attempts = max_retries + 1).
        initial_delay: Delay before the first retry, in seconds.
        max_delay: Upper bound of the base delay, in seconds.
        backoff_factor: Multiplier applied per attempt.
        should_retry: Predicate over (error, attempt index).
        on_retry: Observer called with (error, retry number) before each backoff sleep.
    """

    max_retries: int = 3
    initial_delay: float = 1.0
    max_delay: float = 30.0
    backoff_factor: float = 2.0
    should_retry: ShouldRetry = default_should_retry
    on_retry: OnRetry | None = None


def compute_backoff_delay(
    attempt: int,
    *,
    initial_delay: float,
    max_delay: float,
    backoff_factor: float,
    random_fn: Callable[[], float] = random.random,
) -> float:
    """Calculate the jittered delay before the retry following ``attempt``.

    Args:
        attempt: Index of the attempt that just failed (0-indexed)
        initial_delay: Base delay in seconds
        max_delay: Cap for the base delay in seconds
        backoff_factor: Exponential multiplier
        random_fn: Source of uniform values in [0, 1)

    Returns:
        Delay in seconds, never negative and never above ``max_delay * 1.25``
    """
    delay = min(initial_delay * (backoff_factor**attempt), max_delay)
    jitter = delay * JITTER_RATIO * (random_fn() * 2 - 1)
    return min(max(0.0, delay + jitter), max_delay * (1 + JITTER_RATIO))


async def with_retry(
    fn: Callable[[], Awaitable[T]],
    config: RetryConfig | None = None,
    **overrides: Any,
) -> T:
    """Run ``fn`` with bounded retries.

    Args:
        fn: Zero-argument callable returning a fresh awaitable per attempt
        config: Base retry policy (defaults to ``RetryConfig()``)
        **overrides: Field overrides applied on top of ``config``

    Returns:
        The first successful result of ``fn``

    Raises:
        The last error raised by ``fn`` once retries are exhausted or the
        predicate rejects it.
    """
    policy = replace(config or RetryConfig(), **overrides)
    max_retries = max(0, policy.max_retries)

    attempt = 0
    while True:
        try:
            return await fn()
        except Exception as error:
            if attempt >= max_retries or not policy.should_retry(error, attempt):
                raise

            if policy.on_retry is not None:
                policy.on_retry(error, attempt + 1)

            delay = compute_backoff_delay(
                attempt,
                initial_delay=policy.initial_delay,
                max_delay=policy.max_delay,
                backoff_factor=policy.backoff_factor,
            )
            await asyncio.sleep(delay)
            attempt += 1
