"""Ordered request/response middleware.

A middleware receives the mutable `RequestContext` and a ``call_next``
continuation. It can:

- mutate the context and ``await call_next()`` to continue the chain,
- ``await call_next()`` and transform the returned `ResponseContext`,
- return a `ResponseContext` without calling ``call_next`` (short-circuit).

Middlewares run in registration order on the way in and in reverse order on
the way out.

Example:
    ```python
    class TagRequests(Middleware):
        async def handle(self, context, call_next):
            context.headers["X-Request-Source"] = "billing-sync"
            return await call_next()

    client.use(TagRequests())
    ```
"""

import asyncio
import copy
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any

import httpx

from netsuite_sdk.utils.cache import ResponseCache, create_cache_key
from netsuite_sdk.utils.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


@dataclass
class RequestContext:
    """One outgoing request, shared by every middleware of the chain."""

    url: str
    method: str
    headers: httpx.Headers
    body: Any = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class ResponseContext:
    """One physical response (or a response produced by a middleware)."""

    status: int
    headers: dict[str, str]
    body: Any
    duration_ms: int = 0


CallNext = Callable[[], Awaitable[ResponseContext]]


class Middleware(ABC):
    """Interceptor around the terminal HTTP call."""

    @abstractmethod
    async def handle(self, context: RequestContext, call_next: CallNext) -> ResponseContext:
        """Process a request, usually by delegating to ``call_next``."""


class FunctionMiddleware(Middleware):
    """Adapt a plain ``async def fn(context, call_next)`` into a middleware."""

    def __init__(self, fn: Callable[[RequestContext, CallNext], Awaitable[ResponseContext]]):
        self._fn = fn

    async def handle(self, context: RequestContext, call_next: CallNext) -> ResponseContext:
        return await self._fn(context, call_next)

    def __repr__(self) -> str:
        return f"FunctionMiddleware({getattr(self._fn, '__name__', self._fn)!r})"


class HeadersMiddleware(Middleware):
    """Set static headers on every request, overriding earlier values."""

    def __init__(self, headers: Mapping[str, str]):
        self._headers = dict(headers)

    async def handle(self, context: RequestContext, call_next: CallNext) -> ResponseContext:
        context.headers.update(self._headers)
        return await call_next()


class ResponseCacheMiddleware(Middleware):
    """Serve repeated GET requests from a `ResponseCache`.

    Only successful GET responses are stored. A cache hit short-circuits the
    rest of the chain and sets ``metadata["cache_hit"]``. Callers get their
    own copy of the body; mutating it never alters the cached entry.
    """

    def __init__(self, ttl: float = 60.0, cache: ResponseCache | None = None):
        self.ttl = ttl
        self.cache = cache if cache is not None else ResponseCache()

    async def handle(self, context: RequestContext, call_next: CallNext) -> ResponseContext:
        if context.method != "GET":
            return await call_next()

        key = create_cache_key(context.url, context.method)
        cached = self.cache.get(key)
        if cached is not None:
            context.metadata["cache_hit"] = True
            logger.debug(f"Cache hit for {context.method} {context.url}")
            return replace(cached, body=copy.deepcopy(cached.body), duration_ms=0)

        context.metadata["cache_hit"] = False
        response = await call_next()
        if 200 <= response.status < 300:
            self.cache.set(key, replace(response, body=copy.deepcopy(response.body)), self.ttl)
        return response


class RateLimitMiddleware(Middleware):
    """Hold requests until the sliding window has a free slot."""

    def __init__(self, limiter: RateLimiter | None = None, *, max_requests: int = 100, window: float = 60.0):
        self.limiter = limiter if limiter is not None else RateLimiter(max_requests, window)

    async def handle(self, context: RequestContext, call_next: CallNext) -> ResponseContext:
        while not self.limiter.can_make_request():
            wait = self.limiter.time_until_next_slot()
            logger.debug(f"Rate limit reached, waiting {wait:.3f}s before {context.method} {context.url}")
            await asyncio.sleep(wait)
        self.limiter.record_request()
        return await call_next()


def execute_middleware_chain(
    middlewares: Sequence[Middleware],
    context: RequestContext,
    final_handler: CallNext,
) -> Awaitable[ResponseContext]:
    """Compose ``middlewares`` around ``final_handler`` and start the chain.

    Args:
        middlewares: Interceptors in registration order
        context: Request context shared by every interceptor
        final_handler: Terminal handler performing the actual call

    Returns:
        Awaitable resolving to the (possibly rewritten) response
    """
    index = 0

    def call_next() -> Awaitable[ResponseContext]:
        nonlocal index
        if index >= len(middlewares):
            return final_handler()
        middleware = middlewares[index]
        index += 1
        return middleware.handle(context, call_next)

    return call_next()
