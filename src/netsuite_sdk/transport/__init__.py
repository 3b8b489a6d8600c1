"""Transport layer: signing, retry and middleware around httpx.

Modules:
    http: `HttpTransport`, the signed and retrying request executor
    middleware: Middleware interface, built-in middlewares and the chain executor
    retry: Retry engine with exponential backoff and jitter

Example:
    ```python
    from netsuite_sdk.transport import HttpTransport, ResponseCacheMiddleware

    transport = HttpTransport(config).use(ResponseCacheMiddleware(ttl=30))
    response = await transport.request(url)
    ```
"""

from netsuite_sdk.transport.http import HttpMethod, HttpTransport, NetSuiteResponse
from netsuite_sdk.transport.middleware import (
    FunctionMiddleware,
    HeadersMiddleware,
    Middleware,
    RateLimitMiddleware,
    RequestContext,
    ResponseCacheMiddleware,
    ResponseContext,
    execute_middleware_chain,
)
from netsuite_sdk.transport.retry import RetryConfig, compute_backoff_delay, default_should_retry, with_retry

__all__ = [
    "FunctionMiddleware",
    "HeadersMiddleware",
    "HttpMethod",
    "HttpTransport",
    "Middleware",
    "NetSuiteResponse",
    "RateLimitMiddleware",
    "RequestContext",
    "ResponseCacheMiddleware",
    "ResponseContext",
    "RetryConfig",
    "compute_backoff_delay",
    "default_should_retry",
    "execute_middleware_chain",
    "with_retry",
]
