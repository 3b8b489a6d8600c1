"""Signed, retrying HTTP transport for the NetSuite REST API.

`HttpTransport` is the single path every NetSuite call takes:

1. re-sign the request (fresh OAuth nonce and timestamp per attempt),
2. merge headers: content-type default < client defaults < auth < per-call,
3. run the middleware chain around the actual httpx call,
4. turn non-2xx responses, timeouts and connection failures into
   `NetSuiteError` instances,

all inside `with_retry`, so each retry repeats the whole sequence.

Example:
    ```python
    async with HttpTransport(config) as transport:
        response = await transport.request(url, method="POST", body={"companyName": "Acme"})
        print(response.status, response.data)
    ```
"""

import logging
import time
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

import httpx

from netsuite_sdk.auth.oauth import OAuthSigner
from netsuite_sdk.config import NetSuiteConfig
from netsuite_sdk.errors.exceptions import NetworkError, RequestTimeoutError
from netsuite_sdk.errors.handler import error_from_response
from netsuite_sdk.transport.middleware import (
    CallNext,
    FunctionMiddleware,
    Middleware,
    RequestContext,
    ResponseContext,
    execute_middleware_chain,
)
from netsuite_sdk.transport.retry import RetryConfig, ShouldRetry, default_should_retry, with_retry

logger = logging.getLogger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

SUPPORTED_METHODS: frozenset[str] = frozenset(["GET", "POST", "PUT", "PATCH", "DELETE"])

# Methods that carry a request body; GET and DELETE bodies are dropped
BODY_METHODS: frozenset[str] = frozenset(["POST", "PUT", "PATCH"])

DEFAULT_HEADERS: dict[str, str] = {"Content-Type": "application/json"}

MAX_REDIRECTS = 5


@dataclass
class NetSuiteResponse:
    """Successful response returned by `HttpTransport.request`."""

    data: Any
    status: int
    headers: dict[str, str] = field(default_factory=dict)
    duration_ms: int = 0


class HttpTransport:
    """OAuth-signed HTTP transport with retry and middleware.

    Args:
        config: Client configuration (credentials, timeouts, retry defaults)
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests

    One ``httpx.AsyncClient`` (and its keep-alive pool) is shared by every
    request made through this transport.
    """

    def __init__(self, config: NetSuiteConfig, *, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self._signer = OAuthSigner(config.auth)
        self._middlewares: list[Middleware] = []
        self._logger = config.logger or logger
        self._client = httpx.AsyncClient(
            transport=transport,
            timeout=config.timeout,
            follow_redirects=True,
            max_redirects=MAX_REDIRECTS,
        )

    async def __aenter__(self):
        await self._client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self._client.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    @property
    def middlewares(self) -> tuple[Middleware, ...]:
        return tuple(self._middlewares)

    def use(self, middleware: Middleware | Callable[[RequestContext, CallNext], Awaitable[ResponseContext]]):
        """Append a middleware to the chain. Returns ``self`` for chaining.

        Plain async callables ``fn(context, call_next)`` are wrapped in
        `FunctionMiddleware`.
        """
        if not isinstance(middleware, Middleware):
            middleware = FunctionMiddleware(middleware)
        self._middlewares.append(middleware)
        return self

    async def request(
        self,
        url: str,
        *,
        method: HttpMethod = "GET",
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        should_retry: ShouldRetry | None = None,
    ) -> NetSuiteResponse:
        """Execute a signed request with retry and middleware.

        Args:
            url: Absolute request URL
            method: HTTP method (default: GET)
            headers: Per-call headers; these override every other header,
                including the Authorization header
            body: JSON-serializable body; only sent for POST, PUT and PATCH
            timeout: Per-attempt timeout in seconds (default: config.timeout)
            max_retries: Retry count for this call (default: config.max_retries)
            should_retry: Retry predicate for this call

        Returns:
            NetSuiteResponse with parsed body, status, headers and duration

        Raises:
            NetSuiteError: On non-2xx responses, timeouts and network failures
            ValueError: If the method is not supported or the URL cannot be signed
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")
        self._signer.check_url(url)

        timeout = self.config.timeout if timeout is None else timeout
        max_retries = self.config.max_retries if max_retries is None else max_retries

        async def attempt() -> NetSuiteResponse:
            # Signed per attempt: a retried request must never reuse a nonce
            merged = httpx.Headers(DEFAULT_HEADERS)
            merged.update(self.config.default_headers)
            merged.update(self._signer.sign(url, method))
            if headers:
                merged.update(headers)

            context = RequestContext(url=url, method=method, headers=merged, body=body)
            response = await execute_middleware_chain(
                self._middlewares,
                context,
                lambda: self._execute(context, timeout),
            )
            return NetSuiteResponse(
                data=response.body,
                status=response.status,
                headers=response.headers,
                duration_ms=response.duration_ms,
            )

        def on_retry(error: Exception, retry_number: int) -> None:
            self._log(
                logging.WARNING,
                f"Retry attempt {retry_number}/{max_retries} for {method} {url}: {error!r}",
            )

        policy = RetryConfig(
            max_retries=max_retries,
            initial_delay=self.config.retry_delay,
            max_delay=self.config.max_retry_delay,
            backoff_factor=self.config.backoff_factor,
            should_retry=should_retry or default_should_retry,
            on_retry=on_retry,
        )
        return await with_retry(attempt, policy)

    async def _execute(self, context: RequestContext, timeout: float) -> ResponseContext:
        """Terminal handler: perform the HTTP call and classify its outcome."""
        start = time.perf_counter()
        self._log(
            logging.DEBUG,
            f"{context.method} {context.url} (headers: {', '.join(context.headers.keys())})",
        )

        send_body = context.body is not None and context.method in BODY_METHODS
        content = None
        json_body = None
        if send_body:
            if isinstance(context.body, (bytes, str)):
                content = context.body
            else:
                json_body = context.body

        try:
            response = await self._client.request(
                context.method,
                context.url,
                headers=context.headers,
                content=content,
                json=json_body,
                timeout=timeout,
            )
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(
                f"Request timed out after {timeout}s",
                504,
                "TIMEOUT",
                None,
                context.url,
                context.method,
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(
                str(e) or "Network error",
                0,
                "NETWORK_ERROR",
                None,
                context.url,
                context.method,
            ) from e

        duration_ms = round((time.perf_counter() - start) * 1000)
        self._log(logging.INFO, f"{context.method} {context.url} → {response.status_code} ({duration_ms}ms)")

        response_headers = dict(response.headers.items())

        if response.status_code >= 400:
            raise error_from_response(
                response.status_code,
                _parse_body(response),
                context.url,
                context.method,
                headers=response_headers,
            )

        return ResponseContext(
            status=response.status_code,
            headers=response_headers,
            body=None if response.status_code == 204 else _parse_body(response),
            duration_ms=duration_ms,
        )

    def _log(self, level: int, message: str) -> None:
        try:
            self._logger.log(level, message)
        except Exception:
            # A broken logger must not fail the request
            pass


def _parse_body(response: httpx.Response) -> Any:
    """Decode JSON when possible, fall back to text; empty bodies become None."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
