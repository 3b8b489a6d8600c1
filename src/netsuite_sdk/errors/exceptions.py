"""Structured exceptions for NetSuite API errors."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from netsuite_sdk.errors.models import NetSuiteErrorDetail


class NetSuiteError(Exception):
    """Base exception for every failure surfaced by the transport.

    Attributes:
        status: HTTP status code (504 for timeouts, 0 for network failures).
        code: NetSuite error code (``o:errorCode``) or a locally assigned one.
        details: Raw error payload returned by the service, if any.
        request_url: URL of the failed request.
        request_method: HTTP method of the failed request.
    """

    def __init__(
        self,
        message: str,
        status: int,
        code: str,
        details: Any = None,
        request_url: str | None = None,
        request_method: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code
        self.details = details
        self.request_url = request_url
        self.request_method = request_method

    @property
    def is_retryable(self) -> bool:
        """Whether this is a transient error (5xx, timeout, network)."""
        return self.status >= 500 or self.code in ("TIMEOUT", "NETWORK_ERROR")

    @property
    def is_auth_error(self) -> bool:
        """Whether this is an authentication/authorization error (401, 403)."""
        return self.status in (401, 403)

    @property
    def error_detail(self) -> "NetSuiteErrorDetail | None":
        """Structured view over ``details`` when it is a NetSuite error document."""
        from netsuite_sdk.errors.models import NetSuiteErrorDetail

        return NetSuiteErrorDetail.from_body(self.details)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status={self.status}, code={self.code!r}, "
            f"message={self.message!r}, method={self.request_method}, url={self.request_url})"
        )


class ClientError(NetSuiteError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, *args, retry_after: int | None = None, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.retry_after = retry_after


class ServerError(NetSuiteError):
    """5xx server errors."""

    pass


class RequestTimeoutError(NetSuiteError):
    """The request did not complete within its timeout budget."""

    pass


class NetworkError(NetSuiteError):
    """Connection-level failure with no HTTP response (DNS, refused, reset)."""

    pass


class ConfigurationError(ValueError):
    """Invalid client setup, raised at construction time.

    Attributes:
        errors: Individual problems found in the configuration.
    """

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors if errors is not None else []
