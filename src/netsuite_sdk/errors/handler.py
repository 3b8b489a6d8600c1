"""Conversion of HTTP error responses into structured exceptions."""

import json
from collections.abc import Mapping
from typing import Any

from netsuite_sdk.errors.exceptions import (
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NetSuiteError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
)

EXCEPTION_MAP: dict[int, type[NetSuiteError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def _first_present(body: Mapping[str, Any], *names: str) -> Any:
    for name in names:
        value = body.get(name)
        if value is not None:
            return value
    return None


def extract_error_message(status: int, body: Any) -> str:
    """Pick the human-readable message: detail, title, message, else ``HTTP <status>``."""
    if isinstance(body, Mapping):
        message = _first_present(body, "detail", "title", "message")
        if message is not None:
            return str(message)
    return f"HTTP {status}"


def extract_error_code(status: int, body: Any) -> str:
    """Pick the error code: ``o:errorCode``, ``code``, else ``HTTP_<status>``."""
    if isinstance(body, Mapping):
        code = _first_present(body, "o:errorCode", "code")
        if code is not None:
            return str(code)
    return f"HTTP_{status}"


def error_from_response(
    status: int,
    body: Any,
    request_url: str | None = None,
    request_method: str | None = None,
    headers: Mapping[str, str] | None = None,
) -> NetSuiteError:
    """Build the exception matching an error response.

    Args:
        status: HTTP status code (>= 400)
        body: Decoded response body
        request_url: URL of the failed request
        request_method: HTTP method of the failed request
        headers: Response headers (lowercased names), used for Retry-After

    Returns:
        NetSuiteError subclass instance based on status code
    """
    if status in EXCEPTION_MAP:
        exc_class = EXCEPTION_MAP[status]
    elif 400 <= status < 500:
        exc_class = ClientError
    elif status >= 500:
        exc_class = ServerError
    else:
        exc_class = NetSuiteError

    message = extract_error_message(status, body)
    code = extract_error_code(status, body)
    details = body if body is not None else {}

    if exc_class is RateLimitError:
        retry_after = None
        if headers and "retry-after" in headers:
            try:
                retry_after = int(headers["retry-after"])
            except (ValueError, TypeError):
                retry_after = None
        return RateLimitError(
            message,
            status,
            code,
            details,
            request_url,
            request_method,
            retry_after=retry_after,
        )

    return exc_class(message, status, code, details, request_url, request_method)


def parse_netsuite_error(error: Any) -> dict[str, Any]:
    """Best-effort parse of an arbitrary error payload.

    Returns a dict with ``message`` and, when available, ``code`` and
    ``details`` (the original document).
    """
    if not isinstance(error, Mapping):
        return {"message": str(error)}

    if error.get("title") or error.get("detail"):
        return {
            "message": str(error.get("detail") or error.get("title")),
            "code": error.get("o:errorCode"),
            "details": dict(error),
        }

    if error.get("message"):
        return {"message": str(error["message"]), "code": error.get("code")}

    return {"message": json.dumps(error, default=str)}
