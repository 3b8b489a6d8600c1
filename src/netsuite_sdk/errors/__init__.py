"""Structured error handling for the NetSuite client."""

from netsuite_sdk.errors.exceptions import (
    BadRequestError,
    ClientError,
    ConfigurationError,
    ConflictError,
    ForbiddenError,
    NetSuiteError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RequestTimeoutError,
    ServerError,
    UnauthorizedError,
)
from netsuite_sdk.errors.handler import error_from_response, parse_netsuite_error
from netsuite_sdk.errors.models import ErrorDetailEntry, NetSuiteErrorDetail

__all__ = [
    "BadRequestError",
    "ClientError",
    "ConfigurationError",
    "ConflictError",
    "ErrorDetailEntry",
    "ForbiddenError",
    "NetSuiteError",
    "NetSuiteErrorDetail",
    "NetworkError",
    "NotFoundError",
    "RateLimitError",
    "RequestTimeoutError",
    "ServerError",
    "UnauthorizedError",
    "error_from_response",
    "parse_netsuite_error",
]
