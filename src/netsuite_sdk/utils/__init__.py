"""Helpers shared by the NetSuite clients."""

from netsuite_sdk.utils.cache import ResponseCache, create_cache_key
from netsuite_sdk.utils.dates import format_netsuite_date, parse_netsuite_date
from netsuite_sdk.utils.rate_limiter import RateLimiter
from netsuite_sdk.utils.urls import build_restlet_url, build_suitetalk_url, normalize_account_id

__all__ = [
    "RateLimiter",
    "ResponseCache",
    "build_restlet_url",
    "build_suitetalk_url",
    "create_cache_key",
    "format_netsuite_date",
    "normalize_account_id",
    "parse_netsuite_date",
]
