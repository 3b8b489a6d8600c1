"""NetSuite SDK - asyncio client for the NetSuite REST APIs.

This library provides:
- OAuth 1.0a token-based auth, re-signed on every attempt
- Retry with exponential backoff and jitter for transient failures
- Ordered request/response middleware
- SuiteQL queries with automatic pagination and page streaming
- REST Record API CRUD and RESTlet calls

Example:
    ```python
    from netsuite_sdk import NetSuiteClient, NetSuiteConfig

    config = NetSuiteConfig.from_env()

    async with NetSuiteClient(config) as client:
        result = await client.suiteql.query("SELECT id, companyname FROM customer")
        for row in result.items:
            print(row["companyname"])
    ```
"""

import logging

from netsuite_sdk.client import NetSuiteClient
from netsuite_sdk.config import NetSuiteConfig, OAuthCredentials, validate_config
from netsuite_sdk.errors import ConfigurationError, NetSuiteError
from netsuite_sdk.suiteql import SuiteQLBuilder, SuiteQLResult, suiteql
from netsuite_sdk.transport import Middleware, NetSuiteResponse, RequestContext, ResponseContext
from netsuite_sdk.utils import normalize_account_id

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "Middleware",
    "NetSuiteClient",
    "NetSuiteConfig",
    "NetSuiteError",
    "NetSuiteResponse",
    "OAuthCredentials",
    "RequestContext",
    "ResponseContext",
    "SuiteQLBuilder",
    "SuiteQLResult",
    "__version__",
    "normalize_account_id",
    "suiteql",
    "validate_config",
]
