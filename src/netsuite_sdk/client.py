"""NetSuite API client facade."""

from typing import Any

import httpx

from netsuite_sdk.config import NetSuiteConfig, validate_config
from netsuite_sdk.errors.exceptions import ConfigurationError
from netsuite_sdk.records import RecordClient
from netsuite_sdk.restlets import RestletClient
from netsuite_sdk.suiteql.client import SuiteQLClient
from netsuite_sdk.transport.http import HttpMethod, HttpTransport, NetSuiteResponse


class NetSuiteClient:
    """Entry point for the SuiteQL, Record and RESTlet APIs.

    Configuration problems raise `ConfigurationError` here, never at call time.

    Example:
        ```python
        config = NetSuiteConfig(auth=OAuthCredentials(...), account_id="1234567")

        async with NetSuiteClient(config) as client:
            result = await client.suiteql.query("SELECT id, companyname FROM customer")
            customer = await client.records.get("customer", 123)
            data = await client.restlets.call(script=1, deploy=1)
        ```

    Attributes:
        suiteql: SuiteQL query execution with pagination
        records: REST Record API CRUD
        restlets: RESTlet caller
    """

    def __init__(self, config: NetSuiteConfig, *, transport: httpx.AsyncBaseTransport | None = None):
        errors = validate_config(config)
        if errors:
            raise ConfigurationError(
                "Invalid NetSuite configuration:\n  - " + "\n  - ".join(errors),
                errors=errors,
            )

        self.config = config
        self.transport = HttpTransport(config, transport=transport)
        self.suiteql = SuiteQLClient(self.transport, config.account_id)
        self.records = RecordClient(self.transport, config.account_id)
        self.restlets = RestletClient(self.transport, config.account_id)

    async def __aenter__(self):
        await self.transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.transport.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self.transport.aclose()

    def use(self, middleware) -> "NetSuiteClient":
        """Add a middleware to every request. Returns ``self`` for chaining."""
        self.transport.use(middleware)
        return self

    async def request(self, url: str, *, method: HttpMethod = "GET", **options: Any) -> NetSuiteResponse:
        """Raw request, for endpoints without a dedicated client."""
        return await self.transport.request(url, method=method, **options)

    async def get(self, url: str, **options: Any) -> NetSuiteResponse:
        return await self.transport.request(url, method="GET", **options)

    async def post(self, url: str, body: Any = None, **options: Any) -> NetSuiteResponse:
        return await self.transport.request(url, method="POST", body=body, **options)

    async def put(self, url: str, body: Any = None, **options: Any) -> NetSuiteResponse:
        return await self.transport.request(url, method="PUT", body=body, **options)

    async def patch(self, url: str, body: Any = None, **options: Any) -> NetSuiteResponse:
        return await self.transport.request(url, method="PATCH", body=body, **options)

    async def delete(self, url: str, **options: Any) -> NetSuiteResponse:
        return await self.transport.request(url, method="DELETE", **options)
