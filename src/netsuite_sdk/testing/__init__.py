"""Testing utilities for code built on the NetSuite client.

Everything here works with ``httpx.MockTransport``, so no network is touched.

Example:
    ```python
    from netsuite_sdk import NetSuiteClient
    from netsuite_sdk.testing import SuiteQLServer, make_config

    server = SuiteQLServer(rows=[{"id": str(i)} for i in range(2500)])
    client = NetSuiteClient(make_config(), transport=server.transport())
    result = await client.suiteql.query("SELECT id FROM customer")
    assert len(result.items) == 2500
    ```
"""

import json
from typing import Any

import httpx

from netsuite_sdk.config import NetSuiteConfig, OAuthCredentials


def make_credentials(realm: str = "1234567") -> OAuthCredentials:
    """Dummy but well-formed token-based auth credentials."""
    return OAuthCredentials(
        consumer_key="test-consumer-key",
        consumer_secret="test-consumer-secret",
        token_key="test-token-key",
        token_secret="test-token-secret",
        realm=realm,
    )


def make_config(account_id: str = "1234567", **overrides: Any) -> NetSuiteConfig:
    """Config with dummy credentials, no retry delay and retries disabled unless overridden."""
    settings: dict[str, Any] = {"max_retries": 0, "retry_delay": 0.0}
    settings.update(overrides)
    return NetSuiteConfig(auth=make_credentials(account_id.upper()), account_id=account_id, **settings)


def suiteql_page(
    items: list[dict[str, Any]],
    *,
    total_results: int,
    has_more: bool,
    offset: int = 0,
) -> dict[str, Any]:
    """Build a SuiteQL response envelope as the service returns it."""
    return {
        "links": [],
        "count": len(items),
        "hasMore": has_more,
        "offset": offset,
        "totalResults": total_results,
        "items": items,
    }


class SuiteQLServer:
    """Fake SuiteQL endpoint serving ``rows`` with limit/offset paging.

    Attributes:
        requests: Every request received, in order.
    """

    def __init__(self, rows: list[dict[str, Any]], total_results: int | None = None):
        self.rows = rows
        self.total_results = len(rows) if total_results is None else total_results
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        limit = int(request.url.params.get("limit", "1000"))
        offset = int(request.url.params.get("offset", "0"))
        items = self.rows[offset : offset + limit]
        has_more = offset + len(items) < self.total_results
        page = suiteql_page(items, total_results=self.total_results, has_more=has_more, offset=offset)
        return httpx.Response(200, json=page)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def queries(self) -> list[str]:
        """SQL text of every request received."""
        return [json.loads(request.content)["q"] for request in self.requests]


__all__ = [
    "SuiteQLServer",
    "make_config",
    "make_credentials",
    "suiteql_page",
]
