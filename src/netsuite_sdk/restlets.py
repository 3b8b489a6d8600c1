"""Client for calling NetSuite RESTlets."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from netsuite_sdk.transport.http import HttpMethod, HttpTransport, NetSuiteResponse
from netsuite_sdk.utils.urls import RESTLET_PATH, build_restlet_url


class RestletClient:
    """Build RESTlet URLs from script/deploy ids and send them through the transport."""

    def __init__(self, transport: HttpTransport, account_id: str):
        self._transport = transport
        self.base_url = build_restlet_url(account_id) + RESTLET_PATH

    def build_url(self, script: str | int, deploy: str | int, params: Mapping[str, Any] | None = None) -> str:
        query = {"script": str(script), "deploy": str(deploy)}
        for key, value in (params or {}).items():
            if isinstance(value, bool):
                value = "true" if value else "false"
            query[key] = str(value)
        return f"{self.base_url}?{urlencode(query)}"

    async def call(
        self,
        script: str | int,
        deploy: str | int,
        *,
        params: Mapping[str, Any] | None = None,
        method: HttpMethod = "GET",
        body: Any = None,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
    ) -> NetSuiteResponse:
        """Execute a RESTlet.

        Args:
            script: Script id of the RESTlet
            deploy: Deployment id
            params: Extra query parameters
            method: HTTP method the RESTlet expects (default: GET)
            body: Request body for POST/PUT
        """
        return await self._transport.request(
            self.build_url(script, deploy, params),
            method=method,
            body=body,
            headers=headers,
            timeout=timeout,
            max_retries=max_retries,
        )
