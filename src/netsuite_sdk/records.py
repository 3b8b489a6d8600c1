"""Client for the NetSuite REST Record API (v1)."""

from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import urlencode

from netsuite_sdk.transport.http import HttpTransport, NetSuiteResponse
from netsuite_sdk.utils.urls import RECORD_PATH, build_suitetalk_url


class RecordClient:
    """CRUD on NetSuite records.

    Record types are the REST names (``customer``, ``salesOrder``, ``customrecord_x``...).
    """

    def __init__(self, transport: HttpTransport, account_id: str):
        self._transport = transport
        self.base_url = build_suitetalk_url(account_id) + RECORD_PATH

    def _url(self, record_type: str, record_id: str | int | None = None, params: Mapping[str, str] | None = None) -> str:
        url = f"{self.base_url}/{record_type}"
        if record_id is not None:
            url = f"{url}/{record_id}"
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    async def get(
        self,
        record_type: str,
        record_id: str | int,
        *,
        fields: Sequence[str] | None = None,
        expand_sub_resources: bool = False,
    ) -> NetSuiteResponse:
        """Get a record by internal id."""
        params = {}
        if fields:
            params["fields"] = ",".join(fields)
        if expand_sub_resources:
            params["expandSubResources"] = "true"
        return await self._transport.request(self._url(record_type, record_id, params))

    async def list(
        self,
        record_type: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
        fields: Sequence[str] | None = None,
        query: Mapping[str, str] | None = None,
        expand_sub_resources: bool = False,
    ) -> NetSuiteResponse:
        """List records of a type; ``query`` entries are passed through as URL parameters."""
        params: dict[str, str] = {}
        if limit is not None:
            params["limit"] = str(limit)
        if offset is not None:
            params["offset"] = str(offset)
        if fields:
            params["fields"] = ",".join(fields)
        if expand_sub_resources:
            params["expandSubResources"] = "true"
        if query:
            params.update({key: str(value) for key, value in query.items()})
        return await self._transport.request(self._url(record_type, params=params))

    async def create(self, record_type: str, body: Mapping[str, Any]) -> NetSuiteResponse:
        return await self._transport.request(self._url(record_type), method="POST", body=dict(body))

    async def update(self, record_type: str, record_id: str | int, body: Mapping[str, Any]) -> NetSuiteResponse:
        """Partial update (PATCH)."""
        return await self._transport.request(self._url(record_type, record_id), method="PATCH", body=dict(body))

    async def replace(self, record_type: str, record_id: str | int, body: Mapping[str, Any]) -> NetSuiteResponse:
        """Full replace (PUT)."""
        return await self._transport.request(self._url(record_type, record_id), method="PUT", body=dict(body))

    async def delete(self, record_type: str, record_id: str | int) -> NetSuiteResponse:
        return await self._transport.request(self._url(record_type, record_id), method="DELETE")

    async def upsert(
        self,
        record_type: str,
        external_id_field: str,
        external_id_value: str,
        body: Mapping[str, Any],
    ) -> NetSuiteResponse:
        """Create or update the record identified by an external id."""
        url = f"{self.base_url}/{record_type}/eid:{external_id_field}={external_id_value}"
        return await self._transport.request(url, method="PUT", body=dict(body))
