"""Tests for the NetSuiteClient facade."""

import json

import httpx
import pytest

from netsuite_sdk import NetSuiteClient, NetSuiteConfig, OAuthCredentials
from netsuite_sdk.errors import ConfigurationError
from netsuite_sdk.records import RecordClient
from netsuite_sdk.restlets import RestletClient
from netsuite_sdk.suiteql import SuiteQLClient
from netsuite_sdk.testing import make_config


def test_creates_client_with_valid_config(config):
    """Test that a valid config builds all sub-clients."""
    client = NetSuiteClient(config)

    assert isinstance(client.suiteql, SuiteQLClient)
    assert isinstance(client.records, RecordClient)
    assert isinstance(client.restlets, RestletClient)


def test_invalid_credentials_raise_at_construction():
    """Test that missing credential fields fail synchronously, not at call time."""
    auth = OAuthCredentials(
        consumer_key="",
        consumer_secret="cs",
        token_key="tk",
        token_secret="ts",
        realm="1234567",
    )

    with pytest.raises(ConfigurationError) as exc_info:
        NetSuiteClient(NetSuiteConfig(auth=auth, account_id="1234567"))

    assert "auth.consumer_key is required and must be a non-empty string" in exc_info.value.errors


def test_missing_account_id_raises(credentials):
    """Test that an empty account id is rejected."""
    with pytest.raises(ConfigurationError, match="account_id"):
        NetSuiteClient(NetSuiteConfig(auth=credentials, account_id=""))


def test_missing_auth_raises():
    """Test that a config without credentials is rejected."""
    with pytest.raises(ConfigurationError, match="auth is required"):
        NetSuiteClient(NetSuiteConfig(auth=None, account_id="1234567"))


def test_use_returns_self_for_chaining(config):
    """Test that use() can be chained."""
    client = NetSuiteClient(config)

    async def passthrough(context, call_next):
        return await call_next()

    assert client.use(passthrough).use(passthrough) is client
    assert len(client.transport.middlewares) == 2


def test_sub_clients_share_normalized_host():
    """Test that every sub-client builds hosts from the normalized account id."""
    client = NetSuiteClient(make_config("1234567_SB1"))

    assert client.suiteql.base_url.startswith("https://1234567-sb1.suitetalk.api.netsuite.com/")
    assert client.records.base_url.startswith("https://1234567-sb1.suitetalk.api.netsuite.com/")
    assert client.restlets.base_url.startswith("https://1234567-sb1.restlets.api.netsuite.com/")


async def test_convenience_methods_use_matching_verbs(config):
    """Test that get/post/put/patch/delete send the matching method."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.content))
        return httpx.Response(200, json={"ok": True})

    async with NetSuiteClient(config, transport=httpx.MockTransport(handler)) as client:
        await client.get("https://1234567.suitetalk.api.netsuite.com/a")
        await client.post("https://1234567.suitetalk.api.netsuite.com/a", {"x": 1})
        await client.put("https://1234567.suitetalk.api.netsuite.com/a", {"x": 2})
        await client.patch("https://1234567.suitetalk.api.netsuite.com/a", {"x": 3})
        await client.delete("https://1234567.suitetalk.api.netsuite.com/a")
        response = await client.request("https://1234567.suitetalk.api.netsuite.com/a", method="POST", body={})

    assert [method for method, _ in seen] == ["GET", "POST", "PUT", "PATCH", "DELETE", "POST"]
    assert seen[0][1] == b""
    assert json.loads(seen[1][1]) == {"x": 1}
    assert response.data == {"ok": True}
