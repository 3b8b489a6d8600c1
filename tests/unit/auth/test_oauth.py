"""Tests for OAuth 1.0a request signing."""

import base64
import hashlib
import hmac
from urllib.parse import quote, unquote

import pytest
from oauthlib.oauth1.rfc5849.utils import parse_authorization_header

from netsuite_sdk.auth import OAuthSigner
from netsuite_sdk.config import OAuthCredentials
from netsuite_sdk.errors import ConfigurationError

URL = "https://1234567.suitetalk.api.netsuite.com/services/rest/query/v1/suiteql?limit=10&offset=0"


def oauth_params(headers: dict[str, str]) -> dict[str, str]:
    return {key: unquote(value) for key, value in parse_authorization_header(headers["Authorization"])}


class TestOAuthSigner:
    def test_generates_authorization_header(self, credentials):
        headers = OAuthSigner(credentials).sign(URL, "POST")

        assert list(headers) == ["Authorization"]
        assert headers["Authorization"].startswith("OAuth ")

    def test_header_carries_required_parameters(self, credentials):
        params = oauth_params(OAuthSigner(credentials).sign(URL, "GET"))

        assert params["realm"] == credentials.realm
        assert params["oauth_consumer_key"] == credentials.consumer_key
        assert params["oauth_token"] == credentials.token_key
        assert params["oauth_signature_method"] == "HMAC-SHA256"
        assert params["oauth_version"] == "1.0"
        assert params["oauth_nonce"]
        assert params["oauth_timestamp"].isdigit()
        assert params["oauth_signature"]

    def test_generates_different_nonces_on_each_call(self, credentials):
        """The same URL and method never reuse a nonce or signature."""
        signer = OAuthSigner(credentials)

        signed = [oauth_params(signer.sign(URL, "GET")) for _ in range(20)]

        assert len({params["oauth_nonce"] for params in signed}) == 20
        assert len({params["oauth_signature"] for params in signed}) == 20

    def test_signature_is_hmac_sha256_over_base_string(self, credentials):
        """Recompute the signature independently from the header parameters."""
        params = oauth_params(OAuthSigner(credentials).sign(URL, "POST"))

        signed_params = {k: v for k, v in params.items() if k not in ("realm", "oauth_signature")}
        signed_params.update({"limit": "10", "offset": "0"})
        normalized = "&".join(
            f"{quote(k, safe='~')}={quote(v, safe='~')}" for k, v in sorted(signed_params.items())
        )
        base_url = URL.split("?")[0]
        base_string = "&".join(["POST", quote(base_url, safe="~"), quote(normalized, safe="~")])
        key = f"{credentials.consumer_secret}&{credentials.token_secret}"
        expected = base64.b64encode(hmac.new(key.encode(), base_string.encode(), hashlib.sha256).digest()).decode()

        assert params["oauth_signature"] == expected

    def test_method_is_case_insensitive(self, credentials):
        params = oauth_params(OAuthSigner(credentials).sign(URL, "get"))

        assert params["oauth_signature"]

    @pytest.mark.parametrize("field", ["consumer_key", "consumer_secret", "token_key", "token_secret", "realm"])
    def test_missing_credential_field_fails_at_construction(self, field):
        values = {
            "consumer_key": "ck",
            "consumer_secret": "cs",
            "token_key": "tk",
            "token_secret": "ts",
            "realm": "1234567",
        }
        values[field] = ""

        with pytest.raises(ConfigurationError) as exc_info:
            OAuthSigner(OAuthCredentials(**values))

        assert exc_info.value.errors == [f"auth.{field} is required and must be a non-empty string"]


class TestCheckUrl:
    def test_accepts_encoded_query(self, credentials):
        OAuthSigner(credentials).check_url(URL + "&q=a%22b")

    def test_rejects_unencoded_query(self, credentials):
        with pytest.raises(ValueError, match="non-urlencoded query string"):
            OAuthSigner(credentials).check_url(URL + '&q=a"b')

    def test_rejects_relative_url(self, credentials):
        with pytest.raises(ValueError, match="must be absolute"):
            OAuthSigner(credentials).check_url("/services/rest/record/v1/customer")
