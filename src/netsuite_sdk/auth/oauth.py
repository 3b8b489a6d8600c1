"""OAuth 1.0a token-based authentication (TBA) signing.

NetSuite signs every REST call with HMAC-SHA256 over the method, the URL
(including its query string) and the OAuth parameters. A signature is valid
for a single request: the nonce must never be replayed, so a retried request
has to be signed again.

Example:
    ```python
    signer = OAuthSigner(credentials)
    headers = signer.sign("https://1234567.suitetalk.api.netsuite.com/services/rest/record/v1/customer/1", "GET")
    # {"Authorization": 'OAuth realm="1234567", oauth_nonce="...", ...'}
    ```
"""

from dataclasses import fields
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from oauthlib.common import urldecode
from oauthlib.oauth1 import SIGNATURE_HMAC_SHA256, SIGNATURE_TYPE_AUTH_HEADER
from oauthlib.oauth1 import Client as OAuth1Client

from netsuite_sdk.errors.exceptions import ConfigurationError

if TYPE_CHECKING:
    from netsuite_sdk.config import OAuthCredentials


class OAuthSigner:
    """Produce a fresh ``Authorization`` header for each physical request.

    The underlying oauthlib client generates a new nonce and timestamp on
    every ``sign`` call; nothing is cached between calls.
    """

    def __init__(self, credentials: "OAuthCredentials"):
        missing = []
        for field in fields(credentials):
            value = getattr(credentials, field.name)
            if not isinstance(value, str) or not value:
                missing.append(field.name)
        if missing:
            errors = [f"auth.{name} is required and must be a non-empty string" for name in missing]
            raise ConfigurationError("Invalid OAuth credentials: " + ", ".join(missing), errors=errors)

        self._client = OAuth1Client(
            client_key=credentials.consumer_key,
            client_secret=credentials.consumer_secret,
            resource_owner_key=credentials.token_key,
            resource_owner_secret=credentials.token_secret,
            signature_method=SIGNATURE_HMAC_SHA256,
            signature_type=SIGNATURE_TYPE_AUTH_HEADER,
            realm=credentials.realm,
        )

    def sign(self, url: str, method: str) -> dict[str, str]:
        """Sign a request and return the authorization headers.

        Args:
            url: Absolute request URL, query string included
            method: HTTP method

        Returns:
            Mapping with a single ``Authorization`` header
        """
        _, headers, _ = self._client.sign(url, http_method=method.upper())
        return {"Authorization": headers["Authorization"]}

    def check_url(self, url: str) -> None:
        """Reject URLs that can never be signed.

        Raises:
            ValueError: If the URL is not absolute or its query string is not
                properly percent-encoded.
        """
        parts = urlsplit(url)
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"Request URL must be absolute: {url}")
        try:
            urldecode(parts.query)
        except ValueError as e:
            raise ValueError(f"Cannot sign URL with a non-urlencoded query string: {url}") from e

    __call__ = sign
