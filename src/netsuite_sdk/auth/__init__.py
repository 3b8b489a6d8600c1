"""Authentication components for the NetSuite client.

This module provides:
- OAuth 1.0a TBA request signing (HMAC-SHA256, fresh nonce per call)
- Multi-source credential resolution (value → env → .env → default)

Example:
    ```python
    from netsuite_sdk.auth import CredentialResolver, OAuthSigner

    credentials = CredentialResolver().resolve_oauth_credentials()
    signer = OAuthSigner(credentials)
    headers = signer.sign(url, "POST")
    ```
"""

from netsuite_sdk.auth.credentials import CredentialResolver
from netsuite_sdk.auth.exceptions import CredentialError, CredentialNotFoundError
from netsuite_sdk.auth.oauth import OAuthSigner

__all__ = [
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "OAuthSigner",
]
