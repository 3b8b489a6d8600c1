"""Exceptions for credential resolution.

Credential problems are configuration problems: they surface while a client
is being built, never while a request is in flight.

Example:
    ```python
    from netsuite_sdk.auth.exceptions import CredentialNotFoundError

    if not consumer_key:
        raise CredentialNotFoundError("Consumer key not found", env_var_name="NETSUITE_CONSUMER_KEY")
    ```
"""

from netsuite_sdk.errors.exceptions import ConfigurationError


class CredentialError(ConfigurationError):
    """Base exception for credential-related errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message, errors=[message])
        self.env_var_name = env_var_name
