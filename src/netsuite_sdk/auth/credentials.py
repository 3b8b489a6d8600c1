"""Multi-source credential resolution for NetSuite token-based auth.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv)
4. Default value

Example:
    ```python
    from netsuite_sdk.auth import CredentialResolver

    resolver = CredentialResolver()
    credentials = resolver.resolve_oauth_credentials(account_id="1234567_SB1")
    ```

Security Considerations:
    - Credentials are never logged in full (masked with ***)
    - Only source information is logged (env var name)
    - Thread-safe dotenv loading with lock
"""

import logging
import os
from threading import Lock
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from netsuite_sdk.auth.exceptions import CredentialNotFoundError

if TYPE_CHECKING:
    from netsuite_sdk.config import OAuthCredentials

logger = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX = "NETSUITE_"


class CredentialResolver:
    """Resolve NetSuite credentials from explicit values, the environment and .env files.

    Values already present in the process environment win over values in the
    .env file, because python-dotenv does not override existing variables.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize credential resolver.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories.
            load_dotenv: Whether to load the .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        """Load the .env file once (thread-safe)."""
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            # Mark as attempted either way
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a single credential.

        Args:
            value: Explicitly provided value (highest priority).
            env_var_name: Environment variable name to check.
            default: Default value if not found elsewhere.
            required: Raise CredentialNotFoundError when nothing resolves.
            mask_in_logs: Mask the resolved value in debug logs.

        Returns:
            Resolved value, or None if not found and not required.

        Raises:
            CredentialNotFoundError: If required and not found in any source.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and os.environ.get(env_var_name):
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if mask_in_logs else result
            logger.debug(f"Resolved credential from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_account_id(self, account_id: str | None = None, *, prefix: str = DEFAULT_ENV_PREFIX) -> str:
        """Resolve the NetSuite account identifier (e.g. ``1234567`` or ``1234567_SB1``)."""
        return self.resolve(
            value=account_id,
            env_var_name=f"{prefix}ACCOUNT_ID",
            required=True,
            mask_in_logs=False,
        )

    def resolve_oauth_credentials(
        self,
        *,
        consumer_key: str | None = None,
        consumer_secret: str | None = None,
        token_key: str | None = None,
        token_secret: str | None = None,
        realm: str | None = None,
        account_id: str | None = None,
        prefix: str = DEFAULT_ENV_PREFIX,
    ) -> "OAuthCredentials":
        """Resolve the full token-based auth credential set.

        The realm falls back to the account id upper-cased, which is what
        NetSuite expects (``1234567_SB1`` for sandbox accounts).

        Raises:
            CredentialNotFoundError: If any of the four keys/secrets is missing.
        """
        from netsuite_sdk.config import OAuthCredentials

        resolved_realm = self.resolve(value=realm, env_var_name=f"{prefix}REALM", mask_in_logs=False)
        if resolved_realm is None:
            resolved_realm = self.resolve_account_id(account_id, prefix=prefix).upper()

        return OAuthCredentials(
            consumer_key=self.resolve(value=consumer_key, env_var_name=f"{prefix}CONSUMER_KEY", required=True),
            consumer_secret=self.resolve(
                value=consumer_secret, env_var_name=f"{prefix}CONSUMER_SECRET", required=True
            ),
            token_key=self.resolve(value=token_key, env_var_name=f"{prefix}TOKEN_KEY", required=True),
            token_secret=self.resolve(value=token_secret, env_var_name=f"{prefix}TOKEN_SECRET", required=True),
            realm=resolved_realm,
        )
