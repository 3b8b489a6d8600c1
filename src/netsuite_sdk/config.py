"""Client configuration and validation."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from netsuite_sdk.auth.credentials import DEFAULT_ENV_PREFIX, CredentialResolver
from netsuite_sdk.errors.exceptions import ConfigurationError

DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAY = 1.0
DEFAULT_MAX_RETRY_DELAY = 30.0
DEFAULT_BACKOFF_FACTOR = 2.0

_CREDENTIAL_FIELDS = ("consumer_key", "consumer_secret", "token_key", "token_secret", "realm")


@dataclass(frozen=True)
class OAuthCredentials:
    """Token-based auth credentials. The realm is the account id (``1234567_SB1`` for sandboxes)."""

    consumer_key: str
    consumer_secret: str
    token_key: str
    token_secret: str
    realm: str

    def __repr__(self) -> str:
        return f"OAuthCredentials(consumer_key='***', token_key='***', realm={self.realm!r})"


@dataclass
class NetSuiteConfig:
    """Settings consumed by the transport at construction.

    Attributes:
        auth: Token-based auth credentials.
        account_id: NetSuite account id, e.g. ``1234567`` or ``1234567_SB1``.
        timeout: Per-attempt request timeout in seconds.
        max_retries: Retries for transient failures (total attempts = max_retries + 1).
        retry_delay: Initial backoff delay in seconds.
        max_retry_delay: Backoff cap in seconds.
        backoff_factor: Exponential backoff multiplier.
        default_headers: Headers merged into every request.
        logger: Logger receiving transport events; defaults to the module logger.
    """

    auth: OAuthCredentials
    account_id: str
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: float = DEFAULT_RETRY_DELAY
    max_retry_delay: float = DEFAULT_MAX_RETRY_DELAY
    backoff_factor: float = DEFAULT_BACKOFF_FACTOR
    default_headers: dict[str, str] = field(default_factory=dict)
    logger: logging.Logger | logging.LoggerAdapter | None = None

    @classmethod
    def from_env(
        cls,
        *,
        prefix: str = DEFAULT_ENV_PREFIX,
        resolver: CredentialResolver | None = None,
        **overrides: Any,
    ) -> "NetSuiteConfig":
        """Build a config from ``NETSUITE_*`` environment variables (and .env).

        Keyword overrides win over the environment for any config field.

        Raises:
            CredentialNotFoundError: If a required credential is missing.
            ConfigurationError: If a numeric setting is not a number.
        """
        resolver = resolver or CredentialResolver()

        account_id = resolver.resolve_account_id(overrides.pop("account_id", None), prefix=prefix)
        auth = overrides.pop("auth", None) or resolver.resolve_oauth_credentials(account_id=account_id, prefix=prefix)

        for name, convert in (("timeout", float), ("max_retries", int)):
            if name in overrides:
                continue
            value = _env_number(resolver, f"{prefix}{name.upper()}", convert)
            if value is not None:
                overrides[name] = value

        return cls(auth=auth, account_id=account_id, **overrides)


def _env_number(resolver: CredentialResolver, env_var_name: str, convert: Callable[[str], Any]) -> Any:
    raw = resolver.resolve(env_var_name=env_var_name, mask_in_logs=False)
    if raw is None:
        return None
    try:
        return convert(raw)
    except ValueError as e:
        message = f"{env_var_name} must be a number, got {raw!r}"
        raise ConfigurationError(message, errors=[message]) from e


def validate_config(config: Any) -> list[str]:
    """Validate a config and return a list of problems (empty means valid)."""
    if config is None:
        return ["config is required"]

    errors: list[str] = []

    auth = getattr(config, "auth", None)
    if auth is None:
        errors.append("auth is required")
    else:
        for name in _CREDENTIAL_FIELDS:
            value = getattr(auth, name, None)
            if not isinstance(value, str) or not value:
                errors.append(f"auth.{name} is required and must be a non-empty string")

    account_id = getattr(config, "account_id", None)
    if not isinstance(account_id, str) or not account_id:
        errors.append("account_id is required and must be a non-empty string")

    timeout = getattr(config, "timeout", DEFAULT_TIMEOUT)
    if not isinstance(timeout, (int, float)) or timeout <= 0:
        errors.append("timeout must be a positive number of seconds")

    max_retries = getattr(config, "max_retries", DEFAULT_MAX_RETRIES)
    if not isinstance(max_retries, int) or max_retries < 0:
        errors.append("max_retries must be a non-negative integer")

    return errors
