"""Tests for credential resolution exceptions."""

import pytest

from netsuite_sdk.auth.exceptions import CredentialError, CredentialNotFoundError
from netsuite_sdk.errors import ConfigurationError


class TestCredentialError:
    """Test CredentialError base exception."""

    def test_is_configuration_error(self):
        """Credential problems are configuration problems."""
        with pytest.raises(ConfigurationError):
            raise CredentialError("Test error")

    def test_exception_message(self):
        """Test that exception message is preserved."""
        try:
            raise CredentialError("Custom error message")
        except CredentialError as e:
            assert str(e) == "Custom error message"


class TestCredentialNotFoundError:
    """Test CredentialNotFoundError exception."""

    def test_is_credential_error(self):
        with pytest.raises(CredentialError):
            raise CredentialNotFoundError("Test error")

    def test_with_env_var_name(self):
        """Test exception stores the checked environment variable."""
        error = CredentialNotFoundError("Consumer key not found", env_var_name="NETSUITE_CONSUMER_KEY")

        assert str(error) == "Consumer key not found"
        assert error.env_var_name == "NETSUITE_CONSUMER_KEY"
        assert error.errors == ["Consumer key not found"]

    def test_without_env_var_name(self):
        error = CredentialNotFoundError("Test error")

        assert error.env_var_name is None
