"""Tests for credential resolution exceptions."""

import pytest

from gocd_provider.auth.exceptions import CredentialError, CredentialNotFoundError


class TestCredentialError:
    """Test CredentialError base exception."""

    def test_can_be_raised(self):
        """Test that CredentialError can be raised."""
        with pytest.raises(CredentialError):
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
        """Test that CredentialNotFoundError is a CredentialError."""
        with pytest.raises(CredentialError):
            raise CredentialNotFoundError("Test error")

    def test_env_var_name_attribute(self):
        """Test that env_var_name attribute is set."""
        try:
            raise CredentialNotFoundError("Test error", env_var_name="GOCD_URL")
        except CredentialNotFoundError as e:
            assert e.env_var_name == "GOCD_URL"

    def test_env_var_name_optional(self):
        """Test that env_var_name is optional."""
        try:
            raise CredentialNotFoundError("Test error")
        except CredentialNotFoundError as e:
            assert e.env_var_name is None
