# ruff: noqa: S105, PLR2004
"""Tests for the configuration module.

This module contains tests for the ClientConfig Pydantic model: defaults per
API version, validation rules and redaction of the API key.
"""

import logging

import pytest
from pydantic import HttpUrl, ValidationError

from habitify_client.config import ApiVersion, AuthScheme, ClientConfig
from tests.test_api_client_common import (
    CUSTOM_API_URL,
    DEFAULT_TIMEOUT,
    SECRET_API_KEY,
    TEST_API_KEY,
)


class TestClientConfigModel:
    """Test suite for the ClientConfig Pydantic model."""

    def test_client_config_default_values(self) -> None:
        """Test that ClientConfig initializes with the unversioned defaults."""
        config = ClientConfig(api_key=TEST_API_KEY)

        assert config.api_version == ApiVersion.UNVERSIONED
        assert str(config.base_url) == "https://api.habitify.me/"
        assert config.auth_scheme == AuthScheme.PLAIN
        assert config.timeout == DEFAULT_TIMEOUT
        assert config.extra_headers == {}
        assert config.http_user_agent.startswith("habitify-client")
        assert config.logger is None

    def test_client_config_required_api_key(self) -> None:
        """Test that api_key is required and raises ValidationError when missing."""
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig()  # type: ignore[call-arg] - testing missing required parameter

        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert errors[0]["type"] == "missing"
        assert "api_key" in str(errors[0]["loc"])

    def test_v1_defaults_to_bearer_and_versioned_url(self) -> None:
        """Test that selecting v1 switches both the base URL and the auth form."""
        config = ClientConfig(api_key=TEST_API_KEY, api_version=ApiVersion.V1)

        assert str(config.base_url) == "https://api.habitify.me/v1"
        assert config.auth_scheme == AuthScheme.BEARER
        assert config.authorization_header() == f"Bearer {TEST_API_KEY}"

    def test_api_version_accepts_plain_strings(self) -> None:
        """Test that the API version can be given by value."""
        config = ClientConfig(api_key=TEST_API_KEY, api_version="v1")  # type: ignore[arg-type] - value coercion

        assert config.api_version == ApiVersion.V1
        assert config.auth_scheme == AuthScheme.BEARER

    def test_explicit_values_override_version_defaults(self) -> None:
        """Test that base_url and auth_scheme given explicitly win over version defaults."""
        config = ClientConfig(
            api_key=TEST_API_KEY,
            api_version=ApiVersion.V1,
            base_url=CUSTOM_API_URL,
            auth_scheme=AuthScheme.PLAIN,
        )

        assert str(config.base_url) == "https://custom.habitify.example/v2/"
        assert config.authorization_header() == TEST_API_KEY

    def test_plain_scheme_sends_bare_key(self) -> None:
        """Test the unversioned API receives the key without a prefix."""
        config = ClientConfig(api_key=TEST_API_KEY)

        assert config.authorization_header() == TEST_API_KEY

    def test_client_config_base_url_validation_https_only(self) -> None:
        """Test that base_url must be an absolute HTTPS URL."""
        config = ClientConfig(
            api_key=TEST_API_KEY,
            base_url=HttpUrl("https://api.example.com/habitify/"),
        )
        assert str(config.base_url) == "https://api.example.com/habitify/"

        # Invalid: HTTP URL
        with pytest.raises(ValidationError):
            ClientConfig(
                api_key=TEST_API_KEY,
                base_url="http://api.habitify.me",  # type: ignore[arg-type] - testing invalid HTTP URL
            )

        # Invalid: relative URL
        with pytest.raises(ValidationError):
            ClientConfig(
                api_key=TEST_API_KEY,
                base_url="/v1/",  # type: ignore[arg-type] - testing invalid relative URL
            )

    @pytest.mark.parametrize("timeout", [0.0, -1.0, 300.5])
    def test_client_config_timeout_bounds(self, timeout: float) -> None:
        """Test that timeout must lie in (0, 300] seconds."""
        with pytest.raises(ValidationError):
            ClientConfig(api_key=TEST_API_KEY, timeout=timeout)

    def test_client_config_is_frozen(self) -> None:
        """Test that configuration cannot be mutated after creation."""
        config = ClientConfig(api_key=TEST_API_KEY)

        with pytest.raises(ValidationError):
            config.api_key = "other"  # type: ignore[misc] - testing frozen model

    def test_client_config_accepts_logger_like_objects(self) -> None:
        """Test that any object with info, error and debug works as a logger sink."""
        sink = logging.getLogger("tests.habitify.sink")

        config = ClientConfig(api_key=TEST_API_KEY, logger=sink)

        assert config.logger is sink

    def test_client_config_rejects_non_logger(self) -> None:
        """Test that objects lacking the logger channels are rejected."""
        with pytest.raises(ValidationError):
            ClientConfig(api_key=TEST_API_KEY, logger=object())  # type: ignore[arg-type] - testing invalid sink


class TestClientConfigRedaction:
    """Test suite for keeping the API key out of logs and reprs."""

    def test_to_redacted_dict_masks_api_key(self) -> None:
        """Test the redacted dict hides the key and omits the logger."""
        config = ClientConfig(api_key=SECRET_API_KEY, logger=logging.getLogger("x"))

        redacted = config.to_redacted_dict()

        assert redacted["api_key"] == "***redacted***"
        assert SECRET_API_KEY not in str(redacted)
        assert "logger" not in redacted
        assert redacted["api_version"] == "unversioned"

    def test_repr_and_str_do_not_expose_api_key(self) -> None:
        """Test the model repr and str never show the key."""
        config = ClientConfig(api_key=SECRET_API_KEY)

        assert SECRET_API_KEY not in repr(config)
        assert SECRET_API_KEY not in str(config)
        assert "***redacted***" in repr(config)
