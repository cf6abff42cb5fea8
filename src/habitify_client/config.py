"""Configuration module for the Habitify API client.

This module provides the ClientConfig Pydantic model describing credentials,
API version, authentication header form, timeout and the optional logger sink.
"""

from collections.abc import Iterator
from enum import StrEnum
from importlib.metadata import PackageNotFoundError, version
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, field_validator, model_validator

from habitify_client.api.protocols import HabitifyLogger


class ApiVersion(StrEnum):
    """Remote API layouts understood by the client."""

    UNVERSIONED = "unversioned"
    V1 = "v1"


class AuthScheme(StrEnum):
    """Forms of the ``Authorization`` header."""

    PLAIN = "plain"
    BEARER = "bearer"


DEFAULT_BASE_URLS: dict[ApiVersion, str] = {
    ApiVersion.UNVERSIONED: "https://api.habitify.me",
    ApiVersion.V1: "https://api.habitify.me/v1",
}

DEFAULT_AUTH_SCHEMES: dict[ApiVersion, AuthScheme] = {
    ApiVersion.UNVERSIONED: AuthScheme.PLAIN,
    ApiVersion.V1: AuthScheme.BEARER,
}


def _default_user_agent() -> str:
    """Build the default User-Agent from the installed distribution version."""
    try:
        return f"habitify-client/{version('habitify-client')}"
    except PackageNotFoundError:
        return "habitify-client"


class ClientConfig(BaseModel):
    """Client configuration model with validation and default values.

    ``base_url`` and ``auth_scheme`` default from ``api_version``: the
    unversioned API takes the bare key, ``/v1`` takes ``Bearer <key>``.
    Emptiness of ``api_key`` is checked by the client itself so that it
    surfaces as ``HabitifyInvalidArgumentError``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    api_key: str = Field(
        ...,
        description="API key for Habitify API authentication",
    )

    api_version: ApiVersion = Field(
        default=ApiVersion.UNVERSIONED,
        description="Remote API layout used to build endpoint paths",
    )

    base_url: HttpUrl = Field(
        default=HttpUrl(DEFAULT_BASE_URLS[ApiVersion.UNVERSIONED]),
        description="Base URL for Habitify API endpoints",
    )

    auth_scheme: AuthScheme = Field(
        default=AuthScheme.PLAIN,
        description="Authorization header form (bare key or Bearer prefix)",
    )

    timeout: float = Field(
        default=30.0,
        gt=0.0,
        le=300.0,
        description="Per-request timeout in seconds",
    )

    extra_headers: dict[str, str] = Field(
        default_factory=dict,
        description="Additional headers sent with every request",
    )

    http_user_agent: str = Field(
        default_factory=_default_user_agent,
        description="HTTP client User-Agent header",
    )

    logger: HabitifyLogger | None = Field(
        default=None,
        exclude=True,
        description="Logger sink with info, error and debug channels",
    )

    @model_validator(mode="before")
    @classmethod
    def apply_version_defaults(cls, data: Any) -> Any:
        """Fill ``base_url`` and ``auth_scheme`` from ``api_version`` when omitted."""
        if not isinstance(data, dict):
            return data

        values = dict(data)
        api_version = ApiVersion(values.get("api_version") or ApiVersion.UNVERSIONED)
        if values.get("base_url") is None:
            values["base_url"] = DEFAULT_BASE_URLS[api_version]
        if values.get("auth_scheme") is None:
            values["auth_scheme"] = DEFAULT_AUTH_SCHEMES[api_version]
        return values

    @field_validator("base_url")
    @classmethod
    def validate_https_url(cls, v: HttpUrl) -> HttpUrl:
        """Validate that the base URL uses HTTPS protocol.

        Args:
            v: The URL value to validate.

        Returns:
            HttpUrl: The validated HTTPS URL.

        Raises:
            ValueError: If the URL does not use HTTPS protocol.
        """
        if v.scheme != "https":
            msg = "URL must use HTTPS"
            raise ValueError(msg)
        return v

    def authorization_header(self) -> str:
        """Return the ``Authorization`` header value for the configured scheme."""
        if self.auth_scheme == AuthScheme.BEARER:
            return f"Bearer {self.api_key}"
        return self.api_key

    def to_redacted_dict(self) -> dict[str, Any]:
        """Return a dictionary representation with sensitive data redacted.

        This method creates a safe representation of the configuration
        for logging purposes, ensuring that the API key is not exposed.

        Returns:
            dict[str, Any]: Configuration dictionary with secrets redacted.
        """
        config_dict = self.model_dump(mode="json")
        config_dict["api_key"] = "***redacted***"  # noqa: S105 - redaction placeholder, not actual secret
        return config_dict

    def __repr_args__(self) -> Iterator[tuple[str | None, Any]]:
        """Yield repr arguments with the API key redacted."""
        for key, value in super().__repr_args__():
            yield key, "***redacted***" if key == "api_key" else value
