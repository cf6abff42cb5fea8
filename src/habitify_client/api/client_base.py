"""Base client for the Habitify API with HTTP plumbing and authentication.

This module provides the BaseClient class containing the HTTP infrastructure,
authentication, envelope interpretation and error translation shared by the
resource-specific mixins.
"""

import logging
import types
from collections.abc import Mapping
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from habitify_client.api.envelope import EnvelopeInterpreter
from habitify_client.api.exceptions import (
    HabitifyAPIError,
    HabitifyError,
    HabitifyInvalidArgumentError,
    HabitifyTimeoutError,
    HabitifyTransportError,
)
from habitify_client.api.routes import RouteName, build_path
from habitify_client.config import ClientConfig

_MAX_KEEPALIVE_CONNECTIONS = 20

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def clean_params(params: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Drop None values from query parameters; return None when nothing is left."""
    if not params:
        return None
    cleaned = {key: value for key, value in params.items() if value is not None}
    return cleaned or None


class BaseClient:
    """Base client providing HTTP plumbing and authentication for the Habitify API.

    Holds no state beyond its configuration and one lazily created
    ``httpx.AsyncClient``; concurrent calls share nothing mutable.
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the base Habitify API client.

        Args:
            config: Client configuration containing the API key and base URL
            transport: Optional ``httpx`` transport, e.g. ``httpx.MockTransport`` in tests

        Raises:
            HabitifyInvalidArgumentError: When the API key is empty
        """
        if not config.api_key or not config.api_key.strip():
            raise HabitifyInvalidArgumentError.empty_api_key()

        self._config = config
        self._base_url = str(config.base_url).rstrip("/")
        self._api_key = config.api_key
        self._transport = transport
        self._http_client: httpx.AsyncClient | None = None
        self._envelope = EnvelopeInterpreter(config.logger or logger)

    def __str__(self) -> str:
        """Return string representation without exposing the API key."""
        return f"BaseClient(base_url={self._base_url}, api_key=***redacted***)"

    def __repr__(self) -> str:
        """Return repr without exposing the API key."""
        return f"BaseClient(base_url='{self._base_url}', api_key='***redacted***')"

    async def __aenter__(self) -> "BaseClient":
        """Async context manager entry."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        """Async context manager exit with cleanup."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if it was created."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client with proper configuration.

        The envelope interpreter is installed as event hooks here, so every
        request made through this client is inspected.

        Returns:
            httpx.AsyncClient: Configured async HTTP client
        """
        if self._http_client is None:
            limits = httpx.Limits(
                max_keepalive_connections=_MAX_KEEPALIVE_CONNECTIONS,
                max_connections=None,
            )

            headers = {"User-Agent": self._config.http_user_agent}

            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._config.timeout),
                limits=limits,
                follow_redirects=True,
                headers=headers,
                event_hooks=self._envelope.event_hooks(),
                transport=self._transport,
            )

        return self._http_client

    def _get_auth_headers(self) -> dict[str, str]:
        """Get request headers with the Authorization header.

        Returns:
            Dict[str, str]: Extra headers, Authorization and Content-Type
        """
        return {
            **self._config.extra_headers,
            "Authorization": self._config.authorization_header(),
            "Content-Type": "application/json",
        }

    def _endpoint(self, route: RouteName, **identifiers: str) -> str:
        """Build the endpoint path for ``route`` under the configured API version.

        Raises:
            HabitifyInvalidArgumentError: When an identifier is empty
        """
        return build_path(self._config.api_version, route, **identifiers)

    def _parse_model(self, model: type[ModelT], payload: Any, endpoint: str) -> ModelT:
        """Validate an unwrapped payload into ``model``.

        Raises:
            HabitifyAPIError: When the payload does not match the model
        """
        try:
            return model.model_validate(payload)
        except ValidationError as error:
            self._envelope.emit(
                "error", "Failed to parse %s response data from %s", model.__name__, endpoint
            )
            raise HabitifyAPIError.create_parse_error(endpoint, model=model.__name__) from error

    def _parse_model_list(self, model: type[ModelT], payload: Any, endpoint: str) -> list[ModelT]:
        """Validate an unwrapped list payload into a list of ``model``.

        A null payload is treated as an empty list.

        Raises:
            HabitifyAPIError: When the payload is not a list or an item does not match
        """
        if payload is None:
            return []
        if not isinstance(payload, list):
            self._envelope.emit(
                "error", "Expected a list from %s, got %s", endpoint, type(payload).__name__
            )
            raise HabitifyAPIError.create_parse_error(endpoint, model=f"list[{model.__name__}]")
        try:
            return [model.model_validate(item) for item in payload]
        except ValidationError as error:
            self._envelope.emit(
                "error", "Failed to parse %s list response data from %s", model.__name__, endpoint
            )
            raise HabitifyAPIError.create_parse_error(
                endpoint, model=model.__name__, item_count=len(payload)
            ) from error

    async def make_request(
        self,
        method: str,
        endpoint: str,
        data: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
    ) -> Any:
        """Make an authenticated request to the Habitify API.

        Without ``files`` the ``data`` mapping is sent as a JSON body. With
        ``files`` the request is multipart: ``files`` become binary parts,
        ``data`` becomes text parts, and the JSON content type is dropped so
        that ``httpx`` sets the multipart boundary.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint (without base URL)
            data: Body fields
            params: Query parameters; None values are dropped
            files: Multipart file parts

        Returns:
            Any: The unwrapped envelope ``data``

        Raises:
            HabitifyAPIError: Envelope reported failure
            HabitifyTimeoutError: Request timeout
            HabitifyTransportError: Network error or unparseable response
        """
        method_upper = method.upper()
        url = f"{self._base_url}/{endpoint.lstrip('/')}"
        headers = self._get_auth_headers()
        query = clean_params(params)

        try:
            http_client = self._get_http_client()
            if files is not None:
                del headers["Content-Type"]
                response = await http_client.request(
                    method_upper,
                    url,
                    headers=headers,
                    params=query,
                    data=dict(data) if data is not None else None,
                    files=dict(files),
                )
            else:
                response = await http_client.request(
                    method_upper,
                    url,
                    headers=headers,
                    params=query,
                    json=dict(data) if data is not None else None,
                )
        except HabitifyError:
            raise
        except httpx.TimeoutException as error:
            self._envelope.emit("error", "Request timeout for %s %s", method_upper, url)
            raise HabitifyTimeoutError from error
        except httpx.HTTPError as error:
            self._envelope.emit(
                "error", "Network error for %s %s: %s", method_upper, url, type(error).__name__
            )
            raise HabitifyTransportError.create_network_error(method_upper, endpoint) from error

        return self._envelope.unwrap(response)
