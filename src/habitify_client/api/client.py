"""Composed Habitify API client with modular functionality.

This module provides the HabitifyClient class that combines the base HTTP
infrastructure with resource-specific mixins for a complete API client.
"""

from types import TracebackType
from typing import Any

import httpx

from habitify_client.api.client_actions import ActionsClientMixin
from habitify_client.api.client_areas import AreasClientMixin
from habitify_client.api.client_base import BaseClient
from habitify_client.api.client_habits import HabitsClientMixin
from habitify_client.api.client_journal import JournalClientMixin
from habitify_client.api.client_logs import LogsClientMixin
from habitify_client.api.client_moods import MoodsClientMixin
from habitify_client.api.client_notes import NotesClientMixin
from habitify_client.api.exceptions import HabitifyInvalidArgumentError
from habitify_client.config import ClientConfig


class HabitifyClient(
    BaseClient,
    JournalClientMixin,
    HabitsClientMixin,
    LogsClientMixin,
    MoodsClientMixin,
    AreasClientMixin,
    NotesClientMixin,
    ActionsClientMixin,
):
    """Complete Habitify API client with all functionality.

    This class composes the base HTTP client with all resource mixins to
    provide a unified interface for interacting with the Habitify API.
    """

    @classmethod
    def from_api_key(
        cls,
        api_key: str,
        transport: httpx.AsyncBaseTransport | None = None,
        **options: Any,
    ) -> "HabitifyClient":
        """Build a client from an API key and optional ClientConfig fields.

        Raises:
            HabitifyInvalidArgumentError: When the API key is empty
        """
        if not api_key or not api_key.strip():
            raise HabitifyInvalidArgumentError.empty_api_key()
        return cls(ClientConfig(api_key=api_key, **options), transport=transport)

    def __str__(self) -> str:
        """Return string representation without exposing the API key."""
        return f"HabitifyClient(base_url={self._base_url}, api_key=***redacted***)"

    def __repr__(self) -> str:
        """Return repr without exposing the API key."""
        return f"HabitifyClient(base_url='{self._base_url}', api_key='***redacted***')"

    async def __aenter__(self) -> "HabitifyClient":
        """Async context manager entry."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Async context manager exit."""
        await super().__aexit__(exc_type, exc_val, exc_tb)


__all__ = ["HabitifyClient"]
