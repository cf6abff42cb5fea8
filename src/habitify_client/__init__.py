"""Habitify client - typed async client for the Habitify habit-tracking API."""

from habitify_client.api.client import HabitifyClient
from habitify_client.api.exceptions import (
    HabitifyAPIError,
    HabitifyError,
    HabitifyInvalidArgumentError,
    HabitifyTimeoutError,
    HabitifyTransportError,
)
from habitify_client.config import ApiVersion, AuthScheme, ClientConfig
from habitify_client.dates import normalize_date

__version__ = "0.1.0"

__all__ = [
    "ApiVersion",
    "AuthScheme",
    "ClientConfig",
    "HabitifyAPIError",
    "HabitifyClient",
    "HabitifyError",
    "HabitifyInvalidArgumentError",
    "HabitifyTimeoutError",
    "HabitifyTransportError",
    "normalize_date",
]
