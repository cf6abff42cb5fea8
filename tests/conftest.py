"""Pytest fixtures and configuration for the test suite."""

import time
from collections.abc import Iterator

import pytest

from habitify_client.api.client import HabitifyClient
from habitify_client.config import ClientConfig
from tests.test_api_client_common import TEST_API_KEY, RecordingTransport, set_local_timezone


@pytest.fixture(autouse=True)
def utc_local_time(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test with UTC as the local timezone so date output is stable."""
    set_local_timezone(monkeypatch, "UTC")
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def config() -> ClientConfig:
    """Provide a ClientConfig instance for testing.

    Returns:
        ClientConfig: A ClientConfig instance for the unversioned API.
    """
    return ClientConfig(api_key=TEST_API_KEY)


@pytest.fixture
def client(config: ClientConfig) -> HabitifyClient:
    """Provide a HabitifyClient instance for testing.

    Args:
        config: A ClientConfig fixture.

    Returns:
        HabitifyClient: A HabitifyClient instance.
    """
    return HabitifyClient(config)


@pytest.fixture
def transport() -> RecordingTransport:
    """Provide an empty recording transport."""
    return RecordingTransport()


@pytest.fixture
def transport_client(config: ClientConfig, transport: RecordingTransport) -> HabitifyClient:
    """Provide a HabitifyClient whose requests go to the recording transport."""
    return HabitifyClient(config, transport=transport)
