"""Logs functionality mixin for the Habitify API client.

This module provides the LogsClientMixin class that lists, records and
deletes values logged against a habit, designed to be composed with the
base client.
"""

import logging
from typing import TYPE_CHECKING

from habitify_client.api.models import (
    AddLogParams,
    DeleteLogParams,
    DeleteLogsParams,
    GetLogsParams,
    Log,
)
from habitify_client.api.routes import RouteName
from habitify_client.dates import normalize_date, normalize_optional_date

if TYPE_CHECKING:
    from habitify_client.api.protocols import BaseClientProtocol

logger = logging.getLogger(__name__)


class LogsClientMixin:
    """Mixin providing habit log operations for the Habitify API client."""

    async def get_logs(self: "BaseClientProtocol", params: GetLogsParams) -> list[Log]:
        """List the logs of a habit.

        Args:
            params: Habit ID and optional ``from``/``to`` range

        Returns:
            list[Log]: Logs of the habit

        Raises:
            HabitifyInvalidArgumentError: Empty habit ID or unparseable date
            HabitifyAPIError: Envelope reported failure or unexpected payload
            HabitifyTimeoutError: Request timeout
            HabitifyTransportError: Network error or unparseable response
        """
        endpoint = self._endpoint(RouteName.LOGS, habit_id=params.habit_id)
        query = {
            "from": normalize_optional_date(params.from_),
            "to": normalize_optional_date(params.to),
        }

        payload = await self.make_request("GET", endpoint, params=query)

        logs = self._parse_model_list(Log, payload, endpoint)
        logger.debug("Successfully retrieved %d logs for habit %s", len(logs), params.habit_id)
        return logs

    async def add_log(self: "BaseClientProtocol", params: AddLogParams) -> Log | None:
        """Record a value against a habit.

        Not idempotent: every call creates a new log.

        Args:
            params: Habit ID, unit type, value and target date (defaults to now)

        Returns:
            Log | None: Created log, or None when the API returns no data

        Raises:
            HabitifyInvalidArgumentError: Empty habit ID or unparseable date
            HabitifyAPIError: Envelope reported failure or unexpected payload
            HabitifyTimeoutError: Request timeout
            HabitifyTransportError: Network error or unparseable response
        """
        endpoint = self._endpoint(RouteName.LOGS, habit_id=params.habit_id)
        body = {
            "unit_type": params.unit_type,
            "value": params.value,
            "target_date": normalize_date(params.target_date),
        }

        payload = await self.make_request("POST", endpoint, data=body)

        if payload is None:
            logger.debug("Log creation for habit %s returned no data", params.habit_id)
            return None

        log = self._parse_model(Log, payload, endpoint)
        logger.debug("Successfully added log %s to habit %s", log.id, params.habit_id)
        return log

    async def delete_log(self: "BaseClientProtocol", params: DeleteLogParams) -> None:
        """Delete a single log of a habit."""
        endpoint = self._endpoint(RouteName.LOG, habit_id=params.habit_id, log_id=params.log_id)

        await self.make_request("DELETE", endpoint)
        logger.debug("Successfully deleted log %s of habit %s", params.log_id, params.habit_id)

    async def delete_logs(self: "BaseClientProtocol", params: DeleteLogsParams) -> None:
        """Delete the logs of a habit, optionally restricted to a date range.

        The range is sent as query parameters.
        """
        endpoint = self._endpoint(RouteName.LOGS, habit_id=params.habit_id)
        query = {
            "from": normalize_optional_date(params.from_),
            "to": normalize_optional_date(params.to),
        }

        await self.make_request("DELETE", endpoint, params=query)
        logger.debug("Successfully deleted logs of habit %s", params.habit_id)
