"""Habits functionality mixin for the Habitify API client.

This module provides the HabitsClientMixin class that reads and updates the
status of a habit on a given day, designed to be composed with the base client.
"""

import logging
from typing import TYPE_CHECKING

from habitify_client.api.models import (
    GetHabitStatusParams,
    HabitStatusResult,
    UpdateHabitStatusParams,
)
from habitify_client.api.routes import RouteName
from habitify_client.dates import normalize_date, normalize_optional_date

if TYPE_CHECKING:
    from habitify_client.api.protocols import BaseClientProtocol

logger = logging.getLogger(__name__)


class HabitsClientMixin:
    """Mixin providing habit status functionality for the Habitify API client."""

    async def get_habit_status(
        self: "BaseClientProtocol", params: GetHabitStatusParams
    ) -> HabitStatusResult:
        """Get the status of a habit on a day.

        Args:
            params: Habit ID and optional target date (server default is today)

        Returns:
            HabitStatusResult: Status and, for habits with a goal, progress

        Raises:
            HabitifyInvalidArgumentError: Empty habit ID or unparseable date
            HabitifyAPIError: Envelope reported failure or unexpected payload
            HabitifyTimeoutError: Request timeout
            HabitifyTransportError: Network error or unparseable response
        """
        endpoint = self._endpoint(RouteName.HABIT_STATUS, habit_id=params.habit_id)
        query = {"target_date": normalize_optional_date(params.target_date)}

        payload = await self.make_request("GET", endpoint, params=query)

        result = self._parse_model(HabitStatusResult, payload, endpoint)
        logger.debug(
            "Successfully retrieved status of habit %s: %s", params.habit_id, result.status
        )
        return result

    async def update_habit_status(
        self: "BaseClientProtocol", params: UpdateHabitStatusParams
    ) -> None:
        """Set the status of a habit on a day.

        Args:
            params: Habit ID, new status and target date (defaults to now)

        Raises:
            HabitifyInvalidArgumentError: Empty habit ID or unparseable date
            HabitifyAPIError: Envelope reported failure
            HabitifyTimeoutError: Request timeout
            HabitifyTransportError: Network error or unparseable response
        """
        endpoint = self._endpoint(RouteName.HABIT_STATUS, habit_id=params.habit_id)
        body = {
            "status": params.status,
            "target_date": normalize_date(params.target_date),
        }

        await self.make_request("PUT", endpoint, data=body)
        logger.debug("Successfully set habit %s to %s", params.habit_id, params.status)
