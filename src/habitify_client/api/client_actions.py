"""Actions functionality mixin for the Habitify API client.

This module provides the ActionsClientMixin class containing CRUD operations
for reminders tied to a habit, designed to be composed with the base client.
"""

import logging
from typing import TYPE_CHECKING, Any

from habitify_client.api.models import (
    Action,
    CreateActionParams,
    DeleteActionParams,
    GetActionParams,
    GetActionsParams,
    UpdateActionParams,
)
from habitify_client.api.routes import RouteName
from habitify_client.dates import normalize_date

if TYPE_CHECKING:
    from habitify_client.api.protocols import BaseClientProtocol

logger = logging.getLogger(__name__)


class ActionsClientMixin:
    """Mixin providing action CRUD operations for the Habitify API client."""

    async def get_actions(self: "BaseClientProtocol", params: GetActionsParams) -> list[Action]:
        """List the actions of a habit."""
        endpoint = self._endpoint(RouteName.ACTIONS, habit_id=params.habit_id)

        payload = await self.make_request("GET", endpoint)

        actions = self._parse_model_list(Action, payload, endpoint)
        logger.debug(
            "Successfully retrieved %d actions for habit %s", len(actions), params.habit_id
        )
        return actions

    async def get_action(self: "BaseClientProtocol", params: GetActionParams) -> Action:
        """Get a single action of a habit."""
        endpoint = self._endpoint(
            RouteName.ACTION, habit_id=params.habit_id, action_id=params.action_id
        )

        payload = await self.make_request("GET", endpoint)

        action = self._parse_model(Action, payload, endpoint)
        logger.debug("Successfully retrieved action: %s", action.id)
        return action

    async def create_action(
        self: "BaseClientProtocol", params: CreateActionParams
    ) -> Action | None:
        """Create an action for a habit.

        Args:
            params: Habit ID, title and reminder time

        Returns:
            Action | None: Created action, or None when the API returns no data

        Raises:
            HabitifyInvalidArgumentError: Empty habit ID or unparseable reminder time
            HabitifyAPIError: Envelope reported failure or unexpected payload
            HabitifyTimeoutError: Request timeout
            HabitifyTransportError: Network error or unparseable response
        """
        endpoint = self._endpoint(RouteName.ACTIONS, habit_id=params.habit_id)
        body = {"title": params.title, "remind_at": normalize_date(params.remind_at)}

        payload = await self.make_request("POST", endpoint, data=body)

        if payload is None:
            return None
        action = self._parse_model(Action, payload, endpoint)
        logger.debug("Successfully created action %s for habit %s", action.id, params.habit_id)
        return action

    async def update_action(
        self: "BaseClientProtocol", params: UpdateActionParams
    ) -> Action | None:
        """Update an action of a habit.

        Only the fields set on ``params`` are sent, so omitted fields keep
        their server-side values.

        Args:
            params: Habit ID, action ID and the fields to change

        Returns:
            Action | None: Updated action, or None when the API returns no data

        Raises:
            HabitifyInvalidArgumentError: Empty identifier or unparseable reminder time
            HabitifyAPIError: Envelope reported failure or unexpected payload
            HabitifyTimeoutError: Request timeout
            HabitifyTransportError: Network error or unparseable response
        """
        endpoint = self._endpoint(
            RouteName.ACTION, habit_id=params.habit_id, action_id=params.action_id
        )
        body: dict[str, Any] = {}
        if params.status is not None:
            body["status"] = params.status
        if params.title is not None:
            body["title"] = params.title
        if params.remind_at is not None:
            body["remind_at"] = normalize_date(params.remind_at)

        payload = await self.make_request("PUT", endpoint, data=body)

        if payload is None:
            return None
        action = self._parse_model(Action, payload, endpoint)
        logger.debug("Successfully updated action: %s", action.id)
        return action

    async def delete_action(self: "BaseClientProtocol", params: DeleteActionParams) -> None:
        """Delete an action of a habit."""
        endpoint = self._endpoint(
            RouteName.ACTION, habit_id=params.habit_id, action_id=params.action_id
        )

        await self.make_request("DELETE", endpoint)
        logger.debug(
            "Successfully deleted action %s of habit %s", params.action_id, params.habit_id
        )
