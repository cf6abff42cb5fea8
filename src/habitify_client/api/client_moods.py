"""Moods functionality mixin for the Habitify API client."""

import logging
from typing import TYPE_CHECKING

from habitify_client.api.models import (
    CreateMoodParams,
    DeleteMoodParams,
    GetMoodParams,
    GetMoodsParams,
    Mood,
    UpdateMoodParams,
)
from habitify_client.api.routes import RouteName
from habitify_client.dates import normalize_date, normalize_optional_date

if TYPE_CHECKING:
    from habitify_client.api.protocols import BaseClientProtocol

logger = logging.getLogger(__name__)


class MoodsClientMixin:
    """Mixin providing mood CRUD operations for the Habitify API client."""

    async def get_moods(
        self: "BaseClientProtocol", params: GetMoodsParams | None = None
    ) -> list[Mood]:
        """List moods, optionally for a single day."""
        params = params or GetMoodsParams()
        endpoint = self._endpoint(RouteName.MOODS)
        query = {"target_date": normalize_optional_date(params.target_date)}

        payload = await self.make_request("GET", endpoint, params=query)

        moods = self._parse_model_list(Mood, payload, endpoint)
        logger.debug("Successfully retrieved %d moods", len(moods))
        return moods

    async def get_mood(self: "BaseClientProtocol", params: GetMoodParams) -> Mood:
        """Get a single mood by ID."""
        endpoint = self._endpoint(RouteName.MOOD, mood_id=params.mood_id)

        payload = await self.make_request("GET", endpoint)

        mood = self._parse_model(Mood, payload, endpoint)
        logger.debug("Successfully retrieved mood: %s", mood.id)
        return mood

    async def create_mood(self: "BaseClientProtocol", params: CreateMoodParams) -> Mood | None:
        """Create a mood entry; ``created_at`` defaults to now.

        Returns:
            Mood | None: Created mood, or None when the API returns no data
        """
        endpoint = self._endpoint(RouteName.MOODS)
        body = {"value": params.value, "created_at": normalize_date(params.created_at)}

        payload = await self.make_request("POST", endpoint, data=body)

        if payload is None:
            return None
        mood = self._parse_model(Mood, payload, endpoint)
        logger.debug("Successfully created mood: %s", mood.id)
        return mood

    async def update_mood(self: "BaseClientProtocol", params: UpdateMoodParams) -> Mood | None:
        """Replace the value and timestamp of a mood.

        Returns:
            Mood | None: Updated mood, or None when the API returns no data
        """
        endpoint = self._endpoint(RouteName.MOOD, mood_id=params.mood_id)
        body = {"value": params.value, "created_at": normalize_date(params.created_at)}

        payload = await self.make_request("PUT", endpoint, data=body)

        if payload is None:
            return None
        mood = self._parse_model(Mood, payload, endpoint)
        logger.debug("Successfully updated mood: %s", mood.id)
        return mood

    async def delete_mood(self: "BaseClientProtocol", params: DeleteMoodParams) -> None:
        """Delete a mood by ID."""
        endpoint = self._endpoint(RouteName.MOOD, mood_id=params.mood_id)

        await self.make_request("DELETE", endpoint)
        logger.debug("Successfully deleted mood: %s", params.mood_id)
