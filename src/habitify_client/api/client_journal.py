"""Journal functionality mixin for the Habitify API client.

This module provides the JournalClientMixin class that lists the habits of a
day together with their computed status and progress, designed to be
composed with the base client.
"""

import logging
from typing import TYPE_CHECKING

from habitify_client.api.models import GetJournalParams, Habit
from habitify_client.api.routes import RouteName
from habitify_client.dates import normalize_optional_date

if TYPE_CHECKING:
    from habitify_client.api.protocols import BaseClientProtocol

logger = logging.getLogger(__name__)


class JournalClientMixin:
    """Mixin providing the journal listing for the Habitify API client."""

    async def get_journal(
        self: "BaseClientProtocol", params: GetJournalParams | None = None
    ) -> list[Habit]:
        """List habits for a day with their status and progress.

        All filters are optional and sent as query parameters. Several
        ``time_of_day`` values are sent comma separated.

        Args:
            params: Journal filters (target date, order, status, area, time of day)

        Returns:
            list[Habit]: Habits of the day, each with ``status`` and ``progress``

        Raises:
            HabitifyInvalidArgumentError: Unparseable target date
            HabitifyAPIError: Envelope reported failure or unexpected payload
            HabitifyTimeoutError: Request timeout
            HabitifyTransportError: Network error or unparseable response
        """
        params = params or GetJournalParams()

        time_of_day = params.time_of_day
        if isinstance(time_of_day, list):
            time_of_day = ",".join(time_of_day)

        query = {
            "target_date": normalize_optional_date(params.target_date),
            "order_by": params.order_by,
            "status": params.status,
            "area_id": params.area_id,
            "time_of_day": time_of_day,
        }

        endpoint = self._endpoint(RouteName.JOURNAL)
        payload = await self.make_request("GET", endpoint, params=query)

        habits = self._parse_model_list(Habit, payload, endpoint)
        logger.debug("Successfully retrieved %d journal habits", len(habits))
        return habits
