"""Areas functionality mixin for the Habitify API client."""

import logging
from typing import TYPE_CHECKING

from habitify_client.api.models import Area
from habitify_client.api.routes import RouteName

if TYPE_CHECKING:
    from habitify_client.api.protocols import BaseClientProtocol

logger = logging.getLogger(__name__)


class AreasClientMixin:
    """Mixin providing the read-only area listing for the Habitify API client."""

    async def get_areas(self: "BaseClientProtocol") -> list[Area]:
        """List all areas.

        Returns:
            list[Area]: Areas grouping the user's habits
        """
        endpoint = self._endpoint(RouteName.AREAS)

        payload = await self.make_request("GET", endpoint)

        areas = self._parse_model_list(Area, payload, endpoint)
        logger.debug("Successfully retrieved %d areas", len(areas))
        return areas
