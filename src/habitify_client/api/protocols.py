"""Protocol definitions for the Habitify API client.

This module provides typing protocols that let resource mixins reference
base client methods without circular imports, and describes the logger sink
accepted by the client configuration.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

if TYPE_CHECKING:
    from habitify_client.api.routes import RouteName

ModelT = TypeVar("ModelT", bound=BaseModel)


@runtime_checkable
class HabitifyLogger(Protocol):
    """Logger sink with info, error and debug channels.

    Any ``logging.Logger`` or ``logging.LoggerAdapter`` satisfies it.
    """

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        """Emit an informational record."""
        ...

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        """Emit an error record."""
        ...

    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        """Emit a debug record."""
        ...


class BaseClientProtocol(Protocol):
    """Protocol defining the interface that resource mixins depend on.

    This protocol declares the essential methods that mixins need to access
    from the base client, enabling proper type checking without tight coupling.
    """

    async def make_request(
        self,
        method: str,
        endpoint: str,
        data: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
    ) -> Any:
        """Make an authenticated request and return the unwrapped envelope ``data``."""
        ...

    def _endpoint(self, route: "RouteName", **identifiers: str) -> str:
        """Build the endpoint path for ``route`` with validated, encoded identifiers."""
        ...

    def _parse_model(self, model: type[ModelT], payload: Any, endpoint: str) -> ModelT:
        """Validate ``payload`` into ``model``, logging failures to the client's sink."""
        ...

    def _parse_model_list(self, model: type[ModelT], payload: Any, endpoint: str) -> list[ModelT]:
        """Validate a list payload into ``model`` items; null means an empty list."""
        ...
