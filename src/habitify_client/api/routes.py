"""Endpoint path templates for each supported Habitify API layout.

The unversioned API groups routes by resource (``logs/{habit_id}``) while
``/v1`` nests them below the habit (``habits/{habit_id}/logs``). Both tables
must define every ``RouteName``.
"""

import urllib.parse
from enum import StrEnum

from habitify_client.api.exceptions import HabitifyInvalidArgumentError
from habitify_client.config import ApiVersion


class RouteName(StrEnum):
    """Logical endpoints addressed by the resource client."""

    JOURNAL = "journal"
    HABIT_STATUS = "habit_status"
    LOGS = "logs"
    LOG = "log"
    MOODS = "moods"
    MOOD = "mood"
    AREAS = "areas"
    NOTES = "notes"
    TEXT_NOTE = "text_note"
    IMAGE_NOTE = "image_note"
    NOTE = "note"
    ACTIONS = "actions"
    ACTION = "action"


ROUTES: dict[ApiVersion, dict[RouteName, str]] = {
    ApiVersion.UNVERSIONED: {
        RouteName.JOURNAL: "journal",
        RouteName.HABIT_STATUS: "status/{habit_id}",
        RouteName.LOGS: "logs/{habit_id}",
        RouteName.LOG: "logs/{habit_id}/{log_id}",
        RouteName.MOODS: "moods",
        RouteName.MOOD: "moods/{mood_id}",
        RouteName.AREAS: "areas",
        RouteName.NOTES: "notes/{habit_id}",
        RouteName.TEXT_NOTE: "notes/addTextNote/{habit_id}",
        RouteName.IMAGE_NOTE: "notes/addImageNote/{habit_id}",
        RouteName.NOTE: "notes/{habit_id}/{note_id}",
        RouteName.ACTIONS: "actions/{habit_id}",
        RouteName.ACTION: "actions/{habit_id}/{action_id}",
    },
    ApiVersion.V1: {
        RouteName.JOURNAL: "journal",
        RouteName.HABIT_STATUS: "habits/{habit_id}/status",
        RouteName.LOGS: "habits/{habit_id}/logs",
        RouteName.LOG: "habits/{habit_id}/logs/{log_id}",
        RouteName.MOODS: "moods",
        RouteName.MOOD: "moods/{mood_id}",
        RouteName.AREAS: "areas",
        RouteName.NOTES: "habits/{habit_id}/notes",
        RouteName.TEXT_NOTE: "habits/{habit_id}/notes",
        RouteName.IMAGE_NOTE: "habits/{habit_id}/notes/image",
        RouteName.NOTE: "habits/{habit_id}/notes/{note_id}",
        RouteName.ACTIONS: "habits/{habit_id}/actions",
        RouteName.ACTION: "habits/{habit_id}/actions/{action_id}",
    },
}


def require_identifier(name: str, value: str | None) -> str:
    """Return ``value`` unchanged, rejecting empty or whitespace-only identifiers.

    Raises:
        HabitifyInvalidArgumentError: When the identifier is missing
    """
    if not value or not value.strip():
        raise HabitifyInvalidArgumentError.empty_identifier(name)
    return value


def build_path(api_version: ApiVersion, route: RouteName, **identifiers: str) -> str:
    """Interpolate validated, URL-encoded identifiers into the route template.

    Args:
        api_version: API layout whose template table is used
        route: Logical endpoint
        **identifiers: Values for every placeholder of the template

    Returns:
        str: Endpoint path relative to the base URL

    Raises:
        HabitifyInvalidArgumentError: When an identifier is empty
    """
    encoded = {
        name: urllib.parse.quote(require_identifier(name, value), safe="")
        for name, value in identifiers.items()
    }
    return ROUTES[api_version][route].format(**encoded)
