"""Notes functionality mixin for the Habitify API client.

This module provides the NotesClientMixin class that lists, attaches and
deletes text and image notes on a habit, designed to be composed with the
base client.
"""

import logging
from typing import TYPE_CHECKING

from habitify_client.api.models import (
    AddImageNoteParams,
    AddTextNoteParams,
    DeleteNoteParams,
    DeleteNotesParams,
    GetNotesParams,
    Note,
)
from habitify_client.api.routes import RouteName
from habitify_client.dates import normalize_date, normalize_optional_date

if TYPE_CHECKING:
    from habitify_client.api.protocols import BaseClientProtocol

logger = logging.getLogger(__name__)


class NotesClientMixin:
    """Mixin providing note operations for the Habitify API client."""

    async def get_notes(self: "BaseClientProtocol", params: GetNotesParams) -> list[Note]:
        """List the notes of a habit.

        Args:
            params: Habit ID and optional ``from``/``to`` range

        Returns:
            list[Note]: Text and image notes of the habit
        """
        endpoint = self._endpoint(RouteName.NOTES, habit_id=params.habit_id)
        query = {
            "from": normalize_optional_date(params.from_),
            "to": normalize_optional_date(params.to),
        }

        payload = await self.make_request("GET", endpoint, params=query)

        notes = self._parse_model_list(Note, payload, endpoint)
        logger.debug("Successfully retrieved %d notes for habit %s", len(notes), params.habit_id)
        return notes

    async def add_text_note(
        self: "BaseClientProtocol", params: AddTextNoteParams
    ) -> Note | None:
        """Attach a text note to a habit.

        Args:
            params: Habit ID, note content and creation time (defaults to now)

        Returns:
            Note | None: Created note, or None when the API returns no data

        Raises:
            HabitifyInvalidArgumentError: Empty habit ID or unparseable date
            HabitifyAPIError: Envelope reported failure or unexpected payload
            HabitifyTimeoutError: Request timeout
            HabitifyTransportError: Network error or unparseable response
        """
        endpoint = self._endpoint(RouteName.TEXT_NOTE, habit_id=params.habit_id)
        body = {"content": params.content, "created_at": normalize_date(params.created_at)}

        payload = await self.make_request("POST", endpoint, data=body)

        if payload is None:
            logger.debug("Text note creation for habit %s returned no data", params.habit_id)
            return None
        note = self._parse_model(Note, payload, endpoint)
        logger.debug("Successfully added text note %s to habit %s", note.id, params.habit_id)
        return note

    async def add_image_note(
        self: "BaseClientProtocol", params: AddImageNoteParams
    ) -> Note | None:
        """Attach an image note to a habit.

        The request is multipart with exactly two parts: ``image`` (binary)
        and ``created_at`` (text). The JSON content type used by every other
        call is not sent.

        Args:
            params: Habit ID, image bytes with part metadata, creation time (defaults to now)

        Returns:
            Note | None: Created note, or None when the API returns no data

        Raises:
            HabitifyInvalidArgumentError: Empty habit ID or unparseable date
            HabitifyAPIError: Envelope reported failure or unexpected payload
            HabitifyTimeoutError: Request timeout
            HabitifyTransportError: Network error or unparseable response
        """
        endpoint = self._endpoint(RouteName.IMAGE_NOTE, habit_id=params.habit_id)
        fields = {"created_at": normalize_date(params.created_at)}
        files = {"image": (params.filename, params.image, params.content_type)}

        payload = await self.make_request("POST", endpoint, data=fields, files=files)

        if payload is None:
            logger.debug("Image note creation for habit %s returned no data", params.habit_id)
            return None
        note = self._parse_model(Note, payload, endpoint)
        logger.debug("Successfully added image note %s to habit %s", note.id, params.habit_id)
        return note

    async def delete_note(self: "BaseClientProtocol", params: DeleteNoteParams) -> None:
        """Delete a single note of a habit."""
        endpoint = self._endpoint(
            RouteName.NOTE, habit_id=params.habit_id, note_id=params.note_id
        )

        await self.make_request("DELETE", endpoint)
        logger.debug("Successfully deleted note %s of habit %s", params.note_id, params.habit_id)

    async def delete_notes(self: "BaseClientProtocol", params: DeleteNotesParams) -> None:
        """Delete the notes of a habit, optionally restricted to a date range."""
        endpoint = self._endpoint(RouteName.NOTES, habit_id=params.habit_id)
        query = {
            "from": normalize_optional_date(params.from_),
            "to": normalize_optional_date(params.to),
        }

        await self.make_request("DELETE", endpoint, params=query)
        logger.debug("Successfully deleted notes of habit %s", params.habit_id)
