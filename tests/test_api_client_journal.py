"""Tests for HabitifyClient.get_journal()."""

from __future__ import annotations

from datetime import date

import pytest
from pytest_mock import MockerFixture

from habitify_client.api.client import HabitifyClient
from habitify_client.api.exceptions import HabitifyAPIError, HabitifyInvalidArgumentError
from habitify_client.api.models import (
    GetJournalParams,
    Habit,
    HabitOrderBy,
    HabitStatus,
    Periodicity,
    TimeOfDay,
)
from tests.factories import envelope_response, habit_payload
from tests.test_api_client_common import RecordingTransport


class TestGetJournal:
    """Test suite for the journal listing."""

    @pytest.mark.asyncio
    async def test_get_journal_without_filters(
        self, client: HabitifyClient, mocker: MockerFixture
    ) -> None:
        """No filters sends no query values and parses habits."""
        mock_request = mocker.patch.object(client, "make_request", return_value=[habit_payload()])

        habits = await client.get_journal()

        mock_request.assert_called_once_with(
            "GET",
            "journal",
            params={
                "target_date": None,
                "order_by": None,
                "status": None,
                "area_id": None,
                "time_of_day": None,
            },
        )
        assert len(habits) == 1
        habit = habits[0]
        assert isinstance(habit, Habit)
        assert habit.status == HabitStatus.IN_PROGRESS
        assert habit.progress is not None
        assert habit.progress.periodicity == Periodicity.DAILY
        assert habit.area is not None
        assert habit.area.name == "Health"

    @pytest.mark.asyncio
    async def test_get_journal_with_all_filters(
        self, client: HabitifyClient, mocker: MockerFixture
    ) -> None:
        """Filters are normalized and several times of day are joined by commas."""
        mock_request = mocker.patch.object(client, "make_request", return_value=[])

        await client.get_journal(
            GetJournalParams(
                target_date=date(2025, 7, 1),
                order_by=HabitOrderBy.PRIORITY,
                status=HabitStatus.COMPLETED,
                area_id="area-1",
                time_of_day=[TimeOfDay.MORNING, TimeOfDay.EVENING],
            )
        )

        mock_request.assert_called_once_with(
            "GET",
            "journal",
            params={
                "target_date": "2025-07-01T00:00:00+00:00",
                "order_by": "priority",
                "status": "completed",
                "area_id": "area-1",
                "time_of_day": "morning,evening",
            },
        )

    @pytest.mark.asyncio
    async def test_get_journal_single_time_of_day(
        self, client: HabitifyClient, mocker: MockerFixture
    ) -> None:
        """A single time of day is sent as is."""
        mock_request = mocker.patch.object(client, "make_request", return_value=[])

        await client.get_journal(GetJournalParams(time_of_day=TimeOfDay.ANY_TIME))

        assert mock_request.call_args.kwargs["params"]["time_of_day"] == "any_time"

    @pytest.mark.asyncio
    async def test_get_journal_query_on_the_wire(
        self, transport_client: HabitifyClient, transport: RecordingTransport
    ) -> None:
        """Only the filters that are set reach the query string."""
        transport.queue(envelope_response([habit_payload("a"), habit_payload("b")]))

        habits = await transport_client.get_journal(
            GetJournalParams(target_date="2025-07-01T10:00:00+07:00")
        )

        assert [habit.id for habit in habits] == ["a", "b"]
        assert dict(transport.last_request.url.params) == {
            "target_date": "2025-07-01T03:00:00+00:00"
        }

    @pytest.mark.asyncio
    async def test_get_journal_ignores_unknown_fields(
        self, client: HabitifyClient, mocker: MockerFixture
    ) -> None:
        """Fields added by the server later are tolerated."""
        mocker.patch.object(
            client, "make_request", return_value=[habit_payload(new_server_field=True)]
        )

        habits = await client.get_journal()

        assert habits[0].id == "habit-1"

    @pytest.mark.asyncio
    async def test_get_journal_invalid_date(
        self, client: HabitifyClient, mocker: MockerFixture
    ) -> None:
        """Unparseable dates are rejected before the request."""
        mock_request = mocker.patch.object(client, "make_request")

        with pytest.raises(HabitifyInvalidArgumentError, match="Invalid date"):
            await client.get_journal(GetJournalParams(target_date="yesterday-ish"))

        mock_request.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_journal_unexpected_payload(
        self, client: HabitifyClient, mocker: MockerFixture
    ) -> None:
        """A payload that is not a list of habits is a parse error."""
        mocker.patch.object(client, "make_request", return_value={"id": "not-a-list"})

        with pytest.raises(HabitifyAPIError, match="Failed to parse response"):
            await client.get_journal()
