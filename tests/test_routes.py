"""Tests for endpoint path construction."""

from __future__ import annotations

import pytest

from habitify_client.api.exceptions import HabitifyInvalidArgumentError
from habitify_client.api.routes import ROUTES, RouteName, build_path, require_identifier
from habitify_client.config import ApiVersion


class TestRouteTables:
    """Both API layouts define every logical endpoint."""

    @pytest.mark.parametrize("api_version", list(ApiVersion))
    def test_every_route_defined(self, api_version: ApiVersion) -> None:
        """No route is missing from a layout."""
        assert set(ROUTES[api_version]) == set(RouteName)

    @pytest.mark.parametrize(
        ("route", "identifiers", "unversioned", "v1"),
        [
            (RouteName.JOURNAL, {}, "journal", "journal"),
            (RouteName.HABIT_STATUS, {"habit_id": "h1"}, "status/h1", "habits/h1/status"),
            (RouteName.LOGS, {"habit_id": "h1"}, "logs/h1", "habits/h1/logs"),
            (
                RouteName.LOG,
                {"habit_id": "h1", "log_id": "l1"},
                "logs/h1/l1",
                "habits/h1/logs/l1",
            ),
            (RouteName.MOOD, {"mood_id": "m1"}, "moods/m1", "moods/m1"),
            (
                RouteName.TEXT_NOTE,
                {"habit_id": "h1"},
                "notes/addTextNote/h1",
                "habits/h1/notes",
            ),
            (
                RouteName.IMAGE_NOTE,
                {"habit_id": "h1"},
                "notes/addImageNote/h1",
                "habits/h1/notes/image",
            ),
            (
                RouteName.ACTION,
                {"habit_id": "h1", "action_id": "a1"},
                "actions/h1/a1",
                "habits/h1/actions/a1",
            ),
        ],
    )
    def test_build_path_per_layout(
        self, route: RouteName, identifiers: dict[str, str], unversioned: str, v1: str
    ) -> None:
        """Templates differ per layout while identifiers are the same."""
        assert build_path(ApiVersion.UNVERSIONED, route, **identifiers) == unversioned
        assert build_path(ApiVersion.V1, route, **identifiers) == v1


class TestIdentifiers:
    """Identifiers are validated and encoded before interpolation."""

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_require_identifier_rejects_empty(self, value: str | None) -> None:
        """Empty identifiers raise with the parameter name."""
        with pytest.raises(HabitifyInvalidArgumentError, match="note_id cannot be empty"):
            require_identifier("note_id", value)

    def test_require_identifier_returns_value(self) -> None:
        """Valid identifiers are returned unchanged."""
        assert require_identifier("habit_id", " h1 ") == " h1 "

    def test_build_path_encodes_reserved_characters(self) -> None:
        """Slashes and query characters cannot escape the path segment."""
        path = build_path(ApiVersion.UNVERSIONED, RouteName.MOOD, mood_id="../x?y=1")

        assert path == "moods/..%2Fx%3Fy%3D1"
