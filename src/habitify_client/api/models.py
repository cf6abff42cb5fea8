"""Data models for Habitify API requests and responses.

This module defines Pydantic models and enums used to parse and validate
Habitify API data. Response models are frozen snapshots that ignore unknown
fields; request parameter models forbid unknown fields and serialize enums
by value.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import IntEnum, StrEnum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

DateValue = str | datetime | date


class TimeOfDay(StrEnum):
    """Time-of-day tags attached to habits."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    ANY_TIME = "any_time"


class Periodicity(StrEnum):
    """Recurrence granularity of a habit goal."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class LogMethod(StrEnum):
    """Sources a habit log can be recorded from."""

    MANUAL = "manual"
    APPLE_HEALTH = "appleHealth"
    GOOGLE_FIT = "googleFit"
    SAMSUNG_HEALTH = "samsungHealth"


class HabitStatus(StrEnum):
    """Status of a habit on a given day."""

    NONE = "none"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    SKIPPED = "skipped"
    FAILED = "failed"


class UpdatableHabitStatus(StrEnum):
    """Status values a client may set on a habit."""

    COMPLETED = "completed"
    SKIPPED = "skipped"
    NONE = "none"


class HabitOrderBy(StrEnum):
    """Sort orders accepted by the journal listing."""

    PRIORITY = "priority"
    REMINDER_TIME = "reminder_time"
    STATUS = "status"


class UnitType(StrEnum):
    """Unit symbols known to the Habitify API.

    Unit fields accept any string; these are the documented ones.
    """

    KILOMETER = "kM"
    METER = "m"
    FOOT = "ft"
    YARD = "yd"
    MILE = "mi"
    LITER = "L"
    MILLILITER = "mL"
    FLUID_OUNCE = "fl oz"
    CUP = "cup"
    KILOGRAM = "kg"
    GRAM = "g"
    MILLIGRAM = "mg"
    OUNCE = "oz"
    POUND = "lb"
    MICROGRAM = "mcg"
    SECOND = "sec"
    MINUTE = "min"
    HOUR = "hr"
    JOULE = "J"
    KILOJOULE = "kJ"
    KILOCALORIE = "kCal"
    CALORIE = "cal"
    REPETITION = "rep"


class ActionStatus(IntEnum):
    """Completion state of an action."""

    NOT_DONE_YET = 0
    DONE = 1


class MoodValue(IntEnum):
    """Mood scale from 1 (terrible) to 5 (excellent)."""

    TERRIBLE = 1
    BAD = 2
    OKAY = 3
    GOOD = 4
    EXCELLENT = 5


class NoteType(IntEnum):
    """Kind of note attached to a habit."""

    TEXT = 1
    IMAGE = 2


class Envelope(BaseModel):
    """Uniform wrapper around every Habitify API response.

    ``data`` is meaningless when ``status`` is false.
    """

    model_config = ConfigDict(frozen=True)

    message: str | None = Field(default=None, description="Human readable server message")
    data: Any = Field(default=None, description="Operation payload")
    version: str | None = Field(default=None, description="API version string")
    status: bool = Field(description="True on success")


class _Snapshot(BaseModel):
    """Base for immutable response entities."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class Goal(_Snapshot):
    """Target value of a habit for its periodicity."""

    unit_type: str = Field(description="Unit symbol, e.g. 'rep' or 'min'")
    value: float = Field(description="Target value")
    periodicity: Periodicity = Field(description="Goal periodicity")


class Progress(_Snapshot):
    """Current versus target value of a goal as of a reference date."""

    current_value: float
    target_value: float
    unit_type: str
    periodicity: Periodicity
    reference_date: str


class Area(_Snapshot):
    """Named grouping of habits."""

    id: str = Field(description="Area ID")
    name: str = Field(description="Area name")
    created_date: str | None = Field(default=None, description="Creation timestamp")
    priority: str | float | None = Field(default=None, description="Sort priority")


class Habit(_Snapshot):
    """Tracked recurring activity.

    ``status`` and ``progress`` are only present in journal listings.
    """

    id: str
    name: str
    is_archived: bool = False
    start_date: str
    time_of_day: list[TimeOfDay] = Field(default_factory=list)
    goal: Goal | None = None
    goal_history_items: list[Goal] | None = None
    log_method: str | None = Field(default=None, description="One of LogMethod values")
    recurrence: str = Field(description="RRULE recurrence string")
    remind: list[str] | None = None
    area: Area | None = None
    created_date: str
    priority: float = 0
    status: HabitStatus | None = None
    progress: Progress | None = None


class HabitStatusResult(_Snapshot):
    """Status of a habit for a single day."""

    status: HabitStatus
    progress: Progress | None = None


class Log(_Snapshot):
    """Value recorded against a habit."""

    id: str
    value: float
    created_date: str
    unit_type: str
    habit_id: str


class Mood(_Snapshot):
    """Timestamped mood entry."""

    id: str
    value: MoodValue
    created_at: str


class Note(_Snapshot):
    """Text or image note attached to a habit."""

    id: str
    content: str | None = None
    created_date: str | None = None
    habit_id: str
    note_type: NoteType
    image_url: str | None = None


class Action(_Snapshot):
    """Reminder or task tied to a habit."""

    id: str
    remind_at: str
    status: ActionStatus
    title: str
    updated_at: str | None = None
    habit_id: str


class _Params(BaseModel):
    """Base for request parameter models."""

    model_config = ConfigDict(use_enum_values=True, extra="forbid", populate_by_name=True)


class _HabitScoped(_Params):
    habit_id: str = Field(description="ID of the habit the operation targets")


class _DateRange(_HabitScoped):
    from_: DateValue | None = Field(default=None, alias="from", description="Range start")
    to: DateValue | None = Field(default=None, description="Range end")


class GetJournalParams(_Params):
    """Filters for the journal listing."""

    target_date: DateValue | None = Field(default=None, description="Day to list")
    order_by: HabitOrderBy | None = None
    status: HabitStatus | None = None
    area_id: str | None = None
    time_of_day: TimeOfDay | list[TimeOfDay] | None = None


class GetHabitStatusParams(_HabitScoped):
    """Query for a habit's status on a day."""

    target_date: DateValue | None = None


class UpdateHabitStatusParams(_HabitScoped):
    """New status of a habit on a day; ``target_date`` defaults to now."""

    status: UpdatableHabitStatus
    target_date: DateValue | None = None


class GetLogsParams(_DateRange):
    """Logs of a habit, optionally within a date range."""


class AddLogParams(_HabitScoped):
    """Value to record; ``target_date`` defaults to now."""

    unit_type: str
    value: float
    target_date: DateValue | None = None


class DeleteLogParams(_HabitScoped):
    """Single log to delete."""

    log_id: str


class DeleteLogsParams(_DateRange):
    """Logs of a habit to delete, optionally within a date range."""


class GetMoodsParams(_Params):
    """Optional day filter for moods."""

    target_date: DateValue | None = None


class GetMoodParams(_Params):
    """Single mood lookup."""

    mood_id: str


class CreateMoodParams(_Params):
    """New mood entry; ``created_at`` defaults to now."""

    value: MoodValue
    created_at: DateValue | None = None


class UpdateMoodParams(CreateMoodParams):
    """Replacement values for an existing mood."""

    mood_id: str


class DeleteMoodParams(GetMoodParams):
    """Single mood to delete."""


class GetNotesParams(_DateRange):
    """Notes of a habit, optionally within a date range."""


class AddTextNoteParams(_HabitScoped):
    """Text note to attach; ``created_at`` defaults to now."""

    content: str
    created_at: DateValue | None = None


class AddImageNoteParams(_HabitScoped):
    """Image note to attach; ``created_at`` defaults to now.

    ``filename`` and ``content_type`` describe the uploaded part only.
    """

    image: bytes
    filename: str = "image.jpg"
    content_type: str = "image/jpeg"
    created_at: DateValue | None = None


class DeleteNoteParams(_HabitScoped):
    """Single note to delete."""

    note_id: str


class DeleteNotesParams(_DateRange):
    """Notes of a habit to delete, optionally within a date range."""


class GetActionsParams(_HabitScoped):
    """Actions of a habit."""


class GetActionParams(_HabitScoped):
    """Single action lookup."""

    action_id: str


class CreateActionParams(_HabitScoped):
    """New action for a habit."""

    title: str
    remind_at: DateValue


class UpdateActionParams(GetActionParams):
    """Partial update of an action; omitted fields are left unchanged."""

    status: ActionStatus | None = None
    title: str | None = None
    remind_at: DateValue | None = None


class DeleteActionParams(GetActionParams):
    """Single action to delete."""
