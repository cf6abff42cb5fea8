"""Date normalization for Habitify API parameters.

The API expects timestamps as ``YYYY-MM-DDTHH:mm:ss±HH:MM``: second precision
and an explicit numeric UTC offset, never a ``Z`` suffix.
"""

from datetime import date, datetime, time, timedelta, tzinfo

from habitify_client.api.exceptions import HabitifyInvalidArgumentError

DateInput = str | date | datetime

_SECONDS_PER_MINUTE = 60
_MINUTES_PER_HOUR = 60


def _parse(value: DateInput) -> datetime:
    """Convert a supported date input into a (possibly naive) datetime."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        text = value.strip()
        try:
            return datetime.fromisoformat(text)
        except ValueError as error:
            raise HabitifyInvalidArgumentError.invalid_date(value) from error
    raise HabitifyInvalidArgumentError.invalid_date(value)


def _localize(moment: datetime, tz: tzinfo | None) -> datetime:
    """Express ``moment`` in ``tz`` (system local time when ``tz`` is None).

    Naive values are taken as wall time in the target zone.
    """
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz) if tz is not None else moment.astimezone()
    return moment.astimezone(tz)


def format_offset(offset: timedelta | None) -> str:
    """Render a UTC offset as ``±HH:MM``; zero renders as ``+00:00``."""
    total_seconds = int((offset or timedelta(0)).total_seconds())
    sign = "+" if total_seconds >= 0 else "-"
    hours, minutes = divmod(abs(total_seconds) // _SECONDS_PER_MINUTE, _MINUTES_PER_HOUR)
    return f"{sign}{hours:02d}:{minutes:02d}"


def normalize_date(value: DateInput | None = None, tz: tzinfo | None = None) -> str:
    """Canonicalize a date input into ``YYYY-MM-DDTHH:mm:ss±HH:MM``.

    Args:
        value: ISO-8601 string, ``datetime`` or ``date``. ``None`` means now.
        tz: Zone to express the result in. Defaults to the system local zone.

    Returns:
        str: Fixed-width timestamp with fractional seconds dropped

    Raises:
        HabitifyInvalidArgumentError: When ``value`` cannot be interpreted as a date
    """
    if value is None:
        local = datetime.now(tz).astimezone(tz)
    else:
        local = _localize(_parse(value), tz)

    return (
        f"{local.year:04d}-{local.month:02d}-{local.day:02d}"
        f"T{local.hour:02d}:{local.minute:02d}:{local.second:02d}"
        f"{format_offset(local.utcoffset())}"
    )


def normalize_optional_date(value: DateInput | None, tz: tzinfo | None = None) -> str | None:
    """Normalize ``value`` when given; leave absent optional filters absent."""
    if value is None:
        return None
    return normalize_date(value, tz)
