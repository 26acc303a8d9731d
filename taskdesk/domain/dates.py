"""Instant parsing and calendar-day arithmetic shared by the task views."""
from __future__ import annotations

from datetime import date, datetime, time, timezone, tzinfo


def parse_instant(value: object) -> datetime | None:
    """Coerce a stored due value into a ``datetime``.

    Accepts datetimes, plain dates (taken as midnight) and ISO-8601 strings.
    Anything else, including text that does not parse, yields ``None``.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


def calendar_day(instant: datetime, tz: tzinfo | None = None) -> date:
    """Truncate ``instant`` to its day in ``tz``.

    Naive instants are already local and are truncated as they are.
    """
    if tz is not None and instant.tzinfo is not None:
        instant = instant.astimezone(tz)
    return instant.date()


def comparable_instant(instant: datetime, tz: tzinfo | None = None) -> datetime:
    """Map ``instant`` onto naive UTC so mixed snapshots compare.

    Naive values are local to ``tz``, as in :func:`calendar_day`; without a
    zone they are taken as UTC.
    """
    if instant.tzinfo is None:
        if tz is None:
            return instant
        instant = instant.replace(tzinfo=tz)
    return instant.astimezone(timezone.utc).replace(tzinfo=None)
