"""Date and hour helpers shared by the engine, validator and HTTP layer."""

import re
from datetime import date, datetime, timezone

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def day_of_week(value: date) -> int:
    """Weekday index in the catalog's convention: 0 = Sunday ... 6 = Saturday.

    Examples:
        >>> day_of_week(date(2026, 2, 8))
        0
        >>> day_of_week(date(2026, 2, 9))
        1
    """
    return (value.weekday() + 1) % 7


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def parse_iso_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string.

    Raises:
        ValueError: If the string is not in that shape or is not a real date.
    """
    if not ISO_DATE_PATTERN.fullmatch(value):
        raise ValueError(f"Expected YYYY-MM-DD, got {value!r}")
    return date.fromisoformat(value)


def format_date_hour(value: date, hour: int) -> str:
    """Compose a date and an hour into ``YYYY-MM-DDTHH:00``.

    Examples:
        >>> format_date_hour(date(2026, 2, 9), 9)
        '2026-02-09T09:00'
    """
    return f"{value.isoformat()}T{hour:02d}:00"


def inclusive_day_span(first: date, last: date) -> int:
    """Number of calendar days touched between two dates, never less than 1."""
    return max(1, (last - first).days + 1)

