"""
Date helpers for shipment dates.

Shipment dates are stored as ISO ``YYYY-MM-DD`` strings. Input may also arrive
as a full ISO datetime or in the display format ``DD.MM.YYYY``.
"""

from datetime import date, datetime, timezone
from typing import Optional, Union

DISPLAY_FORMAT = "%d.%m.%Y"
INVALID_DATE = "Invalid date"

DateLike = Union[date, datetime, str]


def parse_date(value: DateLike) -> date:
    """
    Parse a date-like value into a ``date``.

    Datetimes with an offset are converted to UTC before the date part is
    taken, so ``2025-06-01T23:30:00-02:00`` becomes ``2025-06-02``.

    Raises:
        ValueError: if the value is empty or cannot be parsed
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Shipment date is required")

    text = value.strip()
    if "." in text and "-" not in text:
        return datetime.strptime(text, DISPLAY_FORMAT).date()
    if len(text) == 10:
        return date.fromisoformat(text)

    # Full ISO datetime; Python < 3.11 does not accept the "Z" suffix
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return parse_date(datetime.fromisoformat(text))


def normalize_shipment_date(value: DateLike) -> str:
    """Return the value as a ``YYYY-MM-DD`` string."""
    return parse_date(value).isoformat()


def format_display_date(value: DateLike) -> str:
    """Format a date as ``DD.MM.YYYY``, or "Invalid date" if it can't be parsed."""
    try:
        parsed = parse_date(value)
    except (ValueError, TypeError):
        return INVALID_DATE
    # strftime does not zero-pad years before 1000
    return f"{parsed.day:02d}.{parsed.month:02d}.{parsed.year:04d}"


def is_date_in_past(value: DateLike, today: Optional[date] = None) -> bool:
    """True if the date lies strictly before today. Unparseable dates are never past."""
    try:
        parsed = parse_date(value)
    except (ValueError, TypeError):
        return False
    return parsed < (today or date.today())


def days_between(start: DateLike, end: DateLike) -> int:
    """Whole days from start to end (negative if end is earlier), 0 on bad input."""
    try:
        return (parse_date(end) - parse_date(start)).days
    except (ValueError, TypeError):
        return 0
