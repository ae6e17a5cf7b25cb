"""UTC calendar date helpers."""

import re
from datetime import date, datetime, timezone

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value: str) -> date | None:
    """Parse a ``YYYY-MM-DD`` string, returning None if it is not a real date.

    Examples:
        >>> parse_iso_date("2026-01-31")
        datetime.date(2026, 1, 31)
        >>> parse_iso_date("2026-02-30") is None
        True
    """
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value):
        return None
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        return None
    if parsed.isoformat() != value:
        return None
    return parsed


def days_between(start: date, end: date) -> int:
    """Whole calendar days from ``start`` to ``end``; negative if end is earlier."""
    return (end - start).days


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
