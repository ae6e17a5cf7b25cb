"""Jinja2 filters for feed template rendering.

These filters are used in feed.rss.j2 to format dates and channel text.
"""

from datetime import date, datetime, time, timezone
from email.utils import format_datetime


def rfc822(value: date | datetime) -> str:
    """Format a date or datetime as an RFC 822 timestamp in GMT.

    Plain dates are treated as midnight UTC; naive datetimes are assumed UTC.

    Examples:
        >>> rfc822(date(2026, 1, 5))
        'Mon, 05 Jan 2026 00:00:00 GMT'
    """
    if isinstance(value, datetime):
        dt = value
    else:
        dt = datetime.combine(value, time.min)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return format_datetime(dt.astimezone(timezone.utc), usegmt=True)


def pluralize(word: str, count: int) -> str:
    """Append an "s" to ``word`` unless ``count`` is exactly one.

    Examples:
        >>> pluralize("day", 1)
        'day'
        >>> pluralize("Day", 3)
        'Days'
    """
    return word if count == 1 else f"{word}s"


FILTERS = {
    "rfc822": rfc822,
    "pluralize": pluralize,
}
