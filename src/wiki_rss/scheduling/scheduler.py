"""Cadence publication schedule.

A date is a publish date for cadence ``x`` when it falls on or after the
anchor date and a whole multiple of ``x`` days after it.
"""

import logging
from datetime import date, timedelta

from wiki_rss.config import DEFAULT_ANCHOR_DATE
from wiki_rss.dates import days_between, parse_iso_date

logger = logging.getLogger(__name__)

MAX_SCAN_DAYS = 3650


class CadenceScheduler:
    """Compute the recent publish dates of a cadence.

    Attributes:
        max_scan_days: Number of days scanned backward from today before giving up
    """

    def __init__(self, max_scan_days: int = MAX_SCAN_DAYS):
        self.max_scan_days = max_scan_days

    def schedule(
        self,
        today: date,
        cadence: int,
        anchor_date: str,
        max_items: int,
    ) -> list[date]:
        """Return up to ``max_items`` publish dates, most recent first.

        The caller is responsible for validating ``cadence``.

        Args:
            today: Current UTC date; the scan starts here
            cadence: Days between publications
            anchor_date: ``YYYY-MM-DD`` anchor; the default is used if malformed
            max_items: Maximum number of dates to return

        Returns:
            Publish dates in strictly descending order
        """
        anchor = resolve_anchor(anchor_date)
        results: list[date] = []

        for offset in range(self.max_scan_days):
            if len(results) >= max_items:
                break
            try:
                candidate = today - timedelta(days=offset)
            except OverflowError:
                break
            if is_publish_day(candidate, cadence, anchor):
                results.append(candidate)

        logger.debug(
            f"Cadence {cadence}: {len(results)} publish dates from {today} (anchor {anchor})"
        )
        return results


def is_publish_day(candidate: date, cadence: int, anchor: date) -> bool:
    delta = days_between(anchor, candidate)
    return delta >= 0 and delta % cadence == 0


def resolve_anchor(anchor_date: str) -> date:
    """Parse the configured anchor, falling back to the built-in default."""
    anchor = parse_iso_date(anchor_date)
    if anchor is None:
        logger.warning(
            f"Invalid anchor date {anchor_date!r}, using {DEFAULT_ANCHOR_DATE}"
        )
        anchor = date.fromisoformat(DEFAULT_ANCHOR_DATE)
    return anchor
