"""Cadence publication scheduling."""

from .scheduler import (
    DEFAULT_ANCHOR_DATE,
    MAX_SCAN_DAYS,
    CadenceScheduler,
    is_publish_day,
    resolve_anchor,
)

__all__ = [
    "CadenceScheduler",
    "DEFAULT_ANCHOR_DATE",
    "MAX_SCAN_DAYS",
    "is_publish_day",
    "resolve_anchor",
]
