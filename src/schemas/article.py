"""Resolved article value object."""

import datetime

from pydantic import BaseModel, Field, computed_field, field_serializer

MAX_WIKI_PAGE_ID = 60_000_000


class ResolvedArticle(BaseModel):
    """The article chosen for a single calendar date.

    Attributes:
        date: UTC calendar date the article belongs to
        wiki_page_id: Wikipedia page identifier that resolved
        title: Page title
        url: Absolute URL of the page
        extract: Plain-text introduction, or a fixed placeholder
        chosen_at: Midnight UTC of ``date``; never the wall-clock resolution time
    """

    date: datetime.date
    wiki_page_id: int = Field(ge=1, le=MAX_WIKI_PAGE_ID)
    title: str = Field(min_length=1)
    url: str = Field(min_length=1)
    extract: str

    model_config = {"frozen": True}

    @computed_field
    @property
    def chosen_at(self) -> datetime.datetime:
        return datetime.datetime.combine(
            self.date, datetime.time.min, tzinfo=datetime.timezone.utc
        )

    @field_serializer("chosen_at", when_used="json")
    def serialize_chosen_at(self, value: datetime.datetime) -> str:
        """ISO 8601 in UTC with millisecond precision, e.g. ``2026-01-05T00:00:00.000Z``."""
        return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    @property
    def guid(self) -> str:
        """Stable feed item identifier, ``<date>:<page id>``."""
        return f"{self.date.isoformat()}:{self.wiki_page_id}"
