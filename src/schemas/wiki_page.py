"""Wikipedia query API response schemas.

Only the fields requested by the article lookup are modelled; any other keys
returned by the API are kept as extras.
"""

from pydantic import BaseModel


class WikiPage(BaseModel):
    """A single page entry from a ``formatversion=2`` query response."""

    pageid: int | None = None
    title: str | None = None
    fullurl: str | None = None
    extract: str | None = None
    missing: bool = False
    invalid: bool = False

    model_config = {"extra": "allow"}

    @property
    def exists(self) -> bool:
        """True when the entry describes a real, readable page."""
        return not self.missing and not self.invalid and bool(self.pageid)


class WikiQuery(BaseModel):
    pages: list[WikiPage] = []

    model_config = {"extra": "allow"}


class WikiQueryResponse(BaseModel):
    """Top-level body of an ``action=query`` response."""

    query: WikiQuery | None = None

    model_config = {"extra": "allow"}

    def first_page(self) -> WikiPage | None:
        """Return the first page entry, or None if the body has none."""
        if self.query is None or not self.query.pages:
            return None
        return self.query.pages[0]
