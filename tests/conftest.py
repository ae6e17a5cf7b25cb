"""Pytest fixtures for wiki-rss tests."""

from collections.abc import Callable

import pytest

from schemas.wiki_page import WikiPage
from wiki_rss.clients import PageLookup


class StubLookup(PageLookup):
    """Deterministic PageLookup with a recorded call log.

    Explicit ``pages`` win; ids in ``missing`` give no result; any other id
    is answered by ``default`` (None means no result).
    """

    def __init__(
        self,
        pages: dict[int, WikiPage] | None = None,
        missing: set[int] | None = None,
        default: Callable[[int], WikiPage | None] | None = None,
    ):
        self.pages = pages or {}
        self.missing = missing or set()
        self.default = default
        self.calls: list[int] = []

    def lookup(self, page_id: int) -> WikiPage | None:
        self.calls.append(page_id)
        if page_id in self.pages:
            return self.pages[page_id]
        if page_id in self.missing or self.default is None:
            return None
        return self.default(page_id)


def numbered_page(page_id: int) -> WikiPage:
    return WikiPage(
        pageid=page_id,
        title=f"Page {page_id}",
        fullurl=f"https://en.wikipedia.org/wiki/Page_{page_id}",
        extract=f"Summary of page {page_id}.",
    )


@pytest.fixture
def stub_lookup_class():
    """The StubLookup class, for tests that need custom stubs."""
    return StubLookup


@pytest.fixture
def every_page_lookup():
    """A lookup where every identifier is an existing page."""
    return StubLookup(default=numbered_page)


@pytest.fixture
def no_page_lookup():
    """A lookup where no identifier resolves."""
    return StubLookup()


@pytest.fixture
def sample_query_body():
    """Sample formatversion=2 query response for an existing page."""
    return {
        "batchcomplete": True,
        "query": {
            "pages": [
                {
                    "pageid": 736,
                    "ns": 0,
                    "title": "Albert Einstein",
                    "contentmodel": "wikitext",
                    "pagelanguage": "en",
                    "touched": "2026-01-04T12:00:00Z",
                    "lastrevid": 1234567,
                    "length": 200000,
                    "fullurl": "https://en.wikipedia.org/wiki/Albert_Einstein",
                    "editurl": "https://en.wikipedia.org/w/index.php?title=Albert_Einstein&action=edit",
                    "canonicalurl": "https://en.wikipedia.org/wiki/Albert_Einstein",
                    "extract": "Albert Einstein was a German-born theoretical physicist.",
                }
            ]
        },
    }


@pytest.fixture
def missing_query_body():
    """Sample query response for an identifier with no page."""
    return {
        "batchcomplete": True,
        "query": {"pages": [{"pageid": 59999999, "missing": True}]},
    }


@pytest.fixture
def page_factory():
    """Build a distinct existing page for any identifier."""
    return numbered_page
