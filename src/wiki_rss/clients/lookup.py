"""Page lookup capability consumed by the article resolver."""

from abc import ABC, abstractmethod

from schemas.wiki_page import WikiPage


class PageLookup(ABC):
    """Look up a Wikipedia page by numeric identifier.

    Implementations absorb their own transient failures: a page that does not
    exist and a page that could not be fetched both come back as None.
    """

    @abstractmethod
    def lookup(self, page_id: int) -> WikiPage | None:
        """Return the page for ``page_id``, or None if there is no usable result."""
        pass
