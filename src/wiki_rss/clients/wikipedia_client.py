"""Wikipedia query API client for fetching pages by identifier."""

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from schemas.wiki_page import WikiPage, WikiQueryResponse

from .client import Client
from .exceptions import ClientError, InvalidResponseError
from .lookup import PageLookup

logger = logging.getLogger(__name__)

DEFAULT_WIKIPEDIA_BASE_URL = "https://en.wikipedia.org"
DEFAULT_USER_AGENT = "wiki-rss/0.1"


class WikipediaClient(Client, PageLookup):
    """Client for the MediaWiki ``action=query`` API.

    Requests the page info, canonical URL and plain-text introduction for a
    single page identifier.

    Example:
        config = {"base_url": "https://en.wikipedia.org"}
        with WikipediaClient(config) as client:
            page = client.lookup(12345)
    """

    API_PATH = "/w/api.php"

    def __init__(self, config: dict | None = None):
        config = dict(config or {})
        config.setdefault("base_url", DEFAULT_WIKIPEDIA_BASE_URL)
        headers = {
            "accept": "application/json",
            "user-agent": DEFAULT_USER_AGENT,
        }
        headers.update(config.get("headers", {}))
        config["headers"] = headers
        super().__init__(config)

    def fetch(self, page_id: int) -> WikiPage | None:
        """Fetch a page from the query API.

        Args:
            page_id: Wikipedia page identifier

        Returns:
            The page, or None if the response holds no existing page

        Raises:
            InvalidResponseError: If the response body is not a valid query response
            APIError: If the API keeps returning a non-2xx response
            ConnectionError: If the network connection keeps failing
        """
        response = self.get(self.API_PATH, params=self._build_params(page_id))

        try:
            body = WikiQueryResponse.model_validate(response.json())
        except ValueError as e:
            errors = e.errors() if isinstance(e, PydanticValidationError) else []
            raise InvalidResponseError(
                f"Invalid query response for page {page_id}",
                page_id=page_id,
                errors=[str(err) for err in errors],
            ) from e

        page = body.first_page()
        if page is None or not page.exists:
            return None
        return page

    def lookup(self, page_id: int) -> WikiPage | None:
        """Look up a page, collapsing every failure into None."""
        try:
            page = self.fetch(page_id)
        except ClientError as e:
            logger.warning(f"Lookup of page {page_id} gave no result: {e.message}")
            return None

        if page is None:
            logger.debug(f"Page {page_id} not found")
        return page

    def _build_params(self, page_id: int) -> dict[str, Any]:
        """Build query parameters for a single-page info/extract request."""
        return {
            "action": "query",
            "format": "json",
            "formatversion": "2",
            "prop": "extracts|info",
            "inprop": "url",
            "exintro": "1",
            "explaintext": "1",
            "pageids": str(page_id),
        }
