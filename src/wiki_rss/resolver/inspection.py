"""Single-date article inspection."""

import logging
import threading

from schemas.article import ResolvedArticle

from wiki_rss.dates import parse_iso_date
from wiki_rss.errors import InvalidRequestError

from .article_resolver import ArticleResolver

logger = logging.getLogger(__name__)


class InspectionResolver:
    """Resolve the article for one arbitrary date given as a string.

    The date is validated before any lookup is made.
    """

    def __init__(self, resolver: ArticleResolver):
        self.resolver = resolver

    def inspect(
        self,
        date_string: str,
        salt: str,
        cancel: threading.Event | None = None,
    ) -> ResolvedArticle:
        """Resolve the article for ``date_string``.

        Raises:
            InvalidRequestError: If the string is not a valid YYYY-MM-DD date
            ArticleUnavailableError: If no candidate page resolved
        """
        article_date = parse_iso_date(date_string)
        if article_date is None:
            raise InvalidRequestError(
                f"invalid date {date_string!r}, expected YYYY-MM-DD"
            )
        logger.debug(f"Inspecting article for {article_date}")
        return self.resolver.resolve(article_date, salt, cancel)
