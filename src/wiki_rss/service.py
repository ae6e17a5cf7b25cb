"""Request-level feed and inspection operations.

FeedService ties the scheduler, resolver and renderer together. It holds no
state between calls; every feed is recomputed from the configuration, the
requested cadence and the current UTC date.
"""

import logging
import threading
from datetime import date, datetime

from schemas.article import ResolvedArticle
from schemas.feed import CADENCE_MAX, CADENCE_MIN, CadenceFeed

from wiki_rss.clients.lookup import PageLookup
from wiki_rss.config import FeedConfig
from wiki_rss.dates import utc_now, utc_today
from wiki_rss.errors import InvalidRequestError
from wiki_rss.renderers import FeedRenderer, RSSRenderer
from wiki_rss.resolver import ArticleResolver, InspectionResolver
from wiki_rss.scheduling import CadenceScheduler

logger = logging.getLogger(__name__)


class FeedService:
    """Build cadence feeds and inspect single dates.

    Example:
        config = FeedConfig.from_env()
        with WikipediaClient(config.client) as client:
            service = FeedService(config, client)
            xml = service.build_feed(3, origin="https://wiki-rss.example")
    """

    def __init__(
        self,
        config: FeedConfig,
        lookup: PageLookup,
        scheduler: CadenceScheduler | None = None,
        renderer: FeedRenderer | None = None,
    ):
        self.config = config
        self.scheduler = scheduler or CadenceScheduler()
        self.renderer = renderer or RSSRenderer()
        self.resolver = ArticleResolver(
            lookup,
            max_workers=config.max_workers,
            skip_unavailable=config.skip_unavailable,
        )
        self.inspector = InspectionResolver(self.resolver)

    def publish_dates(self, cadence: int, today: date | None = None) -> list[date]:
        """Return the validated publish schedule for ``cadence``.

        Raises:
            InvalidRequestError: If cadence is not an integer from 1 to 7
        """
        validate_cadence(cadence)
        return self.scheduler.schedule(
            today or utc_today(),
            cadence,
            self.config.anchor_date,
            self.config.max_feed_items,
        )

    def build_feed(
        self,
        cadence: int,
        origin: str,
        today: date | None = None,
        generated_at: datetime | None = None,
        cancel: threading.Event | None = None,
    ) -> str:
        """Build the RSS document for ``cadence``.

        Args:
            cadence: Days between articles, 1 to 7
            origin: Scheme and host used for the channel link
            today: Current UTC date (default: now)
            generated_at: Build timestamp (default: now)
            cancel: Optional event that abandons resolution when set

        Returns:
            The RSS 2.0 document

        Raises:
            InvalidRequestError: If cadence is out of range; no lookups are made
            ArticleUnavailableError: If a scheduled date cannot be resolved
        """
        dates = self.publish_dates(cadence, today)
        logger.info(f"Building cadence {cadence} feed with {len(dates)} dates")

        articles = self.resolver.resolve_many(dates, self.config.article_salt, cancel)
        feed = CadenceFeed(cadence=cadence, articles=articles)
        return self.renderer.render(feed, origin, generated_at or utc_now())

    def inspect_article(
        self,
        date_string: str,
        cancel: threading.Event | None = None,
    ) -> ResolvedArticle:
        """Resolve the article for a single ``YYYY-MM-DD`` date."""
        return self.inspector.inspect(date_string, self.config.article_salt, cancel)


def validate_cadence(cadence: int) -> int:
    """Check that ``cadence`` is an integer from 1 to 7."""
    if (
        isinstance(cadence, bool)
        or not isinstance(cadence, int)
        or not CADENCE_MIN <= cadence <= CADENCE_MAX
    ):
        raise InvalidRequestError(
            f"cadence must be an integer from {CADENCE_MIN} to {CADENCE_MAX}"
        )
    return cadence
