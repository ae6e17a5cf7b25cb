"""Deterministic date to article resolution.

The article for a date is found by hashing ``<salt>:<date>`` into a seed and
probing a fixed sequence of candidate page identifiers derived from it. The
first candidate that resolves to an existing page wins. Given the same lookup
responses, the same (salt, date) always yields the same article.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from urllib.parse import quote

from schemas.article import ResolvedArticle
from schemas.wiki_page import WikiPage

from wiki_rss.clients.lookup import PageLookup
from wiki_rss.errors import ArticleUnavailableError, ResolutionCancelledError

from .seeding import MAX_PAGE_LOOKUP_ATTEMPTS, candidate_page_id, seeded_hash

logger = logging.getLogger(__name__)

FALLBACK_TITLE = "Wikipedia Article"
FALLBACK_EXTRACT = "No summary available."
WIKI_ARTICLE_URL = "https://en.wikipedia.org/wiki/"

# Characters encodeURIComponent leaves alone beyond quote()'s defaults
_URI_COMPONENT_SAFE = "!*'()"


class ArticleResolver:
    """Resolve calendar dates to Wikipedia articles.

    Attributes:
        lookup: Page lookup used to probe candidate identifiers
        max_attempts: Number of candidates probed before giving up
        max_workers: Threads used by resolve_many (1 resolves sequentially)
        skip_unavailable: If True, resolve_many drops unresolvable dates
            instead of raising
    """

    def __init__(
        self,
        lookup: PageLookup,
        max_attempts: int = MAX_PAGE_LOOKUP_ATTEMPTS,
        max_workers: int = 1,
        skip_unavailable: bool = False,
    ):
        self.lookup = lookup
        self.max_attempts = max_attempts
        self.max_workers = max(1, max_workers)
        self.skip_unavailable = skip_unavailable

    def resolve(
        self,
        article_date: date,
        salt: str,
        cancel: threading.Event | None = None,
    ) -> ResolvedArticle:
        """Resolve the article for a single date.

        Args:
            article_date: UTC calendar date to resolve
            salt: Deployment salt mixed into the seed
            cancel: Optional event; once set, no further lookups are made

        Returns:
            The ResolvedArticle stamped with ``article_date``

        Raises:
            ArticleUnavailableError: If every candidate gave no result
            ResolutionCancelledError: If ``cancel`` was set mid-resolution
        """
        seed = seeded_hash(f"{salt}:{article_date.isoformat()}")

        for attempt in range(self.max_attempts):
            if cancel is not None and cancel.is_set():
                raise ResolutionCancelledError(
                    f"resolution of {article_date.isoformat()} cancelled"
                )

            page_id = candidate_page_id(seed, attempt)
            page = self.lookup.lookup(page_id)
            if page is None:
                logger.debug(
                    f"{article_date}: candidate {page_id} gave no result "
                    f"(attempt {attempt + 1}/{self.max_attempts})"
                )
                continue

            article = build_article(article_date, page_id, page)
            logger.info(f"{article_date}: resolved page {page_id} ({article.title})")
            return article

        logger.error(
            f"{article_date}: no article after {self.max_attempts} candidates"
        )
        raise ArticleUnavailableError(article_date)

    def resolve_many(
        self,
        dates: list[date],
        salt: str,
        cancel: threading.Event | None = None,
    ) -> list[ResolvedArticle]:
        """Resolve several dates, keeping the order of ``dates``.

        Each date is resolved independently. With more than one worker the
        dates are resolved concurrently; results are still returned in input
        order. Without skip_unavailable, lookups stop at the first failure.

        Raises:
            ArticleUnavailableError: For the first unresolvable date in input
                order, unless skip_unavailable is set
            ResolutionCancelledError: If ``cancel`` was set
        """
        articles: list[ResolvedArticle] = []

        if self.max_workers == 1 or len(dates) <= 1:
            for article_date in dates:
                self._accept(self._resolve_outcome(article_date, salt, cancel), articles)
            return articles

        stop = threading.Event()
        signal = _StopSignal(cancel, stop)
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [
                executor.submit(self._resolve_outcome, d, salt, signal) for d in dates
            ]
            try:
                for future in futures:
                    self._accept(future.result(), articles)
            except BaseException:
                # Running workers give up at their next candidate
                stop.set()
                executor.shutdown(wait=False, cancel_futures=True)
                raise

        return articles

    def _resolve_outcome(
        self,
        article_date: date,
        salt: str,
        cancel: threading.Event | None,
    ) -> ResolvedArticle | ArticleUnavailableError:
        try:
            return self.resolve(article_date, salt, cancel)
        except ArticleUnavailableError as e:
            return e

    def _accept(
        self,
        outcome: ResolvedArticle | ArticleUnavailableError,
        articles: list[ResolvedArticle],
    ) -> None:
        if isinstance(outcome, ArticleUnavailableError):
            if not self.skip_unavailable:
                raise outcome
            logger.warning(f"Skipping {outcome.date}: {outcome.message}")
            return
        articles.append(outcome)


class _StopSignal:
    """Cancel signal that is set when either the caller's or the pool's event is."""

    def __init__(self, cancel: threading.Event | None, stop: threading.Event):
        self.cancel = cancel
        self.stop = stop

    def is_set(self) -> bool:
        return self.stop.is_set() or (self.cancel is not None and self.cancel.is_set())


def build_article(article_date: date, page_id: int, page: WikiPage) -> ResolvedArticle:
    """Normalize a looked-up page into a ResolvedArticle.

    Blank titles and extracts are replaced with fixed placeholders, and a
    canonical URL is derived from the title when the page has none.
    """
    title = (page.title or "").strip() or FALLBACK_TITLE
    url = page.fullurl or WIKI_ARTICLE_URL + quote(title, safe=_URI_COMPONENT_SAFE)
    extract = (page.extract or "").strip() or FALLBACK_EXTRACT
    return ResolvedArticle(
        date=article_date,
        wiki_page_id=page_id,
        title=title,
        url=url,
        extract=extract,
    )
