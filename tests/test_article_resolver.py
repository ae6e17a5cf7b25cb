"""Tests for the ArticleResolver."""

import threading
import time
from datetime import date, datetime, timedelta, timezone

import pytest

from schemas.article import ResolvedArticle
from schemas.wiki_page import WikiPage
from wiki_rss.clients import PageLookup
from wiki_rss.errors import ArticleUnavailableError, ResolutionCancelledError
from wiki_rss.resolver import ArticleResolver, build_article
from wiki_rss.resolver.article_resolver import FALLBACK_EXTRACT, FALLBACK_TITLE
from wiki_rss.resolver.seeding import (
    MAX_PAGE_LOOKUP_ATTEMPTS,
    candidate_page_ids,
    seeded_hash,
)

SALT = "wiki-rss"


def candidates_for(day: date, salt: str = SALT) -> list[int]:
    return candidate_page_ids(seeded_hash(f"{salt}:{day.isoformat()}"))


class SlowLookup(PageLookup):
    """Lookup that takes a moment per call and never finds a page."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls: list[int] = []
        self._lock = threading.Lock()

    def lookup(self, page_id: int) -> WikiPage | None:
        with self._lock:
            self.calls.append(page_id)
        time.sleep(0.002)
        if self.error is not None:
            raise self.error
        return None


class TestResolve:
    """Tests for ArticleResolver.resolve()."""

    def test_first_candidate_wins(self, every_page_lookup):
        """The first existing candidate is returned after a single lookup."""
        resolver = ArticleResolver(every_page_lookup)
        day = date(2026, 1, 5)

        article = resolver.resolve(day, SALT)

        first = candidates_for(day)[0]
        assert every_page_lookup.calls == [first]
        assert article.wiki_page_id == first
        assert article.title == f"Page {first}"
        assert article.url == f"https://en.wikipedia.org/wiki/Page_{first}"
        assert article.extract == f"Summary of page {first}."

    def test_stamped_with_requested_date(self, every_page_lookup):
        """The article carries the requested date and midnight UTC."""
        resolver = ArticleResolver(every_page_lookup)

        article = resolver.resolve(date(2026, 3, 14), SALT)

        assert article.date == date(2026, 3, 14)
        assert article.chosen_at == datetime(2026, 3, 14, tzinfo=timezone.utc)

    def test_deterministic(self, every_page_lookup):
        """Repeated resolution of the same date gives the same article."""
        resolver = ArticleResolver(every_page_lookup)

        first = resolver.resolve(date(2026, 1, 5), SALT)
        second = resolver.resolve(date(2026, 1, 5), SALT)

        assert first == second

    def test_salt_changes_candidates(self, every_page_lookup):
        """Different salts probe different candidates."""
        resolver = ArticleResolver(every_page_lookup)

        a = resolver.resolve(date(2026, 1, 5), "salt-a")
        b = resolver.resolve(date(2026, 1, 5), "salt-b")

        assert a.wiki_page_id != b.wiki_page_id

    def test_skips_missing_candidates(self, stub_lookup_class, page_factory):
        """Candidates with no result are skipped in order."""
        day = date(2026, 1, 5)
        ids = candidates_for(day)
        lookup = stub_lookup_class(missing=set(ids[:3]), default=page_factory)
        resolver = ArticleResolver(lookup)

        article = resolver.resolve(day, SALT)

        assert lookup.calls == ids[:4]
        assert article.wiki_page_id == ids[3]

    def test_last_candidate_resolves(self, stub_lookup_class):
        """The fourteenth candidate is still probed."""
        day = date(2026, 1, 5)
        ids = candidates_for(day)
        lookup = stub_lookup_class(pages={ids[13]: WikiPage(pageid=ids[13], title="Last")})
        resolver = ArticleResolver(lookup)

        article = resolver.resolve(day, SALT)

        assert article.title == "Last"
        assert len(lookup.calls) == 14

    def test_all_candidates_missing(self, no_page_lookup):
        """Exhausting all fourteen candidates raises ArticleUnavailableError."""
        resolver = ArticleResolver(no_page_lookup)
        day = date(2026, 1, 5)

        with pytest.raises(ArticleUnavailableError) as exc_info:
            resolver.resolve(day, SALT)

        assert exc_info.value.date == day
        assert "2026-01-05" in exc_info.value.message
        assert no_page_lookup.calls == candidates_for(day)

    def test_cancelled_before_lookup(self, every_page_lookup):
        """A set cancel event stops resolution before any lookup."""
        resolver = ArticleResolver(every_page_lookup)
        cancel = threading.Event()
        cancel.set()

        with pytest.raises(ResolutionCancelledError):
            resolver.resolve(date(2026, 1, 5), SALT, cancel)

        assert every_page_lookup.calls == []


class TestResolveMany:
    """Tests for ArticleResolver.resolve_many()."""

    DATES = [date(2026, 1, 7), date(2026, 1, 4), date(2026, 1, 1)]

    @pytest.mark.parametrize("workers", [1, 4])
    def test_preserves_order(self, every_page_lookup, workers):
        """Results follow input order whether sequential or threaded."""
        resolver = ArticleResolver(every_page_lookup, max_workers=workers)

        articles = resolver.resolve_many(self.DATES, SALT)

        assert [a.date for a in articles] == self.DATES

    def test_threaded_matches_sequential(self, every_page_lookup):
        """Threaded resolution returns the same articles as sequential."""
        sequential = ArticleResolver(every_page_lookup).resolve_many(self.DATES, SALT)
        threaded = ArticleResolver(every_page_lookup, max_workers=3).resolve_many(
            self.DATES, SALT
        )

        assert sequential == threaded

    @pytest.mark.parametrize("workers", [1, 3])
    def test_unavailable_date_raises_for_that_date(
        self, stub_lookup_class, page_factory, workers
    ):
        """Only the date whose candidates all fail is reported."""
        bad_day = date(2026, 1, 4)
        lookup = stub_lookup_class(
            missing=set(candidates_for(bad_day)), default=page_factory
        )
        resolver = ArticleResolver(lookup, max_workers=workers)

        with pytest.raises(ArticleUnavailableError) as exc_info:
            resolver.resolve_many(self.DATES, SALT)

        assert exc_info.value.date == bad_day
        assert resolver.resolve(date(2026, 1, 7), SALT).date == date(2026, 1, 7)
        assert resolver.resolve(date(2026, 1, 1), SALT).date == date(2026, 1, 1)

    def test_skip_unavailable_omits_date(self, stub_lookup_class, page_factory, caplog):
        """With skip_unavailable, the failing date is dropped and logged."""
        bad_day = date(2026, 1, 4)
        lookup = stub_lookup_class(
            missing=set(candidates_for(bad_day)), default=page_factory
        )
        resolver = ArticleResolver(lookup, skip_unavailable=True)

        articles = resolver.resolve_many(self.DATES, SALT)

        assert [a.date for a in articles] == [date(2026, 1, 7), date(2026, 1, 1)]
        assert "Skipping 2026-01-04" in caplog.text

    def test_stops_after_first_unavailable_date(self, no_page_lookup):
        """The first unresolvable date ends the run without probing later dates."""
        dates = [date(2026, 1, 20) - timedelta(days=i) for i in range(20)]
        resolver = ArticleResolver(no_page_lookup)

        with pytest.raises(ArticleUnavailableError) as exc_info:
            resolver.resolve_many(dates, SALT)

        assert exc_info.value.date == dates[0]
        assert len(no_page_lookup.calls) == MAX_PAGE_LOOKUP_ATTEMPTS

    def test_threaded_stops_after_first_unavailable_date(self):
        """Pending dates are cancelled and running ones stop probing."""
        dates = [date(2026, 1, 20) - timedelta(days=i) for i in range(20)]
        lookup = SlowLookup()
        resolver = ArticleResolver(lookup, max_workers=2)

        with pytest.raises(ArticleUnavailableError) as exc_info:
            resolver.resolve_many(dates, SALT)

        assert exc_info.value.date == dates[0]
        assert len(lookup.calls) < MAX_PAGE_LOOKUP_ATTEMPTS * 4

    def test_threaded_unexpected_error_stops_pending_dates(self):
        """Errors other than unavailability also cancel the remaining dates."""
        dates = [date(2026, 1, 20) - timedelta(days=i) for i in range(20)]
        lookup = SlowLookup(error=RuntimeError("lookup broke"))
        resolver = ArticleResolver(lookup, max_workers=2)

        with pytest.raises(RuntimeError, match="lookup broke"):
            resolver.resolve_many(dates, SALT)

        assert len(lookup.calls) < len(dates)

    def test_empty_dates(self, every_page_lookup):
        """No dates means no lookups."""
        resolver = ArticleResolver(every_page_lookup, max_workers=4)

        assert resolver.resolve_many([], SALT) == []
        assert every_page_lookup.calls == []


class TestBuildArticle:
    """Tests for build_article normalization."""

    def test_full_page(self):
        """Page fields are copied, with whitespace stripped."""
        page = WikiPage(
            pageid=736,
            title="  Albert Einstein ",
            fullurl="https://en.wikipedia.org/wiki/Albert_Einstein",
            extract="\nPhysicist.\n",
        )

        article = build_article(date(2026, 1, 5), 736, page)

        assert isinstance(article, ResolvedArticle)
        assert article.title == "Albert Einstein"
        assert article.extract == "Physicist."
        assert article.url == "https://en.wikipedia.org/wiki/Albert_Einstein"

    def test_fallback_title_and_extract(self):
        """Missing or blank title and extract get fixed placeholders."""
        page = WikiPage(pageid=1, title="   ", extract=None)

        article = build_article(date(2026, 1, 5), 1, page)

        assert article.title == FALLBACK_TITLE
        assert article.extract == FALLBACK_EXTRACT

    def test_url_synthesized_from_title(self):
        """Without a fullurl, the URL is built from the encoded title."""
        page = WikiPage(pageid=5, title="AT&T (company) café/1")

        article = build_article(date(2026, 1, 5), 5, page)

        assert article.url == (
            "https://en.wikipedia.org/wiki/AT%26T%20(company)%20caf%C3%A9%2F1"
        )

    def test_url_synthesized_from_fallback_title(self):
        """A missing title and URL yield the placeholder title's URL."""
        article = build_article(date(2026, 1, 5), 5, WikiPage(pageid=5))

        assert article.url == "https://en.wikipedia.org/wiki/Wikipedia%20Article"
