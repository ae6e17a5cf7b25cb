"""Feed configuration.

Values are passed explicitly into the scheduler and resolver; nothing reads
the environment except ``FeedConfig.from_env``.
"""

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_ANCHOR_DATE = "2026-01-01"
DEFAULT_MAX_FEED_ITEMS = 20
DEFAULT_ARTICLE_SALT = "wiki-rss"


class FeedConfig(BaseModel):
    """Configuration shared by feed and inspection requests.

    Attributes:
        anchor_date: ``YYYY-MM-DD`` date cadence offsets are counted from
        max_feed_items: Maximum number of items per feed
        article_salt: Deployment salt mixed into every article seed
        max_workers: Threads used to resolve a feed's dates (1 is sequential)
        skip_unavailable: Omit unresolvable dates from feeds instead of failing
        client: Extra config for the Wikipedia client (timeout, retries, ...)
    """

    anchor_date: str = DEFAULT_ANCHOR_DATE
    max_feed_items: int = Field(default=DEFAULT_MAX_FEED_ITEMS, ge=1)
    article_salt: str = DEFAULT_ARTICLE_SALT
    max_workers: int = Field(default=1, ge=1)
    skip_unavailable: bool = False
    client: dict = {}

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> "FeedConfig":
        """Build a config from ``ANCHOR_DATE``, ``MAX_FEED_ITEMS`` and ``ARTICLE_SALT``.

        Unset variables keep their defaults and a malformed ``MAX_FEED_ITEMS``
        falls back to the default. Keyword overrides that are not None win
        over the environment.
        """
        environ = os.environ if environ is None else environ
        values: dict = {}

        if environ.get("ANCHOR_DATE"):
            values["anchor_date"] = environ["ANCHOR_DATE"]
        if "MAX_FEED_ITEMS" in environ:
            values["max_feed_items"] = parse_positive_int(
                environ["MAX_FEED_ITEMS"], DEFAULT_MAX_FEED_ITEMS
            )
        if "ARTICLE_SALT" in environ:
            values["article_salt"] = environ["ARTICLE_SALT"]

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)


def parse_positive_int(value: str | None, fallback: int) -> int:
    """Parse a positive integer, returning ``fallback`` for anything else.

    Examples:
        >>> parse_positive_int("5", 20)
        5
        >>> parse_positive_int("-1", 20)
        20
    """
    if not value:
        return fallback
    try:
        parsed = int(value.strip())
    except ValueError:
        logger.warning(f"Ignoring invalid positive integer {value!r}")
        return fallback
    return parsed if parsed > 0 else fallback
