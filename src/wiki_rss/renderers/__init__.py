"""Feed document renderers."""

from .renderer import FeedRenderer
from .rss_renderer import RSSRenderer, feed_url

__all__ = ["FeedRenderer", "RSSRenderer", "feed_url"]
