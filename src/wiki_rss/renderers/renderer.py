"""Base class for feed renderers."""

from abc import ABC, abstractmethod
from datetime import datetime

from schemas.feed import CadenceFeed


class FeedRenderer(ABC):
    """Abstract base class for feed renderers.

    Renderers serialize a cadence feed into a syndication document.
    """

    @abstractmethod
    def render(self, feed: CadenceFeed, origin: str, generated_at: datetime) -> str:
        """Render a feed document.

        Args:
            feed: Cadence and its resolved articles, most recent first
            origin: Scheme and host the feed is served from
            generated_at: Time the document is built

        Returns:
            The serialized document
        """
        pass
