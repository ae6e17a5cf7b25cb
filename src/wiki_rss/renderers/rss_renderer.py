"""RSS 2.0 renderer for cadence feeds."""

import logging
from datetime import datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from schemas.feed import CadenceFeed

from .filters import FILTERS
from .renderer import FeedRenderer

logger = logging.getLogger(__name__)

# renderers/ → wiki_rss/ → resources/templates
TEMPLATES_DIR = Path(__file__).parent.parent / "resources" / "templates"


class RSSRenderer(FeedRenderer):
    """Render cadence feeds as RSS 2.0 documents.

    All text is autoescaped, so ``& < > " '`` in article content never reach
    the document unescaped.

    Attributes:
        template_name: Name of the Jinja2 template file
        templates_dir: Directory containing the template
    """

    def __init__(
        self,
        template_name: str = "feed.rss.j2",
        templates_dir: Path | None = None,
    ):
        self.template_name = template_name
        self.templates_dir = templates_dir or TEMPLATES_DIR

        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        for name, func in FILTERS.items():
            self._env.filters[name] = func

    def render(self, feed: CadenceFeed, origin: str, generated_at: datetime) -> str:
        template = self._env.get_template(self.template_name)
        document = template.render(
            feed=feed,
            feed_url=feed_url(origin, feed.cadence),
            generated_at=generated_at,
        )
        logger.debug(
            f"Rendered cadence {feed.cadence} feed with {len(feed.articles)} items"
        )
        return document


def feed_url(origin: str, cadence: int) -> str:
    return f"{origin.rstrip('/')}/feed/{cadence}.xml"
