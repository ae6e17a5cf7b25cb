"""Schema definitions for wiki-rss."""

from .article import ResolvedArticle
from .feed import CadenceFeed
from .wiki_page import WikiPage, WikiQuery, WikiQueryResponse

__all__ = [
    "CadenceFeed",
    "ResolvedArticle",
    "WikiPage",
    "WikiQuery",
    "WikiQueryResponse",
]
