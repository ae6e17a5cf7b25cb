"""Date to article resolution."""

from .article_resolver import ArticleResolver, build_article
from .inspection import InspectionResolver
from .seeding import candidate_page_id, candidate_page_ids, seeded_hash

__all__ = [
    "ArticleResolver",
    "InspectionResolver",
    "build_article",
    "candidate_page_id",
    "candidate_page_ids",
    "seeded_hash",
]
