"""Search results scraping."""

from readit_core.search.extractors import collect_results, extract_communities, extract_posts
from readit_core.search.post_types import classify_post_kind
from readit_core.search.query_builder import build_search_url
from readit_core.search.service import SearchService

__all__ = [
    "SearchService",
    "build_search_url",
    "classify_post_kind",
    "collect_results",
    "extract_communities",
    "extract_posts",
]
