"""Permalink scraping and its lookup cache."""

from readit_core.permalink.cache import LookupCache, get_lookup_cache
from readit_core.permalink.scraper import PermalinkScraper

__all__ = ["LookupCache", "PermalinkScraper", "get_lookup_cache"]
