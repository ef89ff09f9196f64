"""HTTP access."""

from readit_core.http.fetcher import HTMLFetcher

__all__ = ["HTMLFetcher"]
