"""Search URL construction."""

from urllib.parse import urlencode, urlsplit, urlunsplit

from readit_core.errors import InvalidQuery
from readit_core.models import SearchQuery, SearchType


def build_params(query: SearchQuery) -> list[tuple[str, str]]:
    """Return the ordered query parameters for a search."""
    params = [
        ("q", query.text),
        ("type", query.content_type.value),
    ]

    # Sorting is only supported by the site for post searches
    if query.content_type == SearchType.POSTS:
        params.append(("sort", query.sort.value))
        params.append(("t", query.top_range.value))

    if query.include_adult:
        params.append(("include_over_18", "on"))

    return params


def build_search_url(search_url: str, query: SearchQuery) -> str:
    """
    Build a fully-qualified search URL.

    Args:
        search_url: Search endpoint, e.g. https://old.reddit.com/search
        query: Search request

    Returns:
        Search URL with encoded query parameters

    Raises:
        InvalidQuery: If the endpoint or the query text cannot form a valid URL
    """
    try:
        parts = urlsplit(search_url)
    except ValueError as e:
        raise InvalidQuery(f"Invalid search endpoint {search_url!r}: {e}") from e

    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise InvalidQuery(f"Search endpoint must be an absolute http(s) URL: {search_url!r}")

    try:
        encoded = urlencode(build_params(query))
    except UnicodeEncodeError as e:
        raise InvalidQuery(f"Query text cannot be encoded: {e}") from e

    return urlunsplit((parts.scheme, parts.netloc, parts.path or "/", encoded, ""))
