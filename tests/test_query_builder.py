"""Tests for search URL construction."""

from urllib.parse import parse_qs, parse_qsl, urlsplit

import pytest

from readit_core.errors import InvalidQuery
from readit_core.models import SearchQuery, SearchSortOption, SearchType, TopSortOption
from readit_core.search.query_builder import build_search_url

SEARCH_URL = "https://old.reddit.com/search"


def query_params(url: str) -> dict[str, list[str]]:
    return parse_qs(urlsplit(url).query, keep_blank_values=True)


@pytest.mark.parametrize("sort", list(SearchSortOption))
@pytest.mark.parametrize("top_range", [TopSortOption.DAY, TopSortOption.ALL])
def test_post_search_includes_sort_and_range(sort, top_range):
    """Post searches carry an empty type with sort and t."""
    url = build_search_url(SEARCH_URL, SearchQuery(text="python", sort=sort, top_range=top_range))
    params = query_params(url)

    assert params["q"] == ["python"]
    assert params["type"] == [""]
    assert params["sort"] == [sort.value]
    assert params["t"] == [top_range.value]


@pytest.mark.parametrize("content_type", [SearchType.COMMUNITIES, SearchType.LINKS])
def test_filtered_search_omits_sort_and_range(content_type):
    """Non-post searches are sent without sort parameters."""
    query = SearchQuery(text="python", content_type=content_type, sort=SearchSortOption.TOP)
    params = query_params(build_search_url(SEARCH_URL, query))

    assert params["type"] == [content_type.value]
    assert "sort" not in params
    assert "t" not in params


def test_adult_flag_adds_parameter():
    url = build_search_url(SEARCH_URL, SearchQuery(text="python", include_adult=True))
    assert query_params(url)["include_over_18"] == ["on"]


def test_adult_flag_off_omits_parameter():
    url = build_search_url(SEARCH_URL, SearchQuery(text="python", include_adult=False))
    assert "include_over_18" not in query_params(url)
    assert "off" not in url


def test_parameter_order_and_target():
    query = SearchQuery(text="rust lang", include_adult=True)
    url = build_search_url(SEARCH_URL, query)
    parts = urlsplit(url)

    assert parts.scheme == "https"
    assert parts.netloc == "old.reddit.com"
    assert parts.path == "/search"
    assert [key for key, _ in parse_qsl(parts.query, keep_blank_values=True)] == [
        "q",
        "type",
        "sort",
        "t",
        "include_over_18",
    ]
    assert query_params(url)["q"] == ["rust lang"]


def test_unencodable_text_is_invalid_query():
    query = SearchQuery.model_construct(
        text="bad \ud800 text",
        content_type=SearchType.POSTS,
        sort=SearchSortOption.RELEVANCE,
        top_range=TopSortOption.ALL,
        include_adult=False,
    )

    with pytest.raises(InvalidQuery):
        build_search_url(SEARCH_URL, query)


@pytest.mark.parametrize("endpoint", ["", "old.reddit.com/search", "ftp://old.reddit.com/search"])
def test_bad_endpoint_is_invalid_query(endpoint):
    with pytest.raises(InvalidQuery):
        build_search_url(endpoint, SearchQuery(text="python"))
