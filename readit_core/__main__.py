"""Command-line entry point for manual scraping runs."""

import argparse
import asyncio
import json
import sys

import structlog
from pydantic import TypeAdapter

from readit_core.config.logging_config import configure_logging
from readit_core.config.settings import get_settings
from readit_core.errors import ScraperError
from readit_core.factory import create_scraper
from readit_core.models import MixedResult, SearchSortOption, SearchType, TopSortOption

logger = structlog.get_logger(__name__)

SEARCH_TYPES = {"posts": SearchType.POSTS, "sr": SearchType.COMMUNITIES, "link": SearchType.LINKS}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="readit-core", description="Scrape old Reddit search results")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search posts or communities")
    search.add_argument("query")
    search.add_argument("--type", choices=sorted(SEARCH_TYPES), default="posts")
    search.add_argument("--sort", choices=[option.value for option in SearchSortOption], default="relevance")
    search.add_argument("--time", choices=[option.value for option in TopSortOption], default="all")
    search.add_argument("--nsfw", action="store_true", help="Include over-18 results")

    permalink = subparsers.add_parser("permalink", help="Recover title and author from a permalink")
    permalink.add_argument("url")
    return parser


async def run(args: argparse.Namespace) -> str:
    scraper = create_scraper(get_settings())

    if args.command == "search":
        results = await scraper.search(
            args.query,
            search_type=SEARCH_TYPES[args.type],
            sort_by=args.sort,
            top_sort_by=args.time,
            include_over_18=args.nsfw,
        )
        adapter = TypeAdapter(list[MixedResult])
        return adapter.dump_json(results, indent=2).decode("utf-8")

    authorship = await scraper.scrape_post_title_and_author(args.url)
    return authorship.model_dump_json(indent=2)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(debug_mode=args.debug or settings.debug_mode, log_level=settings.log_level)

    try:
        output = asyncio.run(run(args))
    except ScraperError as e:
        logger.error("Scrape failed", kind=type(e).__name__, error=str(e))
        print(json.dumps({"error": type(e).__name__, "message": str(e)}))
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
