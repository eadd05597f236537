"""Application entrypoint."""

from __future__ import annotations

import argparse
import asyncio
from typing import Sequence

import httpx

from searchview.config import get_settings
from searchview.logging import configure_logging, logger
from searchview.services.provider import SerpApiSearchProvider
from searchview.services.query_source import build_search_location
from searchview.view.render import render_view
from searchview.view.search_view import SearchView


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render search results for a query.")
    parser.add_argument("query", help="Search query.")
    parser.add_argument(
        "--lucky",
        action="store_true",
        help="Tag the navigation with lucky=true (accepted, currently has no effect).",
    )
    return parser


async def main(argv: Sequence[str] | None = None) -> str:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level, environment=settings.environment)

    async with httpx.AsyncClient() as client:
        provider = SerpApiSearchProvider(client, settings=settings.provider)
        view = SearchView(
            provider,
            limit=settings.result_limit,
            timeout=settings.dispatch_timeout_seconds,
            title_suffix=settings.title_suffix,
        )
        location = build_search_location(args.query, lucky=args.lucky)
        logger.info("view_opening", location=location)
        try:
            await view.open(location)
            output = render_view(view)
        finally:
            await view.close()

    print(output)
    return output


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
