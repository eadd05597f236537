"""Headless controller tying navigation, dispatch and UI-only widget state together."""

from __future__ import annotations

import random
from typing import Literal, get_args

from searchview.domain.models import RequestState
from searchview.logging import logger
from searchview.services.orchestrator import SearchOrchestrator
from searchview.services.provider import SearchProvider
from searchview.services.query_source import QuerySource, build_search_location

Tab = Literal["all", "images", "videos", "news", "maps"]
TABS: tuple[str, ...] = get_args(Tab)
PAGES: tuple[int, ...] = tuple(range(1, 11))


class SearchView:
    """One search results page.

    Each view owns its orchestrator, so titles and request state are never
    shared between views. Tabs and pagination are presentation state only:
    changing them never reaches the orchestrator.
    """

    def __init__(
        self,
        provider: SearchProvider,
        *,
        limit: int = 10,
        timeout: float | None = None,
        title_suffix: str = "Search",
        query_source: QuerySource | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.query_source = query_source or QuerySource()
        self.title: str | None = None
        self.location: str | None = None
        self.selected_tab: str = "all"
        self.selected_page: int = 1
        self._rng = rng or random.Random()
        self.orchestrator = SearchOrchestrator(
            provider,
            limit=limit,
            timeout=timeout,
            title_sink=self.set_title,
            title_suffix=title_suffix,
        )

    @property
    def state(self) -> RequestState:
        return self.orchestrator.state

    @property
    def loading(self) -> bool:
        return self.orchestrator.loading

    @property
    def draft(self) -> str:
        return self.query_source.draft

    def set_title(self, title: str) -> None:
        self.title = title

    async def open(self, location: str) -> RequestState:
        return await self.navigate(location)

    async def navigate(self, location: str) -> RequestState:
        self.location = location
        query = self.query_source.sync(location)
        if query is None:
            logger.debug("navigation_without_query", location=location)
            return self.state
        return await self.orchestrator.dispatch(query)

    def edit(self, text: str) -> str:
        return self.query_source.edit(text)

    async def submit(self) -> RequestState:
        return await self._follow(self.query_source.submit())

    async def submit_lucky(self) -> RequestState:
        return await self._follow(self.query_source.submit_lucky())

    async def select_related(self, text: str) -> RequestState:
        if not text.strip():
            return self.state
        return await self.navigate(build_search_location(text))

    def select_tab(self, tab: str) -> str:
        if tab not in TABS:
            raise ValueError(f"Unknown tab: {tab!r}")
        self.selected_tab = tab
        return self.selected_tab

    def select_page(self, page: int) -> int:
        if page not in PAGES:
            raise ValueError(f"Page must be between {PAGES[0]} and {PAGES[-1]}.")
        self.selected_page = page
        return self.selected_page

    def result_stats(self) -> str:
        """Display-only summary line; the timing figure is cosmetic and random."""

        data = self.state.data
        count = len(data.organic_results) if data is not None else 0
        hundredths = self._rng.randint(10, 69)
        return f"About {count:,} results (0.{hundredths} seconds)"

    async def close(self) -> None:
        await self.orchestrator.aclose()

    async def _follow(self, location: str | None) -> RequestState:
        if location is None:
            return self.state
        return await self.navigate(location)


__all__ = ["PAGES", "SearchView", "TABS", "Tab"]
