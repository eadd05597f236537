"""Dispatch queries to the search provider and settle them into view state."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any, Callable

from searchview.domain.models import RequestState, ResultOrigin, SearchResultSet
from searchview.logging import logger
from searchview.services.exceptions import ProviderFailure
from searchview.services.fallback import synthesize
from searchview.services.provider import SearchProvider

TitleSink = Callable[[str], None]


class SearchOrchestrator:
    """Owns the idle -> loading -> ready lifecycle for one view instance.

    Every dispatch bumps a generation token and cancels the request it
    supersedes. A settled request only touches state when its token is still
    current, so the visible result always belongs to the latest query.
    Provider failures never escape: they settle as ready with synthesized data.
    """

    def __init__(
        self,
        provider: SearchProvider,
        *,
        limit: int = 10,
        timeout: float | None = None,
        title_sink: TitleSink | None = None,
        title_suffix: str = "Search",
    ) -> None:
        self._provider = provider
        self._limit = limit
        self._timeout = timeout
        self._title_sink = title_sink
        self._title_suffix = title_suffix
        self._state = RequestState.idle()
        self._generation = 0
        self._inflight: asyncio.Task[tuple[SearchResultSet, ResultOrigin]] | None = None

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def loading(self) -> bool:
        return self._state.is_loading

    @property
    def generation(self) -> int:
        return self._generation

    async def dispatch(self, query: str) -> RequestState:
        normalized = (query or "").strip()
        if not normalized:
            logger.info("empty_query_ignored")
            return self._state

        self._generation += 1
        generation = self._generation
        self._cancel_inflight()
        self._state = RequestState.loading(normalized)
        logger.info("search_dispatched", query=normalized, generation=generation)

        task = asyncio.ensure_future(self._resolve(normalized))
        self._inflight = task
        try:
            self._publish_title(normalized)
            data, origin = await task
            if generation != self._generation:
                logger.info(
                    "stale_result_dropped",
                    query=normalized,
                    generation=generation,
                    current_generation=self._generation,
                )
                return self._state
            self._state = RequestState.ready(normalized, data, origin)
            logger.info(
                "search_settled",
                query=normalized,
                generation=generation,
                origin=origin,
                organic=len(data.organic_results),
            )
            return self._state
        except asyncio.CancelledError:
            if generation == self._generation:
                raise
            logger.info("superseded_request_cancelled", query=normalized, generation=generation)
            return self._state
        finally:
            if generation == self._generation:
                self._inflight = None
                if self._state.is_loading:
                    self._state = RequestState.idle()

    async def aclose(self) -> None:
        """Abandon any in-flight request and return to idle."""

        self._generation += 1
        task = self._inflight
        self._inflight = None
        if self._state.is_loading:
            self._state = RequestState.idle()
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def _resolve(self, query: str) -> tuple[SearchResultSet, ResultOrigin]:
        try:
            payload = await self._call_provider(query)
            return self._coerce(payload), "provider"
        except Exception as exc:
            logger.warning(
                "provider_failure",
                query=query,
                error_type=exc.__class__.__name__,
                error=str(exc),
            )
            return synthesize(query), "fallback"

    async def _call_provider(self, query: str) -> Any:
        call = self._provider.search(query, limit=self._limit)
        if self._timeout is None:
            return await call
        return await asyncio.wait_for(call, timeout=self._timeout)

    @staticmethod
    def _coerce(payload: Any) -> SearchResultSet:
        if isinstance(payload, SearchResultSet):
            return payload
        if isinstance(payload, Mapping):
            return SearchResultSet.model_validate(dict(payload))
        raise ProviderFailure(f"Provider returned an unexpected payload: {type(payload).__name__}")

    def _cancel_inflight(self) -> None:
        task = self._inflight
        if task is not None and not task.done():
            task.cancel()
        self._inflight = None

    def _publish_title(self, query: str) -> None:
        if self._title_sink is None:
            return
        title = f"{query} - {self._title_suffix}"
        try:
            self._title_sink(title)
        except Exception as exc:
            logger.warning(
                "title_sink_failed",
                title=title,
                error_type=exc.__class__.__name__,
                error=str(exc),
            )


__all__ = ["SearchOrchestrator", "TitleSink"]
