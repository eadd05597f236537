"""Shared fake providers for orchestrator and view tests."""

from __future__ import annotations

import asyncio

import pytest

from searchview.domain.models import SearchResult, SearchResultSet


def make_result_set(query: str) -> SearchResultSet:
    return SearchResultSet(
        organic_results=[
            SearchResult(
                title=f"{query} home",
                link=f"https://example.org/{query}",
                snippet=f"All about {query}.",
                source="example.org",
            )
        ],
        related_searches=[f"{query} faq"],
    )


class StaticProvider:
    def __init__(self, result=None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, int]] = []

    async def search(self, query: str, *, limit: int):
        self.calls.append((query, limit))
        if self.error is not None:
            raise self.error
        return self.result if self.result is not None else make_result_set(query)


class GatedProvider:
    """Blocks each query until the test releases it."""

    def __init__(self) -> None:
        self.gates: dict[str, asyncio.Event] = {}
        self.failures: set[str] = set()
        self.calls: list[str] = []
        self.cancelled: list[str] = []

    def gate(self, query: str) -> asyncio.Event:
        return self.gates.setdefault(query, asyncio.Event())

    async def search(self, query: str, *, limit: int):
        self.calls.append(query)
        try:
            await self.gate(query).wait()
        except asyncio.CancelledError:
            self.cancelled.append(query)
            raise
        if query in self.failures:
            raise RuntimeError(f"{query} unavailable")
        return make_result_set(query)


@pytest.fixture
def static_provider() -> StaticProvider:
    return StaticProvider()


@pytest.fixture
def gated_provider() -> GatedProvider:
    return GatedProvider()
