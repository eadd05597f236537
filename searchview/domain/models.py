"""Pydantic models shared across the search services and the view."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

RequestStatus = Literal["idle", "loading", "ready"]
ResultOrigin = Literal["provider", "fallback"]


class SearchResult(BaseModel):
    title: str
    link: str
    snippet: str
    source: str | None = None


class RelatedQuestion(BaseModel):
    question: str
    answer: str


class SearchResultSet(BaseModel):
    organic_results: list[SearchResult] = Field(default_factory=list)
    related_searches: list[str] = Field(default_factory=list)
    people_also_ask: list[RelatedQuestion] = Field(default_factory=list)


class RequestState(BaseModel):
    """Snapshot of the orchestrator lifecycle.

    There is deliberately no errored status: provider failures settle as
    ``ready`` with ``origin="fallback"``.
    """

    model_config = ConfigDict(frozen=True)

    status: RequestStatus = "idle"
    query: str | None = None
    data: SearchResultSet | None = None
    origin: ResultOrigin | None = None

    @classmethod
    def idle(cls) -> "RequestState":
        return cls()

    @classmethod
    def loading(cls, query: str) -> "RequestState":
        return cls(status="loading", query=query)

    @classmethod
    def ready(cls, query: str, data: SearchResultSet, origin: ResultOrigin) -> "RequestState":
        return cls(status="ready", query=query, data=data, origin=origin)

    @property
    def is_loading(self) -> bool:
        return self.status == "loading"

    @property
    def is_ready(self) -> bool:
        return self.status == "ready"


__all__ = [
    "RelatedQuestion",
    "RequestState",
    "RequestStatus",
    "ResultOrigin",
    "SearchResult",
    "SearchResultSet",
]
