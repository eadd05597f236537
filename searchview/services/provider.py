"""Search provider capability and the SerpApi adapter backing it."""

from __future__ import annotations

from typing import Any, Protocol

import httpx
from pydantic import ValidationError

from searchview.config import ProviderSettings
from searchview.domain.models import RelatedQuestion, SearchResult, SearchResultSet
from searchview.logging import logger
from searchview.services.exceptions import ProviderFailure


class SearchProvider(Protocol):
    async def search(self, query: str, *, limit: int) -> SearchResultSet: ...


class SerpApiSearchProvider:
    """Query SerpApi and normalize its payload into a ``SearchResultSet``."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: ProviderSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or ProviderSettings()

    @staticmethod
    def _read_secret(secret: Any) -> str | None:
        if not secret:
            return None
        try:
            return secret.get_secret_value()
        except AttributeError:
            return str(secret)

    async def search(self, query: str, *, limit: int) -> SearchResultSet:
        query = query.strip()
        if not query:
            raise ProviderFailure("Search query must not be empty.")

        api_key = self._read_secret(self._settings.serpapi_api_key)
        if not api_key:
            raise ProviderFailure("SerpApi key is not configured.")

        params = {
            "engine": self._settings.serpapi_engine,
            "q": query,
            "num": limit,
            "api_key": api_key,
        }
        try:
            response = await self._client.get(
                str(self._settings.base_url),
                params=params,
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            detail = exc.response.text[:500] if exc.response is not None else str(exc)
            status_code = exc.response.status_code if exc.response is not None else "unknown"
            raise ProviderFailure(f"SerpApi request failed ({status_code}): {detail}") from exc
        except httpx.RequestError as exc:
            raise ProviderFailure(f"SerpApi request failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderFailure("SerpApi response is not valid JSON.") from exc
        if not isinstance(data, dict):
            raise ProviderFailure("SerpApi response format is invalid.")
        if data.get("error"):
            raise ProviderFailure(f"SerpApi reported an error: {data['error']}")

        logger.debug(
            "serpapi_response_received",
            query=query,
            organic=len(data.get("organic_results") or []),
        )
        try:
            return self._normalize(data, limit)
        except (ValidationError, TypeError, AttributeError) as exc:
            raise ProviderFailure(f"SerpApi payload could not be parsed: {exc}") from exc

    def _normalize(self, data: dict[str, Any], limit: int) -> SearchResultSet:
        organic = [
            SearchResult(
                title=item.get("title", ""),
                link=item.get("link", ""),
                snippet=item.get("snippet", "") or "",
                source=item.get("source") or item.get("displayed_link"),
            )
            for item in (data.get("organic_results") or [])[:limit]
        ]
        related = [
            text
            for text in (self._related_text(entry) for entry in data.get("related_searches") or [])
            if text
        ]
        questions = [
            RelatedQuestion(
                question=item.get("question", ""),
                answer=item.get("snippet") or item.get("answer") or "",
            )
            for item in data.get("related_questions") or []
            if item.get("question")
        ]
        return SearchResultSet(
            organic_results=organic,
            related_searches=related,
            people_also_ask=questions,
        )

    @staticmethod
    def _related_text(entry: Any) -> str:
        if isinstance(entry, str):
            return entry.strip()
        if isinstance(entry, dict):
            return str(entry.get("query") or "").strip()
        return ""


__all__ = ["SearchProvider", "SerpApiSearchProvider"]
