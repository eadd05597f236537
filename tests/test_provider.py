"""Tests for the SerpApi provider adapter."""

from __future__ import annotations

import httpx
import pytest
from pydantic import SecretStr

from searchview.config import ProviderSettings
from searchview.services.exceptions import ProviderFailure
from searchview.services.provider import SerpApiSearchProvider


def _settings(**overrides) -> ProviderSettings:
    values = {"serpapi_api_key": SecretStr("secret")}
    values.update(overrides)
    return ProviderSettings(**values)


@pytest.mark.asyncio
async def test_search_requires_api_key():
    async with httpx.AsyncClient() as client:
        provider = SerpApiSearchProvider(client, settings=ProviderSettings())
        with pytest.raises(ProviderFailure):
            await provider.search("python", limit=10)


@pytest.mark.asyncio
async def test_search_normalizes_serpapi_payload():
    async def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.host == "serpapi.com"
        assert request.url.path == "/search"
        assert request.url.params["api_key"] == "secret"
        assert request.url.params["q"] == "python testing"
        assert request.url.params["num"] == "2"
        assert request.url.params["engine"] == "google"
        return httpx.Response(
            200,
            json={
                "search_metadata": {"id": "123"},
                "organic_results": [
                    {
                        "title": "pytest docs",
                        "link": "https://docs.pytest.org",
                        "snippet": "Testing framework",
                        "source": "pytest",
                    },
                    {
                        "title": "unittest",
                        "link": "https://docs.python.org/3/library/unittest.html",
                        "displayed_link": "docs.python.org",
                    },
                    {"title": "dropped", "link": "https://dropped.example", "snippet": ""},
                ],
                "related_searches": [{"query": "pytest fixtures"}, {"link": "no query"}, "tox"],
                "related_questions": [
                    {"question": "What is pytest?", "snippet": "A test runner."},
                    {"question": "", "snippet": "ignored"},
                ],
            },
        )

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        provider = SerpApiSearchProvider(client, settings=_settings())
        result = await provider.search("  python testing ", limit=2)

    assert [item.title for item in result.organic_results] == ["pytest docs", "unittest"]
    assert result.organic_results[0].source == "pytest"
    assert result.organic_results[1].snippet == ""
    assert result.organic_results[1].source == "docs.python.org"
    assert result.related_searches == ["pytest fixtures", "tox"]
    assert len(result.people_also_ask) == 1
    assert result.people_also_ask[0].answer == "A test runner."


@pytest.mark.asyncio
async def test_search_uses_configured_endpoint_and_engine():
    seen: list[httpx.URL] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        return httpx.Response(200, json={"organic_results": []})

    transport = httpx.MockTransport(handler)
    settings = _settings(base_url="https://serp.internal/api/search", serpapi_engine="bing")
    async with httpx.AsyncClient(transport=transport) as client:
        result = await SerpApiSearchProvider(client, settings=settings).search("q", limit=5)

    assert seen[0].host == "serp.internal"
    assert seen[0].params["engine"] == "bing"
    assert result.organic_results == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, text="upstream exploded"),
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json=["unexpected", "list"]),
        httpx.Response(200, json={"error": "Invalid API key."}),
        httpx.Response(200, json={"organic_results": [{"title": None, "link": "x"}]}),
    ],
)
async def test_search_wraps_bad_responses(response):
    async def handler(request: httpx.Request) -> httpx.Response:
        return response

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        provider = SerpApiSearchProvider(client, settings=_settings())
        with pytest.raises(ProviderFailure):
            await provider.search("python", limit=10)


@pytest.mark.asyncio
async def test_search_wraps_transport_errors():
    async def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        provider = SerpApiSearchProvider(client, settings=_settings())
        with pytest.raises(ProviderFailure, match="connection refused"):
            await provider.search("python", limit=10)
