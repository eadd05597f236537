"""Deterministic result synthesis used when the search provider is unavailable.

``synthesize`` performs no I/O and involves no randomness: the same query always
yields the same organic results and related searches. ``people_also_ask`` is
provider-only data and stays empty here.
"""

from __future__ import annotations

import re

from searchview.domain.models import SearchResult, SearchResultSet

_WHITESPACE_RUN = re.compile(r"\s+")

RELATED_SEARCH_TEMPLATES: tuple[str, ...] = (
    "{q} meaning",
    "{q} definition",
    "{q} examples",
    "{q} guide",
    "best {q}",
    "{q} tutorial",
    "{q} vs alternatives",
    "{q} tips",
)


def _collapse_whitespace(query: str, replacement: str) -> str:
    return _WHITESPACE_RUN.sub(replacement, query)


def _wikipedia(query: str) -> SearchResult:
    return SearchResult(
        title=f"{query} - Wikipedia",
        link=f"https://en.wikipedia.org/wiki/{_collapse_whitespace(query, '_')}",
        snippet=(
            f"{query} is a search term that you entered. Wikipedia is a free online "
            "encyclopedia, created and edited by volunteers around the world and hosted "
            "by the Wikimedia Foundation."
        ),
    )


def _official_site(query: str) -> SearchResult:
    return SearchResult(
        title=f"{query} - Official Website",
        link=f"https://{_collapse_whitespace(query.lower(), '')}.com",
        snippet=(
            f"Official website for {query}. Find the latest information, news, and updates "
            f"about {query}. Discover comprehensive resources and detailed information."
        ),
    )


def _guide(query: str) -> SearchResult:
    return SearchResult(
        title=f"Learn more about {query} - Complete Guide",
        link=f"https://guide.example.com/{_collapse_whitespace(query, '-')}",
        snippet=(
            f"Comprehensive guide and information about {query}. Everything you need to know "
            "about this topic including tutorials, best practices, and expert insights."
        ),
    )


def _news(query: str) -> SearchResult:
    return SearchResult(
        title=f"{query} News and Updates",
        link=f"https://news.example.com/{query}",
        snippet=(
            f"Latest news and updates about {query}. Stay informed with the most recent "
            "developments, announcements, and industry insights."
        ),
    )


def _resources(query: str) -> SearchResult:
    return SearchResult(
        title=f"Best {query} Resources",
        link=f"https://resources.example.com/{query}",
        snippet=(
            f"Curated collection of the best resources for {query}. Tools, guides, tutorials, "
            "and expert recommendations to help you succeed."
        ),
    )


_ORGANIC_BUILDERS = (_wikipedia, _official_site, _guide, _news, _resources)


def synthesize(query: str) -> SearchResultSet:
    """Build the fallback result set for ``query``."""

    return SearchResultSet(
        organic_results=[build(query) for build in _ORGANIC_BUILDERS],
        related_searches=[template.format(q=query) for template in RELATED_SEARCH_TEMPLATES],
        people_also_ask=[],
    )


__all__ = ["RELATED_SEARCH_TEMPLATES", "synthesize"]
