"""Committed query and draft handling for the search view."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import parse_qs, quote, urlsplit

SEARCH_PATH = "/search"
# Characters encodeURIComponent leaves untouched besides alphanumerics and "-_.~".
_URI_COMPONENT_SAFE = "!*'()"


@dataclass(slots=True, frozen=True)
class Location:
    query: str | None = None
    lucky: bool = False


def parse_location(location: str) -> Location:
    """Read ``q`` and ``lucky`` from a ``/search?q=...`` style location."""

    params = parse_qs(urlsplit(location or "").query, keep_blank_values=True)
    raw_query = (params.get("q") or [""])[0].strip()
    lucky = (params.get("lucky") or [""])[0].strip().lower() == "true"
    return Location(query=raw_query or None, lucky=lucky)


def build_search_location(query: str, *, lucky: bool = False) -> str:
    location = f"{SEARCH_PATH}?q={quote(query.strip(), safe=_URI_COMPONENT_SAFE)}"
    if lucky:
        location += "&lucky=true"
    return location


class QuerySource:
    """Tracks the committed query (from navigation) and the editable draft.

    Submitting never mutates the committed query directly: it yields the
    canonical location, and the commit happens when that location is synced
    back in.
    """

    def __init__(self) -> None:
        self.committed: str | None = None
        self.draft: str = ""
        self.lucky: bool = False

    def sync(self, location: str) -> str | None:
        parsed = parse_location(location)
        self.lucky = parsed.lucky
        if parsed.query is None:
            return None
        self.committed = parsed.query
        self.draft = parsed.query
        return parsed.query

    def edit(self, text: str) -> str:
        self.draft = text
        return self.draft

    def submit(self, draft: str | None = None) -> str | None:
        return self._submit(draft, lucky=False)

    def submit_lucky(self, draft: str | None = None) -> str | None:
        # The lucky flag travels with the location but nothing downstream acts on it.
        return self._submit(draft, lucky=True)

    def _submit(self, draft: str | None, *, lucky: bool) -> str | None:
        text = self.draft if draft is None else draft
        trimmed = text.strip()
        if not trimmed:
            return None
        return build_search_location(trimmed, lucky=lucky)


__all__ = [
    "Location",
    "QuerySource",
    "SEARCH_PATH",
    "build_search_location",
    "parse_location",
]
