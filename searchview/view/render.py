"""Plain-text rendering of a search view."""

from __future__ import annotations

from searchview.domain.models import SearchResultSet
from searchview.view.search_view import PAGES, TABS, SearchView

SKELETON_ROWS = 5


def _render_tabs(selected: str) -> str:
    return "  ".join(f"[{tab.title()}]" if tab == selected else tab.title() for tab in TABS)


def _render_skeleton() -> list[str]:
    lines = ["Loading results..."]
    for _ in range(SKELETON_ROWS):
        lines.extend(["  ▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇", "  ▇▇▇▇▇▇▇▇▇▇", ""])
    return lines


def _render_results(data: SearchResultSet) -> list[str]:
    lines: list[str] = []
    for result in data.organic_results:
        lines.append(result.link)
        lines.append(f"  {result.title}")
        if result.snippet:
            lines.append(f"  {result.snippet}")
        lines.append("")

    if data.people_also_ask:
        lines.append("People also ask")
        for item in data.people_also_ask:
            lines.append(f"  ? {item.question}")
            lines.append(f"    {item.answer}")
        lines.append("")

    if data.related_searches:
        lines.append("Related searches")
        lines.extend(f"  - {search}" for search in data.related_searches)
        lines.append("")
    return lines


def _render_pagination(selected: int) -> str:
    pages = " ".join(f"[{page}]" if page == selected else str(page) for page in PAGES)
    return f"{pages}  Next"


def render_view(view: SearchView) -> str:
    lines = [f"Search: {view.draft}", _render_tabs(view.selected_tab), ""]
    state = view.state
    if state.is_loading:
        lines.extend(_render_skeleton())
        return "\n".join(lines).rstrip()
    if state.data is None:
        return "\n".join(lines).rstrip()

    lines.append(view.result_stats())
    lines.append("")
    lines.extend(_render_results(state.data))
    lines.append(_render_pagination(view.selected_page))
    return "\n".join(lines).rstrip()


__all__ = ["render_view"]
