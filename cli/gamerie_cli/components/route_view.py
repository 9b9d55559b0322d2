"""Main view showing the page the user navigated to."""

from typing import Optional
from urllib.parse import parse_qs, unquote, urlsplit

from rich.text import Text
from textual.reactive import reactive
from textual.widgets import Static

PAGE_NAMES = {
    "games": "Game",
    "teams": "Team",
    "profile": "Player profile",
}


def describe_route(route: str) -> str:
    """Human readable title for a navigation route."""
    parts = urlsplit(route)
    segments = [s for s in parts.path.split("/") if s]
    if segments == ["search"]:
        query = parse_qs(parts.query).get("q", [""])[0]
        return f"All results for \"{query}\""
    if len(segments) == 2 and segments[0] in PAGE_NAMES:
        return f"{PAGE_NAMES[segments[0]]}: {unquote(segments[1])}"
    return route


class RouteView(Static):
    """Placeholder for the page behind the last opened route."""

    can_focus = True

    route: reactive[Optional[str]] = reactive(None)

    def render(self) -> Text:
        if not self.route:
            return Text(
                "Type to search games, teams and players. "
                "Enter opens the highlighted result.",
                style="dim",
            )
        text = Text(describe_route(self.route), style="bold")
        text.append(f"\n{self.route}", style="dim")
        return text
