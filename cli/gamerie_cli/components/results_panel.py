"""Results panel component."""

from typing import Optional

from rich.text import Text
from textual import events
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import LoadingIndicator, Static

from gamerie_cli.search.controller import SearchView
from gamerie_cli.search.models import Category, GameMatch, Match, ResultSet, TeamMatch


# Category icons
CATEGORY_ICONS = {
    Category.GAME: "🎮",
    Category.TEAM: "👥",
    Category.PLAYER: "👤",
}

SECTION_TITLES = {
    Category.GAME: "Games",
    Category.TEAM: "Teams",
    Category.PLAYER: "Players",
}


def describe(item: Match) -> str:
    """Secondary line shown under a result's name."""
    if isinstance(item, GameMatch):
        return item.subtitle
    if isinstance(item, TeamMatch):
        noun = "member" if item.member_count == 1 else "members"
        return f"{item.member_count} {noun}"
    return item.title


class ResultRow(Static):
    """Single search result, addressed by its flat index."""

    class Selected(Message):
        """Emitted when the row is clicked."""

        def __init__(self, index: int) -> None:
            self.index = index
            super().__init__()

    def __init__(self, item: Match, index: int) -> None:
        self.item = item
        self.index = index
        super().__init__(self._render_item(), classes="result-row")

    def _render_item(self) -> Text:
        text = Text()
        text.append(f"{CATEGORY_ICONS[self.item.kind]} ")
        text.append(self.item.display_name, style="bold")
        secondary = describe(self.item)
        if secondary:
            text.append(f"  {secondary}", style="dim")
        return text

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Selected(self.index))


class ViewAllRow(Static):
    """Link to the full results page."""

    class Selected(Message):
        """Emitted when the link is clicked."""

    def __init__(self) -> None:
        super().__init__("View all results", classes="view-all")

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Selected())


class ResultsPanel(Vertical):
    """Dropdown of games, teams and players with a highlighted row."""

    def __init__(self, id: str | None = None) -> None:
        super().__init__(id=id)
        self._rendered: Optional[tuple[ResultSet, bool]] = None

    def on_mount(self) -> None:
        """Hidden until a search runs."""
        self.display = False

    def show_view(self, view: SearchView) -> None:
        """Redraw from a controller snapshot."""
        self.display = view.panel_open
        if not view.panel_open:
            return

        content = (view.result_set, view.loading)
        if content != self._rendered:
            self._rendered = content
            self._rebuild(view)
        self._highlight(view.cursor)

    def _rebuild(self, view: SearchView) -> None:
        self.remove_children()

        if view.loading:
            self.mount(LoadingIndicator(classes="results-loading"))
            return

        if view.result_set.is_empty:
            self.mount(Static("No results found", classes="results-empty"))
            return

        widgets: list[Static] = []
        for category, start, items in view.flat_index.sections():
            widgets.append(Static(SECTION_TITLES[category], classes="results-heading"))
            widgets.extend(
                ResultRow(item, start + offset) for offset, item in enumerate(items)
            )
        widgets.append(ViewAllRow())
        self.mount_all(widgets)

    def _highlight(self, cursor: int) -> None:
        for row in self.query(ResultRow):
            selected = row.index == cursor
            row.set_class(selected, "-highlighted")
            if selected:
                row.scroll_visible()

    @property
    def rows(self) -> list[ResultRow]:
        return list(self.query(ResultRow))
