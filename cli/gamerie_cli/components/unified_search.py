"""Unified search widget: one input over games, teams and players."""

from typing import Any, Callable, Optional

import structlog
from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Input, Static

from gamerie_cli.components.results_panel import ResultRow, ResultsPanel, ViewAllRow
from gamerie_cli.components.search_bar import SearchBar
from gamerie_cli.search.controller import (
    SearchContext,
    SearchController,
    SearchProvider,
    SearchView,
)
from gamerie_cli.search.pointer import PointerListeners

logger = structlog.get_logger(__name__)


class ClearButton(Static):
    """The "x" that empties the search box."""

    class Pressed(Message):
        """Emitted when clicked."""

    def __init__(self) -> None:
        super().__init__("✕", id="search-clear")

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Pressed())


class UnifiedSearch(Vertical):
    """Search box with a dropdown of categorized results.

    Typing is debounced by the ``SearchBar``; each settled query is
    dispatched to the provider in a worker. The ``SearchController`` keeps
    the state and discards responses that arrive for superseded queries.
    Up/Down move the highlight, Enter or a click opens the result, Escape
    or a press outside the widget closes the dropdown.
    """

    BINDINGS = [
        Binding("escape", "close_results", "Close results", show=False),
    ]

    search_view: reactive[Optional[SearchView]] = reactive(None)

    class Navigate(Message):
        """Emitted with the route of the result the user opened."""

        def __init__(self, route: str) -> None:
            self.route = route
            super().__init__()

    def __init__(
        self,
        provider: SearchProvider,
        context: Optional[SearchContext] = None,
        debounce_ms: Optional[int] = None,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self.controller = SearchController(
            provider,
            self._navigate,
            context=context,
            on_change=self._on_state_change,
        )
        self._debounce_ms = debounce_ms
        self._remove_pointer_listener: Optional[Callable[[], None]] = None
        self.set_reactive(UnifiedSearch.search_view, self.controller.snapshot())

    def compose(self) -> ComposeResult:
        with Horizontal(id="search-row"):
            yield SearchBar(debounce_ms=self._debounce_ms, id="search-bar")
            yield ClearButton()
        yield ResultsPanel(id="results-panel")

    def on_mount(self) -> None:
        listeners = getattr(self.app, "pointer_listeners", None)
        if isinstance(listeners, PointerListeners):
            self._remove_pointer_listener = listeners.add(self._on_pointer_down)
        self.watch_search_view(self.search_view)

    def on_unmount(self) -> None:
        if self._remove_pointer_listener is not None:
            self._remove_pointer_listener()
            self._remove_pointer_listener = None
        self.controller.close()

    @property
    def search_bar(self) -> SearchBar:
        return self.query_one("#search-bar", SearchBar)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _on_state_change(self, view: SearchView) -> None:
        self.search_view = view

    def watch_search_view(self, view: Optional[SearchView]) -> None:
        if view is None or not self.is_mounted:
            return
        self.query_one("#results-panel", ResultsPanel).show_view(view)
        self.query_one("#search-clear", ClearButton).display = bool(view.query)

    # ------------------------------------------------------------------
    # Typing and dispatch
    # ------------------------------------------------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        self.controller.set_query(event.value)

    def on_search_bar_settled(self, event: SearchBar.Settled) -> None:
        self.run_worker(
            self.controller.dispatch(event.query),
            group="search",
            exclusive=False,
            exit_on_error=False,
        )

    # ------------------------------------------------------------------
    # Navigation and selection
    # ------------------------------------------------------------------

    def on_search_bar_cursor_moved(self, event: SearchBar.CursorMoved) -> None:
        if event.step > 0:
            self.controller.move_down()
        else:
            self.controller.move_up()

    def on_search_bar_confirmed(self, event: SearchBar.Confirmed) -> None:
        if self.controller.confirm() is not None:
            self._clear_input()

    def on_result_row_selected(self, event: ResultRow.Selected) -> None:
        if self.controller.select(event.index) is not None:
            self._clear_input()

    def on_view_all_row_selected(self, event: ViewAllRow.Selected) -> None:
        if self.controller.view_all() is not None:
            self._clear_input()

    def on_clear_button_pressed(self, event: ClearButton.Pressed) -> None:
        self.controller.clear()
        self._clear_input()
        self.search_bar.focus()

    def _clear_input(self) -> None:
        self.search_bar.value = ""

    def _navigate(self, route: str) -> None:
        logger.info("Search result opened", route=route)
        self.post_message(self.Navigate(route))

    # ------------------------------------------------------------------
    # Dismissal and reopening
    # ------------------------------------------------------------------

    def action_close_results(self) -> None:
        """Close the dropdown, keeping the typed query."""
        self.controller.dismiss()

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        self.controller.focus()

    def on_descendant_blur(self, event: events.DescendantBlur) -> None:
        self.call_after_refresh(self._maybe_dismiss_on_blur)

    def _maybe_dismiss_on_blur(self) -> None:
        """Close the dropdown if focus moved to a widget outside this one."""
        if not self.is_attached:
            return
        focused = self.app.focused
        if focused is not None and not self._contains(focused):
            self.controller.dismiss()

    def _on_pointer_down(self, target: Any) -> None:
        if not self._contains(target):
            self.controller.dismiss()
        elif target is self.search_bar:
            self.controller.focus()

    def _contains(self, widget: Any) -> bool:
        if widget is None:
            return False
        return self in widget.ancestors_with_self
