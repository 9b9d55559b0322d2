"""Search bar component."""

from typing import Optional

from textual import events
from textual.message import Message
from textual.widgets import Input

from gamerie_cli.search.debounce import Debouncer


class SearchBar(Input):
    """Search input with debouncing and result navigation keys."""

    DEBOUNCE_MS = 300

    class Settled(Message):
        """Emitted once typing has paused for the debounce interval."""

        def __init__(self, query: str) -> None:
            self.query = query
            super().__init__()

    class CursorMoved(Message):
        """Emitted for up/down while the input has focus."""

        def __init__(self, step: int) -> None:
            self.step = step
            super().__init__()

    class Confirmed(Message):
        """Emitted when Enter is pressed."""

    def __init__(
        self,
        placeholder: str = "Search games, teams, or players...",
        debounce_ms: Optional[int] = None,
        id: str | None = None,
    ) -> None:
        super().__init__(placeholder=placeholder, id=id)
        if debounce_ms is None:
            debounce_ms = self.DEBOUNCE_MS
        self._debouncer: Debouncer[str] = Debouncer(
            debounce_ms / 1000,
            self._emit_search,
            scheduler=self.set_timer,
        )

    def on_input_changed(self, event: Input.Changed) -> None:
        """Handle input changes with debouncing."""
        if event.input is not self:
            return
        self._debouncer.push(event.value)

    def _emit_search(self, query: str) -> None:
        """Emit search message."""
        self.post_message(self.Settled(query))

    def on_key(self, event: events.Key) -> None:
        """Turn up/down into cursor moves instead of caret movement."""
        if event.key in ("down", "up"):
            event.prevent_default()
            event.stop()
            self.post_message(self.CursorMoved(1 if event.key == "down" else -1))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key - open the highlighted result."""
        event.stop()
        self.post_message(self.Confirmed())

    def on_unmount(self) -> None:
        self._debouncer.cancel()
