"""Status bar component."""

from typing import Optional

from rich.text import Text
from textual.reactive import reactive
from textual.timer import Timer
from textual.widgets import Static

SEPARATOR = " │ "


class StatusBar(Static):
    """Provider reachability, the page last opened and a transient notice."""

    is_online: reactive[bool] = reactive(False)
    provider: reactive[str] = reactive("")
    route: reactive[str] = reactive("")
    message: reactive[str] = reactive("")

    def __init__(self, id: str | None = None) -> None:
        super().__init__(id=id)
        self._message_timer: Optional[Timer] = None

    def render(self) -> Text:
        text = Text()
        if self.is_online:
            text.append("● Online", style="green")
        else:
            text.append("● Offline", style="red")

        if self.provider:
            text.append(SEPARATOR)
            text.append(f"{self.provider} search", style="dim")

        if self.route:
            text.append(SEPARATOR)
            text.append("at ", style="dim")
            text.append(self.route)

        if self.message:
            text.append(SEPARATOR)
            text.append(self.message, style="cyan")

        return text

    def set_message(self, message: str, duration: float = 3.0) -> None:
        """Show ``message`` for ``duration`` seconds (0 keeps it)."""
        if self._message_timer is not None:
            self._message_timer.stop()
            self._message_timer = None
        self.message = message
        if duration > 0:
            self._message_timer = self.set_timer(duration, self._clear_message)

    def _clear_message(self) -> None:
        self._message_timer = None
        self.message = ""
