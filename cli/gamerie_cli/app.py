"""Gamerie CLI - Main Textual Application."""

from pathlib import Path
from typing import Optional

import structlog
from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Header, Footer
from textual.containers import Container
from textual.binding import Binding

from gamerie_cli.components import (
    RouteView,
    SearchBar,
    StatusBar,
    UnifiedSearch,
)
from gamerie_cli.config import Settings, get_settings
from gamerie_cli.providers import get_provider
from gamerie_cli.search import PointerListeners, SearchContext, SearchProvider

logger = structlog.get_logger(__name__)


class GamerieApp(App):
    """Gamerie terminal client."""

    TITLE = "Gamerie"
    SUB_TITLE = "Find games, teams and players"
    CSS_PATH = Path(__file__).parent / "styles" / "app.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("slash", "focus_search", "Search", key_display="/"),
    ]

    def __init__(
        self,
        settings: Optional[Settings] = None,
        provider: Optional[SearchProvider] = None,
    ):
        super().__init__()
        self.settings = settings or get_settings()
        self.provider = provider or get_provider(self.settings)
        self.pointer_listeners = PointerListeners()
        self.current_route: Optional[str] = None

    def compose(self) -> ComposeResult:
        yield Header()

        with Container(id="main"):
            yield UnifiedSearch(
                self.provider,
                context=SearchContext(
                    current_user_id=self.settings.current_user_id,
                    exclude_self=self.settings.exclude_self,
                ),
                debounce_ms=self.settings.debounce_ms,
                id="unified-search",
            )
            yield RouteView(id="route-view")

        yield StatusBar(id="status-bar")
        yield Footer()

    async def on_mount(self) -> None:
        """Initialize on mount."""
        self.sub_title = "Press / to search"

        await self._check_provider()

        # Focus search bar
        self.query_one("#search-bar", SearchBar).focus()

    async def _check_provider(self) -> None:
        """Report whether the search provider is reachable."""
        status_bar = self.query_one("#status-bar", StatusBar)
        status_bar.provider = getattr(self.provider, "name", "custom")

        is_online = getattr(self.provider, "is_online", None)
        if is_online is None:
            status_bar.is_online = True
            return
        status_bar.is_online = await is_online()
        if not status_bar.is_online:
            logger.warning("Search provider offline", provider=status_bar.provider)

    def on_mouse_down(self, event: events.MouseDown) -> None:
        """Report every press to widgets watching for outside clicks."""
        self.pointer_listeners.notify(event.widget)

    def on_unified_search_navigate(self, event: UnifiedSearch.Navigate) -> None:
        """Handle a result opened from the search widget."""
        self.navigate(event.route)

    def navigate(self, route: str) -> None:
        """Show the page for ``route``."""
        self.current_route = route
        self.query_one("#route-view", RouteView).route = route

        status_bar = self.query_one("#status-bar", StatusBar)
        status_bar.route = route
        status_bar.set_message(f"Opened {route}")
        logger.info("Navigated", route=route)

    def action_focus_search(self) -> None:
        """Focus the search bar."""
        self.query_one("#search-bar", SearchBar).focus()


def run_app(settings: Optional[Settings] = None):
    """Run the Gamerie CLI app."""
    app = GamerieApp(settings=settings)
    app.run()


if __name__ == "__main__":
    run_app()
