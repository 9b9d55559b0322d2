"""State and transitions of the unified search widget.

``SearchController`` owns one ``WidgetState`` per widget instance. All
mutations go through its methods, which run on the event loop, so the
only race left is between provider responses arriving out of dispatch
order. That race is settled by sequence numbers: every non-empty dispatch
takes the next number, and a response is accepted only if its number is
newer than the last accepted one.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol

import structlog

from gamerie_cli.search.flat_index import FlatIndex, flatten
from gamerie_cli.search.models import ResultSet
from gamerie_cli.search.navigation import NO_SELECTION, clamp, move_down, move_up
from gamerie_cli.search.resolver import Navigator, resolve, view_all_route

logger = structlog.get_logger(__name__)


class SearchProvider(Protocol):
    """Returns categorized matches for a query. May raise."""

    async def search(self, query: str) -> ResultSet: ...


@dataclass(frozen=True)
class SearchContext:
    """Session facts the widget is constructed with."""
    current_user_id: Optional[str] = None
    exclude_self: bool = True


@dataclass
class WidgetState:
    """Transient state of one search widget. Never persisted."""
    query: str = ""
    last_accepted_sequence: int = 0
    result_set: ResultSet = field(default_factory=ResultSet.empty)
    panel_open: bool = False
    cursor: int = NO_SELECTION
    loading: bool = False


@dataclass(frozen=True)
class SearchView:
    """What the presentation layer draws on each render."""
    query: str
    panel_open: bool
    loading: bool
    result_set: ResultSet
    cursor: int

    @property
    def flat_index(self) -> FlatIndex:
        return flatten(self.result_set)


class SearchController:
    """Drives a ``WidgetState`` from input, provider responses and keys."""

    def __init__(
        self,
        provider: SearchProvider,
        navigate: Navigator,
        context: Optional[SearchContext] = None,
        on_change: Optional[Callable[[SearchView], None]] = None,
    ) -> None:
        self.provider = provider
        self.context = context or SearchContext()
        self.state = WidgetState()
        self._navigate = navigate
        self._on_change = on_change
        self._issued_sequence = 0
        self._dispatched_query = ""
        self._closed = False

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def issued_sequence(self) -> int:
        """Sequence number of the most recent non-empty dispatch."""
        return self._issued_sequence

    @property
    def flat_index(self) -> FlatIndex:
        return flatten(self.state.result_set)

    def snapshot(self) -> SearchView:
        state = self.state
        return SearchView(
            query=state.query,
            panel_open=state.panel_open,
            loading=state.loading,
            result_set=state.result_set,
            cursor=state.cursor,
        )

    # ------------------------------------------------------------------
    # Input and dispatch
    # ------------------------------------------------------------------

    def set_query(self, query: str) -> None:
        """Record the text currently in the input (before debouncing)."""
        if self._closed or query == self.state.query:
            return
        self.state.query = query
        self._changed()

    async def dispatch(self, query: str) -> None:
        """Search for a debounced query and apply the response if still current."""
        if self._closed:
            return

        if not query.strip():
            self._dispatched_query = ""
            self._reset_results()
            self._changed()
            return

        self._issued_sequence += 1
        sequence = self._issued_sequence
        self._dispatched_query = query
        self.state.loading = True
        self.state.panel_open = True
        self._changed()
        logger.debug("Search dispatched", query=query, sequence=sequence)

        try:
            result_set = await self.provider.search(query)
        except Exception as e:
            logger.warning(
                "Search provider failed",
                query=query,
                sequence=sequence,
                error=str(e),
            )
            result_set = ResultSet.empty()

        self._accept(sequence, query, result_set)

    def _accept(self, sequence: int, query: str, result_set: ResultSet) -> None:
        if self._closed:
            logger.debug("Response after close dropped", sequence=sequence)
            return
        if sequence <= self.state.last_accepted_sequence:
            logger.debug(
                "Stale response discarded",
                query=query,
                sequence=sequence,
                last_accepted=self.state.last_accepted_sequence,
            )
            return

        if self.context.exclude_self:
            result_set = result_set.without_player(self.context.current_user_id)

        self.state.last_accepted_sequence = sequence
        self.state.result_set = result_set
        self.state.cursor = NO_SELECTION
        self.state.loading = sequence < self._issued_sequence
        self._changed()
        logger.info(
            "Search results accepted",
            query=query,
            sequence=sequence,
            games=len(result_set.games),
            teams=len(result_set.teams),
            players=len(result_set.players),
        )

    # ------------------------------------------------------------------
    # Keyboard navigation
    # ------------------------------------------------------------------

    def move_down(self) -> bool:
        """Move the cursor down. Returns True if the key was consumed."""
        return self._move(move_down)

    def move_up(self) -> bool:
        """Move the cursor up. Returns True if the key was consumed."""
        return self._move(move_up)

    def _move(self, step: Callable[[int, int], int]) -> bool:
        if self._closed or not self.state.panel_open:
            return False
        size = len(self.flat_index)
        if size == 0:
            return False
        self.state.cursor = step(clamp(self.state.cursor, size), size)
        self._changed()
        return True

    def confirm(self) -> Optional[str]:
        """Open the highlighted result. No-op when nothing is highlighted."""
        if not self.state.panel_open:
            return None
        return self.select(self.state.cursor)

    def select(self, index: int) -> Optional[str]:
        """Open the result at ``index`` and reset the widget.

        Confirm-by-keyboard and click both end here. Returns the route
        handed to the navigation sink, or None if ``index`` addresses
        nothing.
        """
        if self._closed:
            return None
        route = resolve(index, self.flat_index)
        if route is None:
            return None
        self._navigate(route)
        self._reset_all()
        return route

    def view_all(self) -> Optional[str]:
        """Open the full results page for the current query."""
        if self._closed or not self.state.query.strip():
            return None
        route = view_all_route(self.state.query)
        self._navigate(route)
        self._reset_all()
        return route

    # ------------------------------------------------------------------
    # Panel visibility
    # ------------------------------------------------------------------

    def dismiss(self) -> None:
        """Close the panel, keeping the query, results and cursor."""
        if self._closed or not self.state.panel_open:
            return
        self.state.panel_open = False
        self._changed()

    def focus(self) -> bool:
        """Re-open the panel with the results already held.

        Only reopens when the query is the one last dispatched, so no
        provider call is needed. Returns True if the panel was reopened.
        """
        if self._closed or self.state.panel_open:
            return False
        query = self.state.query
        if not query.strip() or query != self._dispatched_query:
            return False
        self.state.panel_open = True
        self._changed()
        return True

    def clear(self) -> None:
        """Empty the input and close the panel without navigating."""
        if self._closed:
            return
        self._reset_all()

    def close(self) -> None:
        """Stop all further state changes (widget unmounted)."""
        self._closed = True
        self._on_change = None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _reset_results(self) -> None:
        # Responses still in flight belong to queries that no longer apply
        self.state.last_accepted_sequence = self._issued_sequence
        self.state.result_set = ResultSet.empty()
        self.state.panel_open = False
        self.state.cursor = NO_SELECTION
        self.state.loading = False

    def _reset_all(self) -> None:
        self.state.query = ""
        self._dispatched_query = ""
        self._reset_results()
        self._changed()

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(self.snapshot())
