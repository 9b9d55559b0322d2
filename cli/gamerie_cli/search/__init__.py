"""Unified incremental search: state, ordering and navigation."""

from gamerie_cli.search.controller import (
    SearchContext,
    SearchController,
    SearchProvider,
    SearchView,
    WidgetState,
)
from gamerie_cli.search.debounce import Debouncer, loop_scheduler
from gamerie_cli.search.flat_index import FlatIndex, flatten
from gamerie_cli.search.models import (
    Category,
    GameMatch,
    Match,
    PlayerMatch,
    ResultSet,
    TeamMatch,
)
from gamerie_cli.search.navigation import NO_SELECTION
from gamerie_cli.search.pointer import PointerListeners
from gamerie_cli.search.resolver import Navigator, resolve, view_all_route

__all__ = [
    "Category",
    "Debouncer",
    "FlatIndex",
    "GameMatch",
    "Match",
    "NO_SELECTION",
    "Navigator",
    "PlayerMatch",
    "PointerListeners",
    "ResultSet",
    "SearchContext",
    "SearchController",
    "SearchProvider",
    "SearchView",
    "TeamMatch",
    "WidgetState",
    "flatten",
    "loop_scheduler",
    "resolve",
    "view_all_route",
]
