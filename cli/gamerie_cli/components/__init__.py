"""CLI components."""

from .search_bar import SearchBar
from .results_panel import ResultsPanel, ResultRow, ViewAllRow
from .unified_search import UnifiedSearch, ClearButton
from .route_view import RouteView
from .status_bar import StatusBar

__all__ = [
    "SearchBar",
    "ResultsPanel",
    "ResultRow",
    "ViewAllRow",
    "UnifiedSearch",
    "ClearButton",
    "RouteView",
    "StatusBar",
]
