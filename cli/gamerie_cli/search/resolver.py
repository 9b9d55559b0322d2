"""Map a selected result to the route the navigation sink should open."""

from typing import Callable, Optional
from urllib.parse import quote

from gamerie_cli.search.flat_index import FlatIndex
from gamerie_cli.search.models import Category

# Navigation sink: receives a route such as "/games/valorant"
Navigator = Callable[[str], None]

ROUTES = {
    Category.GAME: "/games/{id}",
    Category.TEAM: "/teams/{id}",
    Category.PLAYER: "/profile/{id}",
}


def resolve(cursor: int, flat_index: FlatIndex) -> Optional[str]:
    """Return the detail route for the entry under ``cursor``.

    Returns None when the cursor does not address an entry.
    """
    if not 0 <= cursor < len(flat_index):
        return None
    item = flat_index[cursor]
    return ROUTES[flat_index.category_at(cursor)].format(id=quote(item.id, safe=""))


def view_all_route(query: str) -> str:
    """Route of the full results page for ``query``."""
    return f"/search?q={quote(query, safe='')}"
