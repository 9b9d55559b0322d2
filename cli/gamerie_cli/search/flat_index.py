"""Single linear ordering over the three result categories.

The cursor, the selection resolver and the results panel all address
results through a ``FlatIndex`` so the category boundary arithmetic lives
in one place: games come first, then teams, then players.
"""

from collections.abc import Iterator, Sequence
from typing import overload

from gamerie_cli.search.models import Category, Match, ResultSet


class FlatIndex(Sequence):
    """Read-only view of a ``ResultSet`` as one ordered sequence."""

    def __init__(self, result_set: ResultSet) -> None:
        self.result_set = result_set
        self._items: tuple[Match, ...] = (
            *result_set.games,
            *result_set.teams,
            *result_set.players,
        )

    @overload
    def __getitem__(self, index: int) -> Match: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Match, ...]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        keys = ", ".join(f"{item.kind.value}:{item.id}" for item in self._items)
        return f"FlatIndex([{keys}])"

    @property
    def teams_start(self) -> int:
        return len(self.result_set.games)

    @property
    def players_start(self) -> int:
        return len(self.result_set.games) + len(self.result_set.teams)

    def category_at(self, index: int) -> Category:
        """Return the category the entry at ``index`` belongs to."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"flat index {index} out of range")
        if index < self.teams_start:
            return Category.GAME
        if index < self.players_start:
            return Category.TEAM
        return Category.PLAYER

    def sections(self) -> Iterator[tuple[Category, int, tuple[Match, ...]]]:
        """Yield ``(category, start, items)`` for each non-empty category.

        ``start`` is the flat index of the first item, so a row drawn for
        ``items[i]`` is highlighted when the cursor equals ``start + i``.
        """
        starts = (
            (Category.GAME, 0, self.result_set.games),
            (Category.TEAM, self.teams_start, self.result_set.teams),
            (Category.PLAYER, self.players_start, self.result_set.players),
        )
        for category, start, items in starts:
            if items:
                yield category, start, items


def flatten(result_set: ResultSet) -> FlatIndex:
    """Concatenate games, teams and players into one ``FlatIndex``."""
    return FlatIndex(result_set)
