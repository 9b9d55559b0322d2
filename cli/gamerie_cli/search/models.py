"""Search result types shared by providers, the controller and the widgets."""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Union


class Category(str, Enum):
    """Result categories, in display priority order."""

    GAME = "game"
    TEAM = "team"
    PLAYER = "player"


@dataclass(frozen=True)
class GameMatch:
    """A game page matching the query."""
    id: str
    display_name: str
    thumbnail: Optional[str] = None
    subtitle: str = ""

    kind: ClassVar[Category] = Category.GAME

    @property
    def key(self) -> tuple[Category, str]:
        return (self.kind, self.id)


@dataclass(frozen=True)
class TeamMatch:
    """A team matching the query."""
    id: str
    display_name: str
    logo: Optional[str] = None
    member_count: int = 0

    kind: ClassVar[Category] = Category.TEAM

    @property
    def key(self) -> tuple[Category, str]:
        return (self.kind, self.id)


@dataclass(frozen=True)
class PlayerMatch:
    """A player profile matching the query."""
    id: str
    display_name: str
    avatar: Optional[str] = None
    title: str = ""

    kind: ClassVar[Category] = Category.PLAYER

    @property
    def key(self) -> tuple[Category, str]:
        return (self.kind, self.id)


Match = Union[GameMatch, TeamMatch, PlayerMatch]


@dataclass(frozen=True)
class ResultSet:
    """Categorized matches for one query.

    Each category keeps the order the provider returned it in.
    """
    games: tuple[GameMatch, ...] = field(default_factory=tuple)
    teams: tuple[TeamMatch, ...] = field(default_factory=tuple)
    players: tuple[PlayerMatch, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> "ResultSet":
        return cls()

    @classmethod
    def of(
        cls,
        games=(),
        teams=(),
        players=(),
    ) -> "ResultSet":
        """Build a result set from any iterables."""
        return cls(games=tuple(games), teams=tuple(teams), players=tuple(players))

    @property
    def total(self) -> int:
        return len(self.games) + len(self.teams) + len(self.players)

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    def without_player(self, player_id: Optional[str]) -> "ResultSet":
        """Return a copy with the given player removed."""
        if player_id is None:
            return self
        players = tuple(p for p in self.players if p.id != player_id)
        if len(players) == len(self.players):
            return self
        return ResultSet(games=self.games, teams=self.teams, players=players)
