"""Search providers: the Gamerie HTTP API and the built-in demo catalogue."""

import asyncio
from collections.abc import Iterable
from typing import TypeVar

import structlog

from gamerie_cli.api import ApiClient
from gamerie_cli.config import Settings
from gamerie_cli.demo_data import DEMO_GAMES, DEMO_PLAYERS, DEMO_TEAMS
from gamerie_cli.search.controller import SearchProvider
from gamerie_cli.search.models import GameMatch, PlayerMatch, ResultSet, TeamMatch

logger = structlog.get_logger(__name__)

M = TypeVar("M", GameMatch, TeamMatch, PlayerMatch)


class HttpSearchProvider:
    """Searches through the server's ``/api/v1/search`` endpoint.

    Each call opens its own client: overlapping searches are normal while
    the user types, and must not share a connection another call closes.
    """

    name = "http"

    def __init__(
        self,
        base_url: str,
        limit: int = 5,
        timeout: float = 10.0,
        transport=None,
    ) -> None:
        self.base_url = base_url
        self.limit = limit
        self.timeout = timeout
        self._transport = transport

    def client(self) -> ApiClient:
        return ApiClient(self.base_url, timeout=self.timeout, transport=self._transport)

    async def search(self, query: str) -> ResultSet:
        async with self.client() as api:
            return await api.search(query, limit=self.limit)

    async def is_online(self) -> bool:
        async with self.client() as api:
            return await api.health_check()


class DemoSearchProvider:
    """Case-insensitive substring match over an in-memory catalogue."""

    name = "demo"

    def __init__(
        self,
        games: Iterable[GameMatch] = DEMO_GAMES,
        teams: Iterable[TeamMatch] = DEMO_TEAMS,
        players: Iterable[PlayerMatch] = DEMO_PLAYERS,
        limit: int = 5,
        latency: float = 0.0,
    ) -> None:
        self.games = tuple(games)
        self.teams = tuple(teams)
        self.players = tuple(players)
        self.limit = limit
        self.latency = latency

    def _match(self, items: tuple[M, ...], needle: str) -> list[M]:
        return [item for item in items if needle in item.display_name.lower()][: self.limit]

    async def search(self, query: str) -> ResultSet:
        if self.latency:
            await asyncio.sleep(self.latency)
        needle = query.strip().lower()
        if not needle:
            return ResultSet.empty()
        return ResultSet.of(
            games=self._match(self.games, needle),
            teams=self._match(self.teams, needle),
            players=self._match(self.players, needle),
        )

    async def is_online(self) -> bool:
        return True


def get_provider(settings: Settings) -> SearchProvider:
    """Build the provider named by ``settings.provider``."""
    if settings.use_demo():
        logger.info("Using demo search provider", latency_ms=settings.demo_latency_ms)
        return DemoSearchProvider(
            limit=settings.result_limit,
            latency=settings.demo_latency_ms / 1000,
        )
    logger.info("Using HTTP search provider", base_url=settings.api_base_url)
    return HttpSearchProvider(
        settings.api_base_url,
        limit=settings.result_limit,
        timeout=settings.request_timeout,
    )
