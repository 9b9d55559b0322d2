"""API client for the Gamerie server."""

from typing import Any, Optional

import httpx

from gamerie_cli.search.models import GameMatch, PlayerMatch, ResultSet, TeamMatch


def parse_game(data: dict[str, Any]) -> GameMatch:
    return GameMatch(
        id=str(data.get("id", "")),
        display_name=data.get("name", "Untitled"),
        thumbnail=data.get("wall_photo"),
        subtitle=data.get("game_type", ""),
    )


def parse_team(data: dict[str, Any]) -> TeamMatch:
    member_count = data.get("member_count")
    if member_count is None:
        member_count = len(data.get("members", []))
    return TeamMatch(
        id=str(data.get("id", "")),
        display_name=data.get("name", "Untitled"),
        logo=data.get("logo"),
        member_count=member_count,
    )


def parse_player(data: dict[str, Any]) -> PlayerMatch:
    return PlayerMatch(
        id=str(data.get("id", "")),
        display_name=data.get("username", "Unknown"),
        avatar=data.get("profile_image"),
        title=data.get("gamer_title", ""),
    )


def parse_result_set(data: dict[str, Any]) -> ResultSet:
    """Build a ``ResultSet`` from a search response body."""
    return ResultSet.of(
        games=[parse_game(g) for g in data.get("games", [])],
        teams=[parse_team(t) for t in data.get("teams", [])],
        players=[parse_player(p) for p in data.get("players", [])],
    )


class ApiClient:
    """Async API client for the Gamerie server."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args):
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("ApiClient must be used as async context manager")
        return self._client

    async def health_check(self) -> bool:
        """Check if server is healthy."""
        try:
            response = await self.client.get("/health", timeout=2.0)
            return response.status_code == 200
        except httpx.HTTPError:
            return False

    async def search(self, query: str, limit: int = 5) -> ResultSet:
        """Search games, teams and players."""
        response = await self.client.get(
            "/api/v1/search",
            params={"q": query, "limit": limit},
        )
        response.raise_for_status()
        return parse_result_set(response.json())
