"""Shared fixtures for the search tests."""

import asyncio
from typing import Callable

import pytest

from gamerie_cli.config import Settings
from gamerie_cli.search import GameMatch, PlayerMatch, ResultSet, TeamMatch


def games(*ids: str) -> list[GameMatch]:
    return [GameMatch(id=i, display_name=f"Game {i}", subtitle="Shooter") for i in ids]


def teams(*ids: str) -> list[TeamMatch]:
    return [TeamMatch(id=i, display_name=f"Team {i}", member_count=5) for i in ids]


def players(*ids: str) -> list[PlayerMatch]:
    return [PlayerMatch(id=i, display_name=f"Player {i}", title="Pro Gamer") for i in ids]


class FakeTimer:
    def __init__(self, scheduler: "FakeScheduler", delay: float, callback: Callable[[], None]):
        self.scheduler = scheduler
        self.delay = delay
        self.callback = callback
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


class FakeScheduler:
    """Collects timers instead of waiting; tests fire them explicitly."""

    def __init__(self) -> None:
        self.timers: list[FakeTimer] = []

    def __call__(self, delay: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(self, delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def active(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.stopped]

    def fire_all(self) -> None:
        """Fire every timer that was not stopped, like time passing."""
        for timer in list(self.active):
            timer.stopped = True
            timer.callback()


class ScriptedProvider:
    """Provider whose responses are released by the test, in any order."""

    name = "scripted"

    def __init__(self) -> None:
        self.calls: list[str] = []
        self._pending: dict[str, list[asyncio.Future]] = {}

    async def search(self, query: str) -> ResultSet:
        self.calls.append(query)
        future: asyncio.Future = asyncio.get_running_loop().create_future()
        self._pending.setdefault(query, []).append(future)
        return await future

    def respond(self, query: str, result_set: ResultSet) -> None:
        self._pending[query].pop(0).set_result(result_set)

    def fail(self, query: str, error: Exception) -> None:
        self._pending[query].pop(0).set_exception(error)


class StaticProvider:
    """Provider answering every query from a fixed table."""

    name = "static"

    def __init__(self, answers: dict[str, ResultSet]) -> None:
        self.answers = answers
        self.calls: list[str] = []

    async def search(self, query: str) -> ResultSet:
        self.calls.append(query)
        return self.answers.get(query, ResultSet.empty())


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def provider() -> ScriptedProvider:
    return ScriptedProvider()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(data_dir=tmp_path, debounce_ms=20, provider="demo")
