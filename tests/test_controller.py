import asyncio

import pytest

from conftest import StaticProvider, games, players, teams
from gamerie_cli.search import NO_SELECTION, ResultSet, SearchContext, SearchController


@pytest.fixture
def routes():
    return []


@pytest.fixture
def views():
    return []


@pytest.fixture
def controller(provider, routes, views):
    return SearchController(provider, routes.append, on_change=views.append)


async def start(controller, query):
    """Dispatch ``query`` and let it reach the provider."""
    controller.set_query(query)
    task = asyncio.create_task(controller.dispatch(query))
    await asyncio.sleep(0)
    return task


async def test_response_applies_results_and_opens_panel(controller, provider):
    task = await start(controller, "val")

    assert controller.state.loading
    assert controller.state.panel_open

    provider.respond("val", ResultSet.of(games=games("valorant")))
    await task

    state = controller.state
    assert not state.loading
    assert state.panel_open
    assert [g.id for g in state.result_set.games] == ["valorant"]
    assert state.cursor == NO_SELECTION
    assert state.last_accepted_sequence == 1


async def test_out_of_order_response_is_discarded(controller, provider):
    first = await start(controller, "va")
    second = await start(controller, "val")

    provider.respond("val", ResultSet.of(games=games("valorant")))
    await second
    provider.respond("va", ResultSet.of(games=games("vainglory")))
    await first

    assert [g.id for g in controller.state.result_set.games] == ["valorant"]
    assert controller.state.last_accepted_sequence == 2
    assert not controller.state.loading


async def test_in_order_responses_both_apply(controller, provider, views):
    first = await start(controller, "va")
    second = await start(controller, "val")

    provider.respond("va", ResultSet.of(games=games("vainglory")))
    await first
    assert [g.id for g in controller.state.result_set.games] == ["vainglory"]
    # A newer dispatch is still in flight
    assert controller.state.loading

    provider.respond("val", ResultSet.of(games=games("valorant")))
    await second
    assert [g.id for g in controller.state.result_set.games] == ["valorant"]
    assert not controller.state.loading
    assert controller.state.last_accepted_sequence == 2


async def test_sequence_numbers_only_grow(controller, provider):
    for query in ["a", "ab", "abc"]:
        task = await start(controller, query)
        provider.respond(query, ResultSet.empty())
        await task

    assert controller.issued_sequence == 3
    assert controller.state.last_accepted_sequence == 3


async def test_provider_failure_becomes_empty_results(controller, provider):
    task = await start(controller, "boom")
    provider.fail("boom", RuntimeError("backend down"))
    await task

    state = controller.state
    assert state.result_set.is_empty
    assert not state.loading
    assert state.panel_open


async def test_empty_query_resets_without_calling_provider(controller, provider):
    task = await start(controller, "val")
    provider.respond("val", ResultSet.of(games=games("valorant")))
    await task

    controller.set_query("")
    await controller.dispatch("")

    assert provider.calls == ["val"]
    state = controller.state
    assert state.result_set.is_empty
    assert not state.panel_open
    assert state.cursor == NO_SELECTION
    assert not state.loading


async def test_whitespace_query_counts_as_empty(controller, provider):
    await controller.dispatch("   ")

    assert provider.calls == []
    assert not controller.state.panel_open


async def test_response_after_clearing_is_discarded(controller, provider):
    task = await start(controller, "val")

    controller.set_query("")
    await controller.dispatch("")
    provider.respond("val", ResultSet.of(games=games("valorant")))
    await task

    assert controller.state.result_set.is_empty
    assert not controller.state.panel_open


async def test_keyboard_navigation_wraps(controller, provider):
    task = await start(controller, "x")
    provider.respond("x", ResultSet.of(games=games("g1"), teams=teams("t1"), players=players("p1")))
    await task

    assert controller.move_down()
    assert controller.state.cursor == 0
    controller.move_down()
    controller.move_down()
    assert controller.state.cursor == 2
    controller.move_down()
    assert controller.state.cursor == 0
    controller.move_up()
    assert controller.state.cursor == 2


async def test_move_up_from_no_selection_goes_to_last(controller, provider):
    task = await start(controller, "x")
    provider.respond("x", ResultSet.of(games=games("g1", "g2"), players=players("p1")))
    await task

    controller.move_up()

    assert controller.state.cursor == 2


async def test_navigation_is_noop_without_results(controller, provider):
    task = await start(controller, "zzz")
    provider.respond("zzz", ResultSet.empty())
    await task

    assert not controller.move_down()
    assert not controller.move_up()
    assert controller.state.cursor == NO_SELECTION


def test_navigation_is_noop_when_panel_closed(controller):
    assert not controller.move_down()
    assert controller.state.cursor == NO_SELECTION


async def test_confirm_without_highlight_does_nothing(controller, provider, routes):
    task = await start(controller, "val")
    provider.respond("val", ResultSet.of(games=games("valorant")))
    await task

    assert controller.confirm() is None
    assert routes == []
    assert controller.state.query == "val"
    assert controller.state.panel_open


async def test_select_navigates_and_resets(controller, provider, routes):
    task = await start(controller, "drag")
    provider.respond("drag", ResultSet.of(games=games("g1"), players=players("p1")))
    await task

    controller.move_down()
    assert controller.state.cursor == 0
    controller.move_down()
    assert controller.state.cursor == 1

    assert controller.confirm() == "/profile/p1"
    assert routes == ["/profile/p1"]

    state = controller.state
    assert state.query == ""
    assert not state.panel_open
    assert state.cursor == NO_SELECTION
    assert state.result_set.is_empty


async def test_click_selects_by_index(controller, provider, routes):
    task = await start(controller, "t")
    provider.respond("t", ResultSet.of(teams=teams("t1", "t2")))
    await task

    assert controller.select(1) == "/teams/t2"
    assert routes == ["/teams/t2"]


async def test_select_out_of_range_is_noop(controller, provider, routes):
    task = await start(controller, "t")
    provider.respond("t", ResultSet.of(teams=teams("t1")))
    await task

    assert controller.select(5) is None
    assert routes == []
    assert controller.state.panel_open


async def test_response_after_select_is_discarded(controller, provider):
    first = await start(controller, "g")
    provider.respond("g", ResultSet.of(games=games("g1")))
    await first
    late = await start(controller, "gg")

    controller.move_down()
    controller.confirm()
    provider.respond("gg", ResultSet.of(games=games("g2")))
    await late

    assert controller.state.result_set.is_empty
    assert not controller.state.panel_open


async def test_view_all_uses_current_query(controller, provider, routes):
    task = await start(controller, "league of legends")
    provider.respond("league of legends", ResultSet.of(games=games("lol")))
    await task

    assert controller.view_all() == "/search?q=league%20of%20legends"
    assert routes == ["/search?q=league%20of%20legends"]
    assert controller.state.query == ""


def test_view_all_with_empty_query_is_noop(controller, routes):
    assert controller.view_all() is None
    assert routes == []


async def test_dismiss_keeps_query_and_results(controller, provider):
    task = await start(controller, "valorant")
    provider.respond("valorant", ResultSet.of(games=games("valorant")))
    await task
    controller.move_down()

    controller.dismiss()

    state = controller.state
    assert not state.panel_open
    assert state.query == "valorant"
    assert [g.id for g in state.result_set.games] == ["valorant"]
    assert state.cursor == 0


async def test_refocus_reopens_without_new_request(controller, provider):
    task = await start(controller, "valorant")
    provider.respond("valorant", ResultSet.of(games=games("valorant")))
    await task
    controller.dismiss()

    assert controller.focus()

    assert controller.state.panel_open
    assert provider.calls == ["valorant"]


async def test_refocus_after_edit_waits_for_dispatch(controller, provider):
    task = await start(controller, "valorant")
    provider.respond("valorant", ResultSet.of(games=games("valorant")))
    await task
    controller.dismiss()
    controller.set_query("valorant2")

    assert not controller.focus()
    assert not controller.state.panel_open


def test_refocus_with_empty_query_stays_closed(controller):
    assert not controller.focus()
    assert not controller.state.panel_open


async def test_clear_resets_everything(controller, provider, routes):
    task = await start(controller, "val")
    provider.respond("val", ResultSet.of(games=games("valorant")))
    await task

    controller.clear()

    state = controller.state
    assert state.query == ""
    assert not state.panel_open
    assert state.result_set.is_empty
    assert routes == []


async def test_current_user_is_excluded(provider, routes):
    controller = SearchController(
        provider, routes.append, context=SearchContext(current_user_id="p2")
    )
    task = await start(controller, "p")
    provider.respond("p", ResultSet.of(players=players("p1", "p2", "p3")))
    await task

    assert [p.id for p in controller.state.result_set.players] == ["p1", "p3"]


async def test_current_user_kept_when_not_excluded(provider, routes):
    controller = SearchController(
        provider,
        routes.append,
        context=SearchContext(current_user_id="p2", exclude_self=False),
    )
    task = await start(controller, "p")
    provider.respond("p", ResultSet.of(players=players("p1", "p2")))
    await task

    assert [p.id for p in controller.state.result_set.players] == ["p1", "p2"]


async def test_closed_controller_ignores_late_responses(controller, provider, views):
    task = await start(controller, "val")
    controller.close()
    seen = len(views)

    provider.respond("val", ResultSet.of(games=games("valorant")))
    await task

    assert controller.state.result_set.is_empty
    assert len(views) == seen
    assert not controller.move_down()
    assert controller.select(0) is None


async def test_views_are_published_on_change(controller, provider, views):
    task = await start(controller, "val")
    provider.respond("val", ResultSet.of(games=games("valorant")))
    await task

    assert views[-1].query == "val"
    assert views[-1].panel_open
    assert [i.id for i in views[-1].flat_index] == ["valorant"]


async def test_static_provider_round(routes):
    provider = StaticProvider({"cs": ResultSet.of(games=games("cs2"))})
    controller = SearchController(provider, routes.append)

    controller.set_query("cs")
    await controller.dispatch("cs")
    controller.move_down()

    assert controller.confirm() == "/games/cs2"
    assert provider.calls == ["cs"]
