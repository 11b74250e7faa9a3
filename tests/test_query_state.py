"""Loading transitions and stale-run handling shared by every query."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import pytest

from conftest import listing, ref, trigger
from pokedex_explorer.domain.entities import ListingPage
from pokedex_explorer.services.entry_listing import EntryListingQuery
from pokedex_explorer.services.evolution_triggers import EvolutionTriggerQuery

pytestmark = pytest.mark.asyncio


async def test_loading_keeps_previous_data(catalog: AsyncMock):
    gate = asyncio.Event()
    pages = [listing([ref("bulbasaur", 1)], count=2), listing([ref("ivysaur", 2)], count=2)]

    async def list_entries(limit: int, offset: int):
        if offset:
            await gate.wait()
        return pages[1 if offset else 0]

    catalog.list_entries.side_effect = list_entries
    query = EntryListingQuery(catalog, limit=1)
    first = await query.refetch()

    task = asyncio.create_task(query.update(offset=1))
    await asyncio.sleep(0)

    assert query.state.loading is True
    assert query.state.data == first.data

    gate.set()
    settled = await task

    assert settled.loading is False
    assert [e.id for e in settled.data] == [2]


async def test_stale_run_does_not_overwrite_newer_result(catalog: AsyncMock):
    gate = asyncio.Event()
    slow = ListingPage(count=2, results=(trigger("level-up", 1),), next="n")
    fast = ListingPage(count=2, results=(trigger("trade", 2),), previous="p")

    async def list_triggers(limit: int, offset: int):
        if offset == 0:
            await gate.wait()
            return slow
        return fast

    catalog.list_evolution_triggers.side_effect = list_triggers
    query = EvolutionTriggerQuery(catalog, limit=1)

    stale = asyncio.create_task(query.refetch())
    await asyncio.sleep(0)
    newest = await query.update(offset=1)

    gate.set()
    returned = await stale

    assert query.state is newest
    assert returned is newest
    assert [t.name for t in query.state.data] == ["trade"]
    assert query.state.has_previous is True
    assert query.generation == 2


async def test_stale_failure_is_discarded(catalog: AsyncMock):
    gate = asyncio.Event()

    async def list_triggers(limit: int, offset: int):
        if offset == 0:
            await gate.wait()
            raise RuntimeError("late failure")
        return ListingPage(count=1, results=(trigger("trade", 2),))

    catalog.list_evolution_triggers.side_effect = list_triggers
    query = EvolutionTriggerQuery(catalog, limit=1)

    stale = asyncio.create_task(query.refetch())
    await asyncio.sleep(0)
    await query.update(offset=1)
    gate.set()
    await stale

    assert query.state.error is None
    assert [t.name for t in query.state.data] == ["trade"]


async def test_initial_state_is_empty(catalog: AsyncMock):
    query = EntryListingQuery(catalog)

    assert query.state.data == ()
    assert query.state.loading is False
    assert query.state.total_count == 0
    catalog.list_entries.assert_not_awaited()
