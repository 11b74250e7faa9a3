"""EvolutionTriggerQuery: one page, no hydration."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from conftest import BASE, trigger
from pokedex_explorer.domain.entities import ListingPage
from pokedex_explorer.domain.exceptions import CatalogTransportError
from pokedex_explorer.services.evolution_triggers import EvolutionTriggerQuery


@pytest.mark.asyncio
async def test_lists_one_page(catalog: AsyncMock):
    triggers = (trigger("level-up", 1), trigger("trade", 2))
    catalog.list_evolution_triggers.return_value = ListingPage(
        count=13, results=triggers, next=f"{BASE}/evolution-trigger?offset=10&limit=10"
    )

    state = await EvolutionTriggerQuery(catalog).refetch()

    catalog.list_evolution_triggers.assert_awaited_once_with(10, 0)
    catalog.get_entry_details.assert_not_awaited()
    assert state.data == triggers
    assert state.total_count == 13
    assert state.has_next is True
    assert state.has_previous is False


@pytest.mark.asyncio
async def test_update_moves_the_window(catalog: AsyncMock):
    catalog.list_evolution_triggers.return_value = ListingPage(
        count=13, results=(trigger("agile-style-move", 11),), previous=f"{BASE}/evolution-trigger"
    )
    query = EvolutionTriggerQuery(catalog)

    state = await query.update(offset=10)

    catalog.list_evolution_triggers.assert_awaited_once_with(10, 10)
    assert query.page_request.page == 2
    assert state.has_previous is True
    assert state.has_next is False


@pytest.mark.asyncio
async def test_failure(catalog: AsyncMock):
    catalog.list_evolution_triggers.side_effect = CatalogTransportError(
        "Failed to fetch evolution triggers: 503 Service Unavailable", status_code=503
    )

    state = await EvolutionTriggerQuery(catalog).refetch()

    assert state.error == "Failed to fetch evolution triggers: 503 Service Unavailable"
    assert state.data == ()
    assert state.loading is False
