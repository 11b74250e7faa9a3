"""Fan-out hydration of listing references into full entries."""

from __future__ import annotations

import asyncio
from typing import Sequence

from pokedex_explorer.domain.entities import Entry, ResourceRef
from pokedex_explorer.domain.ports.catalog_client import CatalogClient
from pokedex_explorer.domain.value_objects import extract_id


async def hydrate(client: CatalogClient, refs: Sequence[ResourceRef]) -> tuple[Entry, ...]:
    """Fetch details for every reference concurrently, preserving order.

    The id of each entry comes from its reference URL, not the payload.  If
    any single fetch fails, the remaining fetches are cancelled and the whole
    batch fails with that error.
    """

    async def _hydrate_one(ref: ResourceRef) -> Entry:
        entry_id = extract_id(ref.url)
        entry = await client.get_entry_details(ref.url)
        return entry.with_id(entry_id)

    try:
        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(_hydrate_one(ref)) for ref in refs]
    except ExceptionGroup as failures:
        raise failures.exceptions[0] from None
    return tuple(task.result() for task in tasks)
