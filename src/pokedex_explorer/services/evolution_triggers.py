"""Paged evolution-trigger listing (no search, no hydration)."""

from __future__ import annotations

from pokedex_explorer.domain.entities import EvolutionTrigger, ResultShape
from pokedex_explorer.domain.ports.catalog_client import CatalogClient
from pokedex_explorer.domain.value_objects import PageRequest
from pokedex_explorer.services.query_state import StatefulQuery

DEFAULT_PAGE_SIZE = 10


class EvolutionTriggerQuery(StatefulQuery[ResultShape[EvolutionTrigger]]):
    """Lists one page of evolution triggers.

    Parameters
    ----------
    client:
        Catalog adapter.
    limit, offset:
        Page window passed straight to the catalog.
    """

    def __init__(
        self, client: CatalogClient, limit: int = DEFAULT_PAGE_SIZE, offset: int = 0
    ) -> None:
        super().__init__(ResultShape())
        self._client = client
        self._page = PageRequest(limit=limit, offset=offset)

    @property
    def page_request(self) -> PageRequest:
        return self._page

    async def update(
        self, *, limit: int | None = None, offset: int | None = None
    ) -> ResultShape[EvolutionTrigger]:
        """Replace the page window and refetch."""
        self._page = PageRequest(
            limit=self._page.limit if limit is None else limit,
            offset=self._page.offset if offset is None else offset,
        )
        return await self.refetch()

    async def _load(self) -> ResultShape[EvolutionTrigger]:
        page = await self._client.list_evolution_triggers(self._page.limit, self._page.offset)
        return ResultShape(
            data=page.results,
            total_count=page.count,
            has_next=page.has_next,
            has_previous=page.has_previous,
        )
