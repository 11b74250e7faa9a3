"""Single-entry lookup by exact name."""

from __future__ import annotations

from pokedex_explorer.domain.entities import DetailResult
from pokedex_explorer.domain.ports.catalog_client import CatalogClient
from pokedex_explorer.services.query_state import StatefulQuery


class EntryDetailsQuery(StatefulQuery[DetailResult]):
    """Fetches one entry whenever the selected name changes.

    A ``None`` (or empty) name settles immediately to an empty result without
    touching the catalog.
    """

    failure_message = "Failed to fetch Pokemon details"
    _empty = None

    def __init__(self, client: CatalogClient, name: str | None = None) -> None:
        super().__init__(DetailResult())
        self._client = client
        self._name = name

    @property
    def name(self) -> str | None:
        return self._name

    async def set_name(self, name: str | None) -> DetailResult:
        """Select a new name; refetches only when it differs from the current one."""
        if name == self._name:
            return self._state
        self._name = name
        return await self.refetch()

    async def refetch(self) -> DetailResult:
        if not self._name:
            # Invalidate any lookup still in flight for the previous name.
            self._generation += 1
            self._state = DetailResult()
            return self._state
        return await super().refetch()

    async def _load(self) -> DetailResult:
        assert self._name
        entry = await self._client.get_entry_by_name(self._name)
        return DetailResult(data=entry)
