"""Port: catalog client — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from pokedex_explorer.domain.entities import (
    Entry,
    EvolutionTrigger,
    ListingPage,
    ResourceRef,
)


class CatalogClient(Protocol):
    """Abstract contract for the four read operations of the remote catalog."""

    async def list_entries(self, limit: int, offset: int) -> ListingPage[ResourceRef]:
        """Return one page of lightweight entry references."""
        ...

    async def get_entry_by_name(self, name: str) -> Entry:
        """Return the entry with exactly this name.

        Raises :class:`EntryNotFoundError` when the catalog has no such entry.
        """
        ...

    async def get_entry_details(self, url: str) -> Entry:
        """Return the entry behind a listing reference URL."""
        ...

    async def list_evolution_triggers(
        self, limit: int, offset: int
    ) -> ListingPage[EvolutionTrigger]:
        """Return one page of evolution-trigger references."""
        ...
