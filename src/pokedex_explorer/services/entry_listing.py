"""Paged entry listing with name search.

Without a search term, one catalog page is listed and every row is hydrated
concurrently.  With a search term, an exact-name lookup is tried first; when
the catalog reports the name as not found, the full catalog is scanned for
names starting with the term and the first matches are hydrated.
"""

from __future__ import annotations

import logging

from pokedex_explorer.domain.entities import Entry, ResourceRef, ResultShape
from pokedex_explorer.domain.exceptions import EntryNotFoundError
from pokedex_explorer.domain.ports.catalog_client import CatalogClient
from pokedex_explorer.domain.value_objects import PageRequest
from pokedex_explorer.services.hydration import hydrate
from pokedex_explorer.services.query_state import StatefulQuery

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20
SEARCH_SCAN_PAGE_SIZE = 1000
SEARCH_RESULT_CAP = 20


class EntryListingQuery(StatefulQuery[ResultShape[Entry]]):
    """Orchestrates list-fetch vs. search-fetch for the entry table.

    Parameters
    ----------
    client:
        Catalog adapter.
    limit, offset:
        Page window used when no search term is set.
    search_term:
        Verbatim search string; empty means "list".
    scan_page_size:
        Page size used while scanning the catalog for prefix matches.
    result_cap:
        Maximum number of prefix matches hydrated.
    """

    def __init__(
        self,
        client: CatalogClient,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
        search_term: str = "",
        *,
        scan_page_size: int = SEARCH_SCAN_PAGE_SIZE,
        result_cap: int = SEARCH_RESULT_CAP,
    ) -> None:
        super().__init__(ResultShape())
        self._client = client
        self._page = PageRequest(limit=limit, offset=offset)
        self._search_term = search_term
        self._scan_page = PageRequest(limit=scan_page_size)
        self._result_cap = result_cap

    @property
    def page_request(self) -> PageRequest:
        return self._page

    @property
    def search_term(self) -> str:
        return self._search_term

    async def update(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        search_term: str | None = None,
    ) -> ResultShape[Entry]:
        """Replace any of the parameters and refetch."""
        self._page = PageRequest(
            limit=self._page.limit if limit is None else limit,
            offset=self._page.offset if offset is None else offset,
        )
        if search_term is not None:
            self._search_term = search_term
        return await self.refetch()

    async def _load(self) -> ResultShape[Entry]:
        if self._search_term:
            return await self._search(self._search_term)
        return await self._list_page()

    async def _list_page(self) -> ResultShape[Entry]:
        logger.info("Listing entries (limit=%d, offset=%d)", self._page.limit, self._page.offset)
        page = await self._client.list_entries(self._page.limit, self._page.offset)
        entries = await hydrate(self._client, page.results)
        return ResultShape(
            data=entries,
            total_count=page.count,
            has_next=page.has_next,
            has_previous=page.has_previous,
        )

    async def _search(self, term: str) -> ResultShape[Entry]:
        try:
            entry = await self._client.get_entry_by_name(term)
        except EntryNotFoundError:
            logger.info("No exact match for %r, scanning catalog by prefix", term)
        else:
            return ResultShape(data=(entry,), total_count=1)

        matches = await self._scan_for_prefix(term.lower())
        if not matches:
            return ResultShape()

        entries = await hydrate(self._client, matches[: self._result_cap])
        return ResultShape(
            data=entries,
            total_count=len(matches),
            has_next=len(matches) > self._result_cap,
        )

    async def _scan_for_prefix(self, prefix: str) -> list[ResourceRef]:
        """Walk the catalog listing until exhausted, keeping prefix matches."""
        matches: list[ResourceRef] = []
        offset = 0
        while True:
            page = await self._client.list_entries(self._scan_page.limit, offset)
            matches.extend(ref for ref in page.results if ref.name.lower().startswith(prefix))
            if not page.has_next or not page.results:
                break
            offset += len(page.results)
        logger.info("Prefix %r matched %d entries", prefix, len(matches))
        return matches
