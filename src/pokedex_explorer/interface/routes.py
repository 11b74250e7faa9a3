"""API routes — thin controllers that delegate to the query orchestrators."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, Response

from pokedex_explorer.domain.exceptions import InvalidQueryError
from pokedex_explorer.domain.ports.catalog_client import CatalogClient
from pokedex_explorer.domain.value_objects import PageRequest
from pokedex_explorer.infrastructure.config import Settings
from pokedex_explorer.interface.dependencies import get_app_settings, get_catalog_client
from pokedex_explorer.interface.error_handlers import status_for_kind
from pokedex_explorer.interface.schemas import (
    EntryDetailResponse,
    EntryListResponse,
    EntrySchema,
    EntryViewSchema,
    ErrorResponse,
    EvolutionTriggerListResponse,
    EvolutionTriggerSchema,
)
from pokedex_explorer.services.entry_details import EntryDetailsQuery
from pokedex_explorer.services.entry_listing import EntryListingQuery
from pokedex_explorer.services.entry_view import build_entry_view
from pokedex_explorer.services.evolution_triggers import EvolutionTriggerQuery

router = APIRouter()

_FETCH_ERRORS: dict[int | str, dict[str, Any]] = {
    404: {"description": "Entry not found"},
    422: {"model": ErrorResponse, "description": "Invalid page or limit"},
    429: {"description": "Catalog rate limit exceeded"},
    502: {"description": "Catalog unavailable or returned an error"},
}


def _page_request(page: int, limit: int | None, default: int, settings: Settings) -> PageRequest:
    limit = default if limit is None else limit
    if limit > settings.max_page_size:
        raise InvalidQueryError(
            f"limit must be at most {settings.max_page_size}, got {limit}."
        )
    return PageRequest.for_page(page, limit)


@router.get("/pokemon", response_model=EntryListResponse, responses=_FETCH_ERRORS)
async def list_pokemon(
    response: Response,
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
    name: str = Query("", description="Search term; exact name first, then prefix match."),
    client: CatalogClient = Depends(get_catalog_client),
    settings: Settings = Depends(get_app_settings),
) -> EntryListResponse:
    """List catalog entries, or search them by name."""
    page_request = _page_request(page, limit, settings.default_page_size, settings)
    query = EntryListingQuery(
        client,
        limit=page_request.limit,
        offset=page_request.offset,
        search_term=name,
        scan_page_size=settings.search_scan_page_size,
        result_cap=settings.search_result_cap,
    )
    state = await query.refetch()
    response.status_code = status_for_kind(state.error_kind)

    start_item, end_item = page_request.item_range(state.total_count)
    return EntryListResponse(
        data=[EntrySchema.model_validate(entry) for entry in state.data],
        loading=state.loading,
        error=state.error,
        error_kind=state.error_kind,
        total_count=state.total_count,
        has_next=state.has_next,
        has_previous=state.has_previous,
        page=page_request.page,
        limit=page_request.limit,
        start_item=start_item,
        end_item=end_item,
        search_term=name,
    )


@router.get("/pokemon/{name}", response_model=EntryDetailResponse, responses=_FETCH_ERRORS)
async def get_pokemon(
    name: str,
    response: Response,
    client: CatalogClient = Depends(get_catalog_client),
) -> EntryDetailResponse:
    """Return one entry's details, ready for display."""
    state = await EntryDetailsQuery(client, name).refetch()
    response.status_code = status_for_kind(state.error_kind)

    view = build_entry_view(state.data) if state.data is not None else None
    return EntryDetailResponse(
        data=EntryViewSchema.model_validate(view) if view is not None else None,
        loading=state.loading,
        error=state.error,
        error_kind=state.error_kind,
    )


@router.get(
    "/evolution-triggers",
    response_model=EvolutionTriggerListResponse,
    responses=_FETCH_ERRORS,
)
async def list_evolution_triggers(
    response: Response,
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
    client: CatalogClient = Depends(get_catalog_client),
    settings: Settings = Depends(get_app_settings),
) -> EvolutionTriggerListResponse:
    """List evolution triggers."""
    page_request = _page_request(page, limit, settings.trigger_page_size, settings)
    query = EvolutionTriggerQuery(client, limit=page_request.limit, offset=page_request.offset)
    state = await query.refetch()
    response.status_code = status_for_kind(state.error_kind)

    start_item, end_item = page_request.item_range(state.total_count)
    return EvolutionTriggerListResponse(
        data=[EvolutionTriggerSchema.model_validate(t) for t in state.data],
        loading=state.loading,
        error=state.error,
        error_kind=state.error_kind,
        total_count=state.total_count,
        has_next=state.has_next,
        has_previous=state.has_previous,
        page=page_request.page,
        limit=page_request.limit,
        start_item=start_item,
        end_item=end_item,
    )
