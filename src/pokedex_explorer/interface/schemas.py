"""Pydantic response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pokedex_explorer.domain.entities import ErrorKind


class _FromAttributes(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class SpritesSchema(_FromAttributes):
    front_default: str | None = None
    official_artwork: str | None = None


class StatSchema(_FromAttributes):
    name: str
    base_stat: int


class EntrySchema(_FromAttributes):
    """One hydrated row of the entry table."""

    id: int
    name: str
    height: int
    weight: int
    sprites: SpritesSchema
    types: list[str]
    stats: list[StatSchema]
    abilities: list[str]
    moves: list[str]


class EvolutionTriggerSchema(_FromAttributes):
    id: int | None = None
    name: str
    url: str


class StatViewSchema(_FromAttributes):
    name: str
    label: str
    base_stat: int
    percent: float


class EntryViewSchema(_FromAttributes):
    """Display-ready entry for the detail overlay."""

    id: int
    name: str
    artwork_url: str | None
    types: list[str]
    height_m: float
    weight_kg: float
    stats: list[StatViewSchema]
    abilities: list[str]
    moves: list[str]


class _ListingResponse(BaseModel):
    loading: bool
    error: str | None = None
    error_kind: ErrorKind | None = None
    total_count: int
    has_next: bool
    has_previous: bool
    page: int
    limit: int
    start_item: int
    end_item: int


class EntryListResponse(_ListingResponse):
    """Response from ``GET /pokemon``."""

    data: list[EntrySchema]
    search_term: str = ""


class EvolutionTriggerListResponse(_ListingResponse):
    """Response from ``GET /evolution-triggers``."""

    data: list[EvolutionTriggerSchema]


class EntryDetailResponse(BaseModel):
    """Response from ``GET /pokemon/{name}``."""

    data: EntryViewSchema | None = None
    loading: bool
    error: str | None = None
    error_kind: ErrorKind | None = None


class ErrorResponse(BaseModel):
    """Standard error envelope returned on request-level failures."""

    status: str = "error"
    message: str
