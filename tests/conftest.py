"""Shared fixtures: catalog doubles and canned payloads."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

from pokedex_explorer.domain.entities import (
    Entry,
    EvolutionTrigger,
    ListingPage,
    ResourceRef,
    Sprites,
    Stat,
)

BASE = "https://pokeapi.co/api/v2"


def ref(name: str, entry_id: int) -> ResourceRef:
    return ResourceRef(name=name, url=f"{BASE}/pokemon/{entry_id}/")


def entry(name: str, entry_id: int = 0) -> Entry:
    return Entry(
        id=entry_id,
        name=name,
        height=4,
        weight=60,
        sprites=Sprites(front_default=f"https://img/{name}.png"),
        types=("electric",),
        stats=(Stat(name="hp", base_stat=35),),
    )


def listing(
    refs: list[ResourceRef],
    count: int | None = None,
    next: str | None = None,
    previous: str | None = None,
) -> ListingPage[ResourceRef]:
    return ListingPage(
        count=len(refs) if count is None else count,
        results=tuple(refs),
        next=next,
        previous=previous,
    )


def trigger(name: str, trigger_id: int) -> EvolutionTrigger:
    return EvolutionTrigger(
        name=name, url=f"{BASE}/evolution-trigger/{trigger_id}/", id=trigger_id
    )


async def details_from_url(url: str) -> Entry:
    """``get_entry_details`` double: the payload id deliberately disagrees with the URL."""
    return entry(f"entry-{url.rstrip('/').rsplit('/', 1)[-1]}", entry_id=-1)


@pytest.fixture
def catalog() -> AsyncMock:
    """AsyncMock standing in for the CatalogClient port."""
    mock = AsyncMock()
    mock.get_entry_details.side_effect = details_from_url
    return mock


@pytest.fixture
def pikachu_payload() -> dict[str, Any]:
    """Trimmed ``GET /pokemon/pikachu`` payload."""
    return {
        "id": 25,
        "name": "pikachu",
        "height": 4,
        "weight": 60,
        "sprites": {
            "front_default": "https://img/25.png",
            "other": {"official-artwork": {"front_default": "https://art/25.png"}},
        },
        "types": [{"slot": 1, "type": {"name": "electric", "url": f"{BASE}/type/13/"}}],
        "stats": [
            {"base_stat": 35, "effort": 0, "stat": {"name": "hp"}},
            {"base_stat": 55, "effort": 0, "stat": {"name": "attack"}},
            {"base_stat": 50, "effort": 2, "stat": {"name": "special-attack"}},
        ],
        "abilities": [
            {"ability": {"name": "static"}, "is_hidden": False},
            {"ability": {"name": "lightning-rod"}, "is_hidden": True},
        ],
        "moves": [{"move": {"name": name}} for name in ("mega-punch", "pay-day", "thunder-punch")],
    }
