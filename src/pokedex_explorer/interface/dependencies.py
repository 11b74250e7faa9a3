"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from pokedex_explorer.domain.ports.catalog_client import CatalogClient
from pokedex_explorer.infrastructure.config import Settings, get_settings
from pokedex_explorer.infrastructure.pokeapi_adapter import PokeApiAdapter

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout_seconds))


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_app_settings() -> Settings:
    return get_settings()


def get_catalog_client() -> CatalogClient:
    """Build the catalog adapter over the shared HTTP client."""
    assert _http_client is not None, "startup() was not called"
    return PokeApiAdapter(client=_http_client, base_url=get_settings().pokeapi_base_url)
