"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from pokedex_explorer.interface.dependencies import shutdown, startup
from pokedex_explorer.interface.error_handlers import register_error_handlers
from pokedex_explorer.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of shared resources."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="Pokédex Explorer",
        version="1.0.0",
        description=(
            "Browses the public PokeAPI catalog: paged entry listing with "
            "per-row details, name search with prefix fallback, evolution "
            "triggers, and single-entry details."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    # ── Health check (simple liveness probe) ────────────────────────────

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
