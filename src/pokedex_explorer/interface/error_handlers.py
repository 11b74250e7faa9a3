"""Global exception handlers — translate domain errors to HTTP responses.

Request-level failures use the standard ``{"status": "error", "message":
"..."}`` envelope.  Fetch failures that the query orchestrators already
folded into a result state are mapped with :func:`status_for_kind`.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pokedex_explorer.domain.entities import ErrorKind
from pokedex_explorer.domain.exceptions import (
    InvalidQueryError,
    PokedexExplorerError,
)

logger = logging.getLogger(__name__)

_KIND_STATUS: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.TRANSPORT: 502,
    ErrorKind.RATE_LIMITED: 429,
    ErrorKind.INVALID_REFERENCE: 502,
    ErrorKind.UNEXPECTED: 500,
}


def status_for_kind(kind: ErrorKind | None) -> int:
    """HTTP status for a result state; ``None`` means success."""
    if kind is None:
        return 200
    return _KIND_STATUS.get(kind, 500)


def _error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    @app.exception_handler(InvalidQueryError)
    async def invalid_query_handler(request: Request, exc: InvalidQueryError) -> JSONResponse:
        return _error_json(422, str(exc))

    @app.exception_handler(PokedexExplorerError)
    async def domain_handler(request: Request, exc: PokedexExplorerError) -> JSONResponse:
        logger.warning("%s: %s", type(exc).__name__, exc)
        return _error_json(status_for_kind(exc.kind), str(exc))

    # ── Pydantic / FastAPI validation errors ────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            loc = " → ".join(str(p) for p in err.get("loc", []))
            messages.append(f"{loc}: {err.get('msg', 'validation error')}")
        return _error_json(422, "; ".join(messages))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, "An unexpected error occurred. Please try again later.")
