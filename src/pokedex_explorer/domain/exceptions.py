"""Domain exception hierarchy.

Each exception carries an :class:`ErrorKind`.  The query orchestrators
branch on the kind (never on message text) and the interface layer maps it
to an HTTP status code.
"""

from __future__ import annotations

from pokedex_explorer.domain.entities import ErrorKind


class PokedexExplorerError(Exception):
    """Base exception for the entire application."""

    kind: ErrorKind = ErrorKind.UNEXPECTED


# ── Input validation ────────────────────────────────────────────────────────


class InvalidQueryError(PokedexExplorerError):
    """Page, limit or offset outside the accepted range."""


class InvalidResourceUrlError(PokedexExplorerError):
    """A reference URL does not end in ``/<resource>/<id>/``."""

    kind = ErrorKind.INVALID_REFERENCE


# ── Catalog (PokeAPI) errors ────────────────────────────────────────────────


class CatalogError(PokedexExplorerError):
    """Any error originating from the remote catalog."""

    kind = ErrorKind.TRANSPORT


class EntryNotFoundError(CatalogError):
    """Exact-name lookup returned 404.  Triggers the prefix-search fallback."""

    kind = ErrorKind.NOT_FOUND


class CatalogResourceNotFoundError(CatalogError):
    """A listing or detail URL returned 404."""

    kind = ErrorKind.NOT_FOUND


class CatalogRateLimitError(CatalogError):
    """The catalog rejected the request with HTTP 429."""

    kind = ErrorKind.RATE_LIMITED


class CatalogTransportError(CatalogError):
    """Network failure, unexpected status code or malformed payload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
