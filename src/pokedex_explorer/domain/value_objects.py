"""Value objects — self-validating domain primitives."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from pokedex_explorer.domain.exceptions import (
    InvalidQueryError,
    InvalidResourceUrlError,
)


def extract_id(url: str) -> int:
    """Return the numeric id from a reference URL like ``.../pokemon/25/``.

    The id is the last non-empty path segment, so the trailing slash is
    optional.  At least a ``<resource>/<id>`` pair is required.
    """
    segments = [part for part in urlsplit(url).path.split("/") if part]
    if len(segments) < 2:
        raise InvalidResourceUrlError(
            f"Invalid resource URL: '{url}'. Expected format: .../<resource>/<id>/"
        )
    raw_id = segments[-1]
    if not raw_id.isascii() or not raw_id.isdigit():
        raise InvalidResourceUrlError(
            f"Invalid resource URL: '{url}'. '{raw_id}' is not a numeric id."
        )
    return int(raw_id, 10)


@dataclass(frozen=True, slots=True)
class PageRequest:
    """Validated ``limit`` / ``offset`` pair for a paginated endpoint."""

    limit: int
    offset: int = 0

    def __post_init__(self) -> None:
        if self.limit <= 0:
            raise InvalidQueryError(f"limit must be positive, got {self.limit}.")
        if self.offset < 0:
            raise InvalidQueryError(f"offset must not be negative, got {self.offset}.")

    @classmethod
    def for_page(cls, page: int, limit: int) -> PageRequest:
        """Build the request for a 1-based page number."""
        if page < 1:
            raise InvalidQueryError(f"page must be at least 1, got {page}.")
        return cls(limit=limit, offset=(page - 1) * limit)

    @property
    def page(self) -> int:
        return self.offset // self.limit + 1

    def item_range(self, total_count: int) -> tuple[int, int]:
        """Return the 1-based ``(start, end)`` items shown on this page."""
        start = self.offset + 1
        end = min(self.offset + self.limit, total_count)
        return start, end
