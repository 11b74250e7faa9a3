"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Classification of a failed fetch, carried into the result state."""

    NOT_FOUND = "not_found"
    TRANSPORT = "transport"
    RATE_LIMITED = "rate_limited"
    INVALID_REFERENCE = "invalid_reference"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True, slots=True)
class Sprites:
    """Image references for an entry."""

    front_default: str | None = None
    official_artwork: str | None = None


@dataclass(frozen=True, slots=True)
class Stat:
    """A named base stat (0–255)."""

    name: str
    base_stat: int


@dataclass(frozen=True, slots=True)
class Entry:
    """A fully hydrated catalog entry.

    ``height`` is in decimeters and ``weight`` in hectograms, exactly as the
    catalog reports them.
    """

    id: int
    name: str
    height: int = 0
    weight: int = 0
    sprites: Sprites = field(default_factory=Sprites)
    types: tuple[str, ...] = ()
    stats: tuple[Stat, ...] = ()
    abilities: tuple[str, ...] = ()
    moves: tuple[str, ...] = ()

    def with_id(self, entry_id: int) -> Entry:
        return replace(self, id=entry_id)


@dataclass(frozen=True, slots=True)
class ResourceRef:
    """Lightweight listing reference (name + detail URL)."""

    name: str
    url: str


@dataclass(frozen=True, slots=True)
class EvolutionTrigger:
    """An evolution-trigger listing row."""

    name: str
    url: str
    id: int | None = None


@dataclass(frozen=True, slots=True)
class ListingPage(Generic[T]):
    """One page of a paginated catalog endpoint."""

    count: int
    results: tuple[T, ...] = ()
    next: str | None = None
    previous: str | None = None

    @property
    def has_next(self) -> bool:
        return self.next is not None

    @property
    def has_previous(self) -> bool:
        return self.previous is not None


@dataclass(frozen=True, slots=True)
class ResultShape(Generic[T]):
    """State of a listing query as seen by consumers.

    While ``loading`` is true, ``data`` still holds the previous committed
    result (empty on first load).
    """

    data: tuple[T, ...] = ()
    loading: bool = False
    error: str | None = None
    error_kind: ErrorKind | None = None
    total_count: int = 0
    has_next: bool = False
    has_previous: bool = False


@dataclass(frozen=True, slots=True)
class DetailResult:
    """State of a single-entry lookup."""

    data: Entry | None = None
    loading: bool = False
    error: str | None = None
    error_kind: ErrorKind | None = None
