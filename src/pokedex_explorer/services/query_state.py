"""Shared state machine for the data-fetch orchestrators.

A query object owns one result value that is replaced wholesale on every
transition.  Each run is stamped with a generation number; only the most
recent run is allowed to commit, so a slow response for stale parameters can
never overwrite the state of a newer request.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any, Generic, TypeVar

from pokedex_explorer.domain.entities import ErrorKind
from pokedex_explorer.domain.exceptions import PokedexExplorerError

logger = logging.getLogger(__name__)

S = TypeVar("S")


def describe_failure(exc: Exception, fallback: str) -> tuple[str, ErrorKind]:
    """Turn an exception into the ``(message, kind)`` pair stored in state."""
    message = str(exc) or fallback
    if isinstance(exc, PokedexExplorerError):
        logger.warning("%s: %s", type(exc).__name__, message)
        return message, exc.kind
    logger.exception("Unexpected error while fetching catalog data")
    return message, ErrorKind.UNEXPECTED


class StatefulQuery(ABC, Generic[S]):
    """Base class for a query whose result is exposed through :attr:`state`.

    Subclasses implement :meth:`_load`, which returns the settled state for
    the current parameters or raises.  ``_empty`` is the value ``data`` is
    reset to on failure.
    """

    failure_message = "An unknown error occurred"
    _empty: Any = ()

    def __init__(self, initial: S) -> None:
        self._state = initial
        self._generation = 0

    @property
    def state(self) -> S:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    async def refetch(self) -> S:
        """Re-run the query with the current parameters and return the new state."""
        generation = self._begin()
        try:
            settled = await self._load()
        except Exception as exc:
            message, kind = describe_failure(exc, self.failure_message)
            settled = replace(
                self._state,  # type: ignore[type-var]
                data=self._empty,
                loading=False,
                error=message,
                error_kind=kind,
            )
        return self._commit(generation, settled)

    @abstractmethod
    async def _load(self) -> S:
        """Fetch and normalise the result for the current parameters."""

    def _begin(self) -> int:
        self._generation += 1
        self._state = replace(
            self._state,  # type: ignore[type-var]
            loading=True,
            error=None,
            error_kind=None,
        )
        return self._generation

    def _commit(self, generation: int, settled: S) -> S:
        if generation != self._generation:
            logger.debug(
                "%s: discarding stale result (run %d, current %d)",
                type(self).__name__,
                generation,
                self._generation,
            )
            return self._state
        self._state = settled
        return settled
