"""PokeAPI REST adapter — implements the CatalogClient port."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from pokedex_explorer.domain.entities import (
    Entry,
    EvolutionTrigger,
    ListingPage,
    ResourceRef,
    Sprites,
    Stat,
)
from pokedex_explorer.domain.exceptions import (
    CatalogRateLimitError,
    CatalogResourceNotFoundError,
    CatalogTransportError,
    EntryNotFoundError,
    InvalidResourceUrlError,
)
from pokedex_explorer.domain.value_objects import extract_id

logger = logging.getLogger(__name__)

_DEFAULT_BASE = "https://pokeapi.co/api/v2"
_USER_AGENT = "pokedex-explorer/1.0"


class PokeApiAdapter:
    """Concrete CatalogClient backed by the PokeAPI v2 REST API."""

    def __init__(self, client: httpx.AsyncClient, base_url: str = _DEFAULT_BASE) -> None:
        self._client = client
        self._base = base_url.rstrip("/")
        self._headers: dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": _USER_AGENT,
        }

    async def list_entries(self, limit: int, offset: int) -> ListingPage[ResourceRef]:
        """GET /pokemon?limit=&offset= → ListingPage[ResourceRef]."""
        data = await self._get_json(
            f"{self._base}/pokemon",
            params={"limit": str(limit), "offset": str(offset)},
            what="Pokemon list",
        )
        try:
            refs = tuple(
                ResourceRef(name=item["name"], url=item["url"])
                for item in data["results"]
            )
            return ListingPage(
                count=int(data["count"]),
                results=refs,
                next=data.get("next"),
                previous=data.get("previous"),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogTransportError(f"Malformed Pokemon list payload: {exc}") from exc

    async def get_entry_by_name(self, name: str) -> Entry:
        """GET /pokemon/{name} → Entry (the payload's own id is kept)."""
        # Empty or dot-only names would collapse into another endpoint's path.
        if not name.strip("."):
            raise EntryNotFoundError(f'Pokemon "{name}" not found')
        url =f"{self._base}/pokemon/{quote(name.lower(), safe='')}"
        try:
            data = await self._get_json(url, what="Pokemon")
        except CatalogResourceNotFoundError as exc:
            raise EntryNotFoundError(f'Pokemon "{name}" not found') from exc
        return _parse_entry(data)

    async def get_entry_details(self, url: str) -> Entry:
        """GET {url} → Entry."""
        data = await self._get_json(url, what="Pokemon details")
        return _parse_entry(data)

    async def list_evolution_triggers(
        self, limit: int, offset: int
    ) -> ListingPage[EvolutionTrigger]:
        """GET /evolution-trigger?limit=&offset= → ListingPage[EvolutionTrigger]."""
        data = await self._get_json(
            f"{self._base}/evolution-trigger",
            params={"limit": str(limit), "offset": str(offset)},
            what="evolution triggers",
        )
        try:
            triggers = tuple(
                EvolutionTrigger(
                    name=item["name"],
                    url=item["url"],
                    id=item.get("id", _id_or_none(item["url"])),
                )
                for item in data["results"]
            )
            return ListingPage(
                count=int(data["count"]),
                results=triggers,
                next=data.get("next"),
                previous=data.get("previous"),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogTransportError(
                f"Malformed evolution trigger payload: {exc}"
            ) from exc

    async def _get_json(
        self,
        url: str,
        *,
        what: str,
        params: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Perform a GET request with error translation."""
        try:
            resp = await self._client.get(url, headers=self._headers, params=params)
        except httpx.HTTPError as exc:
            raise CatalogTransportError(f"Network error fetching {url}: {exc}") from exc

        if resp.status_code == 200:
            try:
                data = resp.json()
            except ValueError as exc:
                raise CatalogTransportError(
                    f"Failed to fetch {what}: response is not valid JSON"
                ) from exc
            if not isinstance(data, dict):
                raise CatalogTransportError(f"Failed to fetch {what}: unexpected payload")
            return data

        if resp.status_code == 404:
            raise CatalogResourceNotFoundError(f"Failed to fetch {what}: Not Found")

        if resp.status_code == 429:
            raise CatalogRateLimitError(f"Failed to fetch {what}: rate limit exceeded (HTTP 429)")

        raise CatalogTransportError(
            f"Failed to fetch {what}: {resp.status_code} {resp.reason_phrase}",
            status_code=resp.status_code,
        )


# ── Payload parsing ─────────────────────────────────────────────────────────


def _id_or_none(url: str) -> int | None:
    try:
        return extract_id(url)
    except InvalidResourceUrlError:
        return None


def _parse_entry(data: dict[str, Any]) -> Entry:
    try:
        sprites = data.get("sprites") or {}
        artwork = (sprites.get("other") or {}).get("official-artwork") or {}
        return Entry(
            id=int(data["id"]),
            name=data["name"],
            height=int(data.get("height") or 0),
            weight=int(data.get("weight") or 0),
            sprites=Sprites(
                front_default=sprites.get("front_default"),
                official_artwork=artwork.get("front_default"),
            ),
            types=tuple(
                slot["type"]["name"]
                for slot in sorted(data.get("types", []), key=lambda s: s.get("slot", 0))
            ),
            stats=tuple(
                Stat(name=s["stat"]["name"], base_stat=int(s["base_stat"]))
                for s in data.get("stats", [])
            ),
            abilities=tuple(a["ability"]["name"] for a in data.get("abilities", [])),
            moves=tuple(m["move"]["name"] for m in data.get("moves", [])),
        )
    except (KeyError, TypeError, ValueError) as exc:
        logger.debug("Malformed entry payload: %r", data, exc_info=True)
        raise CatalogTransportError(f"Malformed Pokemon payload: {exc}") from exc
