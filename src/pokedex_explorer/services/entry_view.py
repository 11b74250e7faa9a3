"""Display values derived from an entry (unit conversion, labels)."""

from __future__ import annotations

from dataclasses import dataclass

from pokedex_explorer.domain.entities import Entry

MAX_BASE_STAT = 255
FEATURED_MOVES = 5

STAT_LABELS: dict[str, str] = {
    "hp": "HP",
    "attack": "Attack",
    "defense": "Defense",
    "special-attack": "Sp. Attack",
    "special-defense": "Sp. Defense",
    "speed": "Speed",
}


@dataclass(frozen=True, slots=True)
class StatView:
    name: str
    label: str
    base_stat: int
    percent: float


@dataclass(frozen=True, slots=True)
class EntryView:
    """Everything the detail overlay shows for one entry."""

    id: int
    name: str
    artwork_url: str | None
    types: list[str]
    height_m: float
    weight_kg: float
    stats: list[StatView]
    abilities: list[str]
    moves: list[str]


def humanize(name: str) -> str:
    """``"special-attack"`` → ``"special attack"``."""
    return name.replace("-", " ")


def stat_label(name: str) -> str:
    return STAT_LABELS.get(name, name)


def build_entry_view(entry: Entry) -> EntryView:
    return EntryView(
        id=entry.id,
        name=entry.name,
        artwork_url=entry.sprites.official_artwork or entry.sprites.front_default,
        types=list(entry.types),
        height_m=entry.height / 10,
        weight_kg=entry.weight / 10,
        stats=[
            StatView(
                name=stat.name,
                label=stat_label(stat.name),
                base_stat=stat.base_stat,
                percent=round(stat.base_stat / MAX_BASE_STAT * 100, 1),
            )
            for stat in entry.stats
        ],
        abilities=[humanize(a) for a in entry.abilities],
        moves=[humanize(m) for m in entry.moves[:FEATURED_MOVES]],
    )
