"""Group flat player stat keys into indexed records.

getplayerinfo returns per-entity stats as flat keys such as "awn-1"
(army 1, wins) or "wkl-3" (weapon 3, kills). A key is read as

    <prefix><attr>-<index>

and every attribute sharing an index is merged into one record
{"id": index, attr: value, ...}. Indices need not be contiguous
(maps use ..., 6, 10, 11, 12, 100, ...).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StatKeyPattern:
    """Tokenizer for keys of the form <prefix><attr>-<index>."""

    prefix: str

    def match(self, key: str) -> tuple[int, str] | None:
        """Return (index, attr) if the key belongs to this category."""
        if not key.startswith(self.prefix):
            return None

        attr, sep, index = key[len(self.prefix):].rpartition("-")
        if not sep:
            return None
        if not (attr.isascii() and attr.isalpha()):
            return None
        if not (index.isascii() and index.isdigit()):
            return None
        return int(index), attr


ARMY_STATS = StatKeyPattern("a")
CLASS_STATS = StatKeyPattern("k")
VEHICLE_STATS = StatKeyPattern("v")
WEAPON_STATS = StatKeyPattern("w")
MAP_STATS = StatKeyPattern("m")

PLAYER_STAT_CATEGORIES: dict[str, StatKeyPattern] = {
    "armies": ARMY_STATS,
    "classes": CLASS_STATS,
    "vehicles": VEHICLE_STATS,
    "weapons": WEAPON_STATS,
    "maps": MAP_STATS,
}


def group_by_pattern(
    flat_stats: Mapping[str, str],
    pattern: StatKeyPattern,
) -> list[dict[str, Any]] | None:
    """Merge matching keys into records ordered by ascending index.

    Returns None when no key matches, so callers can tell a missing
    category apart from an empty one.
    """
    grouped: dict[int, dict[str, Any]] = {}
    for key, value in flat_stats.items():
        token = pattern.match(key)
        if token is None:
            continue
        index, attr = token
        if attr == "id":
            # "id" is reserved for the parsed index
            continue
        grouped.setdefault(index, {"id": index})[attr] = value

    if not grouped:
        return None
    return [grouped[index] for index in sorted(grouped)]


def group_player_stats(player: Mapping[str, str]) -> dict[str, list[dict[str, Any]]]:
    """Group all known stat categories; categories without keys are omitted."""
    grouped: dict[str, list[dict[str, Any]]] = {}
    for category, pattern in PLAYER_STAT_CATEGORIES.items():
        records = group_by_pattern(player, pattern)
        if records is not None:
            grouped[category] = records
    return grouped
