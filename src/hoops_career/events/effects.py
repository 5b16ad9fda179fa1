"""
Stat change helpers shared by event actions.

``apply_changes`` applies a list of integer deltas through the clamping
primitive and renders the familiar "Shooting +1, Energy -20." suffix from
what was actually applied.
"""

from typing import Iterable, List, Tuple, TYPE_CHECKING

from ..constants import STAT_LABELS
from ..player.stat_model import apply_stat_delta, grow_stat
from ..shared.random_source import RandomSource

if TYPE_CHECKING:
    from ..player.player import Player


def format_change(stat: str, delta: int) -> str:
    sign = '+' if delta >= 0 else '-'
    return f"{STAT_LABELS.get(stat, stat)} {sign}{abs(delta)}"


def format_changes(changes: Iterable[Tuple[str, int]]) -> str:
    parts = [format_change(stat, delta) for stat, delta in changes if delta != 0]
    return f"{', '.join(parts)}." if parts else ''


def apply_changes(player: 'Player', changes: Iterable[Tuple[str, int]]) -> str:
    """
    Apply requested deltas in order and describe the requested changes.

    Messages report the requested delta, matching how outcomes are phrased
    to the player; the stored value is still clamped.
    """
    applied: List[Tuple[str, int]] = []
    for stat, delta in changes:
        apply_stat_delta(player.stats, stat, delta)
        applied.append((stat, delta))
    return format_changes(applied)


def train_stat(player: 'Player', stat: str, rng: RandomSource) -> int:
    """Diminishing-returns growth roll for ``stat``; returns the gain applied."""
    return grow_stat(player.stats, stat, rng)


def join_message(*parts: str) -> str:
    return ' '.join(part for part in parts if part)
