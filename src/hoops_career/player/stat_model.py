"""
Stat Model

Clamping and growth rules for bounded player stats.

``clamp`` is the single primitive every mutation site uses. Skill stats
grow through ``roll_stat_gain``: a tiered diminishing-returns draw where
the chance of any gain shrinks as the stat approaches its ceiling and
professionalism adds a small chance to turn a +1 into a +2.
"""

from dataclasses import dataclass
from typing import Tuple, TYPE_CHECKING

from ..constants import MAX_STAT_VALUE, MIN_STAT_VALUE, STAT_BOUNDS
from ..shared.random_source import RandomSource

if TYPE_CHECKING:
    from .player import PlayerStats


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Bound ``value`` to [minimum, maximum]."""
    return max(minimum, min(value, maximum))


def clamp_stat(stat: str, value: int) -> int:
    """Clamp a value to the declared bounds of ``stat``. Unbounded stats pass through."""
    bounds = STAT_BOUNDS.get(stat)
    if bounds is None:
        return int(value)
    return int(clamp(int(value), bounds[0], bounds[1]))


def apply_stat_delta(stats: 'PlayerStats', stat: str, delta: int) -> int:
    """
    Add an integer delta to ``stat`` in place, clamped to its bounds.

    Returns:
        The change actually applied after clamping
    """
    if not isinstance(delta, int):
        raise TypeError(f"Stat deltas must be integers, got {type(delta).__name__} for {stat}")
    before = stats.get(stat)
    after = clamp_stat(stat, before + delta)
    stats.set(stat, after)
    return after - before


@dataclass(frozen=True)
class GrowthBand:
    """Probability band for stats below ``upper_bound`` (exclusive)."""
    upper_bound: int
    gain_chance: float
    upgrade_scale: float


# Ordered low to high; the last band catches everything up to the ceiling
GROWTH_BANDS: Tuple[GrowthBand, ...] = (
    GrowthBand(upper_bound=40, gain_chance=0.75, upgrade_scale=1.0),
    GrowthBand(upper_bound=60, gain_chance=0.55, upgrade_scale=1.0),
    GrowthBand(upper_bound=75, gain_chance=0.40, upgrade_scale=1.0),
    GrowthBand(upper_bound=90, gain_chance=0.25, upgrade_scale=0.5),
    GrowthBand(upper_bound=MAX_STAT_VALUE + 1, gain_chance=0.15, upgrade_scale=0.0),
)

MIN_UPGRADE_CHANCE = 0.05
MAX_UPGRADE_CHANCE = 0.25
MAX_GAIN_PER_EVENT = 2


def growth_band_for(value: int) -> GrowthBand:
    for band in GROWTH_BANDS:
        if value < band.upper_bound:
            return band
    return GROWTH_BANDS[-1]


def upgrade_chance(professionalism: int) -> float:
    """Chance (5%-25%) to turn a +1 into a +2, scaled by professionalism."""
    span = MAX_STAT_VALUE - MIN_STAT_VALUE
    fraction = clamp((professionalism - MIN_STAT_VALUE) / span, 0.0, 1.0)
    return MIN_UPGRADE_CHANCE + (MAX_UPGRADE_CHANCE - MIN_UPGRADE_CHANCE) * fraction


def roll_stat_gain(current_value: int, professionalism: int, rng: RandomSource) -> int:
    """
    Draw a diminishing-returns gain of 0, 1 or 2.

    Draw order: one draw for the base gain, then one more for the upgrade
    only when a +1 was drawn and the band allows upgrades. A drawn 0 is
    returned as 0.
    """
    band = growth_band_for(current_value)
    if rng.random() >= band.gain_chance:
        return 0

    gain = 1
    if band.upgrade_scale > 0:
        if rng.random() < upgrade_chance(professionalism) * band.upgrade_scale:
            gain = 2
    return min(gain, MAX_GAIN_PER_EVENT)


def grow_stat(stats: 'PlayerStats', stat: str, rng: RandomSource) -> int:
    """
    Roll a diminishing-returns gain for ``stat`` and apply it clamped.

    Returns:
        The change actually applied (0 when nothing was drawn or at the ceiling)
    """
    gain = roll_stat_gain(stats.get(stat), stats.professionalism, rng)
    if gain == 0:
        return 0
    return apply_stat_delta(stats, stat, gain)
