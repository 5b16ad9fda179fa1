"""
Player Traits

Static catalog of acquired qualifiers. Each trait has an ordered list of
levels; a player holds a mapping of trait name -> level. The catalog is built
once at import time and exposed as a read-only mapping.

Effects:
- stat_boost: applied once when the trait is granted (clamped)
- performance_multiplier: scales points, rebounds or assists in a game
- win_chance_bonus: added to the team win probability
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, TYPE_CHECKING

from .stat_model import apply_stat_delta

if TYPE_CHECKING:
    from .player import Player


class TraitCategory(Enum):
    GAME_PERFORMANCE = "GAME_PERFORMANCE"
    STAT_BOOST = "STAT_BOOST"
    CAREER_PROGRESSION = "CAREER_PROGRESSION"


@dataclass(frozen=True)
class TraitEffects:
    """Numeric effect of one trait level. Unset fields are neutral."""
    stat_boost: Optional[Tuple[str, int]] = None
    performance_multipliers: Tuple[Tuple[str, float], ...] = ()
    win_chance_bonus: float = 0.0


@dataclass(frozen=True)
class TraitLevel:
    level: int
    description: str
    effects: TraitEffects = field(default_factory=TraitEffects)


@dataclass(frozen=True)
class TraitDefinition:
    name: str
    category: TraitCategory
    levels: Tuple[TraitLevel, ...]

    @property
    def max_level(self) -> int:
        return len(self.levels)

    def level_definition(self, level: int) -> TraitLevel:
        """Definition for ``level``, capped to the highest defined level."""
        if level < 1:
            raise ValueError(f"Trait level must be >= 1, got {level}")
        return self.levels[min(level, self.max_level) - 1]


def _trait(name: str, category: TraitCategory, *levels: TraitLevel) -> Tuple[str, TraitDefinition]:
    return name, TraitDefinition(name=name, category=category, levels=tuple(levels))


def _points(multiplier: float) -> Tuple[Tuple[str, float], ...]:
    return (('points', multiplier),)


def _rebounds(multiplier: float) -> Tuple[Tuple[str, float], ...]:
    return (('rebounds', multiplier),)


def _assists(multiplier: float) -> Tuple[Tuple[str, float], ...]:
    return (('assists', multiplier),)


_GP = TraitCategory.GAME_PERFORMANCE
_SB = TraitCategory.STAT_BOOST
_CP = TraitCategory.CAREER_PROGRESSION


TRAIT_DEFINITIONS: Mapping[str, TraitDefinition] = MappingProxyType(dict([
    _trait("Coach's Son", _SB,
           TraitLevel(1, 'Starts with a significant boost to Basketball IQ.',
                      TraitEffects(stat_boost=('basketball_iq', 10)))),
    _trait('Gym Rat', _GP,
           TraitLevel(1, 'Slightly improves all in-game actions.', TraitEffects(win_chance_bonus=0.02)),
           TraitLevel(2, 'Improves all in-game actions.', TraitEffects(win_chance_bonus=0.04)),
           TraitLevel(3, 'Greatly improves all in-game actions.', TraitEffects(win_chance_bonus=0.06))),
    _trait('Floor Raiser', _GP,
           TraitLevel(1, 'Boosts assist generation.',
                      TraitEffects(performance_multipliers=_assists(1.1))),
           TraitLevel(2, 'Significantly boosts assist generation.',
                      TraitEffects(performance_multipliers=_assists(1.15), win_chance_bonus=0.03)),
           TraitLevel(3, 'Greatly boosts assists and improves team win chance.',
                      TraitEffects(performance_multipliers=_assists(1.2), win_chance_bonus=0.05))),
    _trait('Sniper', _GP,
           TraitLevel(1, 'A deadly shooter who gets a boost to scoring.',
                      TraitEffects(performance_multipliers=_points(1.08))),
           TraitLevel(2, 'A lethal shooter who gets a significant boost to scoring.',
                      TraitEffects(performance_multipliers=_points(1.12))),
           TraitLevel(3, 'One of the best shooters alive, with a massive boost to scoring.',
                      TraitEffects(performance_multipliers=_points(1.16)))),
    _trait('Rim Runner', _GP,
           TraitLevel(1, 'Excels at scoring near the basket.',
                      TraitEffects(performance_multipliers=_points(1.05))),
           TraitLevel(2, 'A powerful force driving to the hoop.',
                      TraitEffects(performance_multipliers=_points(1.1)))),
    _trait('Shot Blocker', _GP,
           TraitLevel(1, 'A solid defensive presence.', TraitEffects(win_chance_bonus=0.03)),
           TraitLevel(2, 'A dominant defensive anchor.',
                      TraitEffects(performance_multipliers=_rebounds(1.05), win_chance_bonus=0.06))),
    _trait('Microwave', _GP,
           TraitLevel(1, 'Can get hot in an instant, providing a small boost to scoring.',
                      TraitEffects(performance_multipliers=_points(1.05)))),
    _trait('Clutch Gene', _GP,
           TraitLevel(1, 'Performs better in big moments.', TraitEffects(win_chance_bonus=0.05))),
    _trait('Post Scorer', _GP,
           TraitLevel(1, 'Effective at scoring with their back to the basket.',
                      TraitEffects(performance_multipliers=_points(1.07)))),
    _trait('Slasher', _GP,
           TraitLevel(1, 'Gets a bonus to scoring by driving to the hoop.',
                      TraitEffects(performance_multipliers=_points(1.06)))),
    _trait('Dimer', _GP,
           TraitLevel(1, 'A gifted passer with a higher ceiling for assist totals.',
                      TraitEffects(performance_multipliers=_assists(1.1)))),
    _trait('Pick & Roll Maestro', _GP,
           TraitLevel(1, 'Thrives in the two-man game.',
                      TraitEffects(performance_multipliers=_assists(1.05), win_chance_bonus=0.02))),
    _trait('Perimeter Lockdown', _GP,
           TraitLevel(1, 'An elite on-ball defender who makes it tough on opposing scorers.',
                      TraitEffects(win_chance_bonus=0.04))),
    _trait('Pick Pocket', _GP,
           TraitLevel(1, 'Adept at creating turnovers.', TraitEffects(win_chance_bonus=0.02))),
    _trait('Defensive Anchor', _GP,
           TraitLevel(1, 'The cornerstone of the defense.', TraitEffects(win_chance_bonus=0.05))),
    _trait('Rebound Chaser', _GP,
           TraitLevel(1, 'Has a nose for the ball, boosting rebound numbers.',
                      TraitEffects(performance_multipliers=_rebounds(1.15)))),
    _trait('Second Wind', _GP,
           TraitLevel(1, 'Seems to get stronger as the game goes on.', TraitEffects(win_chance_bonus=0.03))),
    _trait('Iron Man', _SB,
           TraitLevel(1, 'Extremely durable, starts every career fresh.',
                      TraitEffects(stat_boost=('energy', 15)))),
    _trait('High Motor', _SB,
           TraitLevel(1, 'A tireless player who gives maximum effort.',
                      TraitEffects(stat_boost=('energy', 5)))),
    _trait('Natural Athlete', _SB,
           TraitLevel(1, 'Gifted with a high level of raw athleticism.',
                      TraitEffects(stat_boost=('athleticism', 8)))),
    _trait('Glass Cannon', _SB,
           TraitLevel(1, 'An offensive force who lives and dies by the jumper.',
                      TraitEffects(stat_boost=('shooting', 10)))),
    _trait('Steady Hand', _CP,
           TraitLevel(1, 'Less prone to negative outcomes from high-pressure events.')),
    _trait('Team Leader', _CP,
           TraitLevel(1, 'The vocal leader of the team.')),
    _trait('Media Darling', _CP,
           TraitLevel(1, 'Handles the media with ease, gaining extra charisma.',
                      TraitEffects(stat_boost=('charisma', 10)))),
    _trait('Late Bloomer', _CP,
           TraitLevel(1, 'Slower initial progression, but unlocks higher potential later.')),
    _trait('Student of the Game', _CP,
           TraitLevel(1, 'Gains Basketball IQ slightly faster.')),
]))


def get_trait_definition(name: str) -> TraitDefinition:
    """
    Raises:
        KeyError: If the trait is not in the catalog
    """
    return TRAIT_DEFINITIONS[name]


def get_active_effects(traits: Mapping[str, int]) -> Tuple[TraitEffects, ...]:
    """Effects of every known trait the player holds; unknown names are ignored."""
    effects = []
    for name, level in traits.items():
        definition = TRAIT_DEFINITIONS.get(name)
        if definition is None or level < 1:
            continue
        effects.append(definition.level_definition(level).effects)
    return tuple(effects)


def get_performance_multipliers(traits: Mapping[str, int]) -> Dict[str, float]:
    """
    Combined point/rebound/assist multipliers from GAME_PERFORMANCE traits.

    Neutral (1.0 each) for a player with no traits.
    """
    multipliers = {'points': 1.0, 'rebounds': 1.0, 'assists': 1.0}
    for effects in get_active_effects(traits):
        for stat, multiplier in effects.performance_multipliers:
            multipliers[stat] *= multiplier
    return multipliers


def get_win_chance_bonus(traits: Mapping[str, int]) -> float:
    return sum(effects.win_chance_bonus for effects in get_active_effects(traits))


def grant_trait(player: 'Player', name: str, level: int = 1) -> bool:
    """
    Give ``player`` a trait, or raise it to ``level`` if already held.

    A stat boost is applied only the first time a trait is granted.

    Returns:
        True if the player's traits changed
    """
    definition = get_trait_definition(name)
    level = min(level, definition.max_level)
    current = player.traits.get(name)
    if current is not None and current >= level:
        return False

    player.traits[name] = level
    if current is None:
        boost = definition.level_definition(level).effects.stat_boost
        if boost is not None:
            stat, value = boost
            apply_stat_delta(player.stats, stat, value)
    return True
