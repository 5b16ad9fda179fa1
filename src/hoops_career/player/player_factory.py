"""
Player Factory

Creates the starting player for a new run. Legacy (meta) points from earlier
careers raise the base of the three skill stats and seed ``skill_points``.
"""

import logging
from typing import Optional

from ..constants import (
    GameMode, MAX_STAT_VALUE, MIN_STAT_VALUE, POSITIONS, SKILL_STATS, STARTING_AGE,
    get_entry_role
)
from ..scheduling.schedule_generator import SeasonScheduleGenerator
from ..shared.names import random_name
from ..shared.random_source import RandomSource, choose, random_int
from ..simulation.simulation_exceptions import ScheduleGenerationException
from ..team_management.teams import LeagueWorld, Team
from .player import Player, PlayerStats
from .stat_model import clamp
from .traits import TRAIT_DEFINITIONS, grant_trait


logger = logging.getLogger(__name__)


BASE_SKILL_VALUE = 30
SKILL_JITTER = (-10, 9)
CAREER_STAT_RANGE = (30, 49)
STARTING_ENERGY = 80
STARTING_MORALE = 70
CAREER_START_MESSAGE = 'Your career begins!'


def starting_skill_base(meta_skill_points: int) -> int:
    return BASE_SKILL_VALUE + max(0, meta_skill_points) // 2


def assign_random_team(player: Player, world: LeagueWorld, rng: RandomSource) -> Team:
    """
    Put ``player`` on a random team of their current tier.

    Raises:
        ScheduleGenerationException: If the tier has no teams
    """
    candidates = world.teams_for_mode(player.game_mode)
    if not candidates:
        raise ScheduleGenerationException(
            f"No {player.game_mode.value} teams in league",
            context={"game_mode": player.game_mode.value},
        )
    team = choose(rng, candidates)
    player.team_id = team.team_id
    player.team_name = team.name
    return team


def create_initial_player(
    meta_skill_points: int,
    world: LeagueWorld,
    rng: RandomSource,
    name: Optional[str] = None,
    position: Optional[str] = None,
    world_seed: int = 0
) -> Player:
    """
    Build a fresh High School freshman.

    Args:
        meta_skill_points: Legacy points carried over from earlier careers
        world: League the player's team is drawn from
        rng: Random source
        name / position: Fixed identity instead of random draws
        world_seed: Seed ``world`` was generated from, stored for reloads

    Returns:
        Player with a team, one starting trait and a generated first schedule
    """
    name = name or random_name(rng)
    position = position or choose(rng, POSITIONS)

    base = starting_skill_base(meta_skill_points)
    skills = {
        stat: int(clamp(base + random_int(rng, *SKILL_JITTER), MIN_STAT_VALUE, MAX_STAT_VALUE))
        for stat in SKILL_STATS
    }
    stats = PlayerStats(
        charisma=random_int(rng, *CAREER_STAT_RANGE),
        professionalism=random_int(rng, *CAREER_STAT_RANGE),
        energy=STARTING_ENERGY,
        morale=STARTING_MORALE,
        skill_points=meta_skill_points,
        **skills,
    )

    player = Player(
        name=name,
        position=position,
        age=STARTING_AGE,
        game_mode=GameMode.HIGH_SCHOOL,
        current_role=get_entry_role(GameMode.HIGH_SCHOOL),
        stats=stats,
        career_log=[CAREER_START_MESSAGE],
        world_seed=world_seed,
    )

    trait_name = choose(rng, sorted(TRAIT_DEFINITIONS))
    grant_trait(player, trait_name)

    assign_random_team(player, world, rng)
    player.schedule = SeasonScheduleGenerator(world).generate(player.current_season, player.team_id, rng)

    logger.info(
        f"Created player {player.name} ({player.position}) on {player.team_name} "
        f"with trait '{trait_name}' and {meta_skill_points} legacy points"
    )
    return player
