"""
League World

Procedurally generated teams for every career tier, grouped the way each
tier organises its league:

- High School: division -> district (4 x 2 districts, 8 teams each)
- College: division -> conference (4 conferences, 8 teams each)
- Professional: conference -> division (2 x 3 divisions, 5 teams each)

The world is a pure function of its random source, so a career only needs
to remember the seed to rebuild the same league after a reload.
"""

import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..constants import GameMode
from ..shared.names import random_name
from ..shared.random_source import (
    RandomSource, choose, create_random_source, random_int, shuffle_in_place
)


logger = logging.getLogger(__name__)


TEAM_PACES = ('Uptempo', 'Balanced', 'Gritty')
OFFENSIVE_FOCUSES = ('Perimeter', 'Interior', 'Balanced')
DEFENSIVE_SCHEMES = ('Man-to-Man', 'Zone', 'Press')
COACH_TRAITS = (
    'Player Developer',
    'Offensive Guru',
    'Defensive Tactician',
    'Recruiting Ace',
    'Motivator',
)

HIGH_SCHOOL_PREFIXES = (
    'Northwood', 'Riverside', 'Lincoln', 'Jefferson', 'Oak Ridge', 'Central',
    'Westview', 'Eastside', 'Lakeside', 'Hillcrest', 'Valley', 'Summit',
    'Madison', 'Franklin', 'Pine Grove', 'Kennedy',
)
HIGH_SCHOOL_MASCOTS = (
    'Eagles', 'Panthers', 'Tigers', 'Wildcats', 'Bulldogs', 'Hornets',
    'Mustangs', 'Falcons', 'Warriors', 'Rams', 'Spartans', 'Knights',
)

COLLEGE_SCHOOLS = (
    'Avalon State', 'Bayside', 'Cedar Falls', 'Crestview Tech', 'Fairhaven',
    'Granite State', 'Harbor City', 'Ironwood', 'Kingsport', 'Lakeshore A&M',
    'Marion', 'New Bristol', 'Northgate', 'Old Dominion Valley', 'Pinecrest',
    'Redwood', 'Saint Albans', 'Silver Creek', 'Southport', 'Stonebridge',
)
COLLEGE_MASCOTS = (
    'Mariners', 'Cougars', 'Hawks', 'Bears', 'Owls', 'Cardinals', 'Huskies', 'Rebels',
)
COLLEGE_CONFERENCES = ('Atlantic Coast', 'Big Plains', 'Pacific Coast', 'Great Lakes')
COLLEGE_DIVISION = 'NCAA Division I'

PRO_CITIES = (
    'Atlanta', 'Baltimore', 'Charlotte', 'Columbus', 'Denver', 'Detroit',
    'Kansas City', 'Las Vegas', 'Louisville', 'Memphis', 'Nashville', 'Omaha',
    'Pittsburgh', 'Portland', 'Sacramento', 'San Diego', 'Seattle', 'St. Louis',
    'Tampa', 'Vancouver', 'Austin', 'Buffalo', 'Hartford', 'Richmond',
    'Raleigh', 'Tulsa', 'Albuquerque', 'Boise', 'Honolulu', 'Anchorage',
)
PRO_NICKNAMES = (
    'Comets', 'Stallions', 'Titans', 'Monarchs', 'Storm', 'Express', 'Outlaws',
    'Vipers', 'Ravens', 'Fury', 'Blaze', 'Pioneers',
)
PRO_DIVISIONS: Dict[str, Tuple[str, ...]] = {
    'Eastern': ('Atlantic', 'Central', 'Southeast'),
    'Western': ('Northwest', 'Pacific', 'Southwest'),
}

HIGH_SCHOOL_DIVISIONS = ('A', 'B', 'C', 'D')
DISTRICTS_PER_DIVISION = 2
TEAMS_PER_DISTRICT = 8
TEAMS_PER_CONFERENCE = 8
TEAMS_PER_PRO_DIVISION = 5


@dataclass(frozen=True)
class Coach:
    name: str
    rating: int
    trait: str


@dataclass(frozen=True)
class RatingProfile:
    """Inclusive (min, max) ranges used when generating a tier's teams."""
    offense: Tuple[int, int]
    defense: Tuple[int, int]
    prestige: Tuple[int, int]
    coach: Tuple[int, int]
    facilities: Tuple[int, int]
    chemistry: Tuple[int, int]
    market_size: str


RATING_PROFILES: Dict[GameMode, RatingProfile] = {
    GameMode.HIGH_SCHOOL: RatingProfile(
        offense=(25, 65), defense=(25, 65), prestige=(10, 50), coach=(30, 70),
        facilities=(20, 60), chemistry=(40, 80), market_size='Small Town',
    ),
    GameMode.COLLEGE: RatingProfile(
        offense=(40, 80), defense=(40, 80), prestige=(20, 80), coach=(40, 80),
        facilities=(40, 85), chemistry=(40, 85), market_size='College Town',
    ),
    GameMode.PROFESSIONAL: RatingProfile(
        offense=(55, 90), defense=(55, 90), prestige=(30, 95), coach=(50, 90),
        facilities=(60, 95), chemistry=(40, 90), market_size='Metropolis',
    ),
}

# League metadata fields each tier needs for scheduling and standings
REQUIRED_LEAGUE_FIELDS: Dict[GameMode, Tuple[str, ...]] = {
    GameMode.HIGH_SCHOOL: ('division', 'district'),
    GameMode.COLLEGE: ('division', 'conference'),
    GameMode.PROFESSIONAL: ('conference', 'division'),
}


@dataclass
class Team:
    """A generated team. ``league`` holds the tier's grouping metadata."""
    team_id: str
    name: str
    game_mode: GameMode
    league: Dict[str, str] = field(default_factory=dict)
    offense_rating: int = 50
    defense_rating: int = 50
    prestige: int = 50
    pace: str = 'Balanced'
    offensive_focus: str = 'Balanced'
    defensive_scheme: str = 'Man-to-Man'
    coach: Optional[Coach] = None
    facilities: int = 50
    team_chemistry: int = 60
    market_size: str = 'Small Town'
    academic_strength: Optional[int] = None

    @property
    def power_rating(self) -> float:
        return (self.offense_rating + self.defense_rating) / 2

    def has_league_metadata(self) -> bool:
        required = REQUIRED_LEAGUE_FIELDS[self.game_mode]
        return all(self.league.get(key) for key in required)

    @property
    def group_key(self) -> Optional[Tuple[str, str]]:
        """
        Tuple identifying the team's closest grouping (district, conference
        or division), or None when metadata is missing.
        """
        if not self.has_league_metadata():
            return None
        return tuple(self.league[key] for key in REQUIRED_LEAGUE_FIELDS[self.game_mode])

    @property
    def group_label(self) -> str:
        if self.game_mode is GameMode.HIGH_SCHOOL:
            return f"Division {self.league.get('division')} {self.league.get('district')}"
        if self.game_mode is GameMode.COLLEGE:
            return f"{self.league.get('conference')} Conference"
        return f"{self.league.get('division')} Division"


@dataclass
class LeagueWorld:
    """All generated teams across the three tiers."""
    teams: List[Team] = field(default_factory=list)
    seed: Optional[int] = None

    def teams_for_mode(self, game_mode: GameMode) -> List[Team]:
        return [team for team in self.teams if team.game_mode is game_mode]

    def find_team(self, team_id: Optional[str]) -> Optional[Team]:
        if team_id is None:
            return None
        for team in self.teams:
            if team.team_id == team_id:
                return team
        return None

    def group_members(self, team: Team) -> List[Team]:
        """Teams sharing ``team``'s grouping, ``team`` included."""
        key = team.group_key
        if key is None:
            return [team]
        return [
            other for other in self.teams
            if other.game_mode is team.game_mode and other.group_key == key
        ]

    @classmethod
    def from_seed(cls, seed: int) -> 'LeagueWorld':
        """Rebuild the same world a career was started with."""
        world = generate_world(create_random_source(seed))
        world.seed = seed
        return world


def _unique_names(rng: RandomSource, prefixes, suffixes, count: int) -> List[str]:
    combos = [f"{prefix} {suffix}" for prefix, suffix in itertools.product(prefixes, suffixes)]
    if count > len(combos):
        raise ValueError(f"Name pool too small: need {count}, have {len(combos)}")
    return shuffle_in_place(rng, combos)[:count]


def _generate_coach(rng: RandomSource, profile: RatingProfile) -> Coach:
    return Coach(
        name=random_name(rng),
        rating=random_int(rng, *profile.coach),
        trait=choose(rng, COACH_TRAITS),
    )


def _generate_team(
    rng: RandomSource,
    team_id: str,
    name: str,
    game_mode: GameMode,
    league: Dict[str, str]
) -> Team:
    profile = RATING_PROFILES[game_mode]
    team = Team(
        team_id=team_id,
        name=name,
        game_mode=game_mode,
        league=dict(league),
        offense_rating=random_int(rng, *profile.offense),
        defense_rating=random_int(rng, *profile.defense),
        prestige=random_int(rng, *profile.prestige),
        pace=choose(rng, TEAM_PACES),
        offensive_focus=choose(rng, OFFENSIVE_FOCUSES),
        defensive_scheme=choose(rng, DEFENSIVE_SCHEMES),
        coach=_generate_coach(rng, profile),
        facilities=random_int(rng, *profile.facilities),
        team_chemistry=random_int(rng, *profile.chemistry),
        market_size=profile.market_size,
    )
    if game_mode is GameMode.COLLEGE:
        team.academic_strength = random_int(rng, 30, 95)
    return team


def generate_high_school_teams(rng: RandomSource) -> List[Team]:
    total = len(HIGH_SCHOOL_DIVISIONS) * DISTRICTS_PER_DIVISION * TEAMS_PER_DISTRICT
    names = iter(_unique_names(rng, HIGH_SCHOOL_PREFIXES, HIGH_SCHOOL_MASCOTS, total))
    teams = []
    for division in HIGH_SCHOOL_DIVISIONS:
        for district_number in range(1, DISTRICTS_PER_DIVISION + 1):
            league = {'division': division, 'district': f"District {district_number}"}
            for index in range(TEAMS_PER_DISTRICT):
                team_id = f"hs-{division}-{district_number}-{index}"
                teams.append(_generate_team(rng, team_id, next(names), GameMode.HIGH_SCHOOL, league))
    return teams


def generate_college_teams(rng: RandomSource) -> List[Team]:
    total = len(COLLEGE_CONFERENCES) * TEAMS_PER_CONFERENCE
    names = iter(_unique_names(rng, COLLEGE_SCHOOLS, COLLEGE_MASCOTS, total))
    teams = []
    for conference_index, conference in enumerate(COLLEGE_CONFERENCES):
        league = {'division': COLLEGE_DIVISION, 'conference': conference}
        for index in range(TEAMS_PER_CONFERENCE):
            team_id = f"col-{conference_index}-{index}"
            teams.append(_generate_team(rng, team_id, next(names), GameMode.COLLEGE, league))
    return teams


def generate_professional_teams(rng: RandomSource) -> List[Team]:
    total = sum(len(divisions) for divisions in PRO_DIVISIONS.values()) * TEAMS_PER_PRO_DIVISION
    names = iter(_unique_names(rng, PRO_CITIES, PRO_NICKNAMES, total))
    teams = []
    for conference, divisions in PRO_DIVISIONS.items():
        for division in divisions:
            league = {'conference': conference, 'division': division}
            for index in range(TEAMS_PER_PRO_DIVISION):
                team_id = f"pro-{conference[0]}-{division}-{index}"
                teams.append(_generate_team(rng, team_id, next(names), GameMode.PROFESSIONAL, league))
    return teams


def generate_world(rng: RandomSource) -> LeagueWorld:
    """
    Generate every tier's teams.

    Draw order is High School, then College, then Professional, so the same
    random source always yields the same world.
    """
    teams = generate_high_school_teams(rng)
    teams.extend(generate_college_teams(rng))
    teams.extend(generate_professional_teams(rng))
    logger.debug(f"Generated league world with {len(teams)} teams")
    return LeagueWorld(teams=teams)
