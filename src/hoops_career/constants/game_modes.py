"""
Game Modes and Role Ladders

Career tiers a player moves through (High School → College → Professional)
and the fixed, ordered role ladder inside each tier. Index 0 of every ladder
is the entry role for that tier.
"""

from enum import Enum
from typing import Dict, List, Tuple


class GameMode(Enum):
    """Career tier. Strictly ordered; a career never moves backward."""
    HIGH_SCHOOL = "High School"
    COLLEGE = "College"
    PROFESSIONAL = "Professional"

    @property
    def order(self) -> int:
        return GAME_MODE_ORDER.index(self)

    def next_mode(self) -> "GameMode":
        """Following tier; Professional is terminal and returns itself."""
        position = self.order
        if position + 1 >= len(GAME_MODE_ORDER):
            return self
        return GAME_MODE_ORDER[position + 1]


GAME_MODE_ORDER: Tuple[GameMode, ...] = (
    GameMode.HIGH_SCHOOL,
    GameMode.COLLEGE,
    GameMode.PROFESSIONAL,
)


HIGH_SCHOOL_ROLES: Tuple[str, ...] = (
    'Freshman Newcomer',
    'Sophomore Contender',
    'Junior Varsity Player',
    'Varsity Rotation',
    'Varsity Starter',
    'Team Captain',
    'District Star',
    'All-State Contender',
    'All-American Prospect',
)

COLLEGE_ROLES: Tuple[str, ...] = (
    'Walk-On Hopeful',
    'Practice Squad Player',
    'Bench Warmer',
    'End of Bench Specialist',
    'Rotation Player',
    'Key Substitute (6th Man)',
    'Starter',
    'Conference Star',
    'All-American Candidate',
    'Top Draft Prospect',
)

PROFESSIONAL_ROLES: Tuple[str, ...] = (
    'Undrafted Free Agent',
    'G-League Assignee',
    'Two-Way Contract Player',
    'End of Bench Pro',
    'Rotation Contributor',
    'Valuable Sixth Man',
    'Starting Caliber Player',
    'Established Star',
    'All-Star Level Player',
    'All-League Performer',
    'MVP Candidate',
)

ROLES_BY_MODE: Dict[GameMode, Tuple[str, ...]] = {
    GameMode.HIGH_SCHOOL: HIGH_SCHOOL_ROLES,
    GameMode.COLLEGE: COLLEGE_ROLES,
    GameMode.PROFESSIONAL: PROFESSIONAL_ROLES,
}

# Seasons spent in a tier before graduating out of it
HIGH_SCHOOL_MAX_SEASONS = 4
COLLEGE_MAX_SEASONS = 4
COLLEGE_GRADUATION_AGE = 22

STARTING_AGE = 14

POSITIONS: List[str] = [
    'Point Guard',
    'Shooting Guard',
    'Small Forward',
    'Power Forward',
    'Center',
]


def get_roles_for_mode(game_mode: GameMode) -> Tuple[str, ...]:
    """Ordered role ladder for a tier."""
    return ROLES_BY_MODE[game_mode]


def get_entry_role(game_mode: GameMode) -> str:
    """Lowest role of a tier."""
    return ROLES_BY_MODE[game_mode][0]


def get_role_index(game_mode: GameMode, role: str) -> int:
    """
    Index of ``role`` within the tier's ladder.

    Unknown roles (e.g. a role carried over from a previous tier) map to 0.
    """
    roles = ROLES_BY_MODE[game_mode]
    if role in roles:
        return roles.index(role)
    return 0
