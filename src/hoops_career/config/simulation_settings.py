"""
Centralized Simulation Settings

Toggles and tunables for the career engine. Change these to rebalance the
simulation or to speed it up for testing.
"""


class SimulationSettings:
    """
    Career engine controls.

    Values are class attributes so tests can patch them with
    ``monkeypatch.setattr(SimulationSettings, ...)``.
    """

    # ================================================================
    # TURN FLOW
    # ================================================================

    AUTOMATE_PRACTICE_DAYS = True
    # True:  Days with no event resolve as automated practice (no input)
    # False: Days with no event surface the interactive daily-choice event

    CONTEXTUAL_EVENT_CHANCE = 0.25
    # Chance that an eligible contextual pool produces an event on a given day

    INJURY_CHANCE = 0.10
    INJURY_ENERGY_THRESHOLD = 30
    # Injury rolls only happen while energy is below the threshold

    GAME_DAY_INTERVAL = 7
    # Fallback game cadence for days with no schedule slot

    AGENT_MEETING_INTERVAL = 30
    AGENT_MIN_COLLEGE_SEASON = 3

    MID_SEASON_REVIEW_INTERVAL = 30
    # In-season promotion check every N days of the season

    # ================================================================
    # TERMINAL CONDITIONS
    # ================================================================

    BURNOUT_RETIREMENT_CHANCE = 0.20
    RETIREMENT_AGE_THRESHOLD = 38
    RETIREMENT_CHANCE_PER_YEAR = 0.10

    # ================================================================
    # PRACTICE / ENERGY
    # ================================================================

    PRACTICE_ENERGY_COST = (15, 24)
    # Share of the post-practice energy deficit recovered the same day
    PRACTICE_RECOVERY_RATE = 0.4
    PROFESSIONALISM_RECOVERY_THRESHOLD = 70
    PROFESSIONALISM_RECOVERY_BONUS = 5

    PLAYED_HARD_ENERGY_THRESHOLD = 60

    # ================================================================
    # META PROGRESSION
    # ================================================================

    META_POINTS_PER_WEEK = 2.5
    DAYS_PER_WEEK = 7
