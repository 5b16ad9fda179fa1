"""
Season scheduling: day-by-day slot models, per-tier configuration and the
schedule generator.
"""

from .schedule_models import SlotType, ScheduleSlot, SeasonSchedule
from .config import (
    ScheduleConfig, SCHEDULE_CONFIGS, HIGH_SCHOOL_SCHEDULE, COLLEGE_SCHEDULE,
    PROFESSIONAL_SCHEDULE, get_schedule_config
)
from .schedule_generator import SeasonScheduleGenerator

__all__ = [
    'SlotType',
    'ScheduleSlot',
    'SeasonSchedule',
    'ScheduleConfig',
    'SCHEDULE_CONFIGS',
    'HIGH_SCHOOL_SCHEDULE',
    'COLLEGE_SCHEDULE',
    'PROFESSIONAL_SCHEDULE',
    'get_schedule_config',
    'SeasonScheduleGenerator',
]
