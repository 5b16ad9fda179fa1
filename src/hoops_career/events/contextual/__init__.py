"""
Contextual event pools by tier.
"""

from .high_school import HIGH_SCHOOL_POOLS
from .college import COLLEGE_POOLS
from .professional import PROFESSIONAL_POOLS

ALL_CONTEXTUAL_POOLS = HIGH_SCHOOL_POOLS + COLLEGE_POOLS + PROFESSIONAL_POOLS

__all__ = [
    'HIGH_SCHOOL_POOLS',
    'COLLEGE_POOLS',
    'PROFESSIONAL_POOLS',
    'ALL_CONTEXTUAL_POOLS',
]
