"""
Read-only campaign content for NV-03.

District demographics, staff roster, endorsement catalog and the
opponent profile. The engine copies these into each new game.
"""

from .district import DISTRICT, DEMOGRAPHICS, CAMPAIGN_LOCATIONS, DemographicProfile
from .staff import STAFF_ROSTER, StaffProfile, build_staff
from .endorsements import ENDORSEMENT_CATALOG, build_endorsements
from .opponents import OPPONENT_PROFILE, build_opponent

__all__ = [
    'DISTRICT',
    'DEMOGRAPHICS',
    'CAMPAIGN_LOCATIONS',
    'DemographicProfile',
    'STAFF_ROSTER',
    'StaffProfile',
    'build_staff',
    'ENDORSEMENT_CATALOG',
    'build_endorsements',
    'OPPONENT_PROFILE',
    'build_opponent',
]
