"""
Campaign mechanics: the numeric subsystems a turn is built from.

Each function works on values passed in and returns results; none keeps
state between calls.
"""

from .staff import (
    STAFF_ROLES,
    has_staff,
    get_weekly_staff_cost,
    can_afford_staff,
    is_staff_available,
    get_staff_benefit_description,
    get_margin_of_error,
    get_action_points,
)
from .advertising import AdEffect, compute_ad_effects, calculate_ad_cost, get_ad_cost_per_week, get_ad_reach
from .polling import compute_poll_changes
from .fundraising import FundraisingResult, compute_fundraising, get_online_income_rate
from .gotv import GOTVResult, compute_gotv, is_gotv_available
from .endorsements import (
    EndorsementResult,
    process_endorsements,
    apply_endorsement_effects,
    can_pursue_endorsement,
)
from .momentum import compute_momentum, get_momentum_label
from .election import compute_election_result, compute_post_game_score

__all__ = [
    'STAFF_ROLES',
    'has_staff',
    'get_weekly_staff_cost',
    'can_afford_staff',
    'is_staff_available',
    'get_staff_benefit_description',
    'get_margin_of_error',
    'get_action_points',
    'AdEffect',
    'compute_ad_effects',
    'calculate_ad_cost',
    'get_ad_cost_per_week',
    'get_ad_reach',
    'compute_poll_changes',
    'FundraisingResult',
    'compute_fundraising',
    'get_online_income_rate',
    'GOTVResult',
    'compute_gotv',
    'is_gotv_available',
    'EndorsementResult',
    'process_endorsements',
    'apply_endorsement_effects',
    'can_pursue_endorsement',
    'compute_momentum',
    'get_momentum_label',
    'compute_election_result',
    'compute_post_game_score',
]
