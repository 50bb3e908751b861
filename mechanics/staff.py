"""
Staff eligibility and bonuses.

Every lookup is total: an unknown or unhired role simply confers nothing.
"""

from decimal import Decimal
from typing import Sequence

from balance import GAME_CONSTANTS

CAMPAIGN_MANAGER = 'campaign-manager'
FIELD_DIRECTOR = 'field-director'
COMMS_DIRECTOR = 'comms-director'
FINANCE_DIRECTOR = 'finance-director'
DIGITAL_DIRECTOR = 'digital-director'
POLLSTER = 'pollster'

STAFF_ROLES = (CAMPAIGN_MANAGER, FIELD_DIRECTOR, COMMS_DIRECTOR,
               FINANCE_DIRECTOR, DIGITAL_DIRECTOR, POLLSTER)

STAFF_BENEFITS = {
    CAMPAIGN_MANAGER: '+1 Action Point per turn',
    FIELD_DIRECTOR: 'GOTV effectiveness +40%',
    COMMS_DIRECTOR: 'Ad effectiveness +25%',
    FINANCE_DIRECTOR: 'Fundraising income +30%',
    DIGITAL_DIRECTOR: 'Digital ads +35%, online fundraising +20%',
    POLLSTER: 'Poll margin of error reduced to ±1.5%',
}


def has_staff(staff: Sequence, role: str) -> bool:
    """True if a member with this role is on the payroll."""
    return any(s.role == role and s.hired for s in staff)


def get_weekly_staff_cost(staff: Sequence) -> Decimal:
    return Decimal(sum(s.cost for s in staff if s.hired))


def can_afford_staff(role: str, staff: Sequence, finances) -> bool:
    """Hiring needs cash for STAFF_AFFORDABILITY_WEEKS of salary up front."""
    member = next((s for s in staff if s.role == role and not s.hired), None)
    if member is None:
        return False
    weeks = GAME_CONSTANTS['STAFF_AFFORDABILITY_WEEKS']
    return finances.cash_on_hand >= member.cost * weeks


def is_staff_available(member, current_turn: int) -> bool:
    return current_turn >= member.available_turn and not member.hired


def get_staff_benefit_description(role: str) -> str:
    return STAFF_BENEFITS.get(role, '')


def get_margin_of_error(staff: Sequence) -> float:
    if has_staff(staff, POLLSTER):
        return GAME_CONSTANTS['POLLSTER_MARGIN_OF_ERROR']
    return GAME_CONSTANTS['BASE_MARGIN_OF_ERROR']


def get_action_points(staff: Sequence) -> int:
    """Weekly AP budget: the base plus the campaign manager's bonus."""
    points = GAME_CONSTANTS['BASE_ACTION_POINTS']
    if has_staff(staff, CAMPAIGN_MANAGER):
        points += GAME_CONSTANTS['CAMPAIGN_MANAGER_BONUS_AP']
    return points
