"""
Staff roster - the six specialists a campaign can hire.

Each role has a fixed weekly salary, a single mechanical bonus (see
mechanics.staff) and a first turn at which they will sign on.
"""

from dataclasses import dataclass
from typing import Dict, List

from state import StaffMember


@dataclass
class StaffProfile:
    """Hiring-board entry for one specialist."""

    staff_id: str
    role: str
    name: str
    cost: int
    available_turn: int
    background: str

    def to_member(self) -> StaffMember:
        """Fresh, unhired StaffMember for a new campaign."""
        return StaffMember(
            id=self.staff_id,
            role=self.role,
            name=self.name,
            cost=self.cost,
            description=self.background,
            available_turn=self.available_turn,
        )


STAFF_ROSTER: Dict[str, StaffProfile] = {

    'campaign-manager': StaffProfile(
        staff_id='staff-cm',
        role='campaign-manager',
        name='Dana Whitfield',
        cost=8000,
        available_turn=1,
        background='Ran two successful statewide races; keeps the whole operation on schedule.',
    ),

    'field-director': StaffProfile(
        staff_id='staff-fd',
        role='field-director',
        name='Marco Alvarez',
        cost=6000,
        available_turn=5,
        background='Built the door-knocking program that flipped Henderson in the last midterm.',
    ),

    'comms-director': StaffProfile(
        staff_id='staff-comms',
        role='comms-director',
        name='Priya Natarajan',
        cost=7000,
        available_turn=1,
        background='Former Review-Journal political reporter with every local producer on speed dial.',
    ),

    'finance-director': StaffProfile(
        staff_id='staff-finance',
        role='finance-director',
        name='Greg Hollister',
        cost=6500,
        available_turn=1,
        background='Knows every major donor between Summerlin and Lake Las Vegas.',
    ),

    'digital-director': StaffProfile(
        staff_id='staff-digital',
        role='digital-director',
        name='Kim Tran',
        cost=5500,
        available_turn=3,
        background='Runs targeted digital programs and grows email lists that actually give.',
    ),

    'pollster': StaffProfile(
        staff_id='staff-pollster',
        role='pollster',
        name='Alan Fischer',
        cost=5000,
        available_turn=8,
        background='Tracking polls with a margin of error you can actually plan around.',
    ),
}


def build_staff() -> List[StaffMember]:
    return [profile.to_member() for profile in STAFF_ROSTER.values()]
