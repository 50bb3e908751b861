"""
Fundraising: small donors, large donors, PAC money and passive online income.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Sequence

from balance import GAME_CONSTANTS
from random_utils import SeededRandom
from state import to_money

from .staff import DIGITAL_DIRECTOR, FINANCE_DIRECTOR, has_staff


@dataclass
class FundraisingResult:
    small_donors: Decimal = field(default_factory=lambda: Decimal('0'))
    large_donors: Decimal = field(default_factory=lambda: Decimal('0'))
    pac_money: Decimal = field(default_factory=lambda: Decimal('0'))
    online_income: Decimal = field(default_factory=lambda: Decimal('0'))
    endorsement_income: Decimal = field(default_factory=lambda: Decimal('0'))
    email_list_growth: int = 0

    @property
    def total_raised(self) -> Decimal:
        return self.action_income + self.passive_income

    @property
    def passive_income(self) -> Decimal:
        return self.online_income + self.endorsement_income

    @property
    def action_income(self) -> Decimal:
        """Everything except passive online and endorsement income."""
        return self.small_donors + self.large_donors + self.pac_money


def large_donor_multiplier(large_donors_total) -> float:
    """ratio ** (cumulative large-donor money / saturation unit); shrinks as donors tap out."""
    exponent = float(large_donors_total) / GAME_CONSTANTS['LARGE_DONOR_SATURATION_UNIT']
    return GAME_CONSTANTS['LARGE_DONOR_DIMINISHING_FACTOR'] ** exponent


def get_pac_share(endorsements_secured: int) -> float:
    """Fraction of PAC_MONEY_BASE unlocked by the secured-endorsement count."""
    if endorsements_secured < GAME_CONSTANTS['PAC_MIN_ENDORSEMENTS']:
        return 0.0
    cap = GAME_CONSTANTS['PAC_MAX_ENDORSEMENTS']
    return min(endorsements_secured, cap) / cap


def get_online_income_rate(email_list_size: int) -> Decimal:
    """Weekly passive rate implied by the size of the email list."""
    extra = max(0, email_list_size - GAME_CONSTANTS['STARTING_EMAIL_LIST'])
    rate = GAME_CONSTANTS['ONLINE_INCOME_BASE_RATE'] + extra / 1000 * GAME_CONSTANTS['ONLINE_INCOME_PER_1000_EMAILS']
    return to_money(rate)


def compute_fundraising(finances, actions: Sequence, staff: Sequence, momentum: float,
                        turn: int, rng: SeededRandom, endorsements_secured: int = 0,
                        endorsement_bonus=0) -> FundraisingResult:
    """
    Compute this week's income.

    Each fundraise action draws one noise factor shared by its small- and
    large-donor amounts. PAC money needs both a fundraise action and at
    least PAC_MIN_ENDORSEMENTS secured endorsements. Online income and the
    weekly endorsement_bonus of secured endorsements arrive whatever the
    player does.
    """
    fundraise_actions = [a for a in actions if a.type == 'fundraise']
    director_bonus = 1 + GAME_CONSTANTS['FINANCE_DIRECTOR_BONUS'] if has_staff(staff, FINANCE_DIRECTOR) else 1
    momentum_bonus = 1 + momentum * GAME_CONSTANTS['FUNDRAISING_MOMENTUM_FACTOR']
    saturation = large_donor_multiplier(finances.large_donors)

    small = 0.0
    large = 0.0
    for action in fundraise_actions:
        noise = rng.next_float(GAME_CONSTANTS['FUNDRAISING_NOISE_MIN'], GAME_CONSTANTS['FUNDRAISING_NOISE_MAX'])
        small += GAME_CONSTANTS['SMALL_DONOR_BASE'] * action.intensity * director_bonus * momentum_bonus * noise
        large += GAME_CONSTANTS['LARGE_DONOR_BASE'] * action.intensity * director_bonus * saturation * noise

    pac = 0.0
    if fundraise_actions:
        pac = GAME_CONSTANTS['PAC_MONEY_BASE'] * get_pac_share(endorsements_secured)

    online = float(finances.online_income_rate)
    if has_staff(staff, DIGITAL_DIRECTOR):
        online *= 1 + GAME_CONSTANTS['DIGITAL_DIRECTOR_ONLINE_BONUS']
    online *= 1 + momentum * GAME_CONSTANTS['ONLINE_MOMENTUM_FACTOR']

    return FundraisingResult(
        small_donors=to_money(small),
        large_donors=to_money(large),
        pac_money=to_money(pac),
        online_income=to_money(max(0.0, online)),
        endorsement_income=to_money(endorsement_bonus),
        email_list_growth=len(fundraise_actions) * GAME_CONSTANTS['EMAIL_LIST_GROWTH_PER_FUNDRAISE'],
    )
