"""
Opponent profile: the incumbent the player is running against.
"""

from decimal import Decimal
from typing import Any, Dict

from balance import GAME_CONSTANTS
from state import OpponentState, OpponentStrategy

OPPONENT_PROFILE: Dict[str, Any] = {
    'id': 'susie-lee',
    'name': 'Susie Lee',
    'short_name': 'Lee',
    'party': 'Democrat',
    'incumbent': True,
    'starting_cash': 1200000,
    'starting_approval': 48,
    'staff_level': 3,
    'strategy': 'establishment',
    'endorsements': ['Culinary Workers Union Local 226', 'Nevada State Democratic Party'],
    # Orgs still open to her during the campaign
    'target_organizations': [
        'AFL-CIO Nevada',
        'Sierra Club',
        'Las Vegas Sun',
        'Clark County Education Association',
    ],
}


def build_opponent(profile: Dict[str, Any] = OPPONENT_PROFILE) -> OpponentState:
    return OpponentState(
        name=profile['name'],
        party=profile['party'],
        cash_on_hand=Decimal(profile['starting_cash']),
        approval_rating=profile['starting_approval'],
        endorsements_secured=list(profile['endorsements']),
        staff_level=profile['staff_level'],
        ad_spending=GAME_CONSTANTS['OPPONENT_STARTING_AD_SPENDING'],
        strategy=OpponentStrategy(profile['strategy']),
    )
