"""
Get-out-the-vote investment.

The turnout bonus reported here is a preview; the election recomputes
the real effect from the cumulative investment.
"""

from dataclasses import dataclass
from typing import Sequence

from balance import GAME_CONSTANTS, GOTV_AVAILABLE_TURN

from .staff import FIELD_DIRECTOR, has_staff


@dataclass
class GOTVResult:
    investment_added: float
    total_investment: float
    estimated_turnout_bonus: float


def is_gotv_available(current_turn: int) -> bool:
    return current_turn >= GOTV_AVAILABLE_TURN


def get_gotv_turnout_bonus(investment: float) -> float:
    """Turnout bonus points bought by a cumulative investment, capped."""
    raw = investment / GAME_CONSTANTS['GOTV_INVESTMENT_UNIT'] * GAME_CONSTANTS['GOTV_TURNOUT_MULTIPLIER']
    return min(raw, GAME_CONSTANTS['GOTV_FINAL_EFFECT_MAX'])


def compute_gotv(current_investment: float, actions: Sequence, staff: Sequence, turn: int) -> GOTVResult:
    if not is_gotv_available(turn):
        return GOTVResult(0.0, 0.0, 0.0)

    bonus = 1 + GAME_CONSTANTS['FIELD_DIRECTOR_GOTV_BONUS'] if has_staff(staff, FIELD_DIRECTOR) else 1
    added = sum(GAME_CONSTANTS['GOTV_BASE_INVESTMENT'] * a.intensity * bonus
                for a in actions if a.type == 'gotv')
    total = current_investment + added

    return GOTVResult(
        investment_added=float(added),
        total_investment=float(total),
        estimated_turnout_bonus=get_gotv_turnout_bonus(total),
    )
