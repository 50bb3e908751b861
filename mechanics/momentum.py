"""
Momentum: a bounded scalar that decays toward zero each week.
"""

from balance import GAME_CONSTANTS, MOMENTUM_MAX, MOMENTUM_MIN
from random_utils import clamp


def compute_momentum(current: float, poll_change: float, events_impact: float,
                     endorsement_gained: bool) -> float:
    """
    Next week's momentum.

    Poll swings add momentum in steps; a swing between 0.5 and 1 point
    in size earns the half step, anything smaller earns nothing.
    """
    momentum = current
    decay = GAME_CONSTANTS['MOMENTUM_DECAY']
    if momentum > 0:
        momentum -= decay
    elif momentum < 0:
        momentum += decay

    if poll_change > 1:
        momentum += 1
    elif poll_change > 0.5:
        momentum += 0.5
    elif poll_change < -1:
        momentum -= 1
    elif poll_change < -0.5:
        momentum -= 0.5

    momentum += events_impact

    if endorsement_gained:
        momentum += GAME_CONSTANTS['ENDORSEMENT_MOMENTUM_BONUS']

    return clamp(momentum, MOMENTUM_MIN, MOMENTUM_MAX)


def get_momentum_label(momentum: float) -> str:
    if momentum >= 5:
        return 'Surging'
    if momentum >= 2:
        return 'Building'
    if momentum > 0:
        return 'Slight edge'
    if momentum == 0:
        return 'Neutral'
    if momentum > -2:
        return 'Headwinds'
    if momentum > -5:
        return 'Struggling'
    return 'Collapsing'
