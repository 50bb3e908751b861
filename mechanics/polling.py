"""
Polling: the weekly movement of demographic support.

Order within a turn: campaign actions, oppo research, advertising,
momentum, undecided decay, aggregate recompute, history snapshot.
All draws come from the turn's polling stream in that order.
"""

import copy
import logging
from typing import List, Sequence, Tuple

from balance import GAME_CONSTANTS, UNDECIDED_MAX, UNDECIDED_MIN
from random_utils import SeededRandom, clamp
from state import PollChange, PollSnapshot, PollState

from .advertising import compute_ad_effects
from .staff import get_margin_of_error

logger = logging.getLogger(__name__)

CAMPAIGN_NOISE = GAME_CONSTANTS['CAMPAIGN_NOISE']
CHANGE_LOG_THRESHOLD = GAME_CONSTANTS['POLL_CHANGE_LOG_THRESHOLD']


def _targets(demographics, target):
    """Demographics an action reaches: all of them, or only the named one."""
    return [d for d in demographics if not target or d.id == target]


def compute_poll_changes(polls: PollState, actions: Sequence, ads: Sequence, momentum: float,
                         staff: Sequence, rng: SeededRandom) -> Tuple[PollState, List[PollChange]]:
    """
    Compute this week's polls without touching the input.

    Args:
        polls: Current PollState
        actions: CampaignActions taken this week
        ads: Active AdCampaigns
        momentum: Momentum carried in from last week
        staff: Staff roster (margin of error, ad bonuses)
        rng: The turn's polling stream

    Returns:
        (new PollState with one more history snapshot, change log)
    """
    new_polls = copy.deepcopy(polls)
    demographics = new_polls.demographics
    changes: List[PollChange] = []

    for action in actions:
        if action.type != 'campaign':
            continue
        for demo in _targets(demographics, action.target):
            boost = GAME_CONSTANTS['CAMPAIGN_BASE_POLL_BOOST'] * action.intensity
            change = boost * demo.persuadability + rng.next_float(-CAMPAIGN_NOISE, CAMPAIGN_NOISE)
            demo.current_support = clamp(demo.current_support + change, 0, 100)
            if abs(change) > CHANGE_LOG_THRESHOLD:
                changes.append(PollChange(demo.id, change, 0.0, 'Campaign outreach'))

    for action in actions:
        if action.type != 'oppo-research':
            continue
        for demo in _targets(demographics, action.target):
            hit = GAME_CONSTANTS['OPPO_RESEARCH_OPPONENT_HIT'] * action.intensity * demo.persuadability
            demo.opponent_support = clamp(demo.opponent_support - hit, 0, 100)
            if hit > CHANGE_LOG_THRESHOLD:
                changes.append(PollChange(demo.id, 0.0, -hit, 'Opposition research'))

    for effect in compute_ad_effects(ads, demographics, staff, rng):
        demo = new_polls.get_demographic(effect.demographic)
        if demo is None:
            continue
        demo.current_support = clamp(demo.current_support + effect.player_change, 0, 100)
        demo.opponent_support = clamp(demo.opponent_support + effect.opponent_change, 0, 100)
        changes.append(PollChange(demo.id, effect.player_change, effect.opponent_change, effect.reason))

    if momentum:
        momentum_effect = momentum * GAME_CONSTANTS['MOMENTUM_POLL_EFFECT']
        damping = GAME_CONSTANTS['MOMENTUM_DEMOGRAPHIC_DAMPING']
        for demo in demographics:
            demo.current_support = clamp(
                demo.current_support + momentum_effect * demo.persuadability * damping, 0, 100)

    decay = new_polls.undecided * GAME_CONSTANTS['UNDECIDED_DECAY_RATE']
    new_polls.undecided = clamp(new_polls.undecided - decay, UNDECIDED_MIN, UNDECIDED_MAX)
    new_polls.margin_of_error = get_margin_of_error(staff)
    new_polls.recompute_aggregates()

    new_polls.history.append(take_snapshot(new_polls))
    logger.debug("Polls now %.1f / %.1f (undecided %.1f), %d changes",
                 new_polls.player_support, new_polls.opponent_support,
                 new_polls.undecided, len(changes))
    return new_polls, changes


def take_snapshot(polls: PollState) -> PollSnapshot:
    """Snapshot for the next history slot; slot 0 holds the starting numbers."""
    return PollSnapshot(
        turn=len(polls.history),
        player_support=polls.player_support,
        opponent_support=polls.opponent_support,
        undecided=polls.undecided,
    )


def refresh_latest_snapshot(polls: PollState) -> None:
    """Re-record the latest history entry after late-turn adjustments."""
    if not polls.history:
        return
    latest = polls.history[-1]
    polls.history[-1] = PollSnapshot(
        turn=latest.turn,
        player_support=polls.player_support,
        opponent_support=polls.opponent_support,
        undecided=polls.undecided,
    )
