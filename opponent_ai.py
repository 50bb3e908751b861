"""
Opponent AI.

Two independent pieces of state drive the opponent each week:

- strategy: a finite-state machine (establishment / aggressive / defensive)
  re-evaluated every turn from the polling margin and the turn number.
- attack mode: a latch with asymmetric guards. It switches on when the
  opponent falls more than OPPONENT_ADAPTATION_THRESHOLD behind and only
  switches off again once they lead by more than OPPONENT_ATTACK_EXIT_MARGIN.

Margins here are always from the opponent's side: opponent - player.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Tuple

from balance import GAME_CONSTANTS, GOTV_AVAILABLE_TURN, PHASE_RANGES
from content import CAMPAIGN_LOCATIONS, OPPONENT_PROFILE
from narration import render_template
from random_utils import SeededRandom, clamp
from state import OpponentState, OpponentStrategy, to_money

logger = logging.getLogger(__name__)

# Ad budget multiplier and weekly poll effect per strategy
STRATEGY_ADS = {
    OpponentStrategy.AGGRESSIVE: (1.5, abs(GAME_CONSTANTS['OPPONENT_ATTACK_POLL_EFFECT']) * 0.5),
    OpponentStrategy.DEFENSIVE: (0.8, 0.3),
    OpponentStrategy.ESTABLISHMENT: (1.0, 0.2),
}

ATTACK_MODE_ENTRY_EFFECT = 0.5
ENDORSEMENT_EFFECT = 0.15


@dataclass
class OpponentTurnResult:
    actions: List[str] = field(default_factory=list)
    cash_raised: Decimal = field(default_factory=lambda: Decimal('0'))
    cash_spent: Decimal = field(default_factory=lambda: Decimal('0'))
    poll_effect: float = 0.0
    new_strategy: OpponentStrategy = OpponentStrategy.ESTABLISHMENT
    gotv_added: float = 0.0
    attack_mode_changed: Optional[bool] = None  # True entered, False exited


def determine_strategy(margin: float, turn: int) -> OpponentStrategy:
    """Pick this week's strategy from margin (opponent - player) and turn."""
    if turn <= 10:
        return OpponentStrategy.AGGRESSIVE if margin < -5 else OpponentStrategy.ESTABLISHMENT
    if margin > 5:
        return OpponentStrategy.ESTABLISHMENT
    if margin > 0:
        return OpponentStrategy.DEFENSIVE if turn > 20 else OpponentStrategy.ESTABLISHMENT
    if margin >= -5:
        return OpponentStrategy.AGGRESSIVE if turn > 15 else OpponentStrategy.ESTABLISHMENT
    return OpponentStrategy.AGGRESSIVE


def should_enter_attack_mode(attack_mode: bool, margin: float) -> bool:
    return not attack_mode and margin < GAME_CONSTANTS['OPPONENT_ADAPTATION_THRESHOLD']


def should_exit_attack_mode(attack_mode: bool, margin: float) -> bool:
    return attack_mode and margin > GAME_CONSTANTS['OPPONENT_ATTACK_EXIT_MARGIN']


def update_attack_mode(attack_mode: bool, margin: float) -> Tuple[bool, Optional[bool]]:
    """
    Advance the attack-mode latch one week.

    Returns:
        (new latch value, True if it just switched on / False if it just
        switched off / None if unchanged)
    """
    if should_enter_attack_mode(attack_mode, margin):
        return True, True
    if should_exit_attack_mode(attack_mode, margin):
        return False, False
    return attack_mode, None


def get_campaign_chance(turn: int) -> float:
    """Chance the opponent holds a campaign event this week, by phase."""
    if turn <= PHASE_RANGES['primary']['end']:
        return 0.5
    if turn <= PHASE_RANGES['early']['end']:
        return 0.7
    return 0.85


def _short_name(opponent: OpponentState) -> str:
    return opponent.name.split()[-1] if opponent.name else 'The opponent'


def process_opponent_turn(opponent: OpponentState, player_support: float, opponent_support: float,
                          turn: int, rng: SeededRandom) -> OpponentTurnResult:
    """
    Run the opponent's week, mutating the snapshot passed in.

    Args:
        opponent: The opponent snapshot to update (pass a copy)
        player_support: Player's aggregate support
        opponent_support: Opponent's aggregate support
        turn: Current turn
        rng: The turn's opponent stream

    Returns:
        OpponentTurnResult with the narrated log and the raw poll effect
        (clamp it with get_opponent_poll_effect before applying)
    """
    result = OpponentTurnResult()
    name = _short_name(opponent)
    margin = opponent_support - player_support

    strategy = determine_strategy(margin, turn)
    if strategy != opponent.strategy:
        logger.debug("Opponent strategy %s -> %s (margin %.1f, turn %d)",
                     opponent.strategy.value, strategy.value, margin, turn)
    result.new_strategy = strategy

    # Always fundraises
    raised = to_money(GAME_CONSTANTS['OPPONENT_BASE_FUNDRAISING'] * (1 + rng.next_float(-0.1, 0.2)))
    opponent.cash_on_hand += raised
    result.cash_raised = raised
    result.actions.append(render_template('opponent/fundraising.txt', {'opponent': name, 'amount': raised}))

    ad_multiplier, ad_effect = STRATEGY_ADS[strategy]
    # Multiplier applies to the baseline budget, not last week's spend
    ad_spend = GAME_CONSTANTS['OPPONENT_STARTING_AD_SPENDING'] * ad_multiplier
    spent = to_money(ad_spend)
    result.poll_effect += ad_effect
    result.actions.append(render_template('opponent/ads.txt', {'opponent': name, 'strategy': strategy.value}))

    if rng.chance(get_campaign_chance(turn)):
        result.poll_effect += 0.3 * (1 + opponent.staff_level * 0.1)
        location = rng.pick(CAMPAIGN_LOCATIONS)
        result.actions.append(render_template('opponent/campaign.txt', {'opponent': name, 'location': location}))

    opponent.attack_mode, changed = update_attack_mode(opponent.attack_mode, margin)
    if changed is not None:
        result.attack_mode_changed = changed
        if changed:
            result.poll_effect += ATTACK_MODE_ENTRY_EFFECT
        logger.debug("Opponent attack mode %s at margin %.1f", 'on' if changed else 'off', margin)
        result.actions.append(render_template('opponent/attack_mode.txt', {'opponent': name, 'active': changed}))

    if turn >= GOTV_AVAILABLE_TURN:
        gotv = GAME_CONSTANTS['OPPONENT_GOTV_MIN'] + rng.next_int(0, GAME_CONSTANTS['OPPONENT_GOTV_SPREAD'])
        result.gotv_added = float(gotv)
        spent += to_money(gotv)
        result.actions.append(render_template('opponent/gotv.txt', {'opponent': name, 'amount': gotv}))

    if rng.chance(GAME_CONSTANTS['OPPONENT_ENDORSEMENT_CHANCE']) and turn > GAME_CONSTANTS['OPPONENT_ENDORSEMENT_MIN_TURN']:
        open_orgs = [o for o in OPPONENT_PROFILE['target_organizations']
                     if o not in opponent.endorsements_secured]
        organization = rng.pick(open_orgs)
        if organization:
            opponent.endorsements_secured.append(organization)
            result.poll_effect += ENDORSEMENT_EFFECT
            result.actions.append(render_template('opponent/endorsement.txt',
                                                  {'opponent': name, 'organization': organization}))

    opponent.cash_on_hand = max(Decimal('0'), opponent.cash_on_hand - spent)
    opponent.total_spent += spent
    opponent.ad_spending = ad_spend
    opponent.strategy = strategy
    opponent.gotv_investment += result.gotv_added
    result.cash_spent = spent

    return result


def get_opponent_poll_effect(result: OpponentTurnResult) -> float:
    """The effect actually applied to opponent support, bounded to the configured limit."""
    limit = GAME_CONSTANTS['OPPONENT_POLL_EFFECT_LIMIT']
    return clamp(result.poll_effect, -limit, limit)
