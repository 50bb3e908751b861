"""
Campaign Trail: NV-03 - Game Engine

Turn orchestration. ALL MATH IS HARD-CODED AND SEEDED.
Narration renders text from the results but CANNOT modify game state.

This module is the single source of truth for:
- Building the starting CampaignState from a difficulty preset
- The turn pipeline (compute_turn, then apply_turn)
- Between-turn player choices (staff, endorsements, ads, event decisions)
- The CampaignEngine facade the calling shell drives
"""

import copy
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence, Union

from balance import (
    ACTION_DEFINITIONS,
    ACTION_TYPES,
    AD_MEDIUMS,
    AD_TONES,
    DIFFICULTY_CONFIGS,
    GAME_CONSTANTS,
    MAX_TURNS,
    get_phase_for_turn,
)
from briefing import build_financial_summary, build_notifications, render_turn_briefing
from content import DEMOGRAPHICS, build_endorsements, build_opponent, build_staff
from events import generate_turn_events, resolve_event_choice, apply_event_effects
from mechanics import (
    apply_endorsement_effects,
    calculate_ad_cost,
    can_afford_staff,
    can_pursue_endorsement,
    compute_election_result,
    compute_fundraising,
    compute_gotv,
    compute_momentum,
    compute_poll_changes,
    compute_post_game_score,
    get_action_points,
    get_margin_of_error,
    get_online_income_rate,
    get_weekly_staff_cost,
    is_gotv_available,
    is_staff_available,
    process_endorsements,
)
from mechanics.fundraising import FundraisingResult
from mechanics.gotv import GOTVResult
from mechanics.momentum import get_momentum_label
from mechanics.polling import refresh_latest_snapshot
from opponent_ai import get_opponent_poll_effect, process_opponent_turn
from random_utils import (
    ELECTION_STREAM,
    EVENT_RISK_STREAM,
    EVENT_STREAM,
    OPPONENT_STREAM,
    POLLING_STREAM,
    clamp,
    create_seed,
    stream_for,
)
from state import (
    AdCampaign,
    CampaignAction,
    CampaignFinances,
    CampaignState,
    DemographicData,
    ElectionResult,
    Endorsement,
    FinancialSummary,
    FundraisingSnapshot,
    Notification,
    OpponentState,
    PollChange,
    PollSnapshot,
    PollState,
    PostGameScore,
    to_money,
)

logger = logging.getLogger(__name__)


# =============================================================================
# TURN RESULT
# =============================================================================

@dataclass
class TurnResult:
    """
    Everything one week produced.

    The first block is what the player reads. The second block holds the
    computed snapshots apply_turn merges into the next state.
    """

    turn: int
    poll_changes: List[PollChange]
    financial_summary: FinancialSummary
    opponent_actions: List[str]
    momentum_change: float
    notifications: List[Notification]
    phase_change: Optional[str] = None

    polls: Optional[PollState] = None
    fundraising: Optional[FundraisingResult] = None
    gotv: Optional[GOTVResult] = None
    endorsements: List[Endorsement] = field(default_factory=list)
    secured_endorsements: List[str] = field(default_factory=list)
    opponent: Optional[OpponentState] = None
    opponent_poll_effect: float = 0.0
    momentum: float = 0.0


ActionInput = Union[CampaignAction, Dict[str, Any]]


# =============================================================================
# INITIAL STATE
# =============================================================================

def _starting_demographics(player_start: float, opponent_start: float) -> List[DemographicData]:
    """
    Seed each demographic from the preset split and its partisan lean.

    Each side is then shifted uniformly so the electorate-weighted totals
    equal the preset numbers exactly.
    """
    demographics = []
    for profile in DEMOGRAPHICS:
        lean = profile.base_lean
        player = player_start + (lean * 0.3 if lean > 0 else lean * 0.2)
        opponent = opponent_start + (abs(lean) * 0.3 if lean < 0 else -lean * 0.2)
        total = player + opponent
        if total > 95:
            scale = 90 / total
            player *= scale
            opponent *= scale
        demographics.append(DemographicData(
            id=profile.id,
            name=profile.name,
            electorate_pct=profile.electorate_pct,
            base_lean=profile.base_lean,
            persuadability=profile.persuadability,
            key_issues=list(profile.key_issues),
            current_support=player,
            opponent_support=opponent,
        ))

    player_weighted = sum(d.current_support * d.electorate_pct / 100 for d in demographics)
    opponent_weighted = sum(d.opponent_support * d.electorate_pct / 100 for d in demographics)
    for demo in demographics:
        demo.current_support = clamp(demo.current_support + player_start - player_weighted, 0, 100)
        demo.opponent_support = clamp(demo.opponent_support + opponent_start - opponent_weighted, 0, 100)
    return demographics


def create_initial_state(difficulty: str = 'toss-up', seed: Optional[int] = None) -> CampaignState:
    """
    Build turn 1 of a new campaign.

    Args:
        difficulty: Key of DIFFICULTY_CONFIGS
        seed: Base seed; a fresh one is drawn when omitted

    Returns:
        CampaignState with turn 1's events already drawn
    """
    config = DIFFICULTY_CONFIGS.get(difficulty)
    if config is None:
        raise UnknownDifficultyError(f"Unknown difficulty: {difficulty}")

    seed = seed if seed is not None else create_seed()
    player = float(config['player_starting_support'])
    opponent = float(config['opponent_starting_support'])
    undecided = 100 - player - opponent
    staff = build_staff()

    polls = PollState(
        player_support=player,
        opponent_support=opponent,
        undecided=undecided,
        margin_of_error=get_margin_of_error(staff),
        demographics=_starting_demographics(player, opponent),
        history=[PollSnapshot(turn=0, player_support=player, opponent_support=opponent, undecided=undecided)],
    )

    finances = CampaignFinances(
        cash_on_hand=Decimal(config['starting_cash']),
        total_raised=Decimal(config['starting_cash']),
        online_income_rate=Decimal(GAME_CONSTANTS['ONLINE_INCOME_BASE_RATE']),
        email_list_size=GAME_CONSTANTS['STARTING_EMAIL_LIST'],
    )

    state = CampaignState(
        difficulty=difficulty,
        polls=polls,
        finances=finances,
        opponent=build_opponent(),
        seed=seed,
        game_id=f"game-{seed}",
        current_turn=1,
        max_turns=MAX_TURNS,
        phase=get_phase_for_turn(1),
        action_points=get_action_points(staff),
        max_action_points=get_action_points(staff),
        staff=staff,
        endorsements=build_endorsements(),
    )
    state.active_events = generate_turn_events(state, [], stream_for(seed, 1, EVENT_STREAM))
    logger.info("New %s campaign, seed %d", difficulty, seed)
    return state


# =============================================================================
# VALIDATION
# =============================================================================

def _check_playable(state: CampaignState):
    if state.game_over or state.current_turn > state.max_turns:
        raise GameOverError(f"Campaign is over (turn {state.current_turn} of {state.max_turns})")


def normalize_actions(actions: Sequence[ActionInput]) -> List[CampaignAction]:
    """Coerce {type, intensity, target} dicts to CampaignActions and validate them."""
    normalized = []
    for action in actions:
        if isinstance(action, dict):
            action = CampaignAction(
                type=action.get('type', ''),
                intensity=action.get('intensity', 1),
                target=action.get('target'),
            )
        if action.type not in ACTION_TYPES:
            raise InvalidActionError(f"Unknown action: {action.type}")
        if not isinstance(action.intensity, int) or action.intensity <= 0:
            raise InvalidActionError(f"Intensity must be a positive integer, got {action.intensity!r}")
        normalized.append(action)
    return normalized


def get_action_cost(actions: Sequence[CampaignAction]) -> int:
    """Action points an action list spends."""
    return sum(ACTION_DEFINITIONS[a.type]['ap_cost'] * a.intensity for a in actions)


# =============================================================================
# TURN PIPELINE
# =============================================================================

def compute_turn(state: CampaignState, actions: Sequence[ActionInput]) -> TurnResult:
    """
    Compute one week without modifying the state passed in.

    Order: polling (with advertising), fundraising, GOTV, endorsements,
    momentum, expenses, opponent, notifications.
    """
    _check_playable(state)
    actions = normalize_actions(actions)
    turn = state.current_turn
    rng = stream_for(state.seed, turn, POLLING_STREAM)

    polls, poll_changes = compute_poll_changes(
        state.polls, actions, state.ads, state.momentum, state.staff, rng)
    backlash_count = sum(1 for c in poll_changes if 'backlash' in c.reason.lower())

    fundraising = compute_fundraising(
        state.finances, actions, state.staff, state.momentum, turn, rng,
        endorsements_secured=len(state.secured_endorsements()),
        endorsement_bonus=sum(e.fundraising_bonus for e in state.secured_endorsements()))

    gotv = compute_gotv(state.gotv_investment, actions, state.staff, turn)

    endorsements = copy.deepcopy(state.endorsements)
    endorsement_result = process_endorsements(endorsements, actions, polls)
    for endorsement in endorsement_result.secured:
        apply_endorsement_effects(endorsement, polls.demographics)
    if endorsement_result.secured:
        polls.recompute_aggregates()
        refresh_latest_snapshot(polls)

    poll_change = polls.player_support - state.polls.player_support
    debate_prep = sum(GAME_CONSTANTS['DEBATE_PREP_MOMENTUM'] * a.intensity
                      for a in actions if a.type == 'debate-prep')
    momentum = compute_momentum(state.momentum, poll_change, debate_prep, bool(endorsement_result.secured))

    staff_cost = get_weekly_staff_cost(state.staff)
    ad_cost = calculate_ad_cost(state.ads)
    summary = build_financial_summary(fundraising, staff_cost, ad_cost, gotv.investment_added)

    opponent = copy.deepcopy(state.opponent)
    opponent_result = process_opponent_turn(
        opponent, polls.player_support, polls.opponent_support, turn,
        stream_for(state.seed, turn, OPPONENT_STREAM))
    opponent_effect = get_opponent_poll_effect(opponent_result)
    for demo in polls.demographics:
        demo.opponent_support = clamp(demo.opponent_support + opponent_effect, 0, 100)
    polls.recompute_aggregates()
    refresh_latest_snapshot(polls)

    notifications = build_notifications(
        state,
        secured=endorsement_result.secured,
        progressed=endorsement_result.progressed,
        backlash_count=backlash_count,
        opponent_result=opponent_result,
        cash_after=state.finances.cash_on_hand + summary.net,
        next_week_burn=to_money(staff_cost) + to_money(ad_cost),
    )

    next_phase = get_phase_for_turn(turn + 1)
    return TurnResult(
        turn=turn,
        poll_changes=poll_changes,
        financial_summary=summary,
        opponent_actions=opponent_result.actions,
        momentum_change=momentum - state.momentum,
        notifications=notifications,
        phase_change=next_phase if next_phase != state.phase else None,
        polls=polls,
        fundraising=fundraising,
        gotv=gotv,
        endorsements=endorsements,
        secured_endorsements=[e.id for e in endorsement_result.secured],
        opponent=opponent,
        opponent_poll_effect=opponent_effect,
        momentum=momentum,
    )


def apply_turn(state: CampaignState, result: TurnResult, actions: Sequence[ActionInput] = ()) -> CampaignState:
    """
    Merge a TurnResult into a new snapshot and advance the calendar.

    Draws next week's events, or tabulates the election once the last
    week has been played.
    """
    _check_playable(state)
    new_state = state.copy()
    summary = result.financial_summary
    fundraising = result.fundraising

    new_state.polls = copy.deepcopy(result.polls)

    finances = new_state.finances
    finances.cash_on_hand += summary.net
    finances.total_raised += summary.income
    finances.total_spent += summary.expenses
    finances.small_donors += fundraising.small_donors
    finances.large_donors += fundraising.large_donors
    finances.pac_money += fundraising.pac_money
    finances.email_list_size += fundraising.email_list_growth
    finances.online_income_rate = get_online_income_rate(finances.email_list_size)
    finances.weekly_burn_rate = summary.expenses
    finances.fundraising_history.append(FundraisingSnapshot(
        turn=state.current_turn,
        raised=summary.income,
        spent=summary.expenses,
        cash_on_hand=finances.cash_on_hand,
    ))

    new_state.momentum = result.momentum
    new_state.gotv_investment += result.gotv.investment_added
    new_state.endorsements = copy.deepcopy(result.endorsements)
    new_state.opponent = copy.deepcopy(result.opponent)

    # Pending events expire unanswered at the end of the week
    new_state.event_history.extend(new_state.active_events)
    new_state.active_events = []

    new_state.current_turn += 1
    new_state.phase = get_phase_for_turn(new_state.current_turn)
    new_state.max_action_points = get_action_points(new_state.staff)
    new_state.action_points = new_state.max_action_points

    logger.info("Turn %d resolved: %.1f%% vs %.1f%%, cash %s, momentum %.1f",
                state.current_turn, new_state.polls.player_support,
                new_state.polls.opponent_support, finances.cash_on_hand, new_state.momentum)

    if new_state.current_turn > new_state.max_turns:
        _finish_campaign(new_state)
    else:
        new_state.active_events = generate_turn_events(
            new_state, new_state.event_history_ids(),
            stream_for(new_state.seed, new_state.current_turn, EVENT_STREAM))

    return new_state


def _finish_campaign(state: CampaignState):
    """Tabulate the election on a state that has just passed its last week."""
    rng = stream_for(state.seed, state.max_turns, ELECTION_STREAM)
    result = compute_election_result(state, rng)
    state.game_over = True
    state.phase = 'election'
    state.election_result = result
    state.winner = result.winner
    state.final_margin = result.margin


# =============================================================================
# BETWEEN-TURN CHOICES
# Each returns a new state; the input is never modified.
# =============================================================================

def resolve_event(state: CampaignState, event_id: str, choice_id: str) -> CampaignState:
    """Apply the player's answer to a pending event and archive it."""
    _check_playable(state)
    index = next((i for i, active in enumerate(state.active_events)
                  if active.event.id == event_id and not active.resolved), None)
    if index is None:
        raise EventNotFoundError(f"No pending event: {event_id}")
    choice = state.active_events[index].event.get_choice(choice_id)
    if choice is None:
        raise EventNotFoundError(f"Event {event_id} has no choice {choice_id}")

    new_state = state.copy()
    slot = state.active_events[index].slot
    rng = stream_for(state.seed, state.current_turn, EVENT_RISK_STREAM, offset=slot)
    effects, outcome = resolve_event_choice(choice, new_state, rng)
    apply_event_effects(effects, new_state)

    active = new_state.active_events.pop(index)
    active.chosen = choice_id
    active.resolved = True
    active.outcome = outcome
    new_state.event_history.append(active)
    logger.debug("Resolved %s with %s: %s", event_id, choice_id, outcome)
    return new_state


def hire_staff(state: CampaignState, role: str) -> CampaignState:
    _check_playable(state)
    member = next((s for s in state.staff if s.role == role), None)
    if member is None or not is_staff_available(member, state.current_turn):
        raise StaffUnavailableError(f"{role} is not available to hire on turn {state.current_turn}")
    if not can_afford_staff(role, state.staff, state.finances):
        raise InsufficientFundsError(f"Cannot cover {GAME_CONSTANTS['STAFF_AFFORDABILITY_WEEKS']} weeks of {role} salary")

    new_state = state.copy()
    for s in new_state.staff:
        if s.role == role:
            s.hired = True

    # A new campaign manager's extra point is usable this week
    bonus = get_action_points(new_state.staff) - new_state.max_action_points
    new_state.max_action_points += bonus
    new_state.action_points += bonus
    new_state.polls.margin_of_error = get_margin_of_error(new_state.staff)
    return new_state


def pursue_endorsement(state: CampaignState, endorsement_id: str) -> CampaignState:
    _check_playable(state)
    endorsement = next((e for e in state.endorsements if e.id == endorsement_id), None)
    if endorsement is None or not can_pursue_endorsement(endorsement, state.polls.player_support):
        raise EndorsementUnavailableError(f"Cannot pursue endorsement: {endorsement_id}")

    new_state = state.copy()
    for e in new_state.endorsements:
        if e.id == endorsement_id:
            e.pursued = True
    return new_state


def set_ads(state: CampaignState, ads: Sequence[AdCampaign]) -> CampaignState:
    """Replace the running ad campaigns."""
    _check_playable(state)
    demographic_ids = {d.id for d in state.polls.demographics}
    for ad in ads:
        if ad.medium not in AD_MEDIUMS or ad.tone not in AD_TONES:
            raise InvalidActionError(f"Unknown ad: {ad.tone} {ad.medium}")
        if ad.budget < 0:
            raise InvalidActionError(f"Ad budget cannot be negative: {ad.budget}")
        if ad.target_demographic and ad.target_demographic not in demographic_ids:
            raise InvalidActionError(f"Unknown demographic: {ad.target_demographic}")

    new_state = state.copy()
    new_state.ads = [copy.copy(ad) for ad in ads]
    return new_state


# =============================================================================
# GAME ENGINE CLASS
# =============================================================================

class CampaignEngine:
    """
    Stateful wrapper around the pure turn functions.

    Owns one CampaignState and swaps it for the next snapshot after every
    call. Callers only ever receive copies.
    """

    def __init__(self, state: Optional[CampaignState] = None):
        self.state = state or create_initial_state()
        self.last_result: Optional[TurnResult] = None

    # -------------------------------------------------------------------------
    # TURN LOOP
    # -------------------------------------------------------------------------

    def take_turn(self, actions: Sequence[ActionInput]) -> TurnResult:
        """
        Execute one complete week.

        Args:
            actions: {type, intensity, target} dicts or CampaignActions

        Returns:
            The week's TurnResult
        """
        _check_playable(self.state)
        actions = normalize_actions(actions)

        cost = get_action_cost(actions)
        if cost > self.state.action_points:
            raise InsufficientActionPointsError(
                f"Actions cost {cost} AP, only {self.state.action_points} available")

        result = compute_turn(self.state, actions)
        self.state = apply_turn(self.state, result, actions)
        self.last_result = result
        return result

    # -------------------------------------------------------------------------
    # PLAYER CHOICES
    # -------------------------------------------------------------------------

    def hire_staff(self, role: str):
        self.state = hire_staff(self.state, role)

    def pursue_endorsement(self, endorsement_id: str):
        self.state = pursue_endorsement(self.state, endorsement_id)

    def set_ads(self, ads: Sequence[AdCampaign]):
        self.state = set_ads(self.state, ads)

    def resolve_event(self, event_id: str, choice_id: str) -> List[str]:
        """Answer a pending event; returns the outcome lines."""
        self.state = resolve_event(self.state, event_id, choice_id)
        return list(self.state.event_history[-1].outcome)

    # -------------------------------------------------------------------------
    # PUBLIC API
    # -------------------------------------------------------------------------

    def get_state(self) -> CampaignState:
        """Return read-only state snapshot."""
        return self.state.copy()

    def is_game_over(self) -> bool:
        return self.state.game_over

    def is_victory(self) -> bool:
        return self.state.winner == 'player'

    def get_pending_events(self):
        return [copy.deepcopy(a) for a in self.state.active_events if not a.resolved]

    def get_valid_actions(self) -> List[str]:
        """Action types the remaining AP can pay for at intensity 1."""
        if self.state.game_over:
            return []
        return [
            action for action, definition in ACTION_DEFINITIONS.items()
            if definition['ap_cost'] <= self.state.action_points
            and (action != 'gotv' or is_gotv_available(self.state.current_turn))
        ]

    def get_turn_summary(self) -> Dict[str, Any]:
        """Get summary of current turn state."""
        state = self.state
        return {
            'turn': state.current_turn,
            'phase': state.phase,
            'action_points': state.action_points,
            'player_support': round(state.polls.player_support, 1),
            'opponent_support': round(state.polls.opponent_support, 1),
            'undecided': round(state.polls.undecided, 1),
            'margin_of_error': state.polls.margin_of_error,
            'cash_on_hand': state.finances.cash_on_hand,
            'momentum': round(state.momentum, 2),
            'momentum_label': get_momentum_label(state.momentum),
            'gotv_investment': state.gotv_investment,
            'endorsements_secured': len(state.secured_endorsements()),
            'opponent_strategy': state.opponent.strategy.value,
            'opponent_attack_mode': state.opponent.attack_mode,
            'pending_events': [a.event.id for a in state.active_events if not a.resolved],
            'game_over': state.game_over,
        }

    def get_briefing(self) -> Optional[str]:
        """Plain-text briefing of the last turn played."""
        if self.last_result is None:
            return None
        return render_turn_briefing(self.last_result, self.state)

    def get_election_result(self) -> Optional[ElectionResult]:
        return copy.deepcopy(self.state.election_result)

    def get_post_game_score(self) -> Optional[PostGameScore]:
        if self.state.election_result is None:
            return None
        return compute_post_game_score(self.state.election_result, self.state)


# =============================================================================
# EXCEPTIONS
# =============================================================================

class CampaignError(Exception):
    """Base class for caller contract violations."""
    pass


class GameOverError(CampaignError):
    """Raised when attempting to play after the campaign has ended."""
    pass


class InvalidActionError(CampaignError):
    """Raised when an unknown action or a bad intensity or ad is specified."""
    pass


class InsufficientActionPointsError(CampaignError):
    """Raised when the actions cost more AP than the week has."""
    pass


class UnknownDifficultyError(CampaignError):
    pass


class EventNotFoundError(CampaignError):
    """Raised when resolving an event or choice that is not pending."""
    pass


class StaffUnavailableError(CampaignError):
    pass


class InsufficientFundsError(CampaignError):
    pass


class EndorsementUnavailableError(CampaignError):
    """Raised when an endorsement is unknown, already in play, or above the player's support."""
    pass


# =============================================================================
# NEW GAME FACTORY
# =============================================================================

def new_game(difficulty: str = 'toss-up', seed: Optional[int] = None) -> CampaignEngine:
    """Create a new campaign with the preset's starting state."""
    return CampaignEngine(state=create_initial_state(difficulty, seed))


# =============================================================================
# MAIN ENTRY (for testing)
# =============================================================================

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')

    engine = new_game('toss-up', seed=42)
    print("Initial state:", engine.get_turn_summary())

    plan = [
        {'type': 'fundraise', 'intensity': 2},
        {'type': 'campaign', 'intensity': 2},
        {'type': 'seek-endorsement', 'intensity': 1},
    ]
    engine.pursue_endorsement('nevada-farm-bureau')

    while not engine.is_game_over():
        for event in engine.get_pending_events():
            engine.resolve_event(event.event.id, event.event.choices[0].id)
        actions = plan
        if is_gotv_available(engine.state.current_turn):
            actions = plan[:2] + [{'type': 'gotv', 'intensity': 1}]
        engine.take_turn(actions)
        print(engine.get_briefing())
        print()

    result = engine.get_election_result()
    score = engine.get_post_game_score()
    print(f"Winner: {result.winner} by {result.margin:+.2f} (recount: {result.recount})")
    print(f"Grade: {score.final_grade} ({score.total_score})")
