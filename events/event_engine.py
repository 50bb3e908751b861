"""
Event generation, choice resolution and effect application.

Scheduled debates always fire on their turn. Random events are drawn from
the eligible pool in shuffled order, each accepted on its own probability
roll, until EVENTS_PER_TURN_MAX have been accepted.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from balance import EVENTS_PER_TURN_MAX, MOMENTUM_MAX, MOMENTUM_MIN, get_phase_for_turn, get_phase_span
from random_utils import SeededRandom, clamp
from state import to_money

from .catalog import ALL_EVENTS
from .models import ActiveEvent, EffectKind, EventCategory, EventChoice, EventEffect, EventPrerequisite, GameEvent

logger = logging.getLogger(__name__)


def find_scheduled_debate(turn: int, history_ids: Sequence[str],
                          catalog: Sequence[GameEvent] = ALL_EVENTS) -> Optional[GameEvent]:
    for event in catalog:
        if (event.category == EventCategory.DEBATE and event.turn_range
                and event.turn_range[0] == turn and event.id not in history_ids):
            return event
    return None


def check_prerequisite(prereq: EventPrerequisite, state) -> bool:
    """Evaluate one prerequisite against the state. Unknown types pass."""
    kind, value = prereq.type, prereq.value
    if kind == 'poll_above':
        return state.polls.player_support > value
    if kind == 'poll_below':
        return state.polls.player_support < value
    if kind == 'cash_above':
        return state.finances.cash_on_hand > value
    if kind == 'cash_below':
        return state.finances.cash_on_hand < value
    if kind == 'momentum_above':
        return state.momentum > value
    if kind == 'momentum_below':
        return state.momentum < value
    if kind == 'has_staff':
        return any(s.role == value and s.hired for s in state.staff)
    if kind == 'has_endorsement':
        return any(e.id == value and e.secured for e in state.endorsements)
    return True


def is_event_eligible(event: GameEvent, state, history_ids: Sequence[str]) -> bool:
    """Phase window, turn window, one-time history and prerequisites."""
    turn = state.current_turn
    if event.category == EventCategory.DEBATE and event.turn_range:
        return False  # scheduled, never random
    if event.one_time and event.id in history_ids:
        return False
    if get_phase_for_turn(turn) not in get_phase_span(*event.phase_range):
        return False
    if event.turn_range and not (event.turn_range[0] <= turn <= event.turn_range[1]):
        return False
    return all(check_prerequisite(p, state) for p in event.prerequisites)


def generate_turn_events(state, history_ids: Sequence[str], rng: SeededRandom,
                         catalog: Sequence[GameEvent] = ALL_EVENTS) -> List[ActiveEvent]:
    """
    Select the events that fire on state.current_turn.

    Args:
        state: Campaign state for the turn the events belong to
        history_ids: Ids of every event fired so far this playthrough
        rng: The turn's event stream
        catalog: Event table to draw from

    Returns:
        The scheduled debate (if any) followed by up to EVENTS_PER_TURN_MAX random events
    """
    turn = state.current_turn
    events: List[ActiveEvent] = []

    debate = find_scheduled_debate(turn, history_ids, catalog)
    if debate:
        events.append(ActiveEvent(event=debate, turn=turn, slot=len(events)))

    eligible = [e for e in catalog if is_event_eligible(e, state, history_ids)]

    accepted = 0
    for event in rng.shuffle(eligible):
        if accepted >= EVENTS_PER_TURN_MAX:
            break
        if rng.chance(event.probability):
            events.append(ActiveEvent(event=event, turn=turn, slot=len(events)))
            accepted += 1

    logger.debug("Turn %d events: %s (pool of %d)", turn,
                 [e.event.id for e in events], len(eligible))
    return events


def resolve_event_choice(choice: EventChoice, state, rng: SeededRandom) -> Tuple[List[EventEffect], List[str]]:
    """
    Declared effects of a choice, plus the risk's bad outcome if its roll hits.

    Returns:
        (effects, notification lines)
    """
    effects: List[EventEffect] = []
    notifications: List[str] = []

    for effect in choice.effects:
        effects.append(effect)
        if effect.description:
            notifications.append(effect.description)

    if choice.risk and rng.chance(choice.risk.probability):
        logger.debug("Risk triggered for choice %s", choice.id)
        for effect in choice.risk.bad_outcome:
            effects.append(effect)
            notifications.append(f"Risk: {effect.description}")

    return effects, notifications


def apply_event_effects(effects: Sequence[EventEffect], state):
    """
    Apply effects to a state the caller owns (pass a copy) and return it.

    Poll and opponent changes move every demographic so the aggregates,
    which are always derived from demographics, keep them.
    """
    polls = state.polls
    for effect in effects:
        kind, value = effect.kind, effect.value

        if kind == EffectKind.POLL_CHANGE:
            for demo in polls.demographics:
                demo.current_support = clamp(demo.current_support + value, 0, 100)
        elif kind == EffectKind.CASH_CHANGE:
            state.finances.cash_on_hand += to_money(value)
        elif kind == EffectKind.MOMENTUM_CHANGE:
            state.momentum = clamp(state.momentum + value, MOMENTUM_MIN, MOMENTUM_MAX)
        elif kind == EffectKind.DEMOGRAPHIC_CHANGE:
            demo = polls.get_demographic(effect.demographic)
            if demo:
                demo.current_support = clamp(demo.current_support + value, 0, 100)
        elif kind == EffectKind.OPPONENT_CHANGE:
            state.opponent.approval_rating = clamp(state.opponent.approval_rating + value, 0, 100)
            for demo in polls.demographics:
                demo.opponent_support = clamp(demo.opponent_support + value, 0, 100)
        elif kind == EffectKind.GOTV_CHANGE:
            state.gotv_investment = max(0.0, state.gotv_investment + value)
        elif kind == EffectKind.EMAIL_LIST_CHANGE:
            state.finances.email_list_size = max(0, state.finances.email_list_size + int(value))
        else:
            logger.debug("Ignoring unsupported effect kind %r", kind)

    polls.recompute_aggregates()
    return state
