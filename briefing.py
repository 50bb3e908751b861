"""
Turn briefing for the campaign simulation.

Turns the numbers a turn produced into what the player reads: the
notification list, the financial summary and a plain-text briefing.
Nothing here changes game state.
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence

from balance import GOTV_AVAILABLE_TURN, get_phase_for_turn, get_turn_date
from content import DISTRICT
from mechanics.momentum import get_momentum_label
from narration import render_template
from state import FinancialSummary, Notification, to_money


def build_financial_summary(fundraising, staff_cost, ad_cost, gotv_cost) -> FinancialSummary:
    """Income and expenses for one week, with a per-source breakdown."""
    staff_cost = to_money(staff_cost)
    ad_cost = to_money(ad_cost)
    gotv_cost = to_money(gotv_cost)

    income = fundraising.total_raised
    expenses = staff_cost + ad_cost + gotv_cost
    breakdown = [
        {'source': 'Fundraising', 'amount': fundraising.small_donors + fundraising.large_donors},
        {'source': 'Online/Passive', 'amount': fundraising.passive_income},
        {'source': 'PAC', 'amount': fundraising.pac_money},
        {'source': 'Staff Salaries', 'amount': -staff_cost},
        {'source': 'Advertising', 'amount': -ad_cost},
        {'source': 'GOTV', 'amount': -gotv_cost},
    ]
    return FinancialSummary(income=income, expenses=expenses, net=income - expenses, breakdown=breakdown)


def build_notifications(state, secured: Sequence = (), progressed: Sequence = (),
                        backlash_count: int = 0, opponent_result=None,
                        cash_after: Optional[Decimal] = None,
                        next_week_burn: Optional[Decimal] = None) -> List[Notification]:
    """
    Notifications for the week that just resolved.

    Args:
        state: State at the start of the week
        secured: Endorsements secured this week
        progressed: Endorsements that advanced without securing
        backlash_count: Demographics where an attack ad backfired
        opponent_result: OpponentTurnResult, for attack-mode changes
        cash_after: Cash on hand once the week's money has moved
        next_week_burn: Recurring costs due next week
    """
    notifications: List[Notification] = []
    candidate = DISTRICT['player_candidate']

    for endorsement in secured:
        notifications.append(Notification(
            level='success',
            title='Endorsement Secured!',
            message=render_template('notifications/endorsement_secured.txt',
                                    {'name': endorsement.name, 'candidate': candidate}),
        ))

    for endorsement in progressed:
        notifications.append(Notification(
            level='info',
            title='Endorsement Progress',
            message=render_template('notifications/endorsement_progress.txt', {
                'name': endorsement.name,
                'turns_pursued': endorsement.turns_pursued,
                'turns_to_secure': endorsement.turns_to_secure,
            }),
        ))

    if backlash_count:
        notifications.append(Notification(
            level='warning',
            title='Ad Backlash',
            message=render_template('notifications/backlash.txt', {'count': backlash_count}),
        ))

    if opponent_result is not None and opponent_result.attack_mode_changed:
        notifications.append(Notification(
            level='danger',
            title='Opponent Attack Mode',
            message=render_template('notifications/attack_mode.txt', {'opponent': state.opponent.name}),
        ))

    next_turn = state.current_turn + 1
    next_phase = get_phase_for_turn(next_turn)
    if next_phase != state.phase:
        notifications.append(Notification(
            level='info',
            title='New Campaign Phase',
            message=render_template('notifications/phase_change.txt', {'phase': next_phase}),
        ))

    if next_turn == GOTV_AVAILABLE_TURN:
        notifications.append(Notification(
            level='info',
            title='GOTV Unlocked',
            message=render_template('notifications/gotv_unlocked.txt', {}),
        ))

    if cash_after is not None and next_week_burn is not None and cash_after < next_week_burn:
        notifications.append(Notification(
            level='danger',
            title='Low Cash',
            message=render_template('notifications/low_cash.txt',
                                    {'cash': cash_after, 'burn': next_week_burn}),
        ))

    return notifications


def get_briefing_context(result, state) -> Dict[str, Any]:
    """Template context for one turn's briefing; state is the post-turn snapshot."""
    polls = state.polls
    summary = result.financial_summary
    return {
        'turn': result.turn,
        'date': get_turn_date(result.turn),
        'phase': get_phase_for_turn(result.turn),
        'player_support': polls.player_support,
        'opponent_support': polls.opponent_support,
        'undecided': polls.undecided,
        'margin_of_error': polls.margin_of_error,
        'momentum_label': get_momentum_label(state.momentum),
        'momentum_change': result.momentum_change,
        'income': summary.income,
        'expenses': summary.expenses,
        'net': summary.net,
        'poll_changes': result.poll_changes,
        'opponent_actions': result.opponent_actions,
        'notifications': result.notifications,
        'events': [active.event for active in state.active_events],
    }


def render_turn_briefing(result, state) -> str:
    """Plain-text summary of a resolved turn."""
    return render_template('briefing/turn.txt', get_briefing_context(result, state))
