"""
Election night: one stochastic tabulation across every demographic, and
the post-game score.
"""

import logging
from decimal import Decimal
from typing import List

from balance import GAME_CONSTANTS, RECOUNT_THRESHOLD
from random_utils import SeededRandom, clamp
from state import DemographicResult, ElectionResult, PostGameScore

from .gotv import get_gotv_turnout_bonus

logger = logging.getLogger(__name__)

GRADE_LADDER = (
    (90, 'A+'),
    (80, 'A'),
    (70, 'B+'),
    (60, 'B'),
    (50, 'C+'),
    (40, 'C'),
    (30, 'D'),
)


def compute_election_result(state, rng: SeededRandom) -> ElectionResult:
    """
    Tabulate the vote.

    A single day-of swing is shared by every demographic; each demographic
    then draws its own turnout noise and variance. The opponent moves by
    half of both swings in the opposite direction. The GOTV differential
    nudges turnout where the player leads and adds to player support.
    """
    base_turnout = GAME_CONSTANTS['ELECTION_BASE_TURNOUT']
    gotv_differential = (get_gotv_turnout_bonus(state.gotv_investment)
                         - get_gotv_turnout_bonus(state.opponent.gotv_investment))

    day_swing = GAME_CONSTANTS['ELECTION_DAY_VARIANCE']
    day_variance = rng.next_float(-day_swing, day_swing)

    turnout_noise = GAME_CONSTANTS['ELECTION_TURNOUT_NOISE']
    demo_swing = GAME_CONSTANTS['ELECTION_DEMOGRAPHIC_VARIANCE']

    breakdown: List[DemographicResult] = []
    for demo in state.polls.demographics:
        demo_turnout = base_turnout + rng.next_float(-turnout_noise, turnout_noise)
        if demo.current_support > demo.opponent_support:
            demo_turnout += gotv_differential * 0.02
        else:
            demo_turnout -= gotv_differential * 0.01
        demo_turnout = clamp(demo_turnout, GAME_CONSTANTS['ELECTION_TURNOUT_MIN'],
                             GAME_CONSTANTS['ELECTION_TURNOUT_MAX'])

        variance = rng.next_float(-demo_swing, demo_swing)
        player_pct = clamp(demo.current_support + day_variance + variance + gotv_differential, 0, 100)
        opponent_pct = clamp(demo.opponent_support - day_variance * 0.5 - variance * 0.5, 0, 100)

        breakdown.append(DemographicResult(
            demographic=demo.id,
            player_pct=player_pct,
            opponent_pct=opponent_pct,
            turnout_pct=demo_turnout * 100,
        ))

    total_voters = GAME_CONSTANTS['DISTRICT_POPULATION'] * base_turnout
    player_votes = 0.0
    opponent_votes = 0.0
    for demo, result in zip(state.polls.demographics, breakdown):
        voters = total_voters * (demo.electorate_pct / 100) * (result.turnout_pct / 100)
        player_votes += voters * result.player_pct / 100
        opponent_votes += voters * result.opponent_pct / 100

    player_votes = int(round(player_votes))
    opponent_votes = int(round(opponent_votes))
    cast = player_votes + opponent_votes

    if cast:
        player_pct = player_votes / cast * 100
        opponent_pct = opponent_votes / cast * 100
    else:
        player_pct = opponent_pct = 50.0
    margin = player_pct - opponent_pct

    result = ElectionResult(
        player_votes=player_votes,
        opponent_votes=opponent_votes,
        player_pct=player_pct,
        opponent_pct=opponent_pct,
        margin=margin,
        winner='player' if margin > 0 else 'opponent',
        recount=abs(margin) < RECOUNT_THRESHOLD,
        turnout=base_turnout * 100,
        demographic_breakdown=breakdown,
    )
    logger.info("Election: %d - %d (margin %.2f, recount=%s)",
                player_votes, opponent_votes, margin, result.recount)
    return result


def get_grade(score: float) -> str:
    for floor, grade in GRADE_LADDER:
        if score >= floor:
            return grade
    return 'F'


def compute_post_game_score(result: ElectionResult, state) -> PostGameScore:
    victory = result.winner == 'player'
    score = 50.0 if victory else 0.0
    score += result.margin * 5

    cash = state.finances.cash_on_hand
    if cash > Decimal('50000'):
        score += 5
    if cash > Decimal('100000'):
        score += 5

    endorsements_won = len(state.secured_endorsements())
    score += endorsements_won * 3
    score += min(state.finances.email_list_size / 1000, 10)

    peak = max([s.player_support for s in state.polls.history] + [state.polls.player_support])

    return PostGameScore(
        victory=victory,
        margin=result.margin,
        funds_remaining=cash,
        endorsements_won=endorsements_won,
        total_endorsements=len(state.endorsements),
        approval_peak=peak,
        final_grade=get_grade(score),
        total_score=int(round(score)),
    )
