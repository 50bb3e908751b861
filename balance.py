"""
Balance table for the campaign simulation.

These are the laws of the campaign universe: every subsystem reads its
numbers from here and nowhere else.
"""

from datetime import date, timedelta
from typing import Any, Dict


# =============================================================================
# DIFFICULTY PRESETS
# =============================================================================

DIFFICULTY_CONFIGS: Dict[str, Dict[str, Any]] = {
    'safe-seat': {
        'starting_cash': 500000,
        'player_starting_support': 52,
        'opponent_starting_support': 40,
        'label': 'Safe Seat',
        'description': 'Tutorial mode - comfortable lead',
    },
    'lean': {
        'starting_cash': 300000,
        'player_starting_support': 48,
        'opponent_starting_support': 44,
        'label': 'Lean',
        'description': 'Standard difficulty - slight edge',
    },
    'toss-up': {
        'starting_cash': 200000,
        'player_starting_support': 45,
        'opponent_starting_support': 45,
        'label': 'Toss-Up',
        'description': 'Fair fight - dead even',
    },
    'lean-away': {
        'starting_cash': 150000,
        'player_starting_support': 42,
        'opponent_starting_support': 48,
        'label': 'Lean Away',
        'description': 'Uphill battle - trailing from the start',
    },
    'hostile': {
        'starting_cash': 100000,
        'player_starting_support': 38,
        'opponent_starting_support': 50,
        'label': 'Hostile',
        'description': 'Near-impossible - for experts only',
    },
}


# =============================================================================
# GAME CONSTANTS
# =============================================================================

GAME_CONSTANTS: Dict[str, Any] = {
    'MAX_TURNS': 26,
    'BASE_ACTION_POINTS': 5,
    'CAMPAIGN_MANAGER_BONUS_AP': 1,

    # Polling
    'BASE_MARGIN_OF_ERROR': 3,
    'POLLSTER_MARGIN_OF_ERROR': 1.5,
    'UNDECIDED_DECAY_RATE': 0.02,
    'UNDECIDED_MIN': 2,
    'UNDECIDED_MAX': 30,
    'POLL_CHANGE_LOG_THRESHOLD': 0.1,
    'CAMPAIGN_NOISE': 0.3,
    'MOMENTUM_DEMOGRAPHIC_DAMPING': 0.3,

    # Fundraising
    'SMALL_DONOR_BASE': 5000,
    'LARGE_DONOR_BASE': 15000,
    'LARGE_DONOR_DIMINISHING_FACTOR': 0.85,
    'LARGE_DONOR_SATURATION_UNIT': 100000,
    'FUNDRAISING_NOISE_MIN': 0.85,
    'FUNDRAISING_NOISE_MAX': 1.15,
    'FUNDRAISING_MOMENTUM_FACTOR': 0.02,
    'ONLINE_MOMENTUM_FACTOR': 0.01,
    'PAC_MONEY_BASE': 30000,
    'PAC_MIN_ENDORSEMENTS': 2,
    'PAC_MAX_ENDORSEMENTS': 5,
    'ONLINE_INCOME_BASE_RATE': 2000,
    'ONLINE_INCOME_PER_1000_EMAILS': 100,
    'STARTING_EMAIL_LIST': 1000,
    'EMAIL_LIST_GROWTH_PER_FUNDRAISE': 500,
    'FINANCE_DIRECTOR_BONUS': 0.3,
    'DIGITAL_DIRECTOR_ONLINE_BONUS': 0.2,

    # Advertising
    'TV_COST_PER_WEEK': 50000,
    'DIGITAL_COST_PER_WEEK': 15000,
    'MAILER_COST_PER_WEEK': 8000,
    'RADIO_COST_PER_WEEK': 12000,
    'TV_REACH': 0.4,
    'DIGITAL_REACH': 0.25,
    'MAILER_REACH': 0.15,
    'RADIO_REACH': 0.2,
    'TARGETED_FACTOR': 1.5,
    'UNTARGETED_FACTOR': 0.6,
    'ATTACK_TONE_MULTIPLIER': 1.5,
    'CONTRAST_TONE_MULTIPLIER': 1.2,
    'NEGATIVE_AD_OPPONENT_SHARE': 0.4,
    'AD_NOISE': 0.1,
    'COMMS_DIRECTOR_AD_BONUS': 0.25,
    'DIGITAL_DIRECTOR_TARGETING_BONUS': 0.35,
    'ATTACK_AD_BACKLASH_CHANCE': 0.3,
    'ATTACK_AD_BACKLASH_PENALTY': -1,

    # Campaigning
    'CAMPAIGN_BASE_POLL_BOOST': 0.5,
    'OPPO_RESEARCH_OPPONENT_HIT': 0.3,
    'DEBATE_PREP_MOMENTUM': 0.25,

    # GOTV
    'GOTV_BASE_INVESTMENT': 10000,
    'GOTV_TURNOUT_MULTIPLIER': 0.5,
    'GOTV_INVESTMENT_UNIT': 100000,
    'FIELD_DIRECTOR_GOTV_BONUS': 0.4,
    'GOTV_AVAILABLE_TURN': 21,

    # Opponent
    'OPPONENT_BASE_FUNDRAISING': 45000,
    'OPPONENT_STARTING_AD_SPENDING': 30000,
    'OPPONENT_ATTACK_POLL_EFFECT': -1.5,
    'OPPONENT_ADAPTATION_THRESHOLD': -3,
    'OPPONENT_ATTACK_EXIT_MARGIN': 3,
    'OPPONENT_GOTV_MIN': 15000,
    'OPPONENT_GOTV_SPREAD': 10000,
    'OPPONENT_ENDORSEMENT_CHANCE': 0.10,
    'OPPONENT_ENDORSEMENT_MIN_TURN': 5,
    'OPPONENT_POLL_EFFECT_LIMIT': 2,

    # Momentum
    'MOMENTUM_MAX': 10,
    'MOMENTUM_MIN': -10,
    'MOMENTUM_DECAY': 0.2,
    'MOMENTUM_POLL_EFFECT': 0.3,
    'ENDORSEMENT_MOMENTUM_BONUS': 1.5,

    # Election
    'ELECTION_BASE_TURNOUT': 0.55,
    'ELECTION_TURNOUT_NOISE': 0.05,
    'ELECTION_TURNOUT_MIN': 0.3,
    'ELECTION_TURNOUT_MAX': 0.85,
    'ELECTION_DAY_VARIANCE': 2,
    'ELECTION_DEMOGRAPHIC_VARIANCE': 1.5,
    'RECOUNT_THRESHOLD': 2,
    'GOTV_FINAL_EFFECT_MAX': 3,
    'DISTRICT_POPULATION': 839000,

    # Staff
    'STAFF_AFFORDABILITY_WEEKS': 4,

    # Events
    'EVENTS_PER_TURN_MAX': 2,
    'DEBATE_TURNS': (10, 17, 23),
}

MAX_TURNS = GAME_CONSTANTS['MAX_TURNS']
MOMENTUM_MIN = GAME_CONSTANTS['MOMENTUM_MIN']
MOMENTUM_MAX = GAME_CONSTANTS['MOMENTUM_MAX']
UNDECIDED_MIN = GAME_CONSTANTS['UNDECIDED_MIN']
UNDECIDED_MAX = GAME_CONSTANTS['UNDECIDED_MAX']
GOTV_AVAILABLE_TURN = GAME_CONSTANTS['GOTV_AVAILABLE_TURN']
EVENTS_PER_TURN_MAX = GAME_CONSTANTS['EVENTS_PER_TURN_MAX']
RECOUNT_THRESHOLD = GAME_CONSTANTS['RECOUNT_THRESHOLD']


# =============================================================================
# ACTIONS
# AP cost is per unit of intensity.
# =============================================================================

ACTION_DEFINITIONS: Dict[str, Dict[str, Any]] = {
    'fundraise': {
        'name': 'Fundraise',
        'description': 'Call donors and host fundraising events',
        'ap_cost': 1,
    },
    'campaign': {
        'name': 'Campaign',
        'description': 'Rallies, town halls and door knocking',
        'ap_cost': 1,
    },
    'seek-endorsement': {
        'name': 'Seek Endorsement',
        'description': 'Court the organizations you are pursuing',
        'ap_cost': 1,
    },
    'oppo-research': {
        'name': 'Oppo Research',
        'description': 'Investigate opponent vulnerabilities',
        'ap_cost': 1,
    },
    'debate-prep': {
        'name': 'Debate Prep',
        'description': 'Prepare for upcoming debate performances',
        'ap_cost': 1,
    },
    'gotv': {
        'name': 'Get Out The Vote',
        'description': 'Build the turnout operation for election day',
        'ap_cost': 1,
    },
}

ACTION_TYPES = tuple(ACTION_DEFINITIONS)

AD_MEDIUMS = ('tv', 'digital', 'mailers', 'radio')
AD_TONES = ('positive-bio', 'positive-issue', 'contrast', 'attack')


# =============================================================================
# CAMPAIGN CALENDAR
# =============================================================================

PHASE_ORDER = ('primary', 'early', 'mid', 'final', 'election')

PHASE_RANGES: Dict[str, Dict[str, int]] = {
    'primary': {'start': 1, 'end': 6},
    'early': {'start': 7, 'end': 14},
    'mid': {'start': 15, 'end': 20},
    'final': {'start': 21, 'end': 26},
    'election': {'start': 27, 'end': 27},
}

CAMPAIGN_START_DATE = date(2026, 6, 1)


def get_phase_for_turn(turn: int) -> str:
    """Map a turn number to its campaign phase."""
    for phase in PHASE_ORDER:
        if turn <= PHASE_RANGES[phase]['end']:
            return phase
    return 'election'


def get_phase_span(start: str, end: str) -> tuple:
    """All phases from start to end inclusive, or () if either is unknown."""
    if start not in PHASE_ORDER or end not in PHASE_ORDER:
        return ()
    return PHASE_ORDER[PHASE_ORDER.index(start):PHASE_ORDER.index(end) + 1]


def get_turn_date(turn: int) -> str:
    """Calendar label for a turn, e.g. 'Jun 8'. One turn is one week."""
    day = CAMPAIGN_START_DATE + timedelta(weeks=turn - 1)
    return f"{day.strftime('%b')} {day.day}"
