"""
Campaign state value types.

The calling shell owns the CampaignState between turns. The engine receives
it, works on copies and hands back a new snapshot; no subsystem keeps a
reference across calls.

All numeric fields are bounded on init. Money is kept as Decimal to the cent.
"""

import copy
from dataclasses import dataclass, asdict, field
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from balance import MOMENTUM_MAX, MOMENTUM_MIN, UNDECIDED_MAX, UNDECIDED_MIN
from random_utils import clamp

if TYPE_CHECKING:
    from events.models import ActiveEvent

CENT = Decimal('0.01')


def to_money(value) -> Decimal:
    """Quantize any number to a cent-precision Decimal."""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


class OpponentStrategy(str, Enum):
    """Named states of the opponent's strategy machine."""
    ESTABLISHMENT = 'establishment'
    AGGRESSIVE = 'aggressive'
    DEFENSIVE = 'defensive'


# =============================================================================
# POLLING
# =============================================================================

@dataclass
class DemographicData:
    """One voter segment. Its support numbers are the source of truth for polls."""

    id: str
    name: str
    electorate_pct: float
    base_lean: float  # -100 (strong D) .. +100 (strong R)
    persuadability: float
    key_issues: List[str] = field(default_factory=list)
    current_support: float = 0.0
    opponent_support: float = 0.0

    def __post_init__(self):
        self.persuadability = clamp(float(self.persuadability), 0.0, 1.0)
        self.current_support = clamp(float(self.current_support), 0.0, 100.0)
        self.opponent_support = clamp(float(self.opponent_support), 0.0, 100.0)


@dataclass
class PollSnapshot:
    turn: int
    player_support: float
    opponent_support: float
    undecided: float


@dataclass
class PollState:
    player_support: float
    opponent_support: float
    undecided: float
    margin_of_error: float
    demographics: List[DemographicData] = field(default_factory=list)
    history: List[PollSnapshot] = field(default_factory=list)

    def __post_init__(self):
        self.undecided = clamp(float(self.undecided), UNDECIDED_MIN, UNDECIDED_MAX)
        self.player_support = clamp(float(self.player_support), 0.0, 100.0)
        self.opponent_support = clamp(float(self.opponent_support), 0.0, 100.0)

    def get_demographic(self, demographic_id: Optional[str]) -> Optional[DemographicData]:
        for demo in self.demographics:
            if demo.id == demographic_id:
                return demo
        return None

    @property
    def margin(self) -> float:
        """Player lead in points (negative when trailing)."""
        return self.player_support - self.opponent_support

    def weighted_support(self) -> Tuple[float, float]:
        """Electorate-share weighted (player, opponent) support over demographics."""
        player = sum(d.current_support * d.electorate_pct / 100 for d in self.demographics)
        opponent = sum(d.opponent_support * d.electorate_pct / 100 for d in self.demographics)
        return player, opponent

    def recompute_aggregates(self) -> None:
        """Derive the aggregate numbers from demographics, leaving room for the undecided pool."""
        player, opponent = self.weighted_support()
        ceiling = 100.0 - self.undecided
        self.player_support = clamp(player, 0.0, ceiling)
        self.opponent_support = clamp(opponent, 0.0, ceiling)


# =============================================================================
# FINANCES
# =============================================================================

@dataclass
class FundraisingSnapshot:
    turn: int
    raised: Decimal
    spent: Decimal
    cash_on_hand: Decimal


@dataclass
class CampaignFinances:
    cash_on_hand: Decimal = field(default_factory=lambda: Decimal('0'))
    total_raised: Decimal = field(default_factory=lambda: Decimal('0'))
    total_spent: Decimal = field(default_factory=lambda: Decimal('0'))
    small_donors: Decimal = field(default_factory=lambda: Decimal('0'))
    large_donors: Decimal = field(default_factory=lambda: Decimal('0'))
    pac_money: Decimal = field(default_factory=lambda: Decimal('0'))
    online_income_rate: Decimal = field(default_factory=lambda: Decimal('0'))
    email_list_size: int = 0
    weekly_burn_rate: Decimal = field(default_factory=lambda: Decimal('0'))
    fundraising_history: List[FundraisingSnapshot] = field(default_factory=list)

    def __post_init__(self):
        self._quantize()

    def _quantize(self):
        """Keep every money field at cent precision."""
        for name in ('cash_on_hand', 'total_raised', 'total_spent', 'small_donors',
                     'large_donors', 'pac_money', 'online_income_rate', 'weekly_burn_rate'):
            setattr(self, name, to_money(getattr(self, name)))
        self.email_list_size = max(0, int(self.email_list_size))


# =============================================================================
# CAMPAIGN ASSETS
# =============================================================================

@dataclass
class AdCampaign:
    medium: str  # tv | digital | mailers | radio
    tone: str    # positive-bio | positive-issue | contrast | attack
    budget: float
    target_demographic: Optional[str] = None


@dataclass
class StaffMember:
    id: str
    role: str
    name: str
    cost: int  # weekly salary
    description: str = ''
    hired: bool = False
    available_turn: int = 1


@dataclass
class Endorsement:
    """
    Lifecycle: not pursued -> pursued -> secured.

    Securing is irreversible and its demographic boost is applied exactly
    once, at the transition.
    """

    id: str
    name: str
    description: str
    demographic_effects: Dict[str, float] = field(default_factory=dict)
    fundraising_bonus: int = 0  # dollars per week once secured
    requirements: str = ''
    secured: bool = False
    pursued: bool = False
    turns_to_secure: int = 1
    turns_pursued: int = 0


@dataclass
class OpponentState:
    name: str
    party: str
    cash_on_hand: Decimal = field(default_factory=lambda: Decimal('0'))
    total_spent: Decimal = field(default_factory=lambda: Decimal('0'))
    approval_rating: float = 50.0
    attack_mode: bool = False
    endorsements_secured: List[str] = field(default_factory=list)
    staff_level: int = 3  # 1-5
    ad_spending: float = 0.0
    gotv_investment: float = 0.0
    strategy: OpponentStrategy = OpponentStrategy.ESTABLISHMENT

    def __post_init__(self):
        self.cash_on_hand = max(Decimal('0'), to_money(self.cash_on_hand))
        self.total_spent = to_money(self.total_spent)
        self.approval_rating = clamp(float(self.approval_rating), 0.0, 100.0)
        self.staff_level = int(clamp(int(self.staff_level), 1, 5))
        self.strategy = OpponentStrategy(self.strategy)


# =============================================================================
# TURN INPUT / OUTPUT RECORDS
# =============================================================================

@dataclass
class CampaignAction:
    """One allocated action: 1 AP per unit of intensity."""
    type: str
    intensity: int = 1
    target: Optional[str] = None


@dataclass
class PollChange:
    demographic: str
    player_change: float
    opponent_change: float
    reason: str


@dataclass
class Notification:
    level: str  # info | success | warning | danger
    title: str
    message: str


@dataclass
class FinancialSummary:
    income: Decimal
    expenses: Decimal
    net: Decimal
    breakdown: List[Dict[str, Any]] = field(default_factory=list)


@dataclass
class DemographicResult:
    demographic: str
    player_pct: float
    opponent_pct: float
    turnout_pct: float


@dataclass
class ElectionResult:
    player_votes: int
    opponent_votes: int
    player_pct: float
    opponent_pct: float
    margin: float
    winner: str  # player | opponent
    recount: bool
    turnout: float
    demographic_breakdown: List[DemographicResult] = field(default_factory=list)


@dataclass
class PostGameScore:
    victory: bool
    margin: float
    funds_remaining: Decimal
    endorsements_won: int
    total_endorsements: int
    approval_peak: float
    final_grade: str
    total_score: int


# =============================================================================
# CAMPAIGN STATE
# =============================================================================

@dataclass
class CampaignState:
    """Complete per-game snapshot."""

    difficulty: str
    polls: PollState
    finances: CampaignFinances
    opponent: OpponentState
    seed: int
    game_id: str = ''
    current_turn: int = 1
    max_turns: int = 26
    phase: str = 'primary'
    action_points: int = 5
    max_action_points: int = 5
    ads: List[AdCampaign] = field(default_factory=list)
    staff: List[StaffMember] = field(default_factory=list)
    endorsements: List[Endorsement] = field(default_factory=list)
    momentum: float = 0.0
    gotv_investment: float = 0.0
    active_events: List['ActiveEvent'] = field(default_factory=list)
    event_history: List['ActiveEvent'] = field(default_factory=list)
    game_over: bool = False
    winner: Optional[str] = None
    final_margin: Optional[float] = None
    election_result: Optional[ElectionResult] = None

    def __post_init__(self):
        self._clamp_all_values()

    def _clamp_all_values(self):
        """Ensure scalar fields are within their valid bounds."""
        self.momentum = clamp(float(self.momentum), MOMENTUM_MIN, MOMENTUM_MAX)
        self.gotv_investment = max(0.0, float(self.gotv_investment))
        self.action_points = max(0, int(self.action_points))

    def copy(self) -> 'CampaignState':
        """Independent snapshot; nothing is shared with this one."""
        return copy.deepcopy(self)

    def secured_endorsements(self) -> List[Endorsement]:
        return [e for e in self.endorsements if e.secured]

    def event_history_ids(self) -> List[str]:
        """Ids of every event already fired, archived or still pending."""
        return ([e.event.id for e in self.event_history] +
                [e.event.id for e in self.active_events])

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary view; Decimal money is rendered as strings."""
        return _stringify_decimals(asdict(self))


def _stringify_decimals(value):
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _stringify_decimals(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_stringify_decimals(v) for v in value]
    return value
