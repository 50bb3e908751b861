"""
Event value types: catalog entries, their choices and effects.

Catalog data is written as plain dicts (see catalog.py) and parsed into
these dataclasses once at import.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union


class EventCategory(str, Enum):
    NATIONAL = 'national'
    LOCAL = 'local'
    CAMPAIGN = 'campaign'
    OPPONENT = 'opponent'
    DEBATE = 'debate'


class EventSeverity(str, Enum):
    MINOR = 'minor'
    MODERATE = 'moderate'
    MAJOR = 'major'
    CRISIS = 'crisis'


class EffectKind(str, Enum):
    """Closed set of effects an event choice can have on the campaign."""
    POLL_CHANGE = 'poll_change'
    CASH_CHANGE = 'cash_change'
    MOMENTUM_CHANGE = 'momentum_change'
    DEMOGRAPHIC_CHANGE = 'demographic_change'
    OPPONENT_CHANGE = 'opponent_change'
    GOTV_CHANGE = 'gotv_change'
    EMAIL_LIST_CHANGE = 'email_list_change'


def parse_effect_kind(raw: str) -> Union[EffectKind, str]:
    """Known kinds become EffectKind; anything else stays a raw string and is ignored on apply."""
    try:
        return EffectKind(raw)
    except ValueError:
        return raw


@dataclass
class EventEffect:
    kind: Union[EffectKind, str]
    value: float
    description: str = ''
    demographic: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EventEffect':
        return cls(
            kind=parse_effect_kind(data['type']),
            value=data.get('value', 0),
            description=data.get('description', ''),
            demographic=data.get('demographic'),
        )


@dataclass
class EventRisk:
    """Secondary draw attached to a choice: bad_outcome lands with this probability."""
    probability: float
    bad_outcome: List[EventEffect] = field(default_factory=list)
    description: str = ''

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EventRisk':
        return cls(
            probability=data['probability'],
            bad_outcome=[EventEffect.from_dict(e) for e in data.get('bad_outcome', [])],
            description=data.get('description', ''),
        )


@dataclass
class EventChoice:
    id: str
    text: str
    effects: List[EventEffect] = field(default_factory=list)
    risk: Optional[EventRisk] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EventChoice':
        risk = data.get('risk')
        return cls(
            id=data['id'],
            text=data['text'],
            effects=[EventEffect.from_dict(e) for e in data.get('effects', [])],
            risk=EventRisk.from_dict(risk) if risk else None,
        )


@dataclass
class EventPrerequisite:
    """poll_above | poll_below | cash_above | cash_below | has_staff | momentum_above | momentum_below"""
    type: str
    value: Any


@dataclass
class GameEvent:
    id: str
    category: EventCategory
    title: str
    description: str
    severity: EventSeverity
    phase_range: Tuple[str, str]
    probability: float
    one_time: bool = False
    turn_range: Optional[Tuple[int, int]] = None
    prerequisites: List[EventPrerequisite] = field(default_factory=list)
    choices: List[EventChoice] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GameEvent':
        turn_range = data.get('turn_range')
        return cls(
            id=data['id'],
            category=EventCategory(data['category']),
            title=data['title'],
            description=data['description'],
            severity=EventSeverity(data.get('severity', 'minor')),
            phase_range=tuple(data['phase_range']),
            probability=data['probability'],
            one_time=data.get('one_time', False),
            turn_range=tuple(turn_range) if turn_range else None,
            prerequisites=[EventPrerequisite(p['type'], p['value'])
                           for p in data.get('prerequisites', [])],
            choices=[EventChoice.from_dict(c) for c in data.get('choices', [])],
        )

    def get_choice(self, choice_id: str) -> Optional[EventChoice]:
        for choice in self.choices:
            if choice.id == choice_id:
                return choice
        return None


@dataclass
class ActiveEvent:
    """A fired event awaiting (or holding) the player's decision."""
    event: GameEvent
    turn: int
    slot: int = 0  # position in the turn's draw, fixed for the event's lifetime
    chosen: Optional[str] = None
    resolved: bool = False
    outcome: List[str] = field(default_factory=list)
