"""
Event system for the campaign simulation.

Static event catalog, eligibility filtering, choice resolution and
effect application.
"""

from .models import (
    EventCategory,
    EventSeverity,
    EffectKind,
    EventEffect,
    EventRisk,
    EventChoice,
    EventPrerequisite,
    GameEvent,
    ActiveEvent,
)

from .catalog import ALL_EVENTS, EVENT_TABLES, get_event, list_events

from .event_engine import (
    check_prerequisite,
    is_event_eligible,
    generate_turn_events,
    resolve_event_choice,
    apply_event_effects,
)

__all__ = [
    'EventCategory',
    'EventSeverity',
    'EffectKind',
    'EventEffect',
    'EventRisk',
    'EventChoice',
    'EventPrerequisite',
    'GameEvent',
    'ActiveEvent',
    'ALL_EVENTS',
    'EVENT_TABLES',
    'get_event',
    'list_events',
    'check_prerequisite',
    'is_event_eligible',
    'generate_turn_events',
    'resolve_event_choice',
    'apply_event_effects',
]
