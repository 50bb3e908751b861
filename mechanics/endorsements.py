"""
Endorsement lifecycle: not pursued -> pursued -> secured.

process_endorsements only flips flags; the caller applies each newly
secured endorsement's boost with apply_endorsement_effects, once.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from random_utils import clamp

_THRESHOLD = re.compile(r'(\d+(?:\.\d+)?)\s*%')


@dataclass
class EndorsementResult:
    secured: List = field(default_factory=list)
    progressed: List = field(default_factory=list)


def process_endorsements(endorsements: Sequence, actions: Sequence, polls=None) -> EndorsementResult:
    """
    Advance every pursued endorsement by one week.

    Mutates the endorsements passed in; hand it copies. Nothing moves
    unless a seek-endorsement action was taken this week.
    """
    result = EndorsementResult()
    if not any(a.type == 'seek-endorsement' for a in actions):
        return result

    for endorsement in endorsements:
        if endorsement.secured or not endorsement.pursued:
            continue
        endorsement.turns_pursued += 1
        if endorsement.turns_pursued >= endorsement.turns_to_secure:
            endorsement.secured = True
            endorsement.pursued = False
            result.secured.append(endorsement)
        else:
            result.progressed.append(endorsement)

    return result


def apply_endorsement_effects(endorsement, demographics: Sequence) -> None:
    """Add the endorsement's per-demographic boosts to player support."""
    for demo in demographics:
        effect = endorsement.demographic_effects.get(demo.id)
        if effect:
            demo.current_support = clamp(demo.current_support + effect, 0, 100)


def get_support_requirement(requirements: str) -> Optional[float]:
    """Poll threshold named in a requirement string like 'Requires 40% support'."""
    match = _THRESHOLD.search(requirements or '')
    return float(match.group(1)) if match else None


def can_pursue_endorsement(endorsement, player_support: float) -> bool:
    if endorsement.secured or endorsement.pursued:
        return False
    threshold = get_support_requirement(endorsement.requirements)
    return threshold is None or player_support >= threshold
