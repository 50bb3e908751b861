"""
Advertising effects.

Each active ad is scored per demographic from its medium's reach, the
demographic's persuadability, targeting and budget relative to the
medium's standard weekly cost. Attack ads hit harder but can backfire.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

from balance import GAME_CONSTANTS
from random_utils import SeededRandom

from .staff import COMMS_DIRECTOR, DIGITAL_DIRECTOR, has_staff

logger = logging.getLogger(__name__)

_COST_PER_WEEK = {
    'tv': GAME_CONSTANTS['TV_COST_PER_WEEK'],
    'digital': GAME_CONSTANTS['DIGITAL_COST_PER_WEEK'],
    'mailers': GAME_CONSTANTS['MAILER_COST_PER_WEEK'],
    'radio': GAME_CONSTANTS['RADIO_COST_PER_WEEK'],
}

_REACH = {
    'tv': GAME_CONSTANTS['TV_REACH'],
    'digital': GAME_CONSTANTS['DIGITAL_REACH'],
    'mailers': GAME_CONSTANTS['MAILER_REACH'],
    'radio': GAME_CONSTANTS['RADIO_REACH'],
}

_TONE_MULTIPLIER = {
    'attack': GAME_CONSTANTS['ATTACK_TONE_MULTIPLIER'],
    'contrast': GAME_CONSTANTS['CONTRAST_TONE_MULTIPLIER'],
}

NEGATIVE_TONES = ('attack', 'contrast')
BACKLASH_REASON = 'backlash'


@dataclass
class AdEffect:
    demographic: str
    player_change: float
    opponent_change: float
    reason: str

    @property
    def is_backlash(self) -> bool:
        return BACKLASH_REASON in self.reason.lower()


def get_ad_cost_per_week(medium: str) -> int:
    """Standard weekly cost of a medium; 0 for an unknown one."""
    return _COST_PER_WEEK.get(medium, 0)


def get_ad_reach(medium: str) -> float:
    return _REACH.get(medium, 0.0)


def calculate_ad_cost(ads: Sequence) -> float:
    return sum(ad.budget for ad in ads)


def compute_ad_effects(ads: Sequence, demographics: Sequence, staff: Sequence,
                       rng: SeededRandom) -> List[AdEffect]:
    """
    Per-demographic persuasion effects of every active ad.

    Args:
        ads: Active AdCampaigns
        demographics: Current DemographicData (read only)
        staff: Staff roster; comms and digital directors boost reach
        rng: The turn's polling stream

    Returns:
        One AdEffect per (ad, reached demographic). A targeted ad reaches
        only its target; an untargeted ad reaches everyone at the spillover factor.
    """
    effects: List[AdEffect] = []
    comms = has_staff(staff, COMMS_DIRECTOR)
    digital = has_staff(staff, DIGITAL_DIRECTOR)

    for ad in ads:
        standard_cost = get_ad_cost_per_week(ad.medium)
        if not standard_cost:
            logger.debug("Skipping ad with unknown medium %r", ad.medium)
            continue

        reach = get_ad_reach(ad.medium)
        if comms:
            reach *= 1 + GAME_CONSTANTS['COMMS_DIRECTOR_AD_BONUS']
        if digital and ad.medium == 'digital':
            reach *= 1 + GAME_CONSTANTS['DIGITAL_DIRECTOR_TARGETING_BONUS']

        budget_multiplier = ad.budget / standard_cost

        for demo in demographics:
            if ad.target_demographic and ad.target_demographic != demo.id:
                continue

            targeted = ad.target_demographic == demo.id
            targeting = GAME_CONSTANTS['TARGETED_FACTOR'] if targeted else GAME_CONSTANTS['UNTARGETED_FACTOR']
            effectiveness = reach * demo.persuadability * targeting * budget_multiplier
            effectiveness *= _TONE_MULTIPLIER.get(ad.tone, 1.0)

            if ad.tone == 'attack' and rng.chance(GAME_CONSTANTS['ATTACK_AD_BACKLASH_CHANCE']):
                logger.debug("Attack ad backlash with %s", demo.id)
                effects.append(AdEffect(
                    demographic=demo.id,
                    player_change=GAME_CONSTANTS['ATTACK_AD_BACKLASH_PENALTY'],
                    opponent_change=0.0,
                    reason=f"Attack ad backlash with {demo.name}",
                ))
                continue

            noise = rng.next_float(-GAME_CONSTANTS['AD_NOISE'], GAME_CONSTANTS['AD_NOISE'])
            player_change = effectiveness + noise
            opponent_change = 0.0
            if ad.tone in NEGATIVE_TONES:
                opponent_change = -player_change * GAME_CONSTANTS['NEGATIVE_AD_OPPONENT_SHARE']

            effects.append(AdEffect(
                demographic=demo.id,
                player_change=player_change,
                opponent_change=opponent_change,
                reason=_describe(ad, targeted),
            ))

    return effects


def _describe(ad, targeted: bool) -> str:
    label = f"{ad.tone} {ad.medium} ad"
    return f"{label} (targeted)" if targeted else label
