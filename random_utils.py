"""
Deterministic random source for the campaign simulation.

Every stochastic subsystem draws from its own SeededRandom instance,
seeded from the triple ``(base_seed, stream, turn)``. Same seed + same
inputs always produce the same turn.
"""

import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar('T')

_MODULUS = 2 ** 32
_MULTIPLIER = 1664525
_INCREMENT = 1013904223
_MAX_STATE = 0xffffffff

# =============================================================================
# SUB-PHASE STREAMS
# Each subsystem owns one stream id. A new subsystem needs a new id,
# never a reused one. The spacings keep every (stream, turn, offset) of a
# campaign on its own seed and move the first draw of neighbouring seeds
# well apart.
# =============================================================================

POLLING_STREAM = 1      # polling, advertising, fundraising (in that order)
OPPONENT_STREAM = 2
EVENT_STREAM = 3        # seeded with the turn the events are generated for
EVENT_RISK_STREAM = 4   # plus the slot of the event being resolved
ELECTION_STREAM = 5

STREAM_SPACING = 1019733
TURN_SPACING = 17417
SLOT_SPACING = 645      # slot * SLOT_SPACING stays below TURN_SPACING


class SeededRandom:
    """32-bit linear congruential generator with game-friendly helpers."""

    def __init__(self, seed: int):
        self._seed = int(seed) % _MODULUS

    def next(self) -> float:
        """Uniform float in [0, 1]."""
        self._seed = (self._seed * _MULTIPLIER + _INCREMENT) % _MODULUS
        return self._seed / _MAX_STATE

    def next_int(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], both inclusive."""
        value = int(self.next() * (high - low + 1)) + low
        # next() can return exactly 1.0
        return min(value, high)

    def next_float(self, low: float, high: float) -> float:
        return self.next() * (high - low) + low

    def chance(self, probability: float) -> bool:
        return self.next() < probability

    def pick(self, items: Sequence[T]) -> Optional[T]:
        """Random element, or None for an empty sequence."""
        if not items:
            return None
        return items[self.next_int(0, len(items) - 1)]

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Fisher-Yates shuffle of a copy; the input is left untouched."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.next_int(0, i)
            result[i], result[j] = result[j], result[i]
        return result

    def get_seed(self) -> int:
        return self._seed


def stream_for(seed: int, turn: int, stream: int, offset: int = 0) -> SeededRandom:
    """Build the generator for one subsystem's draws on one turn."""
    return SeededRandom(seed + stream * STREAM_SPACING + turn * TURN_SPACING + offset * SLOT_SPACING)


def create_seed() -> int:
    """Fresh base seed for a new game."""
    return random.randint(0, _MAX_STATE)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
