"""
Tests for the seeded random source - same seed, same campaign.
"""

import pytest
from random_utils import (
    SeededRandom, stream_for, clamp,
    POLLING_STREAM, OPPONENT_STREAM, EVENT_STREAM, EVENT_RISK_STREAM, ELECTION_STREAM,
    STREAM_SPACING, TURN_SPACING, SLOT_SPACING,
)


class TestSeededRandom:
    """Test the LCG and its helpers."""

    def test_same_seed_same_sequence(self):
        """Two generators with one seed produce identical draws."""
        for seed in (0, 1, 42, 123456789, 2 ** 32 - 1):
            a = SeededRandom(seed)
            b = SeededRandom(seed)
            assert [a.next() for _ in range(50)] == [b.next() for _ in range(50)]

    def test_different_seeds_diverge_on_first_draw(self):
        """Neighbouring seeds differ immediately."""
        diverged = sum(1 for seed in range(100)
                       if SeededRandom(seed).next() != SeededRandom(seed + 1).next())
        assert diverged == 100

    def test_next_in_unit_interval(self):
        """next() stays within [0, 1]."""
        rng = SeededRandom(7)
        for _ in range(1000):
            assert 0.0 <= rng.next() <= 1.0

    def test_next_int_inclusive_bounds(self):
        """next_int covers both ends and nothing outside."""
        rng = SeededRandom(99)
        seen = {rng.next_int(1, 4) for _ in range(500)}
        assert seen == {1, 2, 3, 4}

    def test_next_float_range(self):
        """next_float respects its bounds."""
        rng = SeededRandom(3)
        for _ in range(500):
            assert -0.3 <= rng.next_float(-0.3, 0.3) <= 0.3

    def test_chance_extremes(self):
        """chance(0) never fires."""
        rng = SeededRandom(11)
        assert not any(rng.chance(0.0) for _ in range(200))

    def test_pick_empty_returns_none(self):
        """pick() on an empty sequence returns None."""
        assert SeededRandom(1).pick([]) is None

    def test_pick_returns_member(self):
        """pick() returns one of the items."""
        items = ['a', 'b', 'c']
        rng = SeededRandom(5)
        for _ in range(50):
            assert rng.pick(items) in items

    def test_shuffle_is_permutation_and_leaves_input(self):
        """shuffle() returns a permutation of a copy."""
        items = list(range(20))
        shuffled = SeededRandom(8).shuffle(items)
        assert items == list(range(20))
        assert sorted(shuffled) == items

    def test_shuffle_deterministic(self):
        """Same seed gives the same order."""
        items = list(range(10))
        assert SeededRandom(4).shuffle(items) == SeededRandom(4).shuffle(items)


class TestStreams:
    """Test per-subsystem seed streams."""

    def test_stream_constants_are_distinct(self):
        """No two subsystems share a stream id."""
        streams = [POLLING_STREAM, OPPONENT_STREAM, EVENT_STREAM, EVENT_RISK_STREAM, ELECTION_STREAM]
        assert len(set(streams)) == len(streams)

    def test_stream_for_seed_formula(self):
        """stream_for spaces stream, turn and offset apart."""
        rng = stream_for(100, 3, POLLING_STREAM, offset=2)
        expected = SeededRandom(100 + POLLING_STREAM * STREAM_SPACING + 3 * TURN_SPACING + 2 * SLOT_SPACING)
        assert rng.get_seed() == expected.get_seed()
        assert rng.next() == expected.next()

    def test_seeds_distinct_across_campaign(self):
        """Every (stream, turn, slot) of a full campaign gets its own seed."""
        streams = [POLLING_STREAM, OPPONENT_STREAM, EVENT_STREAM, EVENT_RISK_STREAM, ELECTION_STREAM]
        seeds = [stream_for(12345, turn, stream, offset=slot).get_seed()
                 for stream in streams for turn in range(1, 28) for slot in range(4)]
        assert len(set(seeds)) == len(seeds)

    def test_stream_and_turn_do_not_alias(self):
        """Polling on turn 2 and opponent on turn 1 get different seeds."""
        assert stream_for(7, 2, POLLING_STREAM).get_seed() != stream_for(7, 1, OPPONENT_STREAM).get_seed()
        assert stream_for(7, 5, POLLING_STREAM).get_seed() != stream_for(7, 1, EVENT_RISK_STREAM).get_seed()
        assert stream_for(7, 7, POLLING_STREAM).get_seed() != stream_for(7, 1, ELECTION_STREAM).get_seed()

    def test_streams_do_not_collide(self):
        """Polling and opponent streams for one turn draw differently."""
        assert stream_for(42, 5, POLLING_STREAM).next() != stream_for(42, 5, OPPONENT_STREAM).next()

    def test_neighbouring_slots_draw_apart(self):
        """Slot 0 and slot 1 of one turn do not open on nearly the same draw."""
        gaps = [abs(stream_for(seed, 4, EVENT_RISK_STREAM, offset=0).next() -
                    stream_for(seed, 4, EVENT_RISK_STREAM, offset=1).next()) for seed in range(20)]
        assert min(gaps) > 0.1


class TestClamp:
    """Test clamp helper."""

    @pytest.mark.parametrize('value,expected', [(-5, 0), (50, 50), (150, 100)])
    def test_clamp(self, value, expected):
        """Values are pinned to the range."""
        assert clamp(value, 0, 100) == expected
