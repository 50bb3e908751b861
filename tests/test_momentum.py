"""
Tests for momentum.
"""

import pytest
from mechanics.momentum import compute_momentum, get_momentum_label


class TestMomentum:
    """Test compute_momentum."""

    def test_decays_toward_zero(self):
        """Quiet weeks bleed momentum off in both directions."""
        assert compute_momentum(3.0, 0.0, 0.0, False) == pytest.approx(2.8)
        assert compute_momentum(-3.0, 0.0, 0.0, False) == pytest.approx(-2.8)
        assert compute_momentum(0.0, 0.0, 0.0, False) == 0.0

    @pytest.mark.parametrize('poll_change,expected', [
        (2.0, 1.0), (0.7, 0.5), (0.3, 0.0), (-0.3, 0.0), (-0.7, -0.5), (-2.0, -1.0),
    ])
    def test_poll_change_steps(self, poll_change, expected):
        """Poll swings add momentum in steps."""
        assert compute_momentum(0.0, poll_change, 0.0, False) == pytest.approx(expected)

    def test_endorsement_bonus(self):
        """A new endorsement adds a burst of momentum."""
        assert compute_momentum(0.0, 0.0, 0.0, True) == pytest.approx(1.5)

    def test_event_impact(self):
        """Event momentum is added directly."""
        assert compute_momentum(0.0, 0.0, -2.0, False) == pytest.approx(-2.0)

    def test_bounded(self):
        """Momentum stays within its bounds."""
        assert compute_momentum(10.0, 5.0, 5.0, True) == 10
        assert compute_momentum(-10.0, -5.0, -5.0, False) == -10

    def test_labels(self):
        """Labels describe the momentum bands."""
        assert get_momentum_label(6) == 'Surging'
        assert get_momentum_label(0) == 'Neutral'
        assert get_momentum_label(-6) == 'Collapsing'
