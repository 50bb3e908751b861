"""
Tests for staff lookups, salaries and bonuses.
"""

from decimal import Decimal

from content import build_staff
from mechanics.staff import (
    can_afford_staff, get_action_points, get_margin_of_error, get_staff_benefit_description,
    get_weekly_staff_cost, has_staff, is_staff_available,
)
from state import CampaignFinances


def _staff(*roles):
    staff = build_staff()
    for member in staff:
        if member.role in roles:
            member.hired = True
    return staff


class TestStaff:
    """Test staff lookups and bonuses."""

    def test_unknown_role_confers_nothing(self):
        """Unknown roles are simply absent."""
        assert not has_staff(_staff(), 'astrologer')
        assert get_staff_benefit_description('astrologer') == ''

    def test_campaign_manager_adds_point(self):
        """A campaign manager raises the AP budget to six."""
        assert get_action_points(_staff()) == 5
        assert get_action_points(_staff('campaign-manager')) == 6

    def test_pollster_margin(self):
        """A pollster halves the margin of error."""
        assert get_margin_of_error(_staff()) == 3
        assert get_margin_of_error(_staff('pollster')) == 1.5

    def test_weekly_cost_counts_hired_only(self):
        """Only hired staff draw salary."""
        assert get_weekly_staff_cost(_staff()) == Decimal('0')
        assert get_weekly_staff_cost(_staff('campaign-manager', 'pollster')) == Decimal('13000')

    def test_affordability_needs_four_weeks(self):
        """Hiring needs four weeks of salary in the bank."""
        staff = _staff()
        assert can_afford_staff('campaign-manager', staff, CampaignFinances(cash_on_hand=Decimal('32000')))
        assert not can_afford_staff('campaign-manager', staff, CampaignFinances(cash_on_hand=Decimal('31999')))

    def test_already_hired_not_affordable(self):
        """A role already on the payroll cannot be hired again."""
        staff = _staff('campaign-manager')
        assert not can_afford_staff('campaign-manager', staff, CampaignFinances(cash_on_hand=Decimal('1000000')))

    def test_pollster_available_later(self):
        """The pollster joins the market in week eight."""
        pollster = next(s for s in build_staff() if s.role == 'pollster')
        assert not is_staff_available(pollster, 7)
        assert is_staff_available(pollster, 8)
