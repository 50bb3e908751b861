"""
Tests for fundraising - donors, PACs and passive income.
"""

from decimal import Decimal

from content import build_staff
from mechanics.fundraising import (
    compute_fundraising, get_online_income_rate, get_pac_share, large_donor_multiplier,
)
from random_utils import SeededRandom
from state import CampaignAction, CampaignFinances


def _finances(**overrides):
    values = {'cash_on_hand': Decimal('200000'), 'online_income_rate': Decimal('2000'),
              'email_list_size': 1000}
    values.update(overrides)
    return CampaignFinances(**values)


def _staff(*roles):
    staff = build_staff()
    for member in staff:
        if member.role in roles:
            member.hired = True
    return staff


FUNDRAISE = [CampaignAction('fundraise', 2)]


class TestFundraising:
    """Test compute_fundraising."""

    def test_no_actions_yields_online_income_only(self):
        """With no actions, only passive online income arrives."""
        result = compute_fundraising(_finances(), [], _staff(), 0.0, 1, SeededRandom(1))

        assert result.small_donors == Decimal('0')
        assert result.large_donors == Decimal('0')
        assert result.pac_money == Decimal('0')
        assert result.online_income == Decimal('2000.00')
        assert result.total_raised == result.online_income

    def test_total_at_least_online_income(self):
        """Total raised never falls below online income."""
        for momentum in (-10.0, 0.0, 10.0):
            result = compute_fundraising(_finances(), FUNDRAISE, _staff(), momentum, 1, SeededRandom(4))
            assert result.total_raised >= result.online_income

    def test_fundraising_is_monotonic(self):
        """Fundraising with a fundraise action beats fundraising without."""
        for seed in range(20):
            with_action = compute_fundraising(_finances(), FUNDRAISE, _staff(), 0.0, 1, SeededRandom(seed))
            without = compute_fundraising(_finances(), [], _staff(), 0.0, 1, SeededRandom(seed))
            assert with_action.total_raised >= without.total_raised

    def test_large_donor_diminishing_returns(self):
        """Tapped-out large donors give less for the same effort."""
        fresh = compute_fundraising(_finances(large_donors=Decimal('0')), FUNDRAISE, _staff(), 0.0, 1,
                                    SeededRandom(7))
        tapped = compute_fundraising(_finances(large_donors=Decimal('500000')), FUNDRAISE, _staff(), 0.0, 1,
                                     SeededRandom(7))

        assert tapped.large_donors < fresh.large_donors

    def test_multiplier_shrinks(self):
        """The large-donor multiplier starts at 1 and falls."""
        assert large_donor_multiplier(0) == 1.0
        assert large_donor_multiplier(200000) < large_donor_multiplier(100000) < 1.0

    def test_finance_director_bonus(self):
        """A finance director raises more from the same calls."""
        plain = compute_fundraising(_finances(), FUNDRAISE, _staff(), 0.0, 1, SeededRandom(3))
        boosted = compute_fundraising(_finances(), FUNDRAISE, _staff('finance-director'), 0.0, 1,
                                      SeededRandom(3))

        assert boosted.small_donors > plain.small_donors
        assert boosted.large_donors > plain.large_donors

    def test_digital_director_online_bonus(self):
        """A digital director lifts passive online income by 20%."""
        result = compute_fundraising(_finances(), [], _staff('digital-director'), 0.0, 1, SeededRandom(1))
        assert result.online_income == Decimal('2400.00')

    def test_email_growth_per_action_not_intensity(self):
        """The email list grows per fundraise action, whatever its intensity."""
        actions = [CampaignAction('fundraise', 3), CampaignAction('fundraise', 1)]
        result = compute_fundraising(_finances(), actions, _staff(), 0.0, 1, SeededRandom(1))
        assert result.email_list_growth == 1000


class TestPacMoney:
    """Test the endorsement gate on PAC money."""

    def test_no_pac_below_two_endorsements(self):
        """Fewer than two secured endorsements unlock nothing."""
        result = compute_fundraising(_finances(), FUNDRAISE, _staff(), 0.0, 1, SeededRandom(1),
                                     endorsements_secured=1)
        assert result.pac_money == Decimal('0')

    def test_pac_with_two_endorsements(self):
        """Two secured endorsements unlock PAC money."""
        result = compute_fundraising(_finances(), FUNDRAISE, _staff(), 0.0, 1, SeededRandom(1),
                                     endorsements_secured=2)
        assert result.pac_money > Decimal('0')

    def test_pac_capped_at_five(self):
        """Endorsements past five add no more PAC money."""
        assert get_pac_share(5) == get_pac_share(8) == 1.0
        assert get_pac_share(2) < get_pac_share(4) < get_pac_share(5)


class TestEndorsementIncome:
    """Test the weekly bonus paid by secured endorsements."""

    def test_bonus_arrives_without_fundraising(self):
        """Endorsement income is passive, like online income."""
        result = compute_fundraising(_finances(), [], _staff(), 0.0, 1, SeededRandom(1),
                                     endorsement_bonus=7500)

        assert result.endorsement_income == Decimal('7500.00')
        assert result.action_income == Decimal('0')
        assert result.total_raised == result.online_income + Decimal('7500.00')

    def test_no_bonus_by_default(self):
        """Without secured endorsements nothing extra arrives."""
        result = compute_fundraising(_finances(), [], _staff(), 0.0, 1, SeededRandom(1))
        assert result.endorsement_income == Decimal('0')


class TestOnlineRate:
    """Test the email-list driven online income rate."""

    def test_base_rate_at_starting_list(self):
        """The starting list earns the base rate."""
        assert get_online_income_rate(1000) == Decimal('2000.00')

    def test_rate_grows_with_list(self):
        """Every thousand extra addresses adds to the rate."""
        assert get_online_income_rate(3000) == Decimal('2200.00')
