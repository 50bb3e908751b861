"""
Tests for narration templates and the turn briefing helpers.
"""

from decimal import Decimal

from briefing import build_financial_summary, build_notifications
from engine import create_initial_state
from mechanics.fundraising import FundraisingResult
from narration import NarrationEngine, render_template
from opponent_ai import OpponentTurnResult


class TestNarrationEngine:
    """Test template rendering."""

    def test_filters(self):
        """Money and percentage filters format as the briefing expects."""
        engine = NarrationEngine({'t.txt': '{{ a | currency }} {{ b | thousands }} {{ c | percent }} {{ d | signed }}'})
        assert engine.render('t.txt', {'a': 12345.6, 'b': 45200, 'c': 47.25, 'd': -0.4}) == '$12,345 $45K 47.2% -0.4'

    def test_missing_template(self):
        """Unknown templates render a placeholder instead of raising."""
        assert NarrationEngine().render('nope.txt', {}) == "[Template 'nope.txt' not found]"

    def test_custom_templates_override(self):
        """Caller templates replace built-ins with the same name."""
        engine = NarrationEngine({'opponent/campaign.txt': '{{ opponent }} was spotted in {{ location }}'})
        assert engine.render('opponent/campaign.txt', {'opponent': 'Lee', 'location': 'Enterprise'}) == \
            'Lee was spotted in Enterprise'

    def test_opponent_ads_by_strategy(self):
        """The ad line depends on strategy."""
        line = render_template('opponent/ads.txt', {'opponent': 'Lee', 'strategy': 'aggressive'})
        assert line == 'Lee increased ad spending with attack ads'


class TestFinancialSummary:
    """Test build_financial_summary."""

    def test_net_and_breakdown(self):
        """Net is income minus expenses, broken down by source."""
        fundraising = FundraisingResult(small_donors=Decimal('10000'), large_donors=Decimal('20000'),
                                        online_income=Decimal('2000'))
        summary = build_financial_summary(fundraising, Decimal('8000'), 15000, 0)

        assert summary.income == Decimal('32000.00')
        assert summary.expenses == Decimal('23000.00')
        assert summary.net == Decimal('9000.00')
        assert [row['source'] for row in summary.breakdown] == [
            'Fundraising', 'Online/Passive', 'PAC', 'Staff Salaries', 'Advertising', 'GOTV']


class TestNotifications:
    """Test build_notifications."""

    def test_low_cash(self):
        """Cash below next week's burn raises a warning."""
        state = create_initial_state('toss-up', seed=1)
        notes = build_notifications(state, cash_after=Decimal('1000'), next_week_burn=Decimal('8000'))

        assert [(n.level, n.title) for n in notes] == [('danger', 'Low Cash')]

    def test_attack_mode_entry_only(self):
        """Only entering attack mode is announced."""
        state = create_initial_state('toss-up', seed=1)
        entered = build_notifications(state, opponent_result=OpponentTurnResult(attack_mode_changed=True))
        exited = build_notifications(state, opponent_result=OpponentTurnResult(attack_mode_changed=False))

        assert [n.title for n in entered] == ['Opponent Attack Mode']
        assert exited == []

    def test_gotv_unlock_announced(self):
        """The week before GOTV opens announces it."""
        state = create_initial_state('toss-up', seed=1)
        state.current_turn = 20
        state.phase = 'mid'
        notes = build_notifications(state)

        assert 'GOTV Unlocked' in [n.title for n in notes]
        assert 'New Campaign Phase' in [n.title for n in notes]

    def test_backlash(self):
        """Backlash is reported with a count."""
        state = create_initial_state('toss-up', seed=1)
        notes = build_notifications(state, backlash_count=2)

        assert notes[0].title == 'Ad Backlash'
        assert notes[0].message == 'Your attack ads backfired with 2 voter groups.'
