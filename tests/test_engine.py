"""
Tests for the campaign engine - same seed, same campaign, every time.
"""

from decimal import Decimal

import pytest
from engine import (
    CampaignEngine, EndorsementUnavailableError, EventNotFoundError, GameOverError,
    InsufficientActionPointsError, InsufficientFundsError, InvalidActionError,
    StaffUnavailableError, UnknownDifficultyError,
    apply_turn, compute_turn, create_initial_state, new_game, resolve_event,
)
from balance import DIFFICULTY_CONFIGS, MOMENTUM_MAX, MOMENTUM_MIN, UNDECIDED_MAX, UNDECIDED_MIN
from events import ActiveEvent, GameEvent
from state import AdCampaign, CampaignAction

PLAN = [
    {'type': 'fundraise', 'intensity': 2},
    {'type': 'campaign', 'intensity': 2},
    {'type': 'seek-endorsement', 'intensity': 1},
]
LATE_PLAN = PLAN[:2] + [{'type': 'gotv', 'intensity': 1}]


def _plan_for(turn):
    return LATE_PLAN if turn >= 21 else PLAN


def _answer_events(engine):
    for active in engine.get_pending_events():
        engine.resolve_event(active.event.id, active.event.choices[0].id)


def _town_hall():
    return GameEvent.from_dict({
        'id': 'town-hall',
        'category': 'local',
        'title': 'Town Hall',
        'description': 'Residents pack a Henderson rec center.',
        'phase_range': ['primary', 'final'],
        'probability': 1.0,
        'choices': [
            {'id': 'show-up', 'text': 'Show up',
             'effects': [{'type': 'poll_change', 'value': 2, 'description': 'Strong showing'}]},
            {'id': 'skip', 'text': 'Skip it', 'effects': []},
        ],
    })


def _risky(event_id):
    return GameEvent.from_dict({
        'id': event_id,
        'category': 'local',
        'title': 'Rally',
        'description': 'A crowd gathers.',
        'phase_range': ['primary', 'final'],
        'probability': 1.0,
        'choices': [
            {'id': 'go', 'text': 'Go', 'effects': [],
             'risk': {'probability': 0.5, 'description': 'Could backfire',
                      'bad_outcome': [{'type': 'poll_change', 'value': -1, 'description': 'Backfire'}]}},
        ],
    })


class TestInitialState:
    """Test create_initial_state."""

    def test_toss_up(self):
        """Toss-up starts dead even with $200K."""
        state = create_initial_state('toss-up', seed=1)

        assert state.polls.player_support == 45
        assert state.polls.opponent_support == 45
        assert state.polls.undecided == 10
        assert state.finances.cash_on_hand == Decimal('200000.00')
        assert state.current_turn == 1
        assert state.phase == 'primary'
        assert state.action_points == 5
        assert len(state.polls.demographics) == 7
        assert state.game_id == 'game-1'
        assert not state.game_over

    @pytest.mark.parametrize('difficulty', sorted(DIFFICULTY_CONFIGS))
    def test_demographics_match_preset(self, difficulty):
        """Weighted demographic support equals the preset split."""
        state = create_initial_state(difficulty, seed=1)
        config = DIFFICULTY_CONFIGS[difficulty]
        player, opponent = state.polls.weighted_support()

        assert player == pytest.approx(config['player_starting_support'])
        assert opponent == pytest.approx(config['opponent_starting_support'])

    def test_starting_history(self):
        """History opens with the turn-zero snapshot."""
        state = create_initial_state('toss-up', seed=1)

        assert len(state.polls.history) == 1
        assert state.polls.history[0].turn == 0

    def test_unknown_difficulty(self):
        """Unknown presets are rejected."""
        with pytest.raises(UnknownDifficultyError):
            create_initial_state('landslide', seed=1)

    def test_fresh_seed_when_omitted(self):
        """Omitting the seed still yields a playable state."""
        state = create_initial_state('lean')
        assert state.game_id == f'game-{state.seed}'


class TestDeterminism:
    """Same seed and same choices give the same campaign."""

    def _play(self, seed, turns=4):
        engine = new_game('toss-up', seed=seed)
        for _ in range(turns):
            _answer_events(engine)
            engine.take_turn(PLAN)
        return engine.get_state().to_dict()

    def test_same_seed_same_campaign(self):
        """Two runs with one seed are identical."""
        assert self._play(21) == self._play(21)

    def test_different_seed_differs(self):
        """Different seeds produce different campaigns."""
        assert self._play(21) != self._play(22)

    def test_compute_turn_is_pure(self):
        """compute_turn leaves its input untouched."""
        state = create_initial_state('toss-up', seed=8)
        before = state.to_dict()

        compute_turn(state, PLAN)

        assert state.to_dict() == before

    def test_compute_turn_repeatable(self):
        """Computing the same turn twice gives the same numbers."""
        state = create_initial_state('toss-up', seed=8)
        first = compute_turn(state, PLAN)
        second = compute_turn(state, PLAN)

        assert first.polls.player_support == second.polls.player_support
        assert first.financial_summary.net == second.financial_summary.net
        assert first.opponent_actions == second.opponent_actions

    def test_apply_turn_returns_new_state(self):
        """apply_turn hands back a new snapshot."""
        state = create_initial_state('toss-up', seed=8)
        result = compute_turn(state, PLAN)
        new_state = apply_turn(state, result, PLAN)

        assert new_state is not state
        assert state.current_turn == 1
        assert new_state.current_turn == 2


class TestFullCampaign:
    """Play all 26 weeks."""

    def test_full_campaign(self):
        """Invariants hold every week and the election is held at the end."""
        engine = new_game('toss-up', seed=2026)

        for turn in range(1, 27):
            assert engine.state.current_turn == turn
            _answer_events(engine)
            result = engine.take_turn(_plan_for(turn))
            state = engine.state

            assert abs(result.opponent_poll_effect) <= 2
            assert 0 <= state.polls.player_support <= 100
            assert 0 <= state.polls.opponent_support <= 100
            assert UNDECIDED_MIN <= state.polls.undecided <= UNDECIDED_MAX
            assert MOMENTUM_MIN <= state.momentum <= MOMENTUM_MAX
            assert state.opponent.cash_on_hand >= 0
            assert len(state.polls.history) == turn + 1
            assert len(state.finances.fundraising_history) == turn

        assert engine.is_game_over()
        state = engine.get_state()
        assert state.phase == 'election'
        assert state.election_result is not None
        assert state.winner in ('player', 'opponent')
        assert state.final_margin == state.election_result.margin
        assert engine.is_victory() == (state.winner == 'player')
        assert engine.get_valid_actions() == []

        score = engine.get_post_game_score()
        assert score.victory == engine.is_victory()
        assert score.final_grade

    def test_no_turns_after_election(self):
        """Playing past the end raises GameOverError."""
        engine = new_game('safe-seat', seed=9)
        for turn in range(1, 27):
            engine.take_turn(_plan_for(turn))

        with pytest.raises(GameOverError):
            engine.take_turn(PLAN)
        with pytest.raises(GameOverError):
            compute_turn(engine.state, PLAN)

    def test_phase_changes(self):
        """The week that ends the primary reports the new phase."""
        engine = new_game('toss-up', seed=4)
        phases = []
        for turn in range(1, 8):
            phases.append(engine.take_turn(PLAN).phase_change)

        assert phases[5] == 'early'
        assert phases[:5] == [None] * 5
        assert engine.state.phase == 'early'


class TestActions:
    """Test action validation."""

    def test_unknown_action(self):
        """Unknown action types are rejected."""
        engine = new_game('toss-up', seed=1)
        with pytest.raises(InvalidActionError):
            engine.take_turn([{'type': 'bake-sale', 'intensity': 1}])

    def test_zero_intensity(self):
        """Intensity must be a positive integer."""
        engine = new_game('toss-up', seed=1)
        with pytest.raises(InvalidActionError):
            engine.take_turn([{'type': 'campaign', 'intensity': 0}])

    def test_overspending_action_points(self):
        """Actions costing more than the week's AP are rejected and nothing changes."""
        engine = new_game('toss-up', seed=1)
        with pytest.raises(InsufficientActionPointsError):
            engine.take_turn([CampaignAction('campaign', 4), CampaignAction('fundraise', 2)])
        assert engine.state.current_turn == 1

    def test_accepts_dataclass_actions(self):
        """CampaignAction objects work as well as dicts."""
        engine = new_game('toss-up', seed=1)
        engine.take_turn([CampaignAction('fundraise', 5)])
        assert engine.state.current_turn == 2

    def test_empty_week(self):
        """A week with no actions still resolves."""
        engine = new_game('toss-up', seed=1)
        result = engine.take_turn([])

        assert result.financial_summary.income > 0
        assert engine.state.current_turn == 2

    def test_gotv_gated(self):
        """GOTV is not offered and does nothing before week 21."""
        engine = new_game('toss-up', seed=1)
        assert 'gotv' not in engine.get_valid_actions()

        engine.take_turn([{'type': 'gotv', 'intensity': 3}])
        assert engine.state.gotv_investment == 0

    def test_gotv_offered_late(self):
        """GOTV joins the valid actions in the final phase."""
        engine = new_game('toss-up', seed=1)
        engine.state.current_turn = 21
        assert 'gotv' in engine.get_valid_actions()


class TestStaffHiring:
    """Test hiring."""

    def test_campaign_manager_adds_point_now(self):
        """Hiring a campaign manager raises this week's AP to six."""
        engine = new_game('toss-up', seed=1)
        engine.hire_staff('campaign-manager')

        assert engine.state.action_points == 6
        engine.take_turn([CampaignAction('campaign', 6)])
        assert engine.state.action_points == 6

    def test_salary_is_charged(self):
        """Hired staff appear in the week's expenses."""
        engine = new_game('toss-up', seed=1)
        engine.hire_staff('comms-director')
        result = engine.take_turn([])

        assert result.financial_summary.expenses == Decimal('7000.00')

    def test_cannot_afford(self):
        """Hiring without four weeks of salary is refused."""
        engine = new_game('toss-up', seed=1)
        engine.state.finances.cash_on_hand = Decimal('1000')

        with pytest.raises(InsufficientFundsError):
            engine.hire_staff('comms-director')

    def test_not_yet_available(self):
        """The pollster cannot be hired in week one."""
        engine = new_game('toss-up', seed=1)
        with pytest.raises(StaffUnavailableError):
            engine.hire_staff('pollster')

    def test_cannot_hire_twice(self):
        """A hired role is no longer on the market."""
        engine = new_game('toss-up', seed=1)
        engine.hire_staff('finance-director')
        with pytest.raises(StaffUnavailableError):
            engine.hire_staff('finance-director')


class TestEndorsementFlow:
    """Test pursuing and securing endorsements."""

    def test_secure_in_one_week(self):
        """A one-week endorsement secures on the next seek action."""
        engine = new_game('toss-up', seed=1)
        engine.pursue_endorsement('nevada-farm-bureau')
        result = engine.take_turn([{'type': 'seek-endorsement', 'intensity': 1}])

        assert result.secured_endorsements == ['nevada-farm-bureau']
        assert any(n.title == 'Endorsement Secured!' for n in result.notifications)
        assert [e.id for e in engine.state.secured_endorsements()] == ['nevada-farm-bureau']

    def test_cannot_pursue_twice(self):
        """An endorsement in play cannot be pursued again."""
        engine = new_game('toss-up', seed=1)
        engine.pursue_endorsement('nevada-farm-bureau')
        with pytest.raises(EndorsementUnavailableError):
            engine.pursue_endorsement('nevada-farm-bureau')

    def test_secured_endorsements_pay_weekly(self):
        """Secured endorsements add their bonus to passive income."""
        state = create_initial_state('toss-up', seed=1)
        baseline = compute_turn(state, [])
        for endorsement in state.endorsements:
            if endorsement.id == 'henderson-chamber':
                endorsement.secured = True
        result = compute_turn(state, [])

        assert result.fundraising.endorsement_income == Decimal('5000.00')
        assert result.financial_summary.income == baseline.financial_summary.income + Decimal('5000.00')

    def test_support_threshold(self):
        """Trailing candidates cannot pursue endorsements above their support."""
        engine = new_game('hostile', seed=1)
        with pytest.raises(EndorsementUnavailableError):
            engine.pursue_endorsement('police-protective')

    def test_unknown_endorsement(self):
        """Unknown ids are refused."""
        engine = new_game('toss-up', seed=1)
        with pytest.raises(EndorsementUnavailableError):
            engine.pursue_endorsement('chamber-of-secrets')


class TestEvents:
    """Test answering pending events."""

    def _state_with_event(self):
        state = create_initial_state('toss-up', seed=1)
        state.active_events = [ActiveEvent(event=_town_hall(), turn=1)]
        return state

    def test_resolve_applies_and_archives(self):
        """Answering an event applies its effects and moves it to history."""
        state = self._state_with_event()
        new_state = resolve_event(state, 'town-hall', 'show-up')

        assert new_state.polls.player_support == pytest.approx(state.polls.player_support + 2)
        assert new_state.active_events == []
        archived = new_state.event_history[-1]
        assert archived.resolved
        assert archived.chosen == 'show-up'
        assert archived.outcome == ['Strong showing']

    def test_resolve_leaves_input(self):
        """The state passed in still holds the pending event."""
        state = self._state_with_event()
        resolve_event(state, 'town-hall', 'skip')

        assert len(state.active_events) == 1
        assert not state.active_events[0].resolved

    def test_unknown_event(self):
        """Events that are not pending cannot be answered."""
        with pytest.raises(EventNotFoundError):
            resolve_event(self._state_with_event(), 'alien-landing', 'show-up')

    def test_unknown_choice(self):
        """Choices the event does not offer are refused."""
        with pytest.raises(EventNotFoundError):
            resolve_event(self._state_with_event(), 'town-hall', 'send-a-hologram')

    def test_engine_returns_outcome(self):
        """The engine hands back the outcome lines."""
        engine = CampaignEngine(self._state_with_event())
        assert engine.resolve_event('town-hall', 'show-up') == ['Strong showing']
        assert engine.get_pending_events() == []

    def test_unanswered_events_expire(self):
        """Events left pending are archived when the week ends."""
        engine = CampaignEngine(self._state_with_event())
        engine.take_turn(PLAN)

        assert 'town-hall' in [e.event.id for e in engine.state.event_history]
        assert 'town-hall' not in [e.event.id for e in engine.state.active_events]

    def _two_risky(self, seed):
        state = create_initial_state('toss-up', seed=seed)
        state.active_events = [ActiveEvent(event=_risky('rally-a'), turn=1, slot=0),
                               ActiveEvent(event=_risky('rally-b'), turn=1, slot=1)]
        return state

    def _outcomes(self, state, order):
        for event_id in order:
            state = resolve_event(state, event_id, 'go')
        return {e.event.id: e.outcome for e in state.event_history if e.event.id in order}

    def test_risk_rolls_are_independent_per_event(self):
        """Two risky events of one turn do not always share a fate."""
        differs = 0
        for seed in range(50):
            outcomes = self._outcomes(self._two_risky(seed), ['rally-a', 'rally-b'])
            if outcomes['rally-a'] != outcomes['rally-b']:
                differs += 1
        assert differs > 0

    def test_risk_roll_ignores_answer_order(self):
        """An event's risk outcome is the same whichever event is answered first."""
        for seed in range(20):
            forward = self._outcomes(self._two_risky(seed), ['rally-a', 'rally-b'])
            backward = self._outcomes(self._two_risky(seed), ['rally-b', 'rally-a'])
            assert forward == backward


class TestAdvertising:
    """Test ad placement through the engine."""

    def test_invalid_ads(self):
        """Bad mediums, budgets and targets are rejected."""
        engine = new_game('toss-up', seed=1)
        with pytest.raises(InvalidActionError):
            engine.set_ads([AdCampaign('billboard', 'attack', 1000)])
        with pytest.raises(InvalidActionError):
            engine.set_ads([AdCampaign('tv', 'attack', -1)])
        with pytest.raises(InvalidActionError):
            engine.set_ads([AdCampaign('tv', 'attack', 1000, target_demographic='martians')])

    def test_ads_charged_weekly(self):
        """Running ads are charged every week until replaced."""
        engine = new_game('toss-up', seed=1)
        engine.set_ads([AdCampaign('tv', 'positive-bio', 50000)])

        first = engine.take_turn([])
        second = engine.take_turn([])
        engine.set_ads([])
        third = engine.take_turn([])

        assert first.financial_summary.expenses == Decimal('50000.00')
        assert second.financial_summary.expenses == Decimal('50000.00')
        assert third.financial_summary.expenses == Decimal('0.00')
        assert any(row['source'] == 'Advertising' and row['amount'] == Decimal('-50000.00')
                   for row in first.financial_summary.breakdown)


class TestReporting:
    """Test summaries and the briefing."""

    def test_briefing(self):
        """The briefing opens with the week played."""
        engine = new_game('toss-up', seed=1)
        assert engine.get_briefing() is None

        engine.take_turn(PLAN)
        briefing = engine.get_briefing()

        assert briefing.startswith('WEEK 1 (Jun 1) - PRIMARY')
        assert 'Lee raised' in briefing

    def test_turn_summary(self):
        """The summary reflects the current state."""
        engine = new_game('toss-up', seed=1)
        summary = engine.get_turn_summary()

        assert summary['turn'] == 1
        assert summary['action_points'] == 5
        assert summary['momentum_label'] == 'Neutral'
        assert summary['opponent_strategy'] == 'establishment'

    def test_get_state_is_a_copy(self):
        """Editing the returned snapshot does not touch the engine."""
        engine = new_game('toss-up', seed=1)
        snapshot = engine.get_state()
        snapshot.finances.cash_on_hand = Decimal('0')

        assert engine.state.finances.cash_on_hand == Decimal('200000.00')

    def test_no_score_before_election(self):
        """There is nothing to grade until the votes are counted."""
        engine = new_game('toss-up', seed=1)
        assert engine.get_election_result() is None
        assert engine.get_post_game_score() is None
