"""
Tests for the Progress Service: word-learned events, quiz completion and
load-time corrections.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from wordbloom_app.core.defaults import LEARNED_TODAY_KEY, QUIZ_TAKEN_TODAY_KEY, STREAK_KEY
from wordbloom_app.core.extensions import db
from wordbloom_app.models import AppState
from wordbloom_app.modules.gamification.interface import get_level_info
from wordbloom_app.modules.progress.services.progress_service import ProgressService
from wordbloom_app.modules.vocabulary.interface import get_word_stat

NOW = datetime(2024, 5, 10, 9, 0, tzinfo=timezone.utc)
TODAY = NOW.date()


class TestOnWordLearned:

    def test_first_learn_counts(self, app, learner):
        result = ProgressService.on_word_learned('m1-001', False, now=NOW)
        assert result == {'success': True, 'counted': True}

        progress = ProgressService.load_progress(TODAY)
        assert progress['learned_words_today'] == 1
        assert progress['total_words_learned'] == 1
        assert progress['streak']['current_streak'] == 1
        assert progress['streak']['last_learned_date'] == TODAY.isoformat()

    def test_second_learn_same_day_counts_once(self, app, learner):
        ProgressService.on_word_learned('m1-001', False, now=NOW)
        second = ProgressService.on_word_learned('m1-001', False, now=NOW + timedelta(hours=2))

        assert second['counted'] is False
        progress = ProgressService.load_progress(TODAY)
        assert progress['learned_words_today'] == 1
        assert progress['total_words_learned'] == 1
        # last_reviewed still moves forward
        assert get_word_stat('m1-001').last_reviewed.replace(tzinfo=timezone.utc) == NOW + timedelta(hours=2)

    def test_quick_review_refreshes_but_does_not_count(self, app, learner):
        result = ProgressService.on_word_learned('m1-002', True, now=NOW)

        assert result['counted'] is False
        assert get_word_stat('m1-002').last_reviewed is not None
        progress = ProgressService.load_progress(TODAY)
        assert progress['learned_words_today'] == 0
        assert progress['streak']['current_streak'] == 0

    def test_unknown_word_is_rejected_without_writes(self, app, learner):
        result = ProgressService.on_word_learned('missing', False, now=NOW)
        assert result['success'] is False
        assert ProgressService.load_progress(TODAY)['total_words_learned'] == 0

    def test_learning_awards_xp(self, app, learner):
        ProgressService.on_word_learned('m1-001', False, now=NOW)
        ProgressService.on_word_learned('m1-001', False, now=NOW)
        ProgressService.on_word_learned('m1-002', True, now=NOW)
        # +5 for the counted learn, +1 for the quick review
        assert get_level_info()['xp'] == 6

    def test_streak_grows_over_consecutive_days(self, app, learner):
        ProgressService.on_word_learned('m1-001', False, now=NOW - timedelta(days=1))
        ProgressService.on_word_learned('m1-002', False, now=NOW)
        assert ProgressService.load_progress(TODAY)['streak']['current_streak'] == 2


class TestLoadProgress:

    def test_daily_counter_rolls_over(self, app, learner):
        ProgressService.on_word_learned('m1-001', False, now=NOW)
        progress = ProgressService.load_progress(TODAY + timedelta(days=1))

        assert progress['learned_words_today'] == 0
        assert progress['total_words_learned'] == 1
        assert AppState.get(LEARNED_TODAY_KEY)['date'] == (TODAY + timedelta(days=1)).isoformat()

    def test_broken_streak_is_corrected_on_load(self, app, learner):
        AppState.set(STREAK_KEY, {'current_streak': 4, 'best_streak': 6, 'last_learned_date': '2024-05-01'})
        db.session.commit()

        progress = ProgressService.load_progress(TODAY)
        assert progress['streak'] == {'current_streak': 0, 'best_streak': 6, 'last_learned_date': '2024-05-01'}
        assert AppState.get(STREAK_KEY)['current_streak'] == 0

    def test_quiz_taken_resets_next_day(self, app, learner):
        ProgressService.on_quiz_complete(3, 5, [], today=TODAY)
        assert ProgressService.load_progress(TODAY)['quiz_taken_today'] is True
        assert ProgressService.load_progress(TODAY + timedelta(days=1))['quiz_taken_today'] is False
        assert AppState.get(QUIZ_TAKEN_TODAY_KEY)['taken'] is False


class TestQuizComplete:

    def test_history_entry_and_xp(self, app, learner):
        entry = ProgressService.on_quiz_complete(7, 10, ['m1-001'], today=TODAY)

        assert entry == {'score': 7, 'total': 10, 'date': TODAY.isoformat()}
        assert ProgressService.load_progress(TODAY)['quiz_history'] == [entry]
        # 7 * 1.5 = 10.5 rounds up
        assert get_level_info()['xp'] == 11

    def test_zero_score_awards_nothing(self, app, learner):
        ProgressService.on_quiz_complete(0, 3, ['m1-001', 'm1-002', 'm1-003'], today=TODAY)
        assert get_level_info()['xp'] == 0


class TestDashboard:

    def test_dashboard_reports_goal_and_challenges(self, app, learner):
        dashboard = ProgressService.get_dashboard()

        assert dashboard['username'] == 'mina'
        assert dashboard['daily_goal'] == 5
        assert dashboard['daily_goal_achieved'] is False
        assert [c['id'] for c in dashboard['challenges']] == ['daily_goal', 'take_quiz', 'review_incorrect']
        assert dashboard['has_incorrect_words_to_review'] is False
        assert dashboard['level']['level'] == 1

    def test_statistics_counts_catalog(self, app, learner):
        stats = ProgressService.get_statistics()
        assert stats['total_words'] == 30
        assert stats['custom_words'] == 0
        assert stats['words_by_grade'] == {'middle1': 10, 'middle2': 10, 'middle3': 10}


@pytest.fixture
def reviewed_incorrectly(app, learner):
    from wordbloom_app.modules.vocabulary.interface import increment_quiz_incorrect
    increment_quiz_incorrect('m1-003')


class TestIncorrectReview:

    def test_incorrect_words_enable_review_challenge(self, app, reviewed_incorrectly):
        dashboard = ProgressService.get_dashboard()
        assert dashboard['has_incorrect_words_to_review'] is True
        review = dashboard['challenges'][2]
        assert review['available'] is True
        assert review['achieved'] is False
