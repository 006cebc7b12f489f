"""
Tests for Selection Logic - daily-new and quick-review word selection.

Tests cover:
- Eligibility per mode (grade, mastery, reviewed today)
- Daily-new vs quick-review pools
- Priority ordering before the shuffle
- Count handling
"""

import random
from datetime import date, datetime, timezone

import pytest

from wordbloom_app.modules.learning.logics.selection_logic import (
    SelectionMode,
    is_eligible,
    priority_key,
    select_words,
)
from wordbloom_app.modules.vocabulary.schemas import WordStatData

TODAY = date(2024, 5, 10)
TODAY_NOON = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)
TWO_DAYS_AGO = datetime(2024, 5, 8, 9, 0, tzinfo=timezone.utc)
LAST_WEEK = datetime(2024, 5, 3, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def catalog(word_factory):
    return [
        word_factory('new'),
        word_factory('seen-today'),
        word_factory('seen-before'),
        word_factory('mastered'),
        word_factory('other-grade', grade='middle2'),
    ]


@pytest.fixture
def stats():
    return {
        'seen-today': WordStatData('seen-today', last_reviewed=TODAY_NOON),
        'seen-before': WordStatData('seen-before', last_reviewed=TWO_DAYS_AGO),
        'mastered': WordStatData('mastered', is_mastered=True, last_reviewed=TWO_DAYS_AGO),
    }


def _ids(words):
    return sorted(w.id for w in words)


class TestEligibility:
    """Which words each mode may pick."""

    def test_daily_new_skips_mastered_other_grade_and_reviewed_today(self, catalog, stats):
        selected = select_words(catalog, stats, 'middle1', 10, SelectionMode.DAILY_NEW, TODAY)
        assert _ids(selected) == ['new', 'seen-before']

    def test_quick_review_only_takes_words_seen_on_earlier_days(self, catalog, stats):
        selected = select_words(catalog, stats, 'middle1', 10, SelectionMode.QUICK_REVIEW, TODAY)
        assert _ids(selected) == ['seen-before']

    def test_missing_stat_counts_as_never_reviewed(self, word_factory):
        word = word_factory('w')
        assert is_eligible(word, WordStatData.default('w'), 'middle1', SelectionMode.DAILY_NEW, TODAY)
        assert not is_eligible(word, WordStatData.default('w'), 'middle1', SelectionMode.QUICK_REVIEW, TODAY)

    def test_reviewed_today_is_excluded_from_both_modes(self, word_factory):
        word = word_factory('w')
        stat = WordStatData('w', last_reviewed=TODAY_NOON)
        for mode in SelectionMode:
            assert not is_eligible(word, stat, 'middle1', mode, TODAY)

    def test_today_is_judged_in_the_app_timezone(self, word_factory):
        """23:30 UTC on the 9th is already the 10th in Seoul."""
        word = word_factory('w')
        stat = WordStatData('w', last_reviewed=datetime(2024, 5, 9, 23, 30, tzinfo=timezone.utc))
        assert is_eligible(word, stat, 'middle1', SelectionMode.DAILY_NEW, TODAY, tz_name='UTC')
        assert not is_eligible(word, stat, 'middle1', SelectionMode.DAILY_NEW, TODAY, tz_name='Asia/Seoul')


class TestModePools:
    """Unseen words only go to daily-new; quick review only takes stale words."""

    def test_unseen_words_are_daily_only_and_review_words_are_stale(self, word_factory):
        rng = random.Random(7)
        catalog = [word_factory(f'w{i}') for i in range(40)]
        stats = {}
        for word in catalog:
            roll = rng.random()
            if roll < 0.3:
                stats[word.id] = WordStatData(word.id, last_reviewed=TODAY_NOON)
            elif roll < 0.6:
                stats[word.id] = WordStatData(word.id, last_reviewed=LAST_WEEK)
            elif roll < 0.7:
                stats[word.id] = WordStatData(word.id, is_mastered=True)

        daily = select_words(catalog, stats, 'middle1', 100, SelectionMode.DAILY_NEW, TODAY, rng=rng)
        review = select_words(catalog, stats, 'middle1', 100, SelectionMode.QUICK_REVIEW, TODAY, rng=rng)

        daily_ids = {w.id for w in daily}
        review_ids = {w.id for w in review}
        # words seen on an earlier day are eligible for both; all others only for one
        never_seen = {w.id for w in catalog if w.id not in stats}
        assert never_seen <= daily_ids
        assert never_seen.isdisjoint(review_ids)
        for word_id in review_ids:
            assert stats[word_id].last_reviewed == LAST_WEEK


class TestPriorityAndCount:

    def test_priority_key_orders_mistakes_then_age_then_custom(self, word_factory):
        words = {
            'mistakes': (word_factory('mistakes'), WordStatData('mistakes', quiz_incorrect_count=2,
                                                                 last_reviewed=TWO_DAYS_AGO)),
            'custom-new': (word_factory('custom-new', is_custom=True), WordStatData('custom-new')),
            'builtin-new': (word_factory('builtin-new'), WordStatData('builtin-new')),
            'old': (word_factory('old'), WordStatData('old', last_reviewed=LAST_WEEK)),
            'recent': (word_factory('recent'), WordStatData('recent', last_reviewed=TWO_DAYS_AGO)),
        }
        ordered = sorted(words, key=lambda k: priority_key(*words[k]))
        assert ordered == ['mistakes', 'custom-new', 'builtin-new', 'old', 'recent']

    def test_count_limits_the_result(self, word_factory):
        catalog = [word_factory(f'w{i}') for i in range(12)]
        selected = select_words(catalog, {}, 'middle1', 5, SelectionMode.DAILY_NEW, TODAY, rng=random.Random(1))
        assert len(selected) == 5
        assert len({w.id for w in selected}) == 5

    def test_zero_or_negative_count_selects_nothing(self, word_factory):
        catalog = [word_factory('a')]
        assert select_words(catalog, {}, 'middle1', 0, SelectionMode.DAILY_NEW, TODAY) == []
        assert select_words(catalog, {}, 'middle1', -1, SelectionMode.DAILY_NEW, TODAY) == []

    def test_empty_catalog_selects_nothing(self):
        assert select_words([], {}, 'middle1', 10, SelectionMode.DAILY_NEW, TODAY) == []

    def test_same_seed_gives_same_order(self, word_factory):
        catalog = [word_factory(f'w{i}') for i in range(10)]
        first = select_words(catalog, {}, 'middle1', 10, SelectionMode.DAILY_NEW, TODAY, rng=random.Random(3))
        second = select_words(catalog, {}, 'middle1', 10, SelectionMode.DAILY_NEW, TODAY, rng=random.Random(3))
        assert [w.id for w in first] == [w.id for w in second]


class TestSingleWordCatalog:

    def test_single_unseen_word(self, word_factory):
        word = word_factory('only')
        assert select_words([word], {}, 'middle1', 10, SelectionMode.DAILY_NEW, TODAY) == [word]
        assert select_words([word], {}, 'middle1', 3, SelectionMode.QUICK_REVIEW, TODAY) == []
