"""
Tests for Gamification - level curve and XP accumulation.
"""

import pytest

from wordbloom_app.core.defaults import USER_SETTINGS_KEY
from wordbloom_app.core.extensions import db
from wordbloom_app.core.signals import level_up, xp_awarded
from wordbloom_app.models import AppState
from wordbloom_app.modules.gamification.logics.level_logic import calculate_xp_level, quiz_xp, round_half_up
from wordbloom_app.modules.gamification.services.xp_service import XpService


class TestLevelCurve:

    @pytest.mark.parametrize('xp, level, into_level, needed', [
        (0, 1, 0, 100),
        (99, 1, 99, 100),
        (100, 2, 0, 200),
        (299, 2, 199, 200),
        (300, 3, 0, 300),
        (600, 4, 0, 400),
    ])
    def test_calculate_xp_level(self, xp, level, into_level, needed):
        info = calculate_xp_level(xp)
        assert (info.level, info.current_level_xp, info.xp_for_next_level) == (level, into_level, needed)

    def test_quiz_xp_rounds_half_up(self):
        assert quiz_xp(7, 1.5) == 11
        assert quiz_xp(3, 1.5) == 5
        assert quiz_xp(0, 1.5) == 0
        assert round_half_up(0.5) == 1


class TestXpService:

    def test_add_zero_is_a_no_op(self, app, learner):
        result = XpService.add_xp(0)
        assert result['xp_added'] == 0
        assert XpService.get_level_info()['xp'] == 0

    def test_level_up_fires_once(self, app, learner):
        events = []

        def record(sender, **kwargs):
            events.append(kwargs)

        level_up.connect(record)
        try:
            XpService.add_xp(60)
            result = XpService.add_xp(60)
            XpService.add_xp(10)
        finally:
            level_up.disconnect(record)

        assert result['leveled_up'] is True
        assert events == [{'old_level': 1, 'new_level': 2, 'xp': 120}]
        assert XpService.get_level_info()['level'] == 2

    def test_xp_awarded_signal_payload(self, app, learner):
        events = []

        def record(sender, **kwargs):
            events.append(kwargs)

        xp_awarded.connect(record)
        try:
            XpService.add_xp(5, reason='Word learned')
        finally:
            xp_awarded.disconnect(record)

        assert events == [{'amount': 5, 'reason': 'Word learned', 'new_total': 5, 'level': 1}]

    def test_stored_level_is_not_recomputed_on_read(self, app, learner):
        settings = AppState.get(USER_SETTINGS_KEY)
        settings['xp'] = 500
        AppState.set(USER_SETTINGS_KEY, settings)
        db.session.commit()

        # a direct XP edit leaves the stored level until XP is added again
        assert XpService.get_level_info()['level'] == 1
        XpService.add_xp(1)
        assert XpService.get_level_info()['level'] == 3
