"""
Settings Service
The learner's settings: first-run setup, edits and the full data reset.
"""
from typing import Dict

from flask import current_app

from wordbloom_app.core.defaults import (
    DEFAULT_USER_SETTINGS,
    SPEECH_RATE_MAX,
    SPEECH_RATE_MIN,
    THEMES,
    USER_SETTINGS_KEY,
)
from wordbloom_app.core.error_handlers import ValidationError
from wordbloom_app.core.extensions import db
from wordbloom_app.models import AppState

# Settings whose change invalidates the selected daily word set
SESSION_AFFECTING_FIELDS = ('grade', 'daily_goal', 'auto_play_audio')


class SettingsService:

    @staticmethod
    def get_settings() -> Dict:
        """Stored settings merged over the defaults."""
        from wordbloom_app.modules.gamification.logics.level_logic import calculate_xp_level

        stored = AppState.get(USER_SETTINGS_KEY) or {}
        settings = {**DEFAULT_USER_SETTINGS, **stored}
        settings['grade'] = settings.get('grade') or current_app.config.get('DEFAULT_GRADE', 'middle1')
        if stored.get('daily_goal') is None:
            settings['daily_goal'] = current_app.config.get('DEFAULT_DAILY_GOAL', 10)
        if stored.get('xp') is None:
            settings['xp'] = 0
        if stored.get('level') is None:
            settings['level'] = calculate_xp_level(settings['xp']).level
        return settings

    @staticmethod
    def is_setup_complete() -> bool:
        return bool((AppState.get(USER_SETTINGS_KEY) or {}).get('username'))

    @staticmethod
    def _validated(data: Dict, current: Dict) -> Dict:
        errors = {}
        updates = {}

        if 'username' in data:
            username = (data.get('username') or '').strip()
            if not username:
                errors['username'] = 'required'
            updates['username'] = username

        if 'grade' in data:
            if data['grade'] not in current_app.config['GRADE_LEVELS']:
                errors['grade'] = 'invalid'
            updates['grade'] = data['grade']

        if 'daily_goal' in data:
            try:
                goal = int(data['daily_goal'])
            except (TypeError, ValueError):
                goal = 0
            if goal < 1:
                errors['daily_goal'] = 'must be at least 1'
            updates['daily_goal'] = goal

        if 'theme' in data:
            if data['theme'] not in THEMES:
                errors['theme'] = 'invalid'
            updates['theme'] = data['theme']

        if 'speech_rate' in data:
            try:
                rate = float(data['speech_rate'])
            except (TypeError, ValueError):
                errors['speech_rate'] = 'invalid'
            else:
                updates['speech_rate'] = min(max(rate, SPEECH_RATE_MIN), SPEECH_RATE_MAX)

        if 'auto_play_audio' in data:
            updates['auto_play_audio'] = bool(data['auto_play_audio'])

        if 'textbook' in data:
            updates['textbook'] = (data.get('textbook') or '').strip()

        if errors:
            raise ValidationError('Invalid settings.', errors=errors)
        return {**current, **updates}

    @staticmethod
    def complete_setup(data: Dict) -> Dict:
        """
        First-run setup. A username is required.

        Starts from a clean slate: learning data is reset and the built-in
        catalog seeded.
        """
        if not (data.get('username') or '').strip():
            raise ValidationError('Please enter a username.', errors={'username': 'required'})

        base = dict(DEFAULT_USER_SETTINGS)
        base['grade'] = current_app.config.get('DEFAULT_GRADE', base['grade'])
        base['daily_goal'] = current_app.config.get('DEFAULT_DAILY_GOAL', base['daily_goal'])
        fields = {k: v for k, v in data.items() if k not in ('xp', 'level')}
        settings = SettingsService._validated(fields, base)

        SettingsService._wipe()
        AppState.set(USER_SETTINGS_KEY, settings)
        db.session.commit()
        SettingsService._after_wipe()

        current_app.logger.info(f"[Settings] Setup completed for '{settings['username']}' ({settings['grade']})")
        return settings

    @staticmethod
    def update_settings(data: Dict) -> Dict:
        """Edit settings. ``xp`` and ``level`` are never taken from input."""
        from wordbloom_app.modules.learning.interface import drop_live_session

        current = SettingsService.get_settings()
        fields = {k: v for k, v in data.items() if k not in ('xp', 'level')}
        settings = SettingsService._validated(fields, current)

        AppState.set(USER_SETTINGS_KEY, settings)
        db.session.commit()

        if any(settings.get(f) != current.get(f) for f in SESSION_AFFECTING_FIELDS):
            drop_live_session()
        return settings

    @staticmethod
    def reset_all_data() -> None:
        """Back to first run: every setting, word, stat and counter is cleared."""
        SettingsService._wipe()
        db.session.commit()
        SettingsService._after_wipe()
        current_app.logger.warning("[Settings] All learning data was reset")

    @staticmethod
    def _wipe() -> None:
        from wordbloom_app.modules.vocabulary.interface import delete_all_words

        delete_all_words()
        AppState.clear_all()

    @staticmethod
    def _after_wipe() -> None:
        from wordbloom_app.modules.AI.interface import reset_cooldown
        from wordbloom_app.modules.vocabulary.interface import seed_builtin_words

        seed_builtin_words()
        reset_cooldown()
