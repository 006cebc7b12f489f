"""
XP Service
Adds XP to the learner and keeps the stored level in step with it.
"""
from flask import current_app

from wordbloom_app.core.defaults import USER_SETTINGS_KEY
from wordbloom_app.core.extensions import db
from wordbloom_app.core.signals import level_up, xp_awarded
from wordbloom_app.models import AppState
from ..logics.level_logic import calculate_xp_level


class XpService:
    """XP accumulator; the level is recomputed only when XP is added."""

    @staticmethod
    def add_xp(amount: int, reason: str = 'Learning Activity') -> dict:
        """
        Add ``amount`` XP and recompute the level.

        ``level_up`` fires once when the recomputed level exceeds the stored one.
        """
        if amount == 0:
            return {'success': True, 'xp_added': 0, 'leveled_up': False}

        settings = AppState.get(USER_SETTINGS_KEY)
        old_level = int(settings.get('level') or 1)
        new_xp = int(settings.get('xp') or 0) + amount
        info = calculate_xp_level(new_xp)

        settings['xp'] = new_xp
        settings['level'] = info.level
        AppState.set(USER_SETTINGS_KEY, settings)
        db.session.commit()

        xp_awarded.send(None, amount=amount, reason=reason, new_total=new_xp, level=info.level)

        leveled_up = info.level > old_level
        if leveled_up:
            current_app.logger.info(f"[Gamification] Level up: {old_level} -> {info.level} ({new_xp} XP)")
            level_up.send(None, old_level=old_level, new_level=info.level, xp=new_xp)

        return {
            'success': True,
            'xp_added': amount,
            'xp': new_xp,
            'level': info.level,
            'leveled_up': leveled_up,
        }

    @staticmethod
    def get_level_info() -> dict:
        """Stored level plus progress toward the next one."""
        settings = AppState.get(USER_SETTINGS_KEY)
        xp = int(settings.get('xp') or 0)
        info = calculate_xp_level(xp)
        return {
            'xp': xp,
            # stored value; only add_xp moves it
            'level': int(settings.get('level') or 1),
            'current_level_xp': info.current_level_xp,
            'xp_for_next_level': info.xp_for_next_level,
        }
