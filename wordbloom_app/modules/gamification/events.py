"""
Event Handlers for Gamification Module.

Listens to signals from other modules and awards XP.
The learning, quiz and vocabulary modules don't need to know about XP.
"""
from flask import current_app

from wordbloom_app.core.defaults import (
    QUIZ_XP_MULTIPLIER,
    XP_CUSTOM_WORD,
    XP_QUICK_REVIEW,
    XP_WORD_LEARNED,
)
from wordbloom_app.core.signals import custom_word_created, quiz_completed, word_learned
from .logics.level_logic import quiz_xp


@word_learned.connect
def on_word_learned(sender, **kwargs):
    """
    Handle word_learned signal from the progress tracker.

    Expected kwargs:
        - word_id: str
        - is_quick_review: bool
        - counted: bool (first daily learn of the word)
    """
    from .services.xp_service import XpService

    if kwargs.get('is_quick_review'):
        XpService.add_xp(XP_QUICK_REVIEW, reason='Quick review')
    elif kwargs.get('counted'):
        XpService.add_xp(XP_WORD_LEARNED, reason='Word learned')
    else:
        current_app.logger.debug(f"[Gamification] {kwargs.get('word_id')} already counted today, no XP")


@quiz_completed.connect
def on_quiz_completed(sender, **kwargs):
    """
    Handle quiz_completed signal.

    Expected kwargs:
        - score: int
        - total: int
        - incorrect_word_ids: list
    """
    from .services.xp_service import XpService

    XpService.add_xp(quiz_xp(kwargs.get('score', 0), QUIZ_XP_MULTIPLIER), reason='Quiz completed')


@custom_word_created.connect
def on_custom_word_created(sender, **kwargs):
    """Adding a new custom word is worth a little XP."""
    from .services.xp_service import XpService

    XpService.add_xp(XP_CUSTOM_WORD, reason='Custom word added')
