"""
Progress Service
Daily counters, streak, quiz history and the dashboard/statistics views.
"""
from datetime import date, datetime
from typing import Dict, Iterable, Optional

from flask import current_app

from wordbloom_app.core.defaults import (
    CHALLENGE_REWARDS,
    LEARNED_TODAY_KEY,
    QUIZ_HISTORY_KEY,
    QUIZ_TAKEN_TODAY_KEY,
    STREAK_KEY,
    TOTAL_LEARNED_KEY,
)
from wordbloom_app.core.extensions import db
from wordbloom_app.core.signals import quiz_completed, word_learned
from wordbloom_app.models import AppState
from wordbloom_app.utils.time_utils import app_timezone, local_today, to_local_date, utcnow
from ..logics.stats_logic import (
    average_quiz_score,
    has_incorrect_words_to_review,
    words_by_grade,
    words_by_unit,
)
from ..logics.streak_logic import StreakState, apply_learning_day, correct_broken_streak


class ProgressService:
    """Reads and updates the progress aggregate stored in ``app_state``."""

    @staticmethod
    def load_progress(today: Optional[date] = None) -> Dict:
        """
        Current progress with date rollover and load-time streak correction applied.

        Persists the corrected values when anything changed.
        """
        today = today or local_today()
        iso_today = today.isoformat()
        changed = False

        learned = AppState.get(LEARNED_TODAY_KEY)
        if learned.get('date') != iso_today:
            if learned.get('count'):
                changed = True
            learned = {'count': 0, 'date': iso_today}

        quiz_taken = AppState.get(QUIZ_TAKEN_TODAY_KEY)
        if quiz_taken.get('date') != iso_today:
            if quiz_taken.get('taken'):
                changed = True
            quiz_taken = {'taken': False, 'date': iso_today}

        streak = StreakState.from_dict(AppState.get(STREAK_KEY))
        corrected = correct_broken_streak(streak, today)
        if corrected != streak:
            current_app.logger.info(
                f"[Progress] Streak broken (last learned {streak.last_learned_date}), reset to 0"
            )
            changed = True

        if changed:
            AppState.set(LEARNED_TODAY_KEY, learned)
            AppState.set(QUIZ_TAKEN_TODAY_KEY, quiz_taken)
            AppState.set(STREAK_KEY, corrected.to_dict())
            db.session.commit()

        return {
            'learned_words_today': learned['count'],
            'total_words_learned': AppState.get(TOTAL_LEARNED_KEY),
            'streak': corrected.to_dict(),
            'quiz_history': AppState.get(QUIZ_HISTORY_KEY),
            'quiz_taken_today': bool(quiz_taken['taken']),
        }

    @staticmethod
    def on_word_learned(word_id: str, is_quick_review: bool, now: Optional[datetime] = None) -> Dict:
        """
        Record that a word was shown in a completed learning step.

        Always refreshes ``last_reviewed``. Only the first non-review learn of
        the word on a given day counts toward the daily and overall totals and
        the streak.
        """
        from wordbloom_app.modules.vocabulary.interface import get_or_create_stat, get_word

        if get_word(word_id) is None:
            current_app.logger.warning(f"[Progress] Learned event for unknown word {word_id}")
            return {'success': False, 'counted': False, 'message': 'Word not found.'}

        now = now or utcnow()
        tz_name = app_timezone()
        today = to_local_date(now, tz_name)

        stat = get_or_create_stat(word_id)
        already_today = to_local_date(stat.last_reviewed, tz_name) == today
        stat.last_reviewed = now

        counted = not is_quick_review and not already_today
        if counted:
            progress = ProgressService.load_progress(today)
            AppState.set(LEARNED_TODAY_KEY, {'count': progress['learned_words_today'] + 1, 'date': today.isoformat()})
            AppState.set(TOTAL_LEARNED_KEY, progress['total_words_learned'] + 1)
            streak = apply_learning_day(StreakState.from_dict(progress['streak']), today)
            AppState.set(STREAK_KEY, streak.to_dict())

        db.session.commit()

        word_learned.send(None, word_id=word_id, is_quick_review=is_quick_review, counted=counted)
        return {'success': True, 'counted': counted}

    @staticmethod
    def on_quiz_complete(score: int, total: int, incorrect_word_ids: Iterable[str] = (),
                         today: Optional[date] = None) -> Dict:
        """Append to the history and mark today's quiz as taken."""
        today = today or local_today()
        entry = {'score': int(score), 'total': int(total), 'date': today.isoformat()}

        history = AppState.get(QUIZ_HISTORY_KEY)
        history.append(entry)
        AppState.set(QUIZ_HISTORY_KEY, history)
        AppState.set(QUIZ_TAKEN_TODAY_KEY, {'taken': True, 'date': today.isoformat()})
        db.session.commit()

        incorrect = list(incorrect_word_ids)
        current_app.logger.info(f"[Progress] Quiz finished: {score}/{total}, {len(incorrect)} incorrect")
        quiz_completed.send(None, score=score, total=total, incorrect_word_ids=incorrect)
        return entry

    @staticmethod
    def get_dashboard() -> Dict:
        from wordbloom_app.modules.gamification.interface import get_level_info
        from wordbloom_app.modules.user_profile.interface import get_settings
        from wordbloom_app.modules.vocabulary.interface import catalog_snapshot

        settings = get_settings()
        progress = ProgressService.load_progress()
        _, stats = catalog_snapshot()

        learned = progress['learned_words_today']
        goal = settings['daily_goal']
        goal_achieved = learned >= goal
        has_incorrect = has_incorrect_words_to_review(stats.values())

        return {
            'username': settings['username'],
            'grade': settings['grade'],
            'learned_words_today': learned,
            'daily_goal': goal,
            'daily_goal_achieved': goal_achieved,
            'total_words_learned': progress['total_words_learned'],
            'streak': progress['streak'],
            'average_quiz_score': round(average_quiz_score(progress['quiz_history']), 1),
            'quiz_taken_today': progress['quiz_taken_today'],
            'has_incorrect_words_to_review': has_incorrect,
            'level': get_level_info(),
            'challenges': [
                {'id': 'daily_goal', 'achieved': goal_achieved, 'reward': CHALLENGE_REWARDS['daily_goal']},
                {'id': 'take_quiz', 'achieved': progress['quiz_taken_today'],
                 'reward': CHALLENGE_REWARDS['take_quiz']},
                # only offers the review action, never marked achieved
                {'id': 'review_incorrect', 'achieved': False, 'available': has_incorrect,
                 'reward': CHALLENGE_REWARDS['review_incorrect']},
            ],
        }

    @staticmethod
    def get_statistics() -> Dict:
        from wordbloom_app.modules.vocabulary.interface import catalog_snapshot

        words, stats = catalog_snapshot()
        progress = ProgressService.load_progress()
        return {
            'total_words': len(words),
            'custom_words': sum(1 for w in words if w.is_custom),
            'mastered_words': sum(1 for s in stats.values() if s.is_mastered),
            'words_by_grade': words_by_grade(words, current_app.config['GRADE_LEVELS']),
            'words_by_unit': [{'unit': unit, 'count': count} for unit, count in words_by_unit(words)],
            'learned_words_today': progress['learned_words_today'],
            'streak': progress['streak'],
            'average_quiz_score': round(average_quiz_score(progress['quiz_history']), 1),
            'quiz_history': progress['quiz_history'],
        }

    @staticmethod
    def reset_progress() -> None:
        """Drop every progress key. The caller commits."""
        for key in (LEARNED_TODAY_KEY, TOTAL_LEARNED_KEY, STREAK_KEY, QUIZ_HISTORY_KEY, QUIZ_TAKEN_TODAY_KEY):
            row = db.session.get(AppState, key)
            if row is not None:
                db.session.delete(row)
