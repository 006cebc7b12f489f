"""
Learning Session Service
Runs the session controller across HTTP requests.

The live controller state is kept in the Flask session under
``LIVE_SESSION_KEY``; the resumable daily position lives in the scratch store.
"""
from typing import Dict, Optional

from flask import current_app, has_request_context, session

from wordbloom_app.utils.time_utils import app_timezone, local_today
from ..engine.session_controller import LearningSessionController
from ..logics.selection_logic import SelectionMode, select_words
from .scratch_store import FlaskSessionScratchStore

LIVE_SESSION_KEY = 'learning_live'


class LearningSessionService:
    """Request-scoped facade over ``LearningSessionController``."""

    @staticmethod
    def _build_controller(settings: Optional[Dict] = None) -> LearningSessionController:
        from wordbloom_app.modules.progress.interface import on_word_learned
        from wordbloom_app.modules.user_profile.interface import get_settings
        from wordbloom_app.modules.vocabulary.interface import catalog_snapshot

        settings = settings or get_settings()
        grade = settings['grade']
        tz_name = app_timezone()

        def select(mode: SelectionMode, count: int):
            catalog, stats = catalog_snapshot(grade)
            return select_words(catalog, stats, grade, count, mode, local_today(tz_name), tz_name=tz_name)

        def learned(word_id: str, is_quick_review: bool) -> None:
            result = on_word_learned(word_id, is_quick_review)
            if not result['success']:
                current_app.logger.warning(f"[Learning] {result['message']} ({word_id})")

        return LearningSessionController(select, FlaskSessionScratchStore(), learned, settings['daily_goal'])

    @staticmethod
    def _restore() -> Optional[LearningSessionController]:
        from wordbloom_app.modules.vocabulary.interface import catalog_snapshot

        snapshot = session.get(LIVE_SESSION_KEY)
        if not snapshot:
            return None
        controller = LearningSessionService._build_controller()
        catalog, _ = catalog_snapshot()
        controller.restore(snapshot, {w.id: w for w in catalog})
        return controller

    @staticmethod
    def _save(controller: LearningSessionController) -> Dict:
        session[LIVE_SESSION_KEY] = controller.snapshot()
        return LearningSessionService.to_payload(controller)

    @staticmethod
    def to_payload(controller: LearningSessionController) -> Dict:
        from wordbloom_app.modules.vocabulary.interface import get_word_stat

        word = controller.current_word
        current = None
        if word is not None:
            current = word.to_dict()
            current['stat'] = get_word_stat(word.id).to_dict()
        return {
            'state': controller.state.value,
            'mode': controller.mode.value,
            'current_index': controller.current_index,
            'total': len(controller.word_set),
            'current_word': current,
            'notice': controller.notice,
        }

    @staticmethod
    def start() -> Dict:
        """Fresh entry into the learning screen (also what a page reload does)."""
        controller = LearningSessionService._build_controller()
        controller.enter()
        current_app.logger.info(
            f"[Learning] Session entered: {controller.state.value}, "
            f"{controller.current_index}/{len(controller.word_set)}"
        )
        return LearningSessionService._save(controller)

    @staticmethod
    def current() -> Dict:
        controller = LearningSessionService._restore()
        if controller is None:
            return LearningSessionService.start()
        return LearningSessionService.to_payload(controller)

    @staticmethod
    def advance() -> Dict:
        controller = LearningSessionService._restore()
        if controller is None:
            return LearningSessionService.start()
        controller.advance()
        return LearningSessionService._save(controller)

    @staticmethod
    def retry() -> Dict:
        controller = LearningSessionService._restore() or LearningSessionService._build_controller()
        controller.retry_daily_learning()
        return LearningSessionService._save(controller)

    @staticmethod
    def start_quick_review() -> Dict:
        controller = LearningSessionService._restore() or LearningSessionService._build_controller()
        controller.start_quick_review()
        return LearningSessionService._save(controller)

    @staticmethod
    def exit() -> Dict:
        controller = LearningSessionService._restore()
        if controller is not None:
            controller.exit_to_dashboard()
        session.pop(LIVE_SESSION_KEY, None)
        return {'state': 'exited'}

    @staticmethod
    def drop_live_session() -> None:
        """Forget the live session so the next visit re-enters with new settings."""
        if has_request_context():
            session.pop(LIVE_SESSION_KEY, None)
