"""
Quiz Service
Runs a ``QuizRound`` across requests, keeping its state in the Flask session.
"""
from typing import Dict, Optional

from flask import current_app, session

from wordbloom_app.core.error_handlers import NotFoundError, ValidationError
from ..engine.quiz_engine import QuizRound, QuizStatus, initialize_quiz

LIVE_QUIZ_KEY = 'quiz_live'


class QuizService:
    """Start, answer and advance the learner's quiz."""

    @staticmethod
    def _callbacks():
        from wordbloom_app.modules.progress.interface import on_quiz_complete
        from wordbloom_app.modules.vocabulary.interface import increment_quiz_incorrect

        def on_incorrect(word_id: str) -> None:
            increment_quiz_incorrect(word_id)

        def on_complete(score: int, total: int, incorrect_ids) -> None:
            on_quiz_complete(score, total, incorrect_ids)

        return on_incorrect, on_complete

    @staticmethod
    def _grade() -> str:
        from wordbloom_app.modules.user_profile.interface import get_settings
        return get_settings()['grade']

    @staticmethod
    def start() -> Dict:
        from wordbloom_app.modules.vocabulary.interface import catalog_snapshot

        grade = QuizService._grade()
        catalog, _ = catalog_snapshot(grade)
        words = initialize_quiz(catalog, grade)
        on_incorrect, on_complete = QuizService._callbacks()
        quiz = QuizRound(words, catalog, on_incorrect, on_complete)
        if quiz.status == QuizStatus.NO_WORDS:
            current_app.logger.info(f"[Quiz] No words for grade {grade}")
        return QuizService._save(quiz)

    @staticmethod
    def _restore() -> Optional[QuizRound]:
        from wordbloom_app.modules.vocabulary.interface import catalog_snapshot

        snapshot = session.get(LIVE_QUIZ_KEY)
        if not snapshot:
            return None
        catalog, _ = catalog_snapshot(QuizService._grade())
        all_words, _ = catalog_snapshot()
        on_incorrect, on_complete = QuizService._callbacks()
        return QuizRound.restore(snapshot, {w.id: w for w in all_words}, catalog, on_incorrect, on_complete)

    @staticmethod
    def _require() -> QuizRound:
        quiz = QuizService._restore()
        if quiz is None:
            raise NotFoundError('No quiz in progress.', resource='quiz')
        return quiz

    @staticmethod
    def _save(quiz: QuizRound) -> Dict:
        session[LIVE_QUIZ_KEY] = quiz.snapshot()
        return QuizService.to_payload(quiz)

    @staticmethod
    def to_payload(quiz: QuizRound) -> Dict:
        word = quiz.current_word
        return {
            'status': quiz.status.value,
            'question_number': quiz.current_index + 1 if quiz.total else 0,
            'total': quiz.total,
            'score': quiz.score,
            'term': word.term if word else None,
            'word_id': word.id if word else None,
            'options': quiz.options if word else [],
            'show_result': quiz.show_result,
            'selected_answer': quiz.selected_answer,
            'correct_answer': word.meaning if word and quiz.show_result else None,
            'incorrect_word_ids': quiz.incorrect_word_ids,
        }

    @staticmethod
    def current() -> Dict:
        quiz = QuizService._restore()
        if quiz is None:
            return QuizService.start()
        return QuizService.to_payload(quiz)

    @staticmethod
    def answer(option: str) -> Dict:
        if not isinstance(option, str) or not option:
            raise ValidationError('An option is required.', errors={'option': 'required'})
        quiz = QuizService._require()
        if quiz.current_word is not None and not quiz.show_result and option not in quiz.options:
            raise ValidationError('That option is not part of this question.', errors={'option': 'invalid'})
        result = quiz.select_option(option)
        payload = QuizService._save(quiz)
        payload['result'] = result
        return payload

    @staticmethod
    def next_question() -> Dict:
        quiz = QuizService._require()
        quiz.next_question()
        return QuizService._save(quiz)

    @staticmethod
    def abandon() -> None:
        session.pop(LIVE_QUIZ_KEY, None)
