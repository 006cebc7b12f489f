"""
Quiz Rules Engine.
Pure logic, no Database access.

``initialize_quiz`` samples the questions; ``QuizRound`` tracks one quiz:
the current question, its options, the one-shot answer gate and the score.
"""

import logging
import random
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from wordbloom_app.modules.vocabulary.schemas import WordData
from ..logics.distractor_logic import generate_options

logger = logging.getLogger(__name__)

QUIZ_LENGTH = 10


class QuizStatus(str, Enum):
    ACTIVE = 'active'
    FINISHED = 'finished'
    NO_WORDS = 'no_words'


def initialize_quiz(
    catalog: Sequence[WordData],
    grade: str,
    rng: Optional[random.Random] = None
) -> List[WordData]:
    """Up to ``QUIZ_LENGTH`` grade words, sampled uniformly at random."""
    rng = rng or random
    grade_words = [w for w in catalog if w.grade_level == grade]
    return rng.sample(grade_words, min(QUIZ_LENGTH, len(grade_words)))


class QuizRound:
    """
    One quiz in progress.

    Args:
        words: Question words in order.
        grade_words: Same-grade words used for distractors.
        on_incorrect: ``(word_id) -> None``, called at once for each wrong answer.
        on_complete: ``(score, total, incorrect_word_ids) -> None``, called once.
        rng: Source of randomness for the options.
    """

    def __init__(
        self,
        words: Sequence[WordData],
        grade_words: Sequence[WordData],
        on_incorrect: Callable[[str], None],
        on_complete: Callable[[int, int, List[str]], None],
        rng: Optional[random.Random] = None
    ):
        self.words = list(words)
        self.grade_words = list(grade_words)
        self.on_incorrect = on_incorrect
        self.on_complete = on_complete
        self.rng = rng or random

        self.current_index = 0
        self.score = 0
        self.options: List[str] = []
        self.selected_answer: Optional[str] = None
        self.show_result = False
        self.incorrect_word_ids: List[str] = []
        self.status = QuizStatus.ACTIVE if self.words else QuizStatus.NO_WORDS

        if self.words:
            self._setup_question()

    @property
    def total(self) -> int:
        return len(self.words)

    @property
    def current_word(self) -> Optional[WordData]:
        if self.status == QuizStatus.ACTIVE:
            return self.words[self.current_index]
        return None

    def _setup_question(self) -> None:
        self.selected_answer = None
        self.show_result = False
        self.options = generate_options(self.words[self.current_index], self.grade_words, self.rng)

    def select_option(self, option: str) -> Optional[Dict]:
        """Answer the current question. Ignored once a result is showing or for an unknown option."""
        word = self.current_word
        if word is None or self.show_result or option not in self.options:
            return None

        self.selected_answer = option
        self.show_result = True
        is_correct = option == word.meaning
        if is_correct:
            self.score += 1
        else:
            self.incorrect_word_ids.append(word.id)
            self.on_incorrect(word.id)
        return {'is_correct': is_correct, 'correct_answer': word.meaning, 'score': self.score}

    def next_question(self) -> QuizStatus:
        """Move on after a result; finishing reports the outcome once."""
        if self.status != QuizStatus.ACTIVE or not self.show_result:
            return self.status

        if self.current_index < self.total - 1:
            self.current_index += 1
            self._setup_question()
        else:
            self.status = QuizStatus.FINISHED
            logger.debug("Quiz finished: %d/%d", self.score, self.total)
            self.on_complete(self.score, self.total, list(self.incorrect_word_ids))
        return self.status

    def snapshot(self) -> Dict:
        return {
            'word_ids': [w.id for w in self.words],
            'current_index': self.current_index,
            'score': self.score,
            'options': list(self.options),
            'selected_answer': self.selected_answer,
            'show_result': self.show_result,
            'incorrect_word_ids': list(self.incorrect_word_ids),
            'status': self.status.value,
        }

    @classmethod
    def restore(cls, snapshot: Mapping, words_by_id: Mapping[str, WordData], grade_words: Sequence[WordData],
                on_incorrect, on_complete, rng=None) -> 'QuizRound':
        """
        Rebuild a round; words deleted meanwhile are dropped from the remaining questions.

        The index moves back by the dropped questions before it. When the
        current question itself was deleted, the next one is set up fresh.
        """
        stored_ids = list(snapshot.get('word_ids', []))
        stored_index = int(snapshot.get('current_index', 0))
        current_deleted = stored_index < len(stored_ids) and stored_ids[stored_index] not in words_by_id

        quiz = cls.__new__(cls)
        quiz.words = [words_by_id[i] for i in stored_ids if i in words_by_id]
        quiz.grade_words = list(grade_words)
        quiz.on_incorrect = on_incorrect
        quiz.on_complete = on_complete
        quiz.rng = rng or random
        quiz.current_index = stored_index - sum(1 for i in stored_ids[:stored_index] if i not in words_by_id)
        quiz.score = int(snapshot.get('score', 0))
        quiz.options = list(snapshot.get('options', []))
        quiz.selected_answer = snapshot.get('selected_answer')
        quiz.show_result = bool(snapshot.get('show_result'))
        quiz.incorrect_word_ids = list(snapshot.get('incorrect_word_ids', []))
        quiz.status = QuizStatus(snapshot.get('status', QuizStatus.ACTIVE.value))
        if quiz.status == QuizStatus.ACTIVE and quiz.current_index >= len(quiz.words):
            quiz.status = QuizStatus.FINISHED if quiz.words else QuizStatus.NO_WORDS
        elif quiz.status == QuizStatus.ACTIVE and current_deleted:
            quiz._setup_question()
        return quiz
