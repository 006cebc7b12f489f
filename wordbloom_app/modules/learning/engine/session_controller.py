"""
Learning Session Controller.

Drives one learning session: the daily-new word set with resumable progress,
and the short quick-review set that is never resumed.

Pure engine, no Database access. Word selection, the scratch store and the
word-learned handler are injected.
"""
import hashlib
import logging
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional

from wordbloom_app.core.error_handlers import StorageAccessError
from wordbloom_app.modules.vocabulary.schemas import WordData
from ..logics.selection_logic import SelectionMode

logger = logging.getLogger(__name__)

SIGNATURE_VERSION = 'v1'
QUICK_REVIEW_SIZE = 3

SCRATCH_SIGNATURE_KEY = 'learn_words.signature'
SCRATCH_INDEX_KEY = 'learn_words.index'

NOTICE_NOTHING_TO_REVIEW = 'nothing_to_review'


class SessionState(str, Enum):
    LOADING = 'loading'
    DAILY_ACTIVE = 'daily_active'
    DAILY_FINISHED = 'daily_finished'
    REVIEW_ACTIVE = 'review_active'
    REVIEW_FINISHED = 'review_finished'


ACTIVE_STATES = (SessionState.DAILY_ACTIVE, SessionState.REVIEW_ACTIVE)
REVIEW_STATES = (SessionState.REVIEW_ACTIVE, SessionState.REVIEW_FINISHED)


def compute_signature(words: List[WordData]) -> str:
    """
    Versioned fingerprint of an ordered word set.

    >>> compute_signature([]).startswith('v1:')
    True
    """
    digest = hashlib.sha1('\x1f'.join(w.id for w in words).encode('utf-8')).hexdigest()
    return f'{SIGNATURE_VERSION}:{digest}'


class LearningSessionController:
    """
    State machine of a learning session.

    Args:
        select_words: ``(mode, count) -> [WordData]``.
        scratch: store with ``get/set/remove`` for the resumable position.
        on_word_learned: ``(word_id, is_quick_review) -> None``.
        daily_goal: number of words in a daily set.
    """

    def __init__(
        self,
        select_words: Callable[[SelectionMode, int], List[WordData]],
        scratch,
        on_word_learned: Callable[[str, bool], None],
        daily_goal: int
    ):
        self.select_words = select_words
        self.scratch = scratch
        self.on_word_learned = on_word_learned
        self.daily_goal = daily_goal

        self.state = SessionState.LOADING
        self.word_set: List[WordData] = []
        self.current_index = 0
        self.signature: Optional[str] = None
        self.notice: Optional[str] = None

    # ------------------------------------------------------------------ #
    #  Derived state                                                       #
    # ------------------------------------------------------------------ #

    @property
    def is_quick_review(self) -> bool:
        return self.state in REVIEW_STATES

    @property
    def mode(self) -> SelectionMode:
        return SelectionMode.QUICK_REVIEW if self.is_quick_review else SelectionMode.DAILY_NEW

    @property
    def current_word(self) -> Optional[WordData]:
        if self.state in ACTIVE_STATES and 0 <= self.current_index < len(self.word_set):
            return self.word_set[self.current_index]
        return None

    # ------------------------------------------------------------------ #
    #  Transitions                                                         #
    # ------------------------------------------------------------------ #

    def enter(self) -> SessionState:
        """Select the daily set and resume the stored position when it still matches."""
        self.state = SessionState.LOADING
        self.notice = None
        words = self.select_words(SelectionMode.DAILY_NEW, self.daily_goal)
        signature = compute_signature(words)

        index = 0
        stored_signature, stored_index = self._read_position()
        if stored_signature == signature and stored_index is not None and 0 <= stored_index < len(words):
            index = stored_index
            logger.debug("Resuming daily session at %d/%d", index, len(words))
        else:
            self._clear_position()
            if words:
                self._write_position(signature, 0)

        self._start(words, signature, index, SessionState.DAILY_ACTIVE, SessionState.DAILY_FINISHED)
        return self.state

    def advance(self) -> SessionState:
        """Mark the current word learned and move to the next one."""
        word = self.current_word
        if word is None:
            logger.debug("advance() ignored in state %s", self.state.value)
            return self.state

        quick = self.state == SessionState.REVIEW_ACTIVE
        self.on_word_learned(word.id, quick)
        self.current_index += 1
        at_end = self.current_index >= len(self.word_set)

        if quick:
            if at_end:
                self.state = SessionState.REVIEW_FINISHED
        elif at_end:
            self.state = SessionState.DAILY_FINISHED
            self._clear_position()
        else:
            self._write_position(self.signature, self.current_index)
        return self.state

    def retry_daily_learning(self) -> SessionState:
        """Draw a fresh daily set with the same parameters."""
        self.notice = None
        self._clear_position()
        words = self.select_words(SelectionMode.DAILY_NEW, self.daily_goal)
        signature = compute_signature(words)
        if words:
            self._write_position(signature, 0)
        self._start(words, signature, 0, SessionState.DAILY_ACTIVE, SessionState.DAILY_FINISHED)
        return self.state

    def start_quick_review(self) -> SessionState:
        """Review up to three words seen on earlier days. Never persisted."""
        self._clear_position()
        words = self.select_words(SelectionMode.QUICK_REVIEW, QUICK_REVIEW_SIZE)
        self.notice = None if words else NOTICE_NOTHING_TO_REVIEW
        self._start(words, None, 0, SessionState.REVIEW_ACTIVE, SessionState.REVIEW_FINISHED)
        return self.state

    def exit_to_dashboard(self) -> SessionState:
        """Abandon the session."""
        if not self.is_quick_review:
            self._clear_position()
        self.state = SessionState.LOADING
        self.word_set = []
        self.current_index = 0
        self.signature = None
        self.notice = None
        return self.state

    # ------------------------------------------------------------------ #
    #  Snapshot between requests                                           #
    # ------------------------------------------------------------------ #

    def snapshot(self) -> Dict:
        return {
            'state': self.state.value,
            'word_ids': [w.id for w in self.word_set],
            'current_index': self.current_index,
            'signature': self.signature,
            'notice': self.notice,
        }

    def restore(self, snapshot: Mapping, words_by_id: Mapping[str, WordData]) -> SessionState:
        """
        Rebuild live state; words deleted since the snapshot are dropped.

        The position moves back by the number of dropped words before it, so
        the learner stays on the same word (or the next one if it was deleted).
        """
        stored_ids = list(snapshot.get('word_ids', []))
        stored_index = int(snapshot.get('current_index', 0))
        self.word_set = [words_by_id[i] for i in stored_ids if i in words_by_id]
        self.current_index = stored_index - sum(1 for i in stored_ids[:stored_index] if i not in words_by_id)
        self.signature = snapshot.get('signature')
        self.notice = snapshot.get('notice')
        try:
            self.state = SessionState(snapshot.get('state', SessionState.LOADING.value))
        except ValueError:
            self.state = SessionState.LOADING

        if self.state in ACTIVE_STATES and self.current_index >= len(self.word_set):
            self.state = (SessionState.REVIEW_FINISHED if self.state == SessionState.REVIEW_ACTIVE
                          else SessionState.DAILY_FINISHED)
        return self.state

    # ------------------------------------------------------------------ #
    #  Internals                                                           #
    # ------------------------------------------------------------------ #

    def _start(self, words, signature, index, active_state, finished_state):
        self.word_set = list(words)
        self.signature = signature
        self.current_index = index
        self.state = active_state if index < len(self.word_set) else finished_state

    def _read_position(self):
        try:
            signature = self.scratch.get(SCRATCH_SIGNATURE_KEY)
            raw_index = self.scratch.get(SCRATCH_INDEX_KEY)
        except StorageAccessError as exc:
            logger.warning("Could not read learning session position: %s", exc.message)
            return None, None
        try:
            return signature, int(raw_index) if raw_index is not None else None
        except (TypeError, ValueError):
            return signature, None

    def _write_position(self, signature: str, index: int) -> None:
        try:
            self.scratch.set(SCRATCH_SIGNATURE_KEY, signature)
            self.scratch.set(SCRATCH_INDEX_KEY, index)
        except StorageAccessError as exc:
            logger.warning("Could not save learning session position: %s", exc.message)

    def _clear_position(self) -> None:
        try:
            self.scratch.remove(SCRATCH_SIGNATURE_KEY)
            self.scratch.remove(SCRATCH_INDEX_KEY)
        except StorageAccessError as exc:
            logger.warning("Could not clear learning session position: %s", exc.message)
