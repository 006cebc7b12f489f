"""Public API of the progress module."""
from datetime import date, datetime
from typing import Dict, Iterable, Optional

from .services.progress_service import ProgressService


def load_progress(today: Optional[date] = None) -> Dict:
    return ProgressService.load_progress(today)


def on_word_learned(word_id: str, is_quick_review: bool, now: Optional[datetime] = None) -> Dict:
    return ProgressService.on_word_learned(word_id, is_quick_review, now)


def on_quiz_complete(score: int, total: int, incorrect_word_ids: Iterable[str] = ()) -> Dict:
    return ProgressService.on_quiz_complete(score, total, incorrect_word_ids)


def reset_progress() -> None:
    ProgressService.reset_progress()
