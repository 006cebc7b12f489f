"""Public API of the vocabulary module for the rest of the app."""
from typing import Dict, List, Optional, Tuple

from .schemas import WordData, WordStatData
from .services.word_service import WordService


def get_word(word_id: str) -> Optional[WordData]:
    word = WordService.get_word(word_id)
    return word.to_data() if word else None


def get_word_stat(word_id: str) -> WordStatData:
    return WordService.get_word_stat(word_id)


def get_or_create_stat(word_id: str):
    return WordService.get_or_create_stat(word_id)


def catalog_snapshot(grade: str = None) -> Tuple[List[WordData], Dict[str, WordStatData]]:
    return WordService.catalog_snapshot(grade)


def increment_quiz_incorrect(word_id: str) -> Optional[int]:
    return WordService.increment_quiz_incorrect(word_id)


def seed_builtin_words() -> int:
    return WordService.seed_builtin_words()


def delete_all_words() -> None:
    WordService.delete_all_words()
