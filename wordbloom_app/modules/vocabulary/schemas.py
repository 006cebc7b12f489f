from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class WordData:
    """Catalog entry as seen by the pure selection and quiz logic."""
    id: str
    term: str
    part_of_speech: str
    meaning: str
    example_sentence: str
    grade_level: str
    pronunciation: Optional[str] = None
    example_sentence_meaning: Optional[str] = None
    unit: Optional[str] = None
    is_custom: bool = False

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class WordStatData:
    """Learning state of a word. A missing record equals ``WordStatData.default``."""
    word_id: str
    is_mastered: bool = False
    last_reviewed: Optional[datetime] = None
    quiz_incorrect_count: int = 0

    @classmethod
    def default(cls, word_id: str) -> 'WordStatData':
        return cls(word_id=word_id)

    def to_dict(self) -> dict:
        return {
            'word_id': self.word_id,
            'is_mastered': self.is_mastered,
            'last_reviewed': self.last_reviewed.isoformat() if self.last_reviewed else None,
            'quiz_incorrect_count': self.quiz_incorrect_count,
        }
