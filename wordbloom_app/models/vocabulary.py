"""Word catalog and per-word learning state."""

from __future__ import annotations

from sqlalchemy.sql import func

from wordbloom_app.core.extensions import db
from wordbloom_app.utils.time_utils import ensure_utc


class Word(db.Model):
    """A catalog entry, built-in (seeded) or custom (user-authored)."""

    __tablename__ = 'words'

    id = db.Column(db.String(64), primary_key=True)
    term = db.Column(db.String(100), nullable=False)
    # lower-cased term; enforces case-insensitive uniqueness
    term_key = db.Column(db.String(100), nullable=False, unique=True, index=True)
    pronunciation = db.Column(db.String(100), nullable=True)
    part_of_speech = db.Column(db.String(50), nullable=False)
    meaning = db.Column(db.Text, nullable=False)
    example_sentence = db.Column(db.Text, nullable=False)
    example_sentence_meaning = db.Column(db.Text, nullable=True)
    grade_level = db.Column(db.String(20), nullable=False, index=True)
    unit = db.Column(db.String(50), nullable=True, index=True)
    is_custom = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    stat = db.relationship(
        'WordStat',
        uselist=False,
        back_populates='word',
        cascade='all, delete-orphan',
        lazy=True,
    )

    @staticmethod
    def normalize_term(term: str) -> str:
        return (term or '').strip().lower()

    def to_data(self) -> 'WordData':
        from wordbloom_app.modules.vocabulary.schemas import WordData

        return WordData(
            id=self.id,
            term=self.term,
            part_of_speech=self.part_of_speech,
            meaning=self.meaning,
            example_sentence=self.example_sentence,
            grade_level=self.grade_level,
            pronunciation=self.pronunciation,
            example_sentence_meaning=self.example_sentence_meaning,
            unit=self.unit,
            is_custom=bool(self.is_custom),
        )

    def to_dict(self) -> dict:
        return self.to_data().to_dict()

    def __repr__(self) -> str:
        return f'<Word {self.id} {self.term!r}>'


class WordStat(db.Model):
    """Mutable learning state of one word, created lazily."""

    __tablename__ = 'word_stats'

    word_id = db.Column(db.String(64), db.ForeignKey('words.id'), primary_key=True)
    is_mastered = db.Column(db.Boolean, nullable=False, default=False)
    last_reviewed = db.Column(db.DateTime(timezone=True), nullable=True)
    quiz_incorrect_count = db.Column(db.Integer, nullable=False, default=0)

    word = db.relationship('Word', back_populates='stat')

    def to_data(self) -> 'WordStatData':
        from wordbloom_app.modules.vocabulary.schemas import WordStatData

        return WordStatData(
            word_id=self.word_id,
            is_mastered=bool(self.is_mastered),
            last_reviewed=ensure_utc(self.last_reviewed) if self.last_reviewed else None,
            quiz_incorrect_count=self.quiz_incorrect_count or 0,
        )

    def to_dict(self) -> dict:
        return self.to_data().to_dict()

    def __repr__(self) -> str:
        return f'<WordStat {self.word_id} mastered={self.is_mastered}>'
