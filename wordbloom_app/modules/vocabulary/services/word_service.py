"""
Word Service
Catalog and word-stat management: listing, custom word CRUD, mastery, seeding.
"""
import uuid
from typing import Dict, List, Optional

from flask import current_app
from sqlalchemy import func

from wordbloom_app.core.extensions import db
from wordbloom_app.core.signals import custom_word_created, custom_word_deleted
from wordbloom_app.models import Word, WordStat
from ..logics.word_logic import (
    EDITABLE_WORD_FIELDS,
    missing_required_fields,
    normalize_unit,
)
from ..schemas import WordStatData
from ..seed_data import BUILTIN_WORDS


class WordService:
    """Catalog operations backed by the ``words`` and ``word_stats`` tables."""

    @staticmethod
    def list_words(grade: str = None, unit: str = None, custom_only: bool = False,
                   search: str = None) -> List[Word]:
        query = Word.query
        if grade:
            query = query.filter(Word.grade_level == grade)
        if unit is not None:
            query = query.filter(Word.unit == normalize_unit(unit))
        if custom_only:
            query = query.filter(Word.is_custom.is_(True))
        if search:
            pattern = f"%{search.strip().lower()}%"
            query = query.filter(func.lower(Word.term).like(pattern) | func.lower(Word.meaning).like(pattern))
        return query.order_by(Word.term_key).all()

    @staticmethod
    def get_word(word_id: str) -> Optional[Word]:
        return db.session.get(Word, word_id)

    @staticmethod
    def get_word_stat(word_id: str) -> WordStatData:
        """Stat of a word, or the default when none is stored. Never writes."""
        stat = db.session.get(WordStat, word_id)
        if stat is None:
            return WordStatData.default(word_id)
        return stat.to_data()

    @staticmethod
    def get_or_create_stat(word_id: str) -> WordStat:
        """Stored stat row for ``word_id``, added to the session if missing."""
        stat = db.session.get(WordStat, word_id)
        if stat is None:
            stat = WordStat(word_id=word_id, is_mastered=False, last_reviewed=None, quiz_incorrect_count=0)
            db.session.add(stat)
        return stat

    @staticmethod
    def catalog_snapshot(grade: str = None):
        """Plain data for the pure logics: (words, {word_id: stat})."""
        words = WordService.list_words(grade=grade)
        ids = [word.id for word in words]
        stats = {}
        if ids:
            for stat in WordStat.query.filter(WordStat.word_id.in_(ids)).all():
                stats[stat.word_id] = stat.to_data()
        return [word.to_data() for word in words], stats

    @staticmethod
    def all_terms() -> List[str]:
        return [row[0] for row in db.session.query(Word.term).all()]

    @staticmethod
    def increment_quiz_incorrect(word_id: str) -> Optional[int]:
        if WordService.get_word(word_id) is None:
            current_app.logger.warning(f"[Vocabulary] Quiz miss for unknown word {word_id}")
            return None
        stat = WordService.get_or_create_stat(word_id)
        stat.quiz_incorrect_count = (stat.quiz_incorrect_count or 0) + 1
        db.session.commit()
        return stat.quiz_incorrect_count

    @staticmethod
    def toggle_mastered(word_id: str) -> Dict:
        word = WordService.get_word(word_id)
        if word is None:
            return {'success': False, 'message': 'Word not found.'}
        stat = WordService.get_or_create_stat(word_id)
        stat.is_mastered = not stat.is_mastered
        db.session.commit()
        return {'success': True, 'is_mastered': stat.is_mastered, 'stat': stat.to_dict()}

    @staticmethod
    def save_custom_word(data: Dict, grade_level_for_new: str = None, unit_number=None) -> Dict:
        """
        Create or update a custom word.

        Returns ``{'success', 'message', 'word', 'created'}``. Failures never
        mutate the catalog.
        """
        missing = missing_required_fields(data)
        if missing:
            return {
                'success': False,
                'message': 'Term, meaning, part of speech and example sentence are required.',
                'errors': {field: 'required' for field in missing},
            }

        term = data['term'].strip()

        if data.get('id'):
            grade = data.get('grade_level')
        else:
            grade = grade_level_for_new or data.get('grade_level') or current_app.config.get('DEFAULT_GRADE', 'middle1')
        if grade is not None and grade not in current_app.config['GRADE_LEVELS']:
            current_app.logger.info(f"[Vocabulary] Rejected '{term}' with unknown grade '{grade}'")
            return {
                'success': False,
                'message': f"Unknown grade '{grade}'.",
                'errors': {'grade_level': 'invalid'},
            }

        if data.get('id'):
            return WordService._update_custom_word(data['id'], term, data, unit_number)

        conflict = Word.query.filter_by(term_key=Word.normalize_term(term)).first()
        if conflict is not None:
            where = 'built-in words' if not conflict.is_custom else 'your words'
            current_app.logger.info(f"[Vocabulary] Rejected duplicate term '{term}' (already in {where})")
            return {'success': False, 'message': f"'{term}' already exists in {where}.", 'code': 'DUPLICATE_TERM'}

        word = Word(
            id=uuid.uuid4().hex,
            term=term,
            term_key=Word.normalize_term(term),
            pronunciation=(data.get('pronunciation') or '').strip() or None,
            part_of_speech=data['part_of_speech'].strip(),
            meaning=data['meaning'].strip(),
            example_sentence=data['example_sentence'].strip(),
            example_sentence_meaning=(data.get('example_sentence_meaning') or '').strip() or None,
            grade_level=grade,
            unit=normalize_unit(unit_number if unit_number is not None else data.get('unit')),
            is_custom=True,
        )
        db.session.add(word)
        WordService.get_or_create_stat(word.id)
        db.session.commit()

        current_app.logger.info(f"[Vocabulary] Created custom word '{term}' ({word.id})")
        custom_word_created.send(
            None, word_id=word.id, term=word.term, grade_level=word.grade_level, unit=word.unit
        )
        return {'success': True, 'created': True, 'message': f"'{term}' was added.", 'word': word.to_dict()}

    @staticmethod
    def _update_custom_word(word_id: str, term: str, data: Dict, unit_number) -> Dict:
        word = Word.query.filter_by(id=word_id, is_custom=True).first()
        if word is None:
            return {'success': False, 'message': 'Could not find the word to update.', 'code': 'NOT_FOUND'}

        clash = Word.query.filter(Word.id != word_id, Word.term_key == Word.normalize_term(term)).first()
        if clash is not None:
            return {'success': False, 'message': f"'{term}' already exists.", 'code': 'DUPLICATE_TERM'}

        for field in EDITABLE_WORD_FIELDS:
            if field in data and field not in ('term', 'unit') and data[field] is not None:
                value = data[field]
                setattr(word, field, value.strip() if isinstance(value, str) else value)
        word.term = term
        word.term_key = Word.normalize_term(term)
        if unit_number is not None:
            word.unit = normalize_unit(unit_number)
        elif 'unit' in data:
            word.unit = normalize_unit(data['unit'])
        db.session.commit()

        current_app.logger.info(f"[Vocabulary] Updated custom word '{term}' ({word.id})")
        return {'success': True, 'created': False, 'message': f"'{term}' was updated.", 'word': word.to_dict()}

    @staticmethod
    def delete_custom_word(word_id: str) -> Dict:
        word = WordService.get_word(word_id)
        if word is None:
            return {'success': False, 'message': 'Could not find the word to delete.', 'code': 'NOT_FOUND'}
        if not word.is_custom:
            return {'success': False, 'message': 'Built-in words cannot be deleted.', 'code': 'BUILTIN_WORD'}

        term = word.term
        # cascade removes the stat with the word
        db.session.delete(word)
        db.session.commit()

        current_app.logger.info(f"[Vocabulary] Deleted custom word '{term}' ({word_id})")
        custom_word_deleted.send(None, word_id=word_id, term=term)
        return {'success': True, 'message': f"'{term}' was deleted."}

    @staticmethod
    def seed_builtin_words() -> int:
        """Insert missing built-in words. Idempotent; returns the number added."""
        existing_ids = {row[0] for row in db.session.query(Word.id).all()}
        existing_keys = {row[0] for row in db.session.query(Word.term_key).all()}
        created = 0
        for entry in BUILTIN_WORDS:
            key = Word.normalize_term(entry['term'])
            if entry['id'] in existing_ids or key in existing_keys:
                continue
            db.session.add(Word(term_key=key, is_custom=False, **entry))
            existing_keys.add(key)
            created += 1
        if created:
            db.session.commit()
        return created

    @staticmethod
    def delete_all_words() -> None:
        """Remove every word and stat. The caller commits."""
        WordStat.query.delete()
        Word.query.delete()
