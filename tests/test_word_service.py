"""
Tests for the Word Service: custom word CRUD, stats and seeding.
"""

import pytest

from wordbloom_app.core.extensions import db
from wordbloom_app.models import Word, WordStat
from wordbloom_app.modules.gamification.interface import get_level_info
from wordbloom_app.modules.vocabulary.services.word_service import WordService


def _custom(term='rocket', **extra):
    data = {
        'term': term,
        'part_of_speech': '명사',
        'meaning': '로켓',
        'example_sentence': f'The {term} flew high.',
    }
    data.update(extra)
    return data


class TestSeeding:

    def test_builtin_catalog_is_seeded_once(self, app):
        assert Word.query.count() == 30
        assert WordService.seed_builtin_words() == 0
        assert Word.query.filter_by(is_custom=True).count() == 0


class TestWordStats:

    def test_unknown_stat_is_default_and_not_written(self, app):
        stat = WordService.get_word_stat('m1-001')

        assert stat.is_mastered is False
        assert stat.last_reviewed is None
        assert stat.quiz_incorrect_count == 0
        assert WordStat.query.count() == 0

    def test_stat_for_missing_word_is_default(self, app):
        assert WordService.get_word_stat('nope').word_id == 'nope'
        assert WordStat.query.count() == 0

    def test_increment_quiz_incorrect(self, app):
        assert WordService.increment_quiz_incorrect('m1-001') == 1
        assert WordService.increment_quiz_incorrect('m1-001') == 2
        assert WordService.increment_quiz_incorrect('missing') is None

    def test_toggle_mastered(self, app):
        assert WordService.toggle_mastered('m1-001')['is_mastered'] is True
        assert WordService.toggle_mastered('m1-001')['is_mastered'] is False
        assert WordService.toggle_mastered('missing')['success'] is False


class TestSaveCustomWord:

    def test_create(self, app, learner):
        result = WordService.save_custom_word(_custom(), 'middle2', 3)

        assert result['success'] and result['created']
        word = WordService.get_word(result['word']['id'])
        assert word.is_custom
        assert word.grade_level == 'middle2'
        assert word.unit == '3'
        assert db.session.get(WordStat, word.id) is not None
        # +2 XP for a new custom word
        assert get_level_info()['xp'] == 2

    @pytest.mark.parametrize('term', ['Apple', 'APPLE', ' apple '])
    def test_duplicate_builtin_term_any_case(self, app, term):
        before = Word.query.count()
        result = WordService.save_custom_word(_custom(term))

        assert result['success'] is False
        assert result['code'] == 'DUPLICATE_TERM'
        assert Word.query.count() == before

    def test_duplicate_custom_term(self, app):
        WordService.save_custom_word(_custom('rocket'))
        result = WordService.save_custom_word(_custom('Rocket'))
        assert result['code'] == 'DUPLICATE_TERM'
        assert Word.query.filter_by(is_custom=True).count() == 1

    def test_missing_fields(self, app):
        result = WordService.save_custom_word({'term': 'rocket', 'meaning': ''})
        assert result['success'] is False
        assert set(result['errors']) == {'meaning', 'part_of_speech', 'example_sentence'}

    def test_update(self, app):
        created = WordService.save_custom_word(_custom())
        word_id = created['word']['id']

        result = WordService.save_custom_word(_custom(id=word_id, meaning='우주선', unit='5'))
        assert result['success'] and not result['created']
        word = WordService.get_word(word_id)
        assert word.meaning == '우주선'
        assert word.unit == '5'

    def test_update_to_existing_term_is_rejected(self, app):
        created = WordService.save_custom_word(_custom())
        result = WordService.save_custom_word(_custom('apple', id=created['word']['id']))
        assert result['code'] == 'DUPLICATE_TERM'
        assert WordService.get_word(created['word']['id']).term == 'rocket'

    def test_update_of_builtin_is_not_found(self, app):
        result = WordService.save_custom_word(_custom('apple', id='m1-001'))
        assert result['code'] == 'NOT_FOUND'

    def test_unknown_grade_is_rejected_on_create(self, app):
        before = Word.query.count()
        result = WordService.save_custom_word(_custom(), 'middle9')

        assert result['success'] is False
        assert result['errors'] == {'grade_level': 'invalid'}
        assert Word.query.count() == before

    def test_unknown_grade_is_rejected_on_update(self, app):
        created = WordService.save_custom_word(_custom(), 'middle1')
        word_id = created['word']['id']

        result = WordService.save_custom_word(_custom(id=word_id, grade_level='middle9'))
        assert result['errors'] == {'grade_level': 'invalid'}
        assert WordService.get_word(word_id).grade_level == 'middle1'


class TestDeleteCustomWord:

    def test_delete_removes_word_and_stat(self, app):
        created = WordService.save_custom_word(_custom())
        word_id = created['word']['id']
        WordService.increment_quiz_incorrect(word_id)

        assert WordService.delete_custom_word(word_id)['success'] is True
        assert WordService.get_word(word_id) is None
        assert db.session.get(WordStat, word_id) is None

        again = WordService.delete_custom_word(word_id)
        assert again['success'] is False
        assert again['code'] == 'NOT_FOUND'

    def test_builtin_words_cannot_be_deleted(self, app):
        result = WordService.delete_custom_word('m1-001')
        assert result['code'] == 'BUILTIN_WORD'
        assert WordService.get_word('m1-001') is not None


class TestListWords:

    def test_filters(self, app):
        WordService.save_custom_word(_custom(), 'middle1', 2)

        assert len(WordService.list_words(grade='middle1')) == 11
        assert [w.term for w in WordService.list_words(custom_only=True)] == ['rocket']
        assert [w.term for w in WordService.list_words(search='로켓')] == ['rocket']
