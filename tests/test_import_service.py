"""
Tests for file extraction and unit import.
"""

import io
from unittest.mock import patch

import pytest
from openpyxl import Workbook

from wordbloom_app.core.error_handlers import AIUnavailableError, ValidationError
from wordbloom_app.models import Word
from wordbloom_app.modules.vocabulary.services.import_service import FileExtractionService, UnitImportService

LOOKUP = 'wordbloom_app.modules.AI.interface.lookup_word_details'


def _details(term):
    return {
        'term': term,
        'pronunciation': None,
        'part_of_speech': '명사',
        'meaning': f'{term} 뜻',
        'example_sentence': f'I see a {term}.',
        'example_sentence_meaning': None,
    }


class TestExtractText:

    def test_txt(self, app):
        assert FileExtractionService.extract_text('unit1.txt', 'Hello Planet'.encode('utf-8')) == 'Hello Planet'

    def test_csv(self, app):
        text = FileExtractionService.extract_text('words.csv', b'rocket,planet\ncomet,')
        assert 'rocket' in text and 'planet' in text and 'comet' in text

    def test_xlsx_first_sheet(self, app):
        wb = Workbook()
        ws = wb.active
        ws.append(['galaxy', 'orbit'])
        ws.append(['nebula', None])
        other = wb.create_sheet('Other')
        other.append(['ignored'])
        buffer = io.BytesIO()
        wb.save(buffer)

        text = FileExtractionService.extract_text('unit.xlsx', buffer.getvalue())
        assert text.split('\n') == ['galaxy orbit', 'nebula']

    def test_unsupported_extension(self, app):
        with pytest.raises(ValidationError):
            FileExtractionService.extract_text('notes.docx', b'')

    @pytest.mark.parametrize('filename, data', [
        ('unit1.pdf', b'not a pdf'),
        ('unit1.xlsx', b'not a workbook'),
        ('unit1.xls', b'not a workbook either'),
    ])
    def test_corrupt_file_is_a_validation_error(self, app, filename, data):
        with pytest.raises(ValidationError) as excinfo:
            FileExtractionService.extract_text(filename, data)
        assert excinfo.value.details == {'errors': {'file': 'unreadable'}}

    def test_empty_csv(self, app):
        assert FileExtractionService.extract_text('words.csv', b'') == ''

    def test_candidates_skip_known_terms(self, app):
        candidates = UnitImportService.extract_candidates('unit.txt', b'An apple and a rocket, a Rocket!')
        # 'apple' is a built-in word
        assert candidates == ['and', 'rocket']


class TestImportUnitWords:

    def test_refused_without_api_key(self, app):
        with pytest.raises(AIUnavailableError):
            UnitImportService.import_unit_words(['rocket'], 'middle1', 3)

    def test_refused_during_cooldown(self, app):
        app.config['GEMINI_API_KEY'] = 'test-key'
        app.extensions['quota_cooldown'].trip()
        try:
            with pytest.raises(AIUnavailableError):
                UnitImportService.import_unit_words(['rocket'], 'middle1', 3)
        finally:
            app.extensions['quota_cooldown'].reset()

    def test_empty_selection(self, app):
        with pytest.raises(ValidationError):
            UnitImportService.import_unit_words(['', '  '], 'middle1', 3)

    def test_unknown_grade(self, app):
        app.config['GEMINI_API_KEY'] = 'test-key'
        with pytest.raises(ValidationError):
            UnitImportService.import_unit_words(['rocket'], 'middle9', 3)

    def test_report(self, app):
        app.config['GEMINI_API_KEY'] = 'test-key'

        def lookup(term):
            return None if term == 'zzzq' else _details(term)

        with patch(LOOKUP, side_effect=lookup):
            report = UnitImportService.import_unit_words(['rocket', 'apple', 'zzzq'], 'middle2', 4)

        assert report == {
            'processed': 2,
            'saved': ['rocket'],
            'already_present': ['apple'],
            'lookup_failed': ['zzzq'],
        }
        rocket = Word.query.filter_by(term_key='rocket').one()
        assert rocket.is_custom
        assert rocket.unit == '4'
        assert rocket.grade_level == 'middle2'
