# File: wordbloom_app/modules/vocabulary/routes/api.py
from flask import jsonify, request

from wordbloom_app.core.error_handlers import NotFoundError, ValidationError, error_response, success_response
from .. import vocabulary_bp
from ..services.import_service import UnitImportService
from ..services.word_service import WordService

_FAILURE_STATUS = {'NOT_FOUND': 404, 'DUPLICATE_TERM': 409}


def _word_payload(word):
    payload = word.to_dict()
    payload['stat'] = WordService.get_word_stat(word.id).to_dict()
    return payload


def _current_grade():
    from wordbloom_app.modules.user_profile.interface import get_settings
    return get_settings()['grade']


def _failure(result):
    status = _FAILURE_STATUS.get(result.get('code'), 400)
    details = {'errors': result['errors']} if result.get('errors') else None
    return error_response(result['message'], result.get('code', 'VALIDATION_ERROR'), status, details)


@vocabulary_bp.route('', methods=['GET'])
def list_words():
    """List catalog words, optionally filtered by grade, unit, custom flag or search text."""
    words = WordService.list_words(
        grade=request.args.get('grade'),
        unit=request.args.get('unit'),
        custom_only=request.args.get('custom', '').lower() in ('1', 'true', 'yes'),
        search=request.args.get('q'),
    )
    return jsonify(success_response({'words': [_word_payload(w) for w in words], 'total': len(words)}))


@vocabulary_bp.route('/<word_id>', methods=['GET'])
def get_word(word_id):
    word = WordService.get_word(word_id)
    if word is None:
        raise NotFoundError('Word not found.', resource='word')
    return jsonify(success_response(_word_payload(word)))


@vocabulary_bp.route('', methods=['POST'])
def create_word():
    """Add a custom word. The term must not exist yet, in any letter case."""
    data = request.get_json(silent=True) or {}
    data.pop('id', None)
    result = WordService.save_custom_word(data, data.get('grade_level') or _current_grade(), data.get('unit'))
    if not result['success']:
        return _failure(result)
    return jsonify(success_response(result['word'], result['message'])), 201


@vocabulary_bp.route('/<word_id>', methods=['PUT'])
def update_word(word_id):
    data = request.get_json(silent=True) or {}
    data['id'] = word_id
    result = WordService.save_custom_word(data, unit_number=data.get('unit'))
    if not result['success']:
        return _failure(result)
    return jsonify(success_response(result['word'], result['message']))


@vocabulary_bp.route('/<word_id>', methods=['DELETE'])
def delete_word(word_id):
    result = WordService.delete_custom_word(word_id)
    if not result['success']:
        return _failure(result)
    return jsonify(success_response(message=result['message']))


@vocabulary_bp.route('/<word_id>/mastered', methods=['POST'])
def toggle_mastered(word_id):
    result = WordService.toggle_mastered(word_id)
    if not result['success']:
        raise NotFoundError(result['message'], resource='word')
    return jsonify(success_response(result['stat']))


@vocabulary_bp.route('/import/extract', methods=['POST'])
def extract_import_candidates():
    """Upload a PDF/TXT/XLSX/CSV file and get the new terms found in it."""
    upload = request.files.get('file')
    if upload is None or not upload.filename:
        raise ValidationError('No file uploaded.', errors={'file': 'required'})
    candidates = UnitImportService.extract_candidates(upload.filename, upload.read())
    return jsonify(success_response({'terms': candidates, 'count': len(candidates)}))


@vocabulary_bp.route('/import/save', methods=['POST'])
def save_import():
    data = request.get_json(silent=True) or {}
    unit = data.get('unit')
    if unit is None or not str(unit).strip():
        raise ValidationError('A unit is required.', errors={'unit': 'required'})
    report = UnitImportService.import_unit_words(
        data.get('terms') or [], data.get('grade') or _current_grade(), unit
    )
    return jsonify(success_response(report))
