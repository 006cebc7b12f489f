# File: wordbloom_app/modules/AI/routes/api.py
from flask import jsonify, request

from wordbloom_app.core.error_handlers import (
    AIUnavailableError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
    success_response,
)
from .. import ai_bp
from ..interface import ai_status
from ..services.chat_service import current_chat, get_chat_registry
from ..services.enrichment_service import WordEnrichmentService


def _require_ai(feature: str) -> None:
    status = ai_status()
    if not status['configured']:
        raise AIUnavailableError('AI features need an API key. Check the environment variables.', feature=feature)
    if status['cooldown_active']:
        raise AIUnavailableError(
            f"AI quota is exhausted. Try again in {status['cooldown_remaining_seconds'] // 60 + 1} minutes.",
            feature=feature,
        )


def _json_field(name: str) -> str:
    value = ((request.get_json(silent=True) or {}).get(name) or '')
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f'{name} is required.', errors={name: 'required'})
    return value.strip()


@ai_bp.route('/status', methods=['GET'])
def status_api():
    return jsonify(success_response(ai_status()))


@ai_bp.route('/word-details', methods=['POST'])
def word_details_api():
    """AI-filled fields for a new word form."""
    term = _json_field('term')
    _require_ai('word-details')
    details = WordEnrichmentService.lookup_word_details(term)
    if details is None:
        raise ExternalServiceError(f"Could not get details for '{term}' from AI.", feature='word-details')
    return jsonify(success_response(details))


@ai_bp.route('/example', methods=['POST'])
def example_api():
    """A different example sentence for a catalog word."""
    from wordbloom_app.modules.user_profile.interface import get_settings
    from wordbloom_app.modules.vocabulary.interface import get_word

    word_id = _json_field('word_id')
    word = get_word(word_id)
    if word is None:
        raise NotFoundError('Word not found.', resource='word')
    _require_ai('example')

    grade = (request.get_json(silent=True) or {}).get('grade') or get_settings()['grade']
    example = WordEnrichmentService.generate_alternate_example(word, grade)
    if example is None:
        raise ExternalServiceError(f"Could not create a new example for '{word.term}'.", feature='example')
    return jsonify(success_response({'word_id': word.id, **example}))


@ai_bp.route('/image', methods=['POST'])
def image_api():
    term = _json_field('term')
    _require_ai('image')
    image = WordEnrichmentService.generate_image(term)
    if image is None:
        raise ExternalServiceError(f"Could not create an image for '{term}'.", feature='image')
    return jsonify(success_response({'term': term, 'mime_type': 'image/jpeg', 'image_base64': image}))


@ai_bp.route('/summary', methods=['POST'])
def summary_api():
    """Summarize posted text, or the text of an uploaded file (multipart ``file``)."""
    from wordbloom_app.modules.vocabulary.services.import_service import FileExtractionService

    upload = request.files.get('file')
    if upload is not None:
        text = FileExtractionService.extract_text(upload.filename, upload.read())
    else:
        text = (request.get_json(silent=True) or {}).get('text') or ''
    if not isinstance(text, str) or not text.strip():
        raise ValidationError('There is no text to summarize.', errors={'text': 'required'})

    _require_ai('summary')
    summary = WordEnrichmentService.summarize(text)
    if summary is None:
        raise ExternalServiceError('Could not summarize the text.', feature='summary')
    return jsonify(success_response({'summary': summary}))


@ai_bp.route('/chat', methods=['GET'])
def chat_history_api():
    """Open (or resume) the tutor chat; the first message is the tutor's greeting."""
    _require_ai('chat')
    chat = current_chat()
    greeting = chat.open()
    return jsonify(success_response({'messages': chat.messages or [greeting]}))


@ai_bp.route('/chat', methods=['POST'])
def chat_send_api():
    message = _json_field('message')
    _require_ai('chat')
    reply = current_chat().send(message)
    if reply is None:
        raise ExternalServiceError('The AI tutor did not answer. Please try again.', feature='chat')
    return jsonify(success_response({'reply': reply}))


@ai_bp.route('/chat', methods=['DELETE'])
def chat_reset_api():
    get_chat_registry().reset()
    return jsonify(success_response(message='Chat cleared.'))
