from flask import jsonify, request

from wordbloom_app.core.error_handlers import success_response
from . import quiz_bp
from .services.quiz_service import QuizService


@quiz_bp.route('', methods=['GET'])
def current_quiz():
    """Quiz in progress, starting one when there is none."""
    return jsonify(success_response(QuizService.current()))


@quiz_bp.route('/start', methods=['POST'])
def start_quiz():
    return jsonify(success_response(QuizService.start()))


@quiz_bp.route('/answer', methods=['POST'])
def answer():
    data = request.get_json(silent=True) or {}
    return jsonify(success_response(QuizService.answer(data.get('option'))))


@quiz_bp.route('/next', methods=['POST'])
def next_question():
    return jsonify(success_response(QuizService.next_question()))


@quiz_bp.route('', methods=['DELETE'])
def abandon_quiz():
    QuizService.abandon()
    return jsonify(success_response(message='Quiz abandoned.'))
