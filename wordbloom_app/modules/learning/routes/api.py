# File: wordbloom_app/modules/learning/routes/api.py
from flask import jsonify

from wordbloom_app.core.error_handlers import success_response
from .. import learning_bp
from ..services.session_service import LearningSessionService


@learning_bp.route('/session', methods=['GET'])
def current_session():
    """Live session state, entering a new session when there is none."""
    return jsonify(success_response(LearningSessionService.current()))


@learning_bp.route('/session/start', methods=['POST'])
def start_session():
    return jsonify(success_response(LearningSessionService.start()))


@learning_bp.route('/session/advance', methods=['POST'])
def advance_session():
    """Mark the current word learned and move on."""
    return jsonify(success_response(LearningSessionService.advance()))


@learning_bp.route('/session/retry', methods=['POST'])
def retry_session():
    return jsonify(success_response(LearningSessionService.retry()))


@learning_bp.route('/session/quick-review', methods=['POST'])
def quick_review():
    return jsonify(success_response(LearningSessionService.start_quick_review()))


@learning_bp.route('/session/exit', methods=['POST'])
def exit_session():
    return jsonify(success_response(LearningSessionService.exit()))
