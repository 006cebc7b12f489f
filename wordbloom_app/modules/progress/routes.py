from flask import jsonify

from wordbloom_app.core.error_handlers import success_response
from . import progress_bp
from .services.progress_service import ProgressService


@progress_bp.route('/dashboard', methods=['GET'])
def dashboard():
    """Today's progress, streak, level and challenges."""
    return jsonify(success_response(ProgressService.get_dashboard()))


@progress_bp.route('/statistics', methods=['GET'])
def statistics():
    return jsonify(success_response(ProgressService.get_statistics()))
