from flask import jsonify

from wordbloom_app.core.error_handlers import success_response
from . import gamification_api_bp
from .services.xp_service import XpService


@gamification_api_bp.route('/level', methods=['GET'])
def get_level_api():
    """XP and stored level of the learner."""
    return jsonify(success_response(XpService.get_level_info()))
