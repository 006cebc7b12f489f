from flask import jsonify, request, session

from wordbloom_app.core.error_handlers import success_response
from . import user_profile_bp
from .services.settings_service import SettingsService


@user_profile_bp.route('', methods=['GET'])
def get_settings():
    data = SettingsService.get_settings()
    data['setup_complete'] = SettingsService.is_setup_complete()
    return jsonify(success_response(data))


@user_profile_bp.route('/setup', methods=['POST'])
def complete_setup():
    """First-run setup: username, grade and daily goal."""
    settings = SettingsService.complete_setup(request.get_json(silent=True) or {})
    session.clear()
    return jsonify(success_response(settings, 'Setup complete.')), 201


@user_profile_bp.route('', methods=['PUT', 'PATCH'])
def update_settings():
    settings = SettingsService.update_settings(request.get_json(silent=True) or {})
    return jsonify(success_response(settings, 'Settings saved.'))


@user_profile_bp.route('/reset', methods=['POST'])
def reset_all_data():
    """Erase every word, stat, counter and setting."""
    SettingsService.reset_all_data()
    session.clear()
    return jsonify(success_response(message='All data has been reset.'))
