from typing import Dict

from .services.settings_service import SettingsService


def get_settings() -> Dict:
    """Current learner settings, defaults filled in."""
    return SettingsService.get_settings()
