from typing import Dict

from .services.xp_service import XpService


def add_xp(amount: int, reason: str = 'Learning Activity') -> Dict:
    """Public API to award XP."""
    return XpService.add_xp(amount, reason)


def get_level_info() -> Dict:
    return XpService.get_level_info()
