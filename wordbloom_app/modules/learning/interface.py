"""Public API of the learning module."""
from .services.session_service import LearningSessionService


def drop_live_session() -> None:
    LearningSessionService.drop_live_session()
