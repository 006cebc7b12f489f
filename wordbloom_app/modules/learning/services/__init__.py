from .scratch_store import FlaskSessionScratchStore, MemoryScratchStore
from .session_service import LearningSessionService

__all__ = ['FlaskSessionScratchStore', 'LearningSessionService', 'MemoryScratchStore']
