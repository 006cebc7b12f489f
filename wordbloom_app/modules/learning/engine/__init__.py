from .session_controller import LearningSessionController, SessionState, compute_signature

__all__ = ['LearningSessionController', 'SessionState', 'compute_signature']
