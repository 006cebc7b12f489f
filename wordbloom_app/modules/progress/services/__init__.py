from .progress_service import ProgressService

__all__ = ['ProgressService']
