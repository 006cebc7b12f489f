from .import_service import FileExtractionService, UnitImportService
from .word_service import WordService

__all__ = ['FileExtractionService', 'UnitImportService', 'WordService']
