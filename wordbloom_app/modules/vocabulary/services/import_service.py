"""
Unit Import Service
Extracts plain text from uploaded files and turns selected terms into custom
words with AI-filled details.
"""
import io
import os
from typing import Dict, Iterable, List
from zipfile import BadZipFile

import fitz  # PyMuPDF
import pandas as pd
from flask import current_app
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from wordbloom_app.core.error_handlers import AIUnavailableError, ValidationError
from ..logics.word_logic import extract_candidate_terms, missing_required_fields
from .word_service import WordService

SUPPORTED_EXTENSIONS = ('.pdf', '.txt', '.xlsx', '.xls', '.csv')

# Raised by PyMuPDF, pandas and openpyxl for corrupt or mislabeled uploads
UNREADABLE_FILE_ERRORS = (fitz.FileDataError, InvalidFileException, BadZipFile, ValueError, KeyError)


class FileExtractionService:
    """Plain-text extraction for PDF, TXT, XLSX/XLS and CSV uploads."""

    @staticmethod
    def extract_text(filename: str, data: bytes) -> str:
        ext = os.path.splitext(filename or '')[1].lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValidationError(
                'Unsupported file type. Only PDF, TXT, XLSX and CSV files are supported.',
                errors={'file': ext or 'missing extension'},
            )

        try:
            return FileExtractionService._extract(ext, data)
        except UNREADABLE_FILE_ERRORS as e:
            current_app.logger.warning(f"[Import] Could not read {filename}: {type(e).__name__}: {e}")
            raise ValidationError('Could not read the file.', errors={'file': 'unreadable'}) from e

    @staticmethod
    def _extract(ext: str, data: bytes) -> str:
        if ext == '.pdf':
            return FileExtractionService._extract_pdf(data)
        if ext == '.txt':
            return data.decode('utf-8', errors='ignore')
        if ext == '.csv':
            if not data.strip():
                return ''
            frame = pd.read_csv(io.BytesIO(data), header=None, dtype=str, keep_default_na=False)
            return FileExtractionService._frame_to_text(frame)
        if ext == '.xlsx':
            return FileExtractionService._extract_xlsx(data)
        # .xls needs pandas' engine detection
        frame = pd.read_excel(io.BytesIO(data), header=None, dtype=str)
        return FileExtractionService._frame_to_text(frame.fillna(''))

    @staticmethod
    def _extract_pdf(data: bytes) -> str:
        text = ""
        with fitz.open(stream=data, filetype="pdf") as doc:
            for page in doc:
                text += page.get_text() + "\n"
        return text

    @staticmethod
    def _extract_xlsx(data: bytes) -> str:
        # data_only reads cached formula results instead of formula strings
        wb = load_workbook(io.BytesIO(data), data_only=True, read_only=True)
        try:
            ws = wb[wb.sheetnames[0]]
            lines = []
            for row in ws.iter_rows(values_only=True):
                lines.append(" ".join(str(cell) for cell in row if cell is not None))
            return "\n".join(lines)
        finally:
            wb.close()

    @staticmethod
    def _frame_to_text(frame: pd.DataFrame) -> str:
        return "\n".join(" ".join(str(cell) for cell in row if str(cell)) for row in frame.values.tolist())


class UnitImportService:
    """Turns extracted terms into custom words of one unit."""

    @staticmethod
    def extract_candidates(filename: str, data: bytes) -> List[str]:
        text = FileExtractionService.extract_text(filename, data)
        candidates = extract_candidate_terms(text, WordService.all_terms())
        current_app.logger.info(f"[Import] {filename}: {len(candidates)} new candidate terms")
        return candidates

    @staticmethod
    def import_unit_words(terms: Iterable[str], grade: str, unit) -> Dict:
        """
        Look up AI details for each selected term and save complete ones.

        Refuses up front when AI is unavailable. Each term ends up in exactly
        one of ``saved``, ``already_present`` or ``lookup_failed``.
        """
        from wordbloom_app.modules.AI.interface import ai_status, lookup_word_details

        selected = [t.strip() for t in terms if t and t.strip()]
        if not selected:
            raise ValidationError('Select at least one word to save.')
        if grade not in current_app.config['GRADE_LEVELS']:
            raise ValidationError(f"Unknown grade '{grade}'.", errors={'grade_level': 'invalid'})

        status = ai_status()
        if not status['configured']:
            raise AIUnavailableError('An API key is required to save words.', feature='import')
        if status['cooldown_active']:
            raise AIUnavailableError('AI quota is exhausted. Please try again later.', feature='import')

        saved, already_present, lookup_failed = [], [], []
        for term in selected:
            details = lookup_word_details(term)
            if not details or missing_required_fields({**details, 'term': term}):
                lookup_failed.append(term)
                current_app.logger.info(f"[Import] Lookup failed for '{term}', skipped")
                continue

            result = WordService.save_custom_word(
                {**details, 'term': term, 'grade_level': grade}, grade, unit
            )
            if result['success']:
                saved.append(term)
            else:
                already_present.append(term)

        current_app.logger.info(
            f"[Import] Unit {unit}: saved={len(saved)} existing={len(already_present)} failed={len(lookup_failed)}"
        )
        return {
            'processed': len(saved) + len(already_present),
            'saved': saved,
            'already_present': already_present,
            'lookup_failed': lookup_failed,
        }
