"""
Word Logic - Pure functions for validating and comparing catalog entries.

This module contains ONLY pure Python logic.
NO database, NO Flask, NO model dependencies allowed.
"""
import re
from typing import Dict, Iterable, List, Optional

REQUIRED_WORD_FIELDS = ('term', 'meaning', 'part_of_speech', 'example_sentence')

EDITABLE_WORD_FIELDS = (
    'term', 'pronunciation', 'part_of_speech', 'meaning',
    'example_sentence', 'example_sentence_meaning', 'grade_level', 'unit',
)

# Candidate terms are runs of 3-20 ASCII letters
CANDIDATE_TERM_PATTERN = re.compile(r'\b[a-zA-Z]{3,20}\b')


def missing_required_fields(data: Dict) -> List[str]:
    """
    Names of required fields that are absent or blank.

    >>> missing_required_fields({'term': 'apple', 'meaning': ' ', 'part_of_speech': '명사'})
    ['meaning', 'example_sentence']
    """
    missing = []
    for field in REQUIRED_WORD_FIELDS:
        value = data.get(field)
        if not isinstance(value, str) or not value.strip():
            missing.append(field)
    return missing


def normalize_unit(unit) -> Optional[str]:
    """Units are stored as strings; blank means no unit."""
    if unit is None:
        return None
    text = str(unit).strip()
    return text or None


def extract_candidate_terms(text: str, existing_terms: Iterable[str]) -> List[str]:
    """
    Tokenize ``text`` into new word candidates.

    Lower-cases the text, keeps 3-20 letter words, drops terms already in the
    catalog and returns them unique and sorted.

    >>> extract_candidate_terms('The Cat saw a cat and an owl.', ['owl'])
    ['and', 'cat', 'saw', 'the']
    """
    if not text:
        return []
    known = {term.lower() for term in existing_terms}
    found = CANDIDATE_TERM_PATTERN.findall(text.lower())
    return sorted({word for word in found if word not in known})


def unit_sort_key(unit: str):
    """Numeric units sort numerically, everything else after them."""
    try:
        return (0, int(unit), '')
    except (TypeError, ValueError):
        return (1, 0, str(unit))
