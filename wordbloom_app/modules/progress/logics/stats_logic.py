"""
Stats Logic - aggregates shown on the dashboard and statistics screens.

Pure functions over plain data.
"""
from collections import Counter
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from wordbloom_app.modules.vocabulary.logics.word_logic import unit_sort_key
from wordbloom_app.modules.vocabulary.schemas import WordData, WordStatData


def average_quiz_score(history: Iterable[Mapping]) -> float:
    """
    Mean percentage over quiz history, 0 when empty.

    >>> average_quiz_score([{'score': 3, 'total': 4}, {'score': 1, 'total': 2}])
    62.5
    >>> average_quiz_score([])
    0.0
    """
    ratios = [entry['score'] / entry['total'] * 100 for entry in history if entry.get('total')]
    if not ratios:
        return 0.0
    return sum(ratios) / len(ratios)


def has_incorrect_words_to_review(stats: Iterable[WordStatData]) -> bool:
    """Any unmastered word with at least one quiz mistake."""
    return any(not s.is_mastered and s.quiz_incorrect_count > 0 for s in stats)


def words_by_grade(words: Iterable[WordData], grades: Sequence[str]) -> Dict[str, int]:
    counts = {grade: 0 for grade in grades}
    for word in words:
        if word.grade_level in counts:
            counts[word.grade_level] += 1
    return counts


def words_by_unit(words: Iterable[WordData]) -> List[Tuple[str, int]]:
    """(unit, count) pairs for words that have a unit, numeric units in order."""
    counts = Counter(word.unit for word in words if word.unit)
    return sorted(counts.items(), key=lambda item: unit_sort_key(item[0]))
