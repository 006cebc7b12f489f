"""
Selection Logic - which words a learner sees on a given day.

This module contains ONLY pure Python logic.
NO database, NO Flask, NO model dependencies allowed.

Pipeline: eligibility filter -> priority sort -> shuffle -> slice.
Both the sort and the shuffle always run. The shuffle covers the whole
eligible list, so the slice is a random subset of it.
"""
import random
from datetime import date
from enum import Enum
from typing import Iterable, List, Mapping, Optional

from wordbloom_app.modules.vocabulary.schemas import WordData, WordStatData
from wordbloom_app.utils.time_utils import ensure_utc, to_local_date


class SelectionMode(str, Enum):
    DAILY_NEW = 'daily_new'
    QUICK_REVIEW = 'quick_review'


def _stat_for(word: WordData, stats: Mapping[str, WordStatData]) -> WordStatData:
    return stats.get(word.id) or WordStatData.default(word.id)


def is_eligible(
    word: WordData,
    stat: WordStatData,
    grade: str,
    mode: SelectionMode,
    today: date,
    tz_name: str = 'UTC'
) -> bool:
    """
    Grade and mastery filter plus the mode-specific review-date filter.

    DAILY_NEW: never reviewed, or last reviewed on a day other than today.
    QUICK_REVIEW: reviewed before, on a day other than today.
    """
    if word.grade_level != grade or stat.is_mastered:
        return False

    reviewed_on = to_local_date(stat.last_reviewed, tz_name)
    if mode == SelectionMode.DAILY_NEW:
        return reviewed_on is None or reviewed_on != today
    return reviewed_on is not None and reviewed_on != today


def priority_key(word: WordData, stat: WordStatData):
    """
    Sort key, most urgent first.

    1. more quiz mistakes first
    2. older ``last_reviewed`` first; never reviewed counts as epoch 0
    3. custom words before built-in ones
    """
    reviewed_ts = ensure_utc(stat.last_reviewed).timestamp() if stat.last_reviewed else 0.0
    return (-stat.quiz_incorrect_count, reviewed_ts, 0 if word.is_custom else 1)


def select_words(
    catalog: Iterable[WordData],
    stats: Mapping[str, WordStatData],
    grade: str,
    count: int,
    mode: SelectionMode,
    today: date,
    rng: Optional[random.Random] = None,
    tz_name: str = 'UTC'
) -> List[WordData]:
    """
    Pick up to ``count`` words for a session.

    Args:
        catalog: All words (any grade).
        stats: Stored stats by word id; missing ids use the default stat.
        grade: Grade tier to draw from.
        count: Maximum number of words.
        mode: DAILY_NEW or QUICK_REVIEW.
        today: Learner's calendar date.
        rng: Source of randomness for the shuffle (module ``random`` if None).
        tz_name: Timezone used to turn ``last_reviewed`` into a date.

    Returns:
        A list of at most ``count`` words. Empty means nothing to do.
    """
    rng = rng or random
    candidates = []
    for word in catalog:
        stat = _stat_for(word, stats)
        if is_eligible(word, stat, grade, mode, today, tz_name):
            candidates.append((word, stat))

    candidates.sort(key=lambda pair: priority_key(*pair))
    ordered = [word for word, _ in candidates]
    rng.shuffle(ordered)
    return ordered[:max(count, 0)]
