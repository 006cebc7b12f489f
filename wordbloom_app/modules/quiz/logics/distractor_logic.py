"""
Distractor Logic for multiple-choice quiz questions.
=====================================================
Builds the option list for one question: the correct meaning plus up to
three wrong meanings drawn from the same grade.

Pure logic: no Database access, no Flask.
"""

import random
from typing import List, Optional, Sequence

from wordbloom_app.modules.vocabulary.schemas import WordData

DISTRACTOR_COUNT = 3

# Generic fillers for grades with fewer than four distinct meanings
PLACEHOLDER_OPTIONS = ("관련 없음", "다른 뜻", "오답 예시")


def generate_options(
    correct_word: WordData,
    grade_words: Sequence[WordData],
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Shuffled options for ``correct_word``.

    Pipeline:
        1. Pool: meanings of the other grade words, minus the correct meaning,
           shuffled and deduplicated; take up to three.
        2. Fallback: random picks among the remaining grade words while the
           grade still has enough words.
        3. Placeholders: fixed fillers, skipping collisions, until they run out.

    Tiny grades may yield fewer than four options.
    """
    rng = rng or random
    correct = correct_word.meaning

    pool = [w.meaning for w in grade_words if w.id != correct_word.id and w.meaning != correct]
    rng.shuffle(pool)
    distractors: List[str] = []
    for meaning in pool:
        if meaning not in distractors:
            distractors.append(meaning)
        if len(distractors) == DISTRACTOR_COUNT:
            break

    # Step 2: fallback picks
    while len(distractors) < DISTRACTOR_COUNT and len(grade_words) > len(distractors) + 1:
        remaining = [
            w.meaning for w in grade_words
            if w.id != correct_word.id and w.meaning not in distractors and w.meaning != correct
        ]
        if not remaining:
            break
        distractors.append(rng.choice(remaining))

    # Step 3: placeholders
    for placeholder in PLACEHOLDER_OPTIONS:
        if len(distractors) >= DISTRACTOR_COUNT:
            break
        if placeholder not in distractors and placeholder != correct:
            distractors.append(placeholder)

    options = [correct] + distractors[:DISTRACTOR_COUNT]
    rng.shuffle(options)
    return options
