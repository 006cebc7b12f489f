"""
Streak Logic - Pure functions for streak calculation.

This module contains ONLY pure Python logic.
NO database, NO Flask, NO model dependencies allowed.
"""
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from typing import Optional, Union


@dataclass(frozen=True)
class StreakState:
    current_streak: int = 0
    best_streak: int = 0
    last_learned_date: Optional[date] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> 'StreakState':
        data = data or {}
        return cls(
            current_streak=int(data.get('current_streak') or 0),
            best_streak=int(data.get('best_streak') or 0),
            last_learned_date=_normalize_to_date(data.get('last_learned_date')),
        )

    def to_dict(self) -> dict:
        return {
            'current_streak': self.current_streak,
            'best_streak': self.best_streak,
            'last_learned_date': self.last_learned_date.isoformat() if self.last_learned_date else None,
        }


def apply_learning_day(streak: StreakState, today: date) -> StreakState:
    """
    Update the streak for a first-learn-of-the-day event.

    Args:
        streak: Current streak state.
        today: The learner's calendar date.

    Returns:
        New streak state with ``last_learned_date == today``.

    Examples:
        >>> s = StreakState(3, 5, date(2024, 1, 2))
        >>> apply_learning_day(s, date(2024, 1, 3))
        StreakState(current_streak=4, best_streak=5, last_learned_date=datetime.date(2024, 1, 3))

        >>> # Same day: nothing changes
        >>> apply_learning_day(s, date(2024, 1, 2)) == s
        True

        >>> # Gap of two days restarts at 1
        >>> apply_learning_day(s, date(2024, 1, 5)).current_streak
        1
    """
    if streak.last_learned_date == today:
        return streak

    if streak.last_learned_date == today - timedelta(days=1):
        current = streak.current_streak + 1
    else:
        current = 1

    return StreakState(
        current_streak=current,
        best_streak=max(streak.best_streak, current),
        last_learned_date=today,
    )


def correct_broken_streak(streak: StreakState, today: date) -> StreakState:
    """
    Load-time correction: a last learning day before yesterday breaks the streak.

    ``best_streak`` is kept.

    >>> correct_broken_streak(StreakState(4, 6, date(2024, 1, 1)), date(2024, 1, 5))
    StreakState(current_streak=0, best_streak=6, last_learned_date=datetime.date(2024, 1, 1))
    >>> s = StreakState(4, 6, date(2024, 1, 4))
    >>> correct_broken_streak(s, date(2024, 1, 5)) == s
    True
    """
    last = streak.last_learned_date
    if last is None or last in (today, today - timedelta(days=1)):
        return streak
    if streak.current_streak == 0:
        return streak
    return replace(streak, current_streak=0)


def _normalize_to_date(val: Union[date, datetime, str, None]) -> Union[date, None]:
    """
    Normalize various date representations to a date object.

    Args:
        val: Can be date, datetime, ISO string, or None.

    Returns:
        date object or None if conversion fails.
    """
    if val is None:
        return None

    if isinstance(val, date) and not isinstance(val, datetime):
        return val

    if isinstance(val, datetime):
        return val.date()

    if isinstance(val, str):
        try:
            return datetime.fromisoformat(val).date()
        except ValueError:
            try:
                return datetime.strptime(val, '%Y-%m-%d').date()
            except ValueError:
                return None

    return None
