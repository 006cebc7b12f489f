"""
Level Logic - Pure functions for the XP level curve.

This module contains ONLY pure Python logic.
NO database, NO Flask, NO model dependencies allowed.
"""
import math
from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class LevelInfo:
    level: int
    current_level_xp: int
    xp_for_next_level: int

    def to_dict(self) -> dict:
        return asdict(self)


def calculate_xp_level(xp: int) -> LevelInfo:
    """
    Level reached with ``xp`` total points.

    Level L needs ``100 * L`` more XP to reach level L + 1.

    Examples:
        >>> calculate_xp_level(0)
        LevelInfo(level=1, current_level_xp=0, xp_for_next_level=100)
        >>> calculate_xp_level(100)
        LevelInfo(level=2, current_level_xp=0, xp_for_next_level=200)
        >>> calculate_xp_level(350)
        LevelInfo(level=3, current_level_xp=50, xp_for_next_level=300)
    """
    level = 1
    xp_for_next = 100
    cumulative = 0
    while xp >= cumulative + xp_for_next:
        cumulative += xp_for_next
        level += 1
        xp_for_next = level * 100
    return LevelInfo(level=level, current_level_xp=xp - cumulative, xp_for_next_level=xp_for_next)


def round_half_up(value: float) -> int:
    """
    Round .5 upward, as the XP rewards always have.

    >>> round_half_up(2.5), round_half_up(4.5), round_half_up(0.0)
    (3, 5, 0)
    """
    return int(math.floor(value + 0.5))


def quiz_xp(score: int, multiplier: float) -> int:
    """XP for a finished quiz."""
    return round_half_up(score * multiplier)
