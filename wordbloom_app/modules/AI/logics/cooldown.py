"""
Quota Cooldown - a process-wide switch that suppresses AI calls after the
provider reports that the quota is used up.

Pure logic: the clock and the expiry callback are injected.
"""
from datetime import datetime, timedelta
from typing import Callable, Optional

from wordbloom_app.utils.time_utils import utcnow


class QuotaCooldown:
    """
    Armed by ``trip()``, open until ``duration`` has passed.

    Expiry is observed lazily: the first ``is_open()`` call after the deadline
    clears the cooldown and fires ``on_expire`` exactly once.
    """

    def __init__(
        self,
        duration: timedelta,
        clock: Callable[[], datetime] = utcnow,
        on_expire: Optional[Callable[[], None]] = None,
    ):
        self.duration = duration
        self._clock = clock
        self._on_expire = on_expire
        self.cooldown_until: Optional[datetime] = None

    def is_open(self) -> bool:
        if self.cooldown_until is None:
            return False
        if self._clock() < self.cooldown_until:
            return True
        self.cooldown_until = None
        if self._on_expire:
            self._on_expire()
        return False

    def trip(self, duration: Optional[timedelta] = None) -> bool:
        """
        Arm the cooldown. Returns False when it was already open.

        A cooldown that is already running is not extended.
        """
        if self.is_open():
            return False
        self.cooldown_until = self._clock() + (duration or self.duration)
        return True

    def remaining(self) -> timedelta:
        if not self.is_open():
            return timedelta(0)
        return self.cooldown_until - self._clock()

    def reset(self) -> None:
        """Clear without firing ``on_expire``."""
        self.cooldown_until = None
