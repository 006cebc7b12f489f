"""
Retry Logic - one exponential backoff helper for every AI feature.
"""
import time
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from wordbloom_app.core.error_handlers import QuotaExhaustedError
from .error_classifier import ErrorKind

T = TypeVar('T')


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int
    base_delay: float
    multiplier: float = 2.0

    def delay_for(self, attempt: int) -> float:
        """
        Wait after the failed ``attempt`` (1-based).

        >>> RetryPolicy(3, 7.0).delay_for(1), RetryPolicy(3, 7.0).delay_for(2)
        (7.0, 14.0)
        """
        return self.base_delay * (self.multiplier ** (attempt - 1))


def with_retry(
    fn: Callable[[], T],
    policy: RetryPolicy,
    classify: Callable[[BaseException], ErrorKind],
    sleep: Callable[[float], None] = time.sleep,
    on_retry: Optional[Callable[[int, BaseException, float], None]] = None,
) -> T:
    """
    Call ``fn`` until it succeeds or ``policy.max_attempts`` is used up.

    Quota errors become ``QuotaExhaustedError`` without another attempt;
    terminal errors are re-raised as they are. After the last attempt the
    last error propagates.
    """
    attempt = 1
    while True:
        try:
            return fn()
        except Exception as e:
            kind = classify(e)
            if kind == ErrorKind.QUOTA:
                raise QuotaExhaustedError(str(e)) from e
            if kind == ErrorKind.TERMINAL or attempt >= policy.max_attempts:
                raise
            delay = policy.delay_for(attempt)
            if on_retry:
                on_retry(attempt, e, delay)
            sleep(delay)
            attempt += 1
