"""
Time helpers.

All timestamps are stored in UTC. Calendar-day questions ("was this reviewed
today?", "was the last learning day yesterday?") are answered in the app
timezone configured by ``APP_TIMEZONE``.
"""
from datetime import date, datetime, timezone
from typing import Optional, Union

import pytz
from flask import current_app, has_app_context


def utcnow() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes (as read back from SQLite) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def app_timezone() -> str:
    """Configured timezone name, ``UTC`` outside an app context."""
    if has_app_context():
        return current_app.config.get('APP_TIMEZONE') or 'UTC'
    return 'UTC'


def to_local_date(
    value: Union[date, datetime, str, None],
    tz_name: str = 'UTC'
) -> Optional[date]:
    """
    Calendar date of ``value`` in ``tz_name``.

    >>> to_local_date(datetime(2024, 1, 1, 23, 30, tzinfo=timezone.utc), 'Asia/Seoul')
    datetime.date(2024, 1, 2)
    >>> to_local_date('2024-01-05')
    datetime.date(2024, 1, 5)
    >>> to_local_date(None) is None
    True
    """
    if value is None:
        return None
    if isinstance(value, str):
        try:
            # Plain ISO dates are already calendar dates
            if len(value) == 10:
                return date.fromisoformat(value)
            value = datetime.fromisoformat(value)
        except ValueError:
            return None
    if isinstance(value, datetime):
        return ensure_utc(value).astimezone(pytz.timezone(tz_name)).date()
    return value


def local_today(tz_name: Optional[str] = None, now: Optional[datetime] = None) -> date:
    """Today's date in the app timezone."""
    return to_local_date(now or utcnow(), tz_name or app_timezone())
