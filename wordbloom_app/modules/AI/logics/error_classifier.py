"""
Error Classifier - decides how a failed Gemini call should be treated.
"""
from enum import Enum
from typing import Optional, Tuple


class ErrorKind(str, Enum):
    QUOTA = 'quota'                # arm the cooldown, never retry
    RATE_LIMITED = 'rate_limited'  # retry with backoff
    TRANSIENT = 'transient'        # retry with backoff
    TERMINAL = 'terminal'          # give up immediately


# Request problems a retry cannot fix
TERMINAL_CODES = (400, 401, 403, 404)


def error_details(error: BaseException) -> Tuple[Optional[int], str, str]:
    """
    ``(code, STATUS, lowercased message)`` of an SDK or generic error.

    ``google.genai.errors.APIError`` carries ``code``, ``status`` and
    ``message``; anything else falls back to ``str(error)``.
    """
    code = getattr(error, 'code', None)
    if not isinstance(code, int):
        code = None
    status = getattr(error, 'status', None)
    status = status.upper() if isinstance(status, str) else ''
    message = getattr(error, 'message', None)
    if not isinstance(message, str) or not message:
        message = str(error)
    return code, status, message.lower()


def is_quota_exhausted(code: Optional[int], status: str, message: str) -> bool:
    """
    >>> is_quota_exhausted(429, '', 'you exceeded your current quota')
    True
    >>> is_quota_exhausted(429, '', 'too many requests')
    False
    >>> is_quota_exhausted(None, '', 'quota exhausted for project')
    True
    >>> is_quota_exhausted(500, 'RESOURCE_EXHAUSTED', '')
    True
    """
    if code == 429 and ('quota' in message or status == 'RESOURCE_EXHAUSTED'):
        return True
    if code is None and 'quota' in message and ('exceeded' in message or 'exhausted' in message):
        return True
    return status == 'RESOURCE_EXHAUSTED'


def classify_error(error: BaseException) -> ErrorKind:
    code, status, message = error_details(error)
    if is_quota_exhausted(code, status, message):
        return ErrorKind.QUOTA
    if code == 429:
        return ErrorKind.RATE_LIMITED
    if code in TERMINAL_CODES:
        return ErrorKind.TERMINAL
    return ErrorKind.TRANSIENT
