"""
Error Handlers for WordBloom

Provides:
- Custom exception classes
- Consistent error response format
- Flask error handlers
"""

from flask import jsonify, request, current_app
from typing import Optional, Dict, Any


class WordBloomError(Exception):
    """Base exception class for WordBloom."""

    def __init__(
        self,
        message: str,
        code: str = 'UNKNOWN_ERROR',
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert error to dictionary for JSON response."""
        return {
            'success': False,
            'message': self.message,
            'code': self.code,
            'details': self.details
        }


class NotFoundError(WordBloomError):
    """Resource not found."""

    def __init__(self, message: str = 'Resource not found', resource: str = None):
        super().__init__(
            message=message,
            code='NOT_FOUND',
            status_code=404,
            details={'resource': resource} if resource else None
        )


class ValidationError(WordBloomError):
    """Input validation failed."""

    def __init__(self, message: str = 'Validation failed', errors: Dict = None):
        super().__init__(
            message=message,
            code='VALIDATION_ERROR',
            status_code=400,
            details={'errors': errors} if errors else None
        )


class StorageAccessError(WordBloomError):
    """Persistent or scratch storage could not be read or written."""

    def __init__(self, message: str = 'Storage is not accessible', store: str = None):
        super().__init__(
            message=message,
            code='STORAGE_ERROR',
            status_code=503,
            details={'store': store} if store else None
        )


class ExternalServiceError(WordBloomError):
    """An AI call failed for good."""

    def __init__(self, message: str = 'AI service error', feature: str = None,
                 code: str = 'AI_SERVICE_ERROR', status_code: int = 502):
        super().__init__(
            message=message,
            code=code,
            status_code=status_code,
            details={'feature': feature} if feature else None
        )
        self.feature = feature


class TransientServiceError(ExternalServiceError):
    """Rate limit or temporary failure; worth retrying."""

    def __init__(self, message: str = 'AI service temporarily unavailable', feature: str = None):
        super().__init__(message, feature=feature, code='AI_TRANSIENT_ERROR', status_code=503)


class QuotaExhaustedError(ExternalServiceError):
    """Quota exhausted; never retried, arms the global cooldown."""

    def __init__(self, message: str = 'AI quota exhausted', feature: str = None):
        super().__init__(message, feature=feature, code='AI_QUOTA_EXHAUSTED', status_code=429)


class AIUnavailableError(ExternalServiceError):
    """AI disabled: no API key configured or cooldown active."""

    def __init__(self, message: str = 'AI features are unavailable', feature: str = None):
        super().__init__(message, feature=feature, code='AI_UNAVAILABLE', status_code=503)


def error_response(
    message: str,
    code: str = 'ERROR',
    status_code: int = 400,
    details: Dict = None
) -> tuple:
    """Create a standardized error response."""
    response = {
        'success': False,
        'message': message,
        'code': code
    }
    if details:
        response['details'] = details

    return jsonify(response), status_code


def success_response(data: Any = None, message: str = None) -> dict:
    """Create a standardized success response."""
    response = {'success': True}
    if data is not None:
        response['data'] = data
    if message:
        response['message'] = message
    return response


def register_error_handlers(app):
    """Register error handlers with Flask app."""

    @app.errorhandler(WordBloomError)
    def handle_wordbloom_error(error):
        current_app.logger.error(f"{error.code}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        if request.path.startswith('/api/'):
            return error_response('Endpoint not found', 'NOT_FOUND', 404)
        return error

    @app.errorhandler(500)
    def handle_internal_error(error):
        current_app.logger.exception('Internal server error')
        if request.path.startswith('/api/'):
            return error_response('Internal server error', 'SERVER_ERROR', 500)
        return error
