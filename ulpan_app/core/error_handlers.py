"""
Error Handlers for Ulpan

Provides:
- Custom exception classes for the HTTP layer
- Consistent error response format
- Flask error handlers

The exercise engine never raises these; they are only used where a request
cannot be mapped onto an engine call (unknown session, malformed payload).
"""

from typing import Any, Dict, Optional

from flask import current_app, jsonify, request


class UlpanError(Exception):
    """Base exception class for Ulpan."""

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


class NotFoundError(UlpanError):
    """Resource not found."""

    def __init__(self, message: str = 'Resource not found', resource: Optional[str] = None):
        super().__init__(
            message=message,
            code='NOT_FOUND',
            status_code=404,
            details={'resource': resource} if resource else None
        )


class ValidationError(UlpanError):
    """Input validation failed."""

    def __init__(self, message: str = 'Validation failed', errors: Optional[Dict] = None):
        super().__init__(
            message=message,
            code='VALIDATION_ERROR',
            status_code=400,
            details={'errors': errors} if errors else None
        )


def error_response(
    message: str,
    code: str = 'ERROR',
    status_code: int = 400,
    details: Optional[Dict] = None
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


def success_response(data: Any = None, message: Optional[str] = None) -> dict:
    """Create a standardized success response."""
    response = {'success': True}
    if data is not None:
        response['data'] = data
    if message:
        response['message'] = message
    return response


def register_error_handlers(app):
    """Register error handlers with Flask app."""

    @app.errorhandler(UlpanError)
    def handle_ulpan_error(error):
        current_app.logger.warning("%s: %s", error.code, error.message)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        if request.path.startswith('/api/'):
            return error_response('Endpoint not found', 'NOT_FOUND', 404)
        return error

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        if request.path.startswith('/api/'):
            return error_response('Method not allowed', 'METHOD_NOT_ALLOWED', 405)
        return error

    @app.errorhandler(500)
    def handle_internal_error(error):
        current_app.logger.exception('Internal server error')
        if request.path.startswith('/api/'):
            return error_response('Internal server error', 'SERVER_ERROR', 500)
        return error
