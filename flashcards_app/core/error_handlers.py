"""
Error Handlers for the Flashcards app

Provides:
- Custom exception classes
- Consistent error response format
- Flask error handlers
"""

from flask import jsonify, request, current_app
from typing import Optional, Dict, Any


class FlashcardsError(Exception):
    """Base exception class for the Flashcards app."""

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


class NotFoundError(FlashcardsError):
    """Resource not found."""

    def __init__(self, message: str = 'Resource not found', resource: str = None):
        super().__init__(
            message=message,
            code='NOT_FOUND',
            status_code=404,
            details={'resource': resource} if resource else None
        )


class ValidationError(FlashcardsError):
    """Input validation failed."""

    def __init__(self, message: str = 'Validation failed', errors: Dict = None):
        super().__init__(
            message=message,
            code='VALIDATION_ERROR',
            status_code=400,
            details={'errors': errors} if errors else None
        )


class DuplicateNameError(FlashcardsError):
    """Dataset name is empty or already taken."""

    def __init__(self, message: str = 'Dataset name is empty or already exists', name: str = None):
        super().__init__(
            message=message,
            code='DUPLICATE_NAME',
            status_code=409,
            details={'name': name} if name is not None else None
        )


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

    @app.errorhandler(FlashcardsError)
    def handle_flashcards_error(error):
        current_app.logger.warning(f"{error.code}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        if '/api/' in request.path:
            return error_response('Endpoint not found', 'NOT_FOUND', 404)
        return error

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        if '/api/' in request.path:
            return error_response('Method not allowed', 'METHOD_NOT_ALLOWED', 405)
        return error

    @app.errorhandler(500)
    def handle_internal_error(error):
        current_app.logger.exception('Internal server error')
        if '/api/' in request.path:
            return error_response('Internal server error', 'SERVER_ERROR', 500)
        return error
