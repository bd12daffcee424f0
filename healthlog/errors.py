"""
Error types surfaced to API callers and their HTTP mapping.
"""
import logging
from flask import jsonify

logger = logging.getLogger(__name__)


class HealthLogError(Exception):
    """Base class for errors reported back to the caller."""
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.message}


class ValidationError(HealthLogError):
    """Request data is missing or malformed. Carries a list of messages."""
    status_code = 400

    def __init__(self, errors):
        if isinstance(errors, str):
            errors = [errors]
        super().__init__('; '.join(errors))
        self.errors = list(errors)

    def to_dict(self):
        return {'error': self.errors}


class NotFoundError(HealthLogError):
    """A referenced record does not exist."""
    status_code = 404


class StorageError(HealthLogError):
    """The underlying store failed to read or write."""
    status_code = 500

    def to_dict(self):
        return {'error': f'Storage failure: {self.message}'}


def register_error_handlers(app):
    """Map HealthLogError subclasses to JSON responses."""

    @app.errorhandler(HealthLogError)
    def handle_health_log_error(exc):
        if isinstance(exc, StorageError):
            logger.error('Storage failure: %s', exc.message)
        return jsonify(exc.to_dict()), exc.status_code
