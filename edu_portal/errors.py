"""
API Errors
Error taxonomy shared by routes and services, plus the JSON error handlers
"""
import logging

from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from edu_portal.extensions import db

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = 'Server error, please try again later.'


class ApiError(Exception):
    """Base class for errors surfaced to API clients"""
    status_code = 500
    default_message = GENERIC_SERVER_ERROR

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_response(self):
        return jsonify({'success': False, 'message': self.message}), self.status_code


class ClientError(ApiError):
    """Malformed or missing request data; nothing was changed server-side"""
    status_code = 400
    default_message = 'Invalid request.'


class NotFoundError(ApiError):
    """Unknown quiz, student, attempt or email"""
    status_code = 404
    default_message = 'Resource not found.'


class PersistenceError(ApiError):
    """
    Query or transaction failure.
    The message is always generic; the underlying error is logged, never returned.
    """
    status_code = 500


def register_error_handlers(app):
    """Translate every error into exactly one JSON response"""

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status_code >= 500:
            logger.error('%s: %s', type(error).__name__, error.message)
        return error.to_response()

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(error):
        db.session.rollback()
        logger.exception('Unhandled database error')
        return PersistenceError().to_response()

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'success': False, 'message': error.description}), error.code
