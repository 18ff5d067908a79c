import logging
from flask import jsonify

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """Missing or malformed required input."""
    status_code = 400


class ConflictError(ApiError):
    """Duplicate unique key."""
    status_code = 400


class AuthError(ApiError):
    """Failed credential check. The message never says which part failed."""
    status_code = 400


class NotFoundError(ApiError):
    status_code = 404


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        logger.warning(f"{type(error).__name__}: {error.message}")
        return jsonify({"error": error.message}), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        return jsonify({"error": "Not found."}), 404

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        return jsonify({"error": "Method not allowed."}), 405
