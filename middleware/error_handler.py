"""
Error Handler Middleware
Global error handling
"""

from flask import jsonify
from services.user_service import MalformedRequest
import logging

logger = logging.getLogger(__name__)


def error_response(error: str, message: str, status: int):
    return jsonify({
        "success": False,
        "error": error,
        "message": message
    }), status


def register_error_handlers(app):
    """Register error handlers"""

    @app.errorhandler(MalformedRequest)
    def malformed_request(error):
        logger.warning(f"Malformed request: {error.message}")
        return error_response("Bad Request", error.message, 400)

    @app.errorhandler(400)
    def bad_request(error):
        return error_response("Bad Request", getattr(error, 'description', str(error)), 400)

    @app.errorhandler(404)
    def not_found(error):
        return error_response("Not Found", "The requested resource was not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        response, status = error_response(
            "Method Not Allowed",
            "The method is not allowed for the requested URL",
            405
        )
        valid_methods = getattr(error, 'valid_methods', None)
        if valid_methods:
            response.headers['Allow'] = ', '.join(valid_methods)
        return response, status

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Internal error: {getattr(error, 'original_exception', error)}")
        return error_response("Internal Server Error", "An unexpected error occurred", 500)
