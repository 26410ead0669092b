"""
Mapping of application errors to JSON HTTP responses.
"""

from flask import Flask, jsonify

from ...shared.exceptions import (
    ArchiveSearchError,
    ErrorContextManager,
    SearchExecutionError,
    StatisticsError,
    ValidationError
)
from ...shared.logging import get_logger

logger = get_logger(__name__)


def _details(error: ArchiveSearchError) -> str:
    cause = error.cause if error.cause is not None else error.__cause__
    return str(cause) if cause is not None else error.message


def register_error_handlers(app: Flask) -> None:
    """
    Register handlers for the archive search exception hierarchy.

    Args:
        app: Flask application
    """

    @app.errorhandler(ValidationError)
    def _handle_validation_error(error: ValidationError):
        return jsonify({
            "error": "Invalid search parameters",
            "details": error.message,
            "field": error.field
        }), 400

    @app.errorhandler(SearchExecutionError)
    def _handle_search_error(error: SearchExecutionError):
        return jsonify({
            "error": "Failed to search messages",
            "details": _details(error)
        }), 500

    @app.errorhandler(StatisticsError)
    def _handle_statistics_error(error: StatisticsError):
        return jsonify({"error": "Failed to fetch statistics"}), 500

    @app.errorhandler(ArchiveSearchError)
    def _handle_archive_error(error: ArchiveSearchError):
        context = ErrorContextManager.create_context(error, include_stack_trace=True)
        logger.error("Unhandled application error", error_context=context.to_dict())
        return jsonify({"error": "Internal server error", "details": error.message}), 500
