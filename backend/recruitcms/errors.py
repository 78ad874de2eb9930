import logging
from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException, NotFound, RequestEntityTooLarge
from recruitcms.domain.invariants.exceptions import InvariantViolation
from recruitcms.extensions import db

logger = logging.getLogger(__name__)


def error_response(message, status_code):
    response = jsonify({"error": message})
    response.status_code = status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        return error_response(str(error), 400)

    @app.errorhandler(NotFound)
    def handle_not_found(error):
        # Unrouted paths get the generic message, explicit 404s keep theirs
        if error.description == NotFound.description:
            return error_response("Endpoint not found", 404)
        return error_response(error.description, 404)

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(error):
        # Bodies past MAX_CONTENT_LENGTH are reported like any oversized upload
        max_mb = current_app.config["MAX_UPLOAD_SIZE"] // (1024 * 1024)
        return error_response(f"File too large. Maximum size is {max_mb}MB", 400)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return error_response(error.description, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        db.session.rollback()
        logger.exception("Unhandled error")
        return error_response("Internal server error", 500)
