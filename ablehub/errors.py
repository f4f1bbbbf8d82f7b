import logging
from flask import jsonify, current_app
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class AccessibilityError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None, details=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.details = details

    def to_dict(self):
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class UnauthorizedError(AccessibilityError):
    status_code = 401
    default_message = "Unauthorized: No user ID provided"


class ValidationError(AccessibilityError):
    status_code = 400
    default_message = "Validation error"


class ConflictError(AccessibilityError):
    status_code = 409
    default_message = "Settings already exist for this user"


class InternalError(AccessibilityError):
    status_code = 500

    def __init__(self, cause=None):
        super().__init__(str(cause) if cause else None)
        self.cause = cause

    def public_message(self, expose_details):
        if expose_details and self.cause is not None:
            return str(self.cause) or self.default_message
        return self.default_message

    def to_dict(self, expose_details=False):
        return {"error": self.public_message(expose_details)}


def register_error_handlers(app):
    """Domain hatalarını ve HTTP hatalarını JSON gövdeye çevirir."""

    @app.errorhandler(InternalError)
    def handle_internal(error):
        expose = current_app.config.get("EXPOSE_ERROR_DETAILS", False)
        return jsonify(error.to_dict(expose_details=expose)), error.status_code

    @app.errorhandler(AccessibilityError)
    def handle_domain(error):
        if error.status_code >= 500:
            logger.error("Unhandled domain error: %s", error.message)
        else:
            logger.warning("%s: %s", type(error).__name__, error.message)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http(error):
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        from ablehub.extensions import db
        db.session.rollback()
        logger.exception("Unexpected error while handling request")
        return handle_internal(InternalError(error))
