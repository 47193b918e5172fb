"""
API error types and their translation into JSON responses.

Services raise these exceptions; the handlers registered by
register_error_handlers() turn them into bodies of the form
{"status": <int>, "errors": [<message>, ...]}.
"""
from flask import current_app, jsonify, request
from werkzeug.exceptions import HTTPException

GENERIC_ERROR_MESSAGE = "An unexpected error occurred."


class ApiError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500

    def __init__(self, *messages: str):
        self.messages = [m for m in messages if m] or [GENERIC_ERROR_MESSAGE]
        super().__init__("; ".join(self.messages))


class ResourceNotFoundError(ApiError):
    status_code = 404


class ValidationError(ApiError):
    """One message per violated field."""

    status_code = 400

    def __init__(self, messages):
        if isinstance(messages, str):
            messages = [messages]
        super().__init__(*messages)


class ConflictError(ApiError):
    # Duplicate usernames/emails are reported as a plain bad request
    status_code = 400


class AuthenticationError(ApiError):
    status_code = 400
    MESSAGE = "Invalid credentials"

    def __init__(self):
        super().__init__(self.MESSAGE)


def error_response(status: int, messages: list[str]):
    return jsonify({"status": status, "errors": list(messages)}), status


def register_error_handlers(app) -> None:
    """Attach JSON error handlers to the Flask app."""
    from quizmaster import db

    @app.errorhandler(ApiError)
    def handle_api_error(exc: ApiError):
        current_app.logger.warning(
            f"{type(exc).__name__} on {request.method} {request.path}: {exc}"
        )
        return error_response(exc.status_code, exc.messages)

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc: HTTPException):
        if exc.code == 404:
            message = f"Route not found: {request.method} {request.path}"
        elif exc.code == 405:
            message = f"Method not allowed: {request.method} {request.path}"
        else:
            message = exc.description or exc.name
        current_app.logger.warning(f"{exc.code} error: {request.method} {request.path}")
        return error_response(exc.code or 500, [message])

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        db.session.rollback()
        current_app.logger.exception(
            f"Unhandled error on {request.method} {request.path}: {exc}"
        )
        return error_response(500, [GENERIC_ERROR_MESSAGE])
