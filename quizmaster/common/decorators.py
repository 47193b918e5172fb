from functools import wraps

from flask import request

from quizmaster.common.errors import ValidationError


def json_body(expect=dict):
    """
    Decorator that parses the request body as JSON and passes it to the
    view as the ``payload`` keyword argument.

    Args:
        expect: Required top-level JSON type (dict or list)
    """
    kind = "array" if expect is list else "object"

    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            payload = request.get_json(silent=True)
            if not isinstance(payload, expect):
                raise ValidationError(f"Request body must be a JSON {kind}")
            kwargs["payload"] = payload
            return f(*args, **kwargs)
        return decorated_function
    return decorator
