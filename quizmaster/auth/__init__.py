from flask import Blueprint

# Blueprint for student account endpoints
auth_bp = Blueprint("auth", __name__, url_prefix="/api/students")

# Import routes so that they are registered with the blueprint
from quizmaster.auth import routes  # noqa: E402,F401
