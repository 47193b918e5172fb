"""
Quiz module: quiz authoring, question/option maintenance and attempt grading.

All endpoints live under /api and exchange camelCase JSON.
"""
from flask import Blueprint

quiz_bp = Blueprint('quiz', __name__, url_prefix='/api')

from quizmaster.quiz import authoring_routes  # noqa: E402,F401
from quizmaster.quiz import attempt_routes  # noqa: E402,F401
