"""
Attempt routes: submit an attempt for grading and list stored results.
"""
from flask import jsonify

from quizmaster.common.decorators import json_body
from quizmaster.quiz import quiz_bp
from quizmaster.quiz.schemas import attempt_to_dict, parse_attempt
from quizmaster.quiz.services import build_services


@quiz_bp.route('/quiz-attempts', methods=['POST'])
@json_body()
def submit_quiz_attempt(payload):
    """
    Grade and store a quiz attempt.

    Request body:
    {
        "quizId": 1,
        "studentName": "Jane Doe",
        "answers": [{"questionId": 1, "selectedOptionId": 1}]
    }
    """
    data = parse_attempt(payload)
    attempt = build_services().grading.submit_attempt(
        data.quiz_id, data.student_name, data.answers
    )
    return jsonify(attempt_to_dict(attempt)), 201


@quiz_bp.route('/quizzes/<int:quiz_id>/attempts', methods=['GET'])
def list_quiz_attempts(quiz_id):
    attempts = build_services().attempts.list_for_quiz(quiz_id)
    return jsonify([attempt_to_dict(a) for a in attempts]), 200


@quiz_bp.route('/results', methods=['GET'])
def list_results():
    """All attempts across every quiz."""
    attempts = build_services().attempts.list_all()
    return jsonify([attempt_to_dict(a) for a in attempts]), 200
