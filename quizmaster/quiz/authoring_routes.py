"""
Authoring routes: quizzes, their questions, and question options.
"""
from flask import jsonify

from quizmaster.common.decorators import json_body
from quizmaster.quiz import quiz_bp
from quizmaster.quiz.schemas import (
    option_to_dict,
    parse_option,
    parse_question,
    parse_quiz,
    question_to_dict,
    quiz_to_dict,
)
from quizmaster.quiz.services import build_services


@quiz_bp.route('/quizzes', methods=['POST'])
@json_body()
def create_quiz(payload):
    """
    Create a new quiz.

    Request body:
    {
        "title": "Java Basics Quiz",
        "description": "Test your knowledge of Java fundamentals",
        "timeLimit": 30
    }
    """
    quiz = build_services().quizzes.create(parse_quiz(payload))
    return jsonify(quiz_to_dict(quiz)), 201


@quiz_bp.route('/quizzes', methods=['GET'])
def list_quizzes():
    quizzes = build_services().quizzes.list()
    return jsonify([quiz_to_dict(q) for q in quizzes]), 200


@quiz_bp.route('/quizzes/<int:quiz_id>', methods=['GET'])
def get_quiz(quiz_id):
    quiz = build_services().quizzes.get(quiz_id)
    return jsonify(quiz_to_dict(quiz)), 200


@quiz_bp.route('/quizzes/<int:quiz_id>', methods=['PUT'])
@json_body()
def update_quiz(quiz_id, payload):
    data = parse_quiz(payload)
    quiz = build_services().quizzes.update(quiz_id, data)
    return jsonify(quiz_to_dict(quiz)), 200


@quiz_bp.route('/quizzes/<int:quiz_id>', methods=['DELETE'])
def delete_quiz(quiz_id):
    """Delete a quiz with all of its questions, options and attempts."""
    build_services().quizzes.delete(quiz_id)
    return '', 204


@quiz_bp.route('/quizzes/<int:quiz_id>/questions', methods=['POST'])
@json_body()
def add_question(quiz_id, payload):
    """
    Add a question to a quiz.

    Request body:
    {
        "questionText": "What is the main method signature in Java?",
        "questionType": "multiple-choice",
        "options": [
            {"optionText": "public static void main(String[] args)", "isCorrect": true},
            {"optionText": "public void main(String[] args)", "isCorrect": false}
        ]
    }

    Exactly one option must be flagged correct.
    """
    data = parse_question(payload)
    question, options = build_services().questions.add_question(quiz_id, data)
    return jsonify(question_to_dict(question, options)), 201


@quiz_bp.route('/quizzes/<int:quiz_id>/questions', methods=['GET'])
def list_questions(quiz_id):
    pairs = build_services().questions.list_for_quiz(quiz_id)
    return jsonify([question_to_dict(q, opts) for q, opts in pairs]), 200


@quiz_bp.route('/questions/<int:question_id>', methods=['GET'])
def get_question(question_id):
    question, options = build_services().questions.get(question_id)
    return jsonify(question_to_dict(question, options)), 200


@quiz_bp.route('/questions/<int:question_id>', methods=['DELETE'])
def delete_question(question_id):
    build_services().questions.delete(question_id)
    return '', 204


@quiz_bp.route('/questions/<int:question_id>/options', methods=['GET'])
def list_options(question_id):
    options = build_services().options.list_for_question(question_id)
    return jsonify([option_to_dict(o) for o in options]), 200


@quiz_bp.route('/options/<int:option_id>', methods=['GET'])
def get_option(option_id):
    option = build_services().options.get(option_id)
    return jsonify(option_to_dict(option)), 200


@quiz_bp.route('/options/<int:option_id>', methods=['PUT'])
@json_body()
def update_option(option_id, payload):
    data = parse_option(payload)
    option = build_services().options.update(option_id, data)
    return jsonify(option_to_dict(option)), 200


@quiz_bp.route('/options/<int:option_id>', methods=['DELETE'])
def delete_option(option_id):
    build_services().options.delete(option_id)
    return '', 204
