from flask import jsonify
from flask_login import current_user, login_required, login_user, logout_user

from quizmaster.auth import auth_bp
from quizmaster.auth.service import build_student_service, parse_registration
from quizmaster.common.decorators import json_body


def student_summary(student, message: str = None) -> dict:
    summary = {
        "id": student.id,
        "username": student.username,
        "email": student.email,
    }
    if message:
        summary["message"] = message
    return summary


@auth_bp.route("/register", methods=["POST"])
@json_body()
def register(payload):
    service = build_student_service()
    service.ensure_username_available(payload.get("username"))
    data = parse_registration(payload)
    student = service.register(data)
    return jsonify(student_summary(student, "Registration successful")), 200


@auth_bp.route("/login", methods=["POST"])
@json_body()
def login(payload):
    student = build_student_service().authenticate(
        payload.get("username"), payload.get("password")
    )
    login_user(student)
    return jsonify(student_summary(student, "Login successful")), 200


@auth_bp.route("/logout", methods=["POST"])
def logout():
    logout_user()
    return jsonify({"message": "Logged out"}), 200


@auth_bp.route("/me", methods=["GET"])
@login_required
def me():
    """Summary of the student logged in on this session."""
    return jsonify(student_summary(current_user)), 200


@auth_bp.route("", methods=["GET"])
def list_students():
    students = build_student_service().list()
    return jsonify([student_summary(s) for s in students]), 200


@auth_bp.route("/migrate", methods=["POST"])
@json_body(expect=list)
def migrate_students(payload):
    """
    Bulk import of student accounts.

    Request body: [{"username": "...", "email": "...", "password": "..."}, ...]
    Records that cannot be stored are skipped; the response lists only
    the accounts that were created.
    """
    created = build_student_service().migrate(payload)
    return jsonify([student_summary(s) for s in created]), 200
