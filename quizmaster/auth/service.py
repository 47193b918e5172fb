"""
Student registration, authentication and bulk migration.
"""
from typing import NamedTuple, Optional

from flask import current_app
from sqlalchemy.exc import DataError, IntegrityError

from quizmaster.auth.models import Student
from quizmaster.auth.utils import hash_password, validate_password, verify_password
from quizmaster.common.errors import AuthenticationError, ConflictError, ValidationError
from quizmaster.common.stores import SqlAlchemyStore
from quizmaster.security import InputValidator, SecurityLogger

USERNAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 255
MSG_INVALID_EMAIL = "Please provide a valid email address"


class StudentPayload(NamedTuple):
    username: str
    email: Optional[str]
    password: str


def _clean(value) -> str:
    return value.strip() if isinstance(value, str) else ""


def _email_error(raw) -> Optional[str]:
    """Message for an unusable email value, or None if it is absent or valid."""
    if raw is None:
        return None
    if not isinstance(raw, str):
        return MSG_INVALID_EMAIL
    email = raw.strip()
    if not email:
        return None
    if len(email) > EMAIL_MAX_LENGTH:
        return f"Email cannot exceed {EMAIL_MAX_LENGTH} characters."
    if not InputValidator.validate_email(email):
        return MSG_INVALID_EMAIL
    return None


def parse_registration(data: dict) -> StudentPayload:
    """Validate a registration body; returns the normalized payload."""
    errors = []

    username = _clean(data.get("username"))
    if not username:
        errors.append("Username is required.")
    elif len(username) > USERNAME_MAX_LENGTH:
        errors.append(f"Username cannot exceed {USERNAME_MAX_LENGTH} characters.")

    email_error = _email_error(data.get("email"))
    if email_error:
        errors.append(email_error)
    email = _clean(data.get("email")).lower() or None

    password = data.get("password")
    if not isinstance(password, str) or not password:
        errors.append("Password is required.")
    else:
        ok, error = validate_password(password)
        if not ok:
            errors.append(error)

    if errors:
        raise ValidationError(errors)
    return StudentPayload(username, email, password)


class StudentService:
    """Account operations over a student store."""

    _dummy_hash: Optional[str] = None

    def __init__(self, students):
        self.students = students

    def ensure_username_available(self, username) -> None:
        """
        Refuse a username that is already registered.

        Runs before the other registration fields are checked, so a taken
        username is always reported the same way.

        Raises:
            ConflictError: if the username is taken
        """
        username = _clean(username)
        if username and self.students.exists(username=username):
            SecurityLogger.log_duplicate_registration("username", username)
            raise ConflictError("Username already exists")

    def register(self, payload: StudentPayload) -> Student:
        """
        Create an account.

        Raises:
            ConflictError: if the username or the (provided) email is taken
        """
        self.ensure_username_available(payload.username)
        if payload.email and self.students.exists(email=payload.email):
            SecurityLogger.log_duplicate_registration("email", payload.email)
            raise ConflictError("Email already exists")

        student = Student(
            username=payload.username,
            email=payload.email,
            password_hash=hash_password(payload.password),
        )
        try:
            self.students.add(student)
            self.students.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration
            self.students.rollback()
            raise ConflictError("Username or email already exists")

        current_app.logger.info(f"Student registered: ID={student.id}, Username={student.username}")
        return student

    def _equalize_timing(self, password: str) -> None:
        # Unknown usernames still pay for one bcrypt verification
        if StudentService._dummy_hash is None:
            StudentService._dummy_hash = hash_password("not-a-real-password")
        verify_password(password, StudentService._dummy_hash)

    def authenticate(self, username, password) -> Student:
        """
        Check credentials.

        Raises:
            AuthenticationError: for an unknown username or a wrong password;
                both cases produce the same error
        """
        username = _clean(username)
        password = password if isinstance(password, str) else ""

        matches = self.students.find(username=username) if username else []
        student = matches[0] if matches else None

        if student is None:
            self._equalize_timing(password)
            SecurityLogger.log_failed_login(username, "Unknown username")
            raise AuthenticationError()

        if not verify_password(password, student.password_hash):
            SecurityLogger.log_failed_login(username, "Wrong password")
            raise AuthenticationError()

        SecurityLogger.log_successful_login(student.id, student.username)
        return student

    def list(self) -> list:
        return self.students.all()

    def get(self, student_id: int) -> Optional[Student]:
        return self.students.get(student_id)

    def migrate(self, records: list) -> list:
        """
        Import a batch of accounts, skipping what cannot be stored.

        Each record is committed on its own, so one rejected record never
        undoes another. Returns only the students actually created.
        """
        created = []
        for record in records:
            student = self._migrate_one(record)
            if student is not None:
                created.append(student)

        current_app.logger.info(
            f"Student migration: {len(created)} created, {len(records) - len(created)} skipped"
        )
        return created

    def _migrate_one(self, record) -> Optional[Student]:
        if not isinstance(record, dict):
            return None

        username = _clean(record.get("username"))
        password = record.get("password")
        if not username or len(username) > USERNAME_MAX_LENGTH:
            return None
        if not isinstance(password, str) or not password:
            return None
        if self.students.exists(username=username):
            return None

        email = _clean(record.get("email")).lower() or None
        if email is not None and len(email) > EMAIL_MAX_LENGTH:
            return None
        if email is not None and self.students.exists(email=email):
            return None

        student = Student(username=username, email=email, password_hash=hash_password(password))
        try:
            self.students.add(student)
            self.students.commit()
        except (IntegrityError, DataError):
            self.students.rollback()
            current_app.logger.warning(f"Student migration skipped {username}: rejected by the database")
            return None
        return student


def build_student_service() -> StudentService:
    return StudentService(SqlAlchemyStore(Student))
