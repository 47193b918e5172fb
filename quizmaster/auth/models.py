from datetime import datetime
from flask_login import UserMixin

from quizmaster import db


class Student(db.Model, UserMixin):
    """
    Registered student account.

    Passwords are stored only as bcrypt hashes. Accounts are independent
    of quiz attempts, which record a free-text student name instead.
    """
    __tablename__ = "students"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), unique=True, nullable=False, index=True)
    email = db.Column(db.String(255), unique=True, nullable=True, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Student {self.username}>"
