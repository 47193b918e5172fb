"""
Database models for quiz functionality.

Ownership is strict: a Quiz owns its Questions and Attempts, and a
Question owns its Options. Deleting an owner deletes what it owns.
"""
from datetime import datetime
from quizmaster import db


class Quiz(db.Model):
    """Quiz metadata. Questions and attempts are deleted with the quiz."""
    __tablename__ = "quizzes"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(100), nullable=False)
    description = db.Column(db.String(255), nullable=True)
    time_limit = db.Column(db.Integer, nullable=False)  # Minutes
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    questions = db.relationship("Question", backref="quiz", cascade="all, delete-orphan", order_by="Question.id")
    attempts = db.relationship("QuizAttempt", backref="quiz", cascade="all, delete-orphan", order_by="QuizAttempt.id")

    def __repr__(self) -> str:
        return f"<Quiz {self.id}: {self.title}>"


class Question(db.Model):
    """
    Model for quiz questions.

    Exactly one option is expected to be flagged correct. That rule is
    checked when the question is created and never re-validated, so
    readers must cope with zero or several correct options.
    """
    __tablename__ = "questions"

    id = db.Column(db.Integer, primary_key=True)
    quiz_id = db.Column(db.Integer, db.ForeignKey("quizzes.id", ondelete='CASCADE'), nullable=False, index=True)
    question_text = db.Column(db.String(500), nullable=False)
    question_type = db.Column(db.String(50), nullable=False)  # e.g. multiple-choice
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    options = db.relationship("QuestionOption", backref="question", cascade="all, delete-orphan", order_by="QuestionOption.id")

    def __repr__(self) -> str:
        return f"<Question {self.id}: {self.question_type}>"


class QuestionOption(db.Model):
    """One selectable answer of a question."""
    __tablename__ = "options"

    id = db.Column(db.Integer, primary_key=True)
    question_id = db.Column(db.Integer, db.ForeignKey("questions.id", ondelete='CASCADE'), nullable=False, index=True)
    option_text = db.Column(db.String(200), nullable=False)
    is_correct = db.Column(db.Boolean, default=False, nullable=False, index=True)

    __table_args__ = (
        db.Index('ix_options_question_correct', 'question_id', 'is_correct'),
    )

    def __repr__(self) -> str:
        return f"<QuestionOption {self.id}: {self.option_text[:50]}>"


class QuizAttempt(db.Model):
    """
    Graded submission of a quiz. Written once, never updated.

    The student is identified only by the free-text name they submitted;
    attempts are not linked to student accounts.
    """
    __tablename__ = "quiz_attempts"

    id = db.Column(db.Integer, primary_key=True)
    quiz_id = db.Column(db.Integer, db.ForeignKey("quizzes.id", ondelete='CASCADE'), nullable=False, index=True)
    student_name = db.Column(db.String(100), nullable=False)
    score = db.Column(db.Integer, nullable=False, default=0)  # Count of correct answers
    total_questions = db.Column(db.Integer, nullable=False, default=0)  # Questions in the quiz at submission
    completed_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<QuizAttempt {self.id}: {self.student_name}, Quiz {self.quiz_id}>"
