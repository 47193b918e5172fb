"""
Sample data for an empty database.
"""
from datetime import datetime

import click
from flask import current_app
from flask.cli import with_appcontext

from quizmaster import db
from quizmaster.quiz.models import Quiz, Question, QuestionOption

SAMPLE_OPTIONS = [
    ("public static void main(String[] args)", True),
    ("public void main(String[] args)", False),
    ("static void main(String[] args)", False),
]


def seed_sample_data() -> bool:
    """
    Create the "Java Basics Quiz" sample when no quiz exists yet.

    Returns:
        True if the sample was created, False if quizzes were already present
    """
    if db.session.query(Quiz.id).first() is not None:
        return False

    now = datetime.utcnow()
    quiz = Quiz(
        title="Java Basics Quiz",
        description="Test your knowledge of Java fundamentals",
        time_limit=30,
        created_at=now,
        updated_at=now,
    )
    question = Question(
        quiz=quiz,
        question_text="What is the main method signature in Java?",
        question_type="multiple-choice",
    )
    for text, is_correct in SAMPLE_OPTIONS:
        question.options.append(QuestionOption(option_text=text, is_correct=is_correct))

    db.session.add(quiz)
    db.session.commit()
    current_app.logger.info("Sample data initialized successfully")
    return True


@click.command("seed-sample-data")
@with_appcontext
def seed_sample_data_command():
    """Seed the sample quiz if the database has no quizzes."""
    if seed_sample_data():
        click.echo("Sample quiz created.")
    else:
        click.echo("Quizzes already exist; nothing to seed.")
