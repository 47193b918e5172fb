"""
Quiz, question, option and attempt services.

Each service works against the stores handed to it; build_services()
wires them to the Flask-SQLAlchemy models for the request being served.
"""
from datetime import datetime
from typing import NamedTuple

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from quizmaster.common.errors import ResourceNotFoundError, ValidationError
from quizmaster.common.stores import SqlAlchemyStore
from quizmaster.quiz.grading import GradingWorkflow
from quizmaster.quiz.models import Quiz, Question, QuestionOption, QuizAttempt
from quizmaster.quiz.schemas import OptionPayload, QuestionPayload, QuizPayload

MSG_ONE_CORRECT_OPTION = "Each question must have exactly one correct option"


def _require(entity, message: str):
    if entity is None:
        raise ResourceNotFoundError(message)
    return entity


class QuizService:
    """Create/read/update/delete for quizzes."""

    def __init__(self, quizzes):
        self.quizzes = quizzes

    def create(self, payload: QuizPayload) -> Quiz:
        now = datetime.utcnow()
        quiz = Quiz(
            title=payload.title,
            description=payload.description,
            time_limit=payload.time_limit,
            created_at=now,
            updated_at=now,
        )
        self.quizzes.add(quiz)
        self.quizzes.commit()
        current_app.logger.info(f"Quiz created: ID={quiz.id}, Title={quiz.title}")
        return quiz

    def list(self) -> list:
        return self.quizzes.all()

    def get(self, quiz_id: int) -> Quiz:
        return _require(self.quizzes.get(quiz_id), "Quiz not found")

    def update(self, quiz_id: int, payload: QuizPayload) -> Quiz:
        quiz = self.get(quiz_id)
        quiz.title = payload.title
        quiz.description = payload.description
        quiz.time_limit = payload.time_limit
        quiz.updated_at = datetime.utcnow()
        self.quizzes.commit()
        current_app.logger.info(f"Quiz updated: ID={quiz.id}")
        return quiz

    def delete(self, quiz_id: int) -> None:
        """Delete a quiz together with its questions, their options and its attempts."""
        quiz = self.get(quiz_id)
        self.quizzes.delete(quiz)
        self.quizzes.commit()
        current_app.logger.info(f"Quiz deleted: ID={quiz_id}")


class QuestionService:
    """Question authoring. The one-correct-option rule is enforced only here."""

    def __init__(self, quizzes, questions, options):
        self.quizzes = quizzes
        self.questions = questions
        self.options = options

    def add_question(self, quiz_id: int, payload: QuestionPayload):
        """
        Add a question with its options to a quiz.

        Raises:
            ResourceNotFoundError: if the quiz does not exist
            ValidationError: unless exactly one option is flagged correct
        """
        quiz = _require(self.quizzes.get(quiz_id), "Quiz not found")

        correct_count = sum(1 for o in payload.options if o.is_correct)
        if correct_count != 1:
            raise ValidationError(MSG_ONE_CORRECT_OPTION)

        try:
            question = Question(
                quiz_id=quiz.id,
                question_text=payload.question_text,
                question_type=payload.question_type,
            )
            self.questions.add(question)
            options = []
            for item in payload.options:
                option = QuestionOption(
                    question_id=question.id,
                    option_text=item.option_text,
                    is_correct=item.is_correct,
                )
                self.options.add(option)
                options.append(option)
            self.questions.commit()
        except SQLAlchemyError:
            self.questions.rollback()
            raise

        current_app.logger.info(
            f"Question {question.id} added to quiz {quiz.id} with {len(options)} options"
        )
        return question, options

    def list_for_quiz(self, quiz_id: int) -> list:
        """Questions of a quiz paired with their options."""
        _require(self.quizzes.get(quiz_id), "Quiz not found")
        return [
            (question, self.options.find(question_id=question.id))
            for question in self.questions.find(quiz_id=quiz_id)
        ]

    def get(self, question_id: int):
        question = _require(self.questions.get(question_id), "Question not found")
        return question, self.options.find(question_id=question.id)

    def delete(self, question_id: int) -> None:
        question = _require(self.questions.get(question_id), "Question not found")
        self.questions.delete(question)
        self.questions.commit()
        current_app.logger.info(f"Question deleted: ID={question_id}")


class OptionService:
    """
    Direct option maintenance.

    Updates here do not re-check the one-correct-option rule.
    """

    def __init__(self, questions, options):
        self.questions = questions
        self.options = options

    def list_for_question(self, question_id: int) -> list:
        _require(self.questions.get(question_id), "Question not found")
        return self.options.find(question_id=question_id)

    def get(self, option_id: int) -> QuestionOption:
        return _require(self.options.get(option_id), "Option not found")

    def update(self, option_id: int, payload: OptionPayload) -> QuestionOption:
        option = self.get(option_id)
        option.option_text = payload.option_text
        option.is_correct = payload.is_correct
        self.options.commit()
        current_app.logger.info(f"Option updated: ID={option.id}, correct={option.is_correct}")
        return option

    def delete(self, option_id: int) -> None:
        option = self.get(option_id)
        self.options.delete(option)
        self.options.commit()
        current_app.logger.info(f"Option deleted: ID={option_id}")


class AttemptService:
    """Read access to stored attempts."""

    def __init__(self, quizzes, attempts):
        self.quizzes = quizzes
        self.attempts = attempts

    def list_for_quiz(self, quiz_id: int) -> list:
        _require(self.quizzes.get(quiz_id), "Quiz not found")
        return self.attempts.find(quiz_id=quiz_id)

    def list_all(self) -> list:
        return self.attempts.all()


class QuizServices(NamedTuple):
    quizzes: QuizService
    questions: QuestionService
    options: OptionService
    attempts: AttemptService
    grading: GradingWorkflow


def build_services() -> QuizServices:
    """Services bound to the database session of the current app context."""
    quizzes = SqlAlchemyStore(Quiz)
    questions = SqlAlchemyStore(Question)
    options = SqlAlchemyStore(QuestionOption)
    attempts = SqlAlchemyStore(QuizAttempt)
    return QuizServices(
        quizzes=QuizService(quizzes),
        questions=QuestionService(quizzes, questions, options),
        options=OptionService(questions, options),
        attempts=AttemptService(quizzes, attempts),
        grading=GradingWorkflow(quizzes, questions, options, attempts),
    )
