"""
Attempt grading.

Turns a submitted attempt (quiz id, student name, answers) into a
persisted QuizAttempt. Grading rules:

- The denominator is the number of questions the quiz has at submission
  time, regardless of how many answers were sent.
- Answers naming a question outside the quiz are ignored.
- A question answered more than once is graded once, using the last
  selection submitted for it.
- The correct option with the lowest id is authoritative; a question with
  no correct option earns no credit.
"""
from datetime import datetime
from typing import Iterable

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from quizmaster.common.errors import ResourceNotFoundError
from quizmaster.quiz.models import QuizAttempt


class GradingWorkflow:
    """Scores attempts using the stores it is constructed with."""

    def __init__(self, quizzes, questions, options, attempts):
        self.quizzes = quizzes
        self.questions = questions
        self.options = options
        self.attempts = attempts

    def correct_option_id(self, question_id: int):
        """Id of the authoritative correct option, or None if there is none."""
        correct = self.options.find(question_id=question_id, is_correct=True)
        return correct[0].id if correct else None

    def score_answers(self, questions, answers: Iterable) -> int:
        quiz_question_ids = {q.id for q in questions}

        selections = {}
        for answer in answers:
            if answer.question_id not in quiz_question_ids:
                continue
            selections[answer.question_id] = answer.selected_option_id

        score = 0
        for question_id, selected_option_id in selections.items():
            correct_id = self.correct_option_id(question_id)
            if correct_id is not None and correct_id == selected_option_id:
                score += 1
        return score

    def submit_attempt(self, quiz_id: int, student_name: str, answers: Iterable) -> QuizAttempt:
        """
        Grade and persist one attempt.

        Raises:
            ResourceNotFoundError: if the quiz does not exist
        """
        quiz = self.quizzes.get(quiz_id)
        if quiz is None:
            raise ResourceNotFoundError("Quiz not found")

        questions = self.questions.find(quiz_id=quiz.id)
        score = self.score_answers(questions, answers)

        attempt = QuizAttempt(
            quiz=quiz,
            quiz_id=quiz.id,
            student_name=student_name,
            score=score,
            total_questions=len(questions),
            completed_at=datetime.utcnow(),
        )
        try:
            self.attempts.add(attempt)
            self.attempts.commit()
        except SQLAlchemyError:
            self.attempts.rollback()
            raise

        current_app.logger.info(
            f"Graded attempt {attempt.id} for quiz {quiz.id}: "
            f"{attempt.score}/{attempt.total_questions} ({student_name})"
        )
        return attempt
