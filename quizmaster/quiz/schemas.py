"""
Wire shapes for the quiz API.

Request bodies (camelCase JSON) are parsed into the plain payload tuples
below, and models are turned into response dicts here. Views never pass
raw JSON to services nor return models directly.
"""
from typing import List, NamedTuple, Optional

from quizmaster.common.errors import ValidationError
from quizmaster.security.input_validator import InputValidator, sanitize_input

TIME_TAKEN_NOT_TRACKED = "N/A"

MSG_TITLE = "Quiz title must be between 3 and 100 characters."
MSG_DESCRIPTION_BLANK = "Quiz description cannot be blank."
MSG_DESCRIPTION_LENGTH = "Description cannot exceed 255 characters."
MSG_TIME_LIMIT_REQUIRED = "Time limit is required."
MSG_TIME_LIMIT_TYPE = "Time limit must be a whole number."
MSG_TIME_LIMIT_MIN = "Time limit must be at least 3 minutes."
MSG_QUESTION_TEXT = "Question text must be between 5 and 500 characters."
MSG_QUESTION_TYPE = "Question type is required."
MSG_QUESTION_TYPE_LENGTH = "Question type cannot exceed 50 characters."
MSG_OPTIONS_NULL = "Options cannot be null."
MSG_OPTIONS_TYPE = "Options must be a list."
MSG_OPTION_OBJECT = "Each option must be an object."
MSG_OPTION_BLANK = "Option text cannot be blank."
MSG_OPTION_LENGTH = "Option text must be between 1 and 200 characters."
MSG_IS_CORRECT = "isCorrect field is required."
MSG_QUIZ_ID = "Quiz ID is required."
MSG_QUIZ_ID_TYPE = "Quiz ID must be a whole number."
MSG_STUDENT_NAME_REQUIRED = "Student name is required."
MSG_STUDENT_NAME_LENGTH = "Student name must be between 3 and 100 characters."
MSG_ANSWERS_TYPE = "Answers must be a list."
MSG_ANSWER_OBJECT = "Each answer must be an object."
MSG_QUESTION_ID = "Question ID is required."
MSG_QUESTION_ID_TYPE = "Question ID must be a whole number."
MSG_SELECTED_OPTION_ID = "Selected option ID is required."
MSG_SELECTED_OPTION_ID_TYPE = "Selected option ID must be a whole number."


class QuizPayload(NamedTuple):
    title: str
    description: str
    time_limit: int


class OptionPayload(NamedTuple):
    option_text: str
    is_correct: bool


class QuestionPayload(NamedTuple):
    question_text: str
    question_type: str
    options: List[OptionPayload]


class AnswerPayload(NamedTuple):
    question_id: int
    selected_option_id: int


class AttemptPayload(NamedTuple):
    quiz_id: int
    student_name: str
    answers: List[AnswerPayload]


def _raise_if(errors: list) -> None:
    if errors:
        # Repeated messages (e.g. two blank options) are reported once
        raise ValidationError(list(dict.fromkeys(errors)))


def _required_id(value, missing_msg: str, type_msg: str, errors: list) -> Optional[int]:
    if value is None:
        errors.append(missing_msg)
    elif not InputValidator.is_whole_number(value):
        errors.append(type_msg)
    else:
        return value
    return None


def parse_quiz(data: dict) -> QuizPayload:
    errors = []

    title = sanitize_input(data.get("title"))
    if not title or not InputValidator.validate_length(title, 3, 100):
        errors.append(MSG_TITLE)

    description = sanitize_input(data.get("description"))
    if not description:
        errors.append(MSG_DESCRIPTION_BLANK)
    elif not InputValidator.validate_length(description, 0, 255):
        errors.append(MSG_DESCRIPTION_LENGTH)

    time_limit = data.get("timeLimit")
    if time_limit is None:
        errors.append(MSG_TIME_LIMIT_REQUIRED)
    elif not InputValidator.is_whole_number(time_limit):
        errors.append(MSG_TIME_LIMIT_TYPE)
    elif time_limit < 3:
        errors.append(MSG_TIME_LIMIT_MIN)

    _raise_if(errors)
    return QuizPayload(title, description, time_limit)


def _parse_option_fields(data, errors: list) -> Optional[OptionPayload]:
    if not isinstance(data, dict):
        errors.append(MSG_OPTION_OBJECT)
        return None

    count_before = len(errors)
    option_text = sanitize_input(data.get("optionText"))
    if not option_text:
        errors.append(MSG_OPTION_BLANK)
    elif not InputValidator.validate_length(option_text, 1, 200):
        errors.append(MSG_OPTION_LENGTH)

    is_correct = data.get("isCorrect")
    if not isinstance(is_correct, bool):
        errors.append(MSG_IS_CORRECT)

    if len(errors) > count_before:
        return None
    return OptionPayload(option_text, is_correct)


def parse_option(data: dict) -> OptionPayload:
    errors = []
    option = _parse_option_fields(data, errors)
    _raise_if(errors)
    return option


def parse_question(data: dict) -> QuestionPayload:
    errors = []

    question_text = sanitize_input(data.get("questionText"))
    if not question_text or not InputValidator.validate_length(question_text, 5, 500):
        errors.append(MSG_QUESTION_TEXT)

    question_type = sanitize_input(data.get("questionType"))
    if not question_type:
        errors.append(MSG_QUESTION_TYPE)
    elif not InputValidator.validate_length(question_type, 1, 50):
        errors.append(MSG_QUESTION_TYPE_LENGTH)

    options = []
    raw_options = data.get("options")
    if raw_options is None:
        errors.append(MSG_OPTIONS_NULL)
    elif not isinstance(raw_options, list):
        errors.append(MSG_OPTIONS_TYPE)
    else:
        for raw in raw_options:
            option = _parse_option_fields(raw, errors)
            if option is not None:
                options.append(option)

    _raise_if(errors)
    return QuestionPayload(question_text, question_type, options)


def parse_attempt(data: dict) -> AttemptPayload:
    errors = []

    quiz_id = _required_id(data.get("quizId"), MSG_QUIZ_ID, MSG_QUIZ_ID_TYPE, errors)

    student_name = sanitize_input(data.get("studentName"))
    if not student_name:
        errors.append(MSG_STUDENT_NAME_REQUIRED)
    elif not InputValidator.validate_length(student_name, 3, 100):
        errors.append(MSG_STUDENT_NAME_LENGTH)

    answers = []
    raw_answers = data.get("answers")
    if raw_answers is None:
        raw_answers = []
    if not isinstance(raw_answers, list):
        errors.append(MSG_ANSWERS_TYPE)
        raw_answers = []

    for raw in raw_answers:
        if not isinstance(raw, dict):
            errors.append(MSG_ANSWER_OBJECT)
            continue
        question_id = _required_id(raw.get("questionId"), MSG_QUESTION_ID, MSG_QUESTION_ID_TYPE, errors)
        selected_option_id = _required_id(
            raw.get("selectedOptionId"), MSG_SELECTED_OPTION_ID, MSG_SELECTED_OPTION_ID_TYPE, errors
        )
        if question_id is not None and selected_option_id is not None:
            answers.append(AnswerPayload(question_id, selected_option_id))

    _raise_if(errors)
    return AttemptPayload(quiz_id, student_name, answers)


def _iso(value) -> Optional[str]:
    return value.isoformat() if value else None


def quiz_to_dict(quiz) -> dict:
    return {
        "id": quiz.id,
        "title": quiz.title,
        "description": quiz.description,
        "timeLimit": quiz.time_limit,
        "createdAt": _iso(quiz.created_at),
        "updatedAt": _iso(quiz.updated_at),
    }


def option_to_dict(option) -> dict:
    return {
        "id": option.id,
        "questionId": option.question_id,
        "optionText": option.option_text,
        "isCorrect": bool(option.is_correct),
    }


def question_to_dict(question, options=None) -> dict:
    if options is None:
        options = question.options
    return {
        "id": question.id,
        "quizId": question.quiz_id,
        "questionText": question.question_text,
        "questionType": question.question_type,
        "options": [option_to_dict(o) for o in options],
    }


def attempt_to_dict(attempt, quiz=None) -> dict:
    quiz = quiz if quiz is not None else attempt.quiz
    return {
        "id": attempt.id,
        "quizId": attempt.quiz_id,
        "quizTitle": quiz.title if quiz is not None else None,
        "studentName": attempt.student_name,
        "score": attempt.score,
        "totalQuestions": attempt.total_questions,
        "completedAt": _iso(attempt.completed_at),
        # Clients display this as the row key; attempts carry no account id
        "studentId": str(attempt.id),
        "timeTaken": TIME_TAKEN_NOT_TRACKED,
    }
