"""
Pytest configuration and fixtures for testing.
Every test gets a fresh application bound to an in-memory SQLite database.
"""
import os

import pytest

# Set test environment variables BEFORE the package reads its config
os.environ['FLASK_ENV'] = 'testing'
os.environ['SECRET_KEY'] = 'sfndsfojoriwew09rjfjndsknfkj'
os.environ['DATABASE_URL'] = 'sqlite:///:memory:'
os.environ['PASSWORD_HASH_ROUNDS'] = '4'
os.environ['MIN_PASSWORD_LENGTH'] = '6'
os.environ['SEED_SAMPLE_DATA'] = 'false'
os.environ['CORS_ALLOWED_ORIGINS'] = '*'

from quizmaster import create_app, db  # noqa: E402


JAVA_QUIZ = {
    'title': 'Java Basics Quiz',
    'description': 'Test your knowledge of Java fundamentals',
    'timeLimit': 30,
}

MAIN_METHOD_QUESTION = {
    'questionText': 'What is the main method signature in Java?',
    'questionType': 'multiple-choice',
    'options': [
        {'optionText': 'public static void main(String[] args)', 'isCorrect': True},
        {'optionText': 'public void main(String[] args)', 'isCorrect': False},
        {'optionText': 'static void main(String[] args)', 'isCorrect': False},
    ],
}


@pytest.fixture
def app():
    """Create application for testing."""
    app = create_app()
    app.config['TESTING'] = True

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def create_quiz(client):
    """Factory creating a quiz through the API and returning its JSON."""
    def _create(**overrides):
        body = dict(JAVA_QUIZ, **overrides)
        response = client.post('/api/quizzes', json=body)
        assert response.status_code == 201, response.get_json()
        return response.get_json()
    return _create


@pytest.fixture
def add_question(client):
    """Factory adding a question to a quiz and returning its JSON."""
    def _add(quiz_id, body=None):
        response = client.post(f'/api/quizzes/{quiz_id}/questions', json=body or MAIN_METHOD_QUESTION)
        assert response.status_code == 201, response.get_json()
        return response.get_json()
    return _add


@pytest.fixture
def java_quiz(create_quiz, add_question):
    """The sample quiz with its single main-method question."""
    quiz = create_quiz()
    question = add_question(quiz['id'])
    correct = next(o for o in question['options'] if o['isCorrect'])
    wrong = next(o for o in question['options'] if not o['isCorrect'])
    return {
        'quiz': quiz,
        'question': question,
        'correct_option_id': correct['id'],
        'wrong_option_id': wrong['id'],
    }
