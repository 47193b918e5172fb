"""
Test cases for question and option endpoints.
"""
import pytest

from conftest import MAIN_METHOD_QUESTION


def question_body(**overrides):
    return dict(MAIN_METHOD_QUESTION, **overrides)


class TestAddQuestion:
    """Test cases for POST /api/quizzes/<id>/questions."""

    def test_add_question(self, client, create_quiz):
        quiz = create_quiz()

        response = client.post(f"/api/quizzes/{quiz['id']}/questions", json=MAIN_METHOD_QUESTION)

        assert response.status_code == 201
        data = response.get_json()
        assert data['id'] > 0
        assert data['quizId'] == quiz['id']
        assert data['questionText'] == 'What is the main method signature in Java?'
        assert data['questionType'] == 'multiple-choice'
        assert [o['optionText'] for o in data['options']] == [
            'public static void main(String[] args)',
            'public void main(String[] args)',
            'static void main(String[] args)',
        ]
        assert [o['isCorrect'] for o in data['options']] == [True, False, False]
        assert all(o['questionId'] == data['id'] for o in data['options'])

    def test_question_round_trip(self, client, java_quiz):
        """Listing the quiz's questions returns what was created."""
        quiz_id = java_quiz['quiz']['id']

        response = client.get(f'/api/quizzes/{quiz_id}/questions')

        assert response.status_code == 200
        assert response.get_json() == [java_quiz['question']]

    def test_missing_quiz(self, client):
        response = client.post('/api/quizzes/999/questions', json=MAIN_METHOD_QUESTION)

        assert response.status_code == 404
        assert response.get_json()['errors'] == ['Quiz not found']

    @pytest.mark.parametrize('flags', [
        [False, False, False],
        [True, True, False],
    ])
    def test_requires_exactly_one_correct_option(self, client, create_quiz, flags):
        quiz = create_quiz()
        options = [{'optionText': f'Option {i}', 'isCorrect': flag} for i, flag in enumerate(flags)]

        response = client.post(f"/api/quizzes/{quiz['id']}/questions", json=question_body(options=options))

        assert response.status_code == 400
        assert response.get_json()['errors'] == ['Each question must have exactly one correct option']
        assert client.get(f"/api/quizzes/{quiz['id']}/questions").get_json() == []

    def test_empty_option_list_is_rejected(self, client, create_quiz):
        quiz = create_quiz()

        response = client.post(f"/api/quizzes/{quiz['id']}/questions", json=question_body(options=[]))

        assert response.status_code == 400
        assert response.get_json()['errors'] == ['Each question must have exactly one correct option']

    def test_single_correct_option_is_enough(self, client, create_quiz):
        quiz = create_quiz()
        options = [{'optionText': 'Only answer', 'isCorrect': True}]

        response = client.post(f"/api/quizzes/{quiz['id']}/questions", json=question_body(options=options))

        assert response.status_code == 201

    def test_question_text_too_short(self, client, create_quiz):
        quiz = create_quiz()

        response = client.post(f"/api/quizzes/{quiz['id']}/questions", json=question_body(questionText='Why'))

        assert response.status_code == 400
        assert response.get_json()['errors'] == ['Question text must be between 5 and 500 characters.']

    def test_question_type_required(self, client, create_quiz):
        quiz = create_quiz()
        body = question_body()
        del body['questionType']

        response = client.post(f"/api/quizzes/{quiz['id']}/questions", json=body)

        assert response.status_code == 400
        assert response.get_json()['errors'] == ['Question type is required.']

    def test_question_type_too_long(self, client, create_quiz):
        quiz = create_quiz()

        response = client.post(f"/api/quizzes/{quiz['id']}/questions", json=question_body(questionType='t' * 51))

        assert response.status_code == 400
        assert response.get_json()['errors'] == ['Question type cannot exceed 50 characters.']
        assert client.get(f"/api/quizzes/{quiz['id']}/questions").get_json() == []

    def test_options_required(self, client, create_quiz):
        quiz = create_quiz()
        body = question_body()
        del body['options']

        response = client.post(f"/api/quizzes/{quiz['id']}/questions", json=body)

        assert response.status_code == 400
        assert response.get_json()['errors'] == ['Options cannot be null.']

    def test_blank_option_text(self, client, create_quiz):
        quiz = create_quiz()
        options = [
            {'optionText': ' ', 'isCorrect': True},
            {'optionText': '', 'isCorrect': False},
        ]

        response = client.post(f"/api/quizzes/{quiz['id']}/questions", json=question_body(options=options))

        assert response.status_code == 400
        assert response.get_json()['errors'] == ['Option text cannot be blank.']

    def test_option_text_too_long(self, client, create_quiz):
        quiz = create_quiz()
        options = [{'optionText': 'o' * 201, 'isCorrect': True}]

        response = client.post(f"/api/quizzes/{quiz['id']}/questions", json=question_body(options=options))

        assert response.status_code == 400
        assert response.get_json()['errors'] == ['Option text must be between 1 and 200 characters.']

    def test_missing_is_correct_flag(self, client, create_quiz):
        quiz = create_quiz()
        options = [{'optionText': 'Maybe'}]

        response = client.post(f"/api/quizzes/{quiz['id']}/questions", json=question_body(options=options))

        assert response.status_code == 400
        assert response.get_json()['errors'] == ['isCorrect field is required.']


class TestReadQuestions:
    """Test cases for reading questions."""

    def test_list_for_missing_quiz(self, client):
        response = client.get('/api/quizzes/999/questions')

        assert response.status_code == 404

    def test_list_only_this_quiz(self, client, java_quiz, create_quiz, add_question):
        other = create_quiz(title='Python Basics Quiz')
        add_question(other['id'])

        data = client.get(f"/api/quizzes/{java_quiz['quiz']['id']}/questions").get_json()

        assert [q['id'] for q in data] == [java_quiz['question']['id']]

    def test_get_question(self, client, java_quiz):
        question = java_quiz['question']

        response = client.get(f"/api/questions/{question['id']}")

        assert response.status_code == 200
        assert response.get_json() == question

    def test_get_missing_question(self, client):
        response = client.get('/api/questions/999')

        assert response.status_code == 404
        assert response.get_json()['errors'] == ['Question not found']


class TestDeleteQuestion:
    """Test cases for DELETE /api/questions/<id>."""

    def test_delete_question(self, client, java_quiz):
        question_id = java_quiz['question']['id']

        response = client.delete(f'/api/questions/{question_id}')

        assert response.status_code == 204
        assert client.get(f'/api/questions/{question_id}').status_code == 404
        assert client.get(f"/api/options/{java_quiz['correct_option_id']}").status_code == 404
        assert client.get(f"/api/quizzes/{java_quiz['quiz']['id']}/questions").get_json() == []

    def test_delete_missing_question(self, client):
        assert client.delete('/api/questions/999').status_code == 404


class TestOptions:
    """Test cases for direct option maintenance."""

    def test_list_options(self, client, java_quiz):
        question = java_quiz['question']

        response = client.get(f"/api/questions/{question['id']}/options")

        assert response.status_code == 200
        assert response.get_json() == question['options']

    def test_list_options_for_missing_question(self, client):
        response = client.get('/api/questions/999/options')

        assert response.status_code == 404
        assert response.get_json()['errors'] == ['Question not found']

    def test_get_option(self, client, java_quiz):
        option_id = java_quiz['correct_option_id']

        response = client.get(f'/api/options/{option_id}')

        assert response.status_code == 200
        assert response.get_json()['isCorrect'] is True

    def test_get_missing_option(self, client):
        response = client.get('/api/options/999')

        assert response.status_code == 404
        assert response.get_json()['errors'] == ['Option not found']

    def test_update_option(self, client, java_quiz):
        option_id = java_quiz['wrong_option_id']

        response = client.put(f'/api/options/{option_id}', json={
            'optionText': 'public static int main(String[] args)',
            'isCorrect': False,
        })

        assert response.status_code == 200
        data = response.get_json()
        assert data['id'] == option_id
        assert data['optionText'] == 'public static int main(String[] args)'
        assert data['questionId'] == java_quiz['question']['id']

    def test_update_option_validates_body(self, client, java_quiz):
        response = client.put(f"/api/options/{java_quiz['wrong_option_id']}", json={'optionText': ''})

        assert response.status_code == 400
        errors = response.get_json()['errors']
        assert 'Option text cannot be blank.' in errors
        assert 'isCorrect field is required.' in errors

    def test_delete_option(self, client, java_quiz):
        option_id = java_quiz['wrong_option_id']

        response = client.delete(f'/api/options/{option_id}')

        assert response.status_code == 204
        remaining = client.get(f"/api/questions/{java_quiz['question']['id']}/options").get_json()
        assert option_id not in [o['id'] for o in remaining]
        assert len(remaining) == 2

    def test_delete_missing_option(self, client):
        assert client.delete('/api/options/999').status_code == 404
