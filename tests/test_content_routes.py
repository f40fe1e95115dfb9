from edu_portal.extensions import db
from edu_portal.models import Quiz


def test_grades_and_levels(client, seed):
    assert client.get('/api/grades').get_json() == [{'id': 1, 'name': 'Secondary'}]
    assert client.get('/api/levels').get_json() == [{'id': 1, 'name': 'Grade 10'}, {'id': 2, 'name': 'Grade 11'}]
    assert [level['id'] for level in client.get('/api/grades/1/levels').get_json()] == [1, 2]
    assert client.get('/api/grades/9/levels').get_json() == []


def test_units_resources_and_videos(client, seed):
    assert client.get('/api/levels/1/units').get_json() == [{'id': 1, 'grade_id': 1, 'title': 'Algebra'}]

    resources = client.get('/api/units/1/resources').get_json()
    assert [r['category'] for r in resources] == ['summaries', 'worksheets']

    videos = client.get('/api/units/1/videos').get_json()
    assert videos[0]['url'] == 'https://videos.example/intro'


def test_quizzes_grouped_by_type(app, client, seed):
    with app.app_context():
        db.session.add_all([
            Quiz(id=2, title='Final Exam', grade_id=1, quiz_type='final', duration_minutes=90),
            Quiz(id=3, title='Pop quiz', grade_id=1, quiz_type='quick', duration_minutes=5),
            Quiz(id=4, title='Unknown type', grade_id=1, quiz_type='weekly'),
            Quiz(id=5, title='Other level', grade_id=2, quiz_type='quick'),
        ])
        db.session.commit()

    grouped = client.get('/api/levels/1/quizzes').get_json()

    assert set(grouped) == {'final', 'monthly', 'quick'}
    assert [q['title'] for q in grouped['final']] == ['Final Exam']
    assert [q['title'] for q in grouped['monthly']] == ['Algebra Basics']
    assert [q['title'] for q in grouped['quick']] == ['Pop quiz']
    assert grouped['monthly'][0] == {
        'id': 1, 'title': 'Algebra Basics', 'quiz_type': 'monthly', 'duration_minutes': 30,
    }


def test_quiz_detail_hides_correct_answers(client, seed):
    body = client.get('/api/quizzes/1').get_json()

    assert body['quiz'] == {'id': 1, 'title': 'Algebra Basics', 'duration_minutes': 30}
    assert [q['id'] for q in body['questions']] == [1, 2, 3]
    assert body['questions'][0]['options'] == [{'id': 11, 'option_text': '5'}, {'id': 12, 'option_text': '6'}]
    assert 'options' not in body['questions'][2]
    assert 'is_correct' not in str(body)


def test_unknown_quiz(client, seed):
    response = client.get('/api/quizzes/404')

    assert response.status_code == 404
    assert response.get_json() == {'success': False, 'message': 'Quiz not found.'}


def test_unknown_route_is_json(client):
    response = client.get('/api/nothing-here')

    assert response.status_code == 404
    assert response.get_json()['success'] is False
