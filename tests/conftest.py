import pytest

from edu_portal import create_app
from edu_portal.extensions import db
from edu_portal.models import (
    Grade, GradeLevel, Unit, UnitResource, Video, Student, Quiz, Question, QuestionOption
)


@pytest.fixture
def app(tmp_path):
    app = create_app('testing', {'UPLOAD_FOLDER': str(tmp_path / 'uploads')})
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seed(app):
    """
    One grade/level with a student, a teacher and a quiz:
        Q1 mcq 5 points, correct option 11
        Q2 mcq 10 points, correct option 22
        Q3 free-form 7 points
    """
    with app.app_context():
        grade = Grade(id=1, name='Secondary')
        level = GradeLevel(id=1, grade_id=1, name='Grade 10')
        other_level = GradeLevel(id=2, grade_id=1, name='Grade 11')
        unit = Unit(id=1, grade_id=1, title='Algebra')
        db.session.add_all([grade, level, other_level, unit])
        db.session.add_all([
            UnitResource(id=2, unit_id=1, category='worksheets', title='Worksheet 1', url='/r/ws1.pdf'),
            UnitResource(id=1, unit_id=1, category='summaries', title='Summary', url='/r/sum.pdf'),
            Video(id=1, unit_id=1, title='Intro', url='https://videos.example/intro'),
        ])

        student = Student(id=1, name='Sara', email='sara@example.com', academic_stage='Grade 10')
        other_student = Student(id=2, name='Ali', email='ali@example.com', academic_stage='Grade 11')
        teacher = Student(id=3, name='Teacher', email='teacher@example.com', is_teacher=True)
        db.session.add_all([student, other_student, teacher])

        quiz = Quiz(id=1, title='Algebra Basics', grade_id=1, quiz_type='monthly', duration_minutes=30)
        db.session.add(quiz)
        db.session.add_all([
            Question(id=1, quiz_id=1, question_text='2 + 3 = ?', question_type='mcq', points=5),
            Question(id=2, quiz_id=1, question_text='4 * 5 = ?', question_type='mcq', points=10),
            Question(id=3, quiz_id=1, question_text='Explain your method', question_type='essay', points=7),
        ])
        db.session.add_all([
            QuestionOption(id=11, question_id=1, option_text='5', is_correct=True),
            QuestionOption(id=12, question_id=1, option_text='6', is_correct=False),
            QuestionOption(id=22, question_id=2, option_text='20', is_correct=True),
            QuestionOption(id=23, question_id=2, option_text='9', is_correct=False),
        ])
        db.session.commit()

    return {'quiz_id': 1, 'student_id': 1, 'level_id': 1}
