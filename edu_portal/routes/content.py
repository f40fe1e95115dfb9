"""
Content Routes
Grade -> level -> unit hierarchy, unit material and quiz content
"""
from flask import Blueprint, jsonify

from edu_portal.errors import NotFoundError
from edu_portal.extensions import db
from edu_portal.models import (
    Grade, GradeLevel, Unit, UnitResource, Video, Quiz, Question, QUIZ_TYPES
)

content_bp = Blueprint('content', __name__)


@content_bp.route('/grades')
def grades():
    """All grades"""
    return jsonify([g.to_dict() for g in Grade.query.order_by(Grade.id).all()])


@content_bp.route('/levels')
def levels():
    """All levels (id and name only)"""
    rows = GradeLevel.query.order_by(GradeLevel.id).all()
    return jsonify([{'id': level.id, 'name': level.name} for level in rows])


@content_bp.route('/grades/<int:grade_id>/levels')
def grade_levels(grade_id):
    rows = GradeLevel.query.filter_by(grade_id=grade_id).order_by(GradeLevel.id).all()
    return jsonify([level.to_dict() for level in rows])


@content_bp.route('/levels/<int:level_id>/units')
def level_units(level_id):
    rows = Unit.query.filter_by(grade_id=level_id).order_by(Unit.id).all()
    return jsonify([unit.to_dict() for unit in rows])


@content_bp.route('/units/<int:unit_id>/resources')
def unit_resources(unit_id):
    """Unit material ordered by category"""
    rows = UnitResource.query.filter_by(unit_id=unit_id)\
        .order_by(UnitResource.category, UnitResource.id).all()
    return jsonify([resource.to_dict() for resource in rows])


@content_bp.route('/units/<int:unit_id>/videos')
def unit_videos(unit_id):
    rows = Video.query.filter_by(unit_id=unit_id).order_by(Video.id).all()
    return jsonify([video.to_dict() for video in rows])


@content_bp.route('/levels/<int:level_id>/quizzes')
def level_quizzes(level_id):
    """Quizzes of a level grouped by quiz type; unknown types are left out"""
    grouped = {quiz_type: [] for quiz_type in QUIZ_TYPES}
    for quiz in Quiz.query.filter_by(grade_id=level_id).order_by(Quiz.id).all():
        if quiz.quiz_type in grouped:
            grouped[quiz.quiz_type].append(quiz.to_dict())
    return jsonify(grouped)


@content_bp.route('/quizzes/<int:quiz_id>')
def quiz_detail(quiz_id):
    """Quiz with its questions; mcq questions carry their options"""
    quiz = db.session.get(Quiz, quiz_id)
    if not quiz:
        raise NotFoundError('Quiz not found.')

    questions = Question.query.filter_by(quiz_id=quiz_id).order_by(Question.id).all()

    return jsonify({
        'quiz': {'id': quiz.id, 'title': quiz.title, 'duration_minutes': quiz.duration_minutes},
        'questions': [question.to_dict() for question in questions],
    })
