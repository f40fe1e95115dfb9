"""
Teacher Routes
Dashboard statistics, quiz results and per-student activity
"""
from flask import Blueprint, jsonify

from edu_portal.services import ActivityService, AnalyticsService

teacher_bp = Blueprint('teacher', __name__)


@teacher_bp.route('/quizzes')
def quizzes():
    """All quizzes with their grade level"""
    return jsonify(AnalyticsService.teacher_quizzes())


@teacher_bp.route('/quiz-results/<int:quiz_id>')
def quiz_results(quiz_id):
    return jsonify(AnalyticsService.quiz_results(quiz_id))


@teacher_bp.route('/attempt-details/<int:attempt_id>')
def attempt_details(attempt_id):
    return jsonify(AnalyticsService.attempt_details(attempt_id))


@teacher_bp.route('/grades/<int:grade_id>/students')
def grade_students(grade_id):
    return jsonify(AnalyticsService.students_in_grade(grade_id))


@teacher_bp.route('/student-activity/<int:student_id>')
def student_activity(student_id):
    """Student activity grouped by calendar week, newest week first"""
    return jsonify(ActivityService.weekly_activity(student_id))


@teacher_bp.route('/dashboard-stats')
def dashboard_stats():
    return jsonify(AnalyticsService.dashboard_stats())


@teacher_bp.route('/stats/all-students')
def all_students():
    return jsonify(AnalyticsService.all_students())


@teacher_bp.route('/stats/all-quizzes')
def all_quizzes():
    return jsonify(AnalyticsService.all_quizzes())


@teacher_bp.route('/stats/today-activities')
def today_activities():
    return jsonify(AnalyticsService.today_activities())


@teacher_bp.route('/stats/performance-details')
def performance_details():
    """Attempt scores next to each quiz's total possible score"""
    return jsonify(AnalyticsService.performance_details())
