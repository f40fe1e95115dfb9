"""
Quiz Routes
Quiz attempt submission with automatic grading
"""
from flask import Blueprint, request, jsonify

from edu_portal.services.submission_service import (
    SubmissionService, parse_answers, parse_id, parse_start_time
)

quiz_bp = Blueprint('quiz', __name__)


def _submit(quiz_id):
    """Validate the multipart form, then grade and store the attempt"""
    student_id = parse_id(request.form.get('studentId'), 'studentId')
    answers = parse_answers(request.form.get('answers'))
    start_time = parse_start_time(request.form.get('startTime'))

    result = SubmissionService().submit(
        quiz_id, student_id, answers, start_time, files=request.files
    )

    return jsonify({
        'success': True,
        'message': 'Your answers were submitted successfully!',
        'score': result.score,
        'totalPossibleScore': result.total_possible_score,
    })


@quiz_bp.route('/submit-quiz-attempt', methods=['POST'])
def submit_quiz_attempt():
    """Submission with the quiz id in the form"""
    return _submit(parse_id(request.form.get('quizId'), 'quizId'))


@quiz_bp.route('/quizzes/<int:quiz_id>/submit', methods=['POST'])
def submit_quiz(quiz_id):
    """Submission with the quiz id in the URL"""
    return _submit(quiz_id)
