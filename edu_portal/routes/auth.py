"""
Authentication Routes
Email login (no password; the email alone identifies the student)
"""
from flask import Blueprint, current_app, request, jsonify

from edu_portal.errors import ClientError, NotFoundError
from edu_portal.models import Student, LOGIN
from edu_portal.services.activity_service import ActivityService

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/login', methods=['POST'])
def login():
    """Look up the student by email and log the login"""
    data = request.get_json(silent=True)
    email = data.get('email') if isinstance(data, dict) else None

    if not isinstance(email, str) or not email.strip():
        raise ClientError('Email is required.')

    student = Student.query.filter_by(email=email.strip()).first()
    if not student:
        raise NotFoundError('Email is not registered.')

    # Login succeeds even if the activity log is unavailable
    locale = current_app.config['ACTIVITY_LOCALE']
    ActivityService.record_safely(student.id, LOGIN, ActivityService.describe(LOGIN, None, locale))

    return jsonify(student.to_profile())
