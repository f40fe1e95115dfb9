"""
Routes Package
Exports all route blueprints
"""
from edu_portal.routes.auth import auth_bp
from edu_portal.routes.content import content_bp
from edu_portal.routes.quiz import quiz_bp
from edu_portal.routes.teacher import teacher_bp
from edu_portal.routes.public import public_bp

__all__ = ['auth_bp', 'content_bp', 'quiz_bp', 'teacher_bp', 'public_bp']
