"""
Models Package
Exports all database models
"""
from edu_portal.models.content import Grade, GradeLevel, Unit, UnitResource, Video
from edu_portal.models.student import Student
from edu_portal.models.quiz import Quiz, QUIZ_TYPES
from edu_portal.models.question import Question, QuestionOption, MCQ
from edu_portal.models.attempt import QuizAttempt
from edu_portal.models.answer import StudentAnswer
from edu_portal.models.activity import ActivityLog, LOGIN, QUIZ_SUBMIT

__all__ = [
    'Grade', 'GradeLevel', 'Unit', 'UnitResource', 'Video',
    'Student',
    'Quiz', 'QUIZ_TYPES',
    'Question', 'QuestionOption', 'MCQ',
    'QuizAttempt',
    'StudentAnswer',
    'ActivityLog', 'LOGIN', 'QUIZ_SUBMIT',
]
