"""
Analytics Service
Read-only queries behind the teacher dashboard
"""
from datetime import timedelta

from sqlalchemy import func
from sqlalchemy.orm import aliased

from edu_portal.extensions import db
from edu_portal.models import (
    ActivityLog, GradeLevel, Question, QuestionOption, Quiz, QuizAttempt, Student, StudentAnswer, MCQ
)
from edu_portal.utils.helpers import now_utc, isoformat_or_none


class AnalyticsService:
    """Teacher dashboard statistics and reports"""

    @staticmethod
    def total_possible_scores():
        """
        Total possible score of every quiz (sum of its mcq points)

        Returns:
            dict: quiz id -> total
        """
        rows = db.session.query(
            Question.quiz_id,
            func.sum(Question.points).label('total'),
        ).filter(Question.question_type == MCQ).group_by(Question.quiz_id).all()
        return {row.quiz_id: int(row.total or 0) for row in rows}

    @staticmethod
    def dashboard_stats():
        """Headline counters for the dashboard cards"""
        total_students = Student.query.filter_by(is_teacher=False).count()
        total_quizzes = Quiz.query.count()
        # ROUND in SQL rounds halves away from zero
        average = db.session.query(
            func.coalesce(func.round(func.avg(QuizAttempt.score)), 0)
        ).scalar()
        today_activity = ActivityLog.query.filter(
            ActivityLog.activity_timestamp >= now_utc() - timedelta(days=1)
        ).count()

        return {
            'total_students': total_students,
            'total_quizzes': total_quizzes,
            'average_performance': int(average),
            'today_activity': today_activity,
        }

    @staticmethod
    def teacher_quizzes():
        rows = db.session.query(
            Quiz.id, Quiz.title, Quiz.quiz_type,
            GradeLevel.id.label('grade_level_id'),
            GradeLevel.name.label('grade_level_name'),
        ).select_from(Quiz)\
         .join(GradeLevel, Quiz.grade_id == GradeLevel.id)\
         .order_by(GradeLevel.id, Quiz.id.desc()).all()

        return [
            {
                'id': r.id,
                'title': r.title,
                'quiz_type': r.quiz_type,
                'grade_level_id': r.grade_level_id,
                'grade_level_name': r.grade_level_name,
            }
            for r in rows
        ]

    @staticmethod
    def quiz_results(quiz_id):
        """All attempts of a quiz, latest submission first"""
        rows = db.session.query(
            QuizAttempt.id.label('attempt_id'),
            Student.name.label('student_name'),
            Student.email.label('student_email'),
            QuizAttempt.score,
            QuizAttempt.start_time,
            QuizAttempt.end_time,
        ).select_from(QuizAttempt)\
         .join(Student, QuizAttempt.student_id == Student.id)\
         .filter(QuizAttempt.quiz_id == quiz_id)\
         .order_by(QuizAttempt.end_time.desc(), QuizAttempt.id.desc()).all()

        return [
            {
                'attempt_id': r.attempt_id,
                'student_name': r.student_name,
                'student_email': r.student_email,
                'score': r.score,
                'start_time': isoformat_or_none(r.start_time),
                'end_time': isoformat_or_none(r.end_time),
            }
            for r in rows
        ]

    @staticmethod
    def attempt_details(attempt_id):
        """Per-answer breakdown with the selected and the correct option text"""
        selected = aliased(QuestionOption)
        correct = aliased(QuestionOption)

        rows = db.session.query(
            Question.question_text,
            Question.points,
            StudentAnswer.answer_text,
            StudentAnswer.file_url,
            selected.option_text.label('selected_option'),
            correct.option_text.label('correct_option'),
        ).select_from(StudentAnswer)\
         .join(Question, StudentAnswer.question_id == Question.id)\
         .outerjoin(selected, StudentAnswer.selected_option_id == selected.id)\
         .outerjoin(correct, db.and_(correct.question_id == Question.id, correct.is_correct.is_(True)))\
         .filter(StudentAnswer.attempt_id == attempt_id)\
         .order_by(Question.id, StudentAnswer.id).all()

        return [
            {
                'question_text': r.question_text,
                'points': r.points,
                'answer_text': r.answer_text,
                'file_url': r.file_url,
                'selected_option': r.selected_option,
                'correct_option': r.correct_option,
            }
            for r in rows
        ]

    @staticmethod
    def students_in_grade(grade_id):
        """Students whose academic stage is the name of the given level"""
        rows = db.session.query(Student.id, Student.name)\
            .select_from(Student)\
            .join(GradeLevel, Student.academic_stage == GradeLevel.name)\
            .filter(GradeLevel.id == grade_id)\
            .order_by(Student.name).all()
        return [{'id': r.id, 'name': r.name} for r in rows]

    @staticmethod
    def all_students():
        students = Student.query.filter_by(is_teacher=False).order_by(Student.name).all()
        return [
            {'name': s.name, 'email': s.email, 'academic_stage': s.academic_stage}
            for s in students
        ]

    @staticmethod
    def all_quizzes():
        rows = db.session.query(Quiz.title, GradeLevel.name.label('grade_name'))\
            .select_from(Quiz)\
            .join(GradeLevel, Quiz.grade_id == GradeLevel.id)\
            .order_by(GradeLevel.id, Quiz.title).all()
        return [{'title': r.title, 'grade_name': r.grade_name} for r in rows]

    @staticmethod
    def today_activities():
        """Activity of the last 24 hours, newest first"""
        rows = db.session.query(
            Student.name,
            Student.academic_stage,
            ActivityLog.details,
            ActivityLog.activity_timestamp,
        ).select_from(ActivityLog)\
         .join(Student, ActivityLog.student_id == Student.id)\
         .filter(ActivityLog.activity_timestamp >= now_utc() - timedelta(days=1))\
         .order_by(ActivityLog.activity_timestamp.desc()).all()

        return [
            {
                'name': r.name,
                'academic_stage': r.academic_stage,
                'details': r.details,
                'activity_timestamp': isoformat_or_none(r.activity_timestamp),
            }
            for r in rows
        ]

    @staticmethod
    def performance_details():
        """Every student attempt with the quiz's total possible score"""
        totals = AnalyticsService.total_possible_scores()

        rows = db.session.query(
            Student.id.label('student_id'),
            Student.name.label('student_name'),
            Student.academic_stage.label('student_grade'),
            Quiz.id.label('quiz_id'),
            Quiz.title.label('quiz_title'),
            QuizAttempt.score.label('score_achieved'),
            QuizAttempt.end_time,
        ).select_from(QuizAttempt)\
         .join(Student, QuizAttempt.student_id == Student.id)\
         .join(Quiz, QuizAttempt.quiz_id == Quiz.id)\
         .filter(Student.is_teacher.is_(False))\
         .order_by(Student.academic_stage, Student.name, QuizAttempt.end_time).all()

        return [
            {
                'student_id': r.student_id,
                'student_name': r.student_name,
                'student_grade': r.student_grade,
                'quiz_id': r.quiz_id,
                'quiz_title': r.quiz_title,
                'score_achieved': r.score_achieved,
                'total_possible_score': totals.get(r.quiz_id, 0),
                'end_time': isoformat_or_none(r.end_time),
            }
            for r in rows
        ]
