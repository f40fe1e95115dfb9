"""
QuizAttempt Model
One completed submission of a quiz by a student
"""
from edu_portal.extensions import db


class QuizAttempt(db.Model):
    """Attempt rows are written once at submission and never updated"""
    __tablename__ = 'quiz_attempts'

    id = db.Column(db.Integer, primary_key=True)
    quiz_id = db.Column(db.Integer, db.ForeignKey('quizzes.id'), nullable=False, index=True)
    student_id = db.Column(db.Integer, db.ForeignKey('students.id'), nullable=False, index=True)
    score = db.Column(db.Integer, nullable=False, default=0)
    start_time = db.Column(db.DateTime(timezone=True))
    end_time = db.Column(db.DateTime(timezone=True))

    answers = db.relationship('StudentAnswer', backref='attempt', lazy=True, order_by='StudentAnswer.id')

    def __repr__(self):
        return f'<QuizAttempt {self.id}: quiz {self.quiz_id} by {self.student_id}>'
