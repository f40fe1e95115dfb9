"""
Quiz Model
"""
from edu_portal.extensions import db

QUIZ_TYPES = ('final', 'monthly', 'quick')


class Quiz(db.Model):
    """Quiz model"""
    __tablename__ = 'quizzes'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    grade_id = db.Column(db.Integer, db.ForeignKey('grade_levels.id'), index=True)
    # One of QUIZ_TYPES
    quiz_type = db.Column(db.String(20), nullable=False, default='quick')
    duration_minutes = db.Column(db.Integer)

    # Relationships
    questions = db.relationship('Question', backref='quiz', lazy=True, order_by='Question.id')

    def __repr__(self):
        return f'<Quiz {self.title}>'

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'quiz_type': self.quiz_type,
            'duration_minutes': self.duration_minutes,
        }
