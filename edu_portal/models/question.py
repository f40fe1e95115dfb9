"""
Question Model
Questions and the options of multiple-choice questions
"""
from edu_portal.extensions import db

MCQ = 'mcq'


class Question(db.Model):
    """Question model"""
    __tablename__ = 'questions'

    id = db.Column(db.Integer, primary_key=True)
    quiz_id = db.Column(db.Integer, db.ForeignKey('quizzes.id'), nullable=False, index=True)
    question_text = db.Column(db.Text, nullable=False)

    # 'mcq' is auto-graded, anything else is free-form
    question_type = db.Column(db.String(20), nullable=False, default=MCQ)
    points = db.Column(db.Integer, nullable=False, default=0)

    options = db.relationship('QuestionOption', backref='question', lazy=True, order_by='QuestionOption.id')

    def __repr__(self):
        return f'<Question {self.id}: {self.question_text[:50]}...>'

    @property
    def is_mcq(self):
        return self.question_type == MCQ

    def to_dict(self, include_options=True):
        """Student-facing projection; option correctness is never exposed"""
        data = {
            'id': self.id,
            'question_text': self.question_text,
            'question_type': self.question_type,
            'points': self.points,
        }
        if include_options and self.is_mcq:
            data['options'] = [option.to_dict() for option in self.options]
        return data


class QuestionOption(db.Model):
    """Answer option for an mcq question"""
    __tablename__ = 'question_options'

    id = db.Column(db.Integer, primary_key=True)
    question_id = db.Column(db.Integer, db.ForeignKey('questions.id'), nullable=False, index=True)
    option_text = db.Column(db.Text, nullable=False)
    is_correct = db.Column(db.Boolean, nullable=False, default=False)

    def to_dict(self):
        return {'id': self.id, 'option_text': self.option_text}
