"""
StudentAnswer Model
Stores individual question answers of an attempt
"""
from edu_portal.extensions import db


class StudentAnswer(db.Model):
    """Student answer model"""
    __tablename__ = 'student_answers'

    id = db.Column(db.Integer, primary_key=True)
    attempt_id = db.Column(db.Integer, db.ForeignKey('quiz_attempts.id'), nullable=False, index=True)
    question_id = db.Column(db.Integer, db.ForeignKey('questions.id'), nullable=False, index=True)
    answer_text = db.Column(db.Text)
    # Stored as sent; a wrong or unknown option id is graded as incorrect
    selected_option_id = db.Column(db.Integer)
    # Public URL of the uploaded file, set only when one was sent for this question
    file_url = db.Column(db.Text)

    def __repr__(self):
        return f'<StudentAnswer Q{self.question_id} in attempt {self.attempt_id}>'
