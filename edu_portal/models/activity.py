"""
ActivityLog Model
Append-only log of student actions
"""
from edu_portal.extensions import db
from edu_portal.utils.helpers import now_utc

LOGIN = 'login'
QUIZ_SUBMIT = 'quiz_submit'


class ActivityLog(db.Model):
    """Activity log entry"""
    __tablename__ = 'activity_log'

    id = db.Column(db.Integer, primary_key=True)
    student_id = db.Column(db.Integer, db.ForeignKey('students.id'), nullable=False, index=True)
    activity_type = db.Column(db.String(50), nullable=False)
    details = db.Column(db.Text)
    activity_timestamp = db.Column(db.DateTime(timezone=True), nullable=False, default=now_utc, index=True)

    def __repr__(self):
        return f'<ActivityLog {self.activity_type} by {self.student_id}>'
