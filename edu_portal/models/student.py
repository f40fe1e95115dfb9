"""
Student Model
Students and teachers share one table; is_teacher tells them apart
"""
from edu_portal.extensions import db


class Student(db.Model):
    """Student model"""
    __tablename__ = 'students'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    email = db.Column(db.String(200), unique=True, nullable=False, index=True)
    # Matches GradeLevel.name
    academic_stage = db.Column(db.String(100))
    is_teacher = db.Column(db.Boolean, nullable=False, default=False)

    def __repr__(self):
        return f'<Student {self.email}>'

    def to_profile(self):
        """Profile fields returned on login"""
        return {
            'id': self.id,
            'name': self.name,
            'academicStage': self.academic_stage,
            'isTeacher': self.is_teacher,
        }
