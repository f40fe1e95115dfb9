"""
Content Models
Grade -> level -> unit hierarchy with the unit's resources and videos
"""
from edu_portal.extensions import db


class Grade(db.Model):
    """Top-level school grade"""
    __tablename__ = 'grades'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)

    def __repr__(self):
        return f'<Grade {self.name}>'

    def to_dict(self):
        return {'id': self.id, 'name': self.name}


class GradeLevel(db.Model):
    """Academic level inside a grade (students reference it by name)"""
    __tablename__ = 'grade_levels'

    id = db.Column(db.Integer, primary_key=True)
    grade_id = db.Column(db.Integer, db.ForeignKey('grades.id'), index=True)
    name = db.Column(db.String(100), nullable=False)

    def __repr__(self):
        return f'<GradeLevel {self.name}>'

    def to_dict(self):
        return {'id': self.id, 'grade_id': self.grade_id, 'name': self.name}


class Unit(db.Model):
    """Teaching unit; grade_id points at grade_levels"""
    __tablename__ = 'units'

    id = db.Column(db.Integer, primary_key=True)
    grade_id = db.Column(db.Integer, db.ForeignKey('grade_levels.id'), index=True)
    title = db.Column(db.String(200), nullable=False)

    def to_dict(self):
        return {'id': self.id, 'grade_id': self.grade_id, 'title': self.title}


class UnitResource(db.Model):
    """Downloadable unit material grouped by category"""
    __tablename__ = 'unit_resources'

    id = db.Column(db.Integer, primary_key=True)
    unit_id = db.Column(db.Integer, db.ForeignKey('units.id'), index=True)
    category = db.Column(db.String(50))
    title = db.Column(db.String(200))
    url = db.Column(db.Text)

    def to_dict(self):
        return {
            'id': self.id,
            'unit_id': self.unit_id,
            'category': self.category,
            'title': self.title,
            'url': self.url,
        }


class Video(db.Model):
    __tablename__ = 'videos'

    id = db.Column(db.Integer, primary_key=True)
    unit_id = db.Column(db.Integer, db.ForeignKey('units.id'), index=True)
    title = db.Column(db.String(200))
    url = db.Column(db.Text)

    def to_dict(self):
        return {'id': self.id, 'unit_id': self.unit_id, 'title': self.title, 'url': self.url}
