"""
Study abroad program model
"""
import uuid
from datetime import datetime
from neonedu import db


class StudyAbroadProgram(db.Model):
    """Study destination card"""
    __tablename__ = 'study_abroad'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    program_name = db.Column(db.String(200))
    country = db.Column(db.String(100), nullable=False)
    # "<main description>|<universities text>"
    description = db.Column(db.String(1000), nullable=False)
    image = db.Column(db.Text)
    link = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'program_name': self.program_name,
            'country': self.country,
            'description': self.description,
            'image': self.image,
            'link': self.link,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None
        }

    def __repr__(self):
        return f'<StudyAbroadProgram {self.country}>'
