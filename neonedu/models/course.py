"""
Course model
"""
import uuid
from datetime import datetime
from neonedu import db


class Course(db.Model):
    """Course listing.

    ``description`` is the legacy free-text field that older rows use to
    encode duration and levels; ``duration``, ``levelitem1`` and
    ``levelitem2`` supersede it whenever they are filled in.
    """
    __tablename__ = 'courses'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.String(1000), nullable=False, default='')
    duration = db.Column(db.String(100))
    levelitem1 = db.Column(db.String(200))
    levelitem2 = db.Column(db.String(200))
    image = db.Column(db.Text)
    category = db.Column(db.String(50), nullable=False)
    link = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'duration': self.duration,
            'levelitem1': self.levelitem1,
            'levelitem2': self.levelitem2,
            'image': self.image,
            'category': self.category,
            'link': self.link,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None
        }

    def __repr__(self):
        return f'<Course {self.title}>'
