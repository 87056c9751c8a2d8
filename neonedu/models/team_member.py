"""
Team member model
"""
import uuid
from datetime import datetime
from neonedu import db


class TeamMember(db.Model):
    """Staff bio shown in the team section"""
    __tablename__ = 'team_members'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(100), nullable=False)  # also the ordering key on the public page
    role = db.Column(db.String(100), nullable=False)
    image = db.Column(db.Text, nullable=False)
    bio = db.Column(db.String(500), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'role': self.role,
            'image': self.image,
            'bio': self.bio,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None
        }

    def __repr__(self):
        return f'<TeamMember {self.name}>'
