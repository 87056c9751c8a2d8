"""
History timeline model
"""
import uuid
from datetime import datetime
from neonedu import db


class HistoryItem(db.Model):
    """Company timeline entry"""
    __tablename__ = 'history'
    __table_args__ = (
        db.CheckConstraint('year >= 1900 AND year <= 2100', name='history_year_range'),
    )

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    year = db.Column(db.Integer, nullable=False, index=True)
    event = db.Column(db.String(2000), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'year': self.year,
            'event': self.event,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<HistoryItem {self.year}>'
