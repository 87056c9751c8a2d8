"""
Contact info and social link models
"""
import uuid
from datetime import datetime
from neonedu import db


class ContactInfo(db.Model):
    """Singleton contact record; get-or-create keeps it at one row"""
    __tablename__ = 'contact_info'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    address = db.Column(db.String(500), nullable=False)
    phone = db.Column(db.String(20), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    socials = db.relationship('SocialLink', backref='contact_info', lazy='select',
                              cascade='all, delete-orphan', order_by='SocialLink.created_at')

    def to_dict(self):
        return {
            'id': self.id,
            'address': self.address,
            'phone': self.phone,
            'email': self.email,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
            'contact_info_socials': [social.to_dict() for social in self.socials]
        }

    def __repr__(self):
        return f'<ContactInfo {self.email}>'


class SocialLink(db.Model):
    """Social media link; one per platform"""
    __tablename__ = 'contact_info_socials'
    __table_args__ = (
        db.UniqueConstraint('contact_info_id', 'platform', name='contact_info_socials_platform_key'),
    )

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    contact_info_id = db.Column(db.String(36), db.ForeignKey('contact_info.id', ondelete='CASCADE'),
                                nullable=False)
    platform = db.Column(db.String(50), nullable=False)
    url = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'platform': self.platform,
            'url': self.url
        }

    def __repr__(self):
        return f'<SocialLink {self.platform}>'
