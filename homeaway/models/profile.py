"""
Profile Model
"""

from extensions import db
from datetime import datetime


class Profile(db.Model):
    """Marketplace profile linked to an external identity"""

    __tablename__ = 'profiles'

    id = db.Column(db.Integer, primary_key=True)
    auth_id = db.Column(db.String(255), unique=True, nullable=False, index=True)

    first_name = db.Column(db.String(50), nullable=False)
    last_name = db.Column(db.String(50), nullable=False)
    username = db.Column(db.String(50), unique=True, nullable=False, index=True)
    email = db.Column(db.String(255), nullable=False)
    profile_image = db.Column(db.String(500), default='')

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    properties = db.relationship('Property', backref='profile', lazy='dynamic',
                                 cascade='all, delete-orphan')
    favorites = db.relationship('Favorite', backref='profile', lazy='dynamic',
                                cascade='all, delete-orphan')
    reviews = db.relationship('Review', backref='profile', lazy='dynamic',
                              cascade='all, delete-orphan')
    bookings = db.relationship('Booking', backref='profile', lazy='dynamic',
                               cascade='all, delete-orphan')

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    def to_dict(self, include_email=False):
        """Convert profile to dictionary"""
        data = {
            'id': self.id,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'username': self.username,
            'profile_image': self.profile_image,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

        if include_email:
            data['auth_id'] = self.auth_id
            data['email'] = self.email

        return data

    def __repr__(self):
        return f'<Profile {self.username}>'
