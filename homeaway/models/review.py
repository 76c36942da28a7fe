"""
Review Model
"""

from extensions import db
from datetime import datetime


class Review(db.Model):
    """Review/Rating model"""

    __tablename__ = 'reviews'
    __table_args__ = (
        db.UniqueConstraint('profile_id', 'property_id', name='uq_review_profile_property'),
    )

    id = db.Column(db.Integer, primary_key=True)
    property_id = db.Column(db.Integer, db.ForeignKey('properties.id'), nullable=False, index=True)
    profile_id = db.Column(db.Integer, db.ForeignKey('profiles.id'), nullable=False, index=True)

    # Review Content
    rating = db.Column(db.Integer, nullable=False)  # 1-5 stars
    comment = db.Column(db.Text, nullable=False)

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __init__(self, **kwargs):
        """Initialize review"""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def to_dict(self, include_profile=False, include_property=False):
        """Convert review to dictionary"""
        data = {
            'id': self.id,
            'property_id': self.property_id,
            'rating': self.rating,
            'comment': self.comment,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

        if include_profile:
            data['profile'] = {
                'first_name': self.profile.first_name,
                'profile_image': self.profile.profile_image,
            }

        if include_property:
            data['property'] = {
                'name': self.property.name,
                'image': self.property.image,
            }

        return data

    def __repr__(self):
        return f'<Review {self.id} - Property {self.property_id}>'
