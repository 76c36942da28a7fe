from extensions import db
from datetime import datetime


class Favorite(db.Model):
    """Property saved by a profile"""
    __tablename__ = 'favorites'
    __table_args__ = (
        db.UniqueConstraint('profile_id', 'property_id', name='uq_favorite_profile_property'),
    )

    id = db.Column(db.Integer, primary_key=True)
    profile_id = db.Column(db.Integer, db.ForeignKey('profiles.id'), nullable=False, index=True)
    property_id = db.Column(db.Integer, db.ForeignKey('properties.id'), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'property_id': self.property_id,
        }
