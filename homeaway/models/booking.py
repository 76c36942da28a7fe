"""
Booking Model
"""

from extensions import db
from datetime import datetime


class Booking(db.Model):
    """Booking/Reservation model"""

    __tablename__ = 'bookings'

    id = db.Column(db.Integer, primary_key=True)
    property_id = db.Column(db.Integer, db.ForeignKey('properties.id'), nullable=False, index=True)
    profile_id = db.Column(db.Integer, db.ForeignKey('profiles.id'), nullable=False, index=True)

    # Booking Details
    check_in = db.Column(db.Date, nullable=False)
    check_out = db.Column(db.Date, nullable=False)

    # Pricing
    total_nights = db.Column(db.Integer, nullable=False)
    order_total = db.Column(db.Integer, nullable=False)

    # Set once checkout completes
    payment_status = db.Column(db.Boolean, default=False, nullable=False)

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __init__(self, **kwargs):
        """Initialize booking"""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def to_period(self):
        return {
            'check_in': self.check_in.isoformat(),
            'check_out': self.check_out.isoformat(),
        }

    def to_dict(self, include_property=False):
        """Convert booking to dictionary"""
        data = {
            'id': self.id,
            'property_id': self.property_id,
            'profile_id': self.profile_id,
            'check_in': self.check_in.isoformat() if self.check_in else None,
            'check_out': self.check_out.isoformat() if self.check_out else None,
            'total_nights': self.total_nights,
            'order_total': self.order_total,
            'payment_status': self.payment_status,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

        if include_property:
            data['property'] = {
                'id': self.property.id,
                'name': self.property.name,
                'country': self.property.country,
                'price': self.property.price,
            }

        return data

    def __repr__(self):
        return f'<Booking {self.id} - Property {self.property_id}>'
