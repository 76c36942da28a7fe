"""
Property Model
"""

from extensions import db
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from sqlalchemy import func


class Property(db.Model):
    """Property/Listing model"""

    __tablename__ = 'properties'

    id = db.Column(db.Integer, primary_key=True)
    profile_id = db.Column(db.Integer, db.ForeignKey('profiles.id'), nullable=False, index=True)

    # Basic Information
    name = db.Column(db.String(100), nullable=False)
    tagline = db.Column(db.String(100), nullable=False)
    category = db.Column(db.String(50), nullable=False, index=True)
    image = db.Column(db.String(500), nullable=False)
    country = db.Column(db.String(2), nullable=False)
    description = db.Column(db.Text, nullable=False)

    # Pricing
    price = db.Column(db.Integer, nullable=False)

    # Property Details
    guests = db.Column(db.Integer, nullable=False, default=0)
    bedrooms = db.Column(db.Integer, nullable=False, default=0)
    beds = db.Column(db.Integer, nullable=False, default=0)
    baths = db.Column(db.Integer, nullable=False, default=0)

    # Amenities (stored as JSON array)
    amenities = db.Column(db.JSON, default=list)

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    bookings = db.relationship('Booking', backref='property', lazy='dynamic',
                               cascade='all, delete-orphan')
    reviews = db.relationship('Review', backref='property', lazy='dynamic',
                              cascade='all, delete-orphan')
    favorites = db.relationship('Favorite', backref='property', lazy='dynamic',
                                cascade='all, delete-orphan')

    def __init__(self, **kwargs):
        """Initialize property"""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def booking_periods(self):
        """Check-in/check-out of every paid booking, earliest first"""
        from homeaway.models.booking import Booking

        return self.bookings.filter(Booking.payment_status.is_(True)) \
            .order_by(Booking.check_in.asc()).all()

    def rating(self):
        """Average rating rounded half-up, and review count"""
        from homeaway.models.review import Review

        average, count = db.session.query(
            func.avg(Review.rating), func.count(Review.rating)
        ).filter(Review.property_id == self.id).one()

        if not count:
            return {'rating': 0, 'count': 0}

        rounded = Decimal(str(average)).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
        return {'rating': int(rounded), 'count': count}

    def to_summary(self):
        """Fields shown on listing cards"""
        return {
            'id': self.id,
            'name': self.name,
            'tagline': self.tagline,
            'country': self.country,
            'image': self.image,
            'price': self.price,
        }

    def to_dict(self, include_profile=False, include_bookings=False):
        """Convert property to dictionary"""
        data = {
            'id': self.id,
            'profile_id': self.profile_id,
            'name': self.name,
            'tagline': self.tagline,
            'category': self.category,
            'image': self.image,
            'country': self.country,
            'description': self.description,
            'price': self.price,
            'guests': self.guests,
            'bedrooms': self.bedrooms,
            'beds': self.beds,
            'baths': self.baths,
            'amenities': self.amenities or [],
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

        if include_profile:
            data['profile'] = self.profile.to_dict()

        if include_bookings:
            data['bookings'] = [booking.to_period() for booking in self.booking_periods()]

        return data

    def __repr__(self):
        return f'<Property {self.name}>'
