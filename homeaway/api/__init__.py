"""
API Package
"""

# Import all blueprints for easy access
from homeaway.api.profiles import profiles_bp
from homeaway.api.properties import properties_bp
from homeaway.api.rentals import rentals_bp
from homeaway.api.favorites import favorites_bp
from homeaway.api.reviews import reviews_bp
from homeaway.api.bookings import bookings_bp
from homeaway.api.admin import admin_bp

__all__ = [
    'profiles_bp',
    'properties_bp',
    'rentals_bp',
    'favorites_bp',
    'reviews_bp',
    'bookings_bp',
    'admin_bp',
]
