"""
Models package initialization
Import all models here for easy access
"""

from homeaway.models.profile import Profile
from homeaway.models.property import Property
from homeaway.models.favorite import Favorite
from homeaway.models.review import Review
from homeaway.models.booking import Booking

__all__ = [
    'Profile',
    'Property',
    'Favorite',
    'Review',
    'Booking',
]
