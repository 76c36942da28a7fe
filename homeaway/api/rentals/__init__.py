"""
Rentals Blueprint
"""

from homeaway.api.rentals.routes import rentals_bp

__all__ = ['rentals_bp']
