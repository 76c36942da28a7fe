"""
Favorites Blueprint
"""

from homeaway.api.favorites.routes import favorites_bp

__all__ = ['favorites_bp']
