"""
Profiles Blueprint
"""

from homeaway.api.profiles.routes import profiles_bp

__all__ = ['profiles_bp']
