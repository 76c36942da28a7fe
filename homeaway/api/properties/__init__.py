"""
Properties Blueprint
"""

from homeaway.api.properties.routes import properties_bp

__all__ = ['properties_bp']
