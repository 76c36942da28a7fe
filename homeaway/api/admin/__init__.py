"""
Admin Blueprint
"""

from homeaway.api.admin.routes import admin_bp

__all__ = ['admin_bp']
