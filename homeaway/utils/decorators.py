"""
Route decorators for the identity provider's tokens
"""

from functools import wraps

from flask import current_app, g, jsonify
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request

from homeaway.models.profile import Profile


def get_current_profile():
    """Profile of the token's subject, or None when not created yet"""
    return Profile.query.filter_by(auth_id=get_jwt_identity()).first()


def profile_required():
    """Require a valid token and an existing profile; exposes it as g.profile"""
    def wrapper(fn):
        @wraps(fn)
        def decorator(*args, **kwargs):
            verify_jwt_in_request()
            profile = get_current_profile()
            if not profile:
                return jsonify({
                    'error': 'Profile required',
                    'message': 'Create a profile before continuing',
                }), 403
            g.profile = profile
            return fn(*args, **kwargs)
        return decorator
    return wrapper


def admin_required():
    """Require the configured admin identity"""
    def wrapper(fn):
        @wraps(fn)
        @profile_required()
        def decorator(*args, **kwargs):
            admin_id = current_app.config.get('ADMIN_USER_ID')
            if not admin_id or g.profile.auth_id != admin_id:
                current_app.logger.warning(f'Admin access denied for {g.profile.auth_id}')
                return jsonify({'error': 'Forbidden', 'message': 'Admins only'}), 403
            return fn(*args, **kwargs)
        return decorator
    return wrapper
