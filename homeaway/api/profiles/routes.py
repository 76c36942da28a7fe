"""
Profile Routes
"""

from flask import Blueprint, current_app, g, jsonify, request
from flask_jwt_extended import get_jwt, get_jwt_identity, jwt_required
from sqlalchemy.exc import IntegrityError
from extensions import db
from homeaway.models.profile import Profile
from homeaway.services.s3_service import UploadError, delete_image, upload_image
from homeaway.utils.decorators import get_current_profile, profile_required
from homeaway.utils.schemas import ProfileSchema, SchemaError, validate_image, validate_with_schema

profiles_bp = Blueprint('profiles', __name__)


@profiles_bp.route('/', methods=['POST'])
@jwt_required()
def create_profile():
    """Create the caller's profile from form data and identity claims"""
    try:
        auth_id = get_jwt_identity()
        if get_current_profile():
            return jsonify({'error': 'Profile already exists'}), 409

        data = validate_with_schema(ProfileSchema, request.get_json(silent=True) or request.form.to_dict())

        if Profile.query.filter_by(username=data.username).first():
            return jsonify({'error': 'Username already taken'}), 409

        claims = get_jwt()
        email = claims.get('email')
        if not email:
            return jsonify({'error': 'Identity token carries no email'}), 400

        profile = Profile(
            auth_id=auth_id,
            email=email,
            profile_image=claims.get('image_url') or '',
            **data.model_dump()
        )
        db.session.add(profile)
        db.session.commit()

        current_app.logger.info(f'Profile created for {auth_id}')

        return jsonify({
            'message': 'Profile created',
            'profile': profile.to_dict(include_email=True)
        }), 201

    except SchemaError as e:
        return jsonify({'error': str(e)}), 400
    except IntegrityError:
        db.session.rollback()
        return jsonify({'error': 'Profile already exists'}), 409
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f'Create profile error: {str(e)}')
        return jsonify({'error': str(e)}), 500


@profiles_bp.route('/me', methods=['GET'])
@profile_required()
def get_profile():
    """Get the caller's profile"""
    return jsonify({'profile': g.profile.to_dict(include_email=True)}), 200


@profiles_bp.route('/me/image', methods=['GET'])
@jwt_required()
def get_profile_image():
    """Get the caller's profile image, null without a profile"""
    profile = get_current_profile()
    return jsonify({'profile_image': profile.profile_image if profile else None}), 200


@profiles_bp.route('/me', methods=['PUT'])
@profile_required()
def update_profile():
    """Update the caller's names and username"""
    try:
        data = validate_with_schema(ProfileSchema, request.get_json(silent=True))

        taken = Profile.query.filter(
            Profile.username == data.username,
            Profile.id != g.profile.id
        ).first()
        if taken:
            return jsonify({'error': 'Username already taken'}), 409

        for field, value in data.model_dump().items():
            setattr(g.profile, field, value)
        db.session.commit()

        return jsonify({
            'message': 'Profile updated successfully',
            'profile': g.profile.to_dict(include_email=True)
        }), 200

    except SchemaError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f'Update profile error: {str(e)}')
        return jsonify({'error': str(e)}), 500


@profiles_bp.route('/me/image', methods=['POST'])
@profile_required()
def update_profile_image():
    """Upload a new profile image"""
    try:
        image = validate_image(
            request.files.get('image'),
            current_app.config['MAX_IMAGE_SIZE'],
            current_app.config['ALLOWED_EXTENSIONS']
        )
        old_image = g.profile.profile_image

        g.profile.profile_image = upload_image(image, folder='profiles')
        db.session.commit()
        delete_image(old_image)

        return jsonify({
            'message': 'Profile image updated successfully',
            'profile_image': g.profile.profile_image
        }), 200

    except SchemaError as e:
        return jsonify({'error': str(e)}), 400
    except UploadError as e:
        return jsonify({'error': str(e)}), 502
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f'Profile image upload error: {str(e)}')
        return jsonify({'error': str(e)}), 500
