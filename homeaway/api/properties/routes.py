"""
Property Routes
"""

from datetime import date
from flask import Blueprint, current_app, g, jsonify, request
from sqlalchemy import or_
from extensions import db, limiter
from homeaway.models.property import Property
from homeaway.services.s3_service import UploadError, upload_image
from homeaway.utils.calendar import (
    DateRange,
    generate_blocked_periods,
    generate_disabled_dates,
    resolve_selection,
    selection_window_error,
    to_date,
    upcoming_disabled_dates,
)
from homeaway.utils.decorators import profile_required
from homeaway.utils.schemas import PropertySchema, SchemaError, validate_image, validate_with_schema

properties_bp = Blueprint('properties', __name__)


@properties_bp.route('/', methods=['GET'])
@limiter.limit("100 per hour")
def get_properties():
    """Search properties by name or tagline, optionally within a category"""
    try:
        search = request.args.get('search', '').strip()
        category = request.args.get('category')

        query = Property.query
        if category:
            query = query.filter(Property.category == category.lower())
        if search:
            query = query.filter(or_(
                Property.name.ilike(f'%{search}%'),
                Property.tagline.ilike(f'%{search}%')
            ))

        properties = query.order_by(Property.created_at.desc(), Property.id.desc()).all()

        return jsonify({
            'properties': [prop.to_summary() for prop in properties]
        }), 200

    except Exception as e:
        current_app.logger.error(f'List properties error: {str(e)}')
        return jsonify({'error': str(e)}), 500


@properties_bp.route('/<int:property_id>', methods=['GET'])
@limiter.limit("100 per hour")
def get_property(property_id):
    """Get property details with owner and booked periods"""
    property = db.session.get(Property, property_id)

    if not property:
        return jsonify({'error': 'Property not found'}), 404

    return jsonify({
        'property': property.to_dict(include_profile=True, include_bookings=True)
    }), 200


@properties_bp.route('/<int:property_id>/calendar', methods=['GET'])
@limiter.limit("300 per hour")
def get_property_calendar(property_id):
    """
    Disabled dates for the booking calendar.

    With from/to query args the selection is validated as well; an
    overlapping selection comes back reset with a notice for the guest.
    """
    try:
        property = db.session.get(Property, property_id)

        if not property:
            return jsonify({'error': 'Property not found'}), 404

        selected = DateRange(to_date(request.args.get('from')), to_date(request.args.get('to')))
    except ValueError:
        return jsonify({'error': 'from and to must be YYYY-MM-DD dates'}), 400

    today = date.today()
    allow_turnover = current_app.config.get('ALLOW_SAME_DAY_TURNOVER', True)
    horizon_days = current_app.config.get('CALENDAR_HORIZON_DAYS', 365)

    window_error = selection_window_error(selected, today, horizon_days)
    if window_error:
        return jsonify({'error': window_error}), 400

    blocked_periods = generate_blocked_periods(property.booking_periods(), today)
    disabled_dates = generate_disabled_dates(blocked_periods)
    selection, notice = resolve_selection(selected, disabled_dates, allow_turnover)

    return jsonify({
        'property_id': property.id,
        'today': today.isoformat(),
        'blocked_periods': [
            {'from': period.from_date.isoformat(), 'to': period.to_date.isoformat()}
            for period in blocked_periods
        ],
        'disabled_dates': upcoming_disabled_dates(disabled_dates, today, horizon_days),
        'selection': selection.to_dict(),
        'notice': notice,
    }), 200


@properties_bp.route('/<int:property_id>/rating', methods=['GET'])
def get_property_rating(property_id):
    """Average rating and review count"""
    property = db.session.get(Property, property_id)

    if not property:
        return jsonify({'error': 'Property not found'}), 404

    return jsonify(property.rating()), 200


@properties_bp.route('/', methods=['POST'])
@profile_required()
@limiter.limit("10 per day")
def create_property():
    """Create a new property listing (multipart form with an image)"""
    try:
        data = validate_with_schema(PropertySchema, request.form.to_dict())
        image = validate_image(
            request.files.get('image'),
            current_app.config['MAX_IMAGE_SIZE'],
            current_app.config['ALLOWED_EXTENSIONS']
        )

        property = Property(
            profile_id=g.profile.id,
            image=upload_image(image, folder='properties'),
            **data.model_dump()
        )

        db.session.add(property)
        db.session.commit()

        current_app.logger.info(f'Property {property.id} created by profile {g.profile.id}')

        return jsonify({
            'message': 'Property created successfully',
            'property': property.to_dict()
        }), 201

    except SchemaError as e:
        return jsonify({'error': str(e)}), 400
    except UploadError as e:
        return jsonify({'error': str(e)}), 502
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f'Create property error: {str(e)}')
        return jsonify({'error': str(e)}), 500
