"""
Rental Routes
A profile's own properties and the bookings made on them
"""

from flask import Blueprint, current_app, g, jsonify, request
from sqlalchemy import func
from extensions import db
from homeaway.models.booking import Booking
from homeaway.models.property import Property
from homeaway.services.s3_service import UploadError, delete_image, upload_image
from homeaway.utils.decorators import profile_required
from homeaway.utils.schemas import PropertySchema, SchemaError, validate_image, validate_with_schema

rentals_bp = Blueprint('rentals', __name__)


def _owned_property(property_id):
    return Property.query.filter_by(id=property_id, profile_id=g.profile.id).first()


@rentals_bp.route('/', methods=['GET'])
@profile_required()
def get_rentals():
    """Owner's properties with nights and revenue from paid bookings"""
    rows = db.session.query(
        Property.id,
        Property.name,
        Property.price,
        func.sum(Booking.total_nights),
        func.sum(Booking.order_total),
    ).outerjoin(
        Booking,
        (Booking.property_id == Property.id) & Booking.payment_status.is_(True)
    ).filter(
        Property.profile_id == g.profile.id
    ).group_by(Property.id).order_by(Property.id).all()

    rentals = [
        {
            'id': rental_id,
            'name': name,
            'price': price,
            'total_nights_sum': nights,
            'order_total_sum': total,
        }
        for rental_id, name, price, nights, total in rows
    ]
    return jsonify({'rentals': rentals}), 200


@rentals_bp.route('/<int:property_id>', methods=['GET'])
@profile_required()
def get_rental(property_id):
    rental = _owned_property(property_id)
    if not rental:
        return jsonify({'error': 'Rental not found'}), 404
    return jsonify({'rental': rental.to_dict()}), 200


@rentals_bp.route('/<int:property_id>', methods=['PUT'])
@profile_required()
def update_rental(property_id):
    """Update listing fields (owner only)"""
    try:
        rental = _owned_property(property_id)
        if not rental:
            return jsonify({'error': 'Rental not found'}), 404

        data = validate_with_schema(PropertySchema, request.get_json(silent=True) or request.form.to_dict())
        for field, value in data.model_dump().items():
            setattr(rental, field, value)
        db.session.commit()

        return jsonify({
            'message': 'Rental updated',
            'rental': rental.to_dict()
        }), 200

    except SchemaError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f'Update rental error: {str(e)}')
        return jsonify({'error': str(e)}), 500


@rentals_bp.route('/<int:property_id>/image', methods=['POST'])
@profile_required()
def update_rental_image(property_id):
    """Replace the listing image (owner only)"""
    try:
        rental = _owned_property(property_id)
        if not rental:
            return jsonify({'error': 'Rental not found'}), 404

        image = validate_image(
            request.files.get('image'),
            current_app.config['MAX_IMAGE_SIZE'],
            current_app.config['ALLOWED_EXTENSIONS']
        )
        old_image = rental.image

        rental.image = upload_image(image, folder='properties')
        db.session.commit()
        delete_image(old_image)

        return jsonify({
            'message': 'Image updated',
            'image': rental.image
        }), 200

    except SchemaError as e:
        return jsonify({'error': str(e)}), 400
    except UploadError as e:
        return jsonify({'error': str(e)}), 502
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f'Rental image upload error: {str(e)}')
        return jsonify({'error': str(e)}), 500


@rentals_bp.route('/<int:property_id>', methods=['DELETE'])
@profile_required()
def delete_rental(property_id):
    """Delete a listing with its bookings, reviews and favorites"""
    try:
        rental = _owned_property(property_id)
        if not rental:
            return jsonify({'error': 'Rental not found'}), 404

        image = rental.image
        db.session.delete(rental)
        db.session.commit()
        delete_image(image)

        return jsonify({'message': 'Rental deleted'}), 200

    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f'Delete rental error: {str(e)}')
        return jsonify({'error': str(e)}), 500


@rentals_bp.route('/reservations', methods=['GET'])
@profile_required()
def get_reservations():
    """Paid bookings on the owner's properties, newest first"""
    reservations = Booking.query.join(Property).filter(
        Booking.payment_status.is_(True),
        Property.profile_id == g.profile.id
    ).order_by(Booking.created_at.desc(), Booking.id.desc()).all()

    return jsonify({
        'reservations': [booking.to_dict(include_property=True) for booking in reservations]
    }), 200


@rentals_bp.route('/reservations/stats', methods=['GET'])
@profile_required()
def get_reservation_stats():
    """Number of owned properties and totals over paid bookings on them"""
    properties = Property.query.filter_by(profile_id=g.profile.id).count()

    nights, amount = db.session.query(
        func.sum(Booking.total_nights),
        func.sum(Booking.order_total)
    ).join(Property).filter(
        Booking.payment_status.is_(True),
        Property.profile_id == g.profile.id
    ).one()

    return jsonify({
        'properties': properties,
        'nights': nights or 0,
        'amount': amount or 0,
    }), 200
