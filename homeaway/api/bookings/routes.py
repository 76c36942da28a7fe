"""
Bookings Blueprint
"""

from datetime import date
from flask import Blueprint, current_app, g, jsonify, request
from extensions import db
from homeaway.models.booking import Booking
from homeaway.models.property import Property
from homeaway.utils.calendar import (
    UNAVAILABLE_NOTICE,
    DateRange,
    generate_blocked_periods,
    generate_disabled_dates,
    is_range_unavailable,
    selection_window_error,
    to_date,
)
from homeaway.utils.decorators import profile_required
from homeaway.utils.totals import InvalidRange, calculate_totals

bookings_bp = Blueprint('bookings', __name__)


@bookings_bp.route('/', methods=['POST'])
@profile_required()
def create_booking():
    """
    Create an unpaid booking for the caller.

    Earlier unpaid bookings of the caller are discarded. The property row
    is locked while the selection is checked against its paid bookings so
    two guests cannot both commit the same nights.
    """
    data = request.get_json(silent=True) or {}

    required_fields = ['property_id', 'check_in', 'check_out']
    for field in required_fields:
        if not data.get(field):
            return jsonify({'error': f'{field} is required'}), 400

    try:
        property_id = int(data['property_id'])
        check_in = to_date(data['check_in'])
        check_out = to_date(data['check_out'])
    except (TypeError, ValueError):
        return jsonify({'error': 'property_id must be an integer and dates YYYY-MM-DD'}), 400

    window_error = selection_window_error(
        DateRange(check_in, check_out),
        date.today(),
        current_app.config.get('CALENDAR_HORIZON_DAYS', 365)
    )
    if window_error:
        return jsonify({'error': window_error}), 400

    try:
        Booking.query.filter_by(profile_id=g.profile.id, payment_status=False) \
            .delete(synchronize_session=False)

        property = db.session.get(Property, property_id, with_for_update=True)
        if not property:
            db.session.rollback()
            return jsonify({'error': 'Property not found'}), 404

        totals = calculate_totals(property.price, check_in, check_out)

        disabled_dates = generate_disabled_dates(
            generate_blocked_periods(property.booking_periods(), date.today())
        )
        if is_range_unavailable(
            DateRange(check_in, check_out),
            disabled_dates,
            current_app.config.get('ALLOW_SAME_DAY_TURNOVER', True)
        ):
            db.session.rollback()
            return jsonify({'error': UNAVAILABLE_NOTICE}), 409

        booking = Booking(
            property_id=property.id,
            profile_id=g.profile.id,
            check_in=check_in,
            check_out=check_out,
            **totals
        )

        db.session.add(booking)
        db.session.commit()

        current_app.logger.info(
            f'Booking {booking.id} created for property {property.id} '
            f'({check_in.isoformat()} to {check_out.isoformat()})'
        )

        return jsonify({
            'message': 'Booking created successfully',
            'booking': booking.to_dict(include_property=True),
            'checkout_url': f'/checkout?booking_id={booking.id}'
        }), 201

    except InvalidRange as e:
        db.session.rollback()
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f'Create booking error: {str(e)}')
        return jsonify({'error': str(e)}), 500


@bookings_bp.route('/', methods=['GET'])
@profile_required()
def get_my_bookings():
    """Get the caller's paid bookings"""
    bookings = Booking.query.filter_by(profile_id=g.profile.id, payment_status=True) \
        .order_by(Booking.check_in.desc()).all()

    return jsonify({
        'bookings': [booking.to_dict(include_property=True) for booking in bookings]
    }), 200


@bookings_bp.route('/<int:booking_id>', methods=['DELETE'])
@profile_required()
def delete_booking(booking_id):
    """Delete one of the caller's bookings"""
    try:
        booking = Booking.query.filter_by(id=booking_id, profile_id=g.profile.id).first()

        if not booking:
            return jsonify({'error': 'Booking not found'}), 404

        db.session.delete(booking)
        db.session.commit()

        return jsonify({'message': 'Booking deleted'}), 200

    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f'Delete booking error: {str(e)}')
        return jsonify({'error': str(e)}), 500
