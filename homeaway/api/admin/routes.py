"""
Admin Routes
"""

from calendar import monthrange
from datetime import datetime
from flask import Blueprint, current_app, jsonify
from homeaway.models.booking import Booking
from homeaway.models.profile import Profile
from homeaway.models.property import Property
from homeaway.utils.decorators import admin_required
from homeaway.utils.format import format_date

admin_bp = Blueprint('admin', __name__)

CHART_MONTHS = 6


def months_ago(moment, months):
    """Same day `months` earlier, clamped to the end of shorter months"""
    month_index = moment.year * 12 + moment.month - 1 - months
    year, month = divmod(month_index, 12)
    day = min(moment.day, monthrange(year, month + 1)[1])
    return moment.replace(year=year, month=month + 1, day=day)


@admin_bp.route('/stats', methods=['GET'])
@admin_required()
def admin_stats():
    """Get admin dashboard statistics"""
    try:
        return jsonify({
            'users_count': Profile.query.count(),
            'properties_count': Property.query.count(),
            'bookings_count': Booking.query.filter_by(payment_status=True).count(),
        }), 200

    except Exception as e:
        current_app.logger.error(f'Admin stats error: {str(e)}')
        return jsonify({'error': str(e)}), 500


@admin_bp.route('/charts', methods=['GET'])
@admin_required()
def admin_charts():
    """Paid bookings per month over the last six months"""
    try:
        since = months_ago(datetime.utcnow(), CHART_MONTHS)

        bookings = Booking.query.filter(
            Booking.payment_status.is_(True),
            Booking.created_at >= since
        ).order_by(Booking.created_at.asc()).all()

        bookings_per_month = []
        for booking in bookings:
            label = format_date(booking.created_at, month_only=True)
            if bookings_per_month and bookings_per_month[-1]['date'] == label:
                bookings_per_month[-1]['count'] += 1
            else:
                bookings_per_month.append({'date': label, 'count': 1})

        return jsonify({'bookings_per_month': bookings_per_month}), 200

    except Exception as e:
        current_app.logger.error(f'Admin charts error: {str(e)}')
        return jsonify({'error': str(e)}), 500
