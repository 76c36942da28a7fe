"""
Booking totals
"""

from homeaway.utils.calendar import to_date


class InvalidRange(ValueError):
    """Raised when check-out does not fall after check-in"""


def calculate_totals(price, check_in, check_out):
    """
    Compute nights and order total for a stay.

    Client-submitted dates reach this function from the booking route, so
    the range is checked here rather than trusted.

    Returns:
        dict with total_nights and order_total
    """
    check_in = to_date(check_in)
    check_out = to_date(check_out)

    if check_in is None or check_out is None:
        raise InvalidRange('check_in and check_out are required')
    if check_out <= check_in:
        raise InvalidRange(
            f'check_out ({check_out.isoformat()}) must be after check_in ({check_in.isoformat()})'
        )
    if price is None or price < 0:
        raise ValueError('price must be a non-negative number')

    total_nights = (check_out - check_in).days

    return {
        'total_nights': total_nights,
        'order_total': price * total_nights,
    }
