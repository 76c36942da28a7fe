"""
Booking calendar availability

Turns a property's existing bookings into the set of dates a guest
cannot pick, and checks a guest's selection against that set.
"""

from collections import namedtuple
from datetime import date, datetime, timedelta


EPOCH = date(1970, 1, 1)
ONE_DAY = timedelta(days=1)

UNAVAILABLE_NOTICE = 'Some dates are already booked, please try again'

BlockedPeriod = namedtuple('BlockedPeriod', ['from_date', 'to_date'])


class DateRange(namedtuple('DateRange', ['from_date', 'to_date'])):
    """A guest's (possibly incomplete) date selection"""

    __slots__ = ()

    @property
    def is_complete(self):
        return self.from_date is not None and self.to_date is not None

    def to_dict(self):
        return {
            'from': self.from_date.isoformat() if self.from_date else None,
            'to': self.to_date.isoformat() if self.to_date else None,
        }


DEFAULT_SELECTED = DateRange(None, None)


def to_date(value):
    """Normalize a date, datetime or ISO string to a date"""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value[:10], '%Y-%m-%d').date()


def _booking_dates(booking):
    if isinstance(booking, dict):
        return booking['check_in'], booking['check_out']
    return booking.check_in, booking.check_out


def generate_blocked_periods(bookings, today):
    """
    Build the periods to grey out in the calendar.

    The first period always covers every date before today. Each booking
    then contributes its occupied nights: check-in inclusive, check-out
    exclusive, so the check-out day stays free for the next guest.

    Args:
        bookings: iterable of objects or dicts with check_in / check_out
        today: current date

    Returns:
        List of BlockedPeriod, len(bookings) + 1 long
    """
    today = to_date(today)
    blocked = [BlockedPeriod(EPOCH, today - ONE_DAY)]

    for booking in bookings:
        check_in, check_out = _booking_dates(booking)
        blocked.append(BlockedPeriod(to_date(check_in), to_date(check_out) - ONE_DAY))

    return blocked


def generate_disabled_dates(blocked_periods):
    """
    Expand blocked periods into a {'YYYY-MM-DD': True} mapping.

    Both endpoints of a period are included. Periods whose end falls
    before their start (a zero-night booking) contribute nothing.
    """
    disabled_dates = {}

    for period in blocked_periods:
        for day in _days_between(to_date(period.from_date), to_date(period.to_date)):
            disabled_dates[day] = True

    return disabled_dates


def _days_between(start, end):
    # offsets from start, so date.max never gets stepped past
    return [(start + timedelta(days=offset)).isoformat()
            for offset in range((end - start).days + 1)]


def generate_date_range(selected):
    """
    ISO dates from the start to the end of a selection, both included.

    A selection picked end-first is expanded in calendar order.
    """
    if selected is None or not selected.is_complete:
        return []

    start, end = sorted((to_date(selected.from_date), to_date(selected.to_date)))
    return _days_between(start, end)


def selection_window_error(selected, today, horizon_days):
    """
    Check a selection lies inside the bookable calendar.

    Dates must fall between EPOCH and today + horizon_days and the
    selection may span at most horizon_days.

    Returns:
        An error message, or None when the selection is acceptable
    """
    if selected is None or not selected.is_complete:
        return None

    start, end = sorted((to_date(selected.from_date), to_date(selected.to_date)))
    today = to_date(today)
    if start < EPOCH or end > today + timedelta(days=horizon_days):
        return f'Dates must fall between {EPOCH.isoformat()} and {horizon_days} days from today'
    if (end - start).days > horizon_days:
        return f'Selection cannot span more than {horizon_days} days'
    return None


def _selected_nights(selected):
    dates = generate_date_range(selected)
    # the departure day is not slept in, unless the selection is a single day
    if len(dates) > 1:
        return dates[:-1]
    return dates


def is_range_unavailable(selected, disabled_dates, allow_same_day_turnover=True):
    """
    Check whether a selection touches any disabled date.

    With same-day turnover the departure day of the selection is not
    checked, so a stay may end on another booking's check-in day.
    """
    if allow_same_day_turnover:
        dates = _selected_nights(selected)
    else:
        dates = generate_date_range(selected)
    return any(disabled_dates.get(day) for day in dates)


def resolve_selection(selected, disabled_dates, allow_same_day_turnover=True):
    """
    Validate a selection right after it changes.

    Returns:
        (range, notice): the selection unchanged and None, or the empty
        default range and a notice for the guest when it overlaps.
    """
    if is_range_unavailable(selected, disabled_dates, allow_same_day_turnover):
        return DEFAULT_SELECTED, UNAVAILABLE_NOTICE
    return selected, None


def upcoming_disabled_dates(disabled_dates, today, horizon_days):
    """Sorted disabled dates from today up to the horizon"""
    start = to_date(today).isoformat()
    end = (to_date(today) + timedelta(days=horizon_days)).isoformat()
    return sorted(day for day in disabled_dates if start <= day <= end)
