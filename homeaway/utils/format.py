"""
Display formatting helpers
"""

from decimal import Decimal, ROUND_HALF_UP


def format_currency(amount):
    """Format an amount as whole US dollars, e.g. $1,234"""
    value = Decimal(str(amount or 0)).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    sign = '-' if value < 0 else ''
    return f'{sign}${abs(value):,}'


def format_quantity(quantity, noun):
    return f'{quantity} {noun}' if quantity == 1 else f'{quantity} {noun}s'


def format_date(value, month_only=False):
    """June 10, 2024 or, with month_only, June 2024"""
    if month_only:
        return f'{value:%B} {value.year}'
    return f'{value:%B} {value.day}, {value.year}'
