"""
Shared helpers: booking calendar, totals, formatting, validation
"""
