"""Booking calendar layout engine for short-term-rental property dashboards."""

__version__ = '0.1.0'
