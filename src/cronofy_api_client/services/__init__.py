"""Cronofy API services."""

from . import calendar

__all__ = [
    "calendar",
]
