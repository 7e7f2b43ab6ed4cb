"""Pydantic models for schedcal."""

from schedcal.models.calendar import Calendar
from schedcal.models.schedule import Schedule

__all__ = [
    "Calendar",
    "Schedule",
]
