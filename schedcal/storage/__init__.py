"""Storage layer for schedule files."""

from schedcal.storage.base import ScheduleStore
from schedcal.storage.schedule_store import InMemoryScheduleStore, JSONScheduleStore

__all__ = [
    "ScheduleStore",
    "JSONScheduleStore",
    "InMemoryScheduleStore",
]
