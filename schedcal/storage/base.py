"""Base protocol for schedule stores."""

from typing import Protocol

from schedcal.models.calendar import Calendar


class ScheduleStore(Protocol):
    """Protocol for loading and saving the whole calendar."""

    def load(self) -> Calendar:
        """Load the full calendar."""
        ...

    def save(self, calendar: Calendar) -> None:
        """Persist the full calendar, replacing what was stored."""
        ...

    def exists(self) -> bool:
        """True if the backing storage has been initialized."""
        ...

    def initialize(self) -> Calendar:
        """Create empty storage. Fails if it already exists."""
        ...
