"""Schedule operations over an injected store."""

import logging
from datetime import datetime

from pydantic import ValidationError as PydanticValidationError

from schedcal.config import IdStrategy
from schedcal.exceptions import (
    InvalidIntervalError,
    ScheduleNotFoundError,
    ScheduleOverlapError,
)
from schedcal.models.calendar import Calendar
from schedcal.models.schedule import Schedule
from schedcal.storage.base import ScheduleStore

logger = logging.getLogger(__name__)


class ScheduleService:
    """List, add and delete schedules.

    Every operation loads the whole calendar from the store. Mutating
    operations save it back only when they succeed.
    """

    def __init__(
        self, store: ScheduleStore, id_strategy: IdStrategy = IdStrategy.MONOTONIC
    ):
        """
        Initialize service.

        Args:
            store: ScheduleStore instance (dependency injection)
            id_strategy: How ids for new schedules are assigned
        """
        self.store = store
        self.id_strategy = id_strategy

    def list_schedules(self) -> list[Schedule]:
        """All schedules in store order."""
        return list(self.store.load().schedules)

    def add_schedule(self, subject: str, start: datetime, end: datetime) -> Schedule:
        """Add a schedule unless it overlaps an existing one.

        Args:
            subject: Schedule subject
            start: Naive start timestamp
            end: Naive end timestamp

        Returns:
            The stored schedule with its assigned id

        Raises:
            InvalidIntervalError: If start is not before end or a timestamp is tz-aware
            ScheduleOverlapError: If the schedule intersects an existing one
        """
        calendar = self.store.load()
        new_id = calendar.next_id(self.id_strategy)

        try:
            candidate = Schedule(id=new_id, subject=subject, start=start, end=end)
        except PydanticValidationError as e:
            errors = "; ".join(err["msg"] for err in e.errors())
            raise InvalidIntervalError(f"Invalid schedule: {errors}") from e

        conflicts = calendar.conflicts(candidate)
        if conflicts:
            logger.info(
                f"Rejected '{subject}': overlaps {[s.id for s in conflicts]}"
            )
            raise ScheduleOverlapError(candidate, conflicts)

        if calendar.get(new_id) is not None:
            logger.warning(f"Assigned id {new_id} is already in use")

        calendar.append(candidate)
        self.store.save(calendar)
        logger.info(f"Added schedule {candidate.id}: {subject}")
        return candidate

    def delete_schedule(self, schedule_id: int) -> Schedule:
        """Delete the first schedule with the given id.

        Returns:
            The removed schedule

        Raises:
            ScheduleNotFoundError: If no schedule has that id
        """
        calendar = self.store.load()
        removed = calendar.remove(schedule_id)
        if removed is None:
            raise ScheduleNotFoundError(schedule_id)

        self.store.save(calendar)
        logger.info(f"Deleted schedule {schedule_id}: {removed.subject}")
        return removed

    def initialize(self) -> Calendar:
        """Create an empty schedule store."""
        return self.store.initialize()
