"""Calendar model: the ordered collection of schedules."""

from pydantic import BaseModel, Field

from schedcal.config import IdStrategy
from schedcal.models.schedule import Schedule


class Calendar(BaseModel):
    """Ordered collection of schedules, kept in insertion order."""

    schedules: list[Schedule] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.schedules)

    def next_id(self, strategy: IdStrategy = IdStrategy.MONOTONIC) -> int:
        """Id for the next schedule added to this calendar.

        Args:
            strategy: MONOTONIC uses max(id) + 1, LENGTH uses the entry count

        Returns:
            The id to assign
        """
        if strategy == IdStrategy.LENGTH:
            return len(self.schedules)
        if not self.schedules:
            return 0
        return max(s.id for s in self.schedules) + 1

    def conflicts(self, candidate: Schedule) -> list[Schedule]:
        """Existing schedules that intersect the candidate, in store order."""
        return [s for s in self.schedules if s.intersects(candidate)]

    def get(self, schedule_id: int) -> Schedule | None:
        for schedule in self.schedules:
            if schedule.id == schedule_id:
                return schedule
        return None

    def append(self, schedule: Schedule) -> None:
        self.schedules.append(schedule)

    def remove(self, schedule_id: int) -> Schedule | None:
        """Remove the first schedule with the given id.

        Remaining schedules keep their relative order. The calendar is left
        untouched when no schedule matches.

        Returns:
            The removed schedule, or None if no schedule has that id
        """
        for index, schedule in enumerate(self.schedules):
            if schedule.id == schedule_id:
                return self.schedules.pop(index)
        return None

    def to_json(self) -> str:
        """Serialize to the schedule file format."""
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, text: str) -> "Calendar":
        """Parse the schedule file format."""
        return cls.model_validate_json(text)
