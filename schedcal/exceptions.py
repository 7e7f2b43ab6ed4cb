"""Exception hierarchy for schedule operations."""


class ScheduleError(Exception):
    """Base exception for schedule operations."""

    pass


class StoreError(ScheduleError):
    """Base exception for schedule file persistence."""

    pass


class StoreIOError(StoreError):
    """Schedule file missing, unreadable or unwritable."""

    pass


class StoreParseError(StoreError):
    """Schedule file is not valid JSON or does not match the schema."""

    pass


class StoreSerializationError(StoreError):
    """Calendar could not be serialized for saving."""

    pass


class StoreExistsError(StoreError):
    """Schedule file already exists."""

    pass


class ScheduleValidationError(ScheduleError):
    """Base exception for rejected schedule changes."""

    pass


class InvalidIntervalError(ScheduleValidationError):
    """Start is not before end, or a timestamp carries a timezone."""

    pass


class ScheduleOverlapError(ScheduleValidationError):
    """Candidate schedule intersects one or more existing schedules."""

    def __init__(self, candidate, conflicts):
        self.candidate = candidate
        self.conflicts = list(conflicts)
        ids = ", ".join(str(s.id) for s in self.conflicts)
        super().__init__(
            f"'{candidate.subject}' ({candidate.start} - {candidate.end}) "
            f"overlaps existing schedule(s): {ids}"
        )


class ScheduleNotFoundError(ScheduleValidationError):
    """No schedule with the given id."""

    def __init__(self, schedule_id: int):
        self.schedule_id = schedule_id
        super().__init__(f"Schedule {schedule_id} not found")
