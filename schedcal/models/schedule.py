"""Schedule model with Pydantic v2 validation."""

from datetime import datetime, timedelta

from pydantic import BaseModel, Field, field_validator, model_validator


class Schedule(BaseModel):
    """A single calendar entry occupying the half-open interval [start, end)."""

    id: int = Field(ge=0, strict=True)
    subject: str
    start: datetime
    end: datetime

    @field_validator("start", "end", mode="before")
    @classmethod
    def require_date_and_time(cls, v):
        """Reject bare dates and numeric timestamps."""
        if isinstance(v, (int, float)):
            raise ValueError(f"Timestamp must be an ISO date and time, got {v!r}")
        if isinstance(v, str) and "T" not in v and " " not in v.strip():
            raise ValueError(f"Timestamp is missing a time of day: {v!r}")
        return v

    @field_validator("start", "end")
    @classmethod
    def require_naive(cls, v: datetime) -> datetime:
        """Reject timestamps that carry a timezone."""
        if v.tzinfo is not None:
            raise ValueError(f"Timestamp must not carry a timezone: {v.isoformat()}")
        return v

    @model_validator(mode="after")
    def validate_interval(self):
        """Validate that start is before end."""
        if self.start >= self.end:
            raise ValueError(
                f"start ({self.start}) must be before end ({self.end})"
            )
        return self

    def intersects(self, other: "Schedule") -> bool:
        """True if the two intervals overlap.

        Touching intervals, where one ends exactly when the other starts,
        do not intersect.
        """
        return self.start < other.end and other.start < self.end

    @property
    def duration(self) -> timedelta:
        return self.end - self.start
