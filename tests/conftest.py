from datetime import datetime

import pytest

from schedcal.models.calendar import Calendar
from schedcal.models.schedule import Schedule


@pytest.fixture
def evening_calendar():
    """Calendar with a single 19:00-20:09 schedule."""
    return Calendar(
        schedules=[
            Schedule(
                id=0,
                subject="Dinner",
                start=datetime(2024, 1, 1, 19, 0),
                end=datetime(2024, 1, 1, 20, 9),
            )
        ]
    )


@pytest.fixture
def three_schedules():
    """Calendar with three non-overlapping schedules."""
    return Calendar(
        schedules=[
            Schedule(
                id=0,
                subject="Standup",
                start=datetime(2024, 1, 1, 9, 0),
                end=datetime(2024, 1, 1, 9, 15),
            ),
            Schedule(
                id=1,
                subject="Lunch",
                start=datetime(2024, 1, 1, 12, 0),
                end=datetime(2024, 1, 1, 13, 0),
            ),
            Schedule(
                id=2,
                subject="Gym",
                start=datetime(2024, 1, 1, 18, 0),
                end=datetime(2024, 1, 1, 19, 0),
            ),
        ]
    )
