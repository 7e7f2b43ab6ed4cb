"""Personal schedule keeping with overlap checking."""

from schedcal.config import IdStrategy, ScheduleConfig
from schedcal.models import Calendar, Schedule
from schedcal.service import ScheduleService
from schedcal.storage import JSONScheduleStore


def create_service(config: ScheduleConfig | None = None) -> ScheduleService:
    """Build a ScheduleService backed by the configured schedule file."""
    if config is None:
        config = ScheduleConfig.from_env()
    store = JSONScheduleStore(config.schedule_file)
    return ScheduleService(store, id_strategy=config.id_strategy)


__all__ = [
    "Calendar",
    "IdStrategy",
    "JSONScheduleStore",
    "Schedule",
    "ScheduleConfig",
    "ScheduleService",
    "create_service",
]
