"""Configuration for schedcal."""

import os
from enum import Enum
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field


class IdStrategy(str, Enum):
    """How new schedule ids are assigned."""

    # max(existing id) + 1; never reuses an id
    MONOTONIC = "monotonic"
    # number of existing entries; can collide after a delete
    LENGTH = "length"


class ScheduleConfig(BaseModel):
    """Schedule configuration with Pydantic validation."""

    # Storage
    schedule_file: Path = Field(default=Path("schedule.json"))

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="schedcal.log")

    # Behaviour
    id_strategy: IdStrategy = Field(default=IdStrategy.MONOTONIC)

    @classmethod
    def from_env(cls) -> "ScheduleConfig":
        """Load configuration from environment variables and .env file."""
        # .env is looked up from the working directory, next to schedule.json
        load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        if "SCHEDULE_FILE" in os.environ:
            config_dict["schedule_file"] = Path(os.environ["SCHEDULE_FILE"])

        if "SCHEDULE_LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["SCHEDULE_LOG_DIR"])
        if "SCHEDULE_LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["SCHEDULE_LOG_FILENAME"]

        if "SCHEDULE_ID_STRATEGY" in os.environ:
            try:
                config_dict["id_strategy"] = IdStrategy(
                    os.environ["SCHEDULE_ID_STRATEGY"].strip().lower()
                )
            except ValueError:
                pass  # Keep default if invalid

        return cls(**config_dict)
