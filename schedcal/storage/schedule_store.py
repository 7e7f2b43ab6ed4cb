"""Schedule stores: the JSON file store and an in-memory double."""

import logging
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from schedcal.exceptions import (
    StoreExistsError,
    StoreIOError,
    StoreParseError,
    StoreSerializationError,
)
from schedcal.models.calendar import Calendar

logger = logging.getLogger(__name__)


class JSONScheduleStore:
    """Calendar stored as a single JSON file.

    The file is read fully on load and rewritten fully on save. There is no
    locking: two processes saving at once can lose an update.
    """

    def __init__(self, path: Path):
        """
        Initialize store.

        Args:
            path: Location of the schedule file
        """
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Calendar:
        """Read and parse the schedule file.

        Raises:
            StoreIOError: If the file cannot be read
            StoreParseError: If the content is not a valid calendar
        """
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError as e:
            raise StoreIOError(
                f"Schedule file {self.path} not found. "
                f"Run 'schedcal init' to create it."
            ) from e
        except OSError as e:
            raise StoreIOError(f"Failed to read schedule file {self.path}: {e}") from e

        try:
            calendar = Calendar.from_json(raw.decode("utf-8"))
        except (UnicodeDecodeError, PydanticValidationError) as e:
            raise StoreParseError(
                f"Failed to parse schedule file {self.path}: {e}"
            ) from e

        logger.debug(f"Loaded {len(calendar)} schedule(s) from {self.path}")
        return calendar

    def save(self, calendar: Calendar) -> None:
        """Serialize the calendar and overwrite the schedule file.

        Raises:
            StoreSerializationError: If the calendar cannot be serialized
            StoreIOError: If the file cannot be written
        """
        try:
            content = calendar.to_json()
        except PydanticSerializationError as e:
            raise StoreSerializationError(f"Failed to serialize calendar: {e}") from e

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content + "\n", encoding="utf-8")
        except OSError as e:
            raise StoreIOError(
                f"Failed to write schedule file {self.path}: {e}"
            ) from e

        logger.debug(f"Saved {len(calendar)} schedule(s) to {self.path}")

    def initialize(self) -> Calendar:
        """Write an empty calendar to a new schedule file.

        Raises:
            StoreExistsError: If the schedule file already exists
        """
        if self.path.exists():
            raise StoreExistsError(f"Schedule file {self.path} already exists")
        calendar = Calendar()
        self.save(calendar)
        logger.info(f"Created schedule file {self.path}")
        return calendar


class InMemoryScheduleStore:
    """Store that keeps the calendar in memory.

    Loads and saves go through copies, so callers never share the stored
    object.
    """

    def __init__(self, calendar: Calendar | None = None):
        self._calendar = (
            calendar.model_copy(deep=True) if calendar is not None else None
        )
        self.save_count = 0

    def exists(self) -> bool:
        return self._calendar is not None

    def load(self) -> Calendar:
        if self._calendar is None:
            raise StoreIOError("In-memory store has not been initialized")
        return self._calendar.model_copy(deep=True)

    def save(self, calendar: Calendar) -> None:
        self._calendar = calendar.model_copy(deep=True)
        self.save_count += 1

    def initialize(self) -> Calendar:
        if self._calendar is not None:
            raise StoreExistsError("In-memory store already initialized")
        calendar = Calendar()
        self.save(calendar)
        return calendar
