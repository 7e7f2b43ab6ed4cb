"""Shared CLI context with lazy-initialized dependencies."""

import click

from schedcal.config import ScheduleConfig
from schedcal.service import ScheduleService
from schedcal.storage.schedule_store import JSONScheduleStore


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        schedules = ctx.service.list_schedules()
    """

    def __init__(
        self,
        config: ScheduleConfig | None = None,
        verbose: bool = False,
        quiet: bool = False,
    ):
        """Initialize CLI context.

        Args:
            config: Configuration to use instead of loading from the environment
            verbose: If True, enable info logging
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config = config
        self._store: JSONScheduleStore | None = None
        self._service: ScheduleService | None = None

    @property
    def config(self) -> ScheduleConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = ScheduleConfig.from_env()
        return self._config

    @property
    def store(self) -> JSONScheduleStore:
        """Get schedule store (lazy-loaded)."""
        if self._store is None:
            self._store = JSONScheduleStore(self.config.schedule_file)
        return self._store

    @property
    def service(self) -> ScheduleService:
        """Get schedule service (lazy-loaded)."""
        if self._service is None:
            self._service = ScheduleService(
                self.store, id_strategy=self.config.id_strategy
            )
        return self._service


def get_context() -> CLIContext:
    """CLIContext attached to the running command by the app callback.

    Raises:
        RuntimeError: If called outside a command, or before the callback ran
    """
    click_ctx = click.get_current_context(silent=True)
    schedule_ctx = click_ctx.find_object(CLIContext) if click_ctx else None
    if schedule_ctx is None:
        raise RuntimeError("No schedcal command is running")
    return schedule_ctx
