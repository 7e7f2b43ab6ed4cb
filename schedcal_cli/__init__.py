"""CLI package for schedcal."""

import logging
import sys

from schedcal.config import ScheduleConfig

FILE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def _console_level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def _open_log_file(config: ScheduleConfig) -> logging.Handler:
    """File handler under the configured log directory.

    Raises:
        OSError: If the directory or file cannot be created
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(config.log_dir / config.log_filename)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    handler.setLevel(logging.DEBUG)
    return handler


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: ScheduleConfig | None = None
) -> None:
    """Log to stderr and, when possible, to a file in the log directory.

    A log directory that cannot be created only costs the file log; the
    console handler is always installed.

    Args:
        verbose: If True, show INFO on the console
        quiet: If True, show only ERROR on the console
        config: Optional ScheduleConfig for log directory/filename settings
    """
    if config is None:
        config = ScheduleConfig.from_env()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    console_handler.setLevel(_console_level(verbose, quiet))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    try:
        root_logger.addHandler(_open_log_file(config))
    except OSError as e:
        logging.getLogger(__name__).warning(
            f"File logging disabled, cannot write to {config.log_dir}: {e}"
        )


def main() -> None:
    """Main entry point for the CLI."""
    from schedcal_cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
